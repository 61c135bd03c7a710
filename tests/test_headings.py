import pytest

from adocsmith.adapters.asciidoc import AsciiDocConverter


@pytest.mark.parametrize(
    ("level", "marker"),
    [(1, "=="), (2, "==="), (3, "===="), (4, "====="), (5, "======"), (6, "======")],
)
def test_heading_marker_depth(converter: AsciiDocConverter, level: int, marker: str) -> None:
    output = converter.convert(f"<h{level}>Title</h{level}>")
    assert output == f"{marker} Title\n"


def test_level_six_matches_level_five(converter: AsciiDocConverter) -> None:
    assert converter.convert("<h5>T</h5>") == converter.convert("<h6>T</h6>")


def test_heading_is_single_line(converter: AsciiDocConverter) -> None:
    output = converter.convert("<h2>Release\n    notes</h2>")
    assert output == "=== Release notes\n"


def test_heading_keeps_inline_markup(converter: AsciiDocConverter) -> None:
    output = converter.convert("<h2>Intro <b>now</b></h2>")
    assert output == "=== Intro *now*\n"


def test_leading_anchor_is_hoisted(converter: AsciiDocConverter) -> None:
    html = '<h1><a name="start" id="start"></a>Getting started</h1>'
    output = converter.convert(html)
    assert output == "[[start]]\n== Getting started\n"


def test_heading_followed_by_paragraph(converter: AsciiDocConverter) -> None:
    html = "<h2>Intro</h2>\n<p>Body text.</p>"
    output = converter.convert(html)
    assert output.splitlines()[0] == "=== Intro"
    assert "Body text." in output
