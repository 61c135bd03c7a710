import pytest

from adocsmith.adapters.asciidoc import AsciiDocConverter


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("<b>bold</b>", "*bold*"),
        ("<strong>bold</strong>", "*bold*"),
        ("<i>it</i>", "_it_"),
        ("<em>it</em>", "_it_"),
        ("<q>quoted</q>", "`quoted`"),
        ("<tt>mono</tt>", "`mono`"),
        ("<code>x = 1</code>", "[.code]`x = 1`"),
        ("<small>fine print</small>", "[.small]`fine print`"),
        ("<u>under</u>", "[.underline]`under`"),
        ("<sup>2</sup>", "^2^"),
        ("<sub>2</sub>", "~2~"),
    ],
)
def test_inline_styles(render_raw, html: str, expected: str) -> None:
    assert render_raw(html) == expected


def test_inline_wrapping_collapses_blank_lines(render_raw) -> None:
    assert render_raw("<b>one\n\n\ntwo</b>") == "*one\ntwo*"


def test_inline_wrapping_keeps_spaces_outside(converter: AsciiDocConverter) -> None:
    assert converter.convert("<p>Say<b> loud </b>now</p>") == "Say *loud* now\n"


def test_bare_span_passes_through(render_raw) -> None:
    assert render_raw("<span>plain</span>") == "plain"


def test_classed_span_gets_roles(render_raw) -> None:
    assert render_raw('<span class="ui menu">File</span>') == "[.ui.menu]`File`"


def test_role_does_not_fuse_with_previous_word(converter: AsciiDocConverter) -> None:
    output = converter.convert("<p>Press<code>Enter</code> now</p>")
    assert output == "Press [.code]`Enter` now\n"


def test_role_after_parenthesis_is_kept_tight(converter: AsciiDocConverter) -> None:
    output = converter.convert("<p>(<code>x</code>)</p>")
    assert output == "([.code]`x`)\n"


def test_variable_reference(render_raw) -> None:
    html = '<MadCap:variable name="General.ProductName" />'
    assert render_raw(html) == "{General-ProductName}"


def test_variable_without_name_warns(render_raw, emitter) -> None:
    assert render_raw("<MadCap:variable />") == ""
    assert emitter.messages == ["Variable without a name skipped"]


def test_equation(render_raw) -> None:
    html = "<MadCap:equation>$E = mc^2$</MadCap:equation>"
    assert render_raw(html) == "latexmath:[E = mc^2]"


def test_equation_without_delimiters(render_raw) -> None:
    assert render_raw("<MadCap:equation>x+1</MadCap:equation>") == "latexmath:[x+1]"
