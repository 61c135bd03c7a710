from adocsmith.adapters.asciidoc import AsciiDocConverter


def test_unordered_list(render_raw) -> None:
    html = "<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>"
    assert render_raw(html) == "\n* One\n* Two\n\n"


def test_ordered_list(converter: AsciiDocConverter) -> None:
    html = "<ol><li>First</li><li>Second</li></ol>"
    assert converter.convert(html) == ". First\n. Second\n"


def test_item_content_starts_on_marker_line(converter: AsciiDocConverter) -> None:
    html = "<ul><li>\n    <p>Indented</p></li></ul>"
    assert converter.convert(html) == "* Indented\n"


def test_multi_block_item_uses_open_block(converter: AsciiDocConverter) -> None:
    html = "<ol><li><p>First</p>\n<p>Second</p></li></ol>"
    assert converter.convert(html) == ". First\n+\n--\nSecond\n--\n"


def test_single_block_item_has_no_continuation(converter: AsciiDocConverter) -> None:
    output = converter.convert("<ul><li><p>Only</p></li></ul>")
    assert "+\n--" not in output
    assert output == "* Only\n"


def test_nested_list_restores_outer_marker(converter: AsciiDocConverter) -> None:
    html = "<ol><li>A<ul><li>B</li></ul></li><li>C</li></ol>"
    output = converter.convert(html)
    assert "* B" in output
    assert ". C" in output


def test_list_item_outside_list_warns(render_raw, emitter) -> None:
    assert render_raw("<li>Loose</li>") == "* Loose\n"
    assert emitter.messages == ["List item outside of a list rendered as a bullet"]


def test_description_list(render_raw) -> None:
    html = "<dl><dt>Term</dt><dd>Meaning</dd></dl>"
    assert render_raw(html) == "\n\nTerm::  Meaning\n\n"


def test_description_list_normalised(converter: AsciiDocConverter) -> None:
    html = "<dl>\n<dt>Term</dt>\n<dd>Meaning</dd>\n</dl>"
    assert converter.convert(html) == "Term::\n  Meaning\n"


def test_table_with_header(render_raw) -> None:
    html = "<table><tr><th>H</th></tr><tr><td>D</td></tr></table>"
    assert render_raw(html) == "\n[%header]\n|===\n|H\n|D\n|===\n"


def test_table_without_header(render_raw) -> None:
    html = "<table><tr><td>A</td><td>B</td></tr></table>"
    output = render_raw(html)
    assert "%header" not in output
    assert output == "\n|===\n|A|B\n|===\n"


def test_header_flag_found_in_nested_groups(converter: AsciiDocConverter) -> None:
    html = (
        "<table>\n"
        "  <thead>\n    <tr>\n      <th>Name</th>\n      <th>Value</th>\n    </tr>\n  </thead>\n"
        "  <tbody>\n    <tr>\n      <td>a</td>\n      <td>1</td>\n    </tr>\n  </tbody>\n"
        "</table>"
    )
    output = converter.convert(html)
    assert output.startswith("[%header]\n|===\n")
    assert "|Name|Value\n" in output
    assert "|a|1\n" in output
    assert output.endswith("|===\n")


def test_nested_table_options_are_scoped(render_raw) -> None:
    html = (
        "<table><tr><td>"
        "<table><tr><th>Inner</th></tr></table>"
        "</td></tr></table>"
    )
    output = render_raw(html)
    assert output.count("[%header]") == 1
    assert output.startswith("\n|===\n")


def test_cell_spans(render_raw) -> None:
    html = '<table><tr><td colspan="2" rowspan="3">Wide</td><td rowspan="x">B</td></tr></table>'
    assert "2.3+|Wide|B" in render_raw(html)


def test_cell_trailing_whitespace_trimmed(render_raw) -> None:
    html = "<table><tr><td>A\n\n  </td></tr></table>"
    assert render_raw(html) == "\n|===\n|A\n|===\n"


def test_figure_with_caption(converter: AsciiDocConverter) -> None:
    html = (
        "<figure>\n"
        '  <img src="images/chart.png" alt="Chart"/>\n'
        "  <figcaption>Quarterly\n  results</figcaption>\n"
        "</figure>"
    )
    output = converter.convert(html)
    assert output == ".Quarterly results\nimage::chart.png[Chart]\n"


def test_figure_without_caption_passes_through(converter: AsciiDocConverter) -> None:
    output = converter.convert('<figure><img src="images/chart.png"/></figure>')
    assert output == "image::chart.png[]\n"


def test_caption_outside_figure_warns(render_raw, emitter) -> None:
    assert render_raw("<figcaption>Lost</figcaption>") == ""
    assert emitter.messages == ["Caption outside of a figure ignored"]


def test_duplicate_caption_warns(converter: AsciiDocConverter, emitter) -> None:
    html = "<figure><figcaption>One</figcaption><p>Body</p><figcaption>Two</figcaption></figure>"
    output = converter.convert(html, emitter=emitter)
    assert output == ".One\nBody\n"
    assert emitter.messages == ["Duplicate figure caption ignored"]


def test_duplicate_after_empty_caption_warns(converter: AsciiDocConverter, emitter) -> None:
    html = "<figure><figcaption> </figcaption><p>Body</p><figcaption>Two</figcaption></figure>"
    output = converter.convert(html, emitter=emitter)
    assert output == "Body\n"
    assert emitter.messages == ["Duplicate figure caption ignored"]
