from adocsmith.adapters.asciidoc import AsciiDocConverter


def test_hyperlink_with_text(render_raw) -> None:
    assert render_raw('<a href="#sec1">See</a>') == "link:#sec1[See]"


def test_empty_hyperlink_uses_title(render_raw) -> None:
    html = '<a href="https://example.com" title="Example"></a>'
    assert render_raw(html) == "link:https://example.com[Example]"


def test_empty_hyperlink_without_title(render_raw) -> None:
    assert render_raw('<a href="https://example.com"></a>') == "link:https://example.com[]"


def test_anchor_definition(render_raw, emitter) -> None:
    assert render_raw('<a id="sec1" name="sec1"/>') == "[[sec1]]"
    assert emitter.warnings == []


def test_anchor_name_mismatch_warns_but_proceeds(render_raw, emitter) -> None:
    assert render_raw('<a id="sec1" name="other"></a>') == "[[sec1]]"
    assert emitter.messages == ["Anchor name 'other' does not match id 'sec1'"]


def test_anchor_without_id_is_dropped(render_raw, emitter) -> None:
    assert render_raw('<a name="sec1"></a>') == ""
    assert emitter.messages == ["Anchor without an 'id' skipped"]


def test_anchor_with_content_warns(render_raw, emitter) -> None:
    assert render_raw('<a id="x" name="x">text</a>') == "[[x]]"
    assert emitter.messages == ["Anchor without href has content; content dropped"]


def test_cross_reference_rewrites_extension(render_raw) -> None:
    html = '<MadCap:xref href="Topics/Setup.htm#install">Install</MadCap:xref>'
    assert render_raw(html) == "xref:Topics/Setup.adoc#install[Install]"


def test_cross_reference_without_fragment(render_raw) -> None:
    html = '<MadCap:xref href="Overview.html">Overview</MadCap:xref>'
    assert render_raw(html) == "xref:Overview.adoc[Overview]"


def test_cross_reference_strips_page_number_and_quotes(render_raw) -> None:
    html = '<MadCap:xref href="a.htm#intro">"Introduction" on page 4</MadCap:xref>'
    assert render_raw(html) == "xref:a.adoc#intro[Introduction]"


def test_cross_reference_default_title(render_raw) -> None:
    html = '<MadCap:xref href="a.htm#intro"></MadCap:xref>'
    assert render_raw(html) == "xref:a.adoc#intro[see intro]"


def test_cross_reference_without_fragment_or_title(render_raw) -> None:
    assert render_raw('<MadCap:xref href="a.htm"></MadCap:xref>') == "xref:a.adoc[]"


def test_cross_reference_without_href_warns(render_raw, emitter) -> None:
    assert render_raw("<MadCap:xref>Orphan</MadCap:xref>") == ""
    assert emitter.messages == ["Cross-reference without href skipped"]


def test_link_inside_paragraph(converter: AsciiDocConverter) -> None:
    html = '<p>Read <a href="guide.htm">the guide</a> first.</p>'
    assert converter.convert(html) == "Read link:guide.htm[the guide] first.\n"
