"""Block-level handlers for lists, tables and figures."""

from __future__ import annotations

from bs4.element import Tag

from adocsmith.adapters.asciidoc.formatter import ORDERED_MARKER, UNORDERED_MARKER
from adocsmith.adapters.asciidoc.utils import flatten_lines
from adocsmith.core.context import ConversionContext
from adocsmith.core.rules import renders

from ._helpers import coerce_attribute


def _render_list(element: Tag, context: ConversionContext, marker: str) -> str:
    with context.list_scope(marker):
        body = context.convert_children(element, skip_blank_text=True)
    return f"\n{body}\n"


@renders("ol", name="ordered_lists")
def render_ordered_list(element: Tag, context: ConversionContext) -> str:
    return _render_list(element, context, ORDERED_MARKER)


@renders("ul", name="unordered_lists")
def render_unordered_list(element: Tag, context: ConversionContext) -> str:
    return _render_list(element, context, UNORDERED_MARKER)


@renders("li", name="list_items")
def render_list_item(element: Tag, context: ConversionContext) -> str:
    """Render a list item, attaching multi-block content through an open block."""
    marker = context.list_marker
    if marker is None:
        context.warn("List item outside of a list rendered as a bullet")
        marker = UNORDERED_MARKER
    return context.formatter.list_item(marker, context.convert_children(element))


@renders("dl", name="description_lists")
def render_description_list(element: Tag, context: ConversionContext) -> str:
    return f"\n\n{context.convert_children(element)}\n\n"


@renders("dt", name="description_terms")
def render_description_term(element: Tag, context: ConversionContext) -> str:
    return context.formatter.term(context.convert_children(element).strip())


@renders("dd", name="description_details")
def render_description_details(element: Tag, context: ConversionContext) -> str:
    return context.formatter.description(context.convert_children(element).strip())


@renders("table", name="tables")
def render_table(element: Tag, context: ConversionContext) -> str:
    """Render a table; header cells anywhere in it enable the header option."""
    with context.table_scope() as options:
        body = context.convert_children(element)
    return context.formatter.table(body, options)


@renders("tr", name="table_rows")
def render_table_row(element: Tag, context: ConversionContext) -> str:
    return context.convert_children(element, skip_blank_text=True) + "\n"


def _span(element: Tag, attribute: str) -> int:
    value = coerce_attribute(element.get(attribute))
    try:
        return max(1, int(value)) if value else 1
    except ValueError:
        return 1


@renders("td", name="table_cells")
def render_table_cell(element: Tag, context: ConversionContext) -> str:
    return context.formatter.cell(
        context.convert_children(element),
        colspan=_span(element, "colspan"),
        rowspan=_span(element, "rowspan"),
    )


@renders("th", name="table_headers")
def render_table_header(element: Tag, context: ConversionContext) -> str:
    if context.table_options is not None:
        context.table_options["header"] = True
    return render_table_cell(element, context)


@renders("thead", "tbody", "tfoot", "colgroup", "col", name="table_groups")
def render_table_group(element: Tag, context: ConversionContext) -> str:
    # TODO: map <col style="width: ..."> onto the cols attribute.
    return context.convert_children(element)


@renders("figure", name="figures")
def render_figure(element: Tag, context: ConversionContext) -> str:
    """Render a figure, titled by its caption when one is present."""
    with context.figure_scope():
        body = context.convert_children(element)
        caption = context.figure_caption
    if not caption:
        return body
    return context.formatter.block_title(flatten_lines(caption), body.strip())


@renders("figcaption", "caption", name="captions")
def render_caption(element: Tag, context: ConversionContext) -> str:
    """Capture the caption of the enclosing figure; emits nothing in place."""
    if context.figure_caption is None:
        context.warn("Caption outside of a figure ignored")
        return ""
    if context.figure_caption_seen:
        context.warn("Duplicate figure caption ignored")
        return ""
    context.figure_caption_seen = True
    context.figure_caption = context.convert_children(element).strip()
    return ""
