"""Inline handlers for emphasis, styled spans, variables and equations."""

from __future__ import annotations

from bs4.element import Tag

from adocsmith.core.context import ConversionContext
from adocsmith.core.rules import renders

from ._helpers import coerce_attribute, gather_classes, wrap_inline


_EQUATION_DELIMITER = "$"


@renders("b", "strong", name="inline_strong")
def render_inline_strong(element: Tag, context: ConversionContext) -> str:
    return wrap_inline(context.convert_children(element), context.formatter.strong)


@renders("i", "em", name="inline_emphasis")
def render_inline_emphasis(element: Tag, context: ConversionContext) -> str:
    return wrap_inline(context.convert_children(element), context.formatter.emphasis)


@renders("q", "tt", name="inline_monospace")
def render_inline_monospace(element: Tag, context: ConversionContext) -> str:
    return wrap_inline(context.convert_children(element), context.formatter.monospace)


@renders("span", name="inline_spans")
def render_inline_span(element: Tag, context: ConversionContext) -> str:
    """Render classed spans with their roles; bare spans pass through."""
    content = context.convert_children(element)
    classes = gather_classes(element.get("class"))
    if not classes:
        return content
    formatter = context.formatter
    return formatter.roles(classes) + wrap_inline(content, formatter.monospace)


def _styled(element: Tag, context: ConversionContext, role: str) -> str:
    return wrap_inline(
        context.convert_children(element),
        lambda text: context.formatter.styled(role, text),
    )


@renders("code", name="inline_code")
def render_inline_code(element: Tag, context: ConversionContext) -> str:
    return _styled(element, context, "code")


@renders("small", name="inline_small")
def render_inline_small(element: Tag, context: ConversionContext) -> str:
    return _styled(element, context, "small")


@renders("u", name="inline_underline")
def render_inline_underline(element: Tag, context: ConversionContext) -> str:
    return _styled(element, context, "underline")


@renders("sup", name="inline_superscript")
def render_inline_superscript(element: Tag, context: ConversionContext) -> str:
    return wrap_inline(context.convert_children(element), context.formatter.superscript)


@renders("sub", name="inline_subscript")
def render_inline_subscript(element: Tag, context: ConversionContext) -> str:
    return wrap_inline(context.convert_children(element), context.formatter.subscript)


@renders("madcap:variable", name="variables")
def render_variable(element: Tag, context: ConversionContext) -> str:
    """Render a variable as an attribute reference."""
    name = coerce_attribute(element.get("name"))
    if not name:
        context.warn("Variable without a name skipped")
        return ""
    formatter = context.formatter
    return formatter.attribute_reference(formatter.attribute_name(name))


@renders("madcap:equation", name="equations")
def render_equation(element: Tag, context: ConversionContext) -> str:
    text = element.get_text().strip()
    if text.startswith(_EQUATION_DELIMITER):
        text = text[1:]
    if text.endswith(_EQUATION_DELIMITER):
        text = text[:-1]
    return context.formatter.equation(text)
