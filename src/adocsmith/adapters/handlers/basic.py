"""Built-in handlers for headings, paragraphs, divisions and breaks."""

from __future__ import annotations

from collections.abc import Callable
import re

from bs4.element import Tag

from adocsmith.core.context import ConversionContext
from adocsmith.core.rules import renders

from ._helpers import gather_classes, iter_attributes, parse_style, wrap_inline


_LEADING_ANCHOR = re.compile(r"^(\[\[[^\]]*\]\])\s*")
_CONDITIONS_ATTRIBUTE = "madcap:conditions"


@renders("html", "body", name="document_containers")
def render_container(element: Tag, context: ConversionContext) -> str:
    """Pass document wrappers through."""
    return context.convert_children(element)


@renders("head", name="document_head")
def render_head(_element: Tag, _context: ConversionContext) -> str:
    """Drop document metadata."""
    return ""


@renders("h1", "h2", "h3", "h4", "h5", "h6", name="headings")
def render_heading(element: Tag, context: ConversionContext) -> str:
    """Render a single-line section title.

    An anchor opening the title is hoisted onto its own line since anchors
    embedded in titles are ignored downstream.
    """
    level = int(element.name[-1])
    text = context.convert_children(element).replace("\n", " ").strip()
    anchor = ""
    match = _LEADING_ANCHOR.match(text)
    if match:
        anchor = f"{match.group(1)}\n"
        text = text[match.end() :]
    return f"\n{anchor}{context.formatter.heading(level, text)}\n"


@renders("p", name="paragraphs")
def render_paragraph(element: Tag, context: ConversionContext) -> str:
    """Render paragraphs, admonitions and styled paragraphs."""
    formatter = context.formatter
    roles: list[str] = []
    prefix = suffix = ""
    wrappers: list[Callable[[str], str]] = []

    for name, value in iter_attributes(element):
        if name == "class":
            for class_name in gather_classes(element.get("class")):
                label = context.config.admonitions.get(class_name.lower())
                if label is not None:
                    prefix, suffix = formatter.admonition(label)
                else:
                    roles.append(class_name)
        elif name == "style":
            for prop, css_value in parse_style(value):
                if prop == "text-align":
                    roles.append(f"text-{css_value}")
                elif prop == "font-style":
                    if css_value == "italic":
                        wrappers.append(formatter.emphasis)
                    elif css_value != "normal":
                        context.warn(f"Unsupported font-style '{css_value}' on <p>")
                elif prop == "font-weight":
                    if css_value == "bold":
                        wrappers.append(formatter.strong)
                    else:
                        context.warn(f"Unsupported font-weight '{css_value}' on <p>")
                else:
                    context.warn(f"Unsupported CSS property '{prop}' on <p>")
        elif name in {"id", "xmlns"} or ":" in name:
            continue
        else:
            context.warn(f"Unsupported attribute {name}='{value}' on <p>")

    content = context.convert_children(element)
    for wrap in wrappers:
        content = wrap_inline(content, wrap)
    annotation = f"{formatter.roles(roles)}\n" if roles else ""
    return f"{annotation}{prefix}{content}{suffix}\n"


@renders("div", name="divisions")
def render_division(element: Tag, context: ConversionContext) -> str:
    """Render conditional divisions; other divisions pass through."""
    formatter = context.formatter
    guards: tuple[str, str] | None = None
    for name, value in iter_attributes(element):
        if name == _CONDITIONS_ATTRIBUTE:
            conditions = [
                formatter.attribute_name(part) for part in value.split(",") if part.strip()
            ]
            if conditions:
                guards = formatter.conditional(",".join(conditions))
        elif name == "style":
            context.warn(f"Unsupported style '{value}' on <div>")
        else:
            context.warn(f"Ignored attribute {name}='{value}' on <div>")

    content = context.convert_children(element)
    if guards is None:
        return content
    opening, closing = guards
    return f"{opening}{content}{closing}"


@renders("br", name="line_breaks")
def render_line_break(_element: Tag, context: ConversionContext) -> str:
    return context.formatter.line_break()


@renders("hr", name="thematic_breaks")
def render_thematic_break(_element: Tag, context: ConversionContext) -> str:
    return context.formatter.thematic_break()


@renders("madcap:pagebreak", name="page_breaks")
def render_page_break(_element: Tag, context: ConversionContext) -> str:
    return context.formatter.page_break()
