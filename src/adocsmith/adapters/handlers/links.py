"""Handlers for hyperlinks, anchors, cross-references and snippets."""

from __future__ import annotations

import re

from bs4.element import Tag

from adocsmith.adapters.asciidoc.utils import collapse_blank_lines, flatten_lines
from adocsmith.core.context import ConversionContext
from adocsmith.core.rules import renders
from adocsmith.core.snippets import snippet_name

from ._helpers import coerce_attribute, is_empty


_PAGE_NUMBER = re.compile(r"\s*\bon page(?:\s+\d+)?\s*$", re.IGNORECASE)
_QUOTES = "\"'\N{LEFT DOUBLE QUOTATION MARK}\N{RIGHT DOUBLE QUOTATION MARK}"


def _source_suffix_pattern(suffixes: list[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(suffix) for suffix in sorted(suffixes, key=len, reverse=True))
    return re.compile(rf"(?:{alternatives})(?=#|$)", re.IGNORECASE)


def _replace_suffix(path: str, suffix: str, replacement: str) -> str:
    return re.sub(rf"{re.escape(suffix)}$", replacement, path, flags=re.IGNORECASE)


@renders("a", name="links")
def render_link(element: Tag, context: ConversionContext) -> str:
    """Render hyperlinks and anchor definitions."""
    formatter = context.formatter
    href = coerce_attribute(element.get("href"))
    if href is not None:
        if is_empty(element):
            text = coerce_attribute(element.get("title")) or ""
        else:
            text = collapse_blank_lines(context.convert_children(element)).strip()
        return formatter.link(href, text)

    if not is_empty(element):
        context.warn("Anchor without href has content; content dropped")
    name = coerce_attribute(element.get("name"))
    identifier = coerce_attribute(element.get("id"))
    if name is None:
        context.warn("Anchor is missing a 'name' attribute")
    elif identifier is not None and name != identifier:
        context.warn(f"Anchor name '{name}' does not match id '{identifier}'")
    if identifier is None:
        context.warn("Anchor without an 'id' skipped")
        return ""
    return formatter.anchor(identifier)


@renders("madcap:xref", name="cross_references")
def render_cross_reference(element: Tag, context: ConversionContext) -> str:
    """Render a cross-reference to another converted document."""
    href = coerce_attribute(element.get("href"))
    if not href:
        context.warn("Cross-reference without href skipped")
        return ""

    pattern = _source_suffix_pattern(context.config.source_suffixes)
    target = pattern.sub(context.config.output_suffix, href)

    title = _PAGE_NUMBER.sub("", flatten_lines(context.convert_children(element))).strip()
    if title and title[0] in _QUOTES:
        title = title[1:]
    if title and title[-1] in _QUOTES:
        title = title[:-1]
    title = title.strip()
    if not title:
        _, separator, anchor = href.partition("#")
        if separator and anchor:
            title = f"see {anchor}"
    return context.formatter.xref(target, title)


@renders("madcap:snippettext", name="inline_snippets")
def render_inline_snippet(element: Tag, context: ConversionContext) -> str:
    """Reference a snippet through the attribute registered for it."""
    if not is_empty(element):
        context.warn("Snippet reference has content; content dropped")
    src = coerce_attribute(element.get("src"))
    if not src:
        context.warn("Snippet reference without src skipped")
        return ""
    _, well_formed = snippet_name(src, context.config.snippet_suffix)
    if not well_formed:
        context.warn(f"Unexpected snippet path '{src}'")
    name = context.snippets.register(src, origin=context.document_path)
    return context.formatter.attribute_reference(name)


@renders("madcap:snippetblock", name="block_snippets")
def render_block_snippet(element: Tag, context: ConversionContext) -> str:
    """Include the converted snippet document."""
    if not is_empty(element):
        context.warn("Snippet block has content; content dropped")
    src = coerce_attribute(element.get("src"))
    if not src:
        context.warn("Snippet block without src skipped")
        return ""
    config = context.config
    return context.formatter.include(_replace_suffix(src, config.snippet_suffix, config.output_suffix))
