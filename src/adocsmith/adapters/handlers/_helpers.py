"""Internal helpers shared across handler modules."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, cast

from bs4.element import Comment, NavigableString, Tag

from ..asciidoc.utils import collapse_blank_lines


def coerce_attribute(value: Any) -> str | None:
    """Normalise a BeautifulSoup attribute value to a string when possible."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(value, Iterable):
        items = [item for item in value if isinstance(item, str)]
        return " ".join(items) if items else None
    return None


def gather_classes(value: Any) -> list[str]:
    """Return a list of classes extracted from a BeautifulSoup attribute."""
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        return [cast(str, item) for item in value if isinstance(item, str)]
    return []


def iter_attributes(element: Tag) -> Iterator[tuple[str, str]]:
    """Yield lower-cased attribute names with their string values."""
    for name, value in element.attrs.items():
        yield str(name).lower(), coerce_attribute(value) or ""


def is_empty(element: Tag) -> bool:
    """Return True when the element has no child elements and no visible text."""
    for child in element.children:
        if isinstance(child, Tag):
            return False
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString) and child.strip():
            return False
    return True


def parse_style(value: str) -> list[tuple[str, str]]:
    """Parse a minimal ``property: value; ...`` declaration list."""
    declarations: list[tuple[str, str]] = []
    for chunk in value.split(";"):
        prop, sep, raw = chunk.partition(":")
        if not sep:
            continue
        declarations.append((prop.strip().lower(), raw.strip().lower()))
    return declarations


def wrap_inline(text: str, wrap: Callable[[str], str]) -> str:
    """Wrap inline content that must not span blank lines.

    Surrounding whitespace stays outside the delimiters so constrained
    AsciiDoc markup still applies.
    """
    body = collapse_blank_lines(text)
    stripped = body.strip()
    if not stripped:
        return body
    start = body.index(stripped)
    return body[:start] + wrap(stripped) + body[start + len(stripped):]
