"""AsciiDoc markup primitives used by the conversion handlers.

Handlers never hard-code target syntax: every token they emit is produced by
:class:`AsciiDocFormatter`, which keeps the markup vocabulary in one place.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re


ORDERED_MARKER = "."
UNORDERED_MARKER = "*"
LIST_CONTINUATION = "+"
OPEN_BLOCK = "--"
EXAMPLE_BLOCK = "===="
TABLE_DELIMITER = "|==="
CELL_SEPARATOR = "|"
COMMENT_BLOCK = "////"

STRONG = "*"
EMPHASIS = "_"
MONOSPACE = "`"

_BLANK_LINES = re.compile(r"\n[ \t]*\n[\s]*")


class AsciiDocFormatter:
    """Render AsciiDoc fragments."""

    heading_levels = 5

    def heading(self, level: int, text: str) -> str:
        """Return a section title; level 1 maps below the document title."""
        marker = "=" * (min(level, self.heading_levels) + 1)
        return f"{marker} {text}"

    def anchor(self, identifier: str) -> str:
        return f"[[{identifier}]]"

    def roles(self, names: Iterable[str]) -> str:
        """Return an attribute list assigning the given roles."""
        return "[" + "".join(f".{name}" for name in names) + "]"

    def admonition(self, label: str) -> tuple[str, str]:
        """Return the prefix and suffix wrapping an admonition block."""
        return f"[{label}]\n{EXAMPLE_BLOCK}\n", f"\n{EXAMPLE_BLOCK}"

    def strong(self, text: str) -> str:
        return f"{STRONG}{text}{STRONG}"

    def emphasis(self, text: str) -> str:
        return f"{EMPHASIS}{text}{EMPHASIS}"

    def monospace(self, text: str) -> str:
        return f"{MONOSPACE}{text}{MONOSPACE}"

    def styled(self, role: str, text: str) -> str:
        """Return inline text carrying a role."""
        return self.roles([role]) + self.monospace(text)

    def superscript(self, text: str) -> str:
        return f"^{text}^"

    def subscript(self, text: str) -> str:
        return f"~{text}~"

    def line_break(self) -> str:
        return " +\n"

    def thematic_break(self) -> str:
        return "\n'''\n"

    def page_break(self) -> str:
        return "\n<<<\n"

    def attribute_name(self, raw: str) -> str:
        """Return ``raw`` as a valid attribute name (dots are not allowed)."""
        return raw.strip().replace(".", "-")

    def attribute_reference(self, name: str) -> str:
        return f"{{{name}}}"

    def attribute_definition(self, name: str, value: str) -> str:
        """Return a single-line attribute entry whose value keeps inline markup."""
        flattened = " ".join(line.strip() for line in value.strip().splitlines() if line.strip())
        escaped = flattened.replace("]", "\\]")
        return f":{name}: pass:q[{escaped}]"

    def conditional(self, condition: str) -> tuple[str, str]:
        """Return the guards including content only when ``condition`` is set."""
        return f"\nifdef::{condition}[]\n", f"\nendif::{condition}[]\n"

    def list_item(self, marker: str, text: str) -> str:
        """Return a list item keeping multi-block content attached to it."""
        body = text.strip()
        parts = _BLANK_LINES.split(body, maxsplit=1)
        if len(parts) == 1:
            return f"{marker} {body}\n"
        first, rest = parts
        return (
            f"{marker} {first}\n"
            f"{LIST_CONTINUATION}\n"
            f"{OPEN_BLOCK}\n"
            f"{rest}\n"
            f"{OPEN_BLOCK}\n"
        )

    def term(self, text: str) -> str:
        return f"{text}::"

    def description(self, text: str) -> str:
        return f"  {text}"

    def image(self, target: str, title: str, *, block: bool) -> str:
        if block:
            return f"\nimage::{target}[{title}]\n"
        return f"image:{target}[{title}]"

    def link(self, href: str, text: str) -> str:
        return f"link:{href}[{text}]"

    def xref(self, target: str, title: str) -> str:
        return f"xref:{target}[{title}]"

    def include(self, target: str) -> str:
        return f"\ninclude::{target}[]\n"

    def equation(self, text: str) -> str:
        return f"latexmath:[{text}]"

    def comment(self, text: str) -> str:
        if "\n" in text:
            return f"\n{COMMENT_BLOCK}\n{text}\n{COMMENT_BLOCK}\n"
        return f"\n// {text}\n"

    def table_options(self, options: Mapping[str, bool]) -> str:
        """Return the attribute list enabling every set table option."""
        flags = [f"%{name}" for name, enabled in options.items() if enabled]
        if not flags:
            return ""
        return "[" + ",".join(flags) + "]\n"

    def table(self, body: str, options: Mapping[str, bool]) -> str:
        return f"\n{self.table_options(options)}{TABLE_DELIMITER}\n{body.strip()}\n{TABLE_DELIMITER}\n"

    def cell(self, text: str, *, colspan: int = 1, rowspan: int = 1) -> str:
        """Return a table cell, prefixed with its span specifier when merged."""
        span = ""
        if colspan > 1:
            span += str(colspan)
        if rowspan > 1:
            span += f".{rowspan}"
        if span:
            span += "+"
        return f"{span}{CELL_SEPARATOR}{text.rstrip()}"

    def block_title(self, title: str, body: str) -> str:
        return f"\n.{title}\n{body}\n"


__all__ = [
    "CELL_SEPARATOR",
    "ORDERED_MARKER",
    "UNORDERED_MARKER",
    "AsciiDocFormatter",
]
