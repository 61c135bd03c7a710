"""Text helpers specific to AsciiDoc output."""

from __future__ import annotations

import re


NBSP = "\N{NO-BREAK SPACE}"
NBSP_ATTRIBUTE = "{nbsp}"

_INDENTED_NEWLINE = re.compile(r"\n[ \t]+")
_BLANK_LINE_RUN = re.compile(r"\n(?:[ \t]*\n)+")
_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_BLOCK_DELIMITER = re.compile(r"^(?:([=\-*_/+.])\1{2,}|\|={3,})")


def prepare_text(text: str) -> str:
    """Unindent source text and substitute non-breaking spaces."""
    return _INDENTED_NEWLINE.sub("\n", text).replace(NBSP, NBSP_ATTRIBUTE)


def collapse_blank_lines(text: str) -> str:
    """Collapse blank-line sequences into single newlines for inline markup."""
    return _BLANK_LINE_RUN.sub("\n", text)


def flatten_lines(text: str) -> str:
    """Join every line of ``text`` with single spaces."""
    return " ".join(part.strip() for part in text.splitlines() if part.strip())


def append_fragment(accumulated: str, addition: str) -> str:
    """Concatenate ``addition`` keeping boundary-sensitive syntax intact.

    Attribute lists must not fuse with a preceding word, and block delimiters
    must start a line.
    """
    if accumulated and addition:
        if addition.startswith("[") and not accumulated.endswith(("(", " ", "\n")):
            accumulated += " "
        elif _BLOCK_DELIMITER.match(addition) and not accumulated.endswith("\n"):
            accumulated += "\n"
    return accumulated + addition


def normalize_output(text: str) -> str:
    """Apply the final whitespace cleanup to a converted document."""
    text = _TRAILING_SPACE.sub("", text.lstrip())
    text = _EXCESS_BLANK_LINES.sub("\n\n", text)
    return text.rstrip("\n") + "\n"


__all__ = [
    "NBSP_ATTRIBUTE",
    "append_fragment",
    "collapse_blank_lines",
    "flatten_lines",
    "normalize_output",
    "prepare_text",
]
