"""Custom exception hierarchy for the AsciiDoc conversion pipeline."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base exception for document conversion failures."""


class DocumentParseError(ConversionError):
    """Raised when a source document cannot be parsed into a node tree."""


class ConfigError(ConversionError):
    """Raised when the conversion configuration is invalid."""


class SnippetResolutionError(ConversionError):
    """Raised when a referenced snippet cannot be read or converted."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigError",
    "ConversionError",
    "DocumentParseError",
    "SnippetResolutionError",
    "exception_hint",
    "exception_messages",
]
