"""Public conversion API."""

from __future__ import annotations

from .pipeline import (
    AsciiDocFragment,
    ConversionBundle,
    ConversionFailure,
    convert_documents,
    discover_sources,
    write_snippet_definitions,
)


__all__ = [
    "AsciiDocFragment",
    "ConversionBundle",
    "ConversionFailure",
    "convert_documents",
    "discover_sources",
    "write_snippet_definitions",
]
