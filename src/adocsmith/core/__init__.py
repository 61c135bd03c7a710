"""Conversion core: configuration, context, diagnostics and registries."""

from __future__ import annotations

from .config import ConversionConfig, load_config
from .context import ConversionContext
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import ConfigError, ConversionError, DocumentParseError, SnippetResolutionError
from .rules import HandlerRegistry, renders
from .snippets import SnippetEntry, SnippetRegistry, snippet_name


__all__ = [
    "ConfigError",
    "ConversionConfig",
    "ConversionContext",
    "ConversionError",
    "DiagnosticEmitter",
    "DocumentParseError",
    "HandlerRegistry",
    "LoggingEmitter",
    "NullEmitter",
    "SnippetEntry",
    "SnippetRegistry",
    "SnippetResolutionError",
    "load_config",
    "renders",
    "snippet_name",
]
