"""Primary public API for adocsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from adocsmith.adapters.asciidoc import AsciiDocConverter, AsciiDocFormatter
from adocsmith.api import (
    AsciiDocFragment,
    ConversionBundle,
    ConversionFailure,
    convert_documents,
    discover_sources,
    write_snippet_definitions,
)
from adocsmith.core.config import ConversionConfig, load_config
from adocsmith.core.context import ConversionContext
from adocsmith.core.exceptions import ConfigError, ConversionError, DocumentParseError
from adocsmith.core.rules import renders
from adocsmith.core.snippets import SnippetRegistry


try:
    __version__ = _pkg_version("adocsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AsciiDocConverter",
    "AsciiDocFormatter",
    "AsciiDocFragment",
    "ConfigError",
    "ConversionBundle",
    "ConversionConfig",
    "ConversionContext",
    "ConversionError",
    "ConversionFailure",
    "DocumentParseError",
    "SnippetRegistry",
    "__version__",
    "convert_documents",
    "discover_sources",
    "load_config",
    "renders",
    "write_snippet_definitions",
]
