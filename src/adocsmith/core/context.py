"""Conversion context threaded through every handler call."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from .config import ConversionConfig
from .diagnostics import DiagnosticEmitter, NullEmitter
from .snippets import SnippetRegistry


if TYPE_CHECKING:  # pragma: no cover - typing only
    from adocsmith.adapters.asciidoc.formatter import AsciiDocFormatter


class Dispatcher(Protocol):
    """Object able to convert the children of a node."""

    def convert_children(
        self, node: Any, context: ConversionContext, *, skip_blank_text: bool = False
    ) -> str: ...


@dataclass
class ConversionContext:
    """State scoped to the conversion of a single document.

    A fresh context is built for every document so paragraph tracking and the
    remembered image directory never leak from one document to the next. The
    snippet registry is the only member shared across a run.
    """

    config: ConversionConfig
    formatter: AsciiDocFormatter
    snippets: SnippetRegistry
    dispatcher: Dispatcher
    emitter: DiagnosticEmitter = field(default_factory=NullEmitter)
    label: str = "<document>"
    document_path: Path | None = None

    list_marker: str | None = None
    table_options: dict[str, bool] | None = None
    figure_caption: str | None = None
    figure_caption_seen: bool = False
    at_paragraph_start: bool = True
    image_directory: str | None = None

    def convert_children(self, node: Any, *, skip_blank_text: bool = False) -> str:
        """Convert the children of ``node`` with this context."""
        return self.dispatcher.convert_children(node, self, skip_blank_text=skip_blank_text)

    def warn(self, message: str) -> None:
        """Report a recoverable problem for the current document."""
        self.emitter.warning(message, document=self.label)

    @contextmanager
    def list_scope(self, marker: str) -> Iterator[None]:
        """Use ``marker`` for list items until the scope exits."""
        previous = self.list_marker
        self.list_marker = marker
        try:
            yield
        finally:
            self.list_marker = previous

    @contextmanager
    def table_scope(self) -> Iterator[dict[str, bool]]:
        """Collect table options set by nested cells."""
        previous = self.table_options
        options: dict[str, bool] = {}
        self.table_options = options
        try:
            yield options
        finally:
            self.table_options = previous

    @contextmanager
    def figure_scope(self) -> Iterator[None]:
        """Open an empty caption slot filled by a nested caption element."""
        previous = (self.figure_caption, self.figure_caption_seen)
        self.figure_caption, self.figure_caption_seen = "", False
        try:
            yield
        finally:
            self.figure_caption, self.figure_caption_seen = previous


__all__ = ["ConversionContext", "Dispatcher"]
