"""High-level Flare XHTML to AsciiDoc converter."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import CData, Comment, NavigableString, PreformattedString, Tag

from adocsmith.core.config import ConversionConfig
from adocsmith.core.context import ConversionContext
from adocsmith.core.diagnostics import DiagnosticEmitter, NullEmitter
from adocsmith.core.exceptions import ConversionError, DocumentParseError, SnippetResolutionError
from adocsmith.core.rules import HandlerRegistry, handler_key
from adocsmith.core.snippets import SnippetEntry, SnippetRegistry

from .formatter import AsciiDocFormatter
from .utils import append_fragment, normalize_output, prepare_text


PARAGRAPH_BREAK_TAGS = frozenset({"br", "p"})


class AsciiDocConverter:
    """Convert parsed topics to AsciiDoc through registered tag handlers."""

    def __init__(
        self,
        config: ConversionConfig | None = None,
        formatter: AsciiDocFormatter | None = None,
        snippets: SnippetRegistry | None = None,
        parser: str | None = None,
    ) -> None:
        self.config = config or ConversionConfig()
        self.formatter = formatter or AsciiDocFormatter()
        self.parser_backend = parser or self.config.parser
        self.snippets = snippets or SnippetRegistry(
            known=frozenset(self.config.known_snippets),
            suffix=self.config.snippet_suffix,
        )
        self.registry = HandlerRegistry()
        self._register_builtin_handlers()

    def _register_builtin_handlers(self) -> None:
        """Register the built-in handler modules."""
        from ..handlers import (
            basic as basic_handlers,
            blocks as block_handlers,
            inline as inline_handlers,
            links as link_handlers,
            media as media_handlers,
        )

        self.registry.collect_from(basic_handlers)
        self.registry.collect_from(block_handlers)
        self.registry.collect_from(inline_handlers)
        self.registry.collect_from(link_handlers)
        self.registry.collect_from(media_handlers)

    def register(self, handler: Any) -> None:
        """Register additional handlers on demand.

        Arguments can be callables decorated with :func:`renders` or modules
        exposing decorated attributes.
        """
        if getattr(handler, "__render_rule__", None) is not None:
            self.registry.register_handler(handler)
            return
        self.registry.collect_from(handler)

    def parse(self, markup: str, emitter: DiagnosticEmitter | None = None) -> Tag:
        """Parse markup and return the element whose children are converted."""
        active_emitter = emitter or NullEmitter()
        try:
            soup = BeautifulSoup(markup, self.parser_backend)
        except FeatureNotFound as exc:
            if self.parser_backend == "html.parser":
                raise DocumentParseError("No HTML parser backend available") from exc
            active_emitter.event(
                "parser_fallback",
                {"preferred": self.parser_backend, "fallback": "html.parser"},
            )
            self.parser_backend = "html.parser"
            soup = BeautifulSoup(markup, self.parser_backend)
        except Exception as exc:
            raise DocumentParseError(f"Unable to parse document: {exc}") from exc

        body = soup.find("body")
        return body if isinstance(body, Tag) else soup

    def new_context(
        self,
        *,
        label: str = "<document>",
        document_path: Path | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> ConversionContext:
        """Build the state for one document conversion."""
        return ConversionContext(
            config=self.config,
            formatter=self.formatter,
            snippets=self.snippets,
            dispatcher=self,
            emitter=emitter or NullEmitter(),
            label=label,
            document_path=document_path,
        )

    def convert(
        self,
        markup: str,
        *,
        label: str = "<document>",
        document_path: Path | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> str:
        """Convert a topic into a normalised AsciiDoc document."""
        root = self.parse(markup, emitter)
        return self.convert_node(root, label=label, document_path=document_path, emitter=emitter)

    def convert_node(
        self,
        root: Tag,
        *,
        label: str = "<document>",
        document_path: Path | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> str:
        """Convert the children of an already parsed node."""
        context = self.new_context(label=label, document_path=document_path, emitter=emitter)
        try:
            text = self.convert_children(root, context)
        except ConversionError:
            raise
        except Exception as exc:
            raise ConversionError(f"Conversion of '{label}' failed: {exc}") from exc
        return normalize_output(text)

    def convert_children(
        self, node: Any, context: ConversionContext, *, skip_blank_text: bool = False
    ) -> str:
        """Convert every child of ``node`` and concatenate the fragments."""
        output = ""
        for child in getattr(node, "children", ()):
            output = self._convert_child(child, output, context, skip_blank_text)
        return output

    def _convert_child(
        self, child: Any, output: str, context: ConversionContext, skip_blank_text: bool
    ) -> str:
        if isinstance(child, Tag):
            name = f"{child.prefix}:{child.name}" if child.prefix else child.name
            key = handler_key(name)
            handler = self.registry.lookup(key)
            if handler is None:
                context.warn(f"Unsupported tag <{name}> skipped")
                return output
            output = append_fragment(output, handler(child, context))
            context.at_paragraph_start = key in PARAGRAPH_BREAK_TAGS
            return output

        if isinstance(child, Comment):
            text = child.strip()
            if not text:
                return output
            return append_fragment(output, self.formatter.comment(text))

        if isinstance(child, CData):
            if child.strip():
                context.warn("CDATA section skipped")
            return output

        if isinstance(child, PreformattedString):
            context.warn(f"Unsupported {type(child).__name__} node skipped")
            return output

        if isinstance(child, NavigableString):
            text = prepare_text(str(child))
            if text != "\n":
                context.at_paragraph_start = False
            elif skip_blank_text:
                return output
            return output + text

        context.warn(f"Unsupported {type(child).__name__} node skipped")
        return output

    def append(self, accumulated: str, addition: str) -> str:
        """Concatenate two fragments, repairing their boundary."""
        return append_fragment(accumulated, addition)

    def normalize(self, text: str) -> str:
        """Apply the final whitespace cleanup."""
        return normalize_output(text)

    def resolve_snippet_path(self, entry: SnippetEntry) -> Path:
        """Resolve a snippet reference against the document that introduced it."""
        path = Path(entry.path.replace("\\", "/"))
        if entry.origin is not None and not path.is_absolute():
            return entry.origin.parent / path
        return path

    def load_snippet(self, entry: SnippetEntry, emitter: DiagnosticEmitter | None = None) -> str:
        """Read and convert a snippet file."""
        source = self.resolve_snippet_path(entry)
        try:
            markup = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SnippetResolutionError(f"Unable to read snippet '{source}': {exc}") from exc
        try:
            return self.convert(
                markup, label=source.name, document_path=source, emitter=emitter
            ).strip()
        except ConversionError as exc:
            raise SnippetResolutionError(f"Unable to convert snippet '{source}': {exc}") from exc

    def snippet_definitions(
        self,
        emitter: DiagnosticEmitter | None = None,
        loader: Callable[[SnippetEntry], str] | None = None,
    ) -> str:
        """Populate pending snippets and return their definition lines."""
        active_emitter = emitter or NullEmitter()

        def _load(entry: SnippetEntry) -> str:
            return self.load_snippet(entry, active_emitter)

        for entry, exc in self.snippets.populate(loader or _load):
            document = entry.origin.name if entry.origin is not None else None
            active_emitter.warning(
                f"Snippet '{entry.path}' skipped: {exc}", document=document, exc=exc
            )
        return self.snippets.definitions(self.formatter.attribute_definition)

    def describe_handlers(self) -> list[dict[str, str]]:
        """Return the supported tags with the handler converting each."""
        return self.registry.describe()


__all__ = ["PARAGRAPH_BREAK_TAGS", "AsciiDocConverter"]
