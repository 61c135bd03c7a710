from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from adocsmith.adapters.asciidoc import AsciiDocConverter


class RecordingEmitter:
    """Emitter collecting diagnostics for assertions."""

    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[tuple[str | None, str]] = []
        self.errors: list[tuple[str | None, str]] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        self.warnings.append((document, message))

    def error(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        self.errors.append((document, message))

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.warnings]


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def converter() -> AsciiDocConverter:
    return AsciiDocConverter(parser="html.parser")


@pytest.fixture
def render_raw(converter: AsciiDocConverter, emitter: RecordingEmitter):
    """Convert markup without the final normalisation pass."""

    def _render(markup: str) -> str:
        root = converter.parse(markup, emitter)
        context = converter.new_context(label="topic.htm", emitter=emitter)
        return converter.convert_children(root, context)

    return _render
