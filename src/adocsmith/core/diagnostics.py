"""Diagnostic abstractions shared across the conversion pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None: ...

    def error(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


def format_diagnostic(message: str, document: str | None = None) -> str:
    """Prefix a diagnostic message with the document label when known."""
    if document:
        return f"{document}: {message}"
    return message


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    debug_enabled: bool = False

    def warning(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        return

    def error(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        text = format_diagnostic(message, document)
        if exc is not None:
            self._logger.warning(text, exc_info=exc)
        else:
            self._logger.warning(text)

    def error(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        text = format_diagnostic(message, document)
        if exc is not None:
            self._logger.error(text, exc_info=exc)
        else:
            self._logger.error(text)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "parser_fallback":
        preferred = data.get("preferred") or "<unknown>"
        fallback = data.get("fallback") or "html.parser"
        return f"Parser backend '{preferred}' unavailable, using '{fallback}'"

    if name == "document_converted":
        source = data.get("source") or "<unknown>"
        target = data.get("target")
        if target:
            return f"Converted {source} -> {target}"
        return f"Converted {source}"

    if name == "snippets_written":
        count = data.get("count", 0)
        target = data.get("target") or "<stdout>"
        return f"Wrote {count} snippet definition(s) to {target}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_diagnostic",
    "format_event_message",
]
