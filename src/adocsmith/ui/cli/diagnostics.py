"""Diagnostic emitter printing conversion warnings on the CLI consoles."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from adocsmith.core.diagnostics import DiagnosticEmitter, format_diagnostic, format_event_message

from .state import CLIState, get_cli_state


class CliEmitter(DiagnosticEmitter):
    """Report diagnostics through the command's :class:`CLIState`."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.debug_enabled = self._state.show_tracebacks

    def warning(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        self._state.report("warning", format_diagnostic(message, document), exc)

    def error(
        self,
        message: str,
        *,
        document: str | None = None,
        exc: BaseException | None = None,
    ) -> None:
        self._state.report("error", format_diagnostic(message, document), exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._state.info(message)


__all__ = ["CliEmitter"]
