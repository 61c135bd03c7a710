"""Public CLI exports for adocsmith."""

from __future__ import annotations

from .app import app, main
from .commands import convert
from .diagnostics import CliEmitter
from .state import CLIState, emit_error, get_cli_state


__all__ = [
    "CLIState",
    "CliEmitter",
    "app",
    "convert",
    "emit_error",
    "get_cli_state",
    "main",
]
