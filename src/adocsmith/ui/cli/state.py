"""Console state of a running ``adocsmith`` command.

The state owns the Rich consoles, the diagnostic verbosity and the warning and
error tallies reported in the end-of-run summary. Consoles are bound lazily and
rebound whenever ``sys.stdout``/``sys.stderr`` are swapped (as test runners do).
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
import sys

import click
from rich.console import Console
from rich.text import Text

from adocsmith.core.exceptions import exception_hint


_LEVEL_STYLES = {"warning": "yellow", "error": "red"}


@dataclass(slots=True)
class CLIState:
    """Verbosity, consoles and diagnostic tallies of one command run."""

    verbosity: int = 0
    show_tracebacks: bool = False
    warning_count: int = 0
    error_count: int = 0
    _stdout: Console | None = field(default=None, init=False, repr=False)
    _stderr: Console | None = field(default=None, init=False, repr=False)

    @property
    def console(self) -> Console:
        if self._stdout is None or self._stdout.file is not sys.stdout:
            self._stdout = Console(file=sys.stdout)
        return self._stdout

    @property
    def err_console(self) -> Console:
        if self._stderr is None or self._stderr.file is not sys.stderr:
            self._stderr = Console(file=sys.stderr, highlight=False)
        return self._stderr

    def reset_counters(self) -> None:
        self.warning_count = 0
        self.error_count = 0

    def report(self, level: str, message: str, exception: BaseException | None = None) -> None:
        """Print a warning or error and count it.

        With ``-v`` the innermost cause of ``exception`` is appended when the
        message does not already mention it.
        """
        if level == "warning":
            self.warning_count += 1
        else:
            self.error_count += 1
        style = _LEVEL_STYLES.get(level, "red")
        text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
        if exception is not None and self.verbosity >= 1:
            hint = exception_hint(exception)
            if hint and hint not in message:
                text.append(f"\n  caused by {type(exception).__name__}: {hint}", style=style)
        self.err_console.print(text)

    def info(self, message: str) -> None:
        """Print a progress message when running verbosely."""
        if self.verbosity >= 1:
            self.err_console.print(message, markup=False)


_CURRENT: ContextVar[CLIState | None] = ContextVar("adocsmith_cli_state", default=None)


def get_cli_state() -> CLIState:
    """Return the state of the running command.

    Inside a command the state lives on the root click context; outside one
    (the console-script wrapper, direct emitter use) the last state is reused.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        root = ctx.find_root()
        if not isinstance(root.obj, CLIState):
            root.obj = CLIState()
        _CURRENT.set(root.obj)
        return root.obj

    state = _CURRENT.get()
    if state is None:
        state = CLIState()
        _CURRENT.set(state)
    return state


def set_cli_state(*, verbosity: int = 0, debug: bool = False) -> CLIState:
    """Configure the current state for a new run and clear its tallies."""
    state = get_cli_state()
    state.verbosity = max(0, verbosity)
    state.show_tracebacks = debug
    state.reset_counters()
    return state


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    get_cli_state().report("error", message, exception)


__all__ = [
    "CLIState",
    "emit_error",
    "get_cli_state",
    "set_cli_state",
]
