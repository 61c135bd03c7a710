"""Console presentation helpers for conversion results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich import box
from rich.table import Table

from adocsmith.api.pipeline import ConversionBundle

from .state import CLIState


def present_handler_descriptions(state: CLIState, handlers: Sequence[Mapping[str, Any]]) -> None:
    """Render the tag to handler table."""
    if not handlers:
        return

    table = Table(title="Registered Handlers", box=box.SIMPLE_HEAVY)
    table.add_column("Tag", style="cyan")
    table.add_column("Handler")
    for entry in handlers:
        table.add_row(str(entry.get("tag", "")), str(entry.get("name", "")))
    state.console.print(table)


def present_summary(state: CLIState, bundle: ConversionBundle) -> None:
    """Print a one-line conversion summary to stderr."""
    converted = len(bundle.fragments)
    failed = len(bundle.failures)
    style = "green" if bundle.ok else "red"
    summary = f"Converted {converted} document(s), {failed} failed, {state.warning_count} warning(s)."
    state.err_console.print(summary, style=style, markup=False)

    if state.verbosity >= 1:
        for failure in bundle.failures:
            state.err_console.print(f"  - {failure.source}: {failure.message}", markup=False)


__all__ = ["present_handler_descriptions", "present_summary"]
