"""Typer application and console-script entry point."""

from __future__ import annotations

import typer

from adocsmith.ui.cli.commands.convert import convert

from .state import emit_error, get_cli_state


app = typer.Typer(
    name="adocsmith",
    help="Convert MadCap Flare XHTML topics into AsciiDoc.",
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["--help"]},
)

app.command()(convert)


def main() -> None:
    """Run the CLI, reporting unexpected failures as a single error line.

    ``--debug`` prints the full Rich traceback instead.
    """
    try:
        app()
    except Exception as exc:  # pragma: no cover - console-script wrapper
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            state.err_console.print(
                Traceback.from_exception(type(exc), exc, exc.__traceback__)
            )
        else:
            emit_error(f"Unexpected failure: {exc}", exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
