"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
SNIPPETS_PANEL = "Snippets"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

InputPathArgument = Annotated[
    list[Path] | None,
    typer.Argument(
        metavar="INPUT...",
        help=(
            "Flare topics (.htm) to convert. Directories are searched recursively "
            "for files with a convertible suffix."
        ),
        exists=True,
        file_okay=True,
        dir_okay=True,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file providing conversion settings.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

ParserOption = Annotated[
    str | None,
    typer.Option(
        "--parser",
        help="BeautifulSoup parser backend (html.parser, lxml, html5lib).",
        rich_help_panel=INPUTS_PANEL,
    ),
]

KnownSnippetsOption = Annotated[
    Path | None,
    typer.Option(
        "--known-snippets",
        help="Text file listing snippet names defined elsewhere, one per line.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        rich_help_panel=SNIPPETS_PANEL,
    ),
]

SnippetsFileOption = Annotated[
    str | None,
    typer.Option(
        "--snippets-file",
        help="Name of the file receiving snippet attribute definitions.",
        rich_help_panel=SNIPPETS_PANEL,
    ),
]

OutputDirOption = Annotated[
    Path | None,
    typer.Option(
        "--output-dir",
        "-o",
        help="Directory receiving the converted documents. Prints to stdout when omitted.",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ListHandlersOption = Annotated[
    bool,
    typer.Option(
        "--list-handlers",
        help="List the supported tags and their handlers, then exit.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase diagnostic verbosity. Repeat for more detail.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "ConfigOption",
    "DebugOption",
    "InputPathArgument",
    "KnownSnippetsOption",
    "ListHandlersOption",
    "OutputDirOption",
    "ParserOption",
    "SnippetsFileOption",
    "VerbosityOption",
]
