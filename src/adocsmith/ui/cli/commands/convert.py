"""Implementation of the ``adocsmith`` convert command."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from adocsmith.adapters.asciidoc import AsciiDocConverter
from adocsmith.api.pipeline import convert_documents, discover_sources, write_snippet_definitions
from adocsmith.core.config import load_config, read_known_snippets
from adocsmith.core.exceptions import ConfigError

from .._options import (
    ConfigOption,
    DebugOption,
    InputPathArgument,
    KnownSnippetsOption,
    ListHandlersOption,
    OutputDirOption,
    ParserOption,
    SnippetsFileOption,
    VerbosityOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_handler_descriptions, present_summary
from ..state import emit_error, set_cli_state


def _mirror_root(inputs: list[Path]) -> Path | None:
    """Return the deepest directory shared by every input.

    Directory inputs count as themselves, file inputs as their parent folder.
    """
    folders = [str(path.resolve() if path.is_dir() else path.resolve().parent) for path in inputs]
    try:
        return Path(os.path.commonpath(folders))
    except ValueError:
        return None


def convert(
    ctx: typer.Context,
    inputs: InputPathArgument = None,
    output_dir: OutputDirOption = None,
    config_path: ConfigOption = None,
    known_snippets: KnownSnippetsOption = None,
    snippets_file: SnippetsFileOption = None,
    parser: ParserOption = None,
    list_handlers: ListHandlersOption = False,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
) -> None:
    """Convert Flare XHTML topics into AsciiDoc."""
    state = set_cli_state(verbosity=verbose, debug=debug)

    try:
        config = load_config(config_path, parser=parser, snippets_file=snippets_file)
        if known_snippets is not None:
            config = config.with_known_snippets(read_known_snippets(known_snippets))
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        emit_error(f"Unable to read known snippets: {exc}", exception=exc)
        raise typer.Exit(code=1) from exc

    converter = AsciiDocConverter(config=config)

    if list_handlers:
        present_handler_descriptions(state, converter.describe_handlers())
        raise typer.Exit()

    if not inputs:
        typer.echo(ctx.command.get_help(ctx))
        raise typer.Exit()

    sources = discover_sources(inputs, config.source_suffixes)
    if not sources:
        emit_error("No convertible documents found.")
        raise typer.Exit(code=1)

    emitter = CliEmitter(state=state)
    bundle = convert_documents(
        sources,
        converter=converter,
        output_dir=output_dir,
        source_root=_mirror_root(inputs),
        emitter=emitter,
    )

    snippets_target = output_dir / config.snippets_file if output_dir is not None else None
    definitions = write_snippet_definitions(converter, snippets_target, emitter=emitter)

    if output_dir is None:
        typer.echo(bundle.combined_output(), nl=False)
        if definitions:
            typer.echo("")
            typer.echo(definitions, nl=False)

    present_summary(state, bundle)

    if not bundle.ok:
        raise typer.Exit(code=1)


__all__ = ["convert"]
