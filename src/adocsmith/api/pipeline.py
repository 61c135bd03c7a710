"""Conversion helpers that expose a friendly facade over the converter.

Architecture
: `AsciiDocFragment` represents the output of a single document conversion and
  records where it was written on disk.
: `ConversionFailure` records a document whose conversion was aborted, so a
  batch keeps going and reports every failure at the end.
: `ConversionBundle` collects fragments and failures and offers convenience
  methods like `combined_output` for quick previews or testing.
: `convert_documents` reads each source, converts it with a fresh context, and
  optionally writes the result next to its mirrored relative path.

Usage Example
:
    >>> from pathlib import Path
    >>> from tempfile import TemporaryDirectory
    >>> from adocsmith.adapters.asciidoc import AsciiDocConverter
    >>> from adocsmith.api.pipeline import convert_documents
    >>> with TemporaryDirectory() as tmpdir:
    ...     source = Path(tmpdir) / "intro.htm"
    ...     _ = source.write_text("<h1>Intro</h1>")
    ...     output_dir = Path(tmpdir) / "build"
    ...     bundle = convert_documents([source], converter=AsciiDocConverter(), output_dir=output_dir)
    ...     (output_dir / "intro.adoc").exists()
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ..adapters.asciidoc import AsciiDocConverter
from ..core.diagnostics import DiagnosticEmitter, NullEmitter
from ..core.exceptions import ConversionError, exception_hint


__all__ = [
    "AsciiDocFragment",
    "ConversionBundle",
    "ConversionFailure",
    "convert_documents",
    "discover_sources",
    "write_snippet_definitions",
]


@dataclass(slots=True)
class AsciiDocFragment:
    """Represents a converted AsciiDoc document."""

    source: Path
    text: str
    output_path: Path | None = None

    def write_to(self, target: Path) -> None:
        """Persist the fragment to disk."""
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.text, encoding="utf-8")
        self.output_path = target


@dataclass(slots=True)
class ConversionFailure:
    """A document whose conversion was aborted."""

    source: Path
    error: BaseException

    @property
    def message(self) -> str:
        return exception_hint(self.error) or type(self.error).__name__


@dataclass(slots=True)
class ConversionBundle:
    """Collection returned by :func:`convert_documents`."""

    fragments: list[AsciiDocFragment] = field(default_factory=list)
    failures: list[ConversionFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every document converted."""
        return not self.failures

    def combined_output(self) -> str:
        """Concatenate all fragments separated by blank lines for quick previews."""
        return "\n".join(fragment.text for fragment in self.fragments if fragment.text)


def discover_sources(inputs: Iterable[Path], suffixes: Sequence[str]) -> list[Path]:
    """Expand files and directories into a sorted list of convertible sources."""
    accepted = {suffix.lower() for suffix in suffixes}
    found: set[Path] = set()
    for candidate in inputs:
        path = Path(candidate)
        if path.is_dir():
            found.update(
                item
                for item in path.rglob("*")
                if item.is_file() and item.suffix.lower() in accepted
            )
        elif path.is_file():
            found.add(path)
    return sorted(found)


def _target_path(source: Path, output_dir: Path, source_root: Path | None, suffix: str) -> Path:
    relative = Path(source.name)
    if source_root is not None:
        try:
            relative = source.resolve().relative_to(source_root.resolve())
        except ValueError:
            relative = Path(source.name)
    return (output_dir / relative).with_suffix(suffix)


def convert_documents(
    sources: Sequence[Path],
    *,
    converter: AsciiDocConverter,
    output_dir: Path | None = None,
    source_root: Path | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> ConversionBundle:
    """Convert documents independently, recording failures instead of stopping."""
    active_emitter = emitter or NullEmitter()
    bundle = ConversionBundle()
    written: dict[Path, Path] = {}

    for source in sources:
        path = Path(source)
        try:
            markup = path.read_text(encoding="utf-8")
            text = converter.convert(
                markup, label=path.name, document_path=path, emitter=active_emitter
            )
        except (ConversionError, OSError, UnicodeDecodeError) as exc:
            active_emitter.error(f"Conversion failed: {exc}", document=path.name, exc=exc)
            bundle.failures.append(ConversionFailure(source=path, error=exc))
            continue

        fragment = AsciiDocFragment(source=path, text=text)
        if output_dir is not None:
            target = _target_path(path, Path(output_dir), source_root, converter.config.output_suffix)
            previous = written.get(target)
            if previous is not None:
                clash = ConversionError(f"Output '{target}' already written for '{previous}'")
                active_emitter.error(str(clash), document=path.name, exc=clash)
                bundle.failures.append(ConversionFailure(source=path, error=clash))
                continue
            try:
                fragment.write_to(target)
            except OSError as exc:
                active_emitter.error(f"Unable to write '{target}': {exc}", document=path.name, exc=exc)
                bundle.failures.append(ConversionFailure(source=path, error=exc))
                continue
            written[target] = path
        active_emitter.event(
            "document_converted",
            {"source": str(path), "target": str(fragment.output_path or "")},
        )
        bundle.fragments.append(fragment)

    return bundle


def write_snippet_definitions(
    converter: AsciiDocConverter,
    target: Path | None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Populate snippet definitions and write them to ``target`` when any exist."""
    active_emitter = emitter or NullEmitter()
    definitions = converter.snippet_definitions(active_emitter)
    if definitions and target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(definitions, encoding="utf-8")
        active_emitter.event(
            "snippets_written",
            {"count": len(definitions.splitlines()), "target": str(target)},
        )
    return definitions
