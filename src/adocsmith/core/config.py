"""Configuration models used by the AsciiDoc converter.

ConversionConfig

`parser` (`str`)
: BeautifulSoup parser backend used to read topics. `html.parser` is always
  available; `lxml` is faster when installed.

`source_suffixes` (`list[str]`)
: File suffixes treated as convertible topics during input discovery.

`output_suffix` (`str`)
: Suffix of converted documents. Cross-references and snippet includes are
  rewritten to point at this suffix.

`snippet_suffix` (`str`)
: Suffix identifying snippet files in ``MadCap:snippetText`` and
  ``MadCap:snippetBlock`` references.

`known_snippets` (`set[str]`)
: Snippet names already defined elsewhere. References to them are kept but no
  definition is generated.

`admonitions` (`dict[str, str]`)
: Paragraph classes rendered as admonition blocks, mapped to the admonition
  label.

`snippets_file` (`str`)
: File name of the combined snippet definitions written next to the outputs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from .exceptions import ConfigError


DEFAULT_ADMONITIONS: dict[str, str] = {
    "note": "NOTE",
    "important": "IMPORTANT",
    "tip": "TIP",
}


class ConversionConfig(BaseModel):
    """Settings shared by every document converted in one run."""

    model_config = ConfigDict(extra="forbid")

    parser: str = "html.parser"
    source_suffixes: list[str] = Field(default_factory=lambda: [".htm", ".html"])
    output_suffix: str = ".adoc"
    snippet_suffix: str = ".flsnp"
    known_snippets: set[str] = Field(default_factory=set)
    admonitions: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ADMONITIONS))
    snippets_file: str = "snippets.adoc"

    @field_validator("source_suffixes", mode="after")
    @classmethod
    def _normalise_suffixes(cls, value: list[str]) -> list[str]:
        return [suffix if suffix.startswith(".") else f".{suffix}" for suffix in value]

    @field_validator("output_suffix", "snippet_suffix", mode="after")
    @classmethod
    def _normalise_suffix(cls, value: str) -> str:
        return value if value.startswith(".") else f".{value}"

    def with_known_snippets(self, names: set[str]) -> ConversionConfig:
        """Return a copy extended with additional externally defined snippets."""
        return self.model_copy(update={"known_snippets": self.known_snippets | set(names)})


def load_config(path: Path | str | None = None, **overrides: Any) -> ConversionConfig:
    """Load a configuration file and apply keyword overrides."""
    payload: dict[str, Any] = {}
    if path is not None:
        source = Path(path)
        try:
            loaded = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read configuration '{source}': {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigError(f"Configuration '{source}' must contain a mapping.")
        payload.update(loaded)

    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ConversionConfig(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def read_known_snippets(path: Path | str) -> set[str]:
    """Read snippet names from a text file, one name per line."""
    names: set[str] = set()
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        candidate = line.strip()
        if not candidate or candidate.startswith("#"):
            continue
        names.add(candidate)
    return names


__all__ = ["DEFAULT_ADMONITIONS", "ConversionConfig", "load_config", "read_known_snippets"]
