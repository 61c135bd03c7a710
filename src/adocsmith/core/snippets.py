"""Registry tracking snippet references shared across documents.

Snippets are reusable fragments stored in their own files and referenced by
path from many topics. Inline references become attribute references in the
converted output; the registry remembers every referenced path so a single set
of attribute definitions can be emitted for the whole run.

Entries are inserted once per distinct path through :meth:`SnippetRegistry.register`,
a single check-and-insert guarded by a lock. Their content is computed lazily
by :meth:`SnippetRegistry.populate`, after every document has been converted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
import re
from threading import RLock

from .exceptions import SnippetResolutionError


_PATH_SEPARATORS = re.compile(r"[\\/]")
_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def snippet_name(path: str, suffix: str = ".flsnp") -> tuple[str, bool]:
    """Derive the attribute name of a snippet from its reference path.

    Returns the name and whether the path matched the expected
    ``[directories/]name<suffix>`` pattern.
    """
    base = _PATH_SEPARATORS.split(path.strip())[-1]
    well_formed = len(base) > len(suffix) and base.lower().endswith(suffix.lower())
    if base.lower().endswith(suffix.lower()):
        base = base[: -len(suffix)]
    return _INVALID_NAME_CHARS.sub("-", base), well_formed


@dataclass(slots=True)
class SnippetEntry:
    """Snippet referenced by at least one document."""

    path: str
    name: str
    origin: Path | None = None
    content: str | None = None
    failed: bool = False

    @property
    def pending(self) -> bool:
        """Return True while the content has not been computed."""
        return self.content is None and not self.failed


SnippetLoader = Callable[[SnippetEntry], str]


@dataclass(slots=True)
class SnippetRegistry:
    """Thread-safe, insertion-ordered store of snippet references."""

    known: frozenset[str] = field(default_factory=frozenset)
    suffix: str = ".flsnp"
    _entries: dict[str, SnippetEntry] = field(default_factory=dict, init=False)
    _lock: RLock = field(default_factory=RLock, init=False)

    def __post_init__(self) -> None:
        self.known = frozenset(self.known)

    def register(self, path: str, origin: Path | None = None) -> str:
        """Record a snippet reference and return its attribute name.

        Externally known snippets are never inserted; a path already registered
        keeps its first entry.
        """
        with self._lock:
            entry = self._entries.get(path)
            if entry is not None:
                return entry.name
            name, _ = snippet_name(path, self.suffix)
            if name in self.known:
                return name
            self._entries[path] = SnippetEntry(path=path, name=name, origin=origin)
            return name

    def resolve(self, path: str, loader: SnippetLoader) -> str | None:
        """Populate one entry on first use and return its content."""
        with self._lock:
            entry = self._entries.get(path)
            if entry is None:
                raise KeyError(path)
            if not entry.pending:
                return entry.content
            try:
                entry.content = loader(entry)
            except SnippetResolutionError:
                entry.failed = True
                raise
            return entry.content

    def populate(
        self, loader: SnippetLoader
    ) -> list[tuple[SnippetEntry, SnippetResolutionError]]:
        """Populate every pending entry, including ones registered meanwhile."""
        failures: list[tuple[SnippetEntry, SnippetResolutionError]] = []
        while True:
            pending = [entry for entry in self.entries() if entry.pending]
            if not pending:
                return failures
            for entry in pending:
                try:
                    self.resolve(entry.path, loader)
                except SnippetResolutionError as exc:
                    failures.append((entry, exc))

    def entries(self) -> list[SnippetEntry]:
        """Return the registered entries in insertion order."""
        with self._lock:
            return list(self._entries.values())

    def names(self) -> list[str]:
        """Return the registered snippet names in insertion order."""
        return [entry.name for entry in self.entries()]

    def definitions(self, render: Callable[[str, str], str]) -> str:
        """Return one definition line per populated entry."""
        lines = [
            render(entry.name, entry.content)
            for entry in self.entries()
            if entry.content is not None
        ]
        return "".join(f"{line}\n" for line in lines)

    def extend_known(self, names: Iterable[str]) -> None:
        """Add externally defined snippet names."""
        with self._lock:
            self.known = self.known | frozenset(names)

    def clear(self) -> None:
        """Reset the registry to its initial empty state."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:  # pragma: no cover - trivial
        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries


__all__ = ["SnippetEntry", "SnippetLoader", "SnippetRegistry", "snippet_name"]
