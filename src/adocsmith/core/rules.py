"""Handler declaration and lookup for the AsciiDoc converter.

Handlers declare the tags they convert via the ``@renders`` decorator, which
records a lightweight :class:`RuleDefinition` on the callable. The
:class:`HandlerRegistry` collects those declarations from modules and exposes a
plain tag-to-handler mapping to the dispatcher.

Architecture

`Declaration layer`
: ``@renders`` stores a :class:`RuleDefinition` on every handler.

`Registry layer`
: :class:`HandlerRegistry` binds definitions into :class:`RenderRule` instances
  keyed by the normalised tag name. Every key owns exactly one rule so the
  supported tag set can be enumerated and tested.

Namespaced tags such as ``MadCap:xref`` share the lookup scheme of plain tags:
the key is lower-cased and the namespace separator becomes an underscore.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast


if TYPE_CHECKING:  # pragma: no cover - typing only
    from bs4.element import Tag

    from .context import ConversionContext


HandlerCallable = Callable[["Tag", "ConversionContext"], str]


def handler_key(tag_name: str) -> str:
    """Return the registry key for a (possibly namespaced) tag name."""
    return tag_name.strip().lower().replace(":", "_")


@dataclass(frozen=True)
class RenderRule:
    """Concrete conversion rule registered for one or more tags."""

    tags: tuple[str, ...]
    name: str
    handler: HandlerCallable


@dataclass(frozen=True)
class RuleDefinition:
    """Descriptor installed on handler callables by the decorator."""

    tags: tuple[str, ...]
    name: str | None = None

    def bind(self, handler: HandlerCallable) -> RenderRule:
        """Create a concrete rule instance bound to the callable."""
        name = self.name or getattr(handler, "__name__", handler.__class__.__name__)
        return RenderRule(
            tags=tuple(handler_key(tag) for tag in self.tags),
            name=name,
            handler=handler,
        )


class HandlerRegistry:
    """Mapping from tag keys to the handler converting them."""

    def __init__(self) -> None:
        self._rules: dict[str, RenderRule] = {}

    def register(self, rule: RenderRule) -> None:
        """Register a rule for every tag it declares."""
        for tag in rule.tags:
            existing = self._rules.get(tag)
            if existing is not None and existing.handler is not rule.handler:
                msg = f"Tag '{tag}' is already handled by '{existing.name}'"
                raise ValueError(msg)
            self._rules[tag] = rule

    def register_handler(self, handler: HandlerCallable) -> None:
        """Register a standalone callable decorated with ``@renders``."""
        definition = getattr(handler, "__render_rule__", None)
        if not isinstance(definition, RuleDefinition):
            msg = "Handler must be decorated with @renders"
            raise TypeError(msg)
        self.register(definition.bind(handler))

    def collect_from(self, owner: Any) -> None:
        """Collect decorated callables from an object or module."""
        for attribute in dir(owner):
            handler = getattr(owner, attribute)
            definition = getattr(handler, "__render_rule__", None)
            if isinstance(definition, RuleDefinition):
                self.register(definition.bind(handler))

    def lookup(self, key: str) -> HandlerCallable | None:
        """Return the handler registered for a tag key."""
        rule = self._rules.get(key)
        return rule.handler if rule is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    @property
    def tags(self) -> frozenset[str]:
        """Return the set of supported tag keys."""
        return frozenset(self._rules)

    def describe(self) -> list[dict[str, str]]:
        """Return a serialisable snapshot of the registered rules."""
        return [
            {"tag": tag, "name": self._rules[tag].name} for tag in sorted(self._rules)
        ]


def renders(*tags: str, name: str | None = None) -> Callable[[HandlerCallable], HandlerCallable]:
    """Decorator used to register element handlers."""
    if not tags:
        msg = "@renders requires at least one tag"
        raise TypeError(msg)
    definition = RuleDefinition(tags=tuple(tags), name=name)

    def decorator(handler: HandlerCallable) -> HandlerCallable:
        cast(Any, handler).__render_rule__ = definition
        return handler

    return decorator


__all__ = [
    "HandlerCallable",
    "HandlerRegistry",
    "RenderRule",
    "RuleDefinition",
    "handler_key",
    "renders",
]
