"""Common behaviour of binding presets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import fields, replace
from typing import Any, TypeVar

P = TypeVar("P", bound="Preset")


def _flatten(parts: Iterable[Any]) -> Iterator[Any]:
    for part in parts:
        if isinstance(part, tuple):
            yield from _flatten(part)
        else:
            yield part


class Preset(ABC):
    """A group of bindings that together map several inputs onto one action.

    Each field of a preset is a bundle: a single component or a tuple of
    components (a binding plus any modifiers). :meth:`bindings` returns one
    flat tuple of components for every binding entity the preset produces.
    """

    def with_bundle(self: P, bundle: Any) -> P:
        """Return a copy in which `bundle` is added to every field.

        Adding a modifier type that the preset already uses for a field,
        such as a swizzle or a negation, makes :meth:`bindings` fail.
        """
        return replace(
            self, **{f.name: (getattr(self, f.name), bundle) for f in fields(self)}
        )

    @abstractmethod
    def bindings(self) -> list[tuple[Any, ...]]:
        """Return the components of each binding entity, in spawn order."""

    def size_hint(self) -> int:
        """Return how many binding entities the preset produces."""
        return len(fields(self))

    @staticmethod
    def _entity(*parts: Any) -> tuple[Any, ...]:
        """Flatten bundles into one entity, rejecting duplicate component types."""
        components = tuple(_flatten(parts))
        seen: set[type] = set()
        for component in components:
            kind = type(component)
            if kind in seen:
                raise ValueError(
                    f"duplicate component `{kind.__name__}` in binding {components!r}"
                )
            seen.add(kind)
        return components