"""Keeping input context activity in step with application states."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveInStates:
    """The states in which a context is active; it is inactive in all others."""

    states: tuple[Any, ...]

    def __init__(self, states: Iterable[Any]) -> None:
        object.__setattr__(self, "states", tuple(states))

    @classmethod
    def single(cls, state: Any) -> ActiveInStates:
        """Create an instance active in one state only."""
        return cls((state,))

    def matches(self, current: Any) -> bool:
        """Return whether `current` is one of the active states."""
        return current in self.states

    def matches_state(self, current: Any | None) -> bool:
        """Return whether a state exists (is not None) and is one of the active states."""
        return current is not None and self.matches(current)


@dataclass
class StateContextSync:
    """Tracks the activity of one context across entities as the state changes.

    A current state of None means the state does not exist, as happens for
    sub-states and computed states whose source does not produce them.
    """

    context: str = "context"
    _active_in: dict[Hashable, ActiveInStates] = field(
        default_factory=dict, init=False, repr=False
    )
    _activity: dict[Hashable, bool] = field(default_factory=dict, init=False, repr=False)

    def insert(
        self, entity: Hashable, active_in: ActiveInStates, current_state: Any | None
    ) -> bool:
        """Attach `active_in` to an entity and set its activity for the current state.

        Returns the resulting activity.
        """
        self._active_in[entity] = active_in
        active = active_in.matches_state(current_state)
        self.set_activity(entity, active)
        return active

    def transition(self, entered: Any | None) -> dict[Hashable, bool]:
        """Update every tracked entity for the newly entered state.

        Returns the activity of each tracked entity after the update.
        """
        for entity, active_in in self._active_in.items():
            self.set_activity(entity, active_in.matches_state(entered))
        return {entity: self._activity[entity] for entity in self._active_in}

    def is_active(self, entity: Hashable) -> bool:
        """Return the entity's current activity."""
        try:
            return self._activity[entity]
        except KeyError:
            raise KeyError(f"no `{self.context}` activity for entity {entity!r}") from None

    def set_activity(self, entity: Hashable, active: bool) -> bool:
        """Set the entity's activity; return whether it changed."""
        if self._activity.get(entity) == active:
            return False
        logger.debug("setting `%s` on `%s` to `%s`", self.context, entity, active)
        self._activity[entity] = active
        return True