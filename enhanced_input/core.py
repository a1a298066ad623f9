"""Action values, context time and the input modifier protocol."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
RawValue = Union[bool, float, Vec2, Vec3]


class Dim(Enum):
    """Dimension of an action value."""

    BOOL = "bool"
    AXIS1D = "axis1d"
    AXIS2D = "axis2d"
    AXIS3D = "axis3d"


@dataclass(frozen=True)
class ActionValue:
    """A value produced by an input: a bool, a float, or a 2D/3D vector."""

    value: RawValue
    _dim: Dim = field(init=False, repr=False)

    def __post_init__(self) -> None:
        raw = self.value
        if isinstance(raw, bool):
            dim = Dim.BOOL
        elif isinstance(raw, (int, float)):
            raw = float(raw)
            dim = Dim.AXIS1D
        elif isinstance(raw, (tuple, list)):
            if len(raw) == 2:
                dim = Dim.AXIS2D
            elif len(raw) == 3:
                dim = Dim.AXIS3D
            else:
                raise ValueError(f"vector value must have 2 or 3 components, got {len(raw)}")
            raw = tuple(float(component) for component in raw)
        else:
            raise TypeError(f"unsupported action value: {raw!r}")
        object.__setattr__(self, "value", raw)
        object.__setattr__(self, "_dim", dim)

    @classmethod
    def of(cls, value: ActionValue | RawValue) -> ActionValue:
        """Wrap a raw value, passing existing action values through."""
        return value if isinstance(value, cls) else cls(value)

    def dim(self) -> Dim:
        """Return the dimension of this value."""
        return self._dim

    def as_axis3d(self) -> Vec3:
        """Return the value as a 3D vector, padding missing axes with zero."""
        if self._dim is Dim.BOOL:
            return (1.0 if self.value else 0.0, 0.0, 0.0)
        if self._dim is Dim.AXIS1D:
            return (self.value, 0.0, 0.0)
        if self._dim is Dim.AXIS2D:
            x, y = self.value
            return (x, y, 0.0)
        return self.value

    def convert(self, dim: Dim) -> ActionValue:
        """Convert the value into the given dimension."""
        if dim is self._dim:
            return self
        x, y, z = self.as_axis3d()
        if dim is Dim.BOOL:
            if self._dim is Dim.AXIS1D:
                return ActionValue(self.value != 0.0)
            return ActionValue(any(component != 0.0 for component in self.value))
        if dim is Dim.AXIS1D:
            return ActionValue(x)
        if dim is Dim.AXIS2D:
            return ActionValue((x, y))
        return ActionValue((x, y, z))


class TriggerState(Enum):
    """State of an action after its conditions are evaluated."""

    NONE = "none"
    ONGOING = "ongoing"
    FIRED = "fired"


class TimeKind(Enum):
    """Which clock a time-dependent modifier reads."""

    REAL = "real"
    VIRTUAL = "virtual"


@dataclass(frozen=True)
class ContextTime:
    """Frame deltas, in seconds, for each kind of clock."""

    real: float = 0.0
    virtual: float = 0.0

    def delta_kind(self, kind: TimeKind) -> float:
        """Return the frame delta in seconds for the given clock."""
        return self.real if kind is TimeKind.REAL else self.virtual


ActionsQuery = Mapping[Hashable, TriggerState]


class InputModifier(ABC):
    """Pre-processor that alters an action value before conditions are evaluated."""

    @abstractmethod
    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        """Return the transformed value."""


class ModifierRegistry:
    """Ordered modifiers attached to each entity, at most one per modifier type."""

    def __init__(self) -> None:
        self._by_entity: dict[Hashable, list[InputModifier]] = {}

    def add(self, entity: Hashable, modifier: InputModifier) -> None:
        """Attach a modifier; one of the same type already present is replaced in place."""
        modifiers = self._by_entity.setdefault(entity, [])
        for position, existing in enumerate(modifiers):
            if type(existing) is type(modifier):
                modifiers[position] = modifier
                return
        modifiers.append(modifier)

    def remove(self, entity: Hashable, modifier: InputModifier | type) -> None:
        """Detach the modifier of the given type (or of the given instance's type)."""
        kind = modifier if isinstance(modifier, type) else type(modifier)
        modifiers = self._by_entity.get(entity)
        if modifiers is None:
            raise KeyError(f"entity {entity!r} has no modifiers")
        for position, existing in enumerate(modifiers):
            if type(existing) is kind:
                del modifiers[position]
                if not modifiers:
                    del self._by_entity[entity]
                return
        raise KeyError(f"entity {entity!r} has no modifier of type {kind.__name__}")

    def modifiers(self, entity: Hashable) -> list[InputModifier]:
        """Return the entity's modifiers in the order they were added."""
        return list(self._by_entity.get(entity, ()))