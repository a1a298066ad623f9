"""Per-axis clamping of input values."""

from __future__ import annotations

from dataclasses import dataclass

from enhanced_input.core import (
    ActionsQuery,
    ActionValue,
    ContextTime,
    Dim,
    InputModifier,
    Vec3,
)

F32_MAX = 3.4028234663852886e38


@dataclass
class Clamp(InputModifier):
    """Restricts input to an interval independently along each axis.

    A bool value is converted into a 1D value before clamping.
    """

    min_value: Vec3
    max_value: Vec3

    def __post_init__(self) -> None:
        self.min_value = tuple(float(c) for c in self.min_value)
        self.max_value = tuple(float(c) for c in self.max_value)
        if len(self.min_value) != 3 or len(self.max_value) != 3:
            raise ValueError("clamp bounds must have 3 components")
        if any(lo > hi for lo, hi in zip(self.min_value, self.max_value)):
            raise ValueError("clamp minimum must not exceed maximum")

    @classmethod
    def pos(cls) -> Clamp:
        """Clamp all axes to non-negative values."""
        return cls.splat(0.0, F32_MAX)

    @classmethod
    def neg(cls) -> Clamp:
        """Clamp all axes to non-positive values."""
        return cls.splat(-F32_MAX, 0.0)

    @classmethod
    def splat(cls, min_value: float, max_value: float) -> Clamp:
        """Use the same bounds for all axes."""
        return cls((min_value,) * 3, (max_value,) * 3)

    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        if value.dim() is Dim.BOOL:
            value = value.convert(Dim.AXIS1D)
        if value.dim() is Dim.AXIS1D:
            return ActionValue(_clamp(value.value, self.min_value[0], self.max_value[0]))
        return ActionValue(
            tuple(
                _clamp(component, lo, hi)
                for component, lo, hi in zip(value.value, self.min_value, self.max_value)
            )
        )


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))