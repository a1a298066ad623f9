"""Per-axis scaling of input values."""

from __future__ import annotations

from dataclasses import dataclass

from enhanced_input.core import ActionsQuery, ActionValue, ContextTime, InputModifier, Vec3
from enhanced_input.modifier.exponential_curve import _per_axis, _vec3


@dataclass
class Scale(InputModifier):
    """Multiplies each axis of the input by the matching factor.

    A bool value is converted into a 1D value.
    """

    factor: Vec3

    def __post_init__(self) -> None:
        self.factor = _vec3(self.factor, "scale factor")

    @classmethod
    def splat(cls, value: float) -> Scale:
        """Use the same factor for all axes."""
        return cls((value,) * 3)

    def transform(self, actions: ActionsQuery, time: ContextTime, value: ActionValue) -> ActionValue:
        return _per_axis(value, lambda component, axis: component * self.factor[axis])