"""Per-axis inversion of input values."""

from __future__ import annotations

from dataclasses import dataclass

from enhanced_input.core import (
    ActionsQuery,
    ActionValue,
    ContextTime,
    Dim,
    InputModifier,
)


@dataclass
class Negate(InputModifier):
    """Inverts the value along the selected axes; all axes by default.

    A bool value is transformed into a 1D value.
    """

    x: bool = True
    y: bool = True
    z: bool = True

    @classmethod
    def splat(cls, invert: bool) -> Negate:
        """Set inversion of all axes to `invert`."""
        return cls(invert, invert, invert)

    @classmethod
    def none(cls) -> Negate:
        """Invert no axis."""
        return cls.splat(False)

    @classmethod
    def all(cls) -> Negate:
        """Invert every axis."""
        return cls.splat(True)

    @classmethod
    def only_x(cls) -> Negate:
        """Invert only the X axis."""
        return cls(True, False, False)

    @classmethod
    def only_y(cls) -> Negate:
        """Invert only the Y axis."""
        return cls(False, True, False)

    @classmethod
    def only_z(cls) -> Negate:
        """Invert only the Z axis."""
        return cls(False, False, True)

    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        if value.dim() is Dim.BOOL:
            value = value.convert(Dim.AXIS1D)
        if value.dim() is Dim.AXIS1D:
            return ActionValue(-value.value if self.x else value.value)
        flags = (self.x, self.y, self.z)
        return ActionValue(
            tuple(-c if invert else c for c, invert in zip(value.value, flags))
        )