"""Reordering of the axes of input values."""

from __future__ import annotations

from enum import Enum

from enhanced_input.core import (
    ActionsQuery,
    ActionValue,
    ContextTime,
    Dim,
    InputModifier,
)

_AXES = "XYZ"


class SwizzleAxis(Enum):
    """Swizzles the axis components of an input value.

    The original dimension is kept where possible. When an axis is moved
    to a higher position the value is promoted to a larger dimension, and
    missing axes are filled with zero. A bool value is treated as a 1D value.
    """

    YXZ = "YXZ"
    """Swap X and Y; binds 1D inputs to the Y axis of 2D actions."""
    ZYX = "ZYX"
    """Swap X and Z."""
    XZY = "XZY"
    """Swap Y and Z."""
    YZX = "YZX"
    """Reorder all axes, Y first."""
    ZXY = "ZXY"
    """Reorder all axes, Z first."""
    XXY = "XXY"
    """Replace Z with Y."""
    XXZ = "XXZ"
    """Replace Y and Z with X."""
    YYX = "YYX"
    """Replace X and Z with Y."""
    YYZ = "YYZ"
    """Replace X and Z with Y and Z respectively."""
    ZZX = "ZZX"
    """Replace X and Y with Z."""
    ZZY = "ZZY"
    """Replace X and Y with Z and Y respectively."""
    XXX = "XXX"
    """Replace all axes with X."""
    YYY = "YYY"
    """Replace all axes with Y."""
    ZZZ = "ZZZ"
    """Replace all axes with Z."""

    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        """Return the value with its axes reordered."""
        if value.dim() is Dim.BOOL:
            value = value.convert(Dim.AXIS1D)
        if value.dim() is Dim.AXIS1D:
            return ActionValue(self._swizzle_1d(value.value))
        if value.dim() is Dim.AXIS2D:
            return ActionValue(self._swizzle_2d(value.value))
        return ActionValue(tuple(value.value[_AXES.index(axis)] for axis in self.value))

    def _swizzle_1d(self, v: float):
        if self in (SwizzleAxis.YXZ, SwizzleAxis.ZXY):
            return (0.0, v)
        if self in (SwizzleAxis.ZYX, SwizzleAxis.YZX, SwizzleAxis.YYX, SwizzleAxis.ZZX):
            return (0.0, 0.0, v)
        if self is SwizzleAxis.XZY:
            return v
        if self in (SwizzleAxis.XXY, SwizzleAxis.XXZ):
            return (v, v)
        if self is SwizzleAxis.XXX:
            return (v, v, v)
        # YYZ, YYY, ZZZ, ZZY: the only axis present is moved away.
        return 0.0

    def _swizzle_2d(self, vector):
        x, y = vector
        return {
            SwizzleAxis.YXZ: (y, x),
            SwizzleAxis.ZYX: (0.0, y, x),
            SwizzleAxis.XZY: (x, 0.0, y),
            SwizzleAxis.YZX: (y, 0.0, x),
            SwizzleAxis.ZXY: (0.0, x, y),
            SwizzleAxis.XXY: (x, x, y),
            SwizzleAxis.XXZ: (x, x),
            SwizzleAxis.YYX: (y, y, x),
            SwizzleAxis.YYZ: (y, y),
            SwizzleAxis.ZZX: (0.0, 0.0, x),
            SwizzleAxis.ZZY: (0.0, 0.0, y),
            SwizzleAxis.XXX: (x, x, x),
            SwizzleAxis.YYY: (y, y, y),
            SwizzleAxis.ZZZ: (0.0, 0.0),
        }[self]


InputModifier.register(SwizzleAxis)