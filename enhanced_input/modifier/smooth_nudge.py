"""Exponential smoothing of input values."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field, replace

from enhanced_input.core import (
    ActionsQuery,
    ActionValue,
    ContextTime,
    Dim,
    InputModifier,
    TimeKind,
    Vec3,
)

_SNAP_DISTANCE_SQUARED = 1e-4


def _single(component: float) -> float:
    """Round to single precision, the precision the smoothed state is kept in."""
    return struct.unpack("f", struct.pack("f", component))[0]


@dataclass
class SmoothNudge(InputModifier):
    """Smooths the value between the previous and the current input.

    A bool value is transformed into a 1D value.
    """

    decay_rate: float = 8.0
    time_kind: TimeKind = TimeKind.REAL
    current_value: Vec3 = field(default=(0.0, 0.0, 0.0), init=False)

    def with_time_kind(self, kind: TimeKind) -> SmoothNudge:
        """Return a copy that reads the given clock."""
        updated = replace(self, time_kind=kind)
        updated.current_value = self.current_value
        return updated

    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        if value.dim() is Dim.BOOL:
            value = value.convert(Dim.AXIS1D)

        target = value.as_axis3d()
        current = tuple(_single(c) for c in self.current_value)
        distance_squared = sum((t - c) ** 2 for t, c in zip(target, current))
        if distance_squared < _SNAP_DISTANCE_SQUARED:
            self.current_value = target
            return value

        delta = time.delta_kind(self.time_kind)
        factor = 1.0 - math.exp(-self.decay_rate * delta)
        self.current_value = tuple(
            _single(c + (t - c) * factor) for c, t in zip(current, target)
        )
        return ActionValue(self.current_value).convert(value.dim())