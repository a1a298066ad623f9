"""Dead zone normalization for analog and digital inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from enhanced_input.core import ActionsQuery, ActionValue, ContextTime, Dim, InputModifier
from enhanced_input.modifier.exponential_curve import _per_axis


class DeadZoneKind(Enum):
    """How axes are processed by a dead zone."""

    RADIAL = "radial"
    """Apply the dead zone to all axes together (circular/spherical coverage)."""
    AXIAL = "axial"
    """Apply the dead zone to each axis separately."""


@dataclass
class DeadZone(InputModifier):
    """Remaps values between the thresholds to 0..1 and clamps the rest.

    A bool value is transformed into a 1D value.
    """

    kind: DeadZoneKind = DeadZoneKind.RADIAL
    lower_threshold: float = 0.2
    upper_threshold: float = 1.0

    def _dead_zone(self, axis_value: float) -> float:
        if math.isnan(axis_value):
            return math.nan
        lower_bound = max(abs(axis_value) - self.lower_threshold, 0.0)
        scaled = lower_bound / (self.upper_threshold - self.lower_threshold)
        return min(scaled, 1.0) * math.copysign(1.0, axis_value)

    def transform(self, actions: ActionsQuery, time: ContextTime, value: ActionValue) -> ActionValue:
        if self.kind is DeadZoneKind.AXIAL or value.dim() in (Dim.BOOL, Dim.AXIS1D):
            return _per_axis(value, lambda component, _axis: self._dead_zone(component))

        components = value.value
        length = math.hypot(*components)
        if length == 0.0 or not math.isfinite(length):
            return ActionValue(tuple(0.0 for _ in components))
        scale = self._dead_zone(length)
        return ActionValue(tuple(c / length * scale for c in components))