"""Constant-rate stepping of input values toward their target."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from enhanced_input.core import (
    ActionsQuery,
    ActionValue,
    ContextTime,
    Dim,
    InputModifier,
    Vec3,
)

logger = logging.getLogger(__name__)


def _signum(component: float) -> float:
    if math.isnan(component):
        return math.nan
    return math.copysign(1.0, component)


@dataclass
class LinearStep(InputModifier):
    """Steps the value toward the target at a constant linear rate.

    Rates are fractions of the distance per frame, between 0.0 (no movement)
    and 1.0 (snap to the target). A bool value is transformed into a 1D value.
    """

    accel_step_rate: float
    decel_step_rate: float
    current_value: Vec3 = field(default=(0.0, 0.0, 0.0), init=False)

    @classmethod
    def splat(cls, step_rate: float) -> LinearStep:
        """Use the same rate for acceleration and deceleration."""
        return cls(step_rate, step_rate)

    def transform(
        self, actions: ActionsQuery, time: ContextTime, value: ActionValue
    ) -> ActionValue:
        if value.dim() is Dim.BOOL:
            value = value.convert(Dim.AXIS1D)

        target = value.as_axis3d()
        current = tuple(self.current_value)
        diff = math.hypot(*target) - math.hypot(*current)
        step_rate = self.accel_step_rate if diff > 0.0 else self.decel_step_rate

        if not 0.0 <= step_rate <= 1.0:
            logger.warning("step rate can't be outside 0.0..=1.0: %s", step_rate)
            return value

        # Snap if the distance is less than one step.
        if math.dist(current, target) <= step_rate:
            self.current_value = target
            return value

        if diff == 0.0:
            return value
        if diff > 0.0:
            self.current_value = tuple(c + step_rate * t for c, t in zip(current, target))
        else:
            self.current_value = tuple(c - step_rate * _signum(c) for c in current)

        return ActionValue(self.current_value).convert(value.dim())