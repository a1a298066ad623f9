"""Scaling of input values by frame delta time."""

from __future__ import annotations

from dataclasses import dataclass

from enhanced_input.core import ActionsQuery, ActionValue, ContextTime, InputModifier, TimeKind
from enhanced_input.modifier.exponential_curve import _per_axis


@dataclass
class DeltaScale(InputModifier):
    """Multiplies the input value by this frame's delta time.

    A bool value is transformed into a 1D value.
    """

    time_kind: TimeKind = TimeKind.REAL

    def transform(self, actions: ActionsQuery, time: ContextTime, value: ActionValue) -> ActionValue:
        delta = time.delta_kind(self.time_kind)
        return _per_axis(value, lambda component, _axis: component * delta)