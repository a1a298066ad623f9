"""Accumulation of input values while another action fires."""

from __future__ import annotations

import logging
import operator
from collections.abc import Hashable
from dataclasses import dataclass, field

from enhanced_input.core import ActionsQuery, ActionValue, ContextTime, InputModifier, TriggerState, Vec3

logger = logging.getLogger(__name__)


@dataclass
class AccumulateBy(InputModifier):
    """Sums input values across frames while `action` is fired.

    When the action is not fired, the accumulation restarts from the
    current frame's value.
    """

    action: Hashable
    value: Vec3 = field(default=(0.0, 0.0, 0.0), init=False)

    def transform(self, actions: ActionsQuery, time: ContextTime, value: ActionValue) -> ActionValue:
        state = actions.get(self.action)
        if state is None:
            logger.warning("`%s` is not a valid action", self.action)
            return value

        current = tuple(value.as_axis3d())
        if state is TriggerState.FIRED:
            self.value = tuple(map(operator.add, self.value, current))
        else:
            self.value = current
        return ActionValue(self.value).convert(value.dim())