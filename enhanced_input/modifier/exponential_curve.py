"""Exponential response curve for input values."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from enhanced_input.core import ActionsQuery, ActionValue, ContextTime, Dim, InputModifier, Vec3

_AXIS_COUNT = {Dim.AXIS1D: 1, Dim.AXIS2D: 2, Dim.AXIS3D: 3}


def _per_axis(value: ActionValue, apply: Callable[[float, int], float]) -> ActionValue:
    """Apply `apply(component, axis_index)` to every axis; a bool becomes a 1D value."""
    dim = Dim.AXIS1D if value.dim() is Dim.BOOL else value.dim()
    components = tuple(value.as_axis3d())[: _AXIS_COUNT[dim]]
    result = tuple(apply(component, index) for index, component in enumerate(components))
    return ActionValue(result[0] if len(result) == 1 else result)


def _vec3(components: Iterable[float], what: str) -> Vec3:
    """Return `components` as a 3-component float tuple."""
    vec = tuple(float(c) for c in components)
    if len(vec) != 3:
        raise ValueError(f"{what} must have 3 components")
    return vec


def _apply_exp(value: float, exp: float) -> float:
    return math.copysign(abs(value) ** exp, value)


@dataclass
class ExponentialCurve(InputModifier):
    """Raises the magnitude of each axis to a per-axis exponent, keeping its sign.

    A bool value is transformed into a 1D value.
    """

    exp: Vec3

    def __post_init__(self) -> None:
        self.exp = _vec3(self.exp, "exponent")

    @classmethod
    def splat(cls, value: float) -> ExponentialCurve:
        """Use the same exponent for all axes."""
        return cls((value,) * 3)

    def transform(self, actions: ActionsQuery, time: ContextTime, value: ActionValue) -> ActionValue:
        return _per_axis(value, lambda component, axis: _apply_exp(component, self.exp[axis]))