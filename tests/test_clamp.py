import pytest

from enhanced_input.core import ActionValue, ContextTime
from enhanced_input.modifier.clamp import Clamp

TIME = ContextTime()


def test_clamping():
    modifier = Clamp.splat(0.0, 1.0)
    assert modifier.transform({}, TIME, ActionValue(True)) == ActionValue(1.0)
    assert modifier.transform({}, TIME, ActionValue(False)) == ActionValue(0.0)
    assert modifier.transform({}, TIME, ActionValue(2.0)) == ActionValue(1.0)
    assert modifier.transform({}, TIME, ActionValue(-1.0)) == ActionValue(0.0)
    assert modifier.transform({}, TIME, ActionValue((-1.0, 2.0))) == ActionValue((0.0, 1.0))
    assert modifier.transform({}, TIME, ActionValue((-2.0, 0.5, 3.0))) == ActionValue(
        (0.0, 0.5, 1.0)
    )


def test_pos_zeroes_negatives():
    modifier = Clamp.pos()
    assert modifier.transform({}, TIME, ActionValue(-0.5)) == ActionValue(0.0)
    assert modifier.transform({}, TIME, ActionValue(0.5)) == ActionValue(0.5)


def test_neg_zeroes_positives():
    modifier = Clamp.neg()
    assert modifier.transform({}, TIME, ActionValue(0.5)) == ActionValue(0.0)
    assert modifier.transform({}, TIME, ActionValue(-0.5)) == ActionValue(-0.5)


def test_per_axis_bounds():
    modifier = Clamp((0.0, -1.0, 2.0), (1.0, 0.0, 3.0))
    assert modifier.transform({}, TIME, ActionValue((5.0, 5.0, 5.0))) == ActionValue(
        (1.0, 0.0, 3.0)
    )


def test_inverted_bounds_raise():
    with pytest.raises(ValueError):
        Clamp.splat(1.0, 0.0)