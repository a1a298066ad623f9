from enhanced_input.core import ActionValue, ContextTime, Dim
from enhanced_input.modifier.negate import Negate

TIME = ContextTime()
ACTIONS: dict = {}


def apply(modifier, raw):
    return modifier.transform(ACTIONS, TIME, ActionValue.of(raw))


def test_x():
    modifier = Negate.only_x()
    assert apply(modifier, True) == ActionValue(-1.0)
    assert apply(modifier, False) == ActionValue(0.0)
    assert apply(modifier, 0.5) == ActionValue(-0.5)
    assert apply(modifier, (1.0, 1.0)) == ActionValue((-1.0, 1.0))
    assert apply(modifier, (1.0, 1.0, 1.0)) == ActionValue((-1.0, 1.0, 1.0))


def test_y():
    modifier = Negate.only_y()
    assert apply(modifier, True) == ActionValue(1.0)
    assert apply(modifier, False) == ActionValue(0.0)
    assert apply(modifier, 0.5) == ActionValue(0.5)
    assert apply(modifier, (1.0, 1.0)) == ActionValue((1.0, -1.0))
    assert apply(modifier, (1.0, 1.0, 1.0)) == ActionValue((1.0, -1.0, 1.0))


def test_z():
    modifier = Negate.only_z()
    assert apply(modifier, True) == ActionValue(1.0)
    assert apply(modifier, False) == ActionValue(0.0)
    assert apply(modifier, 0.5) == ActionValue(0.5)
    assert apply(modifier, (1.0, 1.0)) == ActionValue((1.0, 1.0))
    assert apply(modifier, (1.0, 1.0, 1.0)) == ActionValue((1.0, 1.0, -1.0))


def test_all():
    modifier = Negate.all()
    assert apply(modifier, True) == ActionValue(-1.0)
    assert apply(modifier, False) == ActionValue(0.0)
    assert apply(modifier, 0.5) == ActionValue(-0.5)
    assert apply(modifier, (1.0, 1.0)) == ActionValue((-1.0, -1.0))
    assert apply(modifier, (1.0, 1.0, 1.0)) == ActionValue((-1.0, -1.0, -1.0))


def test_none_leaves_value_unchanged():
    modifier = Negate.none()
    result = apply(modifier, (1.0, -2.0, 3.0))
    assert result == ActionValue((1.0, -2.0, 3.0))


def test_bool_becomes_axis1d():
    assert apply(Negate.none(), True).dim() is Dim.AXIS1D


def test_default_is_all():
    assert Negate() == Negate.all()
    assert Negate.splat(False) == Negate.none()