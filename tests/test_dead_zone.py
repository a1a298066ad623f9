import pytest

from enhanced_input.core import ActionValue, ContextTime
from enhanced_input.modifier.dead_zone import DeadZone, DeadZoneKind

TIME = ContextTime()


def _check(result, expected):
    expected = ActionValue.of(expected)
    assert result.dim() is expected.dim()
    assert result.as_axis3d() == pytest.approx(expected.as_axis3d(), rel=1e-5, abs=1e-7)


def _run(modifier, raw):
    return modifier.transform({}, TIME, ActionValue.of(raw))


def test_radial():
    modifier = DeadZone(DeadZoneKind.RADIAL)
    _check(_run(modifier, True), 1.0)
    _check(_run(modifier, False), 0.0)
    _check(_run(modifier, 1.0), 1.0)
    _check(_run(modifier, 0.5), 0.375)
    _check(_run(modifier, 0.2), 0.0)
    _check(_run(modifier, 2.0), 1.0)

    _check(_run(modifier, (0.5, 0.5)), (0.4482233, 0.4482233))
    _check(_run(modifier, (1.0, 1.0)), (0.70710677, 0.70710677))
    _check(_run(modifier, (0.2, 0.2)), (0.07322331, 0.07322331))

    _check(_run(modifier, (0.5, 0.5, 0.5)), (0.48066244,) * 3)
    _check(_run(modifier, (1.0, 1.0, 1.0)), (0.57735026,) * 3)
    _check(_run(modifier, (0.2, 0.2, 0.2)), (0.105662435,) * 3)


def test_axial():
    modifier = DeadZone(DeadZoneKind.AXIAL)
    _check(_run(modifier, True), 1.0)
    _check(_run(modifier, False), 0.0)
    _check(_run(modifier, 1.0), 1.0)
    _check(_run(modifier, 0.5), 0.375)
    _check(_run(modifier, 0.2), 0.0)
    _check(_run(modifier, 2.0), 1.0)
    _check(_run(modifier, (0.5, 0.5)), (0.375, 0.375))
    _check(_run(modifier, (1.0, 1.0)), (1.0, 1.0))
    _check(_run(modifier, (0.2, 0.2)), (0.0, 0.0))
    _check(_run(modifier, (0.5, 0.5, 0.5)), (0.375,) * 3)
    _check(_run(modifier, (1.0, 1.0, 1.0)), (1.0,) * 3)
    _check(_run(modifier, (0.2, 0.2, 0.2)), (0.0,) * 3)


def test_defaults():
    modifier = DeadZone()
    assert modifier.kind is DeadZoneKind.RADIAL
    assert modifier.lower_threshold == 0.2
    assert modifier.upper_threshold == 1.0


def test_sign_is_preserved():
    modifier = DeadZone(DeadZoneKind.AXIAL)
    _check(_run(modifier, -0.5), -0.375)


def test_radial_zero_vector_stays_zero():
    _check(_run(DeadZone(), (0.0, 0.0)), (0.0, 0.0))