import pytest

from enhanced_input.core import ActionValue, ContextTime
from enhanced_input.modifier.scale import Scale


@pytest.mark.parametrize(
    ("factor", "given", "expected"),
    [
        (2.0, True, 2.0),
        (2.0, False, 0.0),
        (2.0, 1.0, 2.0),
        (2.0, (1.0, 1.0), (2.0, 2.0)),
        (2.0, (1.0, 1.0, 1.0), (2.0, 2.0, 2.0)),
        ((1.0, 2.0, 3.0), 4.0, 4.0),
        ((1.0, 2.0, 3.0), (1.0, 1.0), (1.0, 2.0)),
        ((1.0, 2.0, 3.0), (1.0, 1.0, 1.0), (1.0, 2.0, 3.0)),
    ],
)
def test_scaling(factor, given, expected):
    modifier = Scale(factor) if isinstance(factor, tuple) else Scale.splat(factor)
    result = modifier.transform({}, ContextTime(), ActionValue.of(given))
    assert result == ActionValue(expected)


def test_factor_must_have_three_components():
    with pytest.raises(ValueError):
        Scale((1.0, 2.0))