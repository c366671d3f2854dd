import pytest

from secpfun.markers import PointType, ZeroChoice


def test_is_zero():
    assert ZeroChoice.ZERO.is_zero() is True
    assert ZeroChoice.NON_ZERO.is_zero() is False


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (ZeroChoice.NON_ZERO, ZeroChoice.NON_ZERO, ZeroChoice.NON_ZERO),
        (ZeroChoice.NON_ZERO, ZeroChoice.ZERO, ZeroChoice.ZERO),
        (ZeroChoice.ZERO, ZeroChoice.NON_ZERO, ZeroChoice.ZERO),
        (ZeroChoice.ZERO, ZeroChoice.ZERO, ZeroChoice.ZERO),
    ],
)
def test_decide(left, right, expected):
    assert left.decide(right) is expected


def test_decide_with_self_is_self():
    assert ZeroChoice.ZERO.decide(ZeroChoice.ZERO) is ZeroChoice.ZERO
    assert ZeroChoice.NON_ZERO.decide(ZeroChoice.NON_ZERO) is ZeroChoice.NON_ZERO


@pytest.mark.parametrize(
    "point_type, normalized",
    [
        (PointType.NORMAL, True),
        (PointType.EVEN_Y, True),
        (PointType.BASE_POINT, True),
        (PointType.NON_NORMAL, False),
    ],
)
def test_is_normalized(point_type, normalized):
    assert point_type.is_normalized() is normalized


@pytest.mark.parametrize(
    "point_type, negated",
    [
        (PointType.NORMAL, PointType.NORMAL),
        (PointType.EVEN_Y, PointType.NORMAL),
        (PointType.BASE_POINT, PointType.NORMAL),
        (PointType.NON_NORMAL, PointType.NON_NORMAL),
    ],
)
def test_negation_type(point_type, negated):
    assert point_type.negation_type() is negated


def test_negation_keeps_normalization():
    assert PointType.NORMAL.negation_type().is_normalized() is True
    assert PointType.EVEN_Y.negation_type().is_normalized() is True
    assert PointType.BASE_POINT.negation_type().is_normalized() is True
    assert PointType.NON_NORMAL.negation_type().is_normalized() is False