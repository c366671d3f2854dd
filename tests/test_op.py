import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from secpfun import backend, op
from secpfun.backend import G_POINT, ProjectivePoint
from secpfun.markers import Secrecy, ZeroChoice
from secpfun.scalar import Scalar


def _point_from_hex(text):
    raw = bytes.fromhex(text)
    return ProjectivePoint.decompress(raw[1:], raw[0] == 3)


scalars = st.integers(min_value=1, max_value=backend.N - 1).map(Scalar)
points = st.integers(min_value=1, max_value=backend.N - 1).map(G_POINT.multiply)


def test_double_mul_spec_edgecase():
    s = Scalar.from_hex(
        "45941667583c8cfd65e01f696b1864c5c6a896a2722b6ebaddaf332a31ab42a9"
    )
    minus_c = Scalar.from_hex(
        "90a10ba834c19b1e89c3ce7d7d733a8cd9c16e73c2f7b45aa5495f7a20765a8f"
    ).public().mark_zero()
    x_point = _point_from_hex(
        "02fe8d1eb1bcb3432b1db5833ff5f2226d9cb5e65cee430558c18ed3a3c86ce1af"
    )
    r_implied = op.point_normalize(op.double_mul(s, G_POINT, minus_c, x_point))
    r_expected = _point_from_hex(
        "025cbdf0646e5db4eaa398f365f2ea7a0e3d419b7e0330e39ce92bddedcac4f9bc"
    )
    assert op.point_eq(r_implied, r_expected)


@settings(max_examples=10, deadline=None)
@given(scalars, scalars, scalars, points, points, points)
def test_lincomb_against_mul(a, b, c, pa, pb, pc):
    expected = op.point_add(
        op.scalar_mul_point(a, pa),
        op.point_add(op.scalar_mul_point(b, pb), op.scalar_mul_point(c, pc)),
    )
    assert op.point_scalar_dot_product([a, b, c], [pa, pb, pc]) == expected


def test_dot_product_ignores_excess_items():
    a, b = Scalar.from_int(3), Scalar.from_int(5)
    with_extra = op.point_scalar_dot_product([a, b, Scalar.from_int(7)], [G_POINT, G_POINT])
    assert with_extra == op.scalar_mul_point(Scalar.from_int(8), G_POINT)


def test_scalar_subtraction_is_not_commutative():
    two, three = Scalar.from_int(2), Scalar.from_int(3)
    assert op.scalar_sub(two, three) == Scalar.minus_one()
    assert op.scalar_sub(three, two) == Scalar.one()


@settings(max_examples=30, deadline=None)
@given(scalars, scalars)
def test_scalar_add_sub_round_trip(x, y):
    assert op.scalar_sub(op.scalar_add(x, y), y) == x
    assert op.scalar_eq(op.scalar_add(x, op.scalar_negate(x)), Scalar.zero())


@settings(max_examples=30, deadline=None)
@given(scalars)
def test_scalar_invert(x):
    assert op.scalar_mul(x, op.scalar_invert(x)) == Scalar.one()


def test_scalar_invert_of_zero_marked_raises():
    with pytest.raises(TypeError):
        op.scalar_invert(Scalar.from_int(2))


def test_scalar_mul_markers():
    nz = Scalar.one().public()
    product = op.scalar_mul(nz, Scalar.from_non_zero_u32(2))
    assert (product.secrecy, product.zero_choice) == (Secrecy.SECRET, ZeroChoice.NON_ZERO)
    mixed = op.scalar_mul(nz, Scalar.from_int(2))
    assert mixed.zero_choice is ZeroChoice.ZERO


def test_scalar_negate_keeps_markers():
    x = Scalar.one().public()
    negated = op.scalar_negate(x)
    assert negated == Scalar.minus_one()
    assert negated.secrecy is Secrecy.PUBLIC


def test_scalar_conditional_negate():
    x = Scalar.from_int(3)
    assert op.scalar_conditional_negate(x, False) == x
    assert op.scalar_conditional_negate(x, True) == op.scalar_negate(x)


def test_scalar_is_high_and_zero():
    assert op.scalar_is_high(Scalar.minus_one())
    assert not op.scalar_is_high(Scalar.one())
    assert op.scalar_is_zero(Scalar.zero())
    assert not op.scalar_is_zero(Scalar.one())


def test_point_sub_and_negate():
    two_g = op.scalar_mul_point(Scalar.from_int(2), G_POINT)
    assert op.point_sub(two_g, G_POINT) == G_POINT
    assert op.point_add(G_POINT, op.point_negate(G_POINT)).is_zero()


def test_point_conditional_negate():
    assert op.point_conditional_negate(G_POINT, False) == G_POINT
    assert op.point_conditional_negate(G_POINT, True) == op.point_negate(G_POINT)


def test_point_normalize_keeps_point():
    sum_point = op.point_add(G_POINT, G_POINT)
    normal = op.point_normalize(sum_point)
    assert normal.z == 1
    assert op.point_eq(normal, sum_point)


def test_point_is_y_even():
    assert op.point_is_y_even(G_POINT)
    assert not op.point_is_y_even(op.point_negate(G_POINT))


def test_scalar_dot_product():
    result = op.scalar_dot_product(
        [Scalar.from_int(2), Scalar.from_int(3)],
        [Scalar.from_int(4), Scalar.from_int(5), Scalar.from_int(6)],
    )
    expected = op.scalar_add(
        op.scalar_mul(Scalar.from_int(2), Scalar.from_int(4)),
        op.scalar_mul(Scalar.from_int(3), Scalar.from_int(5)),
    )
    assert result == expected