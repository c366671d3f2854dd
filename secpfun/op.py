"""Operations on secp256k1 scalars and points.

Scalars are :class:`~secpfun.scalar.Scalar` values. Points are
:class:`~secpfun.backend.ProjectivePoint` values. Results carry the secrecy and
zero-choice markers that the operation guarantees.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import backend
from .backend import ProjectivePoint
from .markers import Secrecy, ZeroChoice
from .scalar import Scalar

__all__ = [
    "double_mul",
    "scalar_mul_point",
    "scalar_mul",
    "scalar_add",
    "scalar_sub",
    "scalar_eq",
    "scalar_negate",
    "scalar_invert",
    "scalar_conditional_negate",
    "scalar_is_high",
    "scalar_is_zero",
    "point_sub",
    "point_add",
    "point_eq",
    "point_negate",
    "point_conditional_negate",
    "point_normalize",
    "point_scalar_dot_product",
    "scalar_dot_product",
    "point_is_y_even",
]


def double_mul(
    x: Scalar, a: ProjectivePoint, y: Scalar, b: ProjectivePoint
) -> ProjectivePoint:
    """Compute ``x * a + y * b``."""
    return backend.double_mul(x.value, a, y.value, b)


def scalar_mul_point(x: Scalar, point: ProjectivePoint) -> ProjectivePoint:
    """Multiply ``point`` by the scalar ``x``."""
    return point.multiply(x.value)


def scalar_mul(x: Scalar, y: Scalar) -> Scalar:
    """Multiply two scalars modulo the curve order."""
    return Scalar(
        x.value * y.value % backend.N,
        Secrecy.SECRET,
        x.zero_choice.decide(y.zero_choice),
    )


def scalar_add(x: Scalar, y: Scalar) -> Scalar:
    """Add two scalars modulo the curve order."""
    return Scalar((x.value + y.value) % backend.N, Secrecy.SECRET, ZeroChoice.ZERO)


def scalar_sub(x: Scalar, y: Scalar) -> Scalar:
    """Subtract ``y`` from ``x`` modulo the curve order."""
    return Scalar((x.value - y.value) % backend.N, Secrecy.SECRET, ZeroChoice.ZERO)


def scalar_eq(x: Scalar, y: Scalar) -> bool:
    """Whether two scalars are equal, whatever their markers."""
    return x == y


def scalar_negate(x: Scalar) -> Scalar:
    """The negation of ``x``, keeping its markers."""
    return -x


def scalar_invert(x: Scalar) -> Scalar:
    """The multiplicative inverse of a scalar marked non-zero."""
    return x.invert()


def scalar_conditional_negate(x: Scalar, cond: bool) -> Scalar:
    """``x`` negated if ``cond`` is true, otherwise ``x`` unchanged."""
    return x.conditional_negate(cond)


def scalar_is_high(x: Scalar) -> bool:
    """Whether ``x`` is greater than half the curve order."""
    return x.is_high()


def scalar_is_zero(x: Scalar) -> bool:
    """Whether ``x`` is zero."""
    return x.is_zero()


def point_sub(a: ProjectivePoint, b: ProjectivePoint) -> ProjectivePoint:
    """Compute ``a - b``."""
    return a - b


def point_add(a: ProjectivePoint, b: ProjectivePoint) -> ProjectivePoint:
    """Compute ``a + b``."""
    return a + b


def point_eq(a: ProjectivePoint, b: ProjectivePoint) -> bool:
    """Whether two points are the same group element."""
    return a == b


def point_negate(a: ProjectivePoint) -> ProjectivePoint:
    """The additive inverse of ``a``."""
    return a.negate()


def point_conditional_negate(a: ProjectivePoint, cond: bool) -> ProjectivePoint:
    """``a`` negated if ``cond`` is true, otherwise ``a`` unchanged."""
    return a.conditional_negate(cond)


def point_normalize(a: ProjectivePoint) -> ProjectivePoint:
    """``a`` in affine form (``z == 1``), or the canonical identity."""
    return a.normalize()


def point_scalar_dot_product(
    scalars: Iterable[Scalar], points: Iterable[ProjectivePoint]
) -> ProjectivePoint:
    """Sum of each point times its scalar.

    Excess items in the longer of the two iterables are ignored, as if
    multiplied by zero.
    """
    return backend.lincomb(points, (scalar.value for scalar in scalars))


def scalar_dot_product(scalars1: Iterable[Scalar], scalars2: Iterable[Scalar]) -> Scalar:
    """Dot product of two scalar sequences; excess items are ignored."""
    value = backend.scalar_lincomb(
        (s.value for s in scalars1), (s.value for s in scalars2)
    )
    return Scalar(value, Secrecy.SECRET, ZeroChoice.ZERO)


def point_is_y_even(a: ProjectivePoint) -> bool:
    """Whether the affine ``y`` coordinate of a non-zero point is even."""
    return a.is_y_even()