"""Polynomials over the secp256k1 scalars and points.

A polynomial is given by its coefficients ``a_0, ..., a_k``, constant term
first: ``f(x) = a_0 + a_1 * x + ... + a_k * x**k``. Coefficients are either
:class:`~secpfun.scalar.Scalar` values or
:class:`~secpfun.backend.ProjectivePoint` values.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from . import op
from .backend import G_POINT, ProjectivePoint
from .scalar import Scalar

__all__ = [
    "powers",
    "eval_basis_poly_at_0",
    "scalar_eval",
    "to_point_poly",
    "generate",
    "interpolate_and_eval_poly_at_0",
    "point_eval",
    "point_add",
    "point_interpolate",
]


def powers(x: Scalar) -> Iterator[Scalar]:
    """Yield ``1, x, x**2, x**3, ...`` without end, with the markers of ``x``."""
    current = Scalar.one().mark_zero_choice(x.zero_choice).set_secrecy(x.secrecy)
    while True:
        yield current
        current = (current * x).set_secrecy(x.secrecy)


def eval_basis_poly_at_0(x_j: Scalar, x_ms: Iterable[Scalar]) -> Scalar:
    """Evaluate at 0 the Lagrange basis polynomial for ``x_j`` over the nodes ``x_ms``.

    Nodes equal to ``x_j`` are skipped. The result is public.
    """
    acc = Scalar.one().public()
    for x_m in x_ms:
        if x_m == x_j:
            continue
        denominator = (x_m - x_j).non_zero()
        if denominator is None:
            raise ValueError("indices must be unique")
        acc = (acc * x_m * denominator.invert()).public()
    return acc


def scalar_eval(poly: Sequence[Scalar], x: Scalar) -> Scalar:
    """Evaluate a scalar polynomial at ``x``."""
    return op.scalar_dot_product(poly, powers(x))


def to_point_poly(scalar_poly: Iterable[Scalar]) -> list[ProjectivePoint]:
    """Multiply each coefficient by the generator, giving normalized points."""
    return [op.scalar_mul_point(a, G_POINT).normalize() for a in scalar_poly]


def generate(threshold: int, rng: Any = None) -> list[Scalar]:
    """A random secret polynomial with ``threshold`` coefficients."""
    return [Scalar.random(rng) for _ in range(threshold)]


def interpolate_and_eval_poly_at_0(
    secrets_at_indices: Iterable[tuple[Scalar, Scalar]],
) -> Scalar:
    """Interpolate ``(index, share)`` pairs and evaluate the polynomial at 0.

    This recovers a Shamir-shared secret from its shares.
    """
    pairs = list(secrets_at_indices)
    indices = [index for index, _ in pairs]
    total = Scalar.zero()
    for index, secret in pairs:
        total = total + secret * eval_basis_poly_at_0(index, indices)
    return total


def point_eval(poly: Sequence[ProjectivePoint], x: Scalar) -> ProjectivePoint:
    """Evaluate a point polynomial at ``x``."""
    return op.point_scalar_dot_product(powers(x), poly)


def point_add(
    poly1: Sequence[ProjectivePoint], poly2: Sequence[ProjectivePoint]
) -> list[ProjectivePoint]:
    """Add two point polynomials coefficient by coefficient.

    The shorter polynomial is padded with the point at infinity.
    """
    return [
        a + b
        for a, b in itertools.zip_longest(
            poly1, poly2, fillvalue=ProjectivePoint.identity()
        )
    ]


def point_interpolate(
    points_at_indices: Iterable[tuple[Scalar, ProjectivePoint]],
) -> list[ProjectivePoint]:
    """Coefficients of the point polynomial through the ``(index, point)`` pairs.

    Trailing coefficients at infinity mean the interpolation was overdetermined.
    Raises ValueError if the indices are not unique.
    """
    pairs = list(points_at_indices)
    interpolating: list[ProjectivePoint] = []
    for j, (x_j, y_j) in enumerate(pairs):
        # l_j(x) = product over m != j of (a_m * x + b_m),
        # with a_m = 1 / (x_j - x_m) and b_m = -x_m * a_m.
        basis: list[Scalar] = []
        for m, (x_m, _) in enumerate(pairs):
            if m == j:
                continue
            difference = (x_j - x_m).non_zero()
            if difference is None:
                raise ValueError("points must lie at unique indices to interpolate")
            a_m = difference.invert()
            b_m = (-x_m * a_m).mark_zero()
            if not basis:
                basis = [b_m.public(), a_m.mark_zero().public()]
                continue
            prev = Scalar.zero().public()
            updated = []
            for coeff in basis:
                bumping_up_degree = prev * a_m
                prev = coeff
                same_degree = prev * b_m
                updated.append((same_degree + bumping_up_degree).public())
            updated.append((prev * a_m).public())
            basis = updated
        scaled = [op.scalar_mul_point(coeff, y_j) for coeff in basis]
        interpolating = point_add(interpolating, scaled)
    return interpolating