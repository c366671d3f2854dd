"""Arithmetic on the secp256k1 curve and on integers modulo its order.

Scalars are plain integers in ``range(N)``. Points are held in Jacobian
coordinates: the affine point is ``(x / z**2, y / z**3)``, and ``z == 0`` is
the point at infinity.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from dataclasses import dataclass
from typing import SupportsIndex

__all__ = [
    "P",
    "N",
    "GX",
    "GY",
    "ProjectivePoint",
    "G_POINT",
    "IDENTITY",
    "scalar_from_bytes_mod_order",
    "scalar_from_bytes",
    "scalar_to_bytes",
    "scalar_is_high",
    "scalar_invert",
    "double_mul",
    "lincomb",
    "scalar_lincomb",
    "point_x_eq_scalar",
]

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
"""The order of the field the curve is defined over."""

N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""The order of the curve group."""

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

_B = 7


def _on_curve(x: int, y: int) -> bool:
    return (y * y - x * x * x - _B) % P == 0


def _field_from_bytes(data: bytes) -> int | None:
    if len(data) != 32:
        raise ValueError(f"expected 32 bytes, got {len(data)}")
    value = int.from_bytes(data, "big")
    return value if value < P else None


@dataclass(frozen=True, eq=False)
class ProjectivePoint:
    """A curve point in Jacobian coordinates."""

    x: int
    y: int
    z: int = 1

    @classmethod
    def identity(cls) -> ProjectivePoint:
        """The point at infinity."""
        return cls(0, 1, 0)

    def is_zero(self) -> bool:
        """Whether this is the point at infinity."""
        return self.z % P == 0

    def normalize(self) -> ProjectivePoint:
        """The same point with ``z == 1`` (or the canonical identity)."""
        if self.is_zero():
            return ProjectivePoint.identity()
        zinv = pow(self.z, -1, P)
        zinv2 = zinv * zinv % P
        return ProjectivePoint(self.x * zinv2 % P, self.y * zinv2 * zinv % P, 1)

    def _affine(self) -> tuple[int, int]:
        if self.is_zero():
            raise ValueError("the point at infinity has no affine coordinates")
        norm = self.normalize()
        return norm.x, norm.y

    def to_coordinates(self) -> tuple[bytes, bytes]:
        """The affine ``x`` and ``y`` coordinates as 32-byte big-endian values."""
        x, y = self._affine()
        return x.to_bytes(32, "big"), y.to_bytes(32, "big")

    @classmethod
    def from_coordinates(cls, x: bytes, y: bytes) -> ProjectivePoint | None:
        """Build a point from affine coordinates, or None if they are invalid."""
        x_val = _field_from_bytes(bytes(x))
        y_val = _field_from_bytes(bytes(y))
        if x_val is None or y_val is None or not _on_curve(x_val, y_val):
            return None
        return cls(x_val, y_val, 1)

    @classmethod
    def decompress(cls, x_bytes: bytes, y_odd: bool) -> ProjectivePoint | None:
        """The point with the given ``x`` and ``y`` parity, or None if there is none."""
        x = _field_from_bytes(bytes(x_bytes))
        if x is None:
            return None
        rhs = (x * x * x + _B) % P
        y = pow(rhs, (P + 1) // 4, P)
        if y * y % P != rhs:
            return None
        if (y & 1) != bool(y_odd):
            y = (P - y) % P
        return cls(x, y, 1)

    def is_y_even(self) -> bool:
        """Whether the affine ``y`` coordinate is even."""
        _, y = self._affine()
        return y & 1 == 0

    def negate(self) -> ProjectivePoint:
        """The additive inverse of this point."""
        return ProjectivePoint(self.x, (-self.y) % P, self.z)

    def conditional_negate(self, cond: bool) -> ProjectivePoint:
        """This point negated if ``cond`` is true, otherwise unchanged."""
        return self.negate() if cond else self

    def _double(self) -> ProjectivePoint:
        if self.is_zero() or self.y % P == 0:
            return ProjectivePoint.identity()
        x, y, z = self.x, self.y, self.z
        yy = y * y % P
        s = 4 * x * yy % P
        m = 3 * x * x % P
        x3 = (m * m - 2 * s) % P
        y3 = (m * (s - x3) - 8 * yy * yy) % P
        z3 = 2 * y * z % P
        return ProjectivePoint(x3, y3, z3)

    def multiply(self, scalar: SupportsIndex) -> ProjectivePoint:
        """This point multiplied by ``scalar`` (reduced modulo ``N``)."""
        k = operator.index(scalar) % N
        result = ProjectivePoint.identity()
        for bit in bin(k)[2:]:
            result = result._double()
            if bit == "1":
                result = result + self
        return result

    def __add__(self, other: object) -> ProjectivePoint:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        z1z1 = self.z * self.z % P
        z2z2 = other.z * other.z % P
        u1 = self.x * z2z2 % P
        u2 = other.x * z1z1 % P
        s1 = self.y * z2z2 * other.z % P
        s2 = other.y * z1z1 * self.z % P
        if u1 == u2:
            if s1 != s2:
                return ProjectivePoint.identity()
            return self._double()
        h = (u2 - u1) % P
        r = (s2 - s1) % P
        hh = h * h % P
        hhh = hh * h % P
        u1hh = u1 * hh % P
        x3 = (r * r - hhh - 2 * u1hh) % P
        y3 = (r * (u1hh - x3) - s1 * hhh) % P
        z3 = h * self.z * other.z % P
        return ProjectivePoint(x3, y3, z3)

    def __sub__(self, other: object) -> ProjectivePoint:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        return self + other.negate()

    def __neg__(self) -> ProjectivePoint:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectivePoint):
            return NotImplemented
        self_zero, other_zero = self.is_zero(), other.is_zero()
        if self_zero or other_zero:
            return self_zero and other_zero
        z1z1 = self.z * self.z % P
        z2z2 = other.z * other.z % P
        return (self.x * z2z2 - other.x * z1z1) % P == 0 and (
            self.y * z2z2 * other.z - other.y * z1z1 * self.z
        ) % P == 0

    def __hash__(self) -> int:
        norm = self.normalize()
        return hash((norm.x, norm.y, norm.z))


G_POINT = ProjectivePoint(GX, GY, 1)
"""The standard generator of the secp256k1 group."""

IDENTITY = ProjectivePoint.identity()


def _scalar_bytes(data: bytes | bytearray | memoryview) -> bytes:
    raw = bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    return raw


def scalar_from_bytes_mod_order(data: bytes | bytearray | memoryview) -> int:
    """Interpret 32 big-endian bytes as an integer reduced modulo ``N``."""
    return int.from_bytes(_scalar_bytes(data), "big") % N


def scalar_from_bytes(data: bytes | bytearray | memoryview) -> int | None:
    """Interpret 32 big-endian bytes as a scalar, or None if it is not below ``N``."""
    value = int.from_bytes(_scalar_bytes(data), "big")
    return value if value < N else None


def scalar_to_bytes(value: SupportsIndex) -> bytes:
    """The 32-byte big-endian encoding of a scalar."""
    return (operator.index(value) % N).to_bytes(32, "big")


def scalar_is_high(value: SupportsIndex) -> bool:
    """Whether the scalar is greater than ``N // 2``."""
    return operator.index(value) % N > N // 2


def scalar_invert(value: SupportsIndex) -> int:
    """The multiplicative inverse of a non-zero scalar modulo ``N``."""
    k = operator.index(value) % N
    if k == 0:
        raise ValueError("zero has no inverse")
    return pow(k, -1, N)


def double_mul(
    x: SupportsIndex, a: ProjectivePoint, y: SupportsIndex, b: ProjectivePoint
) -> ProjectivePoint:
    """Compute ``x * a + y * b``."""
    return a.multiply(x) + b.multiply(y)


def lincomb(
    points: Iterable[ProjectivePoint], scalars: Iterable[SupportsIndex]
) -> ProjectivePoint:
    """Sum of each point times its scalar; extra items on either side are ignored."""
    total = ProjectivePoint.identity()
    for point, scalar in zip(points, scalars):
        total = total + point.multiply(scalar)
    return total


def scalar_lincomb(
    scalars1: Iterable[SupportsIndex], scalars2: Iterable[SupportsIndex]
) -> int:
    """Dot product of two scalar sequences modulo ``N``; extras are ignored."""
    return sum(
        operator.index(a) * operator.index(b) for a, b in zip(scalars1, scalars2)
    ) % N


def point_x_eq_scalar(point: ProjectivePoint, scalar: SupportsIndex) -> bool:
    """Whether the point's ``x`` coordinate, reduced modulo ``N``, equals ``scalar``."""
    if point.is_zero():
        return False
    x, _ = point._affine()
    return x % N == operator.index(scalar) % N