"""Markers for the secrecy, zero-ness and representation of values."""

from __future__ import annotations

import enum

__all__ = ["Secrecy", "ZeroChoice", "PointType"]


class Secrecy(enum.Enum):
    """Whether a value must be kept secret or may be known to everyone."""

    SECRET = "secret"
    PUBLIC = "public"


class ZeroChoice(enum.Enum):
    """Whether a value might be zero or is known to be non-zero."""

    ZERO = "zero"
    NON_ZERO = "non_zero"

    def is_zero(self) -> bool:
        """Whether the value might be zero."""
        return self is ZeroChoice.ZERO

    def decide(self, other: ZeroChoice) -> ZeroChoice:
        """The zero choice of a product: non-zero only when both are non-zero."""
        return other if self is ZeroChoice.NON_ZERO else ZeroChoice.ZERO


class PointType(enum.Enum):
    """How a point is represented internally."""

    NORMAL = "normal"
    NON_NORMAL = "non_normal"
    EVEN_Y = "even_y"
    BASE_POINT = "base_point"

    def is_normalized(self) -> bool:
        """Whether the point uses affine coordinates."""
        return self is not PointType.NON_NORMAL

    def negation_type(self) -> PointType:
        """The point type of the negation of a point of this type."""
        return PointType.NORMAL if self.is_normalized() else PointType.NON_NORMAL