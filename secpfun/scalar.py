"""Integers modulo the order of the secp256k1 group."""

from __future__ import annotations

import functools
import hmac
import operator
import os
from dataclasses import dataclass
from typing import Any, SupportsIndex

from . import backend
from .hash import HashInto
from .hex import HexError, HexErrorKind, decode_array
from .markers import Secrecy, ZeroChoice

__all__ = ["Scalar"]

_U32_MAX = 0xFFFFFFFF


def _random_bytes(rng: Any, size: int) -> bytes:
    if rng is None:
        return os.urandom(size)
    fill = getattr(rng, "fill_bytes", None)
    if callable(fill):
        data = bytes(fill(size))
    else:
        data = bytes(rng.randbytes(size))
    if len(data) != size:
        raise ValueError(f"rng produced {len(data)} bytes instead of {size}")
    return data


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Scalar(HashInto):
    """An integer modulo the curve order, marked with a secrecy and a zero choice.

    Scalars are secret and non-zero unless marked otherwise. Equality ignores
    the markers and is checked in constant time. Only public scalars can be
    ordered or hashed.
    """

    value: int
    secrecy: Secrecy = Secrecy.SECRET
    zero_choice: ZeroChoice = ZeroChoice.NON_ZERO

    def __post_init__(self) -> None:
        value = operator.index(self.value)
        if not 0 <= value < backend.N:
            raise ValueError("scalar value must lie in range(N)")
        if value == 0 and self.zero_choice is ZeroChoice.NON_ZERO:
            raise ValueError("a scalar marked non-zero cannot be zero")
        object.__setattr__(self, "value", value)

    # --- conversions -----------------------------------------------------

    def to_bytes(self) -> bytes:
        """The 32-byte big-endian encoding."""
        return backend.scalar_to_bytes(self.value)

    def conditional_negate(self, cond: bool) -> Scalar:
        """This scalar negated if ``cond`` is true, otherwise unchanged."""
        return -self if cond else self

    def is_high(self) -> bool:
        """Whether the scalar is greater than half the curve order."""
        return backend.scalar_is_high(self.value)

    def is_zero(self) -> bool:
        """Whether the scalar is zero."""
        return self.value == 0

    def _with(self, secrecy: Secrecy, zero_choice: ZeroChoice) -> Scalar:
        return Scalar(self.value, secrecy, zero_choice)

    def set_secrecy(self, secrecy: Secrecy) -> Scalar:
        """The same scalar with the given secrecy."""
        return self._with(secrecy, self.zero_choice)

    def public(self) -> Scalar:
        """The same scalar marked public."""
        return self.set_secrecy(Secrecy.PUBLIC)

    def secret(self) -> Scalar:
        """The same scalar marked secret."""
        return self.set_secrecy(Secrecy.SECRET)

    def mark_zero(self) -> Scalar:
        """The same scalar marked as possibly zero."""
        return self._with(self.secrecy, ZeroChoice.ZERO)

    def mark_zero_choice(self, zero: ZeroChoice) -> Scalar:
        """Give a non-zero scalar the zero choice ``zero``."""
        if self.zero_choice is not ZeroChoice.NON_ZERO:
            raise TypeError("only a scalar marked non-zero can take a new zero choice")
        return self._with(self.secrecy, zero)

    def non_zero(self) -> Scalar | None:
        """The same scalar marked non-zero, or None if it is zero."""
        if self.is_zero():
            return None
        return self._with(self.secrecy, ZeroChoice.NON_ZERO)

    def invert(self) -> Scalar:
        """The multiplicative inverse modulo the curve order."""
        if self.zero_choice is not ZeroChoice.NON_ZERO:
            raise TypeError("only a scalar marked non-zero can be inverted")
        return Scalar(backend.scalar_invert(self.value), self.secrecy, ZeroChoice.NON_ZERO)

    # --- constructors ----------------------------------------------------

    @classmethod
    def one(cls) -> Scalar:
        """The integer 1."""
        return cls(1, Secrecy.SECRET, ZeroChoice.NON_ZERO)

    @classmethod
    def minus_one(cls) -> Scalar:
        """The integer -1 modulo the curve order."""
        return cls(backend.N - 1, Secrecy.SECRET, ZeroChoice.NON_ZERO)

    @classmethod
    def zero(cls) -> Scalar:
        """The integer 0."""
        return cls(0, Secrecy.SECRET, ZeroChoice.ZERO)

    @classmethod
    def random(cls, rng: Any = None) -> Scalar:
        """A uniformly random non-zero secret scalar.

        ``rng`` may offer ``fill_bytes(size)`` or ``randbytes(size)``; without
        one the operating system's randomness is used.
        """
        scalar = cls.from_bytes_mod_order(_random_bytes(rng, 32)).non_zero()
        if scalar is None:
            raise RuntimeError("computationally unreachable")
        return scalar

    @classmethod
    def from_hash(cls, hash: Any) -> Scalar:
        """Reduce the 32-byte output of ``hash`` modulo the curve order."""
        digest = hash.digest()
        if len(digest) != 32:
            raise ValueError(f"hash output must be 32 bytes, got {len(digest)}")
        scalar = cls.from_bytes_mod_order(digest).non_zero()
        if scalar is None:
            raise RuntimeError("computationally unreachable")
        return scalar

    @classmethod
    def from_int(cls, value: SupportsIndex) -> Scalar:
        """A secret scalar, possibly zero, from an unsigned 32-bit integer."""
        if isinstance(value, bool):
            raise TypeError("expected an integer, got a bool")
        number = operator.index(value)
        if not 0 <= number <= _U32_MAX:
            raise ValueError(f"{number} is not an unsigned 32-bit integer")
        return cls(number, Secrecy.SECRET, ZeroChoice.ZERO)

    @classmethod
    def from_non_zero_u32(cls, value: SupportsIndex) -> Scalar:
        """A secret non-zero scalar from a non-zero unsigned 32-bit integer."""
        if isinstance(value, bool):
            raise TypeError("expected an integer, got a bool")
        number = operator.index(value)
        if not 1 <= number <= _U32_MAX:
            raise ValueError(f"{number} is not a non-zero unsigned 32-bit integer")
        return cls(number, Secrecy.SECRET, ZeroChoice.NON_ZERO)

    @classmethod
    def from_bytes_mod_order(cls, data: bytes | bytearray | memoryview) -> Scalar:
        """Reduce 32 big-endian bytes modulo the curve order."""
        return cls(backend.scalar_from_bytes_mod_order(data), Secrecy.SECRET, ZeroChoice.ZERO)

    @classmethod
    def from_slice_mod_order(cls, data: bytes | bytearray | memoryview) -> Scalar | None:
        """Like ``from_bytes_mod_order`` but None unless there are exactly 32 bytes."""
        raw = bytes(data)
        if len(raw) != 32:
            return None
        return cls.from_bytes_mod_order(raw)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Scalar | None:
        """Scalar from 32 big-endian bytes, or None if not below the curve order."""
        value = backend.scalar_from_bytes(data)
        if value is None:
            return None
        return cls(value, Secrecy.SECRET, ZeroChoice.ZERO)

    @classmethod
    def from_slice(cls, data: bytes | bytearray | memoryview) -> Scalar | None:
        """Like ``from_bytes`` but None unless there are exactly 32 bytes."""
        raw = bytes(data)
        if len(raw) != 32:
            return None
        return cls.from_bytes(raw)

    @classmethod
    def from_hex(cls, text: str) -> Scalar:
        """Parse 64 hex digits; the result is marked non-zero unless it is zero."""
        scalar = cls.from_bytes(decode_array(text, 32))
        if scalar is None:
            raise HexError(HexErrorKind.INVALID_ENCODING)
        return scalar.non_zero() or scalar

    # --- protocols -------------------------------------------------------

    def hash_into(self, hash: Any) -> None:
        hash.update(self.to_bytes())

    def __neg__(self) -> Scalar:
        return Scalar((-self.value) % backend.N, self.secrecy, self.zero_choice)

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value + other.value) % backend.N, Secrecy.SECRET, ZeroChoice.ZERO)

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value - other.value) % backend.N, Secrecy.SECRET, ZeroChoice.ZERO)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(
            self.value * other.value % backend.N,
            Secrecy.SECRET,
            self.zero_choice.decide(other.zero_choice),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        if self.secrecy is not Secrecy.PUBLIC or other.secrecy is not Secrecy.PUBLIC:
            raise TypeError("only public scalars can be ordered")
        return self.to_bytes() < other.to_bytes()

    def __hash__(self) -> int:
        if self.secrecy is not Secrecy.PUBLIC:
            raise TypeError("only public scalars are hashable")
        return hash(self.to_bytes())

    def __str__(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self) -> str:
        secrecy = "Secret" if self.secrecy is Secrecy.SECRET else "Public"
        zero = "Zero" if self.zero_choice is ZeroChoice.ZERO else "NonZero"
        return f"Scalar<{secrecy},{zero}>({self})"