"""Byte strings marked with a secrecy."""

from __future__ import annotations

import hmac
from typing import Any

from .hash import HashInto
from .markers import Secrecy

__all__ = ["Slice"]


class Slice(HashInto):
    """Potentially secret bytes of any length.

    Equality is always checked in constant time.
    """

    __slots__ = ("_inner", "secrecy")

    def __init__(
        self, data: bytes | bytearray | memoryview, secrecy: Secrecy = Secrecy.PUBLIC
    ) -> None:
        self._inner = bytes(data)
        self.secrecy = secrecy

    def as_inner(self) -> bytes:
        """The bytes held."""
        return self._inner

    def public(self) -> Slice:
        """The same bytes marked public."""
        return Slice(self._inner, Secrecy.PUBLIC)

    def secret(self) -> Slice:
        """The same bytes marked secret."""
        return Slice(self._inner, Secrecy.SECRET)

    def hash_into(self, hash: Any) -> None:
        hash.update(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return hmac.compare_digest(self._inner, other._inner)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._inner.hex()

    def __bytes__(self) -> bytes:
        return self._inner

    def __len__(self) -> int:
        return len(self._inner)

    def __repr__(self) -> str:
        return f"Slice<{self.secrecy.name.title()}>({self._inner.hex()})"