"""Nonce generation.

A nonce generator starts a hash that appears random to anyone who does not
know the secret passed to it. The caller then adds the secret input and all
public inputs of the scheme to that hash and turns it into a scalar.
"""

from __future__ import annotations

import hashlib
import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any

from . import hash as hashing
from .scalar import Scalar

__all__ = ["NonceRng", "GlobalRng", "LockedRng", "Deterministic", "Synthetic", "NoNonces"]

_NONCE_SUFFIX = b"/nonce"
_AUX_SUFFIX = b"/aux"


def _check_output_size(hash: Any) -> None:
    if hash.digest_size != 32:
        raise ValueError(f"nonce hash must output 32 bytes, not {hash.digest_size}")


class NonceRng(ABC):
    """A source of randomness that can be used without being mutated by the caller."""

    @abstractmethod
    def fill_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes."""


class GlobalRng(NonceRng):
    """Randomness drawn from the operating system."""

    def fill_bytes(self, size: int) -> bytes:
        return os.urandom(size)

    def __repr__(self) -> str:
        return "GlobalRng()"


class LockedRng(NonceRng):
    """Wraps a caller's generator behind a lock so it can be shared.

    The wrapped object must offer ``fill_bytes(size)`` or ``randbytes(size)``.
    """

    def __init__(self, rng: Any) -> None:
        self._rng = rng
        self._lock = threading.Lock()

    def fill_bytes(self, size: int) -> bytes:
        with self._lock:
            fill = getattr(self._rng, "fill_bytes", None)
            data = fill(size) if callable(fill) else self._rng.randbytes(size)
        data = bytes(data)
        if len(data) != size:
            raise ValueError(f"rng produced {len(data)} bytes instead of {size}")
        return data


def _components(tag_components: Iterable[bytes]) -> tuple[bytes, ...]:
    return tuple(bytes(component) for component in tag_components)


@dataclass(frozen=True)
class Deterministic:
    """A deterministic nonce generator; prefer :class:`Synthetic`."""

    nonce_hash: Any = field(default_factory=hashlib.sha256)

    def tag(self, tag: bytes) -> Deterministic:
        """A copy domain separated by ``tag``."""
        return self.tag_vectored((tag,))

    def tag_vectored(self, tag_components: Iterable[bytes]) -> Deterministic:
        """A copy domain separated by a tag given in pieces."""
        parts = _components(tag_components) + (_NONCE_SUFFIX,)
        return replace(self, nonce_hash=hashing.tag_vectored(self.nonce_hash, parts))

    def begin_derivation(self, secret: Scalar) -> Any:
        """A fresh hash with ``secret`` added to it."""
        _check_output_size(self.nonce_hash)
        return hashing.add(self.nonce_hash.copy(), secret)


@dataclass(frozen=True)
class Synthetic:
    """A nonce generator that mixes real randomness into the derivation."""

    rng: NonceRng = field(default_factory=GlobalRng)
    nonce_hash: Any = field(default_factory=hashlib.sha256)
    aux_hash: Any = field(default_factory=hashlib.sha256)

    def tag(self, tag: bytes) -> Synthetic:
        """A copy domain separated by ``tag``."""
        return self.tag_vectored((tag,))

    def tag_vectored(self, tag_components: Iterable[bytes]) -> Synthetic:
        """A copy domain separated by a tag given in pieces."""
        parts = _components(tag_components)
        return replace(
            self,
            nonce_hash=hashing.tag_vectored(self.nonce_hash, parts + (_NONCE_SUFFIX,)),
            aux_hash=hashing.tag_vectored(self.aux_hash, parts + (_AUX_SUFFIX,)),
        )

    def begin_derivation(self, secret: Scalar) -> Any:
        """A fresh hash with ``secret`` masked by hashed randomness added to it."""
        _check_output_size(self.nonce_hash)
        _check_output_size(self.aux_hash)
        aux_hash = self.aux_hash.copy()
        aux_hash.update(self.rng.fill_bytes(32))
        masked = bytes(a ^ s for a, s in zip(aux_hash.digest(), secret.to_bytes()))
        return hashing.add(self.nonce_hash.copy(), masked)


@dataclass(frozen=True)
class NoNonces:
    """Accepts a tag like a nonce generator but generates no nonces.

    The tag is checked to be made of bytes, then discarded: there is no hash
    state to separate, so the same generator is returned.
    """

    def tag(self, tag: bytes) -> NoNonces:
        """Check ``tag`` and return this generator unchanged."""
        return self.tag_vectored((tag,))

    def tag_vectored(self, tag_components: Iterable[bytes]) -> NoNonces:
        """Check every piece of the tag and return this generator unchanged."""
        _components(tag_components)
        return self