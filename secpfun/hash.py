"""Hashing helpers: domain separation by tag and adding values to a hash."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

__all__ = ["HashInto", "tag", "tag_vectored", "hash_into", "add"]


class HashInto(ABC):
    """Something that knows how to add its bytes to a hash."""

    @abstractmethod
    def hash_into(self, hash: Any) -> None:
        """Convert ``self`` to bytes and feed them to ``hash``."""


def _fresh(hash: Any) -> Any:
    try:
        return hashlib.new(hash.name)
    except (AttributeError, ValueError, TypeError) as exc:
        raise TypeError(f"cannot create a fresh hash like {hash!r}") from exc


def tag_vectored(hash: Any, tag_components: Iterable[bytes]) -> Any:
    """Return a copy of ``hash`` domain separated by a tag given in pieces.

    The pieces are hashed together and the result is fed into the copy as many
    times as it takes to fill one block. ``hash`` should have nothing in it yet.
    """
    block_size = hash.block_size
    digest_size = hash.digest_size
    if digest_size <= 0 or block_size % digest_size:
        raise ValueError(
            f"digest size {digest_size} does not divide block size {block_size}"
        )
    tag_hash = _fresh(hash)
    for component in tag_components:
        tag_hash.update(component)
    hashed_tag = tag_hash.digest()
    tagged = hash.copy()
    tagged.update(hashed_tag * (block_size // digest_size))
    return tagged


def tag(hash: Any, tag: bytes) -> Any:
    """Return a copy of ``hash`` domain separated by ``tag``."""
    return tag_vectored(hash, (tag,))


def hash_into(data: Any, hash: Any) -> None:
    """Feed ``data`` to ``hash``.

    Objects with a ``hash_into`` method add themselves; ints are single bytes;
    bytes-like values go in as they are; strings as UTF-8; other iterables item
    by item.
    """
    method = getattr(data, "hash_into", None)
    if callable(method):
        method(hash)
        return
    if isinstance(data, bool):
        raise TypeError("cannot hash a bool")
    if isinstance(data, int):
        if not 0 <= data <= 0xFF:
            raise ValueError(f"{data} does not fit in a byte")
        hash.update(bytes((data,)))
        return
    if isinstance(data, (bytes, bytearray, memoryview)):
        hash.update(data)
        return
    if isinstance(data, str):
        hash.update(data.encode("utf-8"))
        return
    if isinstance(data, Iterable):
        for item in data:
            hash_into(item, hash)
        return
    raise TypeError(f"cannot hash a value of type {type(data).__name__}")


def add(hash: Any, data: Any) -> Any:
    """Add ``data`` to ``hash`` and return the hash."""
    hash_into(data, hash)
    return hash