"""Hex encoding and decoding of byte strings."""

from __future__ import annotations

import enum

__all__ = ["HexErrorKind", "HexError", "hex_val", "encode", "decode", "decode_array"]


class HexErrorKind(enum.Enum):
    """Why a hex string could not be turned into the expected bytes."""

    INVALID_HEX = "invalid hex string"
    INVALID_LENGTH = "hex string had an invalid (odd) length"
    INVALID_ENCODING = "hex value did not encode the expected type"

    @property
    def message(self) -> str:
        return self.value


class HexError(ValueError):
    """A failed conversion from hex into the bytes for a target type."""

    def __init__(self, kind: HexErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def _build_digit_table() -> dict[int, int]:
    table = {code: index for index, code in enumerate(b"0123456789abcdef")}
    table.update({code: index + 10 for index, code in enumerate(b"ABCDEF")})
    return table


_DIGITS = _build_digit_table()


def hex_val(char: str | int) -> int:
    """Return the value of a single hex digit, given as a character or a byte."""
    if isinstance(char, str):
        if len(char) != 1:
            raise HexError(HexErrorKind.INVALID_HEX)
        code = ord(char)
    else:
        code = char
    try:
        return _DIGITS[code]
    except KeyError:
        raise HexError(HexErrorKind.INVALID_HEX) from None


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as a lower-case hex string."""
    return bytes(data).hex()


def _decode_raw(raw: bytes) -> bytes:
    return bytes(
        hex_val(high) << 4 | hex_val(low) for high, low in zip(raw[::2], raw[1::2])
    )


def decode(text: str) -> bytes:
    """Decode a hex string into bytes."""
    raw = text.encode("utf-8")
    if len(raw) % 2:
        raise HexError(HexErrorKind.INVALID_HEX)
    return _decode_raw(raw)


def decode_array(text: str, length: int) -> bytes:
    """Decode a hex string into exactly ``length`` bytes."""
    raw = text.encode("utf-8")
    if len(raw) % 2:
        raise HexError(HexErrorKind.INVALID_HEX)
    if len(raw) != length * 2:
        raise HexError(HexErrorKind.INVALID_LENGTH)
    return _decode_raw(raw)