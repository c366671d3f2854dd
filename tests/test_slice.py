import hashlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from secpfun.hash import add
from secpfun.markers import Secrecy
from secpfun.slice import Slice

MESSAGE = b"a secret message"


def test_default_secrecy_is_public():
    assert Slice(MESSAGE).secrecy is Secrecy.PUBLIC


def test_secret_and_public_keep_bytes():
    secret_slice = Slice(MESSAGE).secret()
    assert secret_slice.secrecy is Secrecy.SECRET
    assert secret_slice.as_inner() == MESSAGE
    public_slice = secret_slice.public()
    assert public_slice.secrecy is Secrecy.PUBLIC
    assert public_slice.as_inner() == MESSAGE


def test_equality_ignores_secrecy():
    assert Slice(MESSAGE, Secrecy.SECRET) == Slice(MESSAGE, Secrecy.PUBLIC)


def test_inequality():
    assert Slice(MESSAGE) != Slice(b"another message!")
    assert Slice(MESSAGE) != Slice(MESSAGE[:-1])


def test_not_equal_to_plain_bytes():
    assert (Slice(MESSAGE) == MESSAGE) is False


def test_str_is_hex():
    assert str(Slice(MESSAGE)) == MESSAGE.hex()


def test_bytes():
    assert bytes(Slice(bytearray(MESSAGE))) == MESSAGE


def test_len():
    assert len(Slice(MESSAGE)) == len(MESSAGE)


def test_hash_into_matches_update():
    hash = add(hashlib.sha256(), Slice(MESSAGE, Secrecy.SECRET))
    assert hash.digest() == hashlib.sha256(MESSAGE).digest()


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Slice(MESSAGE))


@given(st.binary(max_size=64), st.sampled_from(list(Secrecy)))
def test_roundtrip(data, secrecy):
    piece = Slice(data, secrecy)
    assert piece.as_inner() == data
    assert bytes.fromhex(str(piece)) == data
    assert piece == Slice(data)