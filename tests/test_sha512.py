import hashlib
import struct

import pytest

from walletcrypto.sha512 import (
    SHA512_INITIAL_HASH,
    Sha512,
    sha512,
    sha512_transform,
)


def test_abc_known_vector():
    expected = (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )
    assert sha512(b"abc").hex() == expected


def test_empty_known_vector():
    expected = (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    )
    assert Sha512().hexdigest() == expected


@pytest.mark.parametrize("length", [0, 1, 55, 111, 112, 113, 127, 128, 129, 255, 256, 1000])
def test_matches_hashlib_across_padding_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert sha512(data) == hashlib.sha512(data).digest()


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 3
    h = Sha512()
    for start in range(0, len(data), 37):
        h.update(data[start:start + 37])
    assert h.digest() == sha512(data)


def test_digest_does_not_consume_state():
    h = Sha512(b"hello ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"world")
    assert h.digest() == hashlib.sha512(b"hello world").digest()


def test_copy_is_independent():
    h = Sha512(b"prefix")
    clone = h.copy()
    clone.update(b"-more")
    assert h.digest() == hashlib.sha512(b"prefix").digest()
    assert clone.digest() == hashlib.sha512(b"prefix-more").digest()


def test_hexdigest_matches_digest():
    h = Sha512(b"data")
    assert h.hexdigest() == h.digest().hex()
    assert len(h.digest()) == 64


def test_transform_single_padded_block():
    message = b"abc"
    block = message + b"\x80" + b"\x00" * (112 - len(message) - 1)
    block += struct.pack(">QQ", 0, len(message) * 8)
    words = struct.unpack(">16Q", block)
    state = sha512_transform(SHA512_INITIAL_HASH, words)
    assert struct.pack(">8Q", *state) == hashlib.sha512(message).digest()


def test_transform_rejects_bad_state_length():
    with pytest.raises(ValueError):
        sha512_transform(SHA512_INITIAL_HASH[:7], [0] * 16)


def test_transform_rejects_bad_block_length():
    with pytest.raises(ValueError):
        sha512_transform(SHA512_INITIAL_HASH, [0] * 15)


def test_accepts_bytearray_and_memoryview():
    data = b"buffer protocol input"
    assert sha512(bytearray(data)) == sha512(memoryview(data)) == hashlib.sha512(data).digest()