import hashlib
import struct

import pytest

from walletcrypto.sha256 import (
    SHA1_INITIAL_HASH,
    SHA256_INITIAL_HASH,
    Sha1,
    Sha256,
    sha1,
    sha1_transform,
    sha256,
    sha256_transform,
)

LENGTHS = [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000]


def _message(n):
    return bytes((i * 7 + 3) & 0xFF for i in range(n))


def _padded_abc_block():
    block = b"abc" + b"\x80" + b"\x00" * 52 + struct.pack(">Q", 24)
    return struct.unpack(">16I", block)


def test_sha256_empty_vector():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_sha256_abc_vector():
    assert Sha256(b"abc").hexdigest() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha1_abc_vector():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


@pytest.mark.parametrize("n", LENGTHS)
def test_sha256_matches_reference(n):
    data = _message(n)
    assert sha256(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("n", LENGTHS)
def test_sha1_matches_reference(n):
    data = _message(n)
    assert sha1(data) == hashlib.sha1(data).digest()


@pytest.mark.parametrize("cls", [Sha1, Sha256])
@pytest.mark.parametrize("step", [1, 5, 63, 64, 65])
def test_chunked_update_equals_one_shot(cls, step):
    data = _message(300)
    h = cls()
    for start in range(0, len(data), step):
        h.update(data[start:start + step])
    assert h.digest() == cls(data).digest()


@pytest.mark.parametrize("cls", [Sha1, Sha256])
def test_digest_does_not_consume_state(cls):
    h = cls(b"hello ")
    first = h.digest()
    assert h.digest() == first
    h.update(b"world")
    assert h.digest() == cls(b"hello world").digest()


@pytest.mark.parametrize("cls", [Sha1, Sha256])
def test_hexdigest_is_hex_of_digest(cls):
    h = cls(_message(77))
    assert h.hexdigest() == h.digest().hex()
    assert len(h.digest()) == h.digest_size


def test_copy_is_independent():
    h = Sha256(b"abc")
    clone = h.copy()
    clone.update(b"def")
    assert h.digest() == hashlib.sha256(b"abc").digest()
    assert clone.digest() == hashlib.sha256(b"abcdef").digest()


def test_accepts_bytearray_and_memoryview():
    data = _message(90)
    h = Sha256()
    h.update(bytearray(data[:40]))
    h.update(memoryview(data[40:]))
    assert h.digest() == hashlib.sha256(data).digest()


@pytest.mark.parametrize("cls", [Sha1, Sha256])
def test_update_rejects_str(cls):
    with pytest.raises(TypeError):
        cls().update("text")


def test_sha256_transform_single_block():
    state = sha256_transform(SHA256_INITIAL_HASH, _padded_abc_block())
    assert struct.pack(">8I", *state) == hashlib.sha256(b"abc").digest()


def test_sha1_transform_single_block():
    state = sha1_transform(SHA1_INITIAL_HASH, _padded_abc_block())
    assert struct.pack(">5I", *state) == hashlib.sha1(b"abc").digest()


def test_transform_does_not_mutate_input():
    state = list(SHA256_INITIAL_HASH)
    sha256_transform(state, [0] * 16)
    assert tuple(state) == SHA256_INITIAL_HASH


@pytest.mark.parametrize(
    "func, state, block",
    [
        (sha256_transform, SHA256_INITIAL_HASH[:7], [0] * 16),
        (sha256_transform, SHA256_INITIAL_HASH, [0] * 15),
        (sha1_transform, SHA1_INITIAL_HASH[:4], [0] * 16),
        (sha1_transform, SHA1_INITIAL_HASH, [0] * 17),
    ],
)
def test_transform_rejects_bad_sizes(func, state, block):
    with pytest.raises(ValueError):
        func(state, block)


def test_transform_output_words_are_32_bit():
    state = sha256_transform(SHA256_INITIAL_HASH, [0xFFFFFFFF] * 16)
    assert len(state) == 8
    assert all(0 <= word <= 0xFFFFFFFF for word in state)