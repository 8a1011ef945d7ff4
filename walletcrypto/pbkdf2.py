"""PBKDF2 over HMAC-SHA256 and HMAC-SHA512, with a resumable per-block context."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from walletcrypto.mac import hmac_sha256_prepare, hmac_sha512_prepare
from walletcrypto.sha256 import SHA256_BLOCK_LENGTH, SHA256_DIGEST_LENGTH, sha256_transform
from walletcrypto.sha512 import SHA512_BLOCK_LENGTH, SHA512_DIGEST_LENGTH, sha512_transform

_MAX_BLOCK_NUMBER = 0xFFFFFFFF


class _Pbkdf2Block:
    """Computes one output block of PBKDF2 from precomputed HMAC pad states."""

    _block_size = 0
    _digest_size = 0
    _word_format = ""
    _word_bits = 0
    _length_field = 0
    _prepare = staticmethod(hmac_sha256_prepare)
    _transform = staticmethod(sha256_transform)

    def __init__(self, password: bytes, salt: bytes, block_number: int = 1) -> None:
        if not 0 <= block_number <= _MAX_BLOCK_NUMBER:
            raise ValueError(f"block number {block_number} is out of range")
        self._outer, self._inner = self._prepare(password)
        message = bytes(memoryview(salt)) + block_number.to_bytes(4, "big")
        inner = self._absorb_tail(self._inner, message)
        self._g = self._transform(self._outer, self._pad(inner))
        self._f = list(self._g)
        self._first = 1

    def _absorb_tail(self, state: Sequence[int], message: bytes) -> tuple[int, ...]:
        """Finish a hash whose first block (the inner pad) is already in state."""
        bits = (self._block_size + len(message)) * 8
        tail = message + b"\x80"
        tail += b"\x00" * ((self._block_size - self._length_field - len(tail)) % self._block_size)
        tail += bits.to_bytes(self._length_field, "big")
        result = tuple(state)
        for offset in range(0, len(tail), self._block_size):
            words = struct.unpack(
                f">16{self._word_format}", tail[offset:offset + self._block_size]
            )
            result = self._transform(result, words)
        return result

    def _pad(self, digest_words: Sequence[int]) -> tuple[int, ...]:
        """Lay out a digest as a single padded block following one key pad block."""
        return (
            tuple(digest_words)
            + (1 << (self._word_bits - 1),)
            + (0,) * 6
            + ((self._block_size + self._digest_size) * 8,)
        )

    def _update(self, iterations: int) -> None:
        if iterations < 0:
            raise ValueError("iterations must not be negative")
        g = self._g
        f = self._f
        for _ in range(self._first, iterations):
            inner = self._transform(self._inner, self._pad(g))
            g = self._transform(self._outer, self._pad(inner))
            f = [a ^ b for a, b in zip(f, g)]
        self._g = g
        self._f = f
        self._first = 0

    def _finalize(self) -> bytes:
        return struct.pack(f">{len(self._f)}{self._word_format}", *self._f)


class Pbkdf2HmacSha256(_Pbkdf2Block):
    """One PBKDF2-HMAC-SHA256 output block, computed in resumable steps.

    The first call to update runs iterations - 1 rounds (the first round is done
    on construction); every later call runs the full count it is given.
    """

    _block_size = SHA256_BLOCK_LENGTH
    _digest_size = SHA256_DIGEST_LENGTH
    _word_format = "I"
    _word_bits = 32
    _length_field = 8
    _prepare = staticmethod(hmac_sha256_prepare)
    _transform = staticmethod(sha256_transform)

    def update(self, iterations: int) -> None:
        """Run further rounds of the iteration."""
        self._update(iterations)

    def finalize(self) -> bytes:
        """Return the 32-byte output block."""
        return self._finalize()


class Pbkdf2HmacSha512(_Pbkdf2Block):
    """One PBKDF2-HMAC-SHA512 output block, computed in resumable steps.

    The first call to update runs iterations - 1 rounds (the first round is done
    on construction); every later call runs the full count it is given.
    """

    _block_size = SHA512_BLOCK_LENGTH
    _digest_size = SHA512_DIGEST_LENGTH
    _word_format = "Q"
    _word_bits = 64
    _length_field = 16
    _prepare = staticmethod(hmac_sha512_prepare)
    _transform = staticmethod(sha512_transform)

    def update(self, iterations: int) -> None:
        """Run further rounds of the iteration."""
        self._update(iterations)

    def finalize(self) -> bytes:
        """Return the 64-byte output block."""
        return self._finalize()


def _derive(
    block_type: type[_Pbkdf2Block],
    password: bytes,
    salt: bytes,
    iterations: int,
    key_length: int,
) -> bytes:
    if key_length < 0:
        raise ValueError("key length must not be negative")
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    blocks = -(-key_length // block_type._digest_size)
    output = bytearray()
    for block_number in range(1, blocks + 1):
        block = block_type(password, salt, block_number)
        block._update(iterations)
        output += block._finalize()
    return bytes(output[:key_length])


def pbkdf2_hmac_sha256(password: bytes, salt: bytes, iterations: int, key_length: int) -> bytes:
    """Derive key_length bytes with PBKDF2-HMAC-SHA256."""
    return _derive(Pbkdf2HmacSha256, password, salt, iterations, key_length)


def pbkdf2_hmac_sha512(password: bytes, salt: bytes, iterations: int, key_length: int) -> bytes:
    """Derive key_length bytes with PBKDF2-HMAC-SHA512."""
    return _derive(Pbkdf2HmacSha512, password, salt, iterations, key_length)