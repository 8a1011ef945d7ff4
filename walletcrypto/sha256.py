"""SHA-1 and SHA-256 hashing with exposed block transforms."""

from __future__ import annotations

import struct
from collections.abc import Sequence

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

SHA1_BLOCK_LENGTH = 64
SHA1_DIGEST_LENGTH = 20
SHA256_BLOCK_LENGTH = 64
SHA256_DIGEST_LENGTH = 32

SHA1_INITIAL_HASH = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

SHA256_INITIAL_HASH = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K1 = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

_K256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def _check(state: Sequence[int], block: Sequence[int], state_words: int) -> None:
    if len(state) != state_words:
        raise ValueError(f"state must hold {state_words} words, got {len(state)}")
    if len(block) != 16:
        raise ValueError(f"block must hold 16 words, got {len(block)}")


def sha1_transform(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
    """Compress one 16-word block into a 5-word SHA-1 state; return the new state."""
    _check(state, block, 5)
    w = [word & _MASK32 for word in block]
    for j in range(16, 80):
        w.append(_rotl(w[j - 3] ^ w[j - 8] ^ w[j - 14] ^ w[j - 16], 1))

    a, b, c, d, e = state
    for j, word in enumerate(w):
        if j < 20:
            f = (b & c) ^ (~b & d)
        elif j < 40 or j >= 60:
            f = b ^ c ^ d
        else:
            f = (b & c) ^ (b & d) ^ (c & d)
        t = (_rotl(a, 5) + f + e + _K1[j // 20] + word) & _MASK32
        a, b, c, d, e = t, a, _rotl(b, 30), c, d

    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e)))


def sha256_transform(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
    """Compress one 16-word block into an 8-word SHA-256 state; return the new state."""
    _check(state, block, 8)
    w = [word & _MASK32 for word in block]
    for j in range(16, 64):
        s0 = _rotr(w[j - 15], 7) ^ _rotr(w[j - 15], 18) ^ (w[j - 15] >> 3)
        s1 = _rotr(w[j - 2], 17) ^ _rotr(w[j - 2], 19) ^ (w[j - 2] >> 10)
        w.append((w[j - 16] + s0 + w[j - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K256, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = (e & f) ^ (~e & g)
        t1 = (h + big_s1 + ch + k + word) & _MASK32
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK32
        a, b, c, d, e, f, g, h = (t1 + t2) & _MASK32, a, b, c, (d + t1) & _MASK32, e, f, g

    return tuple((s + v) & _MASK32 for s, v in zip(state, (a, b, c, d, e, f, g, h)))


class _Md32Hash:
    """Streaming hash over 64-byte blocks of big-endian 32-bit words."""

    _initial: tuple[int, ...] = ()
    block_size = 64
    digest_size = 0
    name = ""

    def __init__(self, data: bytes = b"") -> None:
        self._state = tuple(self._initial)
        self._buffer = bytearray()
        self._length = 0
        if data:
            self.update(data)

    @staticmethod
    def _compress(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
        raise NotImplementedError

    def _absorb(self, state: tuple[int, ...], chunk: bytes) -> tuple[int, ...]:
        for offset in range(0, len(chunk), self.block_size):
            words = struct.unpack(">16I", chunk[offset:offset + self.block_size])
            state = self._compress(state, words)
        return state

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(memoryview(data))
        self._buffer += chunk
        self._length += len(chunk)
        full = len(self._buffer) - len(self._buffer) % self.block_size
        if full:
            self._state = self._absorb(self._state, bytes(self._buffer[:full]))
            del self._buffer[:full]

    def copy(self):
        """Return an independent copy of the current hashing state."""
        clone = type(self)()
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the object stays usable."""
        tail = bytes(self._buffer) + b"\x80"
        tail += b"\x00" * ((56 - len(tail)) % self.block_size)
        tail += struct.pack(">Q", (self._length * 8) & _MASK64)
        state = self._absorb(self._state, tail)
        return struct.pack(f">{len(state)}I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


class Sha1(_Md32Hash):
    """Incremental SHA-1."""

    _initial = SHA1_INITIAL_HASH
    digest_size = SHA1_DIGEST_LENGTH
    name = "sha1"

    @staticmethod
    def _compress(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
        return sha1_transform(state, block)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        super().update(data)

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        return super().digest()

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return super().hexdigest()


class Sha256(_Md32Hash):
    """Incremental SHA-256."""

    _initial = SHA256_INITIAL_HASH
    digest_size = SHA256_DIGEST_LENGTH
    name = "sha256"

    @staticmethod
    def _compress(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
        return sha256_transform(state, block)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        super().update(data)

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        return super().digest()

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return super().hexdigest()


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of data."""
    return Sha1(data).digest()


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of data."""
    return Sha256(data).digest()