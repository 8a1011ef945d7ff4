"""HMAC over SHA-256 and SHA-512, plus precomputed pad digests for PBKDF2."""

from __future__ import annotations

import struct
from typing import Callable

from walletcrypto.sha256 import (
    SHA256_BLOCK_LENGTH,
    SHA256_DIGEST_LENGTH,
    SHA256_INITIAL_HASH,
    Sha256,
    sha256,
    sha256_transform,
)
from walletcrypto.sha512 import (
    SHA512_BLOCK_LENGTH,
    SHA512_DIGEST_LENGTH,
    SHA512_INITIAL_HASH,
    Sha512,
    sha512,
    sha512_transform,
)

_OPAD = 0x5C
_IPAD = 0x36


def _key_block(key: bytes, block_size: int, hash_fn: Callable[[bytes], bytes]) -> bytes:
    raw = bytes(memoryview(key))
    if len(raw) > block_size:
        raw = hash_fn(raw)
    return raw.ljust(block_size, b"\x00")


def _xor(block: bytes, value: int) -> bytes:
    return bytes(b ^ value for b in block)


class _Hmac:
    _hash_type: type = Sha256
    _hash_fn: Callable[[bytes], bytes] = staticmethod(sha256)
    block_size = 0
    digest_size = 0

    def __init__(self, key: bytes, msg: bytes = b"") -> None:
        pad = _key_block(key, self.block_size, self._hash_fn)
        self._outer_pad = _xor(pad, _OPAD)
        self._inner = self._hash_type(_xor(pad, _IPAD))
        if msg:
            self._inner.update(msg)

    def _update(self, msg: bytes) -> None:
        self._inner.update(msg)

    def _digest(self) -> bytes:
        outer = self._hash_type(self._outer_pad)
        outer.update(self._inner.digest())
        return outer.digest()

    def copy(self):
        """Return an independent copy of the current MAC state."""
        clone = type(self).__new__(type(self))
        clone._outer_pad = self._outer_pad
        clone._inner = self._inner.copy()
        return clone

    def hexdigest(self) -> str:
        """Return the MAC as lower-case hexadecimal."""
        return self._digest().hex()


class HmacSha256(_Hmac):
    """Incremental HMAC-SHA256."""

    _hash_type = Sha256
    _hash_fn = staticmethod(sha256)
    block_size = SHA256_BLOCK_LENGTH
    digest_size = SHA256_DIGEST_LENGTH

    def update(self, msg: bytes) -> None:
        """Feed more message bytes."""
        self._update(msg)

    def digest(self) -> bytes:
        """Return the 32-byte MAC of everything fed so far."""
        return self._digest()


class HmacSha512(_Hmac):
    """Incremental HMAC-SHA512."""

    _hash_type = Sha512
    _hash_fn = staticmethod(sha512)
    block_size = SHA512_BLOCK_LENGTH
    digest_size = SHA512_DIGEST_LENGTH

    def update(self, msg: bytes) -> None:
        """Feed more message bytes."""
        self._update(msg)

    def digest(self) -> bytes:
        """Return the 64-byte MAC of everything fed so far."""
        return self._digest()


def hmac_sha256(key: bytes, msg: bytes) -> bytes:
    """Return HMAC-SHA256 of msg under key."""
    mac = HmacSha256(key)
    mac.update(msg)
    return mac.digest()


def hmac_sha512(key: bytes, msg: bytes) -> bytes:
    """Return HMAC-SHA512 of msg under key."""
    mac = HmacSha512(key)
    mac.update(msg)
    return mac.digest()


def hmac_sha256_prepare(key: bytes) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return the SHA-256 states after the outer and the inner key pad blocks."""
    pad = _key_block(key, SHA256_BLOCK_LENGTH, sha256)
    outer = struct.unpack(">16I", _xor(pad, _OPAD))
    inner = struct.unpack(">16I", _xor(pad, _IPAD))
    return (
        sha256_transform(SHA256_INITIAL_HASH, outer),
        sha256_transform(SHA256_INITIAL_HASH, inner),
    )


def hmac_sha512_prepare(key: bytes) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return the SHA-512 states after the outer and the inner key pad blocks."""
    pad = _key_block(key, SHA512_BLOCK_LENGTH, sha512)
    outer = struct.unpack(">16Q", _xor(pad, _OPAD))
    inner = struct.unpack(">16Q", _xor(pad, _IPAD))
    return (
        sha512_transform(SHA512_INITIAL_HASH, outer),
        sha512_transform(SHA512_INITIAL_HASH, inner),
    )