"""Elliptic-curve keys, deterministic ECDSA and ECDH on secp256k1 and secp256r1."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from walletcrypto.mac import hmac_sha256
from walletcrypto.sha256 import sha256

KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
_MAX_SIGN_TRIES = 64

Point = Optional[Tuple[int, int]]


class EccError(ValueError):
    """Raised for invalid keys, points or signatures."""


@dataclass(frozen=True)
class _Params:
    p: int
    a: int
    b: int
    n: int
    gx: int
    gy: int


_PARAMS = {
    "secp256k1": _Params(
        p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
        a=0,
        b=7,
        n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
        gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    "secp256r1": _Params(
        p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
        a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
        b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
        gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    ),
}


class Curve(enum.Enum):
    """Supported curves."""

    SECP256K1 = "secp256k1"
    SECP256R1 = "secp256r1"

    @property
    def _params(self) -> _Params:
        return _PARAMS[self.value]

    @property
    def order(self) -> int:
        """The order n of the base point."""
        return self._params.n


def _add(c: _Params, first: Point, second: Point) -> Point:
    if first is None:
        return second
    if second is None:
        return first
    x1, y1 = first
    x2, y2 = second
    p = c.p
    if x1 == x2:
        if (y1 + y2) % p == 0:
            return None
        slope = (3 * x1 * x1 + c.a) * pow(2 * y1, -1, p) % p
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, p) % p
    x3 = (slope * slope - x1 - x2) % p
    y3 = (slope * (x1 - x3) - y1) % p
    return x3, y3


def _multiply(c: _Params, scalar: int, point: Point) -> Point:
    result: Point = None
    for bit in bin(scalar)[2:] if scalar > 0 else "":
        result = _add(c, result, result)
        if bit == "1":
            result = _add(c, result, point)
    return result


def _generator(c: _Params) -> Tuple[int, int]:
    return c.gx, c.gy


def _on_curve(c: _Params, x: int, y: int) -> bool:
    return x < c.p and y < c.p and (y * y - (x * x * x + c.a * x + c.b)) % c.p == 0


def _to_int(data: bytes) -> int:
    return int.from_bytes(bytes(memoryview(data)), "big")


def _to_bytes(value: int) -> bytes:
    return value.to_bytes(KEY_LENGTH, "big")


def _private_scalar(private_key: bytes, curve: Curve) -> int:
    if not is_valid(private_key, curve):
        raise EccError("invalid private key")
    return _to_int(private_key)


def _decompress(c: _Params, encoded: bytes) -> Tuple[int, int]:
    x = _to_int(encoded[1:])
    if x >= c.p:
        raise EccError("x coordinate out of range")
    rhs = (x * x * x + c.a * x + c.b) % c.p
    y = pow(rhs, (c.p + 1) // 4, c.p)
    if y * y % c.p != rhs:
        raise EccError("x coordinate is not on the curve")
    if (y & 1) != (encoded[0] & 1):
        y = c.p - y
    return x, y


def _parse_public_key(public_key: bytes, curve: Curve) -> Tuple[int, int]:
    """Read a public key given as 64 raw bytes, 65 uncompressed or 33 compressed."""
    raw = bytes(memoryview(public_key))
    c = curve._params
    if len(raw) == 33 and raw[0] in (0x02, 0x03):
        return _decompress(c, raw)
    if len(raw) == 65 and raw[0] == 0x04:
        raw = raw[1:]
    if len(raw) != 64:
        raise EccError("unrecognised public key encoding")
    x, y = _to_int(raw[:32]), _to_int(raw[32:])
    if not _on_curve(c, x, y):
        raise EccError("public key is not on the curve")
    return x, y


def is_valid(private_key: bytes, curve: Curve = Curve.SECP256K1) -> bool:
    """Return True for a 32-byte key in the range 1..n-1."""
    raw = bytes(memoryview(private_key))
    return len(raw) == KEY_LENGTH and 0 < _to_int(raw) < curve.order


def get_public_key65(private_key: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Return the uncompressed public key: 0x04, x, y."""
    c = curve._params
    point = _multiply(c, _private_scalar(private_key, curve), _generator(c))
    assert point is not None
    return b"\x04" + _to_bytes(point[0]) + _to_bytes(point[1])


def get_public_key33(private_key: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Return the compressed public key: 0x02 or 0x03 by y parity, then x."""
    c = curve._params
    point = _multiply(c, _private_scalar(private_key, curve), _generator(c))
    assert point is not None
    return bytes([0x02 | (point[1] & 1)]) + _to_bytes(point[0])


def generate_private_key(private_master: bytes, z: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Return (master + z) mod n as a child private key; raise if it is not valid."""
    child = _to_bytes((_to_int(private_master) + _to_int(z)) % curve.order)
    if not is_valid(child, curve):
        raise EccError("derived private key is invalid")
    return child


def _sign_with_k(c: _Params, d: int, e: int, k: int) -> Optional[bytes]:
    if not 0 < k < c.n:
        return None
    point = _multiply(c, k, _generator(c))
    if point is None:
        return None
    r = point[0] % c.n
    if r == 0:
        return None
    s = (e + r * d) * pow(k, -1, c.n) % c.n
    if s == 0:
        return None
    if s > c.n // 2:
        s = c.n - s
    return _to_bytes(r) + _to_bytes(s)


def sign_digest(private_key: bytes, digest: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Sign a 32-byte digest with an RFC 6979 nonce; return r||s with low s."""
    c = curve._params
    d = _private_scalar(private_key, curve)
    message_hash = bytes(memoryview(digest))
    if len(message_hash) != 32:
        raise EccError("digest must be 32 bytes")
    e = _to_int(message_hash) % c.n
    key_bytes = _to_bytes(d)

    k_state = bytes(32)
    v_state = b"\x01" * 32
    k_state = hmac_sha256(k_state, v_state + b"\x00" + key_bytes + message_hash)
    v_state = hmac_sha256(k_state, v_state)
    k_state = hmac_sha256(k_state, v_state + b"\x01" + key_bytes + message_hash)
    v_state = hmac_sha256(k_state, v_state)
    for _ in range(_MAX_SIGN_TRIES):
        v_state = hmac_sha256(k_state, v_state)
        signature = _sign_with_k(c, d, e, _to_int(v_state))
        if signature is not None:
            return signature
        k_state = hmac_sha256(k_state, v_state + b"\x00")
        v_state = hmac_sha256(k_state, v_state)
    raise EccError("could not produce a signature")


def sign(private_key: bytes, message: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Sign the SHA-256 of message."""
    return sign_digest(private_key, sha256(message), curve)


def sign_double(private_key: bytes, message: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Sign the double SHA-256 of message."""
    return sign_digest(private_key, sha256(sha256(message)), curve)


def verify_digest(
    public_key: bytes, digest: bytes, signature: bytes, curve: Curve = Curve.SECP256K1
) -> bool:
    """Return True if signature (r||s) is valid for digest under public_key."""
    c = curve._params
    q = _parse_public_key(public_key, curve)
    sig = bytes(memoryview(signature))
    if len(sig) != SIGNATURE_LENGTH:
        raise EccError("signature must be 64 bytes")
    r, s = _to_int(sig[:32]), _to_int(sig[32:])
    if not (0 < r < c.n and 0 < s < c.n):
        return False
    e = _to_int(bytes(memoryview(digest))[:32]) % c.n
    w = pow(s, -1, c.n)
    point = _add(c, _multiply(c, e * w % c.n, _generator(c)), _multiply(c, r * w % c.n, q))
    return point is not None and point[0] % c.n == r


def verify(
    public_key: bytes, signature: bytes, message: bytes, curve: Curve = Curve.SECP256K1
) -> bool:
    """Return True if signature is valid for the SHA-256 of message."""
    return verify_digest(public_key, sha256(message), signature, curve)


def ecdh(pair_pubkey: bytes, private_key: bytes, curve: Curve = Curve.SECP256K1) -> bytes:
    """Return the double SHA-256 of the shared point's x coordinate."""
    c = curve._params
    point = _multiply(c, _private_scalar(private_key, curve), _parse_public_key(pair_pubkey, curve))
    if point is None:
        raise EccError("shared secret is the point at infinity")
    return sha256(sha256(_to_bytes(point[0])))