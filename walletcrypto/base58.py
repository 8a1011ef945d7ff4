"""Base58 and Base58Check encoding with the Bitcoin alphabet."""

from __future__ import annotations

from types import MappingProxyType

from walletcrypto.sha256 import sha256

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
MAX_CHECK_PAYLOAD = 128
CHECKSUM_LENGTH = 4

_DIGITS = MappingProxyType({char: value for value, char in enumerate(ALPHABET)})


class Base58Error(ValueError):
    """Raised for text that is not valid Base58 or Base58Check."""


def b58encode(data: bytes) -> str:
    """Encode bytes as Base58; each leading zero byte becomes a '1'."""
    raw = bytes(memoryview(data))
    stripped = raw.lstrip(b"\x00")
    zeros = len(raw) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return "1" * zeros + "".join(reversed(digits))


def b58decode(text: str, size: int) -> bytes:
    """Decode Base58 text whose numeric value must fit in size bytes.

    Returns the canonical bytes: one zero byte for each leading '1', followed by
    the value without leading zeros.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    stripped = text.lstrip("1")
    zeros = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _DIGITS[char]
        except KeyError:
            raise Base58Error(f"invalid base58 character {char!r}") from None
    if number.bit_length() > size * 8:
        raise Base58Error(f"decoded value does not fit in {size} bytes")
    return bytes(zeros) + number.to_bytes((number.bit_length() + 7) // 8, "big")


def _checksum(payload: bytes) -> bytes:
    return sha256(sha256(payload))[:CHECKSUM_LENGTH]


def base58_encode_check(data: bytes) -> str:
    """Encode data followed by its double SHA-256 checksum."""
    payload = bytes(memoryview(data))
    if len(payload) > MAX_CHECK_PAYLOAD:
        raise Base58Error(f"payload longer than {MAX_CHECK_PAYLOAD} bytes")
    return b58encode(payload + _checksum(payload))


def base58_decode_check(text: str, length: int) -> bytes:
    """Decode Base58Check text carrying exactly length payload bytes."""
    if not 0 <= length <= MAX_CHECK_PAYLOAD:
        raise Base58Error(f"payload length must be between 0 and {MAX_CHECK_PAYLOAD}")
    total = length + CHECKSUM_LENGTH
    decoded = b58decode(text, total)
    if len(decoded) != total:
        raise Base58Error(f"decoded {len(decoded)} bytes, expected {total}")
    payload, checksum = decoded[:length], decoded[length:]
    if _checksum(payload) != checksum:
        raise Base58Error("checksum mismatch")
    zero_bytes = len(decoded) - len(decoded.lstrip(b"\x00"))
    leading_ones = len(text) - len(text.lstrip("1"))
    if zero_bytes != leading_ones or zero_bytes == len(decoded):
        raise Base58Error("leading zeros do not match leading '1' characters")
    return payload