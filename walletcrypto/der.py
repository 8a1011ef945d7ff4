"""Conversion between 64-byte (r, s) signatures and DER encoding."""

from __future__ import annotations

SIGNATURE_LENGTH = 64
_INTEGER_LENGTH = 32
_SEQUENCE = 0x30
_INTEGER = 0x02


class DerError(ValueError):
    """Raised for malformed DER signatures."""


def _der_integer(value: bytes) -> bytes:
    body = value.lstrip(b"\x00")
    if not body or body[0] >= 0x80:
        body = b"\x00" + body
    return bytes([_INTEGER, len(body)]) + body


def sig_to_der(sig: bytes) -> bytes:
    """Encode a 64-byte r||s signature as a DER SEQUENCE of two INTEGERs."""
    raw = bytes(memoryview(sig))
    if len(raw) != SIGNATURE_LENGTH:
        raise DerError(f"signature must be {SIGNATURE_LENGTH} bytes, got {len(raw)}")
    body = _der_integer(raw[:_INTEGER_LENGTH]) + _der_integer(raw[_INTEGER_LENGTH:])
    return bytes([_SEQUENCE, len(body)]) + body


def _trim_to_32_bytes(value: bytes) -> bytes:
    trimmed = value.lstrip(b"\x00")
    if not 1 <= len(trimmed) <= _INTEGER_LENGTH:
        raise DerError("integer is zero or longer than 32 bytes")
    return trimmed.rjust(_INTEGER_LENGTH, b"\x00")


def der_to_sig(der: bytes) -> bytes:
    """Decode a DER signature into 64 bytes r||s."""
    raw = bytes(memoryview(der))
    if len(raw) < 8 or raw[0] != _SEQUENCE or raw[2] != _INTEGER:
        raise DerError("not a DER sequence of integers")
    seq_len = raw[1]
    if seq_len <= 0 or seq_len + 2 != len(raw):
        raise DerError("sequence length does not match data")
    r_len = raw[3]
    if r_len < 1 or r_len > seq_len - 5 or raw[4 + r_len] != _INTEGER:
        raise DerError("invalid r component")
    s_len = raw[5 + r_len]
    if s_len < 1 or s_len != seq_len - 4 - r_len:
        raise DerError("invalid s component")
    r = _trim_to_32_bytes(raw[4:4 + r_len])
    s = _trim_to_32_bytes(raw[6 + r_len:6 + r_len + s_len])
    return r + s