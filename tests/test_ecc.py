import hashlib

import pytest

from walletcrypto.ecc import (
    Curve,
    EccError,
    ecdh,
    generate_private_key,
    get_public_key33,
    get_public_key65,
    is_valid,
    sign,
    sign_digest,
    sign_double,
    verify,
    verify_digest,
)

CURVES = [Curve.SECP256K1, Curve.SECP256R1]


def key(value):
    return value.to_bytes(32, "big")


def test_generator_secp256k1():
    assert get_public_key33(key(1)).hex() == (
        "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    )


def test_generator_secp256r1():
    assert get_public_key65(key(1), Curve.SECP256R1)[1:33].hex() == (
        "6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
    )


@pytest.mark.parametrize("curve", CURVES)
def test_validity_range(curve):
    n = curve.order
    assert is_valid(key(0), curve) is False
    assert is_valid(key(n), curve) is False
    assert is_valid(key(n - 1), curve) is True
    assert is_valid(b"\x01" * 31, curve) is False


@pytest.mark.parametrize("curve", CURVES)
def test_compressed_matches_uncompressed(curve):
    long_key = get_public_key65(key(12345), curve)
    short_key = get_public_key33(key(12345), curve)
    assert short_key[1:] == long_key[1:33]
    assert short_key[0] == 0x02 | (long_key[-1] & 1)


def test_public_key_rejects_invalid_private():
    with pytest.raises(EccError):
        get_public_key33(key(0))


@pytest.mark.parametrize("curve", CURVES)
def test_sign_verify_round_trip(curve):
    private = key(0xC0FFEE)
    message = b"message to sign"
    signature = sign(private, message, curve)
    assert len(signature) == 64
    assert verify(get_public_key33(private, curve), signature, message, curve)
    assert verify(get_public_key65(private, curve), signature, message, curve)
    assert not verify(get_public_key33(private, curve), signature, b"other", curve)
    assert int.from_bytes(signature[32:], "big") <= curve.order // 2


def test_sign_is_deterministic():
    private = key(7)
    assert sign(private, b"abc") == sign(private, b"abc")
    assert sign(private, b"abc") != sign(private, b"abd")


def test_sign_double_matches_digest():
    private = key(99)
    digest = hashlib.sha256(hashlib.sha256(b"data").digest()).digest()
    assert sign_double(private, b"data") == sign_digest(private, digest)


def test_verify_digest_with_raw_key():
    private = key(424242)
    digest = hashlib.sha256(b"payload").digest()
    signature = sign_digest(private, digest)
    raw = get_public_key65(private)[1:]
    assert verify_digest(raw, digest, signature) is True
    assert verify_digest(raw, digest, bytes(64)) is False


def test_verify_rejects_bad_key_prefix():
    with pytest.raises(EccError):
        verify(b"\x05" + bytes(32), bytes(64), b"m")


def test_sign_rejects_bad_digest_length():
    with pytest.raises(EccError):
        sign_digest(key(5), b"short")


@pytest.mark.parametrize("curve", CURVES)
def test_ecdh_symmetry(curve):
    first, second = key(1111), key(2222)
    shared_one = ecdh(get_public_key33(second, curve), first, curve)
    shared_two = ecdh(get_public_key33(first, curve), second, curve)
    assert shared_one == shared_two
    assert len(shared_one) == 32


def test_generate_private_key_adds():
    child = generate_private_key(key(1), key(2))
    assert child == key(3)
    assert get_public_key33(child) == get_public_key33(key(3))


def test_generate_private_key_wraps_to_zero():
    with pytest.raises(EccError):
        generate_private_key(key(Curve.SECP256K1.order - 1), key(1))