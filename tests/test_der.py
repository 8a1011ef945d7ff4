import random

import pytest

from walletcrypto.der import DerError, der_to_sig, sig_to_der


def _sig(r_value: int, s_value: int) -> bytes:
    return r_value.to_bytes(32, "big") + s_value.to_bytes(32, "big")


def test_small_integers():
    assert sig_to_der(_sig(1, 2)) == bytes([0x30, 0x06, 0x02, 0x01, 0x01, 0x02, 0x01, 0x02])


def test_high_bit_gets_zero_prefix():
    sig = b"\x80" + bytes(31) + b"\x01" * 32
    der = sig_to_der(sig)
    assert der[3] == 33
    assert der[4] == 0
    assert der[1] == len(der) - 2
    assert der_to_sig(der) == sig


@pytest.mark.parametrize("seed", range(10))
def test_round_trip(seed):
    rng = random.Random(seed)
    r = bytes(rng.randrange(3)) + bytes([rng.randrange(1, 256)])
    r = (r + bytes(rng.randrange(256) for _ in range(32)))[:32]
    s = bytes([rng.randrange(1, 256)]) + bytes(rng.randrange(256) for _ in range(31))
    sig = r + s
    assert der_to_sig(sig_to_der(sig)) == sig


def test_decode_small():
    assert der_to_sig(sig_to_der(_sig(1, 2))) == _sig(1, 2)


def test_wrong_signature_length():
    with pytest.raises(DerError):
        sig_to_der(bytes(63))


def test_too_short():
    with pytest.raises(DerError):
        der_to_sig(bytes([0x30, 0x05, 0x02, 0x01, 0x01, 0x02, 0x01]))


def test_wrong_tags():
    good = sig_to_der(_sig(1, 2))
    with pytest.raises(DerError):
        der_to_sig(b"\x31" + good[1:])
    with pytest.raises(DerError):
        der_to_sig(good[:2] + b"\x03" + good[3:])


def test_sequence_length_mismatch():
    good = sig_to_der(_sig(5, 6))
    with pytest.raises(DerError):
        der_to_sig(good[:1] + bytes([good[1] + 1]) + good[2:])


def test_s_length_mismatch():
    with pytest.raises(DerError):
        der_to_sig(bytes([0x30, 0x07, 0x02, 0x01, 0x01, 0x02, 0x01, 0x02, 0x00]))


def test_zero_integer_rejected():
    with pytest.raises(DerError):
        der_to_sig(bytes([0x30, 0x06, 0x02, 0x01, 0x00, 0x02, 0x01, 0x01]))


def test_integer_too_long_rejected():
    r = b"\x01" + b"\xff" * 32
    body = bytes([0x02, len(r)]) + r + bytes([0x02, 0x01, 0x01])
    with pytest.raises(DerError):
        der_to_sig(bytes([0x30, len(body)]) + body)


def test_padded_integer_accepted():
    r = bytes(2) + b"\x7f"
    body = bytes([0x02, len(r)]) + r + bytes([0x02, 0x01, 0x09])
    assert der_to_sig(bytes([0x30, len(body)]) + body) == _sig(0x7F, 9)