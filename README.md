# walletcrypto

A small, dependency-free Python library with cryptographic building blocks
used by cryptocurrency wallets. Everything is plain Python on top of the
standard library.

| Module | What it provides |
| --- | --- |
| `walletcrypto.sha256` | SHA-1 and SHA-256: `sha1`, `sha256`, streaming `Sha1` / `Sha256`, and the raw compression functions `sha1_transform`, `sha256_transform` |
| `walletcrypto.sha512` | SHA-512: `sha512`, streaming `Sha512`, and `sha512_transform` |
| `walletcrypto.mac` | HMAC-SHA256 / HMAC-SHA512: `hmac_sha256`, `hmac_sha512`, streaming `HmacSha256` / `HmacSha512`, and the precomputed pad states `hmac_sha256_prepare` / `hmac_sha512_prepare` |
| `walletcrypto.pbkdf2` | PBKDF2 with HMAC-SHA256 or HMAC-SHA512, in one call (`pbkdf2_hmac_sha256`, `pbkdf2_hmac_sha512`) or one output block at a time (`Pbkdf2HmacSha256`, `Pbkdf2HmacSha512`) |
| `walletcrypto.base58` | Base58 and Base58Check with the Bitcoin alphabet: `b58encode`, `b58decode`, `base58_encode_check`, `base58_decode_check`, `Base58Error` |
| `walletcrypto.der` | Conversion between 64-byte `r || s` signatures and DER: `sig_to_der`, `der_to_sig`, `DerError` |
| `walletcrypto.ecc` | secp256k1 / secp256r1 keys, deterministic (RFC 6979) ECDSA with low-s signatures, and ECDH: `Curve`, `EccError` and the functions below |

## Installation

```
pip install walletcrypto
```

## Hashing

```python
from walletcrypto.sha256 import Sha256, sha256
from walletcrypto.sha512 import sha512

digest = sha256(b"abc")

hasher = Sha256()
hasher.update(b"a")
hasher.update(b"bc")
assert hasher.digest() == digest
print(hasher.hexdigest())

long_digest = sha512(b"abc")
```

`digest()` does not consume the hasher: more data can be fed afterwards, and
`copy()` returns an independent snapshot of the running state.

The compression functions take a state tuple (5 words for SHA-1, 8 for
SHA-256/512) and a block of 16 big-endian words, and return the new state.

## HMAC

```python
from walletcrypto.mac import HmacSha256, hmac_sha512

tag = hmac_sha512(b"secret", b"message")

mac = HmacSha256(b"secret")
mac.update(b"mess")
mac.update(b"age")
print(mac.hexdigest())
```

`hmac_sha256_prepare(key)` and `hmac_sha512_prepare(key)` return a pair of
hash states: the state after the outer key pad block and the state after the
inner key pad block.

## PBKDF2

```python
from walletcrypto.pbkdf2 import Pbkdf2HmacSha512, pbkdf2_hmac_sha256, pbkdf2_hmac_sha512

password = b"password"
derived = pbkdf2_hmac_sha256(password, b"salt", 2048, 32)

# The same 64-byte block in 16 steps, for example to report progress.
block = Pbkdf2HmacSha512(password, b"salt", 1)
for step in range(16):
    block.update(128)
    print(f"{(step + 1) * 128}/2048")
assert block.finalize() == pbkdf2_hmac_sha512(password, b"salt", 2048, 64)
```

A block object performs the first round when it is constructed, so its first
`update(n)` runs `n - 1` rounds and every later call runs `n`.

## Base58 and Base58Check

```python
from walletcrypto.base58 import Base58Error, b58decode, b58encode
from walletcrypto.base58 import base58_decode_check, base58_encode_check

payload = bytes(range(21))
text = base58_encode_check(payload)
assert base58_decode_check(text, 21) == payload

assert b58decode(b58encode(b"\x00\x01\x02"), 3) == b"\x00\x01\x02"

try:
    base58_decode_check("0" + text[1:], 21)
except Base58Error as error:
    print(error)          # invalid base58 character '0'
```

`b58decode(text, size)` fails if the value does not fit in `size` bytes.
`base58_decode_check(text, length)` requires exactly `length` payload bytes
(at most 128), a matching double-SHA-256 checksum, and as many leading `'1'`
characters as leading zero bytes. Every failure raises `Base58Error`.

## Keys and signatures

```python
from walletcrypto.ecc import Curve, ecdh, get_public_key33, sign, verify
from walletcrypto.der import der_to_sig, sig_to_der

private_key = bytes(31) + b"\x01"
public_key = get_public_key33(private_key)

signature = sign(private_key, b"message")           # 64 bytes r || s
assert verify(public_key, signature, b"message")

der = sig_to_der(signature)
assert der_to_sig(der) == signature

other_key = bytes(31) + b"\x02"
shared = ecdh(get_public_key33(other_key), private_key)
assert shared == ecdh(public_key, other_key)

p256_public = get_public_key33(private_key, Curve.SECP256R1)
```

`walletcrypto.ecc` offers:

- `is_valid(private_key, curve)` – true for 32 bytes in the range 1 … n−1
- `get_public_key33` / `get_public_key65` – compressed or uncompressed public key
- `generate_private_key(private_master, z, curve)` – `(master + z) mod n`
- `sign_digest`, `sign` (SHA-256 of the message), `sign_double` (double SHA-256)
- `verify_digest`, `verify` – public keys may be 33 bytes compressed,
  65 bytes uncompressed, or 64 raw bytes
- `ecdh(pair_pubkey, private_key, curve)` – double SHA-256 of the shared x coordinate

Every function takes `curve`, defaulting to `Curve.SECP256K1`. Invalid keys,
points and signature encodings raise `EccError`; malformed DER raises `DerError`.

## What is not included

walletcrypto has no RIPEMD-160, no mnemonic sentences or word list, and no
hierarchical key derivation or extended-key serialization. It offers no
command-line tool and no key storage; it is a library of functions only.

## Running the tests

```
pip install -e .[test]
pytest
```