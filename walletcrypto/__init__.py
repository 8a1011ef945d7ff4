"""Wallet cryptography: SHA-1/SHA-2, HMAC, PBKDF2, Base58Check, DER signatures and ECDSA/ECDH."""

__version__ = "0.1.0"