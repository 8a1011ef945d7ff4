[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletcrypto"
version = "0.1.0"
description = "Pure-Python wallet cryptography: SHA-1/SHA-2, HMAC, PBKDF2, Base58Check, DER signatures and ECDSA/ECDH on secp256k1 and secp256r1."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sha256",
    "sha512",
    "hmac",
    "pbkdf2",
    "base58",
    "base58check",
    "der",
    "ecdsa",
    "ecdh",
    "secp256k1",
    "secp256r1",
    "rfc6979",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["walletcrypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
