"""
Hashing and secp256k1 helpers shared by the wallet core.

Provides:
  - SHA-256, double SHA-256 and Hash160 (RIPEMD-160 of SHA-256)
  - secp256k1 private key validation
  - Compressed / uncompressed public key computation
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160
from ecdsa import SECP256k1, SigningKey

PRIVATE_KEY_SIZE = 32
COMPRESSED_PUBLIC_KEY_SIZE = 33
UNCOMPRESSED_PUBLIC_KEY_SIZE = 65


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """Double SHA-256, used for c32check checksums."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def hash160(data: bytes) -> bytes:
    """RIPEMD-160(SHA-256(data)) — 20 bytes."""
    return RIPEMD160.new(sha256(data)).digest()


def is_valid_private_key(private_key: bytes) -> bool:
    """True if *private_key* is a 32-byte scalar in [1, n-1]."""
    if len(private_key) != PRIVATE_KEY_SIZE:
        return False
    k = int.from_bytes(private_key, "big")
    return 0 < k < SECP256k1.order


def uncompressed_public_key(private_key: bytes) -> bytes:
    """65-byte SEC1 public key (``0x04 || X || Y``)."""
    sk = SigningKey.from_string(private_key, curve=SECP256k1)
    return b"\x04" + sk.get_verifying_key().to_string()


def compressed_public_key(private_key: bytes) -> bytes:
    """33-byte SEC1 public key (``0x02``/``0x03`` || X)."""
    sk = SigningKey.from_string(private_key, curve=SECP256k1)
    raw = sk.get_verifying_key().to_string()
    x = raw[:32]
    y = raw[32:]
    prefix = b"\x02" if y[-1] % 2 == 0 else b"\x03"
    return prefix + x
