"""
BIP-32 extended private keys.

Implements the private-key half of BIP-32 with HMAC-SHA512:
  - Master key generation from a BIP-39 seed
  - Normal and hardened child derivation
  - Path derivation ("m/44'/5757'/0'/0")
"""

from __future__ import annotations

import hashlib
import hmac
import struct
from dataclasses import dataclass, field

from ecdsa import SECP256k1

from stxwallet_core.crypto_utils import (
    compressed_public_key,
    hash160,
    is_valid_private_key,
)
from stxwallet_core.errors import DerivationError

KEY_BYTE_SIZE = 32
HARDENED = 0x80000000
MAX_INDEX = 0xFFFFFFFF
MIN_SEED_LEN = 16
MAX_SEED_LEN = 64

_MASTER_HMAC_KEY = b"Bitcoin seed"


@dataclass(frozen=True)
class ExtendedPrivateKey:
    """
    A secp256k1 private key together with its chain code and tree depth.

    Instances are immutable; derivation always returns a new key.
    """

    private_key: bytes = field(repr=False)
    chain_code: bytes = field(repr=False)
    depth: int = 0

    def __post_init__(self) -> None:
        if len(self.chain_code) != KEY_BYTE_SIZE:
            raise DerivationError(f"Chain code must be {KEY_BYTE_SIZE} bytes")
        if not is_valid_private_key(self.private_key):
            raise DerivationError("Private key is outside the secp256k1 range")

    @classmethod
    def from_seed(cls, seed: bytes) -> ExtendedPrivateKey:
        """Create the master key from a 16..64 byte seed."""
        if not MIN_SEED_LEN <= len(seed) <= MAX_SEED_LEN:
            raise DerivationError(
                f"Seed must be {MIN_SEED_LEN}..{MAX_SEED_LEN} bytes, got {len(seed)}"
            )
        I = hmac.new(_MASTER_HMAC_KEY, seed, hashlib.sha512).digest()
        return cls(private_key=I[:32], chain_code=I[32:], depth=0)

    def public_key(self) -> bytes:
        """Compressed (33-byte) public key."""
        return compressed_public_key(self.private_key)

    @property
    def fingerprint(self) -> bytes:
        """First 4 bytes of Hash160 of the public key."""
        return hash160(self.public_key())[:4]

    def child(self, index: int) -> ExtendedPrivateKey:
        """Derive the child at *index*; indices >= 2**31 are hardened."""
        if not isinstance(index, int):
            raise DerivationError(f"Child index must be an integer, got {type(index).__name__}")
        if not 0 <= index <= MAX_INDEX:
            raise DerivationError(f"Child index out of range: {index}")
        if index >= HARDENED:
            data = b"\x00" + self.private_key + struct.pack(">I", index)
        else:
            data = self.public_key() + struct.pack(">I", index)

        I = hmac.new(self.chain_code, data, hashlib.sha512).digest()
        il = int.from_bytes(I[:32], "big")
        if il >= SECP256k1.order:
            raise DerivationError(f"Invalid child key at index {index}")
        child_key_int = (il + int.from_bytes(self.private_key, "big")) % SECP256k1.order
        if child_key_int == 0:
            raise DerivationError(f"Invalid child key at index {index}")

        return ExtendedPrivateKey(
            private_key=child_key_int.to_bytes(32, "big"),
            chain_code=I[32:],
            depth=self.depth + 1,
        )

    def derive(self, path: str) -> ExtendedPrivateKey:
        """
        Derive along a path string like ``"m/44'/5757'/0'/0"``.

        A trailing ``'`` or ``h`` marks a hardened step.
        """
        parts = path.split("/")
        if parts[0] == "m":
            parts = parts[1:]
        node = self
        for component in parts:
            node = node.child(_parse_component(component, path))
        return node


def _parse_component(component: str, path: str) -> int:
    hardened = component.endswith(("'", "h", "H"))
    digits = component[:-1] if hardened else component
    if not (digits.isascii() and digits.isdigit()):
        raise DerivationError(f"Invalid derivation path: {path!r}")
    index = int(digits)
    if index >= HARDENED:
        raise DerivationError(f"Path component out of range in {path!r}")
    return index + HARDENED if hardened else index
