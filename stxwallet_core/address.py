"""
Stacks address versions and single-signature address construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ecdsa import SECP256k1, VerifyingKey
from ecdsa.errors import MalformedPointError

from stxwallet_core.c32 import c32_address, c32_address_decode
from stxwallet_core.crypto_utils import (
    COMPRESSED_PUBLIC_KEY_SIZE,
    UNCOMPRESSED_PUBLIC_KEY_SIZE,
    hash160,
)
from stxwallet_core.errors import EncodingError

NETWORKS = ("mainnet", "testnet")


class AddressVersion(IntEnum):
    """Version byte selecting (network, address kind)."""

    MAINNET_P2PKH = 22   # "SP"
    MAINNET_P2SH = 20    # "SM"
    TESTNET_P2PKH = 26   # "ST"
    TESTNET_P2SH = 21    # "SN"

    @classmethod
    def for_network(cls, network: str, multisig: bool = False) -> AddressVersion:
        if network == "mainnet":
            return cls.MAINNET_P2SH if multisig else cls.MAINNET_P2PKH
        if network == "testnet":
            return cls.TESTNET_P2SH if multisig else cls.TESTNET_P2PKH
        raise ValueError(f"Unknown network: {network!r} (expected one of {NETWORKS})")

    @property
    def is_mainnet(self) -> bool:
        return self in (AddressVersion.MAINNET_P2PKH, AddressVersion.MAINNET_P2SH)


def _check_public_key(public_key: bytes) -> None:
    if len(public_key) not in (COMPRESSED_PUBLIC_KEY_SIZE, UNCOMPRESSED_PUBLIC_KEY_SIZE):
        raise EncodingError(f"Invalid public key length: {len(public_key)}")
    try:
        VerifyingKey.from_string(public_key, curve=SECP256k1)
    except MalformedPointError as exc:
        raise EncodingError("Public key is not a valid secp256k1 point") from exc


@dataclass(frozen=True)
class StacksAddress:
    """A version byte plus the 20-byte hash it commits to."""

    version: int
    hash_bytes: bytes

    @classmethod
    def from_public_key(
        cls,
        public_key: bytes,
        version: int = AddressVersion.MAINNET_P2PKH,
    ) -> StacksAddress:
        """Single-signature address: Hash160 of the serialized public key."""
        _check_public_key(public_key)
        return cls(int(version), hash160(public_key))

    @classmethod
    def from_string(cls, address: str) -> StacksAddress:
        version, data = c32_address_decode(address)
        return cls(version, data)

    def as_bytes(self) -> bytes:
        return self.hash_bytes

    def to_string(self) -> str:
        return c32_address(self.hash_bytes, self.version)

    def __str__(self) -> str:
        return self.to_string()
