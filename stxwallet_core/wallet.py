"""
Stacks HD wallet.

A wallet owns one BIP-32 root key (from a BIP-39 mnemonic or an encrypted
vault) and lazily derives per-index accounts under the Stacks path
``m/44'/5757'/0'/0``, caching each one the first time it is requested.

Usage:
    wallet = StacksWallet.from_secret_key(phrase)
    account = wallet.get_account(0)
    account.get_address(AddressVersion.MAINNET_P2PKH)

    blob = wallet.encrypt_key("passphrase")
    restored = StacksWallet.from_encrypted_key("passphrase", blob)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mnemonic import Mnemonic

from stxwallet_core.address import AddressVersion, StacksAddress
from stxwallet_core.bip32 import ExtendedPrivateKey
from stxwallet_core.c32 import c32_address
from stxwallet_core.errors import MnemonicError
from stxwallet_core.vault import (
    decrypt_root_key,
    encrypt_root_key,
    read_vault,
    write_vault,
)

logger = logging.getLogger("stxwallet.wallet")

STX_DERIVATION_PATH = "m/44'/5757'/0'/0"

_WORDLIST = Mnemonic("english")

StacksAccounts = dict[int, "StacksAccount"]


@dataclass(frozen=True)
class StacksAccount:
    """
    One derived keypair: derivation index, compressed public key and the
    32-byte private key.

    Obtain accounts through :meth:`StacksWallet.get_account` (or
    :meth:`derive`) rather than building them from arbitrary key bytes.
    """

    index: int
    public_key: bytes
    private_key: bytes = field(repr=False)

    @classmethod
    def derive(cls, root: ExtendedPrivateKey, index: int) -> StacksAccount:
        """Derive the account at *index* below :data:`STX_DERIVATION_PATH`."""
        child = root.derive(STX_DERIVATION_PATH).child(index)
        return cls(index=index, public_key=child.public_key(), private_key=child.private_key)

    def get_address(self, version: int = AddressVersion.MAINNET_P2PKH) -> str:
        """Render the single-sig hash of this account's key under *version*."""
        address = StacksAddress.from_public_key(self.public_key)
        return c32_address(address.as_bytes(), int(version))


class StacksWallet:
    """Root key plus a memo of derived accounts, keyed by index."""

    def __init__(
        self,
        root_key: ExtendedPrivateKey,
        accounts: StacksAccounts | None = None,
    ):
        self._root_key = root_key
        self._accounts: StacksAccounts = dict(accounts) if accounts else {}

    # ---- factory methods ----

    @classmethod
    def from_secret_key(cls, secret_key: str) -> StacksWallet:
        """Import a wallet from a BIP-39 mnemonic phrase (no extra passphrase)."""
        if not isinstance(secret_key, str):
            raise MnemonicError("Mnemonic phrase must be a string")
        phrase = " ".join(secret_key.split())
        if not _WORDLIST.check(phrase):
            raise MnemonicError("Invalid mnemonic phrase")
        seed = Mnemonic.to_seed(phrase, passphrase="")
        root_key = ExtendedPrivateKey.from_seed(seed)
        logger.info("Wallet imported from mnemonic")
        return cls(root_key)

    @classmethod
    def generate(cls, strength: int = 256) -> tuple[str, StacksWallet]:
        """Create a fresh mnemonic and its wallet. Returns ``(phrase, wallet)``."""
        try:
            phrase = _WORDLIST.generate(strength=strength)
        except ValueError as exc:
            raise MnemonicError(str(exc)) from exc
        return phrase, cls.from_secret_key(phrase)

    @classmethod
    def from_encrypted_key(cls, passphrase: str, data: bytes) -> StacksWallet:
        """Rebuild a wallet from a vault blob. The account cache starts empty."""
        return cls(decrypt_root_key(passphrase, data))

    @classmethod
    def load(cls, path: str | Path, passphrase: str) -> StacksWallet:
        return cls.from_encrypted_key(passphrase, read_vault(path))

    # ---- accounts ----

    def get_account(self, index: int) -> StacksAccount:
        """Return the account at *index*, deriving and caching it on first use."""
        account = self._accounts.get(index)
        if account is not None:
            return account
        account = StacksAccount.derive(self._root_key, index)
        logger.debug(f"Derived account {index}")
        self.set_account(index, account)
        return account

    def set_account(self, index: int, account: StacksAccount) -> None:
        """Insert or replace the cached account at *index* (not re-validated)."""
        self._accounts[index] = account

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    # ---- encryption ----

    def encrypt_key(self, passphrase: str) -> bytes:
        """Encrypt the root key (not the account cache) under *passphrase*."""
        return encrypt_root_key(self._root_key, passphrase)

    def save(self, path: str | Path, passphrase: str) -> None:
        write_vault(path, self.encrypt_key(passphrase))

    # ---- misc ----

    @property
    def root_key(self) -> ExtendedPrivateKey:
        return self._root_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StacksWallet):
            return NotImplemented
        return self._root_key == other._root_key and self._accounts == other._accounts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"StacksWallet(fingerprint={self._root_key.fingerprint.hex()}, "
            f"accounts={len(self._accounts)})"
        )
