"""
stxwallet - hierarchical-deterministic wallet core for Stacks accounts.

Key features:
- BIP-39 mnemonic import and BIP-32 derivation under m/44'/5757'/0'/0
- Lazily derived, cached per-index accounts
- c32check address rendering for mainnet/testnet, single-sig/script
- Passphrase-encrypted root key vault (PBKDF2-HMAC-SHA512 + AES-128-GCM)
"""

from stxwallet_core.address import AddressVersion, StacksAddress
from stxwallet_core.bip32 import ExtendedPrivateKey
from stxwallet_core.errors import (
    AuthenticationError,
    CryptoSetupError,
    DerivationError,
    EncodingError,
    MalformedVaultError,
    MnemonicError,
    WalletError,
)
from stxwallet_core.wallet import STX_DERIVATION_PATH, StacksAccount, StacksWallet

__version__ = "0.1.0"
__all__ = [
    "AddressVersion",
    "AuthenticationError",
    "CryptoSetupError",
    "DerivationError",
    "EncodingError",
    "ExtendedPrivateKey",
    "MalformedVaultError",
    "MnemonicError",
    "STX_DERIVATION_PATH",
    "StacksAccount",
    "StacksAddress",
    "StacksWallet",
    "WalletError",
]
