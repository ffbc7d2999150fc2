"""
Error taxonomy for the wallet core.

Every failure surfaced by the package is a ``WalletError``.  It subclasses
``ValueError`` so callers that only care about "bad input" can keep catching
that.
"""

from __future__ import annotations


class WalletError(ValueError):
    """Base class for all wallet-core failures."""


class MnemonicError(WalletError):
    """Malformed phrase, unknown word or bad checksum."""


class DerivationError(WalletError):
    """Invalid path syntax or a child key that cannot be derived."""


class EncodingError(WalletError):
    """Address encoding or decoding failed."""


class CryptoSetupError(WalletError):
    """The cipher could not be constructed from the stretched key material."""


class AuthenticationError(WalletError):
    """Ciphertext failed tag verification (wrong passphrase or tampering)."""


class MalformedVaultError(WalletError):
    """Vault blob too short, or decrypted plaintext of unexpected length."""
