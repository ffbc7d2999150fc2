"""
Passphrase-protected at-rest format for a wallet root key.

Layout (no header, no version byte):

    salt (16) || AES-128-GCM ciphertext (64) || tag (16)

The plaintext is ``chain_code || private_key``.  The AES key and GCM nonce
are both taken from a single PBKDF2-HMAC-SHA512 run (100 000 iterations)
over the passphrase and salt: the first 16 bytes are the key, the next 12
the nonce.  Tree depth is not stored; a decrypted key is always a root.

Usage:
    blob = encrypt_root_key(root, "hunter2")
    root = decrypt_root_key("hunter2", blob)
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from Crypto.Cipher import AES

from stxwallet_core.bip32 import KEY_BYTE_SIZE, ExtendedPrivateKey
from stxwallet_core.errors import (
    AuthenticationError,
    CryptoSetupError,
    DerivationError,
    MalformedVaultError,
)

logger = logging.getLogger("stxwallet.vault")

SALT_LEN = 16
KEY_LEN = 16
NONCE_LEN = 12
TAG_LEN = 16
PBKDF2_ITERATIONS = 100_000
PBKDF2_HASH = "sha512"

PLAINTEXT_LEN = KEY_BYTE_SIZE + 32
MIN_VAULT_LEN = SALT_LEN + TAG_LEN


def stretch(passphrase: str, salt: bytes) -> tuple[bytes, bytes]:
    """Derive ``(encryption_key, nonce)`` from a passphrase and salt."""
    try:
        secret = passphrase.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CryptoSetupError("Passphrase is not encodable as UTF-8") from exc
    key_and_nonce = hashlib.pbkdf2_hmac(
        PBKDF2_HASH,
        secret,
        salt,
        PBKDF2_ITERATIONS,
        dklen=KEY_LEN + NONCE_LEN,
    )
    return key_and_nonce[:KEY_LEN], key_and_nonce[KEY_LEN:]


def _new_cipher(key: bytes, nonce: bytes):
    try:
        return AES.new(key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_LEN)
    except ValueError as exc:
        raise CryptoSetupError(f"Cannot initialise AES-GCM: {exc}") from exc


def encrypt_root_key(
    root_key: ExtendedPrivateKey,
    passphrase: str,
    salt: bytes | None = None,
) -> bytes:
    """Seal *root_key* under *passphrase*. A fresh random salt is used unless given."""
    if salt is None:
        salt = os.urandom(SALT_LEN)
    elif len(salt) != SALT_LEN:
        raise CryptoSetupError(f"Salt must be {SALT_LEN} bytes, got {len(salt)}")

    key, nonce = stretch(passphrase, salt)
    cipher = _new_cipher(key, nonce)
    ciphertext, tag = cipher.encrypt_and_digest(root_key.chain_code + root_key.private_key)

    logger.info(f"Root key encrypted ({SALT_LEN + len(ciphertext) + len(tag)} bytes)")
    return salt + ciphertext + tag


def decrypt_root_key(passphrase: str, data: bytes) -> ExtendedPrivateKey:
    """Open a vault blob. Raises on a wrong passphrase or any tampering."""
    if len(data) < MIN_VAULT_LEN:
        raise MalformedVaultError(
            f"Vault too short: {len(data)} bytes (minimum {MIN_VAULT_LEN})"
        )
    salt = data[:SALT_LEN]
    ciphertext = data[SALT_LEN:-TAG_LEN]
    tag = data[-TAG_LEN:]

    key, nonce = stretch(passphrase, salt)
    cipher = _new_cipher(key, nonce)
    try:
        plaintext = cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as exc:
        logger.warning("Vault authentication failed")
        raise AuthenticationError("Wrong passphrase or corrupted vault") from exc

    if len(plaintext) != PLAINTEXT_LEN:
        raise MalformedVaultError(
            f"Decrypted key material has length {len(plaintext)}, expected {PLAINTEXT_LEN}"
        )
    chain_code = plaintext[:KEY_BYTE_SIZE]
    private_key = plaintext[KEY_BYTE_SIZE:]
    try:
        root_key = ExtendedPrivateKey(private_key=private_key, chain_code=chain_code, depth=0)
    except DerivationError as exc:
        raise MalformedVaultError(str(exc)) from exc

    logger.info("Root key decrypted")
    return root_key


# ── file helpers ─────────────────────────────────────────────────


def write_vault(path: str | Path, data: bytes) -> None:
    """Write a vault blob to *path*, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(p, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    # O_CREAT mode only applies to new files
    if hasattr(os, "fchmod"):
        os.fchmod(fd, 0o600)
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    logger.info(f"Vault written: {p}")


def read_vault(path: str | Path) -> bytes:
    return Path(path).read_bytes()
