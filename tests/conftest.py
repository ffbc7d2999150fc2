"""
Shared pytest fixtures for the stxwallet test suite.
"""

import pytest

from stxwallet_core.wallet import StacksWallet

KNOWN_PHRASE = (
    "sound idle panel often situate develop unit text design antenna vendor "
    "screen opinion balcony share trigger accuse scatter visa uniform brass "
    "update opinion media"
)


@pytest.fixture
def phrase():
    """Mnemonic with published address vectors."""
    return KNOWN_PHRASE


@pytest.fixture
def wallet(phrase):
    """Wallet imported from the known mnemonic."""
    return StacksWallet.from_secret_key(phrase)


@pytest.fixture
def vault_path(tmp_path):
    """Location for a vault file inside the test's temp dir."""
    return tmp_path / "wallets" / "main.vault"
