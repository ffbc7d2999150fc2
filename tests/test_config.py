"""
Tests for stxwallet_core.config — TOML configuration and environment overrides.

Covers:
  - Default values
  - TOML parsing and section merging
  - Environment variable overrides (precedence over TOML)
  - Network validation and address version selection
  - Missing TOML file
"""

from __future__ import annotations

import os
import tempfile
import textwrap
import unittest
from unittest.mock import patch

from stxwallet_core.address import AddressVersion
from stxwallet_core.config import (
    LoggingConfig,
    StxWalletConfig,
    WalletConfig,
    _merge,
    load_config,
)

_ENV_KEYS = (
    "STXWALLET_VAULT_FILE",
    "STXWALLET_NETWORK",
    "STXWALLET_LOG_LEVEL",
    "STXWALLET_LOG_FMT",
)


def _clean_env():
    return {k: v for k, v in os.environ.items() if k not in _ENV_KEYS}


def _write_toml(body: str) -> str:
    f = tempfile.NamedTemporaryFile("w", suffix=".toml", delete=False)
    f.write(textwrap.dedent(body))
    f.close()
    return f.name


class TestDefaults(unittest.TestCase):

    def test_wallet_defaults(self):
        w = WalletConfig()
        self.assertEqual(w.vault_file, "data/wallet.vault")
        self.assertEqual(w.default_network, "mainnet")

    def test_logging_defaults(self):
        lg = LoggingConfig()
        self.assertEqual(lg.level, "INFO")
        self.assertEqual(lg.format, "human")
        self.assertIsNone(lg.file)

    def test_top_level(self):
        cfg = StxWalletConfig()
        self.assertIsInstance(cfg.wallet, WalletConfig)
        self.assertIsInstance(cfg.logging, LoggingConfig)

    def test_no_kdf_knobs(self):
        self.assertFalse(hasattr(WalletConfig(), "kdf_iterations"))


class TestAddressVersionSelection(unittest.TestCase):

    def test_mainnet(self):
        w = WalletConfig()
        self.assertIs(w.address_version(), AddressVersion.MAINNET_P2PKH)
        self.assertIs(w.address_version(multisig=True), AddressVersion.MAINNET_P2SH)

    def test_testnet(self):
        w = WalletConfig(default_network="testnet")
        self.assertIs(w.address_version(), AddressVersion.TESTNET_P2PKH)
        self.assertIs(w.address_version(multisig=True), AddressVersion.TESTNET_P2SH)


class TestLoadConfig(unittest.TestCase):

    def test_no_path(self):
        with patch.dict(os.environ, _clean_env(), clear=True):
            cfg = load_config()
        self.assertEqual(cfg.wallet.default_network, "mainnet")

    def test_missing_file_uses_defaults(self):
        with patch.dict(os.environ, _clean_env(), clear=True):
            cfg = load_config("/nonexistent/stxwallet.toml")
        self.assertEqual(cfg.wallet.vault_file, "data/wallet.vault")

    def test_toml_sections(self):
        path = _write_toml("""
            [wallet]
            vault-file = "keys/alice.vault"
            default_network = "testnet"

            [logging]
            level = "DEBUG"
            format = "json"
            file = "logs/wallet.log"
        """)
        try:
            with patch.dict(os.environ, _clean_env(), clear=True):
                cfg = load_config(path)
        finally:
            os.unlink(path)
        self.assertEqual(cfg.wallet.vault_file, "keys/alice.vault")
        self.assertEqual(cfg.wallet.default_network, "testnet")
        self.assertEqual(cfg.logging.level, "DEBUG")
        self.assertEqual(cfg.logging.format, "json")
        self.assertEqual(cfg.logging.file, "logs/wallet.log")

    def test_env_overrides_toml(self):
        path = _write_toml("""
            [wallet]
            default_network = "mainnet"
        """)
        env = _clean_env()
        env.update({
            "STXWALLET_NETWORK": "TESTNET",
            "STXWALLET_VAULT_FILE": "/tmp/x.vault",
            "STXWALLET_LOG_LEVEL": "warning",
            "STXWALLET_LOG_FMT": "json",
        })
        try:
            with patch.dict(os.environ, env, clear=True):
                cfg = load_config(path)
        finally:
            os.unlink(path)
        self.assertEqual(cfg.wallet.default_network, "testnet")
        self.assertEqual(cfg.wallet.vault_file, "/tmp/x.vault")
        self.assertEqual(cfg.logging.level, "WARNING")
        self.assertEqual(cfg.logging.format, "json")

    def test_unknown_network_rejected(self):
        env = _clean_env()
        env["STXWALLET_NETWORK"] = "regtest"
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ValueError):
                load_config()


class TestMerge(unittest.TestCase):

    def test_unknown_keys_ignored(self):
        w = WalletConfig()
        _merge(w, {"bogus": 1, "vault_file": "a.vault"})
        self.assertEqual(w.vault_file, "a.vault")
        self.assertFalse(hasattr(w, "bogus"))

    def test_hyphenated_keys(self):
        w = WalletConfig()
        _merge(w, {"default-network": "testnet"})
        self.assertEqual(w.default_network, "testnet")


if __name__ == "__main__":
    unittest.main()
