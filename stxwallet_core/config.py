"""
TOML-based configuration for the wallet core.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Usage:
    from stxwallet_core.config import load_config
    cfg = load_config("stxwallet.toml")
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from stxwallet_core.address import NETWORKS, AddressVersion

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import,no-redef]


@dataclass
class WalletConfig:
    """Where the encrypted vault lives and which network addresses render for.

    The key-stretching parameters are part of the vault format and are
    deliberately absent here.
    """
    vault_file: str = "data/wallet.vault"
    default_network: str = "mainnet"   # "mainnet" or "testnet"

    def address_version(self, multisig: bool = False) -> AddressVersion:
        return AddressVersion.for_network(self.default_network, multisig=multisig)


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class StxWalletConfig:
    """Top-level configuration container."""
    wallet: WalletConfig = field(default_factory=WalletConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def load_config(path: str | None = None) -> StxWalletConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        STXWALLET_VAULT_FILE -> wallet.vault_file
        STXWALLET_NETWORK    -> wallet.default_network
        STXWALLET_LOG_LEVEL  -> logging.level
        STXWALLET_LOG_FMT    -> logging.format
    """
    cfg = StxWalletConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("wallet", cfg.wallet),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("STXWALLET_VAULT_FILE"):
        cfg.wallet.vault_file = v
    if v := os.environ.get("STXWALLET_NETWORK"):
        cfg.wallet.default_network = v.lower()
    if v := os.environ.get("STXWALLET_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("STXWALLET_LOG_FMT"):
        cfg.logging.format = v

    if cfg.wallet.default_network not in NETWORKS:
        raise ValueError(
            f"Unknown network {cfg.wallet.default_network!r} (expected one of {NETWORKS})"
        )
    return cfg
