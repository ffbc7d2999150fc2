"""
Logging configuration for the wallet core.

Supports two output formats:
  - **human** – coloured, single-line, readable
  - **json**  – newline-delimited JSON for log aggregators

Every handler installed here carries a :class:`SecretRedactionFilter` so a
stray private key or chain code in a message is masked before output.

Usage:
    from stxwallet_core.logging_config import setup_logging
    setup_logging(level="DEBUG", fmt="json", log_file="stxwallet.log")
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from stxwallet_core.config import LoggingConfig

LOGGER_NAME = "stxwallet"

# 32+ byte hex runs: private keys, chain codes, seeds
_SECRET_HEX = re.compile(r"\b[0-9a-fA-F]{64,}\b")
REDACTED = "<redacted>"


class SecretRedactionFilter(logging.Filter):
    """Replace long hex runs in the rendered message."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        if _SECRET_HEX.search(msg):
            record.msg = _SECRET_HEX.sub(REDACTED, msg)
            record.args = None
            record.redacted = True
        return True


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "redacted": getattr(record, "redacted", False),
        }
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str)


class _HumanFormatter(logging.Formatter):
    """Coloured, concise single-line format."""

    COLOURS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colour = self.COLOURS.get(record.levelname, "")
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        marker = " (redacted)" if getattr(record, "redacted", False) else ""
        return (
            f"{colour}{ts} [{record.levelname:<7}]{self.RESET} "
            f"{record.name}: {record.getMessage()}{marker}"
        )


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``stxwallet`` logger hierarchy and return its root.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    fmt : str
        ``"human"`` for coloured single-line output, ``"json"`` for
        newline-delimited JSON.
    log_file : str, optional
        If provided, logs are *also* written to this file (always JSON).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers on repeated setup
    logger.handlers.clear()
    redact = SecretRedactionFilter()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_JSONFormatter() if fmt == "json" else _HumanFormatter())
    console.addFilter(redact)
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path))
        fh.setFormatter(_JSONFormatter())
        fh.addFilter(redact)
        logger.addHandler(fh)

    return logger


def setup_logging_from_config(cfg: LoggingConfig) -> logging.Logger:
    return setup_logging(level=cfg.level, fmt=cfg.format, log_file=cfg.file)
