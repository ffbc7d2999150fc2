"""
Tests for stxwallet_core.logging_config.
"""

from __future__ import annotations

import io
import json
import logging
import unittest

from stxwallet_core.config import LoggingConfig
from stxwallet_core.logging_config import (
    LOGGER_NAME,
    REDACTED,
    SecretRedactionFilter,
    _HumanFormatter,
    _JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)

SECRET = "0ea813489b878f72be693bc5704d251e5eb0bc1e995ca2857a7ac11d51ec8d86"


def _record(msg, *args, level=logging.INFO):
    return logging.LogRecord("stxwallet.test", level, __file__, 1, msg, args, None)


class TestFormatters(unittest.TestCase):

    def test_json_fields(self):
        out = json.loads(_JSONFormatter().format(_record("hello %s", "there")))
        self.assertEqual(out["msg"], "hello there")
        self.assertEqual(out["level"], "INFO")
        self.assertEqual(out["logger"], "stxwallet.test")
        self.assertIn("ts", out)

    def test_human_contains_level_and_name(self):
        line = _HumanFormatter().format(_record("derived", level=logging.WARNING))
        self.assertIn("WARNING", line)
        self.assertIn("stxwallet.test: derived", line)


class TestRedaction(unittest.TestCase):

    def test_hex_secret_masked(self):
        rec = _record("key=%s", SECRET)
        SecretRedactionFilter().filter(rec)
        self.assertNotIn(SECRET, rec.getMessage())
        self.assertIn(REDACTED, rec.getMessage())

    def test_short_hex_kept(self):
        rec = _record("fingerprint e80f1cd8")
        SecretRedactionFilter().filter(rec)
        self.assertEqual(rec.getMessage(), "fingerprint e80f1cd8")

    def test_json_flags_redacted_records(self):
        rec = _record("key=%s", SECRET)
        SecretRedactionFilter().filter(rec)
        out = json.loads(_JSONFormatter().format(rec))
        self.assertTrue(out["redacted"])
        self.assertNotIn(SECRET, out["msg"])

    def test_json_clean_records_not_flagged(self):
        rec = _record("Root key decrypted")
        SecretRedactionFilter().filter(rec)
        self.assertFalse(json.loads(_JSONFormatter().format(rec))["redacted"])

    def test_human_marks_redacted_records(self):
        rec = _record("key=%s", SECRET)
        SecretRedactionFilter().filter(rec)
        self.assertTrue(_HumanFormatter().format(rec).endswith("(redacted)"))


class TestSetup(unittest.TestCase):

    def tearDown(self):
        logging.getLogger(LOGGER_NAME).handlers.clear()

    def test_level_and_single_handler(self):
        setup_logging(level="DEBUG")
        logger = setup_logging(level="DEBUG")
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

    def test_child_loggers_are_redacted(self):
        logger = setup_logging(level="INFO", fmt="json")
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)
        logging.getLogger("stxwallet.vault").info(f"leak {SECRET}")
        self.assertNotIn(SECRET, stream.getvalue())
        self.assertIn(REDACTED, stream.getvalue())

    def test_file_handler(self):
        import tempfile
        from pathlib import Path

        with tempfile.TemporaryDirectory() as d:
            path = Path(d) / "logs" / "w.log"
            logger = setup_logging_from_config(LoggingConfig(level="INFO", file=str(path)))
            logging.getLogger("stxwallet.wallet").info("Wallet imported from mnemonic")
            for h in logger.handlers:
                h.flush()
            line = path.read_text().strip().splitlines()[-1]
            self.assertEqual(json.loads(line)["msg"], "Wallet imported from mnemonic")
            for h in list(logger.handlers):
                h.close()


if __name__ == "__main__":
    unittest.main()
