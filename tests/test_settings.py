import os
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from price_tracker.config.settings import Settings


class TestTrackerSettings(unittest.TestCase):
    def test_defaults_when_env_is_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.POLL_INTERVAL_SEC, 10.0)
        self.assertEqual(settings.REQUEST_TIMEOUT_SEC, 10.0)
        self.assertEqual(settings.DATA_DIR, Path("."))
        self.assertEqual(settings.ALPHA_VANTAGE_API_KEY, "demo")
        self.assertEqual(settings.SP500_SYMBOL, "SPY")

    def test_env_overrides_are_parsed(self):
        env = {
            "PRICE_TRACKER_INTERVAL_SEC": "2.5",
            "PRICE_TRACKER_TIMEOUT_SEC": " 15 ",
            "PRICE_TRACKER_DATA_DIR": "/tmp/prices",
            "ALPHA_VANTAGE_API_KEY": "key-123",
            "PRICE_TRACKER_SP500_SYMBOL": "VOO",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.POLL_INTERVAL_SEC, 2.5)
        self.assertEqual(settings.REQUEST_TIMEOUT_SEC, 15.0)
        self.assertEqual(settings.DATA_DIR, Path("/tmp/prices"))
        self.assertEqual(settings.ALPHA_VANTAGE_API_KEY, "key-123")
        self.assertEqual(settings.SP500_SYMBOL, "VOO")

    def test_blank_values_fall_back_to_defaults(self):
        with patch.dict(os.environ, {"PRICE_TRACKER_INTERVAL_SEC": "  "}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.POLL_INTERVAL_SEC, 10.0)

    def test_non_positive_interval_fails_validation(self):
        with patch.dict(os.environ, {"PRICE_TRACKER_INTERVAL_SEC": "0"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings.from_env()

    def test_non_numeric_timeout_fails_validation(self):
        with patch.dict(os.environ, {"PRICE_TRACKER_TIMEOUT_SEC": "soon"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings.from_env()


if __name__ == "__main__":
    unittest.main()
