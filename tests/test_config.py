"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging
import os
import unittest
from pathlib import Path
from unittest.mock import patch

from salesdao import config


class TestConfig(unittest.TestCase):
    def test_default_db_path_under_repo(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SALESDAO_DB_PATH", None)
            self.assertEqual(config.get_db_path(), config.get_repo_root() / "data" / "sales.db")

    def test_db_path_override(self):
        with patch.dict(os.environ, {"SALESDAO_DB_PATH": "/tmp/other.db"}):
            self.assertEqual(config.get_db_path(), Path("/tmp/other.db"))

    def test_log_level(self):
        with patch.dict(os.environ, {"SALESDAO_LOG_LEVEL": "debug"}):
            self.assertEqual(config.get_log_level(), logging.DEBUG)

    def test_unknown_log_level_raises(self):
        with patch.dict(os.environ, {"SALESDAO_LOG_LEVEL": "chatty"}):
            with self.assertRaises(EnvironmentError):
                config.get_log_level()

    def test_missing_required_raises(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SALESDAO_REQUIRED_PROBE", None)
            with self.assertRaises(EnvironmentError):
                config._get("SALESDAO_REQUIRED_PROBE", required=True)


if __name__ == "__main__":
    unittest.main()
