from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_default_options_load_from_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"tree": false, "summary": true, "verbose": false}', encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {"tree": False, "summary": True, "verbose": False})
                self.assertEqual(
                    config.load_default_options(),
                    {"tree": False, "summary": True, "verbose": False},
                )

    def test_missing_or_malformed_config_yields_no_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_default_options(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_non_boolean_option_values_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"tree": "yes", "summary": 1, "verbose": true, "other": true}', encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_default_options(), {"verbose": True})

    def test_config_module_only_reads(self) -> None:
        self.assertFalse(hasattr(config, "save_config"))
        self.assertFalse(hasattr(config, "save_default_options"))


if __name__ == "__main__":
    unittest.main()
