"""CLI argument parsing, config merging and exit-status behavior.

Verifies how ``dirls.cli.main`` turns flags and paths into a listing call.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirls import cli


class CliFlagTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "config.json"
        patcher = mock.patch("dirls.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def test_defaults_to_current_directory_without_flags(self) -> None:
        with mock.patch("dirls.cli.list_path", return_value=0) as list_path:
            cli.main([])

        list_path.assert_called_once_with(".", show_hidden=False, long_format=False, recursive=False)

    def test_combined_flags_and_path_in_any_order(self) -> None:
        with mock.patch("dirls.cli.list_path", return_value=0) as list_path:
            cli.main(["-R", "target", "-la"])

        list_path.assert_called_once_with("target", show_hidden=True, long_format=True, recursive=True)

    def test_missing_path_exits_with_diagnostic(self) -> None:
        missing = Path(self._tmp.name) / "missing"
        with self.assertRaises(SystemExit) as raised:
            cli.main([str(missing)])

        self.assertIsInstance(raised.exception.code, str)
        self.assertIn("cannot access", raised.exception.code)
        self.assertIn(str(missing), raised.exception.code)

    def test_nested_failures_exit_with_status_one(self) -> None:
        with mock.patch("dirls.cli.list_path", return_value=2):
            with self.assertRaises(SystemExit) as raised:
                cli.main(["-R", "x"])
        self.assertEqual(raised.exception.code, 1)

    def test_configured_defaults_are_merged_with_flags(self) -> None:
        self.config_path.write_text(json.dumps({"long_format": True}), encoding="utf-8")
        with mock.patch("dirls.cli.list_path", return_value=0) as list_path:
            cli.main(["-a", "x"])

        list_path.assert_called_once_with("x", show_hidden=True, long_format=True, recursive=False)

    def test_save_defaults_persists_given_flags(self) -> None:
        with mock.patch("dirls.cli.list_path", return_value=0):
            cli.main(["--save-defaults", "-l"])

        saved = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(saved, {"show_hidden": False, "long_format": True, "recursive": False})


if __name__ == "__main__":
    unittest.main()
