"""Tests for directory enumeration with optional synthetic entries."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dirls.listing_model import ListingIOError, NotFoundError, PermissionDeniedError, list_entries
from tests.fakes import FakeFilesystem, FakeIdentity, dir_stat, file_stat


def _sample_fs() -> FakeFilesystem:
    fs = FakeFilesystem()
    fs.add_dir("/", dir_stat(blocks=1, uid=0, gid=0))
    fs.add_dir("/data", dir_stat(blocks=4))
    fs.add_file("/data/zeta", file_stat(size=3))
    fs.add_file("/data/.hidden", file_stat(size=5))
    fs.add_file("/data/alpha", file_stat(size=7))
    return fs


class ListEntriesTests(unittest.TestCase):
    def test_preserves_enumeration_order(self) -> None:
        entries = list_entries("/data", False, False, _sample_fs(), FakeIdentity())
        self.assertEqual([entry.name for entry in entries], ["zeta", ".hidden", "alpha"])

    def test_synthetic_entries_precede_real_entries(self) -> None:
        entries = list_entries("/data", True, False, _sample_fs(), FakeIdentity())

        self.assertEqual([entry.name for entry in entries], [".", "..", "zeta", ".hidden", "alpha"])
        dot, dotdot = entries[0], entries[1]
        self.assertTrue(dot.is_directory)
        self.assertEqual(dot.block_count, 4)
        self.assertEqual(dot.owner_name, "alice")
        self.assertEqual(dotdot.block_count, 1)
        self.assertEqual(dotdot.owner_name, "root")

    def test_suppress_synthetic_wins_over_include(self) -> None:
        entries = list_entries("/data", True, True, _sample_fs(), FakeIdentity())
        self.assertEqual([entry.name for entry in entries], ["zeta", ".hidden", "alpha"])

    def test_open_failures_propagate(self) -> None:
        fs = _sample_fs()
        fs.open_errors["/data"] = PermissionDeniedError("/data", "Permission denied")
        with self.assertRaises(PermissionDeniedError):
            list_entries("/data", False, False, fs, FakeIdentity())
        with self.assertRaises(NotFoundError):
            list_entries("/missing", False, False, fs, FakeIdentity())

    def test_entry_failure_discards_partial_results(self) -> None:
        fs = _sample_fs()
        fs.children["/data"].append("vanished")
        with self.assertRaises(NotFoundError):
            list_entries("/data", False, False, fs, FakeIdentity())

        fs.open_errors["/data"] = ListingIOError("/data", "Input/output error")
        with self.assertRaises(ListingIOError):
            list_entries("/data", False, False, fs, FakeIdentity())

    def test_real_directory_with_hidden_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a").write_text("a", encoding="utf-8")
            (root / ".hidden").write_text("h", encoding="utf-8")
            (root / "b").mkdir()

            plain = list_entries(root, False, False)
            with_synthetic = list_entries(root, True, False)

            self.assertEqual(sorted(entry.name for entry in plain), [".hidden", "a", "b"])
            self.assertEqual([entry.name for entry in with_synthetic[:2]], [".", ".."])
            self.assertEqual(len(with_synthetic), 5)
            by_name = {entry.name: entry for entry in plain}
            self.assertTrue(by_name["b"].is_directory)
            self.assertFalse(by_name["a"].is_directory)


if __name__ == "__main__":
    unittest.main()
