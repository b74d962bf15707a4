"""Tests for the collect/resolve/filter/render pipeline wiring."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lr.app import ListingOptions, execute, iter_rows
from lr.diagnostics import Diagnostics


def _make_inputs(root: Path) -> Path:
    inputs = root / "inputs"
    inputs.mkdir()
    (inputs / "dir1").mkdir()
    (inputs / "dir2").mkdir()
    (inputs / "file1.txt").write_text("", encoding="utf-8")
    (inputs / ".hidden_file.txt").write_text("", encoding="utf-8")
    return inputs


class IterRowsTests(unittest.TestCase):
    def test_rows_use_display_names_and_skip_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            inputs = _make_inputs(Path(tmp))
            rows = list(iter_rows(ListingOptions(paths=(str(inputs),)), Diagnostics(stream=io.StringIO())))
            self.assertEqual([row.name for row in rows], ["dir1", "dir2", "file1.txt"])

    def test_show_all_includes_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            inputs = _make_inputs(Path(tmp))
            options = ListingOptions(paths=(str(inputs),), show_all=True)
            rows = list(iter_rows(options, Diagnostics(stream=io.StringIO())))
            self.assertEqual([row.name for row in rows], [".hidden_file.txt", "dir1", "dir2", "file1.txt"])

    def test_children_of_hidden_directory_are_visible(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            hidden_dir = Path(tmp) / ".config"
            hidden_dir.mkdir()
            (hidden_dir / "settings.json").write_text("{}", encoding="utf-8")
            (hidden_dir / ".secret").write_text("", encoding="utf-8")

            rows = list(iter_rows(ListingOptions(paths=(str(hidden_dir),)), Diagnostics(stream=io.StringIO())))

            self.assertEqual([row.name for row in rows], ["settings.json"])

    def test_metadata_failure_drops_only_that_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            inputs = _make_inputs(Path(tmp))
            (inputs / "broken").symlink_to(inputs / "gone")
            stderr = io.StringIO()

            rows = list(iter_rows(ListingOptions(paths=(str(inputs),)), Diagnostics(stream=stderr)))

            self.assertEqual([row.name for row in rows], ["dir1", "dir2", "file1.txt"])
            self.assertIn(f"cannot access file's metadata '{inputs / 'broken'}'", stderr.getvalue())


class ExecuteTests(unittest.TestCase):
    def test_undecodable_filenames_survive_a_strict_utf8_stream(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fd = os.open(os.path.join(os.fsencode(tmp), b"bad\xff.txt"), os.O_CREAT | os.O_WRONLY, 0o644)
            os.close(fd)
            (Path(tmp) / "good.txt").write_text("", encoding="utf-8")
            raw = io.BytesIO()
            stdout = io.TextIOWrapper(raw, encoding="utf-8", errors="strict")

            status = execute(ListingOptions(paths=(tmp,), long_format=True), stdout=stdout, stderr=io.StringIO())

            output = raw.getvalue().decode("utf-8")
            self.assertEqual(status, 0)
            self.assertIn("bad\ufffd.txt", output)
            self.assertIn("good.txt", output)
            self.assertEqual(len(output.splitlines()), 2)

    def test_execute_returns_zero_even_with_failures(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            inputs = _make_inputs(Path(tmp))
            stdout = io.StringIO()
            stderr = io.StringIO()
            options = ListingOptions(paths=(str(Path(tmp) / "missing"), str(inputs)))

            status = execute(options, stdout=stdout, stderr=stderr)

            self.assertEqual(status, 0)
            self.assertEqual(stdout.getvalue(), "dir1  dir2  file1.txt  \n")
            self.assertIn("missing", stderr.getvalue())
            self.assertNotIn("missing", stdout.getvalue())

    def test_execute_uses_a_single_writer_for_the_run(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            inputs = _make_inputs(Path(tmp))
            with mock.patch("lr.app.ListingWriter") as writer_cls:
                execute(ListingOptions(paths=(str(inputs), str(inputs))), stdout=io.StringIO())
            writer_cls.assert_called_once()


if __name__ == "__main__":
    unittest.main()
