"""CLI argument handling and one-frame output."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from termframe import cli
from termframe.ansi import visual_width
from termframe.config import ViewSettings


class TermframeCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "demo.py"
        self.path.write_text("def f():\n    return 1\n", encoding="utf-8")
        patcher = mock.patch.object(cli, "load_view_settings", return_value=ViewSettings())
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> list[str]:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main([str(self.path), *argv])
        output = stdout.getvalue()
        self.assertTrue(output.endswith("\n"))
        return output[:-1].split("\n")

    def test_plain_frame_has_exact_geometry(self) -> None:
        rows = self._run("--width", "30", "--height", "4", "--no-color")
        self.assertEqual(len(rows), 4)
        self.assertTrue(rows[0].startswith("   1 def f():"))
        self.assertTrue(rows[1].startswith("   2     return 1"))
        for row in rows:
            self.assertNotIn("\x1b", row)
            self.assertEqual(visual_width(row), 30)

    def test_color_output_includes_syntax_escapes(self) -> None:
        rows = self._run("--width", "30", "--height", "2")
        self.assertIn("\033[96mdef", rows[0])

    def test_flag_can_disable_saved_line_numbers(self) -> None:
        rows = self._run("--width", "20", "--height", "2", "--no-color", "--no-line-numbers")
        self.assertTrue(rows[0].startswith("def f():"))

    def test_minimap_flag_draws_braille(self) -> None:
        rows = self._run("--width", "40", "--height", "3", "--no-color", "--minimap")
        self.assertTrue(any("⠁" <= ch <= "⣿" for ch in rows[0]))

    def test_missing_path_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.path.with_name("absent.py"))])
        self.assertIn("Path not found", str(ctx.exception.code))

    def test_invalid_width_is_rejected(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main([str(self.path), "--width", "0"])

    def test_render_file_frame_scrolls(self) -> None:
        frame = cli.render_file_frame(self.path, 20, 1, ViewSettings(), scroll=1, no_color=True)
        self.assertTrue(frame.startswith("   2     return 1"))


if __name__ == "__main__":
    unittest.main()
