"""Visual-row math shared by the gutter and text viewport."""

from __future__ import annotations

import unittest
from itertools import islice

from termframe import wrap


class WrapRowMathTests(unittest.TestCase):
    def test_wrapped_line_count(self) -> None:
        self.assertEqual(wrap.wrapped_line_count("", 10), 1)
        self.assertEqual(wrap.wrapped_line_count("a" * 10, 10), 1)
        self.assertEqual(wrap.wrapped_line_count("a" * 11, 10), 2)
        self.assertEqual(wrap.wrapped_line_count("a" * 5, 0), 1)

    def test_total_visual_lines(self) -> None:
        self.assertEqual(wrap.total_visual_lines(["a" * 25, "", "b"], 10), 5)

    def test_locate_visual_row(self) -> None:
        lines = ["a" * 25, "b"]
        self.assertEqual(wrap.locate_visual_row(lines, 0, 10), (0, 0))
        self.assertEqual(wrap.locate_visual_row(lines, 1, 10), (0, 1))
        self.assertEqual(wrap.locate_visual_row(lines, 3, 10), (1, 0))
        self.assertEqual(wrap.locate_visual_row(lines, 9, 10), (2, 0))

    def test_iter_visual_rows_keeps_yielding_past_end(self) -> None:
        rows = list(islice(wrap.iter_visual_rows(["abc", "d"], 0, 2), 5))
        self.assertEqual(rows, [(0, 0), (0, 1), (1, 0), (2, 0), (2, 0)])

    def test_wrap_chunk(self) -> None:
        self.assertEqual(wrap.wrap_chunk("abcdefghij", 1, 4), "efgh")
        self.assertEqual(wrap.wrap_chunk("abcdefghij", 2, 4), "ij")
        self.assertEqual(wrap.wrap_chunk("abcdefghij", 3, 4), "")


class CellWrapTests(unittest.TestCase):
    def test_tabs_count_tab_width_cells(self) -> None:
        self.assertEqual(wrap.wrap_segments("\tabcdefghij", 10, tab_width=4), [(0, 7), (7, 11)])
        self.assertEqual(wrap.wrapped_line_count("\tabcdefghij", 10, tab_width=4), 2)
        self.assertEqual(wrap.wrapped_line_count("\tabcdefghij", 10, tab_width=1), 2)
        self.assertEqual(wrap.wrapped_line_count("\tabcdefgh", 10, tab_width=1), 1)

    def test_wide_glyphs_count_two_cells(self) -> None:
        self.assertEqual(wrap.wrap_segments("日本語日本語", 6), [(0, 3), (3, 6)])

    def test_wide_glyph_never_straddles_row_edge(self) -> None:
        self.assertEqual(wrap.wrap_segments("ab日c", 3), [(0, 2), (2, 4)])

    def test_combining_mark_stays_with_its_base(self) -> None:
        self.assertEqual(wrap.wrap_segments("abe\u0301", 3), [(0, 4)])

    def test_glyph_wider_than_row_gets_its_own_row(self) -> None:
        self.assertEqual(wrap.wrap_segments("\tx", 2, tab_width=4), [(0, 1), (1, 2)])

    def test_total_visual_lines_uses_cells(self) -> None:
        self.assertEqual(wrap.total_visual_lines(["日本語日本語", "\tab"], 6, tab_width=4), 3)


if __name__ == "__main__":
    unittest.main()
