"""Minimap renderer, viewport indicator, and click-mapping tests."""

from __future__ import annotations

import unittest

from termframe.ansi import strip_escapes, visual_width
from termframe.minimap import MinimapRenderer, compute_metrics, row_to_line
from termframe.state import build_render_state
from termframe.ui_theme import DEFAULT_THEME, PLAIN_THEME


class MinimapRenderTests(unittest.TestCase):
    def test_disabled_renders_blank_rows(self) -> None:
        state = build_render_state(["abc"] * 10)
        self.assertEqual(MinimapRenderer().render(8, 3, state), ["        "] * 3)

    def test_degenerate_sizes_render_blank_rows(self) -> None:
        renderer = MinimapRenderer(enabled=True)
        state = build_render_state(["abc"])
        self.assertEqual(renderer.render(0, 2, state), ["", ""])
        self.assertEqual(renderer.render(8, 0, state), [])
        self.assertEqual(renderer.render(4, 1, None), ["    "])

    def test_row_layout_indicator_body_and_padding(self) -> None:
        state = build_render_state(["ab"] * 4, theme=PLAIN_THEME)
        rows = MinimapRenderer(enabled=True).render(4, 1, state)
        # One source column per glyph: only the right dot column can fill.
        self.assertEqual(rows, ["│⢸⢸ "])

    def test_every_row_has_allocated_width(self) -> None:
        lines = [("x" * (idx % 37)) + " 日本" for idx in range(200)]
        state = build_render_state(lines, scroll_y=50)
        for width in (1, 2, 3, 8, 12):
            rows = MinimapRenderer(enabled=True).render(width, 10, state)
            with self.subTest(width=width):
                self.assertEqual(len(rows), 10)
                for row in rows:
                    self.assertEqual(visual_width(row), width)

    def test_indicator_marks_rows_overlapping_viewport(self) -> None:
        state = build_render_state(["code"] * 40, theme=PLAIN_THEME)
        rows = MinimapRenderer(enabled=True).render(8, 10, state)

        marked = [row.startswith("│") for row in rows]
        self.assertEqual(marked, [True, True, True] + [False] * 7)

    def test_indicator_uses_theme_color(self) -> None:
        state = build_render_state(["code"] * 4)
        rows = MinimapRenderer(enabled=True).render(8, 2, state)
        self.assertTrue(rows[0].startswith(DEFAULT_THEME.minimap_indicator + "│"))

    def test_rows_past_document_have_blank_body(self) -> None:
        state = build_render_state(["abc", "def"], theme=PLAIN_THEME)
        rows = MinimapRenderer(enabled=True).render(8, 4, state)
        self.assertEqual(strip_escapes(rows[3])[1:], " " * 7)

    def test_blank_lines_raise_no_dots(self) -> None:
        state = build_render_state(["   ", "\t\t", ""] * 4, theme=PLAIN_THEME)
        rows = MinimapRenderer(enabled=True).render(8, 3, state)
        for row in rows:
            self.assertEqual(row[1:7], "⠀" * 6)

    def test_toggle_flips_enabled_flag(self) -> None:
        renderer = MinimapRenderer()
        self.assertFalse(renderer.is_enabled())
        self.assertTrue(renderer.toggle())
        self.assertFalse(renderer.toggle())
        renderer.set_enabled(True)
        self.assertTrue(renderer.is_enabled())


class MinimapMetricsTests(unittest.TestCase):
    def test_rows_map_to_proportional_ranges(self) -> None:
        metrics = compute_metrics(10, build_render_state(["x"] * 100))
        self.assertEqual(metrics.lines_per_row, 10.0)
        self.assertEqual(metrics.row_range(3), (30, 40))

    def test_row_to_line_boundaries(self) -> None:
        metrics = compute_metrics(10, build_render_state(["x"] * 100))
        self.assertEqual(row_to_line(0, metrics), 0)
        self.assertEqual(row_to_line(5, metrics), 50)
        self.assertEqual(row_to_line(9, metrics), 99)

    def test_row_to_line_clamps(self) -> None:
        metrics = compute_metrics(10, build_render_state(["x"] * 100))
        self.assertEqual(row_to_line(-4, metrics), 0)
        self.assertEqual(row_to_line(500, metrics), 99)

    def test_short_document_is_not_stretched(self) -> None:
        metrics = compute_metrics(10, build_render_state(["a", "b", "c"]))
        self.assertEqual(metrics.lines_per_row, 1.0)
        self.assertEqual(row_to_line(2, metrics), 2)
        self.assertEqual(row_to_line(6, metrics), 2)
        self.assertEqual(row_to_line(9, metrics), 2)

    def test_wrapped_extent_uses_visual_lines(self) -> None:
        state = build_render_state(["x" * 30] * 10, word_wrap=True, text_width=10)
        metrics = MinimapRenderer().get_metrics(10, state)
        self.assertEqual(metrics.total_lines, 30)
        self.assertEqual(MinimapRenderer().row_to_line(9, metrics), 29)

    def test_empty_document_has_extent_one(self) -> None:
        metrics = compute_metrics(5, build_render_state([]))
        self.assertEqual(metrics.total_lines, 1)
        self.assertEqual(row_to_line(0, metrics), 0)
        self.assertEqual(row_to_line(4, metrics), 0)


if __name__ == "__main__":
    unittest.main()
