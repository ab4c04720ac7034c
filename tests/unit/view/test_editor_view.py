"""Editor view wiring: column layout, toggles, hit testing, and frames."""

from __future__ import annotations

import unittest
from dataclasses import fields

from termframe.ansi import visual_width
from termframe.config import ViewSettings
from termframe.state import build_render_state
from termframe.ui_theme import OCEAN_THEME, PLAIN_THEME, UITheme
from termframe.view import EditorView


class EditorViewLayoutTests(unittest.TestCase):
    def test_default_layout_widths(self) -> None:
        view = EditorView(40, 5)
        self.assertTrue(view.line_numbers_enabled())
        self.assertEqual(view.text_width(), 34)

    def test_toggle_minimap_reallocates_text_width(self) -> None:
        view = EditorView(40, 5)
        self.assertTrue(view.toggle_minimap())
        self.assertEqual(view.text_width(), 26)
        self.assertFalse(view.toggle_minimap())
        self.assertEqual(view.text_width(), 34)

    def test_gutter_grows_with_line_count(self) -> None:
        view = EditorView(40, 5)
        prepared = view.prepare_state(build_render_state(["x"] * 12345))
        self.assertEqual(view.text_width(), 33)
        self.assertEqual(prepared.text_width, 33)

    def test_apply_settings_updates_columns(self) -> None:
        view = EditorView(40, 5)
        view.apply_settings(ViewSettings(line_numbers=False, minimap=True, scrollbar=False))
        self.assertFalse(view.line_numbers_enabled())
        self.assertTrue(view.minimap.is_enabled())
        self.assertEqual(view.text_width(), 32)

    def test_hit_test_maps_cells_to_columns(self) -> None:
        view = EditorView(40, 5)
        self.assertEqual(view.hit_test(0), ("gutter", 0))
        self.assertEqual(view.hit_test(5), ("text", 0))
        self.assertEqual(view.hit_test(38), ("text", 33))
        self.assertEqual(view.hit_test(39), ("scrollbar", 0))
        self.assertIsNone(view.hit_test(40))

    def test_minimap_click_targets_document_line(self) -> None:
        view = EditorView(40, 10, settings=ViewSettings(minimap=True))
        state = build_render_state(["x"] * 100)
        self.assertEqual(view.minimap_click(0, state), 0)
        self.assertEqual(view.minimap_click(5, state), 50)
        self.assertEqual(view.minimap_click(9, state), 99)


class EditorViewRenderTests(unittest.TestCase):
    def test_wrapped_gutter_and_text_stay_aligned(self) -> None:
        view = EditorView(12, 4, settings=ViewSettings(word_wrap=True, scrollbar=False), theme=PLAIN_THEME)
        view.text.show_cursor = False
        frame = view.render(build_render_state(["abcdefghij", "k"], word_wrap=True))
        self.assertEqual(
            frame.split("\n"),
            [
                "   1 abcdefg",
                "     hij    ",
                "   2 k      ",
                "            ",
            ],
        )

    def test_every_row_matches_frame_width(self) -> None:
        lines = [f"row {idx} " + "日本" * (idx % 7) + "\tend" for idx in range(60)]
        view = EditorView(50, 12, settings=ViewSettings(minimap=True))
        for word_wrap in (False, True):
            frame = view.render(build_render_state(lines, scroll_y=7, word_wrap=word_wrap))
            rows = frame.split("\n")
            with self.subTest(word_wrap=word_wrap):
                self.assertEqual(len(rows), 12)
                for row in rows:
                    self.assertEqual(visual_width(row), 50)

    def test_set_theme_reaches_renderers(self) -> None:
        view = EditorView(20, 2)
        view.set_theme(OCEAN_THEME)
        prepared = view.prepare_state(build_render_state(["a"]))
        self.assertIs(prepared.theme, OCEAN_THEME)
        self.assertIs(view.theme, OCEAN_THEME)

    def test_theme_roles_match_what_renderers_draw(self) -> None:
        roles = {field.name for field in fields(UITheme)} - {"name", "reset"}
        self.assertEqual(
            roles,
            {
                "gutter",
                "gutter_active",
                "minimap_indicator",
                "minimap_text",
                "selection",
                "cursor",
                "scrollbar_track",
                "scrollbar_thumb",
            },
        )

    def test_plain_theme_frame_has_no_escapes(self) -> None:
        view = EditorView(20, 3, settings=ViewSettings(minimap=True), theme=PLAIN_THEME)
        frame = view.render(build_render_state(["print('hi')"] * 30, scroll_y=3))
        self.assertNotIn("\x1b", frame)


if __name__ == "__main__":
    unittest.main()
