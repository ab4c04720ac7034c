"""Vertical scrollbar column."""

from __future__ import annotations

from .ansi import blank_rows, pad_to_width
from .minimap.metrics import document_extent
from .state import RenderState

SCROLLBAR_WIDTH = 1
TRACK_GLYPH = "│"
THUMB_GLYPH = "┃"


def scroll_percent(text_start: int, total_lines: int, visible_rows: int) -> float:
    """Compute vertical scroll position as percentage of scrollable range."""
    if total_lines <= 0:
        return 0.0
    max_start = max(0, total_lines - max(1, visible_rows))
    if max_start <= 0:
        return 0.0
    clamped_start = max(0, min(text_start, max_start))
    return (clamped_start / max_start) * 100.0


def thumb_span(scroll_y: int, extent: int, height: int) -> tuple[int, int]:
    """Return thumb rows ``[start, end)``; empty when everything fits."""
    if height <= 0 or extent <= height:
        return 0, 0
    size = max(1, (height * height) // extent)
    percent = scroll_percent(scroll_y, extent, height)
    start = round((height - size) * percent / 100.0)
    return start, start + size


class ScrollbarRenderer:
    """Proportional thumb over a dim track."""

    def render(self, width: int, height: int, state: RenderState | None) -> list[str]:
        if width <= 0 or height <= 0 or state is None:
            return blank_rows(width, height)

        theme = state.theme
        thumb_start, thumb_end = thumb_span(state.scroll_y, document_extent(state), height)
        if thumb_start == thumb_end:
            return blank_rows(width, height)

        rows: list[str] = []
        for row in range(height):
            if thumb_start <= row < thumb_end:
                cell = f"{theme.scrollbar_thumb}{THUMB_GLYPH}{theme.reset}"
            else:
                cell = f"{theme.scrollbar_track}{TRACK_GLYPH}{theme.reset}"
            rows.append(pad_to_width(cell, width))
        return rows


__all__ = [
    "SCROLLBAR_WIDTH",
    "ScrollbarRenderer",
    "scroll_percent",
    "thumb_span",
]
