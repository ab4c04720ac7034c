"""Minimap column renderer.

Row layout is ``[indicator][braille body][space]``: a one-cell viewport
indicator, ``width - 2`` braille glyphs, then one padding cell.
"""

from __future__ import annotations

from ..ansi import blank_rows, pad_to_width
from ..state import RenderState
from .braille import max_line_length, rasterize_row
from .metrics import MinimapMetrics, compute_metrics, row_to_line

MINIMAP_WIDTH = 8
VIEWPORT_INDICATOR = "│"


class MinimapRenderer:
    """Braille overview of the whole document with a viewport indicator."""

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled

    def toggle(self) -> bool:
        """Flip the enabled flag and return the new value."""
        self._enabled = not self._enabled
        return self._enabled

    def get_metrics(self, height: int, state: RenderState) -> MinimapMetrics:
        return compute_metrics(height, state)

    def row_to_line(self, row: int, metrics: MinimapMetrics) -> int:
        return row_to_line(row, metrics)

    def render(self, width: int, height: int, state: RenderState | None) -> list[str]:
        if not self._enabled or width <= 0 or height <= 0 or state is None:
            return blank_rows(width, height)

        theme = state.theme
        body_width = max(1, width - 2)
        metrics = compute_metrics(height, state)
        longest = max_line_length(state.lines)
        visible_start = state.scroll_y
        visible_end = state.scroll_y + height

        rows: list[str] = []
        for row in range(height):
            start, end = metrics.row_range(row)
            if start < visible_end and end > visible_start:
                indicator = f"{theme.minimap_indicator}{VIEWPORT_INDICATOR}{theme.reset}"
            else:
                indicator = " "
            body = rasterize_row(state.lines, start, end, body_width, longest)
            line = f"{indicator}{theme.minimap_text}{body}{theme.reset} "
            # Widths under 3 cannot hold the full layout.
            rows.append(line if width >= 3 else pad_to_width(line, width))
        return rows


__all__ = [
    "MINIMAP_WIDTH",
    "MinimapRenderer",
    "VIEWPORT_INDICATOR",
]
