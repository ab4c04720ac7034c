"""Line-number gutter column.

Renders 1-based line numbers right-justified in a numeral field followed by
one separator space. With word wrap active, only the first visual row of each
buffer line carries a numeral; continuation rows are blank.
"""

from __future__ import annotations

import logging

from .ansi import blank_rows, pad_to_width
from .state import RenderState
from .wrap import iter_visual_rows

logger = logging.getLogger(__name__)

MIN_NUMERAL_DIGITS = 4
# Fallback used only when the host did not thread the real text width.
ESTIMATED_TEXT_WIDTH = 80


def line_number_width(total_lines: int, min_digits: int = MIN_NUMERAL_DIGITS) -> int:
    """Return gutter width for a document of ``total_lines`` lines."""
    return max(min_digits, len(str(max(1, total_lines)))) + 1


class LineNumberRenderer:
    """Column renderer for the line-number gutter."""

    def _numeral_row(self, line_idx: int, width: int, state: RenderState) -> str:
        theme = state.theme
        color = theme.gutter_active if line_idx == state.cursor_line else theme.gutter
        numeral = str(line_idx + 1).rjust(width - 1)
        return pad_to_width(f"{color}{numeral}{theme.reset} ", width)

    def render(self, width: int, height: int, state: RenderState | None) -> list[str]:
        if width <= 0 or height <= 0 or state is None:
            return blank_rows(width, height)
        if state.word_wrap:
            return self._render_wrapped(width, height, state)
        return self._render_no_wrap(width, height, state)

    def _render_no_wrap(self, width: int, height: int, state: RenderState) -> list[str]:
        rows: list[str] = []
        blank = " " * width
        for row in range(height):
            line_idx = state.scroll_y + row
            if state.line(line_idx) is None:
                rows.append(blank)
            else:
                rows.append(self._numeral_row(line_idx, width, state))
        return rows

    def _render_wrapped(self, width: int, height: int, state: RenderState) -> list[str]:
        text_width = state.text_width
        if text_width <= 0:
            logger.debug("no text width in render state; assuming %d", ESTIMATED_TEXT_WIDTH)
            text_width = ESTIMATED_TEXT_WIDTH

        rows: list[str] = []
        blank = " " * width
        walk = iter_visual_rows(state.lines, state.scroll_y, text_width, state.tab_width)
        for _ in range(height):
            line_idx, offset = next(walk)
            if line_idx >= len(state.lines) or offset > 0:
                rows.append(blank)
            else:
                rows.append(self._numeral_row(line_idx, width, state))
        return rows


__all__ = [
    "ESTIMATED_TEXT_WIDTH",
    "LineNumberRenderer",
    "MIN_NUMERAL_DIGITS",
    "line_number_width",
]
