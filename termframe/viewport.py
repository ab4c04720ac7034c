"""Text viewport column: the document text itself.

Lines are drawn with their syntax color spans, the selection background and
a reverse-video cursor cell layered on top. Tabs expand to ``tab_width``
spaces. Without wrap the view scrolls horizontally by ``scroll_x`` runes;
with wrap each line is split into rows of at most ``width`` display cells
(tabs included), using the same row math as the gutter.
"""

from __future__ import annotations

from .ansi import blank_rows, pad_to_width
from .state import RenderState
from .syntax import color_at
from .wrap import iter_visual_rows, wrap_segments


class TextViewportRenderer:
    """Flexible column that renders the visible slice of the document."""

    def __init__(self, show_cursor: bool = True) -> None:
        self.show_cursor = show_cursor

    def render(self, width: int, height: int, state: RenderState | None) -> list[str]:
        if width <= 0 or height <= 0 or state is None:
            return blank_rows(width, height)
        if state.word_wrap:
            return self._render_wrapped(width, height, state)
        return self._render_no_wrap(width, height, state)

    def _render_no_wrap(self, width: int, height: int, state: RenderState) -> list[str]:
        rows: list[str] = []
        for row in range(height):
            line_idx = state.scroll_y + row
            line = state.line(line_idx)
            if line is None:
                rows.append(" " * width)
                continue
            start = state.scroll_x
            cursor_fits = self._cursor_col(line_idx, state) >= start
            rows.append(
                pad_to_width(
                    self._styled_segment(line, line_idx, start, line[start:start + width], cursor_fits, state),
                    width,
                )
            )
        return rows

    def _render_wrapped(self, width: int, height: int, state: RenderState) -> list[str]:
        rows: list[str] = []
        walk = iter_visual_rows(state.lines, state.scroll_y, width, state.tab_width)
        for _ in range(height):
            line_idx, offset = next(walk)
            line = state.line(line_idx)
            if line is None:
                rows.append(" " * width)
                continue
            start, end = wrap_segments(line, width, state.tab_width)[offset]
            cursor_col = self._cursor_col(line_idx, state)
            cursor_fits = start <= cursor_col < end or (end == len(line) and cursor_col >= end)
            chunk = line[start:end]
            rows.append(pad_to_width(self._styled_segment(line, line_idx, start, chunk, cursor_fits, state), width))
        return rows

    def _cursor_col(self, line_idx: int, state: RenderState) -> int:
        if not self.show_cursor or line_idx != state.cursor_line:
            return -1
        return state.cursor_col

    def _styled_segment(
        self,
        line: str,
        line_idx: int,
        start: int,
        segment: str,
        cursor_fits: bool,
        state: RenderState,
    ) -> str:
        """Render ``segment`` (``line[start:]`` prefix) with layered styles."""
        theme = state.theme
        spans = state.colors_for(line_idx)
        selection = state.selection_for(line_idx)
        cursor_col = self._cursor_col(line_idx, state) if cursor_fits else -1
        tab = " " * max(1, state.tab_width)

        out: list[str] = []
        active = ""
        for offset, ch in enumerate(segment):
            col = start + offset
            style = color_at(spans, col)
            if selection is not None and selection.contains(col):
                style += theme.selection
            if col == cursor_col:
                style += theme.cursor
            if style != active:
                if active:
                    out.append(theme.reset)
                out.append(style)
                active = style
            out.append(tab if ch == "\t" else ch)

        # Cursor parked just past the last rune.
        if cursor_col >= len(line) and cursor_col == start + len(segment):
            if active:
                out.append(theme.reset)
            out.append(f"{theme.cursor} ")
            active = theme.cursor

        if active:
            out.append(theme.reset)
        return "".join(out)


__all__ = ["TextViewportRenderer"]
