"""Per-frame render snapshot shared by every column renderer.

``RenderState`` is produced fresh for each frame by the document layer and is
read-only for the whole render pass. Renderers must bounds-check every line
lookup: scroll and cursor positions may point past the current document.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .syntax import ColorSpan
from .ui_theme import DEFAULT_THEME, UITheme
from .wrap import DEFAULT_TAB_WIDTH, total_visual_lines

_EMPTY: Mapping = MappingProxyType({})


@dataclass(frozen=True)
class SelectionRange:
    """Selected rune columns ``[start, end)`` on one line."""

    start: int
    end: int

    def contains(self, col: int) -> bool:
        return self.start <= col < self.end


@dataclass(frozen=True)
class RenderState:
    lines: Sequence[str] = ()
    cursor_line: int = 0
    cursor_col: int = 0
    scroll_y: int = 0
    scroll_x: int = 0
    selection: Mapping[int, SelectionRange] = field(default_factory=lambda: _EMPTY)
    line_colors: Mapping[int, Sequence[ColorSpan]] = field(default_factory=lambda: _EMPTY)
    word_wrap: bool = False
    tab_width: int = DEFAULT_TAB_WIDTH
    total_lines: int = 0
    total_visual_lines: int = 0
    theme: UITheme = DEFAULT_THEME
    # Resolved flexible-column width; 0 until the view threads it in.
    text_width: int = 0

    def line(self, index: int) -> str | None:
        """Return line ``index`` or ``None`` when it lies outside the document."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def colors_for(self, index: int) -> Sequence[ColorSpan]:
        return self.line_colors.get(index, ())

    def selection_for(self, index: int) -> SelectionRange | None:
        return self.selection.get(index)

    def with_text_width(self, text_width: int) -> RenderState:
        """Return a copy laid out for ``text_width`` columns.

        The visual-line total is recomputed so wrapped-mode consumers agree
        with the width the compositor actually hands the text column.
        """
        text_width = max(1, text_width)
        return replace(
            self,
            text_width=text_width,
            total_visual_lines=total_visual_lines(self.lines, text_width, self.tab_width),
        )


def build_render_state(
    lines: Sequence[str],
    *,
    text_width: int = 0,
    cursor_line: int = 0,
    cursor_col: int = 0,
    scroll_y: int = 0,
    scroll_x: int = 0,
    selection: Mapping[int, SelectionRange] | None = None,
    line_colors: Mapping[int, Sequence[ColorSpan]] | None = None,
    word_wrap: bool = False,
    tab_width: int = DEFAULT_TAB_WIDTH,
    theme: UITheme = DEFAULT_THEME,
) -> RenderState:
    """Build a consistent snapshot whose totals match ``lines``."""
    snapshot = tuple(lines)
    state = RenderState(
        lines=snapshot,
        cursor_line=max(0, cursor_line),
        cursor_col=max(0, cursor_col),
        scroll_y=max(0, scroll_y),
        scroll_x=max(0, scroll_x),
        selection=MappingProxyType(dict(selection or {})),
        line_colors=MappingProxyType(dict(line_colors or {})),
        word_wrap=word_wrap,
        tab_width=max(1, tab_width),
        total_lines=len(snapshot),
        total_visual_lines=len(snapshot),
        theme=theme,
    )
    if text_width > 0:
        return state.with_text_width(text_width)
    return state


__all__ = [
    "DEFAULT_TAB_WIDTH",
    "RenderState",
    "SelectionRange",
    "build_render_state",
]
