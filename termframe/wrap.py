"""Word-wrap row math shared by the gutter and the text viewport.

Lines wrap by display cells: a tab takes ``tab_width`` cells, a wide glyph
two, a combining mark none. Each visual row holds as many runes as fit in
``text_width`` cells (at least one rune, and at least one row per line). Both
renderers walk rows with the same helpers so numerals in the gutter always
line up with the wrapped text beside them.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import char_display_width

DEFAULT_TAB_WIDTH = 4


def rune_cells(ch: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Return the cells ``ch`` occupies once drawn."""
    if ch == "\t":
        return max(1, tab_width)
    return char_display_width(ch)


def wrap_segments(line: str, text_width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> list[tuple[int, int]]:
    """Split ``line`` into rune ranges ``[start, end)``, one per visual row.

    A glyph that would cross the right edge starts the next row. A single
    glyph wider than ``text_width`` gets a row to itself.
    """
    if text_width <= 0 or not line:
        return [(0, len(line))]

    segments: list[tuple[int, int]] = []
    start = 0
    used = 0
    for idx, ch in enumerate(line):
        cells = rune_cells(ch, tab_width)
        if used + cells > text_width and idx > start:
            segments.append((start, idx))
            start = idx
            used = 0
        used += cells
    segments.append((start, len(line)))
    return segments


def wrapped_line_count(line: str, text_width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Return how many visual rows ``line`` takes."""
    return len(wrap_segments(line, text_width, tab_width))


def total_visual_lines(lines: Sequence[str], text_width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    return sum(wrapped_line_count(line, text_width, tab_width) for line in lines)


def locate_visual_row(
    lines: Sequence[str],
    visual_row: int,
    text_width: int,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> tuple[int, int]:
    """Map a visual row to ``(buffer_line, wrap_offset)``.

    Rows past the end map to ``(len(lines), 0)``.
    """
    visual = 0
    buffer_line = 0
    while buffer_line < len(lines) and visual <= visual_row:
        count = wrapped_line_count(lines[buffer_line], text_width, tab_width)
        if visual + count > visual_row:
            return buffer_line, visual_row - visual
        visual += count
        buffer_line += 1
    return buffer_line, 0


def iter_visual_rows(lines: Sequence[str], start_row: int, text_width: int, tab_width: int = DEFAULT_TAB_WIDTH):
    """Yield ``(buffer_line, wrap_offset)`` for rows from ``start_row`` onward.

    Yields ``(len(lines), 0)`` forever once the document is exhausted, so
    callers bound the walk by their own row count.
    """
    buffer_line, offset = locate_visual_row(lines, start_row, text_width, tab_width)
    while True:
        if buffer_line >= len(lines):
            yield len(lines), 0
            continue
        yield buffer_line, offset
        offset += 1
        if offset >= wrapped_line_count(lines[buffer_line], text_width, tab_width):
            offset = 0
            buffer_line += 1


def wrap_chunk(line: str, offset: int, text_width: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Return the ``offset``-th wrapped chunk of ``line`` (``""`` past the end)."""
    segments = wrap_segments(line, text_width, tab_width)
    if not 0 <= offset < len(segments):
        return ""
    start, end = segments[offset]
    return line[start:end]


__all__ = [
    "DEFAULT_TAB_WIDTH",
    "iter_visual_rows",
    "locate_visual_row",
    "rune_cells",
    "total_visual_lines",
    "wrap_chunk",
    "wrap_segments",
    "wrapped_line_count",
]
