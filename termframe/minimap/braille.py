"""Braille rasterizer for the minimap body.

Each braille glyph is a 2-column by 4-row dot matrix. One glyph covers four
sampled document rows and a span of source columns split into a left and a
right half. A dot is raised when its cell holds anything besides spaces and
tabs.

Dot numbering (bit values from U+2800)::

    1 4      0x01 0x08
    2 5      0x02 0x10
    3 6      0x04 0x20
    7 8      0x40 0x80
"""

from __future__ import annotations

from collections.abc import Sequence

BRAILLE_BLANK = 0x2800
DOT_ROWS = 4

LEFT_DOT_BITS = (0x01, 0x02, 0x04, 0x40)
RIGHT_DOT_BITS = (0x08, 0x10, 0x20, 0x80)

_BLANK_CHARS = frozenset(" \t")


def has_content(line: str, start: int, end: int) -> bool:
    """Return whether ``line[start:end]`` holds a non-space, non-tab character."""
    start = max(0, start)
    end = min(len(line), end)
    for idx in range(start, end):
        if line[idx] not in _BLANK_CHARS:
            return True
    return False


def sample_rows(lines: Sequence[str], start: int, end: int) -> list[str]:
    """Pick the four rows a glyph row represents from ``[start, end)``.

    Rows are taken from ``start`` with stride ``max(1, (end - start) // 4)``.
    Missing samples (short ranges, rows past the document) are empty lines.
    """
    step = max(1, (end - start) // DOT_ROWS)
    samples: list[str] = []
    idx = start
    while idx < end and len(samples) < DOT_ROWS:
        if 0 <= idx < len(lines):
            samples.append(lines[idx])
        idx += step
    while len(samples) < DOT_ROWS:
        samples.append("")
    return samples


def max_line_length(lines: Sequence[str]) -> int:
    return max((len(line) for line in lines), default=0)


def chars_per_glyph(longest_line: int, body_width: int) -> float:
    """Return how many source columns one glyph covers (at least one)."""
    if body_width <= 0:
        return 1.0
    return max(1.0, longest_line / body_width)


def glyph_for(samples: Sequence[str], col_start: int, col_end: int) -> str:
    """Assemble one braille glyph for source columns ``[col_start, col_end)``."""
    mid = (col_start + col_end) // 2
    pattern = BRAILLE_BLANK
    for dot_row, line in enumerate(samples[:DOT_ROWS]):
        if has_content(line, col_start, mid):
            pattern |= LEFT_DOT_BITS[dot_row]
        if has_content(line, mid, col_end):
            pattern |= RIGHT_DOT_BITS[dot_row]
    return chr(pattern)


def rasterize_row(
    lines: Sequence[str],
    start_line: int,
    end_line: int,
    body_width: int,
    longest_line: int,
) -> str:
    """Render document rows ``[start_line, end_line)`` as ``body_width`` glyphs.

    ``longest_line`` fixes the horizontal scale for the whole minimap so
    line lengths stay comparable from row to row. Ranges that begin past the
    end of the document render as blank cells.
    """
    if body_width <= 0:
        return ""
    if not lines or start_line >= len(lines):
        return " " * body_width

    start_line = max(0, start_line)
    end_line = min(len(lines), end_line)
    samples = sample_rows(lines, start_line, end_line)
    scale = chars_per_glyph(longest_line, body_width)

    glyphs: list[str] = []
    for col in range(body_width):
        glyphs.append(glyph_for(samples, int(col * scale), int((col + 1) * scale)))
    return "".join(glyphs)


__all__ = [
    "BRAILLE_BLANK",
    "LEFT_DOT_BITS",
    "RIGHT_DOT_BITS",
    "chars_per_glyph",
    "glyph_for",
    "has_content",
    "max_line_length",
    "rasterize_row",
    "sample_rows",
]
