"""ANSI-aware text measurement and line shaping utilities.

Provides width measurement, escape stripping, truncation, and padding that
preserve escape sequences. Every column renderer leans on ``pad_to_width``
so composed rows line up cell-for-cell.
"""

from __future__ import annotations

import re
import unicodedata

ESC = "\x1b"
RESET = "\033[0m"

# ESC, any parameter/intermediate bytes, then one terminating letter. A
# sequence that never reaches a letter swallows the rest of the string.
ESCAPE_SEQUENCE_RE = re.compile(r"\x1b[^A-Za-z]*[A-Za-z]?")

_ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me", "Cf", "Cc"})


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks, format characters, and control characters consume no
    columns; East Asian wide/fullwidth characters consume two.
    """
    if unicodedata.combining(ch) or unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_escapes(text: str) -> str:
    """Remove escape sequences, leaving only displayable characters."""
    if ESC not in text:
        return text
    return ESCAPE_SEQUENCE_RE.sub("", text)


def plain_display_width(text: str) -> int:
    """Return terminal display width for plain text (no escape stripping)."""
    return sum(char_display_width(ch) for ch in text)


def visual_width(text: str) -> int:
    """Return display width after removing escape sequences."""
    if not text:
        return 0
    return plain_display_width(strip_escapes(text))


def truncate_to_width(text: str, width: int) -> str:
    """Cut a styled line to exactly ``width`` display columns.

    Escape sequences are preserved verbatim and cost nothing. Glyphs are never
    split: a wide glyph that would straddle the boundary is dropped and the
    shortfall is filled with spaces. Escape sequences found after the cut
    point are still emitted so trailing style resets survive.
    """
    if width <= 0:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    full = False
    while i < n:
        if text[i] == ESC:
            match = ESCAPE_SEQUENCE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        if full:
            i += 1
            continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > width:
            full = True
            i += 1
            continue
        out.append(ch)
        col += w
        i += 1

    if col < width:
        out.append(" " * (width - col))
    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    """Pad or truncate a styled line to exactly ``width`` display columns."""
    width = max(0, width)
    current = visual_width(text)
    if current == width:
        return text
    if current < width:
        return text + " " * (width - current)
    return truncate_to_width(text, width)


def blank_rows(width: int, height: int) -> list[str]:
    """Return ``height`` rows of ``width`` spaces."""
    return [" " * max(0, width) for _ in range(max(0, height))]


__all__ = [
    "ESC",
    "RESET",
    "ESCAPE_SEQUENCE_RE",
    "blank_rows",
    "char_display_width",
    "pad_to_width",
    "plain_display_width",
    "strip_escapes",
    "truncate_to_width",
    "visual_width",
]
