"""Source loading, sanitization, and syntax color spans.

Pygments classifies tokens; this module turns them into per-line
``ColorSpan`` lists keyed by rune index, which renderers treat as opaque
color tags. Control bytes in loaded text are neutralized so they cannot be
mistaken for escape sequences by the width math.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    String,
    _TokenType,
)
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

KEYWORD_COLOR = "\033[96m"
STRING_COLOR = "\033[92m"
COMMENT_COLOR = "\033[90m"
NUMBER_COLOR = "\033[93m"
OPERATOR_COLOR = "\033[97m"
FUNCTION_COLOR = "\033[94m"
CLASS_COLOR = "\033[95m"
ERROR_COLOR = "\033[91m"

# First matching family wins; Comment.Preproc stays gray.
_TOKEN_COLORS: tuple[tuple[tuple[_TokenType, ...], str], ...] = (
    ((Keyword,), KEYWORD_COLOR),
    ((String,), STRING_COLOR),
    ((Comment,), COMMENT_COLOR),
    ((Number,), NUMBER_COLOR),
    ((Operator,), OPERATOR_COLOR),
    ((Name.Function,), FUNCTION_COLOR),
    ((Name.Class, Name.Builtin), CLASS_COLOR),
    ((Name.Constant,), NUMBER_COLOR),
    ((Generic.Heading, Generic.Subheading), CLASS_COLOR),
    ((Error, Generic.Error), ERROR_COLOR),
)


@dataclass(frozen=True)
class ColorSpan:
    """Colored region of one line: rune range ``[start, end)`` plus tag."""

    start: int
    end: int
    color: str


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def token_color(token_type: _TokenType) -> str:
    """Return the ANSI color for a Pygments token type, or ``""`` for default."""
    for families, color in _TOKEN_COLORS:
        if any(token_type in family for family in families):
            return color
    return ""


def color_at(spans: Sequence[ColorSpan], col: int) -> str:
    """Return the color covering rune column ``col``, or ``""``."""
    for span in spans:
        if span.start <= col < span.end:
            return span.color
    return ""


def _append_span(spans: list[ColorSpan], start: int, end: int, color: str) -> None:
    if spans and spans[-1].end == start and spans[-1].color == color:
        spans[-1] = ColorSpan(spans[-1].start, end, color)
    else:
        spans.append(ColorSpan(start, end, color))


class SyntaxHighlighter:
    """Produce color spans for a document using a filename-selected lexer."""

    def __init__(self, filename: str | Path | None = None) -> None:
        self.enabled = True
        self._lexer: Lexer | None = None
        self.set_file(filename)

    def set_file(self, filename: str | Path | None) -> None:
        """Select a lexer for ``filename``; unknown types disable coloring."""
        if not filename:
            self._lexer = None
            return
        try:
            self._lexer = get_lexer_for_filename(Path(filename).name, stripnl=False, ensurenl=False)
        except ClassNotFound:
            self._lexer = None

    def has_lexer(self) -> bool:
        return self._lexer is not None

    def _tokens(self, text: str) -> Iterable[tuple[_TokenType, str]]:
        if self._lexer is None:
            return ()
        return self._lexer.get_tokens(text)

    def line_colors(self, line: str) -> list[ColorSpan]:
        """Return color spans for a single line lexed in isolation."""
        return self.document_colors([line]).get(0, [])

    def document_colors(self, lines: Sequence[str]) -> dict[int, list[ColorSpan]]:
        """Return color spans for every line, lexing the document as a whole.

        Lexing the joined document keeps multi-line constructs (block
        comments, triple-quoted strings) colored on every line they cover.
        Lines without colored tokens are absent from the result.
        """
        if not self.enabled or self._lexer is None or not lines:
            return {}

        result: dict[int, list[ColorSpan]] = {}
        line_idx = 0
        col = 0
        try:
            for token_type, value in self._tokens("\n".join(lines)):
                color = token_color(token_type)
                for part_idx, part in enumerate(value.split("\n")):
                    if part_idx > 0:
                        line_idx += 1
                        col = 0
                    if not part:
                        continue
                    if color:
                        _append_span(result.setdefault(line_idx, []), col, col + len(part), color)
                    col += len(part)
        except Exception:
            logger.debug("lexer failed; rendering without syntax colors", exc_info=True)
            return {}
        return result


__all__ = [
    "ColorSpan",
    "SyntaxHighlighter",
    "color_at",
    "read_text",
    "sanitize_terminal_text",
    "token_color",
]
