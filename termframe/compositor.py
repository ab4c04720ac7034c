"""Horizontal column compositor.

A ``Compositor`` owns an ordered list of ``Column`` slots, resolves their
widths for the current frame size, asks each enabled renderer for exactly
``height`` rows, and joins the rows left to right into one frame string.

Renderer contract violations (too few/many rows, rows of the wrong width,
exceptions) are repaired here so a complete frame is always produced.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Protocol

from .ansi import blank_rows, pad_to_width
from .state import RenderState

logger = logging.getLogger(__name__)


class ColumnRenderer(Protocol):
    def render(self, width: int, height: int, state: RenderState | None) -> list[str]:
        """Return ``height`` rows of exactly ``width`` visible cells each."""
        ...


@dataclass
class Column:
    """One layout slot: fixed ``width`` cells, or flexible remainder."""

    width: int = 0
    flexible: bool = False
    enabled: bool = True
    renderer: ColumnRenderer | None = None
    name: str = ""


class Compositor:
    """Join several column renderers into one fixed-size frame.

    Configuration changes and ``render`` calls are serialized by one lock, so
    a render pass never observes a half-applied column change.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._columns: list[Column] = []
        self._lock = threading.RLock()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_size(self, width: int, height: int) -> None:
        with self._lock:
            self._width = width
            self._height = height

    def add_column(self, column: Column) -> None:
        with self._lock:
            self._columns.append(replace(column))

    def set_columns(self, columns: list[Column]) -> None:
        with self._lock:
            self._columns = [replace(column) for column in columns]

    def columns(self) -> list[Column]:
        """Return copies of the configured columns.

        Editing a returned ``Column`` does not touch the compositor; use
        ``enable_column`` and ``set_column_width`` for that.
        """
        with self._lock:
            return [replace(column) for column in self._columns]

    def enable_column(self, index: int, enabled: bool) -> None:
        """Enable or disable column ``index``; out-of-range indexes are ignored."""
        with self._lock:
            if 0 <= index < len(self._columns):
                self._columns[index].enabled = enabled

    def set_column_width(self, index: int, width: int) -> None:
        with self._lock:
            if 0 <= index < len(self._columns):
                self._columns[index].width = max(0, width)

    def column_index(self, name: str) -> int:
        """Return the index of the column called ``name``, or ``-1``."""
        with self._lock:
            for idx, column in enumerate(self._columns):
                if column.name == name:
                    return idx
        return -1

    def calculate_column_widths(self) -> list[int]:
        """Resolve each column's width for the current frame width.

        Fixed columns keep their declared width. The first enabled flexible
        column receives whatever is left, never less than one cell even when
        fixed columns already overflow. Later flexible columns and disabled
        columns resolve to zero.
        """
        with self._lock:
            widths = [0] * len(self._columns)
            flexible_idx = -1
            used = 0
            for idx, column in enumerate(self._columns):
                if not column.enabled:
                    continue
                if column.flexible:
                    if flexible_idx < 0:
                        flexible_idx = idx
                    continue
                widths[idx] = max(0, column.width)
                used += widths[idx]

            if flexible_idx >= 0:
                widths[flexible_idx] = max(1, self._width - used)
            return widths

    def flexible_column_width(self) -> int:
        """Return the resolved flexible width, or the full width when none exists.

        Callers that size content to the text area must use this value; it is
        the same width ``render`` hands the flexible renderer.
        """
        with self._lock:
            widths = self.calculate_column_widths()
            for idx, column in enumerate(self._columns):
                if column.enabled and column.flexible:
                    return widths[idx]
            return self._width

    def column_at(self, x: int) -> tuple[int, int] | None:
        """Return ``(column_index, local_x)`` for frame cell ``x``."""
        with self._lock:
            if x < 0:
                return None
            left = 0
            for idx, width in enumerate(self.calculate_column_widths()):
                if width <= 0:
                    continue
                if left <= x < left + width:
                    return idx, x - left
                left += width
            return None

    def _column_rows(self, index: int, column: Column, width: int, state: RenderState | None) -> list[str]:
        if column.renderer is None:
            return blank_rows(width, self._height)
        try:
            rows = list(column.renderer.render(width, self._height, state))
        except Exception:
            logger.exception("column %d (%s) renderer failed; blanking it", index, column.name or "unnamed")
            return blank_rows(width, self._height)

        if len(rows) != self._height:
            logger.debug(
                "column %d returned %d rows for height %d; repairing",
                index,
                len(rows),
                self._height,
            )
        if len(rows) < self._height:
            rows.extend(blank_rows(width, self._height - len(rows)))
        del rows[self._height:]
        return [pad_to_width(row, width) for row in rows]

    def render(self, state: RenderState | None) -> str:
        """Render all enabled columns and join them into one frame.

        Returns ``""`` when there are no columns or the height is not
        positive. Otherwise the result has exactly ``height`` newline-joined
        rows of ``width`` visible cells (barring fixed-width overflow).
        """
        with self._lock:
            if not self._columns or self._height <= 0:
                return ""

            widths = self.calculate_column_widths()
            outputs: list[list[str]] = []
            for idx, column in enumerate(self._columns):
                if not column.enabled or widths[idx] <= 0:
                    continue
                outputs.append(self._column_rows(idx, column, widths[idx], state))

            return "\n".join("".join(rows[row] for rows in outputs) for row in range(self._height))


__all__ = [
    "Column",
    "ColumnRenderer",
    "Compositor",
]
