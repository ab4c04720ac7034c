"""Row/line scaling shared by minimap drawing and pointer hit-testing."""

from __future__ import annotations

from dataclasses import dataclass

from ..state import RenderState


@dataclass(frozen=True)
class MinimapMetrics:
    lines_per_row: float
    total_lines: int
    height: int

    def row_range(self, row: int) -> tuple[int, int]:
        """Return the document range ``[start, end)`` drawn on minimap ``row``."""
        start = int(row * self.lines_per_row)
        end = min(self.total_lines, int((row + 1) * self.lines_per_row))
        return start, end


def document_extent(state: RenderState) -> int:
    """Visual lines when wrapping (and known), else buffer lines; at least 1."""
    extent = state.total_lines
    if state.word_wrap and state.total_visual_lines > 0:
        extent = state.total_visual_lines
    return max(1, extent)


def compute_metrics(height: int, state: RenderState) -> MinimapMetrics:
    height = max(1, height)
    extent = document_extent(state)
    return MinimapMetrics(
        lines_per_row=max(1.0, extent / height),
        total_lines=extent,
        height=height,
    )


def row_to_line(row: int, metrics: MinimapMetrics) -> int:
    """Translate a minimap row into a document line in ``[0, extent - 1]``.

    The bottom row always maps to the last line so the end of a long
    document is reachable by clicking.
    """
    last = metrics.total_lines - 1
    if row >= metrics.height - 1:
        return max(0, last)
    line = int(row * metrics.lines_per_row)
    return max(0, min(line, last))


__all__ = [
    "MinimapMetrics",
    "compute_metrics",
    "document_extent",
    "row_to_line",
]
