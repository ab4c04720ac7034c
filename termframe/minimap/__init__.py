"""Braille minimap column: rasterizer, scaling metrics, and renderer."""

from __future__ import annotations

from .braille import rasterize_row
from .metrics import MinimapMetrics, compute_metrics, document_extent, row_to_line
from .renderer import MINIMAP_WIDTH, VIEWPORT_INDICATOR, MinimapRenderer

__all__ = [
    "MINIMAP_WIDTH",
    "VIEWPORT_INDICATOR",
    "MinimapMetrics",
    "MinimapRenderer",
    "compute_metrics",
    "document_extent",
    "rasterize_row",
    "row_to_line",
]
