"""Public package surface for termframe.

Re-exports the compositor, the column renderers, and the render snapshot.
``main`` lazily imports the CLI to keep package imports lightweight.
"""

from __future__ import annotations

from .ansi import pad_to_width, strip_escapes, truncate_to_width, visual_width
from .compositor import Column, ColumnRenderer, Compositor
from .gutter import LineNumberRenderer, line_number_width
from .minimap import MinimapMetrics, MinimapRenderer
from .scrollbar import ScrollbarRenderer
from .state import RenderState, SelectionRange, build_render_state
from .syntax import ColorSpan
from .ui_theme import UITheme, resolve_theme
from .view import EditorView
from .viewport import TextViewportRenderer


def main(*args, **kwargs):
    """Lazily import CLI entrypoint."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ColorSpan",
    "Column",
    "ColumnRenderer",
    "Compositor",
    "EditorView",
    "LineNumberRenderer",
    "MinimapMetrics",
    "MinimapRenderer",
    "RenderState",
    "ScrollbarRenderer",
    "SelectionRange",
    "TextViewportRenderer",
    "UITheme",
    "build_render_state",
    "line_number_width",
    "main",
    "pad_to_width",
    "resolve_theme",
    "strip_escapes",
    "truncate_to_width",
    "visual_width",
]
