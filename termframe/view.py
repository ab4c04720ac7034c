"""Editor view: the standard column layout wired to one compositor.

Layout, left to right: line-number gutter, text viewport (flexible),
minimap, scrollbar. ``EditorView`` owns configuration (toggles, theme,
frame size) and prepares each frame's ``RenderState`` so every renderer sees
the same resolved text width and theme.
"""

from __future__ import annotations

import threading
from dataclasses import replace

from .compositor import Column, Compositor
from .config import ViewSettings
from .gutter import LineNumberRenderer, line_number_width
from .minimap import MINIMAP_WIDTH, MinimapRenderer
from .scrollbar import SCROLLBAR_WIDTH, ScrollbarRenderer
from .state import RenderState
from .ui_theme import DEFAULT_THEME, UITheme
from .viewport import TextViewportRenderer

GUTTER = "gutter"
TEXT = "text"
MINIMAP = "minimap"
SCROLLBAR = "scrollbar"


class EditorView:
    def __init__(
        self,
        width: int,
        height: int,
        *,
        settings: ViewSettings | None = None,
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        settings = settings or ViewSettings()
        self._lock = threading.RLock()
        self._theme = theme
        self.gutter = LineNumberRenderer()
        self.text = TextViewportRenderer()
        self.minimap = MinimapRenderer(enabled=settings.minimap)
        self.scrollbar = ScrollbarRenderer()
        self.compositor = Compositor(width, height)
        self.compositor.set_columns(
            [
                Column(width=line_number_width(0), enabled=settings.line_numbers, renderer=self.gutter, name=GUTTER),
                Column(flexible=True, renderer=self.text, name=TEXT),
                Column(width=MINIMAP_WIDTH, enabled=settings.minimap, renderer=self.minimap, name=MINIMAP),
                Column(width=SCROLLBAR_WIDTH, enabled=settings.scrollbar, renderer=self.scrollbar, name=SCROLLBAR),
            ]
        )

    @property
    def theme(self) -> UITheme:
        return self._theme

    def set_theme(self, theme: UITheme) -> None:
        """Swap the whole palette; takes effect from the next frame."""
        with self._lock:
            self._theme = theme

    def set_size(self, width: int, height: int) -> None:
        with self._lock:
            self.compositor.set_size(width, height)

    def apply_settings(self, settings: ViewSettings) -> None:
        with self._lock:
            self.set_line_numbers(settings.line_numbers)
            self.set_minimap(settings.minimap)
            self.set_scrollbar(settings.scrollbar)

    def _set_enabled(self, name: str, enabled: bool) -> None:
        self.compositor.enable_column(self.compositor.column_index(name), enabled)

    def _is_enabled(self, name: str) -> bool:
        idx = self.compositor.column_index(name)
        return idx >= 0 and self.compositor.columns()[idx].enabled

    def set_line_numbers(self, enabled: bool) -> None:
        with self._lock:
            self._set_enabled(GUTTER, enabled)

    def line_numbers_enabled(self) -> bool:
        return self._is_enabled(GUTTER)

    def set_minimap(self, enabled: bool) -> None:
        with self._lock:
            self.minimap.set_enabled(enabled)
            self._set_enabled(MINIMAP, enabled)

    def toggle_minimap(self) -> bool:
        """Flip minimap visibility and return the new state."""
        with self._lock:
            enabled = self.minimap.toggle()
            self._set_enabled(MINIMAP, enabled)
            return enabled

    def set_scrollbar(self, enabled: bool) -> None:
        with self._lock:
            self._set_enabled(SCROLLBAR, enabled)

    def text_width(self) -> int:
        """Width the text column will receive in the next frame."""
        return self.compositor.flexible_column_width()

    def prepare_state(self, state: RenderState) -> RenderState:
        """Thread this frame's layout decisions into ``state``.

        Resizes the gutter for the document's line count, then stamps the
        resolved text width, the matching visual-line total, and the current
        theme onto a copy of the snapshot.
        """
        with self._lock:
            self.compositor.set_column_width(
                self.compositor.column_index(GUTTER),
                line_number_width(state.total_lines),
            )
            return replace(state.with_text_width(self.text_width()), theme=self._theme)

    def render(self, state: RenderState) -> str:
        with self._lock:
            return self.compositor.render(self.prepare_state(state))

    def hit_test(self, x: int) -> tuple[str, int] | None:
        """Return ``(column_name, local_x)`` for frame cell ``x``."""
        with self._lock:
            hit = self.compositor.column_at(x)
            if hit is None:
                return None
            idx, local_x = hit
            return self.compositor.columns()[idx].name, local_x

    def minimap_click(self, row: int, state: RenderState) -> int:
        """Translate a click on minimap ``row`` into a target document line."""
        with self._lock:
            prepared = self.prepare_state(state)
            metrics = self.minimap.get_metrics(self.compositor.height, prepared)
            return self.minimap.row_to_line(row, metrics)


__all__ = [
    "EditorView",
    "GUTTER",
    "MINIMAP",
    "SCROLLBAR",
    "TEXT",
]
