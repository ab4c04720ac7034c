"""Command-line front door for termframe.

Loads a file, highlights it, and prints one composed frame (gutter, text,
minimap, scrollbar) to stdout. Defaults come from the persisted view
settings; flags override them for this run only.
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from .config import ViewSettings, load_view_settings
from .state import build_render_state
from .syntax import SyntaxHighlighter, read_text, sanitize_terminal_text
from .ui_theme import available_theme_names, resolve_theme
from .view import EditorView


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _default_frame_size() -> tuple[int, int]:
    """Resolve default frame size from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns), max(1, term.lines - 1)


def render_file_frame(
    path: Path,
    width: int,
    height: int,
    settings: ViewSettings,
    *,
    scroll: int = 0,
    theme_name: str | None = None,
    no_color: bool = False,
) -> str:
    """Render one frame of ``path`` exactly ``width`` by ``height`` cells."""
    lines = sanitize_terminal_text(read_text(path)).splitlines()
    highlighter = SyntaxHighlighter(path)
    highlighter.enabled = not no_color
    theme = resolve_theme(theme_name or settings.theme, no_color=no_color)

    view = EditorView(width, height, settings=settings, theme=theme)
    view.text.show_cursor = False
    state = build_render_state(
        lines,
        scroll_y=scroll,
        line_colors=highlighter.document_colors(lines),
        word_wrap=settings.word_wrap,
        tab_width=settings.tab_width,
        theme=theme,
    )
    return view.render(state)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print one frame of the requested file."""
    parser = argparse.ArgumentParser(
        description="Render one terminal frame of a file with gutter, minimap and scrollbar."
    )
    parser.add_argument("path", help="Path to file.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width (default: terminal width).")
    parser.add_argument("--height", type=_positive_int, default=None, help="Frame height (default: terminal height - 1).")
    parser.add_argument("--scroll", type=_nonnegative_int, default=0, help="First visible (visual) line.")
    parser.add_argument(
        "--wrap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap long lines (default: saved setting).",
    )
    parser.add_argument(
        "--line-numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show the line-number gutter (default: saved setting).",
    )
    parser.add_argument(
        "--minimap",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show the braille minimap (default: saved setting).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    saved = load_view_settings()
    settings = ViewSettings(
        word_wrap=saved.word_wrap if args.wrap is None else args.wrap,
        line_numbers=saved.line_numbers if args.line_numbers is None else args.line_numbers,
        minimap=saved.minimap if args.minimap is None else args.minimap,
        scrollbar=saved.scrollbar,
        tab_width=saved.tab_width,
        theme=saved.theme,
    )
    default_width, default_height = _default_frame_size()
    frame = render_file_frame(
        path,
        args.width or default_width,
        args.height or default_height,
        settings,
        scroll=args.scroll,
        theme_name=args.theme,
        no_color=args.no_color,
    )
    sys.stdout.write(frame + "\n")


if __name__ == "__main__":
    main()
