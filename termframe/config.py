"""Persistent JSON config helpers.

Stores view toggles (word wrap, line numbers, minimap, scrollbar), tab width,
and the UI theme name. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "termframe"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

MIN_TAB_WIDTH = 1
MAX_TAB_WIDTH = 16


@dataclass(frozen=True)
class ViewSettings:
    word_wrap: bool = False
    line_numbers: bool = True
    minimap: bool = False
    scrollbar: bool = True
    tab_width: int = 4
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception:
        logger.debug("ignoring unreadable config at %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        logger.debug("could not write config to %s", CONFIG_PATH, exc_info=True)


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _coerce_tab_width(value: object, default: int) -> int:
    """Booleans, non-integers, and out-of-range values yield ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if not MIN_TAB_WIDTH <= value <= MAX_TAB_WIDTH:
        return default
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_view_settings() -> ViewSettings:
    """Load view settings with every field type-checked and defaulted."""
    data = load_config()
    defaults = ViewSettings()
    theme = data.get("theme")
    return ViewSettings(
        word_wrap=_load_bool(data, "word_wrap", defaults.word_wrap),
        line_numbers=_load_bool(data, "line_numbers", defaults.line_numbers),
        minimap=_load_bool(data, "minimap", defaults.minimap),
        scrollbar=_load_bool(data, "scrollbar", defaults.scrollbar),
        tab_width=_coerce_tab_width(data.get("tab_width"), defaults.tab_width),
        theme=(theme.strip() or None) if isinstance(theme, str) else None,
    )


def save_view_settings(settings: ViewSettings) -> None:
    """Persist view settings, keeping unrelated keys already in the file."""
    config = load_config()
    config["word_wrap"] = bool(settings.word_wrap)
    config["line_numbers"] = bool(settings.line_numbers)
    config["minimap"] = bool(settings.minimap)
    config["scrollbar"] = bool(settings.scrollbar)
    config["tab_width"] = _coerce_tab_width(settings.tab_width, ViewSettings().tab_width)
    if settings.theme:
        config["theme"] = settings.theme
    else:
        config.pop("theme", None)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "ViewSettings",
    "load_config",
    "load_theme_name",
    "load_view_settings",
    "save_config",
    "save_theme_name",
    "save_view_settings",
]
