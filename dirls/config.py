"""Persistent JSON config helpers.

Stores default listing flags and the log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class ListingFlags:
    """Show-hidden, long-format and recursive switches."""

    show_hidden: bool = False
    long_format: bool = False
    recursive: bool = False

    def merged(self, other: ListingFlags) -> ListingFlags:
        """Return flags enabled in either ``self`` or ``other``."""
        return ListingFlags(
            show_hidden=self.show_hidden or other.show_hidden,
            long_format=self.long_format or other.long_format,
            recursive=self.recursive or other.recursive,
        )


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else is ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def load_default_flags() -> ListingFlags:
    """Return listing flags that apply even when not given on the command line."""
    data = load_config()
    return ListingFlags(
        show_hidden=_load_bool(data, "show_hidden"),
        long_format=_load_bool(data, "long_format"),
        recursive=_load_bool(data, "recursive"),
    )


def save_default_flags(flags: ListingFlags) -> None:
    config = load_config()
    config["show_hidden"] = bool(flags.show_hidden)
    config["long_format"] = bool(flags.long_format)
    config["recursive"] = bool(flags.recursive)
    save_config(config)


def load_log_level() -> int:
    """Return the configured logging level, ``WARNING`` when unset or invalid."""
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingFlags",
    "load_config",
    "save_config",
    "load_default_flags",
    "save_default_flags",
    "load_log_level",
]
