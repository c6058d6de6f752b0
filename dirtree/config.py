"""Persisted default display switches.

Reads a JSON object from the platform config directory. The defaults only
apply to runs that pass no display switch at all; any switch on the command
line replaces them. Missing or malformed config means "no defaults".
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

OPTION_KEYS = ("tree", "summary", "verbose")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    not a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_default_options() -> dict[str, bool]:
    """Return persisted switches keyed by ``tree``/``summary``/``verbose``.

    Only explicit boolean values are accepted; other types are dropped.
    """
    config = load_config()
    return {key: config[key] for key in OPTION_KEYS if isinstance(config.get(key), bool)}


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_default_options",
]
