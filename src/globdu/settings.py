"""JSON-backed user defaults."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from globdu.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "globdu"
_SETTINGS_FILE = "settings.json"


def _is_flag(value: Any) -> bool:
    return isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_OPTION_DEFAULTS = {
    "reverse": _is_flag,
    "percentages": _is_flag,
    "by_path": _is_flag,
    "min_percentage": _is_number,
}


class Settings:
    """Read-only settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("defaults.percentages")  # reads data["defaults"]["percentages"]
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def command_defaults(self) -> dict[str, Any]:
        """Report option defaults for the CLI, keyed by parameter name.

        Only the ordering and filtering options can be preset; the pattern
        always comes from the command line.  Unknown keys and values of the
        wrong type are dropped with a warning.
        """
        defaults = self.get("defaults", {})
        if not isinstance(defaults, dict):
            log.warning("Ignoring non-object 'defaults' in %s", self._path)
            return {}

        accepted: dict[str, Any] = {}
        for key, value in defaults.items():
            if key not in _OPTION_DEFAULTS:
                log.warning("Ignoring unknown default %r in %s", key, self._path)
            elif not _OPTION_DEFAULTS[key](value):
                log.warning("Ignoring default %r=%r in %s: wrong type", key, value, self._path)
            else:
                accepted[key] = value
        return accepted

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not os.path.isfile(self._path):
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if isinstance(data, dict):
            self._data = data
        else:
            log.warning("Ignoring settings in %s: top level is not an object", self._path)
