# entry_tracker/settings.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import yaml

from entry_tracker.core.models import DEFAULT_DISPLAY_OPTION, DisplayOption

logger = logging.getLogger(__name__)

DISPLAY_OPTION_KEY = "displayOption"


class SettingsStore:
    """Key-value preferences kept in a small YAML file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fp:
            yaml.safe_dump(data, fp, sort_keys=False)

    def get(self, key: str, default=None):
        return self._read().get(key, default)

    def set(self, key: str, value) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def get_display_option(self) -> DisplayOption:
        value = self.get(DISPLAY_OPTION_KEY)
        if value is None:
            return DEFAULT_DISPLAY_OPTION
        try:
            return DisplayOption(int(value))
        except (TypeError, ValueError):
            logger.warning("Unknown display option %r, using default", value)
            return DEFAULT_DISPLAY_OPTION

    def set_display_option(self, option: DisplayOption) -> None:
        self.set(DISPLAY_OPTION_KEY, int(DisplayOption(option)))
