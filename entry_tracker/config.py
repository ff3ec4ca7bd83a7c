# entry_tracker/config.py
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Dict

import yaml

DEFAULT_CONFIG: Dict[str, object] = {
    "db_path": "daybook.db",
    "settings_path": "settings.yaml",
    "storage_backend": "sqlite",
    "storage_backends": {
        "sqlite": "entry_tracker.storage.sqlite.SQLiteRepository",
        "memory": "entry_tracker.storage.memory.InMemoryRepository",
    },
    "display_modules": {
        "grouped": "entry_tracker.views.section_list.SectionListView",
        "flat": "entry_tracker.views.flat_list.FlatListView",
        "spreadsheet": "entry_tracker.views.spreadsheet.SpreadsheetView",
    },
    "output_modules": {
        "csv": "entry_tracker.outputs.csv_output.CSVOutput",
        "excel": "entry_tracker.outputs.excel_output.ExcelOutput",
    },
    "output_dir": "data",
}

ENV_OVERRIDES = {
    "DAYBOOK_DB": "db_path",
    "DAYBOOK_SETTINGS": "settings_path",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    data: Dict[str, object] = {}
    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    config = _merge_defaults(data, DEFAULT_CONFIG)
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value
    return config
