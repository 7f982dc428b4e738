"""
User preferences (temperature unit, window geometry, font size). Stored as JSON in the data directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..db.schema import data_dir_path
from .temperature import TemperatureUnit


def _preferences_path() -> Path:
    return data_dir_path() / "preferences.json"


def load_preferences() -> dict[str, Any]:
    """Load preferences from disk. Returns dict; missing file or invalid JSON => {}."""
    path = _preferences_path()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            prefs = json.load(f)
    except (json.JSONDecodeError, OSError):
        return {}
    return prefs if isinstance(prefs, dict) else {}


def save_preferences(prefs: dict[str, Any]) -> None:
    """Save preferences to disk."""
    path = _preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2)


def get_temperature_unit() -> TemperatureUnit:
    """Unit last picked on the element detail page. Celsius when unset or invalid."""
    prefs = load_preferences()
    try:
        return TemperatureUnit(int(prefs.get("temperature_unit", 0)))
    except (TypeError, ValueError):
        return TemperatureUnit.CELSIUS


def set_temperature_unit(unit: int) -> None:
    prefs = load_preferences()
    prefs["temperature_unit"] = int(TemperatureUnit(unit))
    save_preferences(prefs)


def get_base_font_size() -> int:
    """Base font size in points. 0 = use system default; 8–16 = point size."""
    prefs = load_preferences()
    v = prefs.get("base_font_size")
    if v is None:
        return 0
    try:
        n = int(v)
        if n == 0:
            return 0
        return max(8, min(16, n))
    except (TypeError, ValueError):
        return 0


def get_window_geometry() -> str | None:
    """Saved main window geometry (base64). None if not set."""
    prefs = load_preferences()
    return prefs.get("window_geometry")


def set_window_geometry(geometry_b64: str) -> None:
    """Save main window geometry (base64 from QMainWindow.saveGeometry())."""
    prefs = load_preferences()
    prefs["window_geometry"] = geometry_b64
    save_preferences(prefs)
