"""Unit tests for preferences (temperature unit, geometry) in an isolated data directory."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from chemistry_lab.services import preferences
from chemistry_lab.services.temperature import TemperatureUnit


@pytest.fixture(autouse=True)
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("CHEMISTRY_LAB_DATA", str(tmp_path))
    return tmp_path


def test_defaults_without_file() -> None:
    assert preferences.load_preferences() == {}
    assert preferences.get_temperature_unit() == TemperatureUnit.CELSIUS
    assert preferences.get_window_geometry() is None
    assert preferences.get_base_font_size() == 0


def test_temperature_unit_round_trip(data_dir: Path) -> None:
    preferences.set_temperature_unit(2)
    assert preferences.get_temperature_unit() == TemperatureUnit.KELVIN
    assert (data_dir / "preferences.json").is_file()


def test_invalid_json_is_ignored(data_dir: Path) -> None:
    (data_dir / "preferences.json").write_text("{not json", encoding="utf-8")
    assert preferences.load_preferences() == {}


def test_bad_unit_falls_back_to_celsius(data_dir: Path) -> None:
    (data_dir / "preferences.json").write_text('{"temperature_unit": 9}', encoding="utf-8")
    assert preferences.get_temperature_unit() == TemperatureUnit.CELSIUS


def test_font_size_clamped(data_dir: Path) -> None:
    (data_dir / "preferences.json").write_text('{"base_font_size": 40}', encoding="utf-8")
    assert preferences.get_base_font_size() == 16


def test_unusable_data_dir_gives_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("CHEMISTRY_LAB_DATA", str(blocker / "data"))
    assert preferences.load_preferences() == {}
    assert preferences.get_temperature_unit() == TemperatureUnit.CELSIUS
    assert preferences.get_base_font_size() == 0
