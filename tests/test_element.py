"""Unit tests for Element row decoding (temperature sentinel, required columns, colors)."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from chemistry_lab.db.element import Element, ElementDecodeError, Family, map_row


def _row(**overrides) -> dict:
    row = {
        "id": 2,
        "name": "Helium",
        "symbol": "He",
        "desc": "Helium is a noble gas.",
        "state": 2,
        "melting": 0.0,
        "boiling": -268.93,
        "colors": "255, 214, 160",
        "image": "balloon.png",
        "groups": 18,
        "family": "Noble Gas",
        "mass": 4.0026,
    }
    row.update(overrides)
    return row


def test_map_row_decodes_all_columns() -> None:
    element = map_row(_row())
    assert element == Element(
        id=2,
        name="Helium",
        symbol="He",
        desc="Helium is a noble gas.",
        state=2,
        melting=None,
        boiling=-268.93,
        group=18,
        family=Family.NOBLE_GAS,
        mass=4.0026,
        image="balloon.png",
        colors=("255", "214", "160"),
    )


def test_zero_temperature_means_absent() -> None:
    element = map_row(_row(melting=0.0, boiling=0.0))
    assert element.melting is None
    assert element.boiling is None


def test_nonzero_and_null_temperatures() -> None:
    element = map_row(_row(melting=-259.16, boiling=None))
    assert element.melting == -259.16
    assert element.boiling is None


def test_optional_columns_may_be_missing() -> None:
    row = _row()
    for column in ("melting", "boiling", "colors", "image"):
        del row[column]
    element = map_row(row)
    assert element.melting is None
    assert element.image is None
    assert element.colors is None
    assert element.image_kind is None


@pytest.mark.parametrize("column", ["id", "name", "symbol", "desc", "state", "family", "mass"])
def test_missing_required_column_raises(column: str) -> None:
    row = _row()
    del row[column]
    with pytest.raises(ElementDecodeError):
        map_row(row)


def test_null_required_column_raises() -> None:
    with pytest.raises(ElementDecodeError):
        map_row(_row(name=None))


def test_unknown_family_raises() -> None:
    with pytest.raises(ElementDecodeError):
        map_row(_row(family="Plasma"))


def test_non_numeric_mass_raises() -> None:
    with pytest.raises(ElementDecodeError):
        map_row(_row(mass="heavy"))


def test_image_kind_by_suffix() -> None:
    assert map_row(_row(image="balloon.png")).image_kind == "image"
    assert map_row(_row(image="metal.usdz")).image_kind == "model"
    assert map_row(_row(image="")).image_kind is None


def test_tint_scales_channels() -> None:
    element = map_row(_row(colors="255, 0, 51"))
    assert element.tint() == (1.0, 0.0, 0.2)
    assert map_row(_row(colors=None)).tint() is None


def test_is_halogen() -> None:
    assert map_row(_row(groups=17)).is_halogen
    assert not map_row(_row()).is_halogen
