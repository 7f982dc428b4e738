"""
Element value type and row decoding for the `elements` table.
Required columns must be present; melting/boiling/image/colors are optional.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any, Literal, Optional

# Stored melting/boiling of exactly 0.0 means "no data", not 0 °C.
NO_TEMPERATURE = 0.0

LANTHANIDE_GROUP = 19
ACTINIDE_GROUP = 20
HALOGEN_GROUP = 17

ImageKind = Literal["image", "model"]


class Family(str, Enum):
    NONMETAL = "Nonmetal"
    ALKALI_METAL = "Alkali Metal"
    ALKALINE_EARTH_METAL = "Alkaline Earth Metal"
    TRANSITION_METAL = "Transition Metal"
    POST_TRANSITION_METAL = "Post-Transition Metal"
    NOBLE_GAS = "Noble Gas"
    METALLOID = "Metalloid"
    RADIOACTIVE = "Radioactive"
    LANTHANIDE = "Lanthanide"
    ACTINIDE = "Actinide"


class ElementDecodeError(ValueError):
    """A row from the elements table is missing a required column or holds an invalid value."""


@dataclass(frozen=True)
class Element:
    id: int
    name: str
    symbol: str
    desc: str
    state: int
    melting: Optional[float]
    boiling: Optional[float]
    group: int
    family: Family
    mass: float
    image: Optional[str]
    colors: Optional[tuple[str, ...]]

    @property
    def image_kind(self) -> Optional[ImageKind]:
        """"model" for a .usdz reference, "image" for .png, None otherwise."""
        if not self.image:
            return None
        suffix = PurePath(self.image).suffix.lower()
        if suffix == ".usdz":
            return "model"
        if suffix == ".png":
            return "image"
        return None

    def tint(self) -> Optional[tuple[float, float, float]]:
        """Color channels scaled to 0–1 for tinting the shared image, or None."""
        if not self.colors or len(self.colors) < 3:
            return None
        try:
            r, g, b = (float(c) / 255 for c in self.colors[:3])
        except ValueError:
            return None
        return (r, g, b)

    @property
    def is_halogen(self) -> bool:
        return self.group == HALOGEN_GROUP


_REQUIRED = ("id", "name", "symbol", "desc", "state", "family", "mass")


def _required(row: Any, keys: set[str], column: str) -> Any:
    if column not in keys or row[column] is None:
        raise ElementDecodeError(f"elements row is missing required column {column!r}")
    return row[column]


def _optional(row: Any, keys: set[str], column: str) -> Any:
    return row[column] if column in keys else None


def _temperature(value: Any) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    if value == NO_TEMPERATURE:
        return None
    return value


def _colors(value: Any) -> Optional[tuple[str, ...]]:
    if value is None:
        return None
    parts = tuple(p.strip() for p in str(value).split(", ") if p.strip())
    return parts or None


def map_row(row: Any) -> Element:
    """
    Decode one elements row (sqlite3.Row or a mapping keyed by column name).
    Raises ElementDecodeError for a missing/NULL required column or an unknown family.
    """
    keys = set(row.keys())
    values = {c: _required(row, keys, c) for c in _REQUIRED}
    try:
        family = Family(values["family"])
    except ValueError:
        raise ElementDecodeError(f"unknown element family {values['family']!r}") from None
    group = _optional(row, keys, "groups")
    image = _optional(row, keys, "image")
    try:
        return Element(
            id=int(values["id"]),
            name=str(values["name"]),
            symbol=str(values["symbol"]),
            desc=str(values["desc"]),
            state=int(values["state"]),
            melting=_temperature(_optional(row, keys, "melting")),
            boiling=_temperature(_optional(row, keys, "boiling")),
            group=int(group) if group is not None else 0,
            family=family,
            mass=float(values["mass"]),
            image=str(image) if image else None,
            colors=_colors(_optional(row, keys, "colors")),
        )
    except (TypeError, ValueError) as e:
        raise ElementDecodeError(f"invalid elements row: {e}") from e
