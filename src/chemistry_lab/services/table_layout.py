"""Grid placement for the periodic table page (no Qt)."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from ..db.element import ACTINIDE_GROUP, LANTHANIDE_GROUP, Element
from ..db.element_repo import fetch_by_group

MAIN_GROUPS = range(1, 19)
PERIOD_ROWS = 7
# Lanthanide/actinide rows sit under the main table after one empty row, starting at column 3.
F_BLOCK_FIRST_ROW = PERIOD_ROWS + 1
F_BLOCK_FIRST_COLUMN = 2


@dataclass(frozen=True)
class TileSlot:
    element: Element
    row: int
    column: int


def layout_table(columns: dict[int, list[Element]]) -> list[TileSlot]:
    """
    Place elements on a 0-based grid. Groups 1–18 are stacked bottom-aligned in storage order
    (so group 3 with four elements fills periods 4–7); groups 19 and 20 become two rows below.
    """
    slots: list[TileSlot] = []
    for group in MAIN_GROUPS:
        stack = columns.get(group, [])
        top = max(PERIOD_ROWS - len(stack), 0)
        for i, element in enumerate(stack):
            slots.append(TileSlot(element, top + i, group - 1))
    for offset, group in enumerate((LANTHANIDE_GROUP, ACTINIDE_GROUP)):
        for i, element in enumerate(columns.get(group, [])):
            slots.append(TileSlot(element, F_BLOCK_FIRST_ROW + offset, F_BLOCK_FIRST_COLUMN + i))
    return slots


def load_table(conn: sqlite3.Connection | None) -> list[TileSlot]:
    """Fetch groups 1–20 and lay them out. Empty when the store is unusable."""
    groups = list(MAIN_GROUPS) + [LANTHANIDE_GROUP, ACTINIDE_GROUP]
    return layout_table({g: fetch_by_group(conn, g) for g in groups})
