"""Unit tests for periodic table grid placement."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from chemistry_lab.db.element_repo import open_store
from chemistry_lab.db.schema import build_store
from chemistry_lab.services.table_layout import F_BLOCK_FIRST_COLUMN, F_BLOCK_FIRST_ROW, load_table


def _positions(tmp_path: Path) -> dict[str, tuple[int, int]]:
    build_store("chem", tmp_path)
    conn = open_store("chem", tmp_path)
    slots = load_table(conn)
    conn.close()
    return {s.element.symbol: (s.row, s.column) for s in slots}


def test_every_element_placed_once(tmp_path: Path) -> None:
    positions = _positions(tmp_path)
    assert len(positions) == 118
    assert len(set(positions.values())) == 118


def test_main_groups_bottom_aligned(tmp_path: Path) -> None:
    positions = _positions(tmp_path)
    assert positions["H"] == (0, 0)
    assert positions["He"] == (0, 17)
    assert positions["Fr"] == (6, 0)
    assert positions["Sc"] == (3, 2)
    assert positions["Lr"] == (6, 2)
    assert positions["B"] == (1, 12)


def test_f_block_rows(tmp_path: Path) -> None:
    positions = _positions(tmp_path)
    assert positions["La"] == (F_BLOCK_FIRST_ROW, F_BLOCK_FIRST_COLUMN)
    assert positions["Yb"] == (F_BLOCK_FIRST_ROW, F_BLOCK_FIRST_COLUMN + 13)
    assert positions["Ac"] == (F_BLOCK_FIRST_ROW + 1, F_BLOCK_FIRST_COLUMN)


def test_unusable_store_gives_empty_table() -> None:
    assert load_table(None) == []
