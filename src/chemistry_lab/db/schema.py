"""
SQLite schema and seed loading for the element store.
The store is built once from resources/elements.json and opened read-only afterwards.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
from pathlib import Path
from typing import Any

from .element import NO_TEMPERATURE

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = "chem"
RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
SEED_PATH = RESOURCES_DIR / "elements.json"

ELEMENT_COLUMNS = (
    "id", "name", "symbol", "desc", "state", "melting", "boiling",
    "colors", "image", "groups", "family", "mass",
)


def data_dir_path() -> Path:
    """Configured data directory ($CHEMISTRY_LAB_DATA or ~/.chemistry_lab). Not created; safe on read paths."""
    env = os.environ.get("CHEMISTRY_LAB_DATA", "")
    return Path(env) if env else Path.home() / ".chemistry_lab"


def get_data_dir() -> Path:
    """Return the user data directory, creating it. Raises OSError if it cannot be created."""
    base = data_dir_path()
    base.mkdir(parents=True, exist_ok=True)
    return base


def get_store_path(name: str = DEFAULT_STORE_NAME, data_dir: Path | None = None) -> Path:
    """Path of the built store <name>.db in the data directory."""
    return (data_dir or get_data_dir()) / f"{name}.db"


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the elements table. Idempotent: uses IF NOT EXISTS."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS elements (
            id INTEGER PRIMARY KEY,
            name TEXT UNIQUE NOT NULL,
            symbol TEXT NOT NULL,
            desc TEXT NOT NULL,
            state INTEGER NOT NULL,
            melting REAL,
            boiling REAL,
            colors TEXT,
            image TEXT,
            groups INTEGER NOT NULL,
            family TEXT NOT NULL,
            mass REAL NOT NULL
        )
    """)
    conn.execute("CREATE INDEX IF NOT EXISTS idx_elements_groups ON elements(groups)")


def load_seed(path: Path | None = None) -> list[dict[str, Any]]:
    """Read the shipped element records (list of objects keyed by column name)."""
    with open(path or SEED_PATH, encoding="utf-8") as f:
        return json.load(f)


def _seed_values(record: dict[str, Any]) -> tuple:
    values = dict(record)
    # Absent temperatures are stored with the 0.0 sentinel.
    for column in ("melting", "boiling"):
        if values.get(column) is None:
            values[column] = NO_TEMPERATURE
    colors = values.get("colors")
    if isinstance(colors, list):
        values["colors"] = ", ".join(str(c) for c in colors)
    return tuple(values.get(c) for c in ELEMENT_COLUMNS)


def seed_elements(conn: sqlite3.Connection, records: list[dict[str, Any]] | None = None) -> int:
    """
    Insert element records in the given order (storage order drives table layout).
    Only runs when the table is empty. Returns the number of rows inserted.
    """
    cur = conn.execute("SELECT COUNT(*) FROM elements")
    if cur.fetchone()[0] > 0:
        return 0
    rows = [_seed_values(r) for r in (records if records is not None else load_seed())]
    placeholders = ", ".join("?" * len(ELEMENT_COLUMNS))
    conn.executemany(
        f"INSERT INTO elements ({', '.join(ELEMENT_COLUMNS)}) VALUES ({placeholders})",
        rows,
    )
    conn.commit()
    return len(rows)


def build_store(
    name: str = DEFAULT_STORE_NAME,
    data_dir: Path | None = None,
    *,
    rebuild: bool = False,
) -> Path:
    """
    Create <data_dir>/<name>.db from the seed if it does not exist (or always, with rebuild).
    Returns the store path. Seed read errors propagate.
    """
    path = get_store_path(name, data_dir)
    if path.exists() and not rebuild:
        return path
    records = load_seed()
    tmp = path.parent / (path.name + ".tmp")
    if tmp.exists():
        tmp.unlink()
    conn = sqlite3.connect(str(tmp))
    try:
        create_schema(conn)
        count = seed_elements(conn, records)
    finally:
        conn.close()
    tmp.replace(path)
    logger.info("Built element store %s (%d elements)", path, count)
    return path
