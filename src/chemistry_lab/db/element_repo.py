"""
Read-only queries against the element store: open by logical name, fetch by group, random sample.
Failures to open or query are logged and surface as "no data" (None / empty list).
"""

from __future__ import annotations

import logging
import random
import sqlite3
from pathlib import Path

from .element import Element, map_row
from .schema import RESOURCES_DIR, data_dir_path

logger = logging.getLogger(__name__)

# Quiz samples are drawn from atomic numbers 1..94 only.
SAMPLE_MIN_ID = 1
SAMPLE_MAX_ID = 94

_SELECT = (
    "SELECT id, name, symbol, desc, state, melting, boiling, colors, image, groups, family, mass"
    " FROM elements"
)


def resolve_store(name: str, data_dir: Path | None = None) -> Path | None:
    """Locate <name>.db in the data directory, then in the bundled resources. None if not found."""
    candidates = [(data_dir or data_dir_path()) / f"{name}.db", RESOURCES_DIR / f"{name}.db"]
    for path in candidates:
        if path.is_file():
            return path
    return None


def open_store(name: str, data_dir: Path | None = None) -> sqlite3.Connection | None:
    """
    Open the store <name> read-only. Returns None (never raises) if the file is missing or
    cannot be opened; callers treat None as "no data available".
    """
    path = resolve_store(name, data_dir)
    if path is None:
        logger.warning("Element store %r not found", name)
        return None
    try:
        conn = sqlite3.connect(path.resolve().as_uri() + "?mode=ro", uri=True)
        conn.row_factory = sqlite3.Row
        # Force sqlite to read the header so a corrupt file fails here, not at first query.
        conn.execute("SELECT 1 FROM sqlite_master LIMIT 1").fetchall()
    except (sqlite3.Error, OSError) as e:
        logger.warning("Cannot open element store %s: %s", path, e)
        return None
    return conn


def fetch_by_group(conn: sqlite3.Connection | None, group: int) -> list[Element]:
    """All elements whose groups column equals group, in storage order."""
    if conn is None:
        return []
    try:
        cur = conn.execute(_SELECT + " WHERE groups = ?", (group,))
        rows = cur.fetchall()
    except sqlite3.Error as e:
        logger.error("Query for group %s failed: %s", group, e)
        return []
    return [map_row(r) for r in rows]


def fetch_element(conn: sqlite3.Connection | None, element_id: int) -> list[Element]:
    """Elements with the given atomic number (zero or one)."""
    if conn is None:
        return []
    try:
        cur = conn.execute(_SELECT + " WHERE id = ?", (element_id,))
        rows = cur.fetchall()
    except sqlite3.Error as e:
        logger.error("Query for element %s failed: %s", element_id, e)
        return []
    return [map_row(r) for r in rows]


def sample_ids(count: int, rng: random.Random | None = None) -> list[int]:
    """
    count distinct atomic numbers drawn uniformly from 1..94 without replacement.
    Raises ValueError if count is negative or larger than 94.
    """
    available = SAMPLE_MAX_ID - SAMPLE_MIN_ID + 1
    if count < 0 or count > available:
        raise ValueError(f"count must be between 0 and {available}, got {count}")
    return (rng or random).sample(range(SAMPLE_MIN_ID, SAMPLE_MAX_ID + 1), count)


def fetch_random_sample(
    conn: sqlite3.Connection | None,
    count: int,
    rng: random.Random | None = None,
) -> list[Element]:
    """
    Fetch count distinct random elements (atomic numbers 1..94), in generation order.
    The count check happens before the connection check.
    """
    ids = sample_ids(count, rng)
    if conn is None:
        return []
    result: list[Element] = []
    for element_id in ids:
        result.extend(fetch_element(conn, element_id))
    return result
