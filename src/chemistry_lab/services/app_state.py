"""
App-wide state: which element store the views read from. Views open their own connection per build.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from ..db.element_repo import open_store
from ..db.schema import DEFAULT_STORE_NAME


class AppState:
    """Names the store and data directory; each view calls open_store() when it is built."""

    def __init__(self, store_name: str = DEFAULT_STORE_NAME, data_dir: Path | None = None) -> None:
        self.store_name = store_name
        self.data_dir = data_dir
        self._open: list[sqlite3.Connection] = []

    def open_store(self) -> sqlite3.Connection | None:
        """Fresh read-only connection, or None when the store is unusable."""
        conn = open_store(self.store_name, self.data_dir)
        if conn is not None:
            self._open.append(conn)
        return conn

    def release(self, conn: sqlite3.Connection | None) -> None:
        """Close a connection obtained from open_store()."""
        if conn is None:
            return
        if conn in self._open:
            self._open.remove(conn)
        conn.close()

    def close(self) -> None:
        for conn in self._open:
            conn.close()
        self._open.clear()

    def __enter__(self) -> AppState:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
