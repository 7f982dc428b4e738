"""
Build or rebuild the element store from the bundled seed data.
Installed as the chemistry-lab-build-store console script.
"""

import sqlite3

from .db.schema import build_store


def main() -> None:
    path = build_store(rebuild=True)
    print(f"Element store: {path}")
    conn = sqlite3.connect(str(path))
    try:
        count = conn.execute("SELECT COUNT(*) FROM elements").fetchone()[0]
    finally:
        conn.close()
    print(f"Schema created and {count} elements loaded.")


if __name__ == "__main__":
    main()
