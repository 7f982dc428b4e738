"""Unit tests for the read-only element store accessor."""

import logging
import random
import sqlite3
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from chemistry_lab.db.element_repo import (
    SAMPLE_MAX_ID,
    fetch_by_group,
    fetch_element,
    fetch_random_sample,
    open_store,
    sample_ids,
)
from chemistry_lab.db.schema import build_store


@pytest.fixture
def store(tmp_path: Path):
    build_store("chem", tmp_path)
    conn = open_store("chem", tmp_path)
    assert conn is not None
    yield conn
    conn.close()


def test_fetch_by_group_filters(store: sqlite3.Connection) -> None:
    for group in range(1, 21):
        elements = fetch_by_group(store, group)
        assert elements
        assert all(e.group == group for e in elements)


def test_group_one_has_hydrogen(store: sqlite3.Connection) -> None:
    names = [e.name for e in fetch_by_group(store, 1)]
    assert names[0] == "Hydrogen"
    hydrogen = fetch_by_group(store, 1)[0]
    assert hydrogen.melting == -259.16
    helium = fetch_element(store, 2)[0]
    assert helium.melting is None


def test_fetch_by_group_storage_order(store: sqlite3.Connection) -> None:
    ids = [e.id for e in fetch_by_group(store, 19)]
    assert ids == list(range(57, 71))


def test_unknown_group_is_empty(store: sqlite3.Connection) -> None:
    assert fetch_by_group(store, 99) == []


def test_store_is_read_only(store: sqlite3.Connection) -> None:
    with pytest.raises(sqlite3.OperationalError):
        store.execute("DELETE FROM elements")


def test_open_missing_store(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert open_store("nope", tmp_path) is None
    assert "not found" in caplog.text


def test_open_corrupt_store(tmp_path: Path) -> None:
    (tmp_path / "broken.db").write_bytes(b"this is not a database file at all" * 10)
    assert open_store("broken", tmp_path) is None


def test_query_failure_returns_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    conn = sqlite3.connect(str(tmp_path / "empty.db"))
    conn.execute("CREATE TABLE other (x INTEGER)")
    conn.commit()
    conn.close()
    conn = open_store("empty", tmp_path)
    assert conn is not None
    with caplog.at_level(logging.ERROR):
        assert fetch_by_group(conn, 1) == []
    assert "failed" in caplog.text
    conn.close()


def test_no_connection_means_no_data() -> None:
    assert fetch_by_group(None, 1) == []
    assert fetch_element(None, 1) == []
    assert fetch_random_sample(None, 4) == []


def test_random_sample_distinct_and_bounded(store: sqlite3.Connection) -> None:
    rng = random.Random(7)
    for _ in range(20):
        sample = fetch_random_sample(store, 4, rng)
        ids = [e.id for e in sample]
        assert len(ids) == 4
        assert len(set(ids)) == 4
        assert all(1 <= i <= SAMPLE_MAX_ID for i in ids)


def test_random_sample_keeps_generation_order(store: sqlite3.Connection) -> None:
    expected = sample_ids(6, random.Random(3))
    sample = fetch_random_sample(store, 6, random.Random(3))
    assert [e.id for e in sample] == expected


def test_random_sample_whole_range(store: sqlite3.Connection) -> None:
    sample = fetch_random_sample(store, SAMPLE_MAX_ID)
    assert sorted(e.id for e in sample) == list(range(1, SAMPLE_MAX_ID + 1))


def test_random_sample_zero(store: sqlite3.Connection) -> None:
    assert fetch_random_sample(store, 0) == []


@pytest.mark.parametrize("count", [-1, SAMPLE_MAX_ID + 1])
def test_random_sample_out_of_range(count: int) -> None:
    with pytest.raises(ValueError):
        fetch_random_sample(None, count)


def test_unusable_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("CHEMISTRY_LAB_DATA", str(blocker / "data"))
    assert open_store("chem") is None
    assert not (blocker / "data").exists()
