# tests/test_store.py

from __future__ import annotations

import json

import pytest

from track.errors import StoreCorrupt
from track.manager import Manager
from track.schema import Group, Snapshot, Task
from track.store import JsonStore

from .fakes import FakeClock


def test_first_load_creates_empty_snapshot(json_store: JsonStore) -> None:
    assert not json_store.exists()

    snapshot = json_store.load()

    assert snapshot == Snapshot()
    assert json_store.exists()


def test_save_writes_documented_shape(json_store: JsonStore) -> None:
    snapshot = Snapshot(
        next_group_id=2,
        current_group=None,
        groups=[
            Group(
                id=1,
                name="10-17-2026",
                next_task_id=2,
                current_task=1,
                tasks=[Task(id=1, name="a", started_at=100, tracked=5)],
            )
        ],
    )
    json_store.save(snapshot)

    data = json.loads(json_store.data_path.read_text())
    assert data == {
        "next_group_id": 2,
        "current_group": None,
        "groups": [
            {
                "id": 1,
                "name": "10-17-2026",
                "next_task_id": 2,
                "current_task": 1,
                "tasks": [
                    {
                        "id": 1,
                        "name": "a",
                        "started_at": 100,
                        "tracked": 5,
                        "is_complete": False,
                    }
                ],
            }
        ],
    }
    assert json_store.load() == snapshot
    assert not (json_store.data_dir / "data.json.tmp").exists()


def test_invalid_json_is_corrupt(json_store: JsonStore) -> None:
    json_store.data_path.write_text("{not json")
    with pytest.raises(StoreCorrupt):
        json_store.load()


def test_schema_mismatch_is_corrupt(json_store: JsonStore) -> None:
    json_store.data_path.write_text(json.dumps({"groups": [{"id": "x"}]}))
    with pytest.raises(StoreCorrupt):
        json_store.load()


def test_archive_appends(json_store: JsonStore) -> None:
    assert json_store.load_archive() == []

    json_store.archive([Group(id=1, name="a")], 1000)
    json_store.archive([Group(id=2, name="b"), Group(id=3, name="c")], 2000)

    assert [g.name for g in json_store.load_archive()] == ["a", "b", "c"]
    raw = json.loads(json_store.archive_path.read_text())
    assert [entry["archived_at"] for entry in raw] == [1000, 2000, 2000]


def test_archive_nothing_writes_nothing(json_store: JsonStore) -> None:
    assert json_store.archive([], 1000) == 0
    assert not json_store.archive_path.exists()


def test_manager_state_survives_reload(json_store: JsonStore) -> None:
    clock = FakeClock()
    manager = Manager.init(json_store, clock)
    manager.add_task("a")
    manager.start_task(1)
    manager.commit()

    clock.advance(45)
    reloaded = Manager.init(json_store, clock)
    stopped = reloaded.stop_current()

    assert stopped.tracked == 45
