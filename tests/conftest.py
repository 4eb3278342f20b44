# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from track.manager import Manager
from track.store import JsonStore

from .fakes import FakeClock, MemoryStore


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def manager(store: MemoryStore, clock: FakeClock) -> Manager:
    """Manager over an empty store; init() has created today's group."""
    return Manager.init(store, clock)


@pytest.fixture()
def json_store(tmp_path: Path) -> JsonStore:
    return JsonStore(tmp_path / "track")
