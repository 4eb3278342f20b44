"""
TRACK - JSON Store
==================
Handles persistence of the full snapshot to data.json and the
append-only archive.json that receives groups removed by `archive`.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Iterable, Any

from pydantic import ValidationError

from .errors import StoreIOFailure, StoreCorrupt
from .schema import Group, Snapshot

logger = logging.getLogger("track.store")

DATA_FILE = "data.json"
ARCHIVE_FILE = "archive.json"


class JsonStore:
    """
    File-based snapshot store

    Primary storage: {data_dir}/data.json
    Archive storage: {data_dir}/archive.json
    """

    def __init__(self, data_dir: os.PathLike):
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOFailure(f"Could not create data directory {self.data_dir}: {e}") from e

    @property
    def data_path(self) -> Path:
        return self.data_dir / DATA_FILE

    @property
    def archive_path(self) -> Path:
        return self.data_dir / ARCHIVE_FILE

    def exists(self) -> bool:
        return self.data_path.exists()

    # ========================================
    # SNAPSHOT
    # ========================================

    def load(self) -> Snapshot:
        """Load the snapshot, creating an empty one on first use"""
        if not self.exists():
            logger.info(f"No data file at {self.data_path}, creating one")
            snapshot = Snapshot()
            self.save(snapshot)
            return snapshot

        data = self._read_json(self.data_path)
        try:
            snapshot = Snapshot.model_validate(data)
        except ValidationError as e:
            raise StoreCorrupt(f"Invalid data in {self.data_path}: {e}") from e

        logger.debug(f"Loaded snapshot: {len(snapshot.groups)} groups")
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """Overwrite data.json with the full snapshot"""
        self._write_json(self.data_path, snapshot.model_dump(mode="json"))
        logger.debug(f"Saved snapshot: {len(snapshot.groups)} groups")

    # ========================================
    # ARCHIVE
    # ========================================

    def archive(self, groups: Iterable[Group], archived_at: int) -> int:
        """Append groups to archive.json; returns how many were written"""
        entries = self._read_archive_entries()

        added = 0
        for group in groups:
            entry = group.model_dump(mode="json")
            entry["archived_at"] = archived_at
            entries.append(entry)
            added += 1

        if added:
            self._write_json(self.archive_path, entries)
            logger.info(f"Archived {added} groups to {self.archive_path}")
        return added

    def load_archive(self) -> List[Group]:
        try:
            return [Group.model_validate(e) for e in self._read_archive_entries()]
        except ValidationError as e:
            raise StoreCorrupt(f"Invalid data in {self.archive_path}: {e}") from e

    # ========================================
    # HELPERS
    # ========================================

    def _read_archive_entries(self) -> List[Any]:
        if not self.archive_path.exists():
            return []
        entries = self._read_json(self.archive_path)
        if not isinstance(entries, list):
            raise StoreCorrupt(f"Archive {self.archive_path} is not a list")
        return entries

    def _read_json(self, path: Path) -> Any:
        try:
            with open(path, 'r') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise StoreCorrupt(f"Could not parse {path}: {e}") from e
        except OSError as e:
            raise StoreIOFailure(f"Could not read {path}: {e}") from e

    def _write_json(self, path: Path, data: Any) -> None:
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            with open(tmp_path, 'w') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            raise StoreIOFailure(f"Could not write {path}: {e}") from e
