"""
TRACK - Personal Time Tracker
=============================

Tracks named tasks organized into date-named groups, with
start/stop/complete transitions and accumulated time per task.

Usage:
    from track import Manager, JsonStore, SystemClock

    manager = Manager.init(JsonStore("~/.local/share/track"), SystemClock())
    manager.add_task("write report")
    manager.start_task(1)
    manager.commit()

    # Later
    manager = Manager.init(store, clock)
    manager.stop_current()
    manager.commit()
"""

from .schema import (
    Task,
    TaskStatus,
    Group,
    Snapshot
)

from .errors import (
    TrackError,
    TaskNotFound,
    GroupNotFound,
    GroupResolutionFailed,
    DuplicateGroupName,
    NoCurrentTask,
    NoTaskSpecifiedForComplete,
    CannotArchiveCurrentGroup,
    StoreError,
    StoreIOFailure,
    StoreCorrupt
)

from .clock import SystemClock, DATE_FORMAT
from .store import JsonStore
from .manager import Manager

__version__ = "1.0.0"
__all__ = [
    "Manager",
    "JsonStore",
    "SystemClock",
    "DATE_FORMAT",
    "Task",
    "TaskStatus",
    "Group",
    "Snapshot",
    "TrackError",
    "TaskNotFound",
    "GroupNotFound",
    "GroupResolutionFailed",
    "DuplicateGroupName",
    "NoCurrentTask",
    "NoTaskSpecifiedForComplete",
    "CannotArchiveCurrentGroup",
    "StoreError",
    "StoreIOFailure",
    "StoreCorrupt"
]
