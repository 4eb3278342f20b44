"""
TRACK - Error Taxonomy
======================
Every expected failure of a command is raised as a TrackError subclass.
Operations raise before mutating, so a caught error means the snapshot
is unchanged and must not be committed.
"""

from typing import Optional


class TrackError(Exception):
    """Base class for all track failures"""


class TaskNotFound(TrackError):
    def __init__(self, task_id: int, group_name: Optional[str] = None):
        self.task_id = task_id
        self.group_name = group_name
        where = f" in group {group_name}" if group_name else ""
        super().__init__(f"Could not find task {task_id}{where}")


class GroupNotFound(TrackError):
    def __init__(self, group_id: int):
        self.group_id = group_id
        super().__init__(f"Could not find group {group_id}")


class GroupResolutionFailed(TrackError):
    """The selected or default group is missing from the snapshot"""

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"Could not resolve group: {target}")


class DuplicateGroupName(TrackError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A group named {name} already exists")


class NoCurrentTask(TrackError):
    def __init__(self, group_name: Optional[str] = None):
        self.group_name = group_name
        where = f" in group {group_name}" if group_name else ""
        super().__init__(f"No task is currently running{where}")


class NoTaskSpecifiedForComplete(TrackError):
    def __init__(self):
        super().__init__("No task id given and no task is currently running")


class CannotArchiveCurrentGroup(TrackError):
    def __init__(self, group_id: int):
        self.group_id = group_id
        super().__init__(
            f"Group {group_id} is the current group and cannot be archived"
        )


class StoreError(TrackError):
    """Persistence failure; fatal to the invoking command"""


class StoreIOFailure(StoreError):
    pass


class StoreCorrupt(StoreError):
    pass
