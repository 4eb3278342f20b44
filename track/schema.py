"""
TRACK - Data Schema
===================
Tasks grouped by day, with start/stop/complete transitions and
accumulated tracked seconds.

Timestamps are integer epoch seconds. Methods that need the current time
take it as `now` so a single command can use one instant throughout.
"""

from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field

from .errors import TaskNotFound, NoCurrentTask, NoTaskSpecifiedForComplete


class TaskStatus(str, Enum):
    """Task lifecycle states"""
    STOPPED = "stopped"     # Not running, may have tracked time
    RUNNING = "running"     # Has a started_at instant
    COMPLETE = "complete"   # Explicitly completed; reopened by start


class Task(BaseModel):
    """Individual trackable unit of work"""
    id: int
    name: str
    started_at: Optional[int] = None    # Set iff running
    tracked: Optional[int] = None       # Seconds from finished intervals
    is_complete: bool = False

    @property
    def status(self) -> TaskStatus:
        if self.started_at is not None:
            return TaskStatus.RUNNING
        if self.is_complete:
            return TaskStatus.COMPLETE
        return TaskStatus.STOPPED

    @property
    def is_running(self) -> bool:
        return self.started_at is not None

    def start(self, now: int) -> None:
        """Begin a new interval.

        Restarting a running task replaces started_at; the partial
        interval is discarded rather than folded into tracked.
        """
        self.started_at = now
        self.is_complete = False

    def stop(self, now: int) -> None:
        """Fold the running interval into tracked and clear started_at"""
        if self.started_at is not None:
            self.tracked = (self.tracked or 0) + (now - self.started_at)
        self.started_at = None

    def complete(self, now: int) -> None:
        self.stop(now)
        self.is_complete = True

    def tracked_total(self, now: int) -> int:
        """Accumulated time plus the live interval, if running"""
        total = self.tracked or 0
        if self.started_at is not None:
            total += now - self.started_at
        return total


class Group(BaseModel):
    """Named collection of tasks, usually one per calendar day"""
    id: int
    name: str
    next_task_id: int = 1
    current_task: Optional[int] = None
    tasks: List[Task] = Field(default_factory=list)

    def task(self, task_id: int) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def running_task(self) -> Optional[Task]:
        if self.current_task is None:
            return None
        return self.task(self.current_task)

    def add_task(self, name: str) -> Task:
        task = Task(id=self.next_task_id, name=name)
        self.next_task_id += 1
        self.tasks.append(task)
        return task.model_copy(deep=True)

    def remove_task(self, task_id: int) -> Task:
        task = self._require(task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]
        if self.current_task == task_id:
            self.current_task = None
        return task.model_copy(deep=True)

    def start_task(self, task_id: int, now: int) -> Task:
        """Start a task, stopping whichever other task is running first"""
        task = self._require(task_id)

        running = self.running_task()
        if running is not None and running.id != task_id:
            running.stop(now)

        task.start(now)
        self.current_task = task_id
        return task.model_copy(deep=True)

    def stop_current(self, now: int) -> Task:
        task = self.running_task()
        if task is None:
            raise NoCurrentTask(self.name)

        task.stop(now)
        self.current_task = None
        return task.model_copy(deep=True)

    def complete_task(self, task_id: Optional[int], now: int) -> Task:
        """Complete the given task, or the current one when no id is given"""
        if task_id is not None:
            task = self._require(task_id)
        else:
            task = self.running_task()
            if task is None:
                raise NoTaskSpecifiedForComplete()

        task.complete(now)
        if self.current_task == task.id:
            self.current_task = None
        return task.model_copy(deep=True)

    def _require(self, task_id: int) -> Task:
        task = self.task(task_id)
        if task is None:
            raise TaskNotFound(task_id, self.name)
        return task


class Snapshot(BaseModel):
    """Complete persisted state - loaded whole, saved whole"""
    next_group_id: int = 1
    current_group: Optional[int] = None
    groups: List[Group] = Field(default_factory=list)
