"""
TRACK - Manager
===============
Owns the snapshot of all groups, resolves the current group and
delegates task operations to it. Persistence is explicit: a command
calls Manager.init(), performs one operation, then commit().

Every returned Task/Group is a detached copy; mutating it does not
affect the snapshot.
"""

import logging
from typing import Optional, List, Iterable

from .errors import (
    GroupNotFound, GroupResolutionFailed, DuplicateGroupName,
    CannotArchiveCurrentGroup
)
from .schema import Snapshot, Group, Task

logger = logging.getLogger("track.manager")


class Manager:
    """
    Group/task state manager

    Key features:
    - Default group named after the clock's today label
    - Explicit group selection that survives id renumbering
    - At most one running task per group
    """

    def __init__(self, snapshot: Snapshot, store, clock):
        self._snapshot = snapshot
        self.store = store
        self.clock = clock

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    @classmethod
    def init(cls, store, clock) -> "Manager":
        """Load the snapshot and ensure today's group exists"""
        manager = cls(store.load(), store, clock)

        name = clock.today_label()
        if manager._group_by_name(name) is None:
            manager._new_group(name)
            manager.commit()
            logger.info(f"📅 Created default group: {name}")

        return manager

    def commit(self) -> None:
        """Persist the full snapshot"""
        self.store.save(self._snapshot)

    def snapshot(self) -> Snapshot:
        return self._snapshot.model_copy(deep=True)

    # ========================================
    # GROUP OPERATIONS
    # ========================================

    def group(self) -> Group:
        """The current group: explicit selection, else today's group"""
        return self._resolve_group().model_copy(deep=True)

    def groups(self) -> List[Group]:
        return [g.model_copy(deep=True) for g in self._snapshot.groups]

    @property
    def current_group_id(self) -> Optional[int]:
        return self._snapshot.current_group

    def is_current(self, group: Group) -> bool:
        current = self._snapshot.current_group
        if current is not None:
            return group.id == current
        return group.name == self.clock.today_label()

    def add_group(self, name: str) -> Group:
        if self._group_by_name(name) is not None:
            raise DuplicateGroupName(name)

        group = self._new_group(name)
        logger.info(f"➕ Added group: {name} ({group.id})")
        return group.model_copy(deep=True)

    def use_group(self, group_id: int) -> Group:
        group = self._group_by_id(group_id)
        if group is None:
            raise GroupNotFound(group_id)

        self._snapshot.current_group = group.id
        logger.info(f"📌 Using group: {group.name} ({group.id})")
        return group.model_copy(deep=True)

    def reset_group(self) -> None:
        """Revert to whichever group matches today"""
        self._snapshot.current_group = None
        logger.info("📌 Reset group selection to today")

    def add_tomorrow_group(self) -> Group:
        group = self.add_group(self.clock.tomorrow_label())
        return self.use_group(group.id)

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, name: str) -> Task:
        group = self._resolve_group()
        task = group.add_task(name)
        logger.info(f"➕ Added task: {task.name} ({task.id}) to {group.name}")
        return task

    def remove_task(self, task_id: int) -> Task:
        task = self._resolve_group().remove_task(task_id)
        logger.info(f"🗑️ Removed task: {task.name} ({task.id})")
        return task

    def start_task(self, task_id: int) -> Task:
        task = self._resolve_group().start_task(task_id, self.clock.now())
        logger.info(f"▶️ Started task: {task.name} ({task.id})")
        return task

    def stop_current(self) -> Task:
        group = self._resolve_group()
        was_running = self._is_running(group.running_task())

        task = group.stop_current(self.clock.now())
        if not was_running:
            logger.warning(f"⚠️ Task {task.id} was not running; no time tracked")
        logger.info(f"⏹️ Stopped task: {task.name} ({task.id})")
        return task

    def complete_task(self, task_id: Optional[int] = None) -> Task:
        group = self._resolve_group()
        target = group.task(task_id) if task_id is not None else group.running_task()
        was_running = self._is_running(target)

        task = group.complete_task(task_id, self.clock.now())
        if not was_running:
            logger.warning(f"⚠️ Task {task.id} was not running; no time tracked")
        logger.info(f"✅ Completed task: {task.name} ({task.id})")
        return task

    # ========================================
    # ARCHIVAL
    # ========================================

    def extract_groups(self, retain: bool, ids: Iterable[int]) -> List[Group]:
        """
        Remove groups from the snapshot and return them.

        With retain=False, `ids` are the groups to extract; with
        retain=True, `ids` are the groups to keep and all others are
        extracted. Fails without removing anything if the current group
        would be extracted.
        """
        ids = set(ids)
        current = self._resolve_group()

        def extracted(group: Group) -> bool:
            return (group.id in ids) != retain

        if extracted(current):
            raise CannotArchiveCurrentGroup(current.id)

        unknown = ids - {g.id for g in self._snapshot.groups}
        if unknown:
            logger.warning(f"⚠️ Unknown group ids: {sorted(unknown)}")

        taken = [g for g in self._snapshot.groups if extracted(g)]
        self._snapshot.groups = [g for g in self._snapshot.groups if not extracted(g)]

        if not taken:
            logger.warning("⚠️ No groups matched for extraction")
        logger.info(f"📦 Extracted {len(taken)} groups")
        return taken

    def minimize_ids(self) -> None:
        """Renumber group ids densely from 1, preserving order and selection"""
        counter = 1
        current = self._snapshot.current_group
        new_current = current

        for group in sorted(self._snapshot.groups, key=lambda g: g.id):
            new_id = min(group.id, counter)
            if current is not None and group.id == current:
                new_current = new_id
            group.id = new_id
            counter = new_id + 1

        self._snapshot.current_group = new_current
        self._snapshot.next_group_id = counter

    def archive_groups(self, ids: Iterable[int], retain: bool = False) -> List[Group]:
        """Extract groups, write them to the store's archive, then compact ids"""
        taken = self.extract_groups(retain, ids)
        self.store.archive(taken, self.clock.now())
        self.minimize_ids()
        return taken

    # ========================================
    # HELPER METHODS
    # ========================================

    @staticmethod
    def _is_running(task: Optional[Task]) -> bool:
        return task is not None and task.is_running

    def _new_group(self, name: str) -> Group:
        group = Group(id=self._snapshot.next_group_id, name=name)
        self._snapshot.next_group_id += 1
        self._snapshot.groups.append(group)
        return group

    def _group_by_id(self, group_id: int) -> Optional[Group]:
        for group in self._snapshot.groups:
            if group.id == group_id:
                return group
        return None

    def _group_by_name(self, name: str) -> Optional[Group]:
        for group in self._snapshot.groups:
            if group.name == name:
                return group
        return None

    def _resolve_group(self) -> Group:
        """Resolve without creating; init() guarantees today's group"""
        current = self._snapshot.current_group
        if current is not None:
            group = self._group_by_id(current)
            if group is None:
                raise GroupResolutionFailed(f"selected group {current}")
            return group

        name = self.clock.today_label()
        group = self._group_by_name(name)
        if group is None:
            raise GroupResolutionFailed(f"default group {name}")
        return group
