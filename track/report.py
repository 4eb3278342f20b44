"""
TRACK - Reporting
=================
Plain-text rendering of groups and tasks for the CLI.
"""

from typing import Callable, List, Sequence

from .clock import timestamp_to_local
from .schema import Group, Task, TaskStatus

STARTED_FORMAT = "%B %d %I:%M:%S %p %Y"

STATUS_LABELS = {
    TaskStatus.STOPPED: "STOPPED",
    TaskStatus.RUNNING: "RUNNING",
    TaskStatus.COMPLETE: "COMPLETE",
}


def duration_str(seconds: int) -> str:
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    return f"{sign}{seconds // 3600}h, {seconds // 60 % 60}m, {seconds % 60}s"


def task_row(task: Task, now: int) -> List[str]:
    started = timestamp_to_local(task.started_at)
    if task.started_at is None and task.tracked is None:
        tracked = "NONE"
    else:
        tracked = duration_str(task.tracked_total(now))

    return [
        str(task.id),
        task.name,
        STATUS_LABELS[task.status],
        started.strftime(STARTED_FORMAT) if started else "STOPPED",
        tracked,
    ]


def render_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = [len(h) for h in header]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [line(header), "-+-".join("-" * w for w in widths)]
    lines.extend(line(row) for row in rows)
    return "\n".join(lines)


def tasks_report(tasks: Sequence[Task], now: int) -> str:
    header = ["ID", "Task", "Status", "Started", "Time Tracked"]
    return render_table(header, [task_row(t, now) for t in tasks])


def group_report(group: Group, now: int) -> str:
    lines = [f"📋 {group.name}"]
    if group.tasks:
        lines.append(tasks_report(group.tasks, now))
    else:
        lines.append("  (no tasks)")
    return "\n".join(lines)


def groups_report(groups: Sequence[Group], is_current: Callable[[Group], bool]) -> str:
    """Groups table; `*` marks the group for which is_current is true"""
    rows = [
        [
            "*" if is_current(g) else "",
            str(g.id),
            g.name,
            str(len(g.tasks)),
        ]
        for g in groups
    ]
    return render_table(["", "ID", "Group", "Tasks"], rows)
