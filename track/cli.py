#!/usr/bin/env python3
"""
TRACK - CLI Interface
=====================
Command-line tool for tracking time on tasks grouped by day.

Usage:
    track new "write report"
    track start 1
    track stop
    track complete
    track tasks
    track groups
    track use 3
    track use --reset
    track tomorrow
    track archive 1 2
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .clock import SystemClock
from .config import get_settings
from .errors import TrackError
from .manager import Manager
from .report import tasks_report, group_report, groups_report
from .store import JsonStore


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--dir", help="Data directory (default: $TRACK_DIR)")

    parser = argparse.ArgumentParser(
        prog="track",
        description="TRACK - Personal time tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  track new "write report"     Add a task to the current group
  track start 1                Start task 1 (stops any running task)
  track stop                   Stop the running task
  track complete [ID]          Complete a task (default: running task)
  track tasks                  Show tasks in the current group
  track groups                 List all groups
  track use 3 | --reset        Select group 3, or go back to today
  track tomorrow               Create and select tomorrow's group
  track archive 1 2 [--retain] Archive groups (or keep only these)
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # NEW command
    new_parser = subparsers.add_parser("new", parents=[common], help="Add a task")
    new_parser.add_argument("name", help="Task name")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", parents=[common], help="Remove a task")
    remove_parser.add_argument("task_id", type=int, help="Task ID to remove")

    # TASKS command
    tasks_parser = subparsers.add_parser("tasks", parents=[common], help="Show current group")
    tasks_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # GROUPS command
    groups_parser = subparsers.add_parser("groups", parents=[common], help="List all groups")
    groups_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # USE command
    use_parser = subparsers.add_parser("use", parents=[common], help="Select the current group")
    use_group = use_parser.add_mutually_exclusive_group(required=True)
    use_group.add_argument("group_id", nargs="?", type=int, help="Group ID to select")
    use_group.add_argument("--reset", action="store_true", help="Use today's group")

    # START command
    start_parser = subparsers.add_parser("start", parents=[common], help="Start a task")
    start_parser.add_argument("task_id", type=int, help="Task ID to start")

    # STOP command
    subparsers.add_parser("stop", parents=[common], help="Stop the running task")

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", parents=[common], help="Complete a task")
    complete_parser.add_argument("task_id", nargs="?", type=int, help="Task ID (default: running task)")

    # TOMORROW command
    subparsers.add_parser("tomorrow", parents=[common], help="Create and select tomorrow's group")

    # ARCHIVE command
    archive_parser = subparsers.add_parser("archive", parents=[common], help="Archive groups")
    archive_parser.add_argument("group_ids", nargs="+", type=int, help="Group IDs")
    archive_parser.add_argument(
        "--retain", action="store_true",
        help="Keep the listed groups and archive all others"
    )

    return parser


def run(args: argparse.Namespace, manager: Manager) -> None:
    """Execute one command against an initialized manager"""
    now = manager.clock.now()

    if args.command == "new":
        task = manager.add_task(args.name)
        manager.commit()
        print("✅ Added:")
        print(tasks_report([task], now))

    elif args.command == "remove":
        task = manager.remove_task(args.task_id)
        manager.commit()
        print("🗑️ Removed:")
        print(tasks_report([task], now))

    elif args.command == "tasks":
        group = manager.group()
        if args.json:
            print(json.dumps(group.model_dump(mode="json"), indent=2))
        else:
            print(group_report(group, now))

    elif args.command == "groups":
        groups = manager.groups()
        if args.json:
            print(json.dumps(manager.snapshot().model_dump(mode="json"), indent=2))
        else:
            print(groups_report(groups, manager.is_current))

    elif args.command == "use":
        if args.reset:
            manager.reset_group()
            print("Resetting group...")
        else:
            manager.use_group(args.group_id)
        manager.commit()
        print(f"📌 Using group: {manager.group().name}")

    elif args.command == "start":
        task = manager.start_task(args.task_id)
        manager.commit()
        print("▶️ Starting:")
        print(tasks_report([task], now))

    elif args.command == "stop":
        task = manager.stop_current()
        manager.commit()
        print("⏹️ Stopping:")
        print(tasks_report([task], now))

    elif args.command == "complete":
        task = manager.complete_task(args.task_id)
        manager.commit()
        print("✅ Completed:")
        print(tasks_report([task], now))

    elif args.command == "tomorrow":
        group = manager.add_tomorrow_group()
        manager.commit()
        print(f"➕ Added group: {group.name}")
        print(f"📌 Using group: {group.name}")

    elif args.command == "archive":
        archived = manager.archive_groups(args.group_ids, retain=args.retain)
        manager.commit()
        print(f"📦 Archived {len(archived)} groups")
        for group in archived:
            print(f"  [{group.id}] {group.name} ({len(group.tasks)} tasks)")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    data_dir = args.dir or settings.data_dir

    try:
        manager = Manager.init(JsonStore(data_dir), SystemClock())
        run(args, manager)
    except TrackError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
