"""
TRACK - Clock
=============
Wall-clock access. The date label format is persisted data: the default
group is found by exact name match, so changing DATE_FORMAT orphans the
default group of existing snapshots.
"""

from datetime import datetime, timedelta
from typing import Optional

DATE_FORMAT = "%m-%d-%Y"


class SystemClock:
    """Local-time clock used by the CLI"""

    def now(self) -> int:
        return int(datetime.now().timestamp())

    def today_label(self) -> str:
        return datetime.now().strftime(DATE_FORMAT)

    def tomorrow_label(self) -> str:
        return (datetime.now() + timedelta(days=1)).strftime(DATE_FORMAT)


def timestamp_to_local(stamp: Optional[int]) -> Optional[datetime]:
    if stamp is None:
        return None
    return datetime.fromtimestamp(stamp)
