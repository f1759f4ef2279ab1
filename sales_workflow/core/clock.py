"""Clock implementations. All timestamps are timezone-aware UTC."""
from datetime import datetime, timezone

from sales_workflow.core.interfaces import IClock


class SystemClock(IClock):
    """Real wall-clock time"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(IClock):
    """Clock frozen at a given moment (naive moments are treated as UTC)"""

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment


system_clock = SystemClock()
