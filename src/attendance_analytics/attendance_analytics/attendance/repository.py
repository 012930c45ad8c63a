from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    """Read side of the attendance event store.

    Note (DIP): the analytics service depends on this interface, not on a concrete DB.
    """

    def list_for_student(self, student_id: int, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        """Events with `start <= occurred_at <= end` (naive UTC), in no particular order.

        Raises EventStoreUnavailableError when the store cannot be queried.
        """
        raise NotImplementedError
