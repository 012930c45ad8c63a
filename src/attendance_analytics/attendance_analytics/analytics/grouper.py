from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Iterable, Optional

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import as_utc, local_date
from ..core.constants import GENERAL_SUBJECT_CODE
from ..core.enums import AttendanceStatus
from .model import ClassOccurrence


@dataclass(frozen=True)
class GroupingResult:
    groups: tuple[ClassOccurrence, ...]
    skipped: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.groups


@dataclass
class _Counts:
    subject_name: Optional[str]
    # (unnamed, when, name) of the event the display name came from
    name_key: tuple = ()
    counts: dict[AttendanceStatus, int] = field(default_factory=dict)


class EventGrouper:
    """Group raw events into class occurrences keyed by (local day, subject code).

    Output is sorted by (day, code) and does not depend on input order.
    """

    def __init__(self, tz: tzinfo):
        self._tz = tz

    def group(self, events: Iterable[AttendanceEvent]) -> GroupingResult:
        buckets: dict[tuple[date, str], _Counts] = {}
        skipped = 0

        for event in events:
            if event.status is None or event.occurred_at is None:
                skipped += 1
                continue

            day = local_date(event.occurred_at, self._tz)
            code = (event.subject_code or "").strip() or GENERAL_SUBJECT_CODE
            bucket = buckets.setdefault((day, code), _Counts(subject_name=None))
            # earliest named event wins, whatever order the store returned
            name_key = (event.subject_name is None, as_utc(event.occurred_at), event.subject_name or "")
            if not bucket.name_key or name_key < bucket.name_key:
                bucket.subject_name = event.subject_name
                bucket.name_key = name_key
            bucket.counts[event.status] = bucket.counts.get(event.status, 0) + 1

        groups = tuple(
            ClassOccurrence(
                day=day,
                subject_code=code,
                subject_name=b.subject_name,
                present=b.counts.get(AttendanceStatus.PRESENT, 0),
                absent=b.counts.get(AttendanceStatus.ABSENT, 0),
                late=b.counts.get(AttendanceStatus.LATE, 0),
            )
            for (day, code), b in sorted(buckets.items(), key=lambda item: item[0])
        )
        return GroupingResult(groups=groups, skipped=skipped)
