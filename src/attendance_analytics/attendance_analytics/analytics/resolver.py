from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.constants import WEIGHT_ABSENT, WEIGHT_LATE, WEIGHT_PRESENT
from ..core.enums import AttendanceStatus
from .model import ClassOccurrence, DayOutcome, Tally


@dataclass(frozen=True)
class ResolvedDays:
    outcomes: tuple[DayOutcome, ...]
    # date -> best weight across that day's subjects
    day_summaries: dict[date, float]
    tally: Tally


class DayStatusResolver:
    """Reduce each class occurrence to one status: present > late > absent."""

    def resolve(self, group: ClassOccurrence) -> DayOutcome:
        if group.present > 0:
            status, weight = AttendanceStatus.PRESENT, WEIGHT_PRESENT
        elif group.late > 0:
            status, weight = AttendanceStatus.LATE, WEIGHT_LATE
        else:
            status, weight = AttendanceStatus.ABSENT, WEIGHT_ABSENT

        return DayOutcome(
            day=group.day,
            subject_code=group.subject_code,
            subject_name=group.subject_name,
            status=status,
            weight=weight,
        )

    def fold(self, groups: Iterable[ClassOccurrence]) -> ResolvedDays:
        outcomes: list[DayOutcome] = []
        day_summaries: dict[date, float] = {}
        counts = {s: 0 for s in AttendanceStatus}

        for group in groups:
            outcome = self.resolve(group)
            outcomes.append(outcome)
            counts[outcome.status] += 1
            day_summaries[outcome.day] = max(day_summaries.get(outcome.day, WEIGHT_ABSENT), outcome.weight)

        tally = Tally(
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            late=counts[AttendanceStatus.LATE],
        )
        return ResolvedDays(outcomes=tuple(outcomes), day_summaries=day_summaries, tally=tally)
