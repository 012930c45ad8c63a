from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import month_abbr, month_key, shift_month
from ..common.numbers import percent
from ..core.constants import DEFAULT_TREND_MONTHS
from ..core.enums import Provenance
from ..students.model import StudentRecord
from .model import AttendanceSummary, DateWindow, MonthlyPoint, SubjectPercent
from .strategies.base import FallbackHeatmapStrategy
from .strategies.empty_strategy import EmptyHeatmapStrategy


class FallbackEstimator:
    """Estimate a summary from a student's lifetime counters.

    Used only when the window holds no class occurrences at all. Nothing here
    is measured per day, so the result is tagged `Provenance.ESTIMATED`:
    late is always 0, every known subject reads 100%, and each trend month
    repeats the overall ratio.
    """

    def __init__(self, heatmap: Optional[FallbackHeatmapStrategy] = None, *, months: int = DEFAULT_TREND_MONTHS):
        self._heatmap = heatmap or EmptyHeatmapStrategy()
        self._months = int(months)

    def estimate(self, student: StudentRecord, window: DateWindow, *, skipped_records: int = 0) -> AttendanceSummary:
        total = max(0, int(student.total_classes or 0))
        attended = max(0, int(student.attended_classes or 0))
        overall = min(100, percent(attended, total))

        return AttendanceSummary(
            overall_percentage=overall,
            total_classes=total,
            present=min(attended, total),
            absent=max(0, total - attended),
            late=0,
            monthly=tuple(self._monthly(window.end, overall)),
            subjects=tuple(self._subjects(student)),
            heatmap=tuple(self._heatmap.build(window, overall_percentage=overall)),
            provenance=Provenance.ESTIMATED,
            skipped_records=skipped_records,
        )

    def _monthly(self, today: date, overall: int) -> list[MonthlyPoint]:
        points = []
        for offset in range(self._months - 1, -1, -1):
            first = shift_month(today, -offset)
            points.append(MonthlyPoint(key=month_key(first), month=month_abbr(first.month), percent=overall))
        return points

    @staticmethod
    def _subjects(student: StudentRecord) -> list[SubjectPercent]:
        seen: dict[str, SubjectPercent] = {}
        for subj in student.subjects:
            if subj.code not in seen:
                seen[subj.code] = SubjectPercent(name=subj.name or subj.code, percent=100)
        return list(seen.values())
