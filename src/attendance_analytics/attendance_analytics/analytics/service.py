from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from ..attendance.repository import AttendanceEventRepository
from ..common.datetime_utils import day_bounds_utc, now_in
from ..core.constants import DEFAULT_TREND_MONTHS, DEFAULT_WINDOW_DAYS
from ..core.enums import Provenance
from ..core.exceptions import StudentNotFoundError, ValidationError
from ..students.repository import StudentRepository
from .fallback import FallbackEstimator
from .grouper import EventGrouper
from .heatmap import HeatmapBuilder
from .model import AttendanceSummary, DateWindow
from .resolver import DayStatusResolver
from .subjects import SubjectAccumulator
from .trend import TrendComputer

logger = logging.getLogger(__name__)


class AttendanceAnalyticsService:
    """Builds the attendance dashboard summary for one student.

    Events in the trailing window are grouped into class occurrences and
    reduced to overall, per-subject, monthly and daily figures. When the
    window has no usable events, the student's lifetime counters are used
    instead (see FallbackEstimator). Exactly one of the two paths runs.
    """

    def __init__(
        self,
        events: AttendanceEventRepository,
        students: StudentRepository,
        *,
        tz: tzinfo,
        window_days: int = DEFAULT_WINDOW_DAYS,
        trend_months: int = DEFAULT_TREND_MONTHS,
        fallback: FallbackEstimator | None = None,
        clock: Callable[[tzinfo], datetime] | None = None,
    ):
        if int(window_days) < 1:
            raise ValidationError("window_days must be at least 1")

        self._events = events
        self._students = students
        self._tz = tz
        self._window_days = int(window_days)
        self._clock = clock or now_in

        self._grouper = EventGrouper(tz)
        self._resolver = DayStatusResolver()
        self._subjects = SubjectAccumulator()
        self._trend = TrendComputer(trend_months)
        self._heatmap = HeatmapBuilder()
        self._fallback = fallback or FallbackEstimator(months=trend_months)

    def window_for(self, today: Optional[date] = None) -> DateWindow:
        today = today or self._clock(self._tz).date()
        return DateWindow.trailing(today, self._window_days)

    def get_summary(self, student_id: int, *, today: Optional[date] = None) -> AttendanceSummary:
        student = self._students.get_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)

        window = self.window_for(today)
        start, _ = day_bounds_utc(window.start, self._tz)
        _, end = day_bounds_utc(window.end, self._tz)
        events = self._events.list_for_student(student_id, start=start, end=end)

        grouping = self._grouper.group(events)
        if grouping.skipped:
            logger.warning("Skipped %d malformed attendance event(s) for student %s", grouping.skipped, student_id)

        groups = [g for g in grouping.groups if g.day in window]
        if not groups:
            logger.info("No attendance events for student %s in %s..%s; using lifetime counters", student_id, window.start, window.end)
            return self._fallback.estimate(student, window, skipped_records=grouping.skipped)

        summary = self._measure(groups, window, skipped=grouping.skipped)
        logger.info(
            "Attendance summary for student %s: %d classes, %d%% overall",
            student_id,
            summary.total_classes,
            summary.overall_percentage,
        )
        return summary

    def _measure(self, groups, window: DateWindow, *, skipped: int) -> AttendanceSummary:
        resolved = self._resolver.fold(groups)
        stats = self._subjects.accumulate(resolved.outcomes)
        tally = resolved.tally

        return AttendanceSummary(
            overall_percentage=tally.percent,
            total_classes=tally.total,
            present=tally.present,
            absent=tally.absent,
            late=tally.late,
            monthly=tuple(self._trend.compute(resolved.day_summaries)),
            subjects=tuple(SubjectAccumulator.to_percentages(stats)),
            heatmap=tuple(self._heatmap.build(window, resolved.day_summaries)),
            provenance=Provenance.MEASURED,
            skipped_records=skipped,
        )

