from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional

from ..common.datetime_utils import iter_days
from ..common.numbers import percent
from ..core.enums import AttendanceStatus, Provenance


@dataclass(frozen=True)
class DateWindow:
    """Inclusive range of calendar days in the reference timezone."""

    start: date
    end: date

    @classmethod
    def trailing(cls, end: date, days: int) -> "DateWindow":
        return cls(start=end - timedelta(days=days - 1), end=end)

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def __iter__(self) -> Iterator[date]:
        return iter_days(self.start, self.end)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end


@dataclass(frozen=True)
class ClassOccurrence:
    """All events of one subject on one day, with status counts."""

    day: date
    subject_code: str
    subject_name: Optional[str]
    present: int = 0
    absent: int = 0
    late: int = 0


@dataclass(frozen=True)
class DayOutcome:
    day: date
    subject_code: str
    subject_name: Optional[str]
    status: AttendanceStatus
    weight: float


@dataclass(frozen=True)
class Tally:
    """Class-occurrence counts, one increment per (day, subject)."""

    present: int = 0
    absent: int = 0
    late: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late

    @property
    def percent(self) -> int:
        return percent(self.present + self.late * 0.5, self.total)


@dataclass(frozen=True)
class SubjectStat:
    code: str
    name: str
    present_weight: float
    total_occurrences: int

    @property
    def percent(self) -> int:
        return percent(self.present_weight, self.total_occurrences)


@dataclass(frozen=True)
class MonthlyPoint:
    key: str
    month: str
    percent: int


@dataclass(frozen=True)
class SubjectPercent:
    name: str
    percent: int


@dataclass(frozen=True)
class HeatmapCell:
    day: date
    value: float


def _json_weight(value: float) -> float | int:
    # 1 and 0 go out as integers, 0.5 stays fractional.
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True)
class AttendanceSummary:
    """Immutable analytics result for one student and one window."""

    overall_percentage: int
    total_classes: int
    present: int
    absent: int
    late: int
    monthly: tuple[MonthlyPoint, ...]
    subjects: tuple[SubjectPercent, ...]
    heatmap: tuple[HeatmapCell, ...]
    provenance: Provenance = Provenance.MEASURED
    skipped_records: int = 0

    @property
    def is_estimated(self) -> bool:
        return self.provenance is Provenance.ESTIMATED

    def to_dict(self) -> dict:
        return {
            "overallPercentage": self.overall_percentage,
            "totalClasses": self.total_classes,
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "monthly": [{"month": m.month, "percent": m.percent} for m in self.monthly],
            "subjects": [{"name": s.name, "percent": s.percent} for s in self.subjects],
            "heatmap": [{"date": c.day.strftime("%Y-%m-%d"), "value": _json_weight(c.value)} for c in self.heatmap],
            "provenance": self.provenance.value,
            "skippedRecords": self.skipped_records,
        }
