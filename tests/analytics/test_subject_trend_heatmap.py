from __future__ import annotations

from datetime import date, timedelta

from src.attendance_analytics.attendance_analytics.analytics.heatmap import HeatmapBuilder
from src.attendance_analytics.attendance_analytics.analytics.model import DateWindow, DayOutcome
from src.attendance_analytics.attendance_analytics.analytics.subjects import SubjectAccumulator
from src.attendance_analytics.attendance_analytics.analytics.trend import TrendComputer
from src.attendance_analytics.attendance_analytics.core.enums import AttendanceStatus

WEIGHTS = {AttendanceStatus.PRESENT: 1.0, AttendanceStatus.LATE: 0.5, AttendanceStatus.ABSENT: 0.0}


def outcome(day: date, code: str, status: AttendanceStatus, name=None) -> DayOutcome:
    return DayOutcome(day=day, subject_code=code, subject_name=name, status=status, weight=WEIGHTS[status])


def test_subject_accumulator_weights_late_as_half():
    outcomes = [
        outcome(date(2026, 3, 1), "DB", AttendanceStatus.PRESENT, "Databases"),
        outcome(date(2026, 3, 2), "DB", AttendanceStatus.LATE, "Databases"),
        outcome(date(2026, 3, 3), "DB", AttendanceStatus.ABSENT, "Databases"),
        outcome(date(2026, 3, 1), "OS", AttendanceStatus.LATE),
    ]

    stats = SubjectAccumulator().accumulate(outcomes)

    assert [s.code for s in stats] == ["DB", "OS"]
    db, os_ = stats
    assert db.name == "Databases"
    assert db.present_weight == 1.5
    assert db.total_occurrences == 3
    assert db.percent == 50
    # no name recorded: the code is shown
    assert os_.name == "OS"
    assert os_.percent == 50


def test_subject_percent_rounds_half_up():
    outcomes = [
        outcome(date(2026, 3, d), "DB", AttendanceStatus.PRESENT) for d in range(1, 4)
    ] + [
        outcome(date(2026, 3, d), "DB", AttendanceStatus.ABSENT) for d in range(4, 9)
    ]
    # 3 / 8 = 37.5% -> 38
    stats = SubjectAccumulator().accumulate(outcomes)

    assert SubjectAccumulator.to_percentages(stats)[0].percent == 38


def test_trend_counts_each_date_once_and_splits_month_boundary():
    day_summaries = {
        date(2026, 1, 31): 1.0,
        date(2026, 2, 1): 0.5,
        date(2026, 2, 2): 0.0,
    }

    points = TrendComputer().compute(day_summaries)

    assert [(p.key, p.month, p.percent) for p in points] == [
        ("2026-01", "Jan", 100),
        ("2026-02", "Feb", 25),
    ]


def test_trend_keeps_three_most_recent_months_across_year_end():
    day_summaries = {
        date(2025, 10, 5): 1.0,
        date(2025, 11, 5): 0.0,
        date(2025, 12, 5): 0.5,
        date(2026, 1, 5): 1.0,
    }

    points = TrendComputer().compute(day_summaries)

    assert [p.month for p in points] == ["Nov", "Dec", "Jan"]
    assert [p.key for p in points] == sorted(p.key for p in points)


def test_trend_empty_input():
    assert TrendComputer().compute({}) == []


def test_heatmap_is_gap_filled_over_the_whole_window():
    window = DateWindow.trailing(date(2026, 3, 31), 90)
    cells = HeatmapBuilder().build(window, {date(2026, 3, 1): 1.0, date(2026, 3, 2): 0.5, date(2025, 1, 1): 1.0})

    assert len(cells) == 90
    assert cells[0].day == date(2026, 1, 1)
    assert cells[-1].day == date(2026, 3, 31)
    assert all(b.day - a.day == timedelta(days=1) for a, b in zip(cells, cells[1:]))

    values = {c.day: c.value for c in cells}
    assert values[date(2026, 3, 1)] == 1.0
    assert values[date(2026, 3, 2)] == 0.5
    assert values[date(2026, 3, 3)] == 0
    assert sum(c.value for c in cells) == 1.5
