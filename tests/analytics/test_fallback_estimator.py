from __future__ import annotations

from datetime import date

import pytest

from src.attendance_analytics.attendance_analytics.analytics.factory import FallbackHeatmapFactory
from src.attendance_analytics.attendance_analytics.analytics.fallback import FallbackEstimator
from src.attendance_analytics.attendance_analytics.analytics.model import DateWindow
from src.attendance_analytics.attendance_analytics.analytics.strategies.empty_strategy import EmptyHeatmapStrategy
from src.attendance_analytics.attendance_analytics.analytics.strategies.sampled_strategy import SampledHeatmapStrategy
from src.attendance_analytics.attendance_analytics.core.enums import Provenance
from src.attendance_analytics.attendance_analytics.core.exceptions import ValidationError
from src.attendance_analytics.attendance_analytics.students.model import StudentRecord, SubjectRef

WINDOW = DateWindow.trailing(date(2026, 3, 31), 90)


def student(total=0, attended=0, subjects=()) -> StudentRecord:
    return StudentRecord(student_id=7, name="S", total_classes=total, attended_classes=attended, subjects=tuple(subjects))


def test_no_history_and_zero_counters():
    s = student(subjects=[SubjectRef("MATH", "Mathematics"), SubjectRef("PHY", "Physics"), SubjectRef("MATH", "Maths again")])

    summary = FallbackEstimator().estimate(s, WINDOW)

    assert summary.overall_percentage == 0
    assert summary.total_classes == 0
    assert (summary.present, summary.absent, summary.late) == (0, 0, 0)
    assert [(x.name, x.percent) for x in summary.subjects] == [("Mathematics", 100), ("Physics", 100)]
    assert len(summary.heatmap) == 90
    assert all(c.value == 0 for c in summary.heatmap)
    assert summary.provenance == Provenance.ESTIMATED
    assert summary.is_estimated


def test_counters_drive_overall_absent_and_monthly():
    summary = FallbackEstimator().estimate(student(total=120, attended=102), WINDOW)

    assert summary.overall_percentage == 85
    assert summary.present == 102
    assert summary.absent == 18
    assert summary.late == 0
    assert [(m.month, m.percent) for m in summary.monthly] == [("Jan", 85), ("Feb", 85), ("Mar", 85)]


def test_monthly_labels_cross_year_end():
    window = DateWindow.trailing(date(2026, 1, 10), 90)

    summary = FallbackEstimator().estimate(student(total=10, attended=5), window)

    assert [m.key for m in summary.monthly] == ["2025-11", "2025-12", "2026-01"]


def test_overall_is_clamped_when_attended_exceeds_total():
    summary = FallbackEstimator().estimate(student(total=10, attended=12), WINDOW)

    assert summary.overall_percentage == 100
    assert summary.present == 10
    assert summary.absent == 0
    assert summary.present + summary.absent + summary.late == summary.total_classes


@pytest.mark.parametrize("overall_total,overall_attended,expected", [(10, 10, 1.0), (10, 0, 0.0)])
def test_sampled_heatmap_extremes(overall_total, overall_attended, expected):
    estimator = FallbackEstimator(SampledHeatmapStrategy(seed=42))

    summary = estimator.estimate(student(total=overall_total, attended=overall_attended), WINDOW)

    assert len(summary.heatmap) == 90
    assert {c.value for c in summary.heatmap} == {expected}


def test_sampled_heatmap_is_reproducible_with_seed():
    s = student(total=10, attended=5)

    first = FallbackEstimator(SampledHeatmapStrategy(seed=7)).estimate(s, WINDOW)
    second = FallbackEstimator(SampledHeatmapStrategy(seed=7)).estimate(s, WINDOW)

    assert first.heatmap == second.heatmap
    assert {c.value for c in first.heatmap} <= {0.0, 1.0}


def test_factory_selects_strategy_by_mode():
    factory = FallbackHeatmapFactory(seed=1)

    assert isinstance(factory.for_mode("empty"), EmptyHeatmapStrategy)
    assert isinstance(factory.for_mode(" Sampled "), SampledHeatmapStrategy)


def test_factory_rejects_unknown_mode():
    with pytest.raises(ValidationError):
        FallbackHeatmapFactory().for_mode("random-ish")


def test_seeded_strategy_repeats_on_every_call():
    strategy = SampledHeatmapStrategy(seed=11)
    estimator = FallbackEstimator(strategy)
    s = student(total=10, attended=5)

    first = estimator.estimate(s, WINDOW)
    second = estimator.estimate(s, WINDOW)

    assert first.heatmap == second.heatmap
    assert strategy.build(WINDOW, overall_percentage=50) == list(first.heatmap)
