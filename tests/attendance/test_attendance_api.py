from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.attendance_analytics.attendance_analytics.analytics.model import (
    AttendanceSummary,
    HeatmapCell,
    MonthlyPoint,
    SubjectPercent,
)
from src.attendance_analytics.attendance_analytics.attendance.controller import register
from src.attendance_analytics.attendance_analytics.core.enums import Provenance
from src.attendance_analytics.attendance_analytics.core.exceptions import (
    EventStoreUnavailableError,
    StudentNotFoundError,
)


def _summary() -> AttendanceSummary:
    return AttendanceSummary(
        overall_percentage=75,
        total_classes=2,
        present=1,
        absent=0,
        late=1,
        monthly=(MonthlyPoint(key="2026-03", month="Mar", percent=75),),
        subjects=(SubjectPercent(name="DB", percent=75),),
        heatmap=(HeatmapCell(day=date(2026, 3, 30), value=0.5), HeatmapCell(day=date(2026, 3, 31), value=1.0)),
        provenance=Provenance.MEASURED,
    )


class FakeAnalytics:
    def __init__(self, result=None, error: Exception | None = None):
        self._result = result
        self._error = error
        self.requested = []

    def get_summary(self, student_id: int):
        self.requested.append(student_id)
        if self._error:
            raise self._error
        return self._result


def _client(service: FakeAnalytics):
    app = Flask(__name__)
    register(app, SimpleNamespace(analytics_service=service))
    return app.test_client()


def test_returns_summary_json():
    service = FakeAnalytics(result=_summary())

    resp = _client(service).get("/api/students/12/attendance")
    body = resp.get_json()

    assert resp.status_code == 200
    assert service.requested == [12]
    assert body["success"] is True
    assert body["overallPercentage"] == 75
    assert body["monthly"] == [{"month": "Mar", "percent": 75}]
    assert body["subjects"] == [{"name": "DB", "percent": 75}]
    assert body["heatmap"] == [{"date": "2026-03-30", "value": 0.5}, {"date": "2026-03-31", "value": 1}]
    assert body["provenance"] == "measured"


def test_unknown_student_is_404():
    resp = _client(FakeAnalytics(error=StudentNotFoundError(5))).get("/api/students/5/attendance")

    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Student not found"}


@pytest.mark.parametrize(
    "error,status",
    [(EventStoreUnavailableError("down"), 503), (RuntimeError("boom"), 500)],
)
def test_failures_never_return_partial_data(error, status):
    resp = _client(FakeAnalytics(error=error)).get("/api/students/5/attendance")
    body = resp.get_json()

    assert resp.status_code == status
    assert body["success"] is False
    assert "overallPercentage" not in body


def test_health():
    resp = _client(FakeAnalytics()).get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}
