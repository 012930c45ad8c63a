from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from .analytics.factory import FallbackHeatmapFactory
from .analytics.fallback import FallbackEstimator
from .analytics.service import AttendanceAnalyticsService
from .attendance.mysql_attendance_repository import MySQLAttendanceEventRepository
from .core.constants import DEFAULT_TIMEZONE, DEFAULT_TREND_MONTHS, DEFAULT_WINDOW_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    events_repo: MySQLAttendanceEventRepository
    students_repo: MySQLStudentRepository

    analytics_service: AttendanceAnalyticsService


def build_container(
    *,
    db_config: dict,
    timezone: str = DEFAULT_TIMEZONE,
    window_days: int = DEFAULT_WINDOW_DAYS,
    fallback_heatmap: str = "empty",
    fallback_seed: int | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    events_repo = MySQLAttendanceEventRepository(conn)
    students_repo = MySQLStudentRepository(conn)

    heatmap_strategy = FallbackHeatmapFactory(seed=fallback_seed).for_mode(fallback_heatmap)
    analytics_service = AttendanceAnalyticsService(
        events_repo,
        students_repo,
        tz=ZoneInfo(timezone),
        window_days=window_days,
        fallback=FallbackEstimator(heatmap_strategy, months=DEFAULT_TREND_MONTHS),
    )

    return Container(
        conn=conn,
        events_repo=events_repo,
        students_repo=students_repo,
        analytics_service=analytics_service,
    )
