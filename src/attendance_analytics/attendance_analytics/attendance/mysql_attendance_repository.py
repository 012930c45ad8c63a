from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEvent
from .repository import AttendanceEventRepository


class MySQLAttendanceEventRepository(AttendanceEventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_student(self, student_id: int, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, student_id, occurred_at, subject_code, subject_name, status
                FROM attendance_events
                WHERE student_id=%s AND occurred_at BETWEEN %s AND %s
                ORDER BY occurred_at ASC, event_id ASC
                """,
                (int(student_id), start, end),
            )
            rows = fetchall(cur)
            return [
                AttendanceEvent(
                    student_id=int(r["student_id"]),
                    occurred_at=r.get("occurred_at"),
                    subject_code=r.get("subject_code"),
                    subject_name=r.get("subject_name"),
                    status=AttendanceStatus.from_raw(r.get("status")),
                )
                for r in rows
            ]
