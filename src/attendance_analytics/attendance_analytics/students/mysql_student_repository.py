from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StudentRecord, SubjectRef
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[StudentRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, total_classes, attended_classes
                FROM students
                WHERE student_id=%s
                """,
                (int(student_id),),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute(
                """
                SELECT subject_code, subject_name
                FROM student_subjects
                WHERE student_id=%s
                ORDER BY id ASC
                """,
                (int(student_id),),
            )
            subjects = tuple(
                SubjectRef(code=s["subject_code"], name=s.get("subject_name") or s["subject_code"])
                for s in fetchall(cur)
            )

            return StudentRecord(
                student_id=int(row["student_id"]),
                name=row["name"],
                total_classes=int(row.get("total_classes") or 0),
                attended_classes=int(row.get("attended_classes") or 0),
                subjects=subjects,
            )
