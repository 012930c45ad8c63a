from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one recorded class check for a student.

    `status` is None when the stored value was missing or unknown; such events
    are counted as malformed and left out of aggregation.
    """

    student_id: int
    occurred_at: Optional[datetime]
    subject_code: Optional[str]
    subject_name: Optional[str]
    status: Optional[AttendanceStatus]
