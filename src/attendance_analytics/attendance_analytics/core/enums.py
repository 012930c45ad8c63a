from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Status recorded for one attendance event."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def from_raw(cls, value: object) -> Optional["AttendanceStatus"]:
        """Map a stored value to a status, or None when it is missing/unknown."""
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Provenance(str, Enum):
    """Where a summary's numbers came from."""

    MEASURED = "measured"
    ESTIMATED = "estimated"


class FallbackHeatmapMode(str, Enum):
    EMPTY = "empty"
    SAMPLED = "sampled"
