from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubjectRef:
    code: str
    name: str


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: the coarse, lifetime view of a student used as fallback data."""

    student_id: int
    name: str
    total_classes: int = 0
    attended_classes: int = 0
    subjects: tuple[SubjectRef, ...] = field(default_factory=tuple)
