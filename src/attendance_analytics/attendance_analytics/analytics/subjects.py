from __future__ import annotations

from typing import Iterable

from .model import DayOutcome, SubjectPercent, SubjectStat


class SubjectAccumulator:
    """Per-subject weighted attendance, in first-seen subject order."""

    def accumulate(self, outcomes: Iterable[DayOutcome]) -> list[SubjectStat]:
        stats: dict[str, SubjectStat] = {}

        for o in outcomes:
            current = stats.get(o.subject_code)
            if current is None:
                current = SubjectStat(code=o.subject_code, name=o.subject_name or o.subject_code, present_weight=0.0, total_occurrences=0)
            stats[o.subject_code] = SubjectStat(
                code=current.code,
                name=current.name,
                present_weight=current.present_weight + o.weight,
                total_occurrences=current.total_occurrences + 1,
            )

        return [s for s in stats.values() if s.total_occurrences > 0]

    @staticmethod
    def to_percentages(stats: Iterable[SubjectStat]) -> list[SubjectPercent]:
        return [SubjectPercent(name=s.name, percent=s.percent) for s in stats]
