from __future__ import annotations

from datetime import date
from typing import Mapping

from ..common.datetime_utils import month_abbr, month_key
from ..common.numbers import percent
from ..core.constants import DEFAULT_TREND_MONTHS
from .model import MonthlyPoint


class TrendComputer:
    """Monthly attendance trend built from per-day weights.

    Each distinct date counts once toward its month, no matter how many
    subjects were taught that day.
    """

    def __init__(self, months: int = DEFAULT_TREND_MONTHS):
        self._months = int(months)

    def compute(self, day_summaries: Mapping[date, float]) -> list[MonthlyPoint]:
        buckets: dict[str, list[float]] = {}
        for day, weight in day_summaries.items():
            bucket = buckets.setdefault(month_key(day), [0.0, 0])
            bucket[0] += weight
            bucket[1] += 1

        # "YYYY-MM" keys sort chronologically
        latest = sorted(buckets)[-self._months:] if self._months > 0 else []
        return [
            MonthlyPoint(
                key=key,
                month=month_abbr(int(key[5:7])),
                percent=percent(buckets[key][0], buckets[key][1]),
            )
            for key in latest
        ]
