from __future__ import annotations

from datetime import date
from typing import Mapping

from ..core.constants import WEIGHT_ABSENT
from .model import DateWindow, HeatmapCell


class HeatmapBuilder:
    """One cell per calendar day of the window; days without records are 0."""

    def build(self, window: DateWindow, day_summaries: Mapping[date, float]) -> list[HeatmapCell]:
        return [HeatmapCell(day=day, value=day_summaries.get(day, WEIGHT_ABSENT)) for day in window]
