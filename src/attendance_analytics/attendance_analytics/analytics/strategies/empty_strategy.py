from __future__ import annotations

from ...core.constants import WEIGHT_ABSENT
from ..model import DateWindow, HeatmapCell
from .base import FallbackHeatmapStrategy


class EmptyHeatmapStrategy(FallbackHeatmapStrategy):
    """Every day reported as "no record"."""

    def build(self, window: DateWindow, *, overall_percentage: int) -> list[HeatmapCell]:
        return [HeatmapCell(day=day, value=WEIGHT_ABSENT) for day in window]
