from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import DateWindow, HeatmapCell


class FallbackHeatmapStrategy(ABC):
    """Strategy Pattern: how to draw a heatmap when no per-day records exist."""

    @abstractmethod
    def build(self, window: DateWindow, *, overall_percentage: int) -> list[HeatmapCell]:
        raise NotImplementedError
