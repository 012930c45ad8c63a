from __future__ import annotations

import random
from typing import Optional

from ...core.constants import WEIGHT_ABSENT, WEIGHT_PRESENT
from ..model import DateWindow, HeatmapCell
from .base import FallbackHeatmapStrategy


class SampledHeatmapStrategy(FallbackHeatmapStrategy):
    """Each day is present with probability overall_percentage / 100.

    Purely cosmetic: the cells are sampled, not measured. With a seed, every
    call builds its own generator from (seed, window end), so the same window
    always gives the same cells and nothing is shared between requests.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed

    def _rng_for(self, window: DateWindow) -> random.Random:
        if self._seed is None:
            return random.Random()
        return random.Random(int(self._seed) * 1_000_003 + window.end.toordinal())

    def build(self, window: DateWindow, *, overall_percentage: int) -> list[HeatmapCell]:
        rng = self._rng_for(window)
        cells = []
        for day in window:
            hit = rng.random() * 100 < overall_percentage
            cells.append(HeatmapCell(day=day, value=WEIGHT_PRESENT if hit else WEIGHT_ABSENT))
        return cells
