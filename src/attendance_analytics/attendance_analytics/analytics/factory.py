from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import FallbackHeatmapMode
from ..core.exceptions import ValidationError
from .strategies.base import FallbackHeatmapStrategy
from .strategies.empty_strategy import EmptyHeatmapStrategy
from .strategies.sampled_strategy import SampledHeatmapStrategy


@dataclass
class FallbackHeatmapFactory:
    """Factory Pattern: pick the fallback heatmap strategy from configuration."""

    seed: Optional[int] = None

    def for_mode(self, mode: str | FallbackHeatmapMode) -> FallbackHeatmapStrategy:
        try:
            mode = FallbackHeatmapMode(str(getattr(mode, "value", mode)).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown fallback heatmap mode: {mode!r}") from None

        if mode is FallbackHeatmapMode.SAMPLED:
            return SampledHeatmapStrategy(self.seed)
        return EmptyHeatmapStrategy()
