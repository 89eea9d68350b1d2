from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ScoringRules:
    points_per_row: int = 10
    score_per_level: int = 100
    base_period_ms: float = 1000.0
    # Gravity is unclamped unless a floor is configured
    min_period_ms: Optional[float] = None

    def score_for_rows(self, rows: int) -> int:
        if rows <= 0:
            return 0
        return rows * self.points_per_row

    def level_for_score(self, score: int) -> int:
        return max(0, score) // self.score_per_level + 1

    def tick_period_ms(self, level: int) -> float:
        period = self.base_period_ms / max(1, level)
        if self.min_period_ms is not None:
            period = max(period, self.min_period_ms)
        return period
