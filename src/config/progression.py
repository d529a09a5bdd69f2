import math
from numbers import Real
from typing import Any, Dict, Optional, Sequence, Tuple

from .config import Config
from .constants import (
    ADHERENCE_MIN_ENTRIES,
    ADHERENCE_TIERS,
    ADHERENCE_WINDOW_WEEKS,
    SESSIONS_PER_WEEK,
    Strategy,
)


class ProgressionSettings(Config):
    # Growth law applied per week. "linear" adds, "percentage" compounds.
    strategy: Strategy = "linear"
    # Per-week delta (linear) or per-week percentage (percentage) for sets, reps, weight and duration.
    # Missing, zero or non-numeric increments leave the field at its baseline.
    increments: Dict[str, Any] = {"sets": 0, "reps": 1, "weight": 2.5, "duration": 5}
    # Owner-tuned scale on the rate of progression (suggest: 0.5 - 2.0). Not clamped here.
    user_multiplier: float = 1.0
    # Whether recent adherence speeds up or slows down progression.
    adaptive_enabled: bool = True

    def increment_for(self, field: str) -> Optional[float]:
        value = self.increments.get(field)
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        if value == 0 or not math.isfinite(value):
            return None
        return float(value)


class AdherencePolicy(Config):
    # Number of trailing weeks inspected, the current week excluded.
    window_weeks: int = ADHERENCE_WINDOW_WEEKS
    # Minimum qualifying log entries before adherence has any effect.
    min_entries: int = ADHERENCE_MIN_ENTRIES
    # Nominal sessions per week used as the completion rate denominator.
    sessions_per_week: float = SESSIONS_PER_WEEK
    # (lower bound, factor) pairs. Highest matching lower bound wins, bounds are inclusive.
    tiers: Tuple[Tuple[float, float], ...] = ADHERENCE_TIERS

    def for_week(self, base_week: Sequence) -> "AdherencePolicy":
        """
        Policy whose denominator is the number of training (non-rest) days in base_week.
        Falls back to the current denominator for an all-rest week.
        """
        training_days = sum(1 for day in base_week if day.exercises)
        if training_days == 0:
            return self
        return self.model_copy(update = {"sessions_per_week": training_days})

    def factor_for(self, completion_rate: float) -> float:
        for lower_bound, factor in sorted(self.tiers, key = lambda tier: tier[0], reverse = True):
            if completion_rate >= lower_bound:
                return factor
        return 1.0
