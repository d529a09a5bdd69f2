from datetime import datetime
from typing import Tuple

from pydantic import Field, field_validator

from .config import Config
from .constants import WEEKDAYS
from .exercises import DayTemplate
from .progression import ProgressionSettings


class Program(Config):
    # Display name, also recorded on every completion log entry.
    plan_name: str
    # Target sport or domain tag, e.g. "climbing".
    sport: str = ""
    # Length of one cycle in weeks. The schedule wraps back to week 1 afterwards.
    duration_weeks: int = Field(ge = 1)
    # Origin of week 1.
    created_at: datetime
    # The stored week 1 template, one day per weekday in canonical order.
    base_week: Tuple[DayTemplate, ...]
    # How the template grows week by week.
    progression_settings: ProgressionSettings = ProgressionSettings()

    @field_validator("base_week")
    @classmethod
    def full_week(cls, base_week):
        days = tuple(day.day for day in base_week)
        if days != WEEKDAYS:
            raise ValueError(f"baseWeek must hold exactly one entry per weekday in order {', '.join(WEEKDAYS)}, got {', '.join(days)}.")
        return base_week

    def day_template(self, day_name: str) -> DayTemplate:
        return self.base_week[WEEKDAYS.index(day_name)]
