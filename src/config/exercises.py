from typing import Any, Dict, Tuple

from pydantic import field_validator

from .config import Config
from .constants import WEEKDAYS, ExerciseType


class ExerciseTemplate(Config):
    # Exercise name, shown as-is.
    name: str
    # How the exercise is performed: "repsSetsWeight", "timer" or "hangboard".
    type: ExerciseType = "repsSetsWeight"
    # Week 1 values. sets, reps, weight and duration progress, everything else is carried through.
    # e.g. {"sets": 3, "reps": "10s", "weight": "80kg", "rest": 120}
    baseline_details: Dict[str, Any] = {}


class DayTemplate(Config):
    # Canonical weekday label, Monday to Sunday.
    day: str
    # Theme of the session, e.g. "Strength (Legs/Push)".
    focus: str = ""
    # Ordered exercises. Empty for a rest day.
    exercises: Tuple[ExerciseTemplate, ...] = ()

    @field_validator("day")
    @classmethod
    def canonical_day(cls, day):
        label = day.strip().capitalize()
        if label not in WEEKDAYS:
            raise ValueError(f"Unknown weekday {day!r}, expected one of {', '.join(WEEKDAYS)}.")
        return label

    @property
    def is_rest_day(self) -> bool:
        return not self.exercises


class MaterializedExercise(Config):
    name: str
    type: ExerciseType
    details: Dict[str, Any]


class MaterializedDay(Config):
    day: str
    focus: str
    exercises: Tuple[MaterializedExercise, ...] = ()

    @property
    def is_rest_day(self) -> bool:
        return not self.exercises
