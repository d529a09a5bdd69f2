import os
from pathlib import Path
from typing import Literal

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
REST_FOCUS: str = "Rest"

PROGRESSABLE_FIELDS = ("sets", "reps", "weight", "duration")
EXERCISE_TYPES = ("repsSetsWeight", "timer", "hangboard")
ExerciseType = Literal[EXERCISE_TYPES]
Strategy = Literal["linear", "percentage"]

USER_MULTIPLIER_RANGE = (0.5, 2.0) # for editing surfaces, the engine never clamps

ADHERENCE_WINDOW_WEEKS: int = 3 # trailing weeks, current week excluded
ADHERENCE_MIN_ENTRIES: int = 3 # below this, no signal
SESSIONS_PER_WEEK: int = 4 # nominal adherence denominator
# (lower bound, factor), evaluated high to low
ADHERENCE_TIERS = ((0.9, 1.1), (0.7, 1.0), (0.5, 0.95), (0.0, 0.9))

WEIGHT_DECIMALS: int = 1

PROJECT_ROOT = Path(os.path.abspath(__file__)).parents[2]
DATA_DIR = PROJECT_ROOT / "data"
CONFIG_ROOT = PROJECT_ROOT / "config"
