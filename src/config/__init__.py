from .constants import *
from .config import Config
from .exercises import DayTemplate, ExerciseTemplate, MaterializedDay, MaterializedExercise
from .progression import AdherencePolicy, ProgressionSettings
from .program import Program
