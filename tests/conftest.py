from datetime import datetime

import pytest

import config


def _exercise(name, type, **details):
    return config.ExerciseTemplate(name = name, type = type, baseline_details = details)


@pytest.fixture
def settings():
    return config.ProgressionSettings(
        strategy = "linear",
        increments = {"sets": 1, "reps": 2, "weight": 2.5, "duration": 5},
        user_multiplier = 1.0,
        adaptive_enabled = True,
    )


@pytest.fixture
def base_week():
    exercises = {
        "Monday": [
            _exercise("Squat", "repsSetsWeight", sets = 3, reps = "5", weight = "80kg", rest = 180),
            _exercise("Front Lever Tucks", "repsSetsWeight", sets = 3, reps = "10s", weight = "Bodyweight", rest = 90),
        ],
        "Wednesday": [
            _exercise("Max Hangs", "hangboard", sets = 5, duration = 10, rest = 180, description = "10s max hang"),
        ],
        "Friday": [
            _exercise("Deadlift", "repsSetsWeight", sets = 1, reps = 5, weight = "70% 1RM", rest = 240),
        ],
        "Saturday": [
            _exercise("Limit Bouldering", "timer", sets = 1, duration = 3600, rest = 0),
        ],
    }
    return tuple(
        config.DayTemplate(
            day = day,
            focus = "Training" if day in exercises else "Rest",
            exercises = tuple(exercises.get(day, ())),
        )
        for day in config.WEEKDAYS
    )


@pytest.fixture
def plan(base_week, settings):
    return config.Program(
        plan_name = "Project V10",
        sport = "climbing",
        duration_weeks = 12,
        created_at = datetime(2025, 1, 6, 8, 0), # a Monday
        base_week = base_week,
        progression_settings = settings,
    )
