"""Tests for value and detail projection."""

import math

import pytest

import config
from progression import project, project_details


class TestProject:

    @pytest.mark.parametrize("strategy", ["linear", "percentage"])
    @pytest.mark.parametrize("increment,multiplier,factor", [
        (2.5, 1.0, 1.0),
        (10, 2.0, 1.1),
        (-5, 0.5, 0.9),
        (0, 1.7, 0.95),
    ])
    def test_week_one_is_baseline(self, strategy, increment, multiplier, factor):
        assert project(80, 1, increment, multiplier, strategy, factor) == 80

    @pytest.mark.parametrize("week", range(1, 11))
    def test_linear_is_additive(self, week):
        assert project(10, week, 2, 1.0, "linear", 1.0) == 10 + 2 * (week - 1)

    def test_percentage_compounds(self):
        assert project(100, 3, 5, 1.0, "percentage", 1.0) == pytest.approx(100 * 1.05 ** 2)

    def test_multiplier_and_factor_scale_linear_growth(self):
        assert project(10, 3, 2, 1.5, "linear", 1.1) == pytest.approx(10 + 2 * 2 * 1.5 * 1.1)

    def test_multiplier_and_factor_scale_percentage_exponent(self):
        assert project(100, 3, 10, 0.5, "percentage", 1.0) == pytest.approx(110.0)

    def test_negative_growth_base_does_not_raise(self):
        assert math.isnan(project(10, 2, -300, 0.5, "percentage", 1.0))

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            project(10, 2, 1, 1.0, "exponential", 1.0)


class TestProjectDetails:

    def test_unit_suffix_is_kept(self, settings):
        assert project_details({"reps": "10s"}, 2, settings)["reps"] == "12s"
        assert project_details({"reps": "10s"}, 3, settings)["reps"] == "14s"

    def test_descriptive_suffix_is_kept(self, settings):
        assert project_details({"reps": "3 (each arm)"}, 2, settings)["reps"] == "5 (each arm)"

    def test_integer_reps_stay_integers(self, settings):
        assert project_details({"reps": 8}, 3, settings)["reps"] == 12

    @pytest.mark.parametrize("reps", ["8-12", "AMRAP", "", None])
    def test_unparseable_reps_pass_through(self, settings, reps):
        assert project_details({"reps": reps}, 5, settings)["reps"] == reps

    def test_embedded_weight(self, settings):
        assert project_details({"weight": "80kg"}, 3, settings)["weight"] == "85.0kg"

    def test_weight_keeps_surrounding_text(self, settings):
        assert project_details({"weight": "70% 1RM"}, 2, settings)["weight"] == "72.5% 1RM"

    def test_signed_weight(self, settings):
        assert project_details({"weight": "+10kg"}, 3, settings)["weight"] == "15.0kg"

    def test_bodyweight_passes_through(self, settings):
        for week in (1, 2, 7, 52):
            assert project_details({"weight": "Bodyweight"}, week, settings)["weight"] == "Bodyweight"

    def test_numeric_weight(self, settings):
        assert project_details({"weight": 20}, 2, settings)["weight"] == 22.5

    def test_percentage_weight_formats_one_decimal(self):
        settings = config.ProgressionSettings(strategy = "percentage", increments = {"weight": 10})
        assert project_details({"weight": "100kg"}, 3, settings)["weight"] == "121.0kg"

    def test_sets_and_duration(self, settings):
        details = project_details({"sets": 3, "duration": 600}, 3, settings)
        assert details == {"sets": 5, "duration": 610}

    def test_string_sets_pass_through(self, settings):
        assert project_details({"sets": "3"}, 3, settings)["sets"] == "3"

    def test_rounds_half_up(self):
        settings = config.ProgressionSettings(increments = {"reps": 1}, user_multiplier = 0.5)
        assert project_details({"reps": 10}, 2, settings)["reps"] == 11

    def test_non_progressing_fields_untouched(self, settings):
        baseline = {"rest": 180, "description": "slow eccentric", "tempo": "3-1-1"}
        assert project_details(baseline, 6, settings) == baseline

    def test_missing_or_malformed_increments_suppress_progression(self):
        settings = config.ProgressionSettings(increments = {"reps": 0, "weight": "lots", "sets": None})
        baseline = {"sets": 3, "reps": "10s", "weight": "80kg", "duration": 60}
        assert project_details(baseline, 4, settings) == baseline

    def test_baseline_is_not_modified(self, settings):
        baseline = {"sets": 3, "reps": "10s", "weight": "80kg"}
        project_details(baseline, 4, settings, 1.1)
        assert baseline == {"sets": 3, "reps": "10s", "weight": "80kg"}

    def test_adaptive_factor_applies(self, settings):
        assert project_details({"duration": 100}, 3, settings, 1.1)["duration"] == 111

    def test_non_finite_projection_keeps_baseline(self):
        settings = config.ProgressionSettings(strategy = "percentage", increments = {"duration": -300}, user_multiplier = 0.5)
        assert project_details({"duration": 60}, 2, settings)["duration"] == 60


def test_every_progressable_field_has_a_rule():
    from progression import FIELD_RULES
    assert set(FIELD_RULES) == set(config.PROGRESSABLE_FIELDS)


@pytest.mark.parametrize("type", config.EXERCISE_TYPES)
def test_exercise_types_are_accepted(type):
    assert config.ExerciseTemplate(name = "Plank", type = type).type == type
