import re
import logging
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

import config
from utils import get_yaml


logger = logging.getLogger(__name__)

CODE_FENCE = re.compile(r"```(?:json)?\s*")
# Double quoted strings are matched first so a "//" inside a value is never taken for a comment.
COMMENT_OR_STRING = re.compile(r'"(?:\\.|[^"\\])*"|[ \t]*//[^\n]*|/\*.*?\*/', re.DOTALL)

REQUIRED_DETAILS = {
    "repsSetsWeight": ("reps",),
    "timer": ("duration",),
    "hangboard": ("duration",),
}


class PlanValidationError(ValueError):
    pass


def _keep_strings(match):
    token = match.group()
    return token if token.startswith('"') else ""


def clean_plan_text(text):
    """Removes markdown code fences and // or /* */ comments around a JSON plan."""
    text = CODE_FENCE.sub("", text)
    text = COMMENT_OR_STRING.sub(_keep_strings, text)
    return text.strip()


def _get(record, camel, snake, default = None):
    if camel in record:
        return record[camel]
    return record.get(snake, default)


def _base_week_days(record):
    base_week = _get(record, "baseWeek", "base_week")
    if base_week is None:
        weeks = record.get("weeks")
        if not weeks:
            raise PlanValidationError("Plan has neither a baseWeek nor any weeks.")
        # Older plans stored every week. Week 1 becomes the template.
        base_week = next((week for week in weeks if _get(week, "weekNumber", "week_number") == 1), weeks[0])
        logger.warning("Plan stores %d explicit weeks, using week %s as the base week", len(weeks), _get(base_week, "weekNumber", "week_number", 1))
    if isinstance(base_week, dict):
        base_week = base_week.get("days", [])
    return list(base_week)


def _normalise_exercise(exercise):
    exercise = dict(exercise)
    if "details" in exercise and "baselineDetails" not in exercise and "baseline_details" not in exercise:
        exercise["baselineDetails"] = exercise.pop("details")
    details = _get(exercise, "baselineDetails", "baseline_details", {}) or {}
    for field in REQUIRED_DETAILS.get(exercise.get("type", "repsSetsWeight"), ()):
        if field not in details:
            logger.warning("%s exercise %r has no %s", exercise.get("type"), exercise.get("name"), field)
    return exercise


def _normalise_days(days):
    by_name = {}
    for day in days:
        day = dict(day)
        label = str(day.get("day", "")).strip().capitalize()
        if label in by_name:
            raise PlanValidationError(f"Weekday {label} appears more than once in the base week.")
        day["exercises"] = [_normalise_exercise(exercise) for exercise in day.get("exercises") or []]
        by_name[label] = day

    unknown = [label for label in by_name if label not in config.WEEKDAYS]
    if unknown:
        raise PlanValidationError(f"Unknown weekday(s) {', '.join(map(repr, unknown))} in the base week.")

    week = []
    for label in config.WEEKDAYS:
        if label not in by_name:
            logger.warning("No entry for %s in the base week, treating it as a rest day", label)
            by_name[label] = {"day": label, "focus": config.REST_FOCUS, "exercises": []}
        week.append(by_name[label])
    return week


def normalise_plan(record):
    """
    Plan record in canonical form: a seven day baseWeek in weekday order, exercises
    carrying baselineDetails, and createdAt set.
    """
    if not isinstance(record, dict):
        raise PlanValidationError(f"Expected a plan record, got {type(record).__name__}.")
    record = dict(record)
    days = _base_week_days(record)
    if _get(record, "durationWeeks", "duration_weeks") is None and record.get("weeks"):
        record["durationWeeks"] = len(record["weeks"])
    record.pop("weeks", None)
    record.pop("base_week", None)
    record["baseWeek"] = _normalise_days(days)

    if _get(record, "createdAt", "created_at") is None:
        logger.warning("Plan %r has no createdAt, starting it now", _get(record, "planName", "plan_name"))
        record["createdAt"] = datetime.now()
    return record


def parse_plan(source):
    """
    Loads a plan from a record or from a YAML or JSON file.
    Raises PlanValidationError when the plan cannot be used.
    """
    if isinstance(source, (str, Path)):
        text = Path(source).read_text()
        try:
            source = yaml.safe_load(clean_plan_text(text))
        except yaml.YAMLError as e:
            raise PlanValidationError(f"Could not parse plan file {source}: {e}") from e

    record = normalise_plan(source)
    try:
        return config.Program.model_validate(record)
    except ValidationError as e:
        raise PlanValidationError(f"Invalid plan:\n{e}") from e


def parse_adherence_config(config_path):
    cfg = config.AdherencePolicy
    config_dict = get_yaml(config_path) or {}
    return cfg(**config_dict)
