import logging
from datetime import datetime
from typing import Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from config import Config
from schedule import local_time, today_name
from utils import get_yaml


logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["plan_name", "week_number", "day", "focus", "exercises", "completed_at"]


class CompletionLogEntry(Config):
    # Name of the plan at the time of completion. Entries refer to plans by name only.
    plan_name: Optional[str] = None
    # Plan week the session belonged to.
    week_number: Optional[int] = None
    # Weekday label of the session.
    day: Optional[str] = None
    focus: Optional[str] = None
    exercises: Tuple[str, ...] = ()
    completed_at: Optional[datetime] = None


def parse_history(records):
    """
    Completion log entries from raw records (camelCase or snake_case dicts) or entries.
    Records that cannot be read are dropped with a warning.
    """
    history = []
    for i, record in enumerate(records or ()):
        if isinstance(record, CompletionLogEntry):
            history.append(record)
            continue
        try:
            history.append(CompletionLogEntry.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping unreadable history record %d: %s", i, e)
    return history


def load_history(filepath):
    return parse_history(get_yaml(filepath))


def history_frame(history):
    """
    Snapshot of the history as a DataFrame, one row per entry.
    Rows without a week number or completion time are dropped.
    """
    frame = pd.DataFrame(
        [entry.model_dump() for entry in parse_history(history)],
        columns = FRAME_COLUMNS,
    )
    return frame.dropna(subset = ["week_number", "completed_at"]).reset_index(drop = True)


def make_log_entry(plan, day, week_number, completed_at = None):
    """Entry recorded when the session of day is finished, or skipped through to the end."""
    if completed_at is None:
        completed_at = datetime.now()
    return CompletionLogEntry(
        plan_name = plan.plan_name,
        week_number = week_number,
        day = day.day,
        focus = day.focus,
        exercises = tuple(exercise.name for exercise in day.exercises),
        completed_at = completed_at,
    )


def completed_today(history, now = None):
    """Whether a session for today's weekday was logged on today's local date."""
    if now is None:
        now = datetime.now()
    now = local_time(now)
    today = today_name(now)
    return any(
        entry.completed_at is not None
        and local_time(entry.completed_at).date() == now.date()
        and entry.day == today
        for entry in parse_history(history)
    )
