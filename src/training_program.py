import logging
from datetime import datetime

import config
from adherence import adaptive_factor
from log import make_log_entry, parse_history
from progression import project_details
from schedule import current_week_number, today_name


logger = logging.getLogger(__name__)


def materialize_exercise(exercise, week_number, settings, factor = 1.0):
    return config.MaterializedExercise(
        name = exercise.name,
        type = exercise.type,
        details = project_details(exercise.baseline_details, week_number, settings, factor),
    )


def materialize_day(day, week_number, settings, factor = 1.0):
    """Projects every exercise of a day template on its own. Rest days stay empty."""
    return config.MaterializedDay(
        day = day.day,
        focus = day.focus,
        exercises = tuple(materialize_exercise(exercise, week_number, settings, factor) for exercise in day.exercises),
    )


def materialize_week(base_week, week_number, settings, factor = 1.0):
    """
    The base week as it should be trained in week week_number.
    Deterministic: reads no clock and keeps no state.
    """
    return tuple(materialize_day(day, week_number, settings, factor) for day in base_week)



class TrainingProgram:
    """
    Read-only view of one plan snapshot and the history logged against it.
    Every query recomputes from the snapshot, so building a new TrainingProgram
    whenever the plan or the log changes is all that is needed to stay current.
    """

    def __init__(self, plan, history = (), adherence = None):
        self.plan = plan
        self.history = tuple(parse_history(history))
        if adherence is None:
            adherence = config.AdherencePolicy()
        self.adherence = adherence

    @property
    def settings(self):
        return self.plan.progression_settings

    def week_number(self, now = None):
        if now is None:
            now = datetime.now()
        return current_week_number(self.plan.created_at, now, self.plan.duration_weeks)

    def factor(self, week_number):
        if not self.settings.adaptive_enabled:
            return 1.0
        return adaptive_factor(self.history, week_number, self.adherence)

    def week_at(self, week_number):
        return materialize_week(self.plan.base_week, week_number, self.settings, self.factor(week_number))

    def week(self, now = None):
        return self.week_at(self.week_number(now))

    def today(self, now = None):
        if now is None:
            now = datetime.now()
        week_number = self.week_number(now)
        day = self.plan.day_template(today_name(now))
        logger.debug("Materializing %s of week %d for %s", day.day, week_number, self.plan.plan_name)
        return materialize_day(day, week_number, self.settings, self.factor(week_number))

    def log_entry(self, now = None):
        """Completion log entry for today's session."""
        if now is None:
            now = datetime.now()
        return make_log_entry(self.plan, self.today(now), self.week_number(now), completed_at = now)
