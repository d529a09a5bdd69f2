import logging
from datetime import datetime, timedelta

import config


logger = logging.getLogger(__name__)

DAY = timedelta(days = 1)


def local_time(timestamp):
    """Naive local time. Naive timestamps are taken to be local already."""
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone().replace(tzinfo = None)


def days_since_start(created_at, now):
    if (created_at.tzinfo is None) != (now.tzinfo is None):
        # Naive timestamps are local time.
        created_at, now = local_time(created_at), local_time(now)
    # Clock skew can put now before created_at, elapsed time is taken as absolute.
    return abs(now - created_at) // DAY


def current_week_number(created_at, now, duration_weeks):
    """
    Week of the plan that now falls in, 1 to duration_weeks.
    Past the last week the schedule starts over at week 1.
    """
    elapsed_weeks = days_since_start(created_at, now) // 7
    week_number = elapsed_weeks % duration_weeks + 1
    logger.debug("%d full weeks since %s, plan week %d of %d", elapsed_weeks, created_at, week_number, duration_weeks)
    return week_number


def today_name(now = None):
    """English weekday label of now's local calendar day, whatever the locale."""
    if now is None:
        now = datetime.now()
    return config.WEEKDAYS[now.weekday()]
