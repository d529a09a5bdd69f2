import logging

from config import AdherencePolicy
from log import history_frame


logger = logging.getLogger(__name__)


def adherence_window(history, current_week, policy = None):
    """History rows whose week lies in the trailing window, the current week excluded."""
    if policy is None:
        policy = AdherencePolicy()
    frame = history_frame(history)
    weeks = frame["week_number"]
    return frame[(weeks >= current_week - policy.window_weeks) & (weeks < current_week)]


def completion_rate(n_sessions, current_week, policy = None):
    if policy is None:
        policy = AdherencePolicy()
    weeks_covered = min(policy.window_weeks, current_week - 1)
    if weeks_covered <= 0 or policy.sessions_per_week <= 0:
        return None
    return n_sessions / (weeks_covered * policy.sessions_per_week)


def adaptive_factor(history, current_week, policy = None):
    """
    Scales progression by how consistently sessions were completed lately.
    With the default policy: rate >= 0.9 -> 1.1, >= 0.7 -> 1.0, >= 0.5 -> 0.95, otherwise 0.9.
    Too little history gives 1.0.
    """
    if policy is None:
        policy = AdherencePolicy()
    n_sessions = len(adherence_window(history, current_week, policy))
    if n_sessions < policy.min_entries:
        logger.debug("Only %d sessions logged in the last %d weeks, no adjustment", n_sessions, policy.window_weeks)
        return 1.0

    rate = completion_rate(n_sessions, current_week, policy)
    if rate is None:
        return 1.0
    factor = policy.factor_for(rate)
    logger.debug("Completion rate %.2f over %d sessions, adaptive factor %s", rate, n_sessions, factor)
    return factor
