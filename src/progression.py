import math
import logging

import numpy as np

import config
from utils import (
    EmbeddedNumeral,
    Numeric,
    UnitSuffixed,
    parse_field,
    round_half_up,
)


logger = logging.getLogger(__name__)


def project(base_value, week_number, increment, user_multiplier = 1.0, strategy = "linear", adaptive_factor = 1.0):
    """
    Value of a field at week_number from its week 1 baseline.
    linear:      base + increment * weeks * multiplier * factor
    percentage:  base * (1 + increment/100) ^ (weeks * multiplier * factor)
    Week 1 is always the baseline. week_number < 1 is not defined.
    """
    scale = (week_number - 1) * user_multiplier * adaptive_factor
    if strategy == "linear":
        return base_value + increment * scale
    elif strategy == "percentage":
        # A negative growth base gives nan and overflow gives inf, never an exception.
        with np.errstate(all = "ignore"):
            return float(base_value * np.power(1 + increment / 100, scale))
    else:
        raise ValueError(f"Progression strategy {strategy} not recognised.")


def _whole(value, parsed):
    return round_half_up(value)


def _weight(value, parsed):
    if isinstance(parsed, Numeric):
        return round(value, config.WEIGHT_DECIMALS)
    return f"{value:.{config.WEIGHT_DECIMALS}f}"


# field: (numeral may sit anywhere in the text, accepted shapes, formatter), one per config.PROGRESSABLE_FIELDS
FIELD_RULES = {
    "sets": (False, (Numeric,), _whole),
    "reps": (False, (Numeric, UnitSuffixed), _whole),
    "weight": (True, (Numeric, EmbeddedNumeral), _weight),
    "duration": (False, (Numeric,), _whole),
}


def project_details(baseline, week_number, settings, adaptive_factor = 1.0):
    """
    Week week_number version of one exercise's baseline details.
    Only sets, reps, weight and duration are rewritten. A field progresses only
    when it has a usable magnitude and a non-zero numeric increment, otherwise it
    is returned as stored. The baseline itself is never modified.
    """
    details = dict(baseline)
    if week_number == 1:
        # Stored as written, "80kg" is not reformatted to "80.0kg".
        return details
    for field in config.PROGRESSABLE_FIELDS:
        embedded, shapes, formatter = FIELD_RULES[field]
        if field not in baseline:
            continue
        increment = settings.increment_for(field)
        if increment is None:
            continue
        parsed = parse_field(baseline[field], embedded = embedded)
        if not isinstance(parsed, shapes):
            continue

        value = project(
            parsed.value,
            week_number,
            increment,
            user_multiplier = settings.user_multiplier,
            strategy = settings.strategy,
            adaptive_factor = adaptive_factor,
        )
        if not math.isfinite(value):
            logger.debug("Projected %s is not finite (%s), keeping baseline %r", field, value, baseline[field])
            continue
        details[field] = parsed.with_value(formatter(value, parsed))
    return details
