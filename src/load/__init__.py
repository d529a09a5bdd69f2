from .load import (
    PlanValidationError,
    clean_plan_text,
    normalise_plan,
    parse_adherence_config,
    parse_plan,
)
