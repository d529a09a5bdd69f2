import logging
from datetime import datetime

import click
import yaml

import config
from load import parse_adherence_config, parse_plan
from log import completed_today, load_history
from training_program import TrainingProgram
from utils import format_timer


def _program(plan_path, history_path, adherence_config_path, derive_sessions):
    plan = parse_plan(plan_path)
    history = load_history(history_path) if history_path is not None else ()
    adherence = parse_adherence_config(adherence_config_path)
    if derive_sessions:
        adherence = adherence.for_week(plan.base_week)
    return TrainingProgram(plan, history, adherence)


def _readable(day):
    day = day.dump()
    for exercise in day["exercises"]:
        duration = exercise["details"].get("duration")
        if exercise["type"] in ("timer", "hangboard") and isinstance(duration, int):
            exercise["details"]["duration"] = f"{duration}s ({format_timer(duration)})"
    return day


def _echo(data):
    click.echo(yaml.safe_dump(data, sort_keys = False, allow_unicode = True))


@click.group()
@click.option(
    "--verbose", "-v",
    is_flag = True,
    default = False,
    help = "Log how week numbers and adaptive factors are derived."
)
def main(verbose):
    logging.basicConfig(
        level = logging.DEBUG if verbose else logging.WARNING,
        format = "%(levelname)s %(name)s: %(message)s",
    )


plan_argument = click.argument(
    "plan_path",
    type = click.Path(exists=True),
)
history_option = click.option(
    "--history", "history_path",
    default = None,
    type = click.Path(exists=True),
    help = "YAML or JSON list of completion log entries used for adherence."
)
adherence_option = click.option(
    "--adherence-config-path", "--adherence-config", "-ac",
    default = config.CONFIG_ROOT / "adherence.yaml",
    type = click.Path(exists=True),
    help = "Path to config file of YAML-format corresponding to AdherencePolicy in src/config/progression.py"
)
derive_option = click.option(
    "--derive-sessions",
    is_flag = True,
    default = False,
    help = "Use the number of training days in the plan as sessions per week instead of the configured value."
)
now_option = click.option(
    "--now",
    default = None,
    type = click.DateTime(),
    help = "Pretend the current time is this."
)


@main.command()
@plan_argument
@history_option
@adherence_option
@derive_option
@now_option
@click.option(
    "--week", "-w", "week_number",
    default = None,
    type = click.IntRange(min=1),
    help = "Plan week to show. Defaults to the current week."
)
def week(plan_path, history_path, adherence_config_path, derive_sessions, now, week_number):
    """Print the fully projected week."""
    program = _program(plan_path, history_path, adherence_config_path, derive_sessions)
    if week_number is None:
        week_number = program.week_number(now)
    _echo({
        "planName": program.plan.plan_name,
        "weekNumber": week_number,
        "adaptiveFactor": program.factor(week_number),
        "days": [_readable(day) for day in program.week_at(week_number)],
    })


@main.command()
@plan_argument
@history_option
@adherence_option
@derive_option
@now_option
def today(plan_path, history_path, adherence_config_path, derive_sessions, now):
    """Print today's workout and whether it has been logged."""
    if now is None:
        now = datetime.now()
    program = _program(plan_path, history_path, adherence_config_path, derive_sessions)
    day = program.today(now)
    _echo({
        "planName": program.plan.plan_name,
        "weekNumber": program.week_number(now),
        "completed": completed_today(program.history, now),
        **_readable(day),
    })
    if day.is_rest_day:
        click.echo("Rest day.")



if __name__ == "__main__":
    main()
