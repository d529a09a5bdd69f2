import re
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

import yaml
import numpy as np


LEADING_NUMERAL = re.compile(r"^\s*(\d+(?:\.\d+)?)(\D*)$")
EMBEDDED_NUMERAL = re.compile(r"[-+]?\d+(?:\.\d+)?")


# Baseline fields come in four shapes. Each knows how to put a new magnitude back.

@dataclass(frozen=True)
class Numeric:
    """A bare number, e.g. sets = 3."""
    value: float

    def with_value(self, value):
        return value


@dataclass(frozen=True)
class UnitSuffixed:
    """A leading numeral followed by a non-numeric suffix, e.g. reps = "10s"."""
    value: float
    suffix: str

    def with_value(self, value):
        return f"{value}{self.suffix}"


@dataclass(frozen=True)
class EmbeddedNumeral:
    """A numeral somewhere inside free text, e.g. weight = "70% 1RM"."""
    prefix: str
    value: float
    suffix: str

    def with_value(self, value):
        return f"{self.prefix}{value}{self.suffix}"


@dataclass(frozen=True)
class Opaque:
    """Anything without a usable magnitude, e.g. weight = "Bodyweight"."""
    raw: Any


ProgressableField = Union[Numeric, UnitSuffixed, EmbeddedNumeral, Opaque]


def is_number(value):
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def parse_field(value, embedded = False) -> ProgressableField:
    """
    Classifies a baseline value.
    With embedded=False only a leading numeral is accepted ("10s", "3 (each arm)"),
    with embedded=True the first signed or decimal numeral anywhere in the text is used ("+10kg").
    """
    if is_number(value):
        return Numeric(float(value))
    if not isinstance(value, str):
        return Opaque(value)

    if embedded:
        match = EMBEDDED_NUMERAL.search(value)
        if match is None:
            return Opaque(value)
        return EmbeddedNumeral(value[:match.start()], float(match.group()), value[match.end():])

    match = LEADING_NUMERAL.match(value)
    if match is None:
        return Opaque(value)
    return UnitSuffixed(float(match.group(1)), match.group(2))


def round_half_up(x):
    """Nearest integer, halves away from zero for positive values (2.5 -> 3)."""
    return int(np.floor(x + 0.5))


def format_timer(seconds):
    minutes, seconds = divmod(int(seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def get_yaml(filepath):
    with open(filepath, "r") as f:
        yamlfile = yaml.safe_load(f)
    return yamlfile
