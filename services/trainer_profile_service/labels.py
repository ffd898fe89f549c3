"""Human-readable labels for coded profile values.

Every formatter normalises its input to a stripped, lowercase code before
looking it up, and falls back to ``humanize`` for codes it has no entry for.
"""

import re
from typing import Optional

from libs.common.currency import format_minor_amount
from services.trainer_profile_service.models.enums import (
    GoalType,
    Weekday,
    WorkoutTimePreference,
)

_UNDERSCORES = re.compile(r"_")
_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"(^|\s)(\w)")

_WEEKDAY_LABELS = {
    Weekday.MONDAY.value.lower(): "Mon",
    Weekday.TUESDAY.value.lower(): "Tue",
    Weekday.WEDNESDAY.value.lower(): "Wed",
    Weekday.THURSDAY.value.lower(): "Thu",
    Weekday.FRIDAY.value.lower(): "Fri",
    Weekday.SATURDAY.value.lower(): "Sat",
    Weekday.SUNDAY.value.lower(): "Sun",
}

_TIME_PREFERENCE_LABELS = {
    WorkoutTimePreference.MORNING.value.lower(): "Morning sessions",
    WorkoutTimePreference.AFTERNOON.value.lower(): "Afternoon sessions",
    WorkoutTimePreference.EVENING.value.lower(): "Evening sessions",
    WorkoutTimePreference.FLEXIBLE.value.lower(): "Flexible timing",
}

_GOAL_LABELS = {
    GoalType.WEIGHT_LOSS.value.lower(): "Weight loss",
    GoalType.MUSCLE_GAIN.value.lower(): "Muscle gain",
    GoalType.GENERAL_FITNESS.value.lower(): "General fitness",
    GoalType.STRENGTH.value.lower(): "Strength",
    GoalType.ENDURANCE.value.lower(): "Endurance",
}


def _normalize(code: Optional[str]) -> str:
    return str(code or "").strip().lower()


def humanize(code: Optional[str]) -> str:
    """Turn a coded value into title-cased words.

    >>> humanize("WEIGHT_LOSS")
    'Weight Loss'
    >>> humanize("  general__fitness ")
    'General Fitness'
    """
    text = _UNDERSCORES.sub(" ", str(code or ""))
    text = _WHITESPACE.sub(" ", text).strip().lower()
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def _lookup(table: dict[str, str], code: Optional[str]) -> str:
    key = _normalize(code)
    return table.get(key) or humanize(key)


def format_weekday(code: Optional[str]) -> str:
    return _lookup(_WEEKDAY_LABELS, code)


def format_time_preference(code: Optional[str]) -> str:
    return _lookup(_TIME_PREFERENCE_LABELS, code)


def format_goal(code: Optional[str]) -> str:
    return _lookup(_GOAL_LABELS, code)


# No explicit table; the coded value reads fine once humanized.
format_specialty = humanize


def format_currency(minor_units: int, iso_currency: str) -> str:
    """Format a plan amount held in minor units, e.g. 150000 INR -> "₹1,500".

    Zero fractional digits are shown, so any sub-unit remainder is dropped.
    """
    return format_minor_amount(minor_units, iso_currency)


def format_period(period: Optional[str], interval: Optional[int]) -> str:
    """Billing cadence, pluralised when the interval is above one.

    >>> format_period("MONTH", 3)
    'Every 3 months'
    """
    count = interval if interval is not None else 1
    unit = _normalize(period) or "period"
    suffix = "s" if count > 1 else ""
    return f"Every {count} {unit}{suffix}"
