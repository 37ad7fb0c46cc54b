"""
Day-of-week enumeration and weekend patterns.

Weekend codes follow the spreadsheet "weekend number" convention used by the
NETWORKDAYS.INTL / WORKDAY.INTL family. Only the standard Saturday+Sunday
pattern drives the calculator today.
"""

from datetime import date
from enum import IntEnum
from types import MappingProxyType
from typing import FrozenSet, Mapping


class DayOfWeek(IntEnum):
    """Calendar day of week, Sunday first."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def from_date(cls, day: date) -> "DayOfWeek":
        """Return the day of week of a calendar date."""
        return cls(day.isoweekday() % 7 + 1)


class WeekendCode(IntEnum):
    """Spreadsheet weekend number codes."""

    SATURDAY_SUNDAY = 1
    SUNDAY_MONDAY = 2
    MONDAY_TUESDAY = 3
    TUESDAY_WEDNESDAY = 4
    WEDNESDAY_THURSDAY = 5
    THURSDAY_FRIDAY = 6
    FRIDAY_SATURDAY = 7
    SUNDAY_ONLY = 11
    MONDAY_ONLY = 12
    TUESDAY_ONLY = 13
    WEDNESDAY_ONLY = 14
    THURSDAY_ONLY = 15
    FRIDAY_ONLY = 16
    SATURDAY_ONLY = 17


WeekendPattern = FrozenSet[DayOfWeek]

STANDARD_WEEKEND: WeekendPattern = frozenset({DayOfWeek.SATURDAY, DayOfWeek.SUNDAY})

WEEKEND_PATTERNS: Mapping[WeekendCode, WeekendPattern] = MappingProxyType({
    WeekendCode.SATURDAY_SUNDAY: STANDARD_WEEKEND,
    WeekendCode.SUNDAY_MONDAY: frozenset({DayOfWeek.SUNDAY, DayOfWeek.MONDAY}),
    WeekendCode.MONDAY_TUESDAY: frozenset({DayOfWeek.MONDAY, DayOfWeek.TUESDAY}),
    WeekendCode.TUESDAY_WEDNESDAY: frozenset({DayOfWeek.TUESDAY, DayOfWeek.WEDNESDAY}),
    WeekendCode.WEDNESDAY_THURSDAY: frozenset({DayOfWeek.WEDNESDAY, DayOfWeek.THURSDAY}),
    WeekendCode.THURSDAY_FRIDAY: frozenset({DayOfWeek.THURSDAY, DayOfWeek.FRIDAY}),
    WeekendCode.FRIDAY_SATURDAY: frozenset({DayOfWeek.FRIDAY, DayOfWeek.SATURDAY}),
    WeekendCode.SUNDAY_ONLY: frozenset({DayOfWeek.SUNDAY}),
    WeekendCode.MONDAY_ONLY: frozenset({DayOfWeek.MONDAY}),
    WeekendCode.TUESDAY_ONLY: frozenset({DayOfWeek.TUESDAY}),
    WeekendCode.WEDNESDAY_ONLY: frozenset({DayOfWeek.WEDNESDAY}),
    WeekendCode.THURSDAY_ONLY: frozenset({DayOfWeek.THURSDAY}),
    WeekendCode.FRIDAY_ONLY: frozenset({DayOfWeek.FRIDAY}),
    WeekendCode.SATURDAY_ONLY: frozenset({DayOfWeek.SATURDAY}),
})


def weekend_pattern(code: int) -> WeekendPattern:
    """
    Look up the weekend pattern for a weekend number code.

    Args:
        code: Weekend number (1-7 or 11-17).

    Returns:
        Frozen set of weekend days.

    Raises:
        ValueError: If the code is not a known weekend number.
    """
    try:
        return WEEKEND_PATTERNS[WeekendCode(code)]
    except ValueError:
        valid_codes = ", ".join(str(c.value) for c in WeekendCode)
        raise ValueError(f"Invalid weekend code: {code}. Valid codes: {valid_codes}")


def describe_pattern(pattern: WeekendPattern) -> str:
    """Human-readable name of a weekend pattern, e.g. 'Saturday, Sunday'."""
    # Monday-first display order, Sunday last
    ordered = sorted(pattern, key=lambda d: (d.value + 5) % 7)
    return ", ".join(d.name.capitalize() for d in ordered)
