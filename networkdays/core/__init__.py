"""
Core business logic for workday calculation.
"""

from networkdays.core.calculator import WorkdayCalculator, default_calculator
from networkdays.core.date_serial import (
    InvalidSerialDateError,
    SerialDateConverter,
    round_half_up,
)
from networkdays.core.holiday_provider import HolidayProvider
from networkdays.core.weekend import (
    STANDARD_WEEKEND,
    WEEKEND_PATTERNS,
    DayOfWeek,
    WeekendCode,
    weekend_pattern,
)

__all__ = [
    "DayOfWeek",
    "HolidayProvider",
    "InvalidSerialDateError",
    "STANDARD_WEEKEND",
    "SerialDateConverter",
    "WEEKEND_PATTERNS",
    "WeekendCode",
    "WorkdayCalculator",
    "default_calculator",
    "round_half_up",
    "weekend_pattern",
]
