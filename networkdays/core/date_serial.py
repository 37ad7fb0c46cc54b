"""
Conversion between spreadsheet serial day numbers and calendar dates.

Two date systems are supported:
- 1900 system: serial 1 is 1900-01-01 and serial 60 is the fictitious
  1900-02-29 inherited from early spreadsheet programs.
- 1904 system: serial 0 is 1904-01-01.
"""

import math
from datetime import date, datetime, timedelta
from typing import Union

from networkdays.core.weekend import DayOfWeek

# Serial of the fictitious 1900-02-29
LEAP_BUG_SERIAL = 60

EPOCH_1900 = date(1900, 1, 1)
EPOCH_1904 = date(1904, 1, 1)
# Serial 0 in the 1900 system
DAY_ZERO_1900 = date(1899, 12, 31)

SECONDS_PER_DAY = 24 * 60 * 60


class InvalidSerialDateError(ValueError):
    """Raised when a value cannot be represented as a calendar date."""


class SerialDateConverter:
    """Converts serial day numbers to calendar dates and back."""

    def __init__(self, use_1904_windowing: bool = False):
        """
        Initialize the converter.

        Args:
            use_1904_windowing: Use the 1904 date system instead of 1900.
        """
        self.use_1904_windowing = use_1904_windowing

    @property
    def date_system(self) -> str:
        """Name of the active date system ('1900' or '1904')."""
        return "1904" if self.use_1904_windowing else "1900"

    def serial_to_calendar(self, serial: float) -> date:
        """
        Convert a serial day number to a calendar date.

        The fractional part (time of day) is dropped.

        Args:
            serial: Serial day number.

        Returns:
            Calendar date of the serial's whole day.

        Raises:
            InvalidSerialDateError: If the serial is not finite, negative,
                or beyond the last representable date.
        """
        if not math.isfinite(serial) or serial < 0:
            raise InvalidSerialDateError(f"Not a valid serial date: {serial}")

        whole_days = math.floor(serial)
        try:
            if self.use_1904_windowing:
                return EPOCH_1904 + timedelta(days=whole_days)
            day_adjust = 0 if whole_days < LEAP_BUG_SERIAL + 1 else -1
            return EPOCH_1900 + timedelta(days=whole_days + day_adjust - 1)
        except OverflowError:
            raise InvalidSerialDateError(f"Serial date out of range: {serial}")

    def calendar_to_serial(self, day: Union[date, datetime]) -> float:
        """
        Convert a calendar date to a serial day number.

        Args:
            day: Calendar date. A datetime contributes its time of day
                as the fractional part.

        Returns:
            Serial day number.

        Raises:
            InvalidSerialDateError: If the date lies before the epoch.
        """
        fraction = 0.0
        if isinstance(day, datetime):
            midnight = datetime.combine(day.date(), datetime.min.time(), tzinfo=day.tzinfo)
            fraction = (day - midnight).total_seconds() / SECONDS_PER_DAY
            day = day.date()

        if self.use_1904_windowing:
            if day < EPOCH_1904:
                raise InvalidSerialDateError(f"Date before 1904 epoch: {day.isoformat()}")
            return float((day - EPOCH_1904).days) + fraction

        if day < DAY_ZERO_1900:
            raise InvalidSerialDateError(f"Date before 1900 epoch: {day.isoformat()}")
        serial = (day - DAY_ZERO_1900).days
        if serial >= LEAP_BUG_SERIAL:
            serial += 1
        return float(serial) + fraction

    def day_of_week(self, serial: float) -> DayOfWeek:
        """Day of week of a serial date."""
        return DayOfWeek.from_date(self.serial_to_calendar(serial))

    def parse(self, value: str) -> float:
        """
        Parse a serial number or a date string into a serial date.

        Accepted: a number ("44928", "44928.5"), YYYY-MM-DD, DD.MM.YYYY
        or DD/MM/YYYY.

        Raises:
            ValueError: If the value matches none of the formats.
        """
        value = value.strip()
        try:
            serial = float(value)
        except ValueError:
            pass
        else:
            if not math.isfinite(serial):
                raise InvalidSerialDateError(f"Not a valid serial date: {value}")
            return serial

        for fmt in ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"):
            try:
                parsed = datetime.strptime(value, fmt).date()
            except ValueError:
                continue
            return self.calendar_to_serial(parsed)
        raise ValueError(
            f"Invalid date: {value}. Use a serial number, YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
        )


def round_half_up(value: float) -> int:
    """
    Round to the nearest whole day, ties toward positive infinity.

    Used wherever serial dates are compared at day granularity.
    """
    return math.floor(value + 0.5)
