"""
Main workday calculator logic.

Dates are spreadsheet serial day numbers; calendar lookups go through a
SerialDateConverter.
"""

import logging
import math
from datetime import date, timedelta
from typing import TYPE_CHECKING, Optional, Sequence

from networkdays.core.date_serial import SerialDateConverter, round_half_up
from networkdays.core.weekend import STANDARD_WEEKEND, DayOfWeek
from networkdays.data.schemas import (
    Config,
    DateSystem,
    NetworkDaysRequest,
    NetworkDaysResult,
    WorkdayRequest,
    WorkdayResult,
)

if TYPE_CHECKING:
    from networkdays.core.holiday_provider import HolidayProvider

logger = logging.getLogger(__name__)

# Extra calendar days of public holidays fetched past the expected result
HOLIDAY_WINDOW_SLACK = 31


class WorkdayCalculator:
    """Calculates working days between serial dates, skipping weekends and holidays."""

    def __init__(self, converter: SerialDateConverter = None):
        """
        Initialize the workday calculator.

        Args:
            converter: Serial date converter. Defaults to the 1900 date system.
        """
        self.converter = converter or SerialDateConverter()
        self.weekend_days = STANDARD_WEEKEND

    @classmethod
    def from_config(cls, config: Config) -> "WorkdayCalculator":
        """Create a calculator using the configured date system."""
        return cls(SerialDateConverter(use_1904_windowing=config.use_1904_windowing))

    def count_workdays(self, start: float, end: float, holidays: Sequence[float]) -> int:
        """
        Count the workdays between two serial dates, including both dates.

        The dates may be given in either order; the result is negative
        when start is after end.

        Args:
            start: Start serial date.
            end: End serial date.
            holidays: Holiday serial dates.

        Returns:
            Signed number of workdays in the range.
        """
        calendar_days = self.calendar_days(start, end)
        weekend_days = self.weekend_days_in_range(start, end)
        non_weekend_holidays = self.calculate_non_weekend_holidays(start, end, holidays)
        working_days = calendar_days - weekend_days - non_weekend_holidays
        logger.debug(
            f"count_workdays({start}, {end}): {calendar_days} days, "
            f"{weekend_days} weekend, {non_weekend_holidays} holidays -> {working_days}"
        )
        return working_days

    def advance_workdays(self, start: float, workdays: int, holidays: Sequence[float]) -> float:
        """
        Find the serial date reached after a number of workdays from a start date.

        The start date itself is never tested, so a zero count returns the
        start date at whole-day granularity.

        Args:
            start: Start serial date.
            workdays: Signed number of workdays to advance.
            holidays: Holiday serial dates.

        Returns:
            Serial date of the resulting day.
        """
        direction = -1 if workdays < 0 else 1
        cursor = self.converter.serial_to_calendar(start)
        serial = self.converter.calendar_to_serial(cursor)
        remaining = workdays
        while remaining != 0:
            cursor += timedelta(days=direction)
            serial += direction
            if not self._is_weekend_day(cursor) and not self.is_holiday(serial, holidays):
                remaining -= direction
        result = self.converter.calendar_to_serial(cursor)
        logger.debug(f"advance_workdays({start}, {workdays}) -> {result}")
        return result

    def calendar_days(self, start: float, end: float) -> int:
        """
        Signed count of calendar days between two serial dates, both included.

        Fractions are truncated toward zero; a reversed range gives the
        negated count of the forward range.
        """
        if start <= end:
            return int(end - start + 1)
        return -int(start - end + 1)

    def weekend_days_in_range(self, start: float, end: float) -> int:
        """Signed count of weekend days between two serial dates, both included."""
        return sum(
            self.past_days_of_week(start, end, day_of_week)
            for day_of_week in sorted(self.weekend_days)
        )

    def past_days_of_week(self, start: float, end: float, day_of_week: DayOfWeek) -> int:
        """
        Count the occurrences of a day of week between two serial dates.

        Both bounds are truncated to whole days and included.

        Returns:
            The count, negated when start is after end.
        """
        first_day = math.floor(min(start, end))
        last_day = math.floor(max(start, end))
        past_days = 0
        for serial in range(first_day, last_day + 1):
            if self.converter.day_of_week(serial) == day_of_week:
                past_days += 1
        return past_days if start <= end else -past_days

    def calculate_non_weekend_holidays(
        self, start: float, end: float, holidays: Sequence[float]
    ) -> int:
        """
        Count the holidays inside a range that fall on workdays.

        Duplicate entries are counted once each.

        Returns:
            The count, negated when start is after end.
        """
        first_day = min(start, end)
        last_day = max(start, end)
        non_weekend_holidays = 0
        for holiday in holidays:
            if self.is_in_range(first_day, last_day, holiday) and not self.is_weekend(holiday):
                non_weekend_holidays += 1
        return non_weekend_holidays if start <= end else -non_weekend_holidays

    def is_weekend(self, serial: float) -> bool:
        """True if the serial date falls on a weekend day."""
        return self._is_weekend_day(self.converter.serial_to_calendar(serial))

    def _is_weekend_day(self, day: date) -> bool:
        return DayOfWeek.from_date(day) in self.weekend_days

    def is_holiday(self, serial: float, holidays: Sequence[float]) -> bool:
        """True if any holiday rounds to the same whole day as the serial date."""
        day = round_half_up(serial)
        return any(round_half_up(holiday) == day for holiday in holidays)

    def is_in_range(self, start: float, end: float, serial: float) -> bool:
        """True if start <= serial <= end; the bounds must already be ordered."""
        return start <= serial <= end

    def calculate_networkdays(self, request: NetworkDaysRequest) -> NetworkDaysResult:
        """
        Count workdays for a request and return the full breakdown.

        Args:
            request: NetworkDaysRequest with range and holidays.

        Returns:
            NetworkDaysResult with calendar, weekend and holiday counts.
        """
        weekend_days = self.weekend_days_in_range(request.start, request.end)
        holidays_count = self.calculate_non_weekend_holidays(
            request.start, request.end, request.holidays
        )
        working_days = self.count_workdays(request.start, request.end, request.holidays)

        return NetworkDaysResult(
            start=request.start,
            end=request.end,
            start_date=self.converter.serial_to_calendar(request.start),
            end_date=self.converter.serial_to_calendar(request.end),
            calendar_days=self.calendar_days(request.start, request.end),
            weekend_days=weekend_days,
            holidays_count=holidays_count,
            working_days=working_days,
            date_system=DateSystem(self.converter.date_system),
        )

    def calculate_workday(self, request: WorkdayRequest) -> WorkdayResult:
        """
        Advance workdays for a request.

        Args:
            request: WorkdayRequest with start, count and holidays.

        Returns:
            WorkdayResult with the resulting serial and calendar date.
        """
        result = self.advance_workdays(request.start, request.workdays, request.holidays)

        return WorkdayResult(
            start=request.start,
            workdays=request.workdays,
            result=result,
            start_date=self.converter.serial_to_calendar(request.start),
            result_date=self.converter.serial_to_calendar(result),
            holidays_count=len(request.holidays),
            date_system=DateSystem(self.converter.date_system),
        )

    def calculate_workday_with_calendar(
        self,
        request: WorkdayRequest,
        holiday_provider: "HolidayProvider",
        country: str,
        subdivision: Optional[str] = None,
    ) -> WorkdayResult:
        """
        Advance workdays for a request, adding the public holidays of a region.

        Public holidays are fetched for a window past the start. While the
        result lands outside the window, the window is widened to cover it
        and the walk is repeated, so every day the walk tests has its
        public holidays loaded.

        Args:
            request: WorkdayRequest with start, count and extra holidays.
            holiday_provider: Source of public holiday serials.
            country: ISO country code.
            subdivision: Optional subdivision code.

        Returns:
            WorkdayResult for the request plus the public holidays.
        """
        direction = -1 if request.workdays < 0 else 1
        span = (abs(request.workdays) // 5 + 1) * 7 + HOLIDAY_WINDOW_SLACK
        while True:
            window_end = max(request.start + direction * span, 0)
            public_holidays = holiday_provider.get_holiday_serials(
                request.start, window_end, country, subdivision
            )
            result = self.calculate_workday(
                request.model_copy(update={"holidays": list(request.holidays) + public_holidays})
            )
            if direction * (window_end - result.result) >= 0:
                return result
            logger.debug(f"Result {result.result} outside holiday window ending {window_end}, widening")
            span = math.ceil(abs(result.result - request.start)) + HOLIDAY_WINDOW_SLACK


default_calculator = WorkdayCalculator()
