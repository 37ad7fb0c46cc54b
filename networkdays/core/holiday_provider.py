"""
Holiday list loading: public holidays from the holidays library and
holiday columns from Excel workbooks.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import holidays
from openpyxl import load_workbook
from openpyxl.utils import column_index_from_string

from networkdays.core.date_serial import InvalidSerialDateError, SerialDateConverter
from networkdays.data.schemas import Holiday

logger = logging.getLogger(__name__)


class HolidayProvider:
    """Provides holiday lists as serial dates."""

    def __init__(self, converter: Optional[SerialDateConverter] = None, language: str = "en_US"):
        """
        Initialize the holiday provider.

        Args:
            converter: Serial date converter for the active date system.
            language: Language for holiday names.
        """
        self.converter = converter or SerialDateConverter()
        self.language = language
        self._cache: Dict[Tuple[str, Optional[str], str, int], List[Holiday]] = {}

    def get_holidays(
        self,
        start: float,
        end: float,
        country: str,
        subdivision: Optional[str] = None,
    ) -> List[Holiday]:
        """
        Get all public holidays between two serial dates.

        Args:
            start: Start serial date (either order).
            end: End serial date.
            country: ISO country code (e.g. 'DE', 'US').
            subdivision: Optional state/province code (e.g. 'HH', 'CA').

        Returns:
            List of Holiday objects within the range, in date order.

        Raises:
            ValueError: If the country or subdivision is not supported.
        """
        first_day = self.converter.serial_to_calendar(min(start, end))
        last_day = self.converter.serial_to_calendar(max(start, end))

        result = []
        for year in range(first_day.year, last_day.year + 1):
            for holiday in self._get_year(country, subdivision, year):
                if first_day <= holiday.holiday_date <= last_day:
                    result.append(holiday)

        logger.debug(
            f"Found {len(result)} holidays for {country}"
            f"{'/' + subdivision if subdivision else ''} between {first_day} and {last_day}"
        )
        return result

    def _get_year(self, country: str, subdivision: Optional[str], year: int) -> List[Holiday]:
        """Get the holidays of one year, cached per region and language."""
        country = country.upper()
        subdivision = subdivision.upper() if subdivision else None
        cache_key = (country, subdivision, self.language, year)
        if cache_key in self._cache:
            return self._cache[cache_key]

        try:
            country_holidays = holidays.country_holidays(
                country,
                subdiv=subdivision,
                years=year,
                language=self.language,
            )
        except NotImplementedError as e:
            raise ValueError(f"Unsupported holiday calendar: {e}")

        result = []
        for holiday_date, name in sorted(country_holidays.items()):
            if holiday_date.year != year:
                continue
            try:
                serial = self.converter.calendar_to_serial(holiday_date)
            except InvalidSerialDateError:
                continue
            result.append(Holiday(serial=serial, holiday_date=holiday_date, name=name))

        self._cache[cache_key] = result
        return result

    def get_holiday_serials(
        self,
        start: float,
        end: float,
        country: str,
        subdivision: Optional[str] = None,
    ) -> List[float]:
        """
        Get public holidays between two serial dates as serial numbers.

        Args:
            start: Start serial date.
            end: End serial date.
            country: ISO country code.
            subdivision: Optional subdivision code.

        Returns:
            List of holiday serial dates.
        """
        return [h.serial for h in self.get_holidays(start, end, country, subdivision)]

    def load_from_workbook(
        self,
        file_path: str,
        sheet: Optional[str] = None,
        column: str = "A",
    ) -> List[float]:
        """
        Load a holiday list from a column of an Excel workbook.

        Numeric cells are read as serial dates, date cells are converted.
        Other cells (headers, blanks) are skipped.

        Args:
            file_path: Path to the workbook.
            sheet: Sheet name. Uses the active sheet if not provided.
            column: Column letter holding the holidays.

        Returns:
            List of holiday serial dates.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file, sheet or column is invalid.
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Holiday workbook not found: {file_path}")

        if path.suffix.lower() not in (".xlsx", ".xlsm"):
            raise ValueError(f"Invalid file format: {path.suffix}. Expected .xlsx or .xlsm")

        try:
            column_index = column_index_from_string(column.upper())
        except ValueError:
            raise ValueError(f"Invalid column: {column}")

        logger.info(f"Loading holidays from: {file_path}")

        try:
            workbook = load_workbook(filename=file_path, read_only=True, data_only=True)
        except Exception as e:
            raise ValueError(f"Failed to open Excel file: {e}")

        try:
            if sheet is None:
                worksheet = workbook.active
            elif sheet in workbook.sheetnames:
                worksheet = workbook[sheet]
            else:
                raise ValueError(f"Sheet '{sheet}' not found in {path.name}")

            serials = []
            for row in worksheet.iter_rows(
                min_col=column_index, max_col=column_index, values_only=True
            ):
                serial = self._cell_to_serial(row[0])
                if serial is None:
                    logger.debug(f"Skipping non-date cell: {row[0]!r}")
                    continue
                serials.append(serial)
        finally:
            workbook.close()

        logger.info(f"Loaded {len(serials)} holidays")
        return serials

    def _cell_to_serial(self, value) -> Optional[float]:
        """Convert a workbook cell value to a serial date, or None if it is not a date."""
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, (datetime, date)):
            return self.converter.calendar_to_serial(value)
        return None

    def clear_cache(self) -> None:
        """Clear the holiday cache."""
        self._cache.clear()
