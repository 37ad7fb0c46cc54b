"""
Data models for the workday calculator using Pydantic.
"""

import math
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class DateSystem(str, Enum):
    """Spreadsheet date systems."""

    SYSTEM_1900 = "1900"
    SYSTEM_1904 = "1904"


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("serial dates must be finite numbers")
    return value


class Holiday(BaseModel):
    """Represents a holiday as a serial date."""

    serial: float = Field(..., description="Serial date of the holiday")
    holiday_date: date = Field(..., description="Calendar date of the holiday")
    name: str = Field(default="", description="Name of the holiday")


class NetworkDaysRequest(BaseModel):
    """Request model for counting workdays between two serial dates."""

    start: float = Field(..., description="Start serial date")
    end: float = Field(..., description="End serial date")
    holidays: List[float] = Field(default_factory=list, description="Holiday serial dates")

    @field_validator("start", "end")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject NaN and infinite serial dates."""
        return _require_finite(v)

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, v: List[float]) -> List[float]:
        """Reject NaN and infinite holiday entries."""
        return [_require_finite(h) for h in v]


class WorkdayRequest(BaseModel):
    """Request model for advancing a number of workdays from a serial date."""

    start: float = Field(..., description="Start serial date")
    workdays: int = Field(..., description="Signed number of workdays to advance")
    holidays: List[float] = Field(default_factory=list, description="Holiday serial dates")

    @field_validator("start")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Reject NaN and infinite serial dates."""
        return _require_finite(v)

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, v: List[float]) -> List[float]:
        """Reject NaN and infinite holiday entries."""
        return [_require_finite(h) for h in v]


class NetworkDaysResult(BaseModel):
    """Result of a workday count with its breakdown."""

    start: float = Field(..., description="Start serial date")
    end: float = Field(..., description="End serial date")
    start_date: date = Field(..., description="Calendar date of the start")
    end_date: date = Field(..., description="Calendar date of the end")
    calendar_days: int = Field(..., description="Signed inclusive calendar days")
    weekend_days: int = Field(..., description="Signed weekend days in range")
    holidays_count: int = Field(..., description="Signed holidays falling on workdays")
    working_days: int = Field(..., description="Signed working days")
    date_system: DateSystem = Field(default=DateSystem.SYSTEM_1900, description="Date system used")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class WorkdayResult(BaseModel):
    """Result of advancing a number of workdays."""

    start: float = Field(..., description="Start serial date")
    workdays: int = Field(..., description="Requested workdays")
    result: float = Field(..., description="Resulting serial date")
    start_date: date = Field(..., description="Calendar date of the start")
    result_date: date = Field(..., description="Calendar date of the result")
    holidays_count: int = Field(default=0, ge=0, description="Number of holidays supplied")
    date_system: DateSystem = Field(default=DateSystem.SYSTEM_1900, description="Date system used")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class Config(BaseModel):
    """Configuration for the workday calculator."""

    date_system: DateSystem = Field(default=DateSystem.SYSTEM_1900, description="Spreadsheet date system")
    holiday_country: Optional[str] = Field(
        default=None, description="Default country code for library holidays (e.g. DE, US)"
    )
    holiday_subdivision: Optional[str] = Field(
        default=None, description="Default subdivision code for library holidays (e.g. HH, CA)"
    )
    holiday_language: str = Field(default="en_US", description="Language for holiday names")
    output_format: str = Field(
        default="console", description="Default output format: console, json, csv or both"
    )
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate the default output format."""
        fmt = v.lower()
        if fmt not in ("console", "json", "csv", "both"):
            raise ValueError(f"Invalid output format: {v}")
        return fmt

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def use_1904_windowing(self) -> bool:
        """Whether the 1904 date system is configured."""
        return self.date_system == DateSystem.SYSTEM_1904
