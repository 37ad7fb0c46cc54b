"""
FastAPI REST API for the workday calculator.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from networkdays import __version__
from networkdays.config.manager import ConfigManager
from networkdays.core.calculator import WorkdayCalculator
from networkdays.core.holiday_provider import HolidayProvider
from networkdays.core.weekend import WEEKEND_PATTERNS, describe_pattern
from networkdays.data.schemas import NetworkDaysRequest, WorkdayRequest

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
calculator = WorkdayCalculator.from_config(config)
holiday_provider = HolidayProvider(calculator.converter, language=config.holiday_language)


# API Models
class HolidaySource(BaseModel):
    """Optional public-holiday calendar merged into the explicit holiday list."""

    country: Optional[str] = Field(None, description="Country code (e.g. DE, US)")
    subdivision: Optional[str] = Field(None, description="Subdivision code (e.g. HH, CA)")


class NetworkDaysApiRequest(NetworkDaysRequest):
    """Request body for POST /networkdays."""

    holiday_calendar: Optional[HolidaySource] = Field(None, description="Public holidays to add")


class WorkdayApiRequest(WorkdayRequest):
    """Request body for POST /workday."""

    holiday_calendar: Optional[HolidaySource] = Field(None, description="Public holidays to add")


class NetworkDaysResponse(BaseModel):
    """Response model for a workday count."""

    start: float
    end: float
    start_date: date
    end_date: date
    calendar_days: int
    weekend_days: int
    holidays_count: int
    working_days: int
    date_system: str


class WorkdayResponse(BaseModel):
    """Response model for advancing workdays."""

    start: float
    workdays: int
    result: float
    start_date: date
    result_date: date
    date_system: str


class WeekendCodeInfo(BaseModel):
    """Information about a weekend number code."""

    code: int
    days: str


class ConversionResponse(BaseModel):
    """Serial date and calendar date pair."""

    serial: float
    calendar_date: date
    weekday: str
    date_system: str


def _library_holidays(source: Optional[HolidaySource], start: float, end: float) -> List[float]:
    if source is None or not source.country:
        return []
    return holiday_provider.get_holiday_serials(start, end, source.country, source.subdivision)


# FastAPI app
app = FastAPI(
    title="NETWORKDAYS API",
    description="Workday arithmetic on spreadsheet serial dates",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "NETWORKDAYS API",
        "version": __version__,
        "endpoints": {
            "POST /networkdays": "Count working days between two serial dates",
            "POST /workday": "Advance a number of working days",
            "GET /weekends": "List weekend number codes",
            "GET /convert/{value}": "Convert between serial numbers and dates",
        },
    }


@app.post("/networkdays", response_model=NetworkDaysResponse)
async def networkdays(request: NetworkDaysApiRequest):
    """
    Count working days between two serial dates, both included.

    The result is negative when start is after end.
    """
    try:
        holidays = list(request.holidays) + _library_holidays(
            request.holiday_calendar, request.start, request.end
        )
        result = calculator.calculate_networkdays(
            NetworkDaysRequest(start=request.start, end=request.end, holidays=holidays)
        )

        return NetworkDaysResponse(
            start=result.start,
            end=result.end,
            start_date=result.start_date,
            end_date=result.end_date,
            calendar_days=result.calendar_days,
            weekend_days=result.weekend_days,
            holidays_count=result.holidays_count,
            working_days=result.working_days,
            date_system=result.date_system.value,
        )

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("NETWORKDAYS calculation failed")
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@app.post("/workday", response_model=WorkdayResponse)
async def workday(request: WorkdayApiRequest):
    """
    Advance a signed number of working days from a serial date.
    """
    try:
        workday_request = WorkdayRequest(
            start=request.start, workdays=request.workdays, holidays=request.holidays
        )
        source = request.holiday_calendar
        if source is not None and source.country:
            result = calculator.calculate_workday_with_calendar(
                workday_request, holiday_provider, source.country, source.subdivision
            )
        else:
            result = calculator.calculate_workday(workday_request)

        return WorkdayResponse(
            start=result.start,
            workdays=result.workdays,
            result=result.result,
            start_date=result.start_date,
            result_date=result.result_date,
            date_system=result.date_system.value,
        )

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("WORKDAY calculation failed")
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@app.get("/weekends", response_model=List[WeekendCodeInfo])
async def list_weekend_codes():
    """
    List the spreadsheet weekend number codes and their days.
    """
    return [
        WeekendCodeInfo(code=code.value, days=describe_pattern(pattern))
        for code, pattern in WEEKEND_PATTERNS.items()
    ]


@app.get("/convert/{value}", response_model=ConversionResponse)
async def convert(value: str):
    """
    Convert a serial number or a date (YYYY-MM-DD) to both representations.
    """
    try:
        serial = calculator.converter.parse(value)
        day = calculator.converter.serial_to_calendar(serial)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ConversionResponse(
        serial=serial,
        calendar_date=day,
        weekday=day.strftime("%A"),
        date_system=calculator.converter.date_system,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
