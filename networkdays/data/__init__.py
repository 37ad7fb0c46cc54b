"""
Data models and schemas for the workday calculator.
"""

from networkdays.data.schemas import (
    Config,
    DateSystem,
    Holiday,
    NetworkDaysRequest,
    NetworkDaysResult,
    WorkdayRequest,
    WorkdayResult,
)

__all__ = [
    "Config",
    "DateSystem",
    "Holiday",
    "NetworkDaysRequest",
    "NetworkDaysResult",
    "WorkdayRequest",
    "WorkdayResult",
]
