"""
MCP Server for the workday calculator.

Exposes NETWORKDAYS / WORKDAY arithmetic to MCP clients.

Supports two transport modes:
- stdio: For local desktop client integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

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


def _parse_holidays(holidays: Optional[List[str]]) -> List[float]:
    return [calculator.converter.parse(str(h)) for h in holidays or []]


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("NETWORKDAYS Calculator", host=host, port=port)

    @mcp.tool()
    def networkdays(
        start: str,
        end: str,
        holidays: Optional[List[str]] = None,
        country: Optional[str] = None,
        subdivision: Optional[str] = None,
    ) -> dict:
        """
        Count working days between two dates, both included (NETWORKDAYS).

        Saturdays, Sundays and listed holidays are not working days. The
        result is negative when start is after end.

        Args:
            start: Start as serial number (e.g. "44928") or date "YYYY-MM-DD"
            end: End as serial number or date "YYYY-MM-DD"
            holidays: Holidays as serial numbers or dates
            country: Optional country code to add public holidays (e.g. "DE")
            subdivision: Optional subdivision code (e.g. "HH")

        Returns:
            Dictionary with working_days, calendar_days, weekend_days,
            holidays_count and the calendar dates of the range.

        Examples:
            >>> networkdays("2023-01-02", "2023-01-08")
            >>> networkdays("44928", "44934", holidays=["44929"])
        """
        try:
            start_serial = calculator.converter.parse(start)
            end_serial = calculator.converter.parse(end)
            holiday_serials = _parse_holidays(holidays)
            if country:
                holiday_serials += holiday_provider.get_holiday_serials(
                    start_serial, end_serial, country, subdivision
                )

            result = calculator.calculate_networkdays(
                NetworkDaysRequest(start=start_serial, end=end_serial, holidays=holiday_serials)
            )

            return {
                "working_days": result.working_days,
                "calendar_days": result.calendar_days,
                "weekend_days": result.weekend_days,
                "holidays_count": result.holidays_count,
                "start": result.start,
                "end": result.end,
                "start_date": result.start_date.isoformat(),
                "end_date": result.end_date.isoformat(),
                "date_system": result.date_system.value,
            }

        except ValueError as e:
            return {"error": str(e)}
        except Exception as e:
            logger.error(f"NETWORKDAYS calculation failed: {e}")
            return {"error": f"Calculation error: {str(e)}"}

    @mcp.tool()
    def workday(
        start: str,
        workdays: int,
        holidays: Optional[List[str]] = None,
        country: Optional[str] = None,
        subdivision: Optional[str] = None,
    ) -> dict:
        """
        Find the date a number of working days before or after a start date (WORKDAY).

        Args:
            start: Start as serial number or date "YYYY-MM-DD"
            workdays: Working days to advance; negative values go back
            holidays: Holidays as serial numbers or dates
            country: Optional country code to add public holidays
            subdivision: Optional subdivision code

        Returns:
            Dictionary with the resulting serial number and date.

        Examples:
            >>> workday("2023-01-02", 5)
            >>> workday("44928", 1, holidays=["44929"])
        """
        try:
            request = WorkdayRequest(
                start=calculator.converter.parse(start),
                workdays=workdays,
                holidays=_parse_holidays(holidays),
            )
            if country:
                result = calculator.calculate_workday_with_calendar(
                    request, holiday_provider, country, subdivision
                )
            else:
                result = calculator.calculate_workday(request)

            return {
                "result": result.result,
                "result_date": result.result_date.isoformat(),
                "start": result.start,
                "start_date": result.start_date.isoformat(),
                "workdays": result.workdays,
                "date_system": result.date_system.value,
            }

        except ValueError as e:
            return {"error": str(e)}
        except Exception as e:
            logger.error(f"WORKDAY calculation failed: {e}")
            return {"error": f"Calculation error: {str(e)}"}

    @mcp.tool()
    def list_weekend_codes() -> dict:
        """
        List the spreadsheet weekend number codes.

        Code 1 (Saturday, Sunday) is the weekend used by networkdays and workday.

        Returns:
            Dictionary with the codes and their weekend days.
        """
        return {
            "count": len(WEEKEND_PATTERNS),
            "weekend_codes": [
                {"code": code.value, "days": describe_pattern(pattern)}
                for code, pattern in WEEKEND_PATTERNS.items()
            ],
        }

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="NETWORKDAYS MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    mcp = create_mcp_server(host=args.host, port=args.port)

    logger.info(f"Starting MCP server with {args.transport} transport")
    if args.transport == "sse":
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
