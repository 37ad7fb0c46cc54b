"""
CLI interface for the workday calculator.
"""

import logging
import sys
from typing import List, Optional, Sequence, Tuple

import click

from networkdays import __version__
from networkdays.config.manager import ConfigManager
from networkdays.core.calculator import WorkdayCalculator
from networkdays.core.holiday_provider import HolidayProvider
from networkdays.data.schemas import Config, DateSystem, NetworkDaysRequest, WorkdayRequest
from networkdays.output.exporter import ResultExporter
from networkdays.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for CLI usage."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_settings(config_path: Optional[str], verbose: bool) -> Config:
    """Load configuration and set up logging from it."""
    cfg = ConfigManager(config_path).load_config()
    configure_logging(cfg.log_level)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    return cfg


def collect_holidays(
    calculator: WorkdayCalculator,
    provider: HolidayProvider,
    holiday_values: Sequence[str],
    holidays_file: Optional[str],
    sheet: Optional[str],
    column: str,
) -> List[float]:
    """Build the holiday list from explicit values and a workbook."""
    serials = [calculator.converter.parse(value) for value in holiday_values]
    if holidays_file:
        serials.extend(provider.load_from_workbook(holidays_file, sheet=sheet, column=column))

    logger.debug(f"Using {len(serials)} listed holidays")
    return serials


def resolve_region(
    cfg: Config, country: Optional[str], subdivision: Optional[str]
) -> Tuple[Optional[str], Optional[str]]:
    """Pick the public holiday region from the command line or the configured default."""
    if country:
        return country, subdivision
    return cfg.holiday_country, subdivision or cfg.holiday_subdivision


def holiday_options(func):
    """Attach the shared holiday source options to a command."""
    options = [
        click.option(
            "--holiday", "-H",
            "holiday_values",
            multiple=True,
            help="Holiday as serial number or date (repeatable)",
        ),
        click.option(
            "--holidays-file",
            type=click.Path(exists=True, dir_okay=False),
            help="Excel workbook with a column of holidays",
        ),
        click.option("--sheet", default=None, help="Sheet name in the holidays workbook"),
        click.option("--column", default="A", show_default=True, help="Column holding the holidays"),
        click.option("--country", default=None, help="Country code for public holidays (e.g. DE, US)"),
        click.option("--subdivision", default=None, help="Subdivision code (e.g. HH, CA)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def output_options(func):
    """Attach the shared output options to a command."""
    options = [
        click.option(
            "--format", "-f",
            "output_format",
            type=click.Choice(["json", "csv", "both", "console"]),
            default=None,
            help="Output format (default: from config, console)",
        ),
        click.option("--output", "-o", type=click.Path(), help="Output file path (optional)"),
        click.option(
            "--config", "-c",
            "config_path",
            type=click.Path(exists=True),
            help="Path to config file (optional)",
        ),
        click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def export_result(formatter: ConsoleFormatter, cfg: Config, result, output_format: str, output: Optional[str]) -> None:
    """Write a result to file in the requested format."""
    if output_format not in ("json", "csv", "both"):
        return

    exporter = ResultExporter(output_directory=cfg.output_directory)
    if output_format == "json":
        path = exporter.export_json(result, output)
        formatter.print_success(f"Result saved to {path}")
    elif output_format == "csv":
        path = exporter.export_csv(result, output)
        formatter.print_success(f"Result saved to {path}")
    else:
        json_path, csv_path = exporter.export_both(result)
        formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")


@click.group()
@click.version_option(version=__version__, prog_name="networkdays")
def main():
    """NETWORKDAYS / WORKDAY calculator on spreadsheet serial dates."""
    pass


@main.command()
@click.option("--start", "-s", required=True, help="Start date (serial, YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY)")
@click.option("--end", "-e", required=True, help="End date (serial, YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY)")
@holiday_options
@output_options
def count(start, end, holiday_values, holidays_file, sheet, column, country, subdivision,
          output_format, output, config_path, verbose):
    """Count working days between two dates (NETWORKDAYS)."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config_path, verbose)
        output_format = output_format or cfg.output_format
        calculator = WorkdayCalculator.from_config(cfg)
        provider = HolidayProvider(calculator.converter, language=cfg.holiday_language)

        start_serial = calculator.converter.parse(start)
        end_serial = calculator.converter.parse(end)
        holidays = collect_holidays(calculator, provider, holiday_values, holidays_file, sheet, column)

        country, subdivision = resolve_region(cfg, country, subdivision)
        public_holidays = []
        if country:
            public_holidays = provider.get_holidays(start_serial, end_serial, country, subdivision)
            holidays.extend(h.serial for h in public_holidays)

        request = NetworkDaysRequest(start=start_serial, end=end_serial, holidays=holidays)
        result = calculator.calculate_networkdays(request)

        if output_format in ("console", "both"):
            formatter.print_networkdays_result(result)
            if public_holidays:
                formatter.print_holidays(public_holidays)
        export_result(formatter, cfg, result, output_format, output)

    except (ValueError, FileNotFoundError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.option("--start", "-s", required=True, help="Start date (serial, YYYY-MM-DD, DD.MM.YYYY or DD/MM/YYYY)")
@click.option("--days", "-d", required=True, type=int, help="Workdays to advance (negative goes back)")
@holiday_options
@output_options
def advance(start, days, holiday_values, holidays_file, sheet, column, country, subdivision,
            output_format, output, config_path, verbose):
    """Find the date a number of working days away (WORKDAY)."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config_path, verbose)
        output_format = output_format or cfg.output_format
        calculator = WorkdayCalculator.from_config(cfg)
        provider = HolidayProvider(calculator.converter, language=cfg.holiday_language)

        start_serial = calculator.converter.parse(start)
        holidays = collect_holidays(calculator, provider, holiday_values, holidays_file, sheet, column)
        request = WorkdayRequest(start=start_serial, workdays=days, holidays=holidays)

        country, subdivision = resolve_region(cfg, country, subdivision)
        if country:
            result = calculator.calculate_workday_with_calendar(request, provider, country, subdivision)
        else:
            result = calculator.calculate_workday(request)

        if output_format in ("console", "both"):
            formatter.print_workday_result(result)
        export_result(formatter, cfg, result, output_format, output)

    except (ValueError, FileNotFoundError) as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.argument("value")
@click.option("--date-system", type=click.Choice(["1900", "1904"]), default=None, help="Override the date system")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Path to config file (optional)")
def convert(value, date_system, config_path):
    """Convert a serial number to a date, or a date to a serial number."""
    formatter = ConsoleFormatter()

    try:
        cfg = ConfigManager(config_path).load_config()
        if date_system:
            cfg = cfg.model_copy(update={"date_system": DateSystem(date_system)})
        converter = WorkdayCalculator.from_config(cfg).converter

        serial = converter.parse(value)
        day = converter.serial_to_calendar(serial)
        formatter.console.print(
            f"{serial:g} = {day.isoformat()} ({day.strftime('%A')}, {converter.date_system} system)"
        )

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
def weekends():
    """List the spreadsheet weekend number codes."""
    formatter = ConsoleFormatter()
    formatter.print_weekend_codes()


@main.command()
@click.option("--host", "-h", default=None, help="Host to bind to (default: from config or 0.0.0.0)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (default: from config or 8000)")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Path to config file (optional)")
def serve(host, port, config_path):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_settings(config_path, verbose=False)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "networkdays.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
