"""
Console output formatting using Rich.
"""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from networkdays.core.weekend import WEEKEND_PATTERNS, STANDARD_WEEKEND, describe_pattern
from networkdays.data.schemas import Holiday, NetworkDaysResult, WorkdayResult


def _format_serial(serial: float) -> str:
    return f"{serial:g}"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def print_networkdays_result(self, result: NetworkDaysResult) -> None:
        """
        Print a workday count result.

        Args:
            result: NetworkDaysResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]NETWORKDAYS[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white")

        summary_table.add_row(
            "Start:",
            f"{result.start_date.strftime('%a %d.%m.%Y')} ({_format_serial(result.start)})",
        )
        summary_table.add_row(
            "End:",
            f"{result.end_date.strftime('%a %d.%m.%Y')} ({_format_serial(result.end)})",
        )
        summary_table.add_row("Date System:", result.date_system.value)
        summary_table.add_row("Weekend:", describe_pattern(STANDARD_WEEKEND))

        self.console.print(Panel(summary_table, title="[bold]Period[/bold]"))

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=24)
        calc_table.add_column("Value", style="white", justify="right", width=10)

        calc_table.add_row("Calendar Days:", str(result.calendar_days))
        calc_table.add_row("Weekend Days:", f"- {result.weekend_days}")
        calc_table.add_row("Holidays (on workdays):", f"- {result.holidays_count}")
        calc_table.add_row("", "─" * 10)
        calc_table.add_row(
            Text("Working Days:", style="bold green"),
            Text(str(result.working_days), style="bold green"),
        )

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))
        self.console.print()

    def print_workday_result(self, result: WorkdayResult) -> None:
        """
        Print the result of advancing workdays.

        Args:
            result: WorkdayResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]WORKDAY[/bold blue]")
        self.console.print()

        table = Table(show_header=False, box=None)
        table.add_column("Label", style="cyan", width=20)
        table.add_column("Value", style="white")

        table.add_row(
            "Start:",
            f"{result.start_date.strftime('%a %d.%m.%Y')} ({_format_serial(result.start)})",
        )
        table.add_row("Workdays:", str(result.workdays))
        table.add_row("Holidays Supplied:", str(result.holidays_count))
        table.add_row(
            Text("Result:", style="bold green"),
            Text(
                f"{result.result_date.strftime('%a %d.%m.%Y')} ({_format_serial(result.result)})",
                style="bold green",
            ),
        )

        self.console.print(Panel(table, title="[bold]Result[/bold]"))
        self.console.print()

    def print_holidays(self, holidays: List[Holiday]) -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
        """
        holiday_table = Table(title="[bold]Holidays in Period[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Serial", style="dim", justify="right", width=8)
        holiday_table.add_column("Name", style="white")

        for holiday in holidays:
            holiday_table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                holiday.holiday_date.strftime("%A"),
                _format_serial(holiday.serial),
                holiday.name,
            )

        self.console.print(holiday_table)

    def print_weekend_codes(self) -> None:
        """Print a table of all weekend number codes."""
        self.console.print()
        self.console.rule("[bold blue]Weekend Codes[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Code", style="cyan", width=6)
        table.add_column("Weekend Days", style="white")

        for code, pattern in WEEKEND_PATTERNS.items():
            table.add_row(str(code.value), describe_pattern(pattern))

        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]Success:[/bold green] {message}")
