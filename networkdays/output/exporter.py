"""
Export functionality for workday calculation results.
"""

import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

from networkdays.data.schemas import NetworkDaysResult, WorkdayResult

Result = Union[NetworkDaysResult, WorkdayResult]


class ResultExporter:
    """Exports workday calculation results to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        output_path = Path(self.output_directory)
        output_path.mkdir(parents=True, exist_ok=True)
        return output_path

    def _generate_filename(self, prefix: str, extension: str) -> str:
        """Generate a filename with timestamp."""
        timestamp = datetime.now().strftime(self.timestamp_format)
        return f"{prefix}_{timestamp}.{extension}"

    def _resolve_path(self, result: Result, extension: str, output_path: Optional[str]) -> Path:
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path
        prefix = "networkdays" if isinstance(result, NetworkDaysResult) else "workday"
        return self._ensure_output_dir() / self._generate_filename(prefix, extension)

    def export_json(self, result: Result, output_path: Optional[str] = None) -> str:
        """
        Export result to JSON file.

        Args:
            result: Result to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(result, "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self._result_to_dict(result), f, indent=2, ensure_ascii=False)

        return str(file_path)

    def export_csv(self, result: Result, output_path: Optional[str] = None) -> str:
        """
        Export result to CSV file, one header row and one data row.

        Args:
            result: Result to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path(result, "csv", output_path)
        row = self._result_to_row(result)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(list(row.keys()))
            writer.writerow(list(row.values()))

        return str(file_path)

    def export_both(self, result: Result) -> Tuple[str, str]:
        """
        Export result to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        json_path = self.export_json(result)
        csv_path = self.export_csv(result)
        return json_path, csv_path

    def _result_to_row(self, result: Result) -> dict:
        if isinstance(result, NetworkDaysResult):
            return {
                "Start": result.start,
                "End": result.end,
                "Start Date": result.start_date.isoformat(),
                "End Date": result.end_date.isoformat(),
                "Calendar Days": result.calendar_days,
                "Weekend Days": result.weekend_days,
                "Holidays Count": result.holidays_count,
                "Working Days": result.working_days,
                "Date System": result.date_system.value,
            }
        return {
            "Start": result.start,
            "Workdays": result.workdays,
            "Result": result.result,
            "Start Date": result.start_date.isoformat(),
            "Result Date": result.result_date.isoformat(),
            "Holidays Count": result.holidays_count,
            "Date System": result.date_system.value,
        }

    def _result_to_dict(self, result: Result) -> dict:
        """
        Convert a result to a JSON-serializable dictionary.

        Args:
            result: Result to convert.

        Returns:
            Dictionary representation.
        """
        metadata = {
            "date_system": result.date_system.value,
            "calculation_timestamp": result.calculation_timestamp.isoformat(),
        }
        if isinstance(result, NetworkDaysResult):
            return {
                "start": result.start,
                "end": result.end,
                "start_date": result.start_date.isoformat(),
                "end_date": result.end_date.isoformat(),
                "calculation": {
                    "calendar_days": result.calendar_days,
                    "weekend_days": result.weekend_days,
                    "holidays_count": result.holidays_count,
                    "working_days": result.working_days,
                },
                "metadata": metadata,
            }
        return {
            "start": result.start,
            "workdays": result.workdays,
            "result": result.result,
            "start_date": result.start_date.isoformat(),
            "result_date": result.result_date.isoformat(),
            "holidays_count": result.holidays_count,
            "metadata": metadata,
        }
