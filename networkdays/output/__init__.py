"""
Output formatting and export functionality.
"""

from networkdays.output.formatter import ConsoleFormatter
from networkdays.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
