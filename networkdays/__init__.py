"""
Workday arithmetic on spreadsheet serial dates (NETWORKDAYS / WORKDAY).
"""

__version__ = "0.1.0"
