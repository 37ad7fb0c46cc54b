"""
Configuration loading.
"""

from networkdays.config.manager import ConfigManager

__all__ = ["ConfigManager"]
