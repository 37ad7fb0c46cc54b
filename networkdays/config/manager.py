"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from networkdays.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    ENV_MAPPINGS = {
        "NETWORKDAYS_DATE_SYSTEM": "date_system",
        "NETWORKDAYS_HOLIDAY_COUNTRY": "holiday_country",
        "NETWORKDAYS_HOLIDAY_SUBDIVISION": "holiday_subdivision",
        "NETWORKDAYS_HOLIDAY_LANGUAGE": "holiday_language",
        "NETWORKDAYS_OUTPUT_FORMAT": "output_format",
        "NETWORKDAYS_OUTPUT_DIRECTORY": "output_directory",
        "NETWORKDAYS_API_HOST": "api_host",
        "NETWORKDAYS_API_PORT": ("api_port", int),
        "NETWORKDAYS_LOG_LEVEL": "log_level",
    }

    # (YAML section, key) -> Config field
    SECTION_FIELDS = {
        ("dates", "system"): "date_system",
        ("holidays", "country"): "holiday_country",
        ("holidays", "subdivision"): "holiday_subdivision",
        ("holidays", "language"): "holiday_language",
        ("output", "format"): "output_format",
        ("output", "directory"): "output_directory",
        ("api", "host"): "api_host",
        ("api", "port"): "api_port",
        ("logging", "level"): "log_level",
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        return str(Path(__file__).parent / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            return Config(**config_dict)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}, using defaults")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

        logger.debug(f"Loaded config from: {config_path}")
        return self._flatten_config(config) if config else {}

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}
        for (section, key), field in self.SECTION_FIELDS.items():
            values = config.get(section) or {}
            if key in values:
                result[field] = values[key]

        if "date_system" in result:
            result["date_system"] = str(result["date_system"])
        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply NETWORKDAYS_* environment variable overrides to configuration.

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        for env_var, mapping in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if isinstance(mapping, tuple):
                config_key, type_converter = mapping
                try:
                    config_dict[config_key] = type_converter(env_value)
                except ValueError:
                    logger.warning(f"Ignoring invalid value for {env_var}: {env_value!r}")
            else:
                config_dict[mapping] = env_value

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "dates": {
                "system": config.date_system.value,
            },
            "holidays": {
                "country": config.holiday_country,
                "subdivision": config.holiday_subdivision,
                "language": config.holiday_language,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
