"""
Tests for configuration loading.
"""

import pytest

from networkdays.config.manager import ConfigManager
from networkdays.core.calculator import WorkdayCalculator
from networkdays.data.schemas import Config, DateSystem


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove NETWORKDAYS_* overrides from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a nested YAML configuration file."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "dates:\n"
        "  system: 1904\n"
        "holidays:\n"
        "  country: DE\n"
        "  subdivision: HH\n"
        "  language: de\n"
        "output:\n"
        "  format: csv\n"
        "  directory: out\n"
        "api:\n"
        "  port: 9001\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    return str(path)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_default_settings_file(self):
        config = ConfigManager().load_config()

        assert config.date_system == DateSystem.SYSTEM_1900
        assert config.holiday_country is None
        assert config.api_port == 8000
        assert config.log_level == "INFO"
        assert config.output_format == "console"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml")).load_config()

        assert config == Config()

    def test_nested_yaml(self, config_file):
        config = ConfigManager(config_file).load_config()

        assert config.date_system == DateSystem.SYSTEM_1904
        assert config.use_1904_windowing is True
        assert config.holiday_country == "DE"
        assert config.holiday_subdivision == "HH"
        assert config.holiday_language == "de"
        assert config.output_format == "csv"
        assert config.output_directory == "out"
        assert config.api_port == 9001
        assert config.log_level == "DEBUG"

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("NETWORKDAYS_DATE_SYSTEM", "1900")
        monkeypatch.setenv("NETWORKDAYS_API_PORT", "9100")
        monkeypatch.setenv("NETWORKDAYS_HOLIDAY_COUNTRY", "US")

        config = ConfigManager(config_file).load_config()

        assert config.date_system == DateSystem.SYSTEM_1900
        assert config.api_port == 9100
        assert config.holiday_country == "US"

    def test_invalid_env_value_is_skipped(self, config_file, monkeypatch):
        monkeypatch.setenv("NETWORKDAYS_API_PORT", "not-a-port")

        config = ConfigManager(config_file).load_config()

        assert config.api_port == 9001

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("dates:\n  system: 2000\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("dates: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            ConfigManager(str(path)).load_config()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("NETWORKDAYS_LOG_LEVEL", "chatty")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager().load_config()

    def test_invalid_output_format(self, monkeypatch):
        monkeypatch.setenv("NETWORKDAYS_OUTPUT_FORMAT", "pdf")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager().load_config()

    def test_save_and_reload(self, config_file, tmp_path):
        manager = ConfigManager(config_file)
        config = manager.load_config()
        output_path = str(tmp_path / "saved" / "settings.yaml")

        manager.save_config(config, output_path)

        assert ConfigManager(output_path).load_config() == config

    def test_calculator_from_config(self, config_file):
        config = ConfigManager(config_file).load_config()

        calculator = WorkdayCalculator.from_config(config)

        assert calculator.converter.date_system == "1904"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
