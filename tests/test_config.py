"""
Tests for Configuration Module
"""

import pytest

from vibe_builder.config import Config, _int
from vibe_builder.errors import ConfigurationError


@pytest.fixture
def config(monkeypatch):
    """Config with known-good values, restored after the test"""
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "RULES_FILE", None)
    monkeypatch.setattr(Config, "SPECIALIST_TIMEOUT", None)
    monkeypatch.setattr(Config, "COMPLETED_HISTORY", 100)
    monkeypatch.setattr(Config, "PROGRESS_DETAIL_LIMIT", 20)
    return Config


class TestConfig:
    """Test configuration loading and validation"""

    def test_config_defaults(self, config):
        """Test default values are usable"""
        assert config.validate() is True

    def test_config_bad_log_level(self, config, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")
        with pytest.raises(ConfigurationError, match="VIBE_LOG_LEVEL"):
            config.validate()

    def test_config_missing_rules_file(self, config, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "RULES_FILE", tmp_path / "rules.json")
        with pytest.raises(ConfigurationError, match="VIBE_RULES_FILE"):
            config.validate()

    def test_config_existing_rules_file(self, config, monkeypatch, tmp_path):
        rules = tmp_path / "rules.json"
        rules.write_text("{}")
        monkeypatch.setattr(Config, "RULES_FILE", rules)
        assert config.validate() is True

    @pytest.mark.parametrize("timeout", [0, -1, float("nan")])
    def test_config_bad_timeout(self, config, monkeypatch, timeout):
        monkeypatch.setattr(Config, "SPECIALIST_TIMEOUT", timeout)
        with pytest.raises(ConfigurationError, match="VIBE_SPECIALIST_TIMEOUT"):
            config.validate()

    def test_config_reports_every_problem(self, config, monkeypatch):
        """Test validation collects all errors into one exception"""
        monkeypatch.setattr(Config, "COMPLETED_HISTORY", 0)
        monkeypatch.setattr(Config, "PROGRESS_DETAIL_LIMIT", 0)
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()

        message = str(exc_info.value)
        assert "VIBE_COMPLETED_HISTORY" in message
        assert "VIBE_PROGRESS_DETAIL_LIMIT" in message

    def test_int_setting_not_a_number(self, monkeypatch):
        """Test a non-integer value is kept for validate() to report"""
        monkeypatch.setenv("VIBE_COMPLETED_HISTORY", "lots")
        assert _int("VIBE_COMPLETED_HISTORY", 100) is None

    def test_int_setting_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("VIBE_COMPLETED_HISTORY", "  ")
        assert _int("VIBE_COMPLETED_HISTORY", 100) == 100

    def test_config_unparsed_history(self, config, monkeypatch):
        monkeypatch.setattr(Config, "COMPLETED_HISTORY", None)
        with pytest.raises(ConfigurationError, match="VIBE_COMPLETED_HISTORY must be an integer"):
            config.validate()
