"""Tests for the configuration system."""

from datetime import date

import pytest

from elective_share.config import ElectiveShareConfig, RulesConfig, load_config
from elective_share.exceptions import ConfigurationError, ElectiveShareError
from elective_share.logging_config import configure_from_config, configure_logging


class TestRulesConfig:
    """Test suite for RulesConfig."""

    def test_default_values(self):
        config = RulesConfig()

        assert config.deadline_months == 6
        assert config.urgent_threshold_days == 30
        assert config.procedural_cutover_date == date(2026, 1, 1)

    def test_deadline_months_validation(self):
        with pytest.raises(ValueError):
            RulesConfig(deadline_months=0)

        with pytest.raises(ValueError):
            RulesConfig(deadline_months=25)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ELECTIVE_SHARE_RULES_DEADLINE_MONTHS", "9")
        monkeypatch.setenv("ELECTIVE_SHARE_RULES_URGENT_THRESHOLD_DAYS", "14")
        monkeypatch.setenv("ELECTIVE_SHARE_RULES_PROCEDURAL_CUTOVER_DATE", "2027-07-01")

        config = RulesConfig()

        assert config.deadline_months == 9
        assert config.urgent_threshold_days == 14
        assert config.procedural_cutover_date == date(2027, 7, 1)


class TestElectiveShareConfig:
    """Test suite for ElectiveShareConfig."""

    def test_default_values(self):
        config = ElectiveShareConfig()

        assert config.env == "development"
        assert config.log_level == "INFO"
        assert config.json_logs is False
        assert isinstance(config.rules, RulesConfig)
        assert not config.is_production

    def test_normalizes_values(self):
        config = ElectiveShareConfig(env=" Production ", log_level="debug")

        assert config.env == "production"
        assert config.is_production
        assert config.log_level == "DEBUG"
        assert config.is_debug

    def test_rejects_unknown_env(self):
        with pytest.raises(ValueError):
            ElectiveShareConfig(env="qa")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError):
            ElectiveShareConfig(log_level="VERBOSE")

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ELECTIVE_SHARE_ENV", "staging")
        monkeypatch.setenv("ELECTIVE_SHARE_LOG_LEVEL", "warning")
        monkeypatch.setenv("ELECTIVE_SHARE_JSON_LOGS", "true")

        config = ElectiveShareConfig()

        assert config.env == "staging"
        assert config.log_level == "WARNING"
        assert config.json_logs is True


class TestLoadConfig:
    """Test suite for load_config."""

    def test_returns_config(self):
        assert load_config(env="test").env == "test"

    def test_wraps_validation_errors(self, monkeypatch):
        monkeypatch.setenv("ELECTIVE_SHARE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        error = exc_info.value
        assert isinstance(error, ElectiveShareError)
        assert error.config_key == "log_level"
        assert error.details["actual"] == "LOUD"
        assert "DEBUG" in error.expected
        assert error.details["expected"] == error.expected
        assert error.recoverable is False


class TestLogging:
    def test_configure_logging_accepts_levels(self):
        configure_logging("debug")
        configure_logging("INFO", json_logs=True)

    def test_configure_from_config(self):
        configure_from_config(ElectiveShareConfig(log_level="WARNING", json_logs=True))
