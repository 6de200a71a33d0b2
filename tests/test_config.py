"""
Dashboard configuration: defaults, validation and PULSE_* environment loading.
"""
import logging
from datetime import datetime, timezone

import pytest

from dotenv import find_dotenv, load_dotenv

from telemetry.config import DashboardConfig, log_level_from_env
from telemetry.errors import ConfigurationError

ENV_NAMES = [
    "PULSE_CAPACITY",
    "PULSE_TAIL_SIZE",
    "PULSE_PERIOD_MS",
    "PULSE_COUNTDOWN_INTERVAL_MS",
    "PULSE_EXPIRY_DATE",
    "PULSE_TIMEZONE",
    "PULSE_LOG_CAPACITY",
    "PULSE_MEMBERSHIP",
    "PULSE_USER_NAME",
    "PULSE_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        # setenv first so teardown also removes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestDefaults:

    def test_reference_values(self):
        config = DashboardConfig()
        assert config.capacity == 60
        assert config.tail_size == 15
        assert config.period_ms == 800
        assert config.countdown_interval_ms == 1000
        assert config.log_capacity is None
        assert config.initial_log == [("Security Checks", "Virus Free And Security Safe")]

    def test_target_instant(self):
        target = DashboardConfig().target_instant()
        assert target.timestamp() == datetime(2025, 10, 9, 23, 59, 59).timestamp()

    def test_timezone(self):
        config = DashboardConfig(expiry_date="01/01/2030", timezone="UTC")
        expected = datetime(2030, 1, 1, 23, 59, 59, tzinfo=timezone.utc)
        assert config.target_instant() == expected


class TestValidation:

    @pytest.mark.parametrize("kwargs", [
        {"capacity": 0},
        {"tail_size": -1},
        {"period_ms": 0},
        {"countdown_interval_ms": 0},
        {"period_ms": 1.5},
        {"log_capacity": 0},
        {"expiry_date": "31/02/2025"},
        {"expiry_date": "tomorrow"},
        {"timezone": "Mars/Olympus_Mons"},
    ])
    def test_rejected_at_construction(self, kwargs):
        with pytest.raises(ConfigurationError):
            DashboardConfig(**kwargs)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            DashboardConfig(capacity=-5)


class TestFromEnv:

    def test_defaults_without_env(self, clean_env):
        config = DashboardConfig.from_env(dotenv=False)
        assert config == DashboardConfig()

    def test_reads_env(self, clean_env):
        clean_env.setenv("PULSE_CAPACITY", "120")
        clean_env.setenv("PULSE_TAIL_SIZE", "30")
        clean_env.setenv("PULSE_PERIOD_MS", "250")
        clean_env.setenv("PULSE_EXPIRY_DATE", "31/12/2030")
        clean_env.setenv("PULSE_LOG_CAPACITY", "50")
        clean_env.setenv("PULSE_USER_NAME", "Sam")

        config = DashboardConfig.from_env(dotenv=False)

        assert config.capacity == 120
        assert config.tail_size == 30
        assert config.period_ms == 250
        assert config.expiry_date == "31/12/2030"
        assert config.log_capacity == 50
        assert config.user_name == "Sam"

    def test_non_integer_env(self, clean_env):
        clean_env.setenv("PULSE_PERIOD_MS", "fast")
        with pytest.raises(ConfigurationError):
            DashboardConfig.from_env(dotenv=False)

    def test_invalid_env_value(self, clean_env):
        clean_env.setenv("PULSE_CAPACITY", "-1")
        with pytest.raises(ConfigurationError):
            DashboardConfig.from_env(dotenv=False)

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("PULSE_TAIL_SIZE=5\n")
        clean_env.chdir(tmp_path)

        config = DashboardConfig.from_env()

        assert config.tail_size == 5


class TestLogLevel:

    def test_default_is_info(self, clean_env):
        assert log_level_from_env() == logging.INFO

    @pytest.mark.parametrize("raw,expected", [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
    ])
    def test_named_levels(self, clean_env, raw, expected):
        clean_env.setenv("PULSE_LOG_LEVEL", raw)
        assert log_level_from_env() == expected

    def test_unknown_level_rejected(self, clean_env):
        clean_env.setenv("PULSE_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError):
            log_level_from_env()

    def test_level_from_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("PULSE_LOG_LEVEL=DEBUG\n")
        clean_env.chdir(tmp_path)

        load_dotenv(find_dotenv(usecwd=True))

        assert log_level_from_env() == logging.DEBUG
