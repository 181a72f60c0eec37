# test_config.py

import logging
import pytest

from calc_analyzer.config import Settings, load_settings, configure_logging
from calc_analyzer.errors import CalculatorError, ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CALC_PLAIN_INPUT", raising=False)


def test_defaults():
    assert load_settings([]) == Settings(log_level="WARNING", plain_input=False)


def test_environment_values(monkeypatch):
    monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("CALC_PLAIN_INPUT", "yes")
    settings = load_settings([])
    assert settings.log_level == "DEBUG"
    assert settings.plain_input is True


def test_command_line_overrides_environment(monkeypatch):
    monkeypatch.setenv("CALC_LOG_LEVEL", "ERROR")
    settings = load_settings(["--log-level", "info", "--plain"])
    assert settings.log_level == "INFO"
    assert settings.plain_input is True


@pytest.mark.parametrize("value", ["0", "false", "", "off"])
def test_plain_input_falsy_values(monkeypatch, value):
    monkeypatch.setenv("CALC_PLAIN_INPUT", value)
    assert load_settings([]).plain_input is False


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv("CALC_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError) as e:
        load_settings([])
    assert "Unknown log level" in str(e.value)
    assert isinstance(e.value, CalculatorError)


def test_configure_logging_sets_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging("DEBUG")
    assert calls["level"] == logging.DEBUG
    assert "%(levelname)s" in calls["format"]
