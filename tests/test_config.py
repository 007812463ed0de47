"""
Testing environment settings and logging setup.
"""

import logging

import pytest

from mastermind.config import get_settings
from mastermind.logger import LOGGER_NAME, setup_logging


def test_defaults():
    settings = get_settings()
    assert settings.random_source == "local"
    assert settings.seed is None
    assert settings.random_timeout == 3.0
    assert settings.log_level == "INFO"


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("MASTERMIND_RANDOM_SOURCE", "Random_Org")
    monkeypatch.setenv("MASTERMIND_SEED", "12")
    monkeypatch.setenv("MASTERMIND_RANDOM_TIMEOUT", "0.25")
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.random_source == "random_org"
    assert settings.seed == 12
    assert settings.random_timeout == 0.25
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("MASTERMIND_RANDOM_SOURCE", "dice"),
        ("MASTERMIND_SEED", "abc"),
        ("MASTERMIND_RANDOM_TIMEOUT", "soon"),
        ("MASTERMIND_RANDOM_TIMEOUT", "0"),
        ("MASTERMIND_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_fail_loudly(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match=name):
        get_settings()


def test_setup_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "WARNING")
    logger = setup_logging()
    setup_logging()

    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_setup_logging_explicit_level():
    assert setup_logging("DEBUG").level == logging.DEBUG
