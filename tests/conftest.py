"""
- Keep tests independent of any developer .env / shell settings
- Provide a fixed secret, a game built on it, and a store with a seeded source
"""
import logging

import pytest

from mastermind.game import Game
import mastermind.random_client as random_client
from mastermind.random_client import LocalRandomSource
from mastermind.schemas import Code
from mastermind.store import GameStore
from mastermind.types import Color

ENV_VARS = (
    "MASTERMIND_RANDOM_SOURCE",
    "MASTERMIND_SEED",
    "MASTERMIND_RANDOM_TIMEOUT",
    "MASTERMIND_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # The configured source is built once per configuration; start each test fresh
    random_client._configured_source.cache_clear()
    yield
    random_client._configured_source.cache_clear()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # setup_logging() detaches the package logger from root; undo that after each test
    yield
    logger = logging.getLogger("mastermind")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def secret() -> Code:
    return Code.of(Color.WHITE, Color.BLUE, Color.GREEN, Color.BLACK)


@pytest.fixture
def game(secret) -> Game:
    return Game.new_with_secret_code(secret)


@pytest.fixture
def store() -> GameStore:
    return GameStore(source=LocalRandomSource(seed=7))
