"""
Single place to read runtime settings from the environment.
- Loads a local .env if present (dev convenience; real deployments inject env vars)
- Validates values once, so a typo fails loudly instead of silently falling back

The game rules themselves (code length, palette, attempt limit) are fixed
constants in types.py and are not configurable.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

RANDOM_SOURCES = ("local", "random_org")


@dataclass(frozen=True)
class Settings:
    random_source: str = "local"
    seed: Optional[int] = None
    random_timeout: float = 3.0
    log_level: str = "INFO"


def get_settings() -> Settings:
    # Read on every call so tests (and long-lived hosts) see env changes
    random_source = os.getenv("MASTERMIND_RANDOM_SOURCE", "local").strip().lower()
    if random_source not in RANDOM_SOURCES:
        raise RuntimeError(
            f"MASTERMIND_RANDOM_SOURCE must be one of {', '.join(RANDOM_SOURCES)}; got {random_source!r}."
        )

    seed = None
    raw_seed = os.getenv("MASTERMIND_SEED")
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise RuntimeError(f"MASTERMIND_SEED must be an integer; got {raw_seed!r}.") from None

    raw_timeout = os.getenv("MASTERMIND_RANDOM_TIMEOUT", "3.0")
    try:
        random_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"MASTERMIND_RANDOM_TIMEOUT must be a number; got {raw_timeout!r}.") from None
    if random_timeout <= 0:
        raise RuntimeError("MASTERMIND_RANDOM_TIMEOUT must be positive.")

    log_level = os.getenv("MASTERMIND_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"MASTERMIND_LOG_LEVEL is not a logging level: {log_level!r}.")

    return Settings(
        random_source=random_source,
        seed=seed,
        random_timeout=random_timeout,
        log_level=log_level,
    )
