"""
Where secret codes come from.
- LocalRandomSource: Python's `random`, seedable so games can be replayed
- RandomOrgSource: real random numbers from random.org, with a clear fallback
  to the local source if anything goes wrong (no internet, timeout, bad response)

Either way the game still starts. The local source is the default.
"""

import logging
import random
from functools import lru_cache
from typing import List, Optional, Protocol

import requests

from .config import Settings, get_settings
from .schemas import Code
from .types import CODE_SIZE, COLOR_COUNT, Color

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


class RandomSource(Protocol):
    def draw(self, count: int, upper: int) -> List[int]:
        """Return `count` independent integers, each in 0..upper-1."""
        ...


class LocalRandomSource:
    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def draw(self, count: int, upper: int) -> List[int]:
        return [self._random.randrange(upper) for _ in range(count)]


class RandomOrgSource:
    def __init__(self, timeout: float = 3.0, fallback: Optional[RandomSource] = None) -> None:
        # keep network quick; if it takes too long, we just fall back
        self.timeout = timeout
        self.fallback = fallback if fallback is not None else LocalRandomSource()

    def draw(self, count: int, upper: int) -> List[int]:
        try:
            return self._fetch(count, upper)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("random.org unavailable (%s); using local randomness", exc)
            return self.fallback.draw(count, upper)

    def _fetch(self, count: int, upper: int) -> List[int]:
        params = {
            "num": count,      # how many numbers we want
            "min": 0,          # smallest allowed number
            "max": upper - 1,  # largest allowed number
            "col": 1,          # one number per line
            "base": 10,
            "format": "plain",
            "rnd": "new",      # always generate new numbers
        }
        response = requests.get(RANDOM_URL, params=params, timeout=self.timeout)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n1\n2\n
        values = [int(line) for line in response.text.splitlines() if line.strip()]

        if len(values) != count:
            raise ValueError(f"random.org returned {len(values)} values, expected {count}.")
        for value in values:
            if value < 0 or value >= upper:
                raise ValueError(f"random.org number {value} out of range 0..{upper - 1}.")
        return values


def source_from_settings(settings: Optional[Settings] = None) -> RandomSource:
    settings = settings or get_settings()
    local = LocalRandomSource(settings.seed)
    if settings.random_source == "random_org":
        return RandomOrgSource(timeout=settings.random_timeout, fallback=local)
    return local


@lru_cache(maxsize=None)
def _configured_source(settings: Settings) -> RandomSource:
    return source_from_settings(settings)


def default_source() -> RandomSource:
    """
    The source games use when none is passed in.
    Built once per configuration and then reused, so a seeded process replays
    the same sequence of secrets instead of the same secret every game.
    """
    return _configured_source(get_settings())


def random_code(source: RandomSource) -> Code:
    # Each position is drawn independently; repeated colors are allowed
    indices = source.draw(CODE_SIZE, COLOR_COUNT)
    return Code(colors=[Color(index) for index in indices])
