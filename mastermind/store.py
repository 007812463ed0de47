"""
In-memory store
Holds the games of one process, keyed by id, plus a session scoreboard.
Every public method takes the lock, so calls to play() on the same game are
serialized even when the host is multi-threaded.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from time import time
from typing import Any, Dict, Optional, Union
from uuid import uuid4

from .game import Game
from .random_client import RandomSource
from .schemas import Finish, Playable
from .types import GameResult

logger = logging.getLogger(__name__)


@dataclass
class Entry:
    game: Game
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)


# Scoreboard structure
@dataclass
class Stats:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_attempts: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.games_won == 0:
            return None
        return self.total_guesses_in_wins / self.games_won

    def record_finish(self, state: Finish) -> None:
        if state.result is not GameResult.WIN:
            self.games_lost += 1
            self.current_streak = 0
            return

        guesses = len(state.tries)
        self.games_won += 1
        self.current_streak += 1
        self.best_streak = max(self.best_streak, self.current_streak)
        self.total_guesses_in_wins += guesses
        if self.fastest_win_attempts is None:
            self.fastest_win_attempts = guesses
        else:
            self.fastest_win_attempts = min(self.fastest_win_attempts, guesses)


class GameStore:
    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self._entries: Dict[str, Entry] = {}
        self._lock = RLock()
        self._source = source
        self._stats = Stats()

    def create(self, secret: Any = None, source: Optional[RandomSource] = None) -> str:
        """
        Start a game and return its id. Without a secret, one is drawn from
        `source`, else the store's source, else the configured default.
        """
        if secret is None:
            game = Game.new(source or self._source)
        else:
            game = Game.new_with_secret_code(secret)
        game_id = str(uuid4())
        with self._lock:
            self._entries[game_id] = Entry(game=game)
            self._stats.games_started += 1
        logger.info("Game %s created", game_id)
        return game_id

    def get(self, game_id: str) -> Optional[Game]:
        with self._lock:
            entry = self._entries.get(game_id)
            return entry.game if entry else None

    def play(self, game_id: str, guess: Any) -> Optional[Union[Playable, Finish]]:
        with self._lock:
            entry = self._entries.get(game_id)
            if entry is None:
                return None

            was_finished = entry.game.is_finished
            state = entry.game.play(guess)
            if was_finished:
                # Extra guesses on a finished game change nothing
                return state

            entry.updated_at = time()

            # Update scoreboard exactly once, on the transition to Finish
            if isinstance(state, Finish):
                self._stats.record_finish(state)
            return state

    def discard(self, game_id: str) -> bool:
        with self._lock:
            return self._entries.pop(game_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> Stats:
        with self._lock:
            return self._stats

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = Stats()
