"""
The game itself: one secret code and one current state.

A game starts Playable with no tries. Each guess is scored and recorded; a
perfect guess wins at once, otherwise the GAME_TRY-th guess loses. Once
finished, the game ignores further guesses (no error) and keeps returning
the same Finish state; start a new Game to play again.

Not safe for concurrent use: a host sharing a game between callers must
serialize calls to play() (GameStore does this).
"""

import logging
from typing import Any, Optional, Union

from .engine import evaluate
from .random_client import RandomSource, default_source, random_code
from .schemas import Code, Finish, GameSnapshot, Playable, Try
from .types import CODE_SIZE, GAME_TRY, GameResult

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, secret_code: Code) -> None:
        self._secret_code = secret_code
        self._state: Union[Playable, Finish] = Playable()

    @classmethod
    def new(cls, source: Optional[RandomSource] = None) -> "Game":
        """Start a game with a random secret (source defaults to the configured one)."""
        if source is None:
            source = default_source()
        game = cls(random_code(source))
        logger.info("New game started with a random secret")
        return game

    @classmethod
    def new_with_secret_code(cls, code: Any) -> "Game":
        """Start a game with a known secret (tests, replays, puzzles)."""
        return cls(Code.parse(code))

    def get_state(self) -> Union[Playable, Finish]:
        return self._state

    @property
    def is_finished(self) -> bool:
        return isinstance(self._state, Finish)

    @property
    def attempts_left(self) -> int:
        return GAME_TRY - len(self._state.tries)

    def play(self, guess: Any) -> Union[Playable, Finish]:
        """
        Score one guess and return the new state.

        Accepts anything Code.parse does; a malformed guess raises ValueError
        before the game is touched. On a finished game this is a no-op.
        """
        guess = Code.parse(guess)
        state = self._state
        if isinstance(state, Finish):
            logger.debug("Guess %s ignored: game already finished (%s)", guess, state.result.value)
            return state

        good, bad = evaluate(self._secret_code, guess)
        tries = state.tries + (Try(code=guess, good=good, bad=bad),)
        logger.debug("Guess %d: %s scored good=%d bad=%d", len(tries), guess, good, bad)

        # Win is checked before the attempt limit: a perfect last guess still wins
        if good == CODE_SIZE:
            self._state = Finish(code=self._secret_code, result=GameResult.WIN, tries=tries)
        elif len(tries) == GAME_TRY:
            self._state = Finish(code=self._secret_code, result=GameResult.LOSE, tries=tries)
        else:
            self._state = Playable(tries=tries)

        if isinstance(self._state, Finish):
            logger.info("Game finished: %s after %d guess(es)", self._state.result.value, len(tries))
        return self._state

    def snapshot(self) -> GameSnapshot:
        state = self._state
        if isinstance(state, Finish):
            status = "won" if state.result is GameResult.WIN else "lost"
            secret = state.code
        else:
            status = "in_progress"
            secret = None
        return GameSnapshot(
            status=status,
            attempts_left=self.attempts_left,
            history=list(state.tries),
            secret=secret,
        )

    def __repr__(self) -> str:
        # Never show the secret while the game is still playable
        return f"<Game {type(self._state).__name__} tries={len(self._state.tries)}>"
