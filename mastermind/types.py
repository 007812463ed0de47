"""
Labels and fixed constants for the game.
"""

from enum import Enum, IntEnum
from typing import Literal

CODE_SIZE = 4      # colors per code
COLOR_COUNT = 6    # size of the palette
GAME_TRY = 10      # guesses allowed before the game is lost


class Color(IntEnum):
    # The value is the stable index used by the scoring tables (0 -> 5)
    BLACK = 0
    WHITE = 1
    YELLOW = 2
    BLUE = 3
    RED = 4
    GREEN = 5

    @property
    def initial(self) -> str:
        return COLOR_INITIALS[self]


# Black takes "K" so it does not collide with Blue
COLOR_INITIALS = {
    Color.BLACK: "K",
    Color.WHITE: "W",
    Color.YELLOW: "Y",
    Color.BLUE: "B",
    Color.RED: "R",
    Color.GREEN: "G",
}


class GameResult(str, Enum):
    WIN = "win"
    LOSE = "lose"


GameStatus = Literal["in_progress", "won", "lost"]
