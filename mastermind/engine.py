"""
Pure game logic (no state, no I/O).
We compute two feedback numbers for each guess:
- good: how many positions hold exactly the right color
- bad: how many of the remaining colors appear in the secret at another position

Duplicates are allowed in the secret and in the guess. A color already credited
as "good" is never credited again as "bad".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from .types import COLOR_COUNT

if TYPE_CHECKING:
    from .schemas import Code


def evaluate(source: Code, guess: Code) -> Tuple[int, int]:
    """
    Example:
      source = [White, Blue, Green, Black]
      guess  = [Black, White, Blue, Green]
      good = 0  (no position matches)
      bad  = 4  (every color is present, just shifted)
      Returns a tuple: (good, bad)
    """
    good = 0

    # 1. One pass over the positions: exact matches count as good,
    #    everything else goes into per-color leftover tables
    leftover_source = [0] * COLOR_COUNT
    leftover_guess = [0] * COLOR_COUNT
    for expected, actual in zip(source.colors, guess.colors):
        if expected == actual:
            good += 1
        else:
            leftover_source[int(expected)] += 1
            leftover_guess[int(actual)] += 1

    # 2. Overlap of the leftovers is the sum of the smaller count for each color
    bad = 0
    for color in range(COLOR_COUNT):
        bad += min(leftover_source[color], leftover_guess[color])

    return (good, bad)


def feedback_message(good: int, bad: int) -> str:
    # Never says which colors are right, only how many
    if good == 0 and bad == 0:
        return "all incorrect"
    return f"{good} good and {bad} bad"
