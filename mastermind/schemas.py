"""
Pydantic models for everything a game hands back to its caller.
- Code: the secret or a guess, validated on construction
- Try: one guess plus its feedback
- Playable / Finish: the two game states, tagged by `kind`
- GameSnapshot: flat read-only view for a host (secret hidden until the end)

Every model is frozen: a state handed out by a game never changes afterwards.
"""

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from .engine import feedback_message
from .types import CODE_SIZE, COLOR_INITIALS, GAME_TRY, Color, GameResult, GameStatus

_COLOR_BY_INITIAL = {initial: color for color, initial in COLOR_INITIALS.items()}


# 1. A fixed-length sequence of colors
class Code(BaseModel):
    model_config = ConfigDict(frozen=True)

    colors: Tuple[Color, ...] = Field(..., description=f"Exactly {CODE_SIZE} colors, in order")

    @field_validator("colors")
    @classmethod
    def validate_length(cls, colors: Tuple[Color, ...]) -> Tuple[Color, ...]:
        # Colors themselves are checked by the enum; only the length is left
        if len(colors) != CODE_SIZE:
            raise ValueError(f"A code must have exactly {CODE_SIZE} colors, got {len(colors)}.")
        return colors

    @classmethod
    def of(cls, *colors: Color) -> "Code":
        return cls(colors=colors)

    @classmethod
    def parse(cls, value: Any) -> "Code":
        """
        Accepts a Code, a sequence of colors or color indices (0..5),
        or a string of color initials such as "KWYB".
        """
        if isinstance(value, Code):
            return value
        if isinstance(value, str):
            colors = []
            for letter in value.replace(" ", "").upper():
                color = _COLOR_BY_INITIAL.get(letter)
                if color is None:
                    raise ValueError(f"Unknown color initial {letter!r}.")
                colors.append(color)
            return cls(colors=colors)
        return cls(colors=value)

    def __str__(self) -> str:
        return "".join(color.initial for color in self.colors)


# 2. One submitted guess with its feedback
class Try(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: Code = Field(..., description="The submitted guess")
    good: int = Field(..., ge=0, le=CODE_SIZE, description="Right color in the right position")
    bad: int = Field(..., ge=0, le=CODE_SIZE, description="Right color in the wrong position")

    @model_validator(mode="after")
    def validate_total(self) -> "Try":
        if self.good + self.bad > CODE_SIZE:
            raise ValueError(f"good + bad cannot exceed {CODE_SIZE}.")
        return self

    @property
    def result(self) -> Tuple[int, int]:
        return (self.good, self.bad)

    @property
    def message(self) -> str:
        return feedback_message(self.good, self.bad)


# 3. Still accepting guesses
class Playable(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["playable"] = "playable"
    tries: Tuple[Try, ...] = Field(
        default=(), max_length=GAME_TRY - 1, description="Guesses so far, oldest first"
    )


# 4. Over: the secret is revealed together with the full history
class Finish(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["finish"] = "finish"
    code: Code = Field(..., description="The revealed secret")
    result: GameResult = Field(..., description="How the game ended")
    tries: Tuple[Try, ...] = Field(
        ..., min_length=1, max_length=GAME_TRY, description="Every guess made, oldest first"
    )


State = Annotated[Union[Playable, Finish], Field(discriminator="kind")]

_state_adapter = TypeAdapter(State)


def parse_state(data: Any) -> Union[Playable, Finish]:
    """Rebuild a state from its dumped form; `kind` picks the variant."""
    return _state_adapter.validate_python(data)


# 5. What a host shows the player
class GameSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: GameStatus = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many guesses remain")
    history: List[Try] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[Code] = Field(None, description="The secret code (only revealed if game is over)")

