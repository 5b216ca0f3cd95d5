"""Game state models for the Pebbles game"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


class DifficultyLevel(str, Enum):
    """Opponent move policies"""
    EASY = "easy"
    HARD = "hard"


class Player(str, Enum):
    """Move originators and possible winners"""
    USER = "user"
    PROGRAM = "program"


class GameState(BaseModel):
    """Current state of the Pebbles game"""
    pebbles_count: int = Field(..., ge=0, le=U32_MAX, description="Pile size at game start")
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX, description="Inclusive per-turn removal limit")
    difficulty: DifficultyLevel = Field(DifficultyLevel.EASY)
    pebbles_remaining: int = Field(..., ge=0, le=U32_MAX, description="Pebbles left in the pile")
    first_player: Player = Field(Player.USER)
    winner: Optional[Player] = Field(None, description="Set once the pile is emptied or the user gives up")

    @property
    def is_over(self) -> bool:
        return self.winner is not None


class Won(BaseModel):
    """A player emptied the pile (or the opponent gave up)"""
    event: Literal["won"] = "won"
    player: Player


class CounterTurn(BaseModel):
    """The game continues after a turn"""
    event: Literal["counter_turn"] = "counter_turn"
    amount: int = Field(..., ge=0, le=U32_MAX)


PebblesEvent = Annotated[Union[Won, CounterTurn], Field(discriminator="event")]
