"""Message models exchanged with a Pebbles session"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from pebbles.types.game import DifficultyLevel, GameState, PebblesEvent, U32_MAX


class Initialize(BaseModel):
    """Start a new game"""
    action: Literal["initialize"] = "initialize"
    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)
    difficulty: DifficultyLevel = Field(DifficultyLevel.EASY)


class Turn(BaseModel):
    """User removes `amount` pebbles"""
    action: Literal["turn"] = "turn"
    amount: int = Field(..., ge=0, le=U32_MAX)


class GiveUp(BaseModel):
    """User concedes the current game"""
    action: Literal["give_up"] = "give_up"


class Restart(BaseModel):
    """Replace the current game with fresh parameters"""
    action: Literal["restart"] = "restart"
    pebbles_count: int = Field(..., ge=0, le=U32_MAX)
    max_pebbles_per_turn: int = Field(..., ge=0, le=U32_MAX)
    difficulty: DifficultyLevel = Field(DifficultyLevel.EASY)


class QueryState(BaseModel):
    """Read the current game state without changing it"""
    action: Literal["query_state"] = "query_state"


PebblesAction = Annotated[
    Union[Initialize, Turn, GiveUp, Restart, QueryState],
    Field(discriminator="action"),
]


class ErrorType(str, Enum):
    """Named failures reported by a session"""
    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_MOVE = "invalid_move"
    GAME_OVER = "game_over"
    NOT_INITIALIZED = "not_initialized"
    RANDOMNESS_UNAVAILABLE = "randomness_unavailable"
    MALFORMED_MESSAGE = "malformed_message"
    UNKNOWN_ERROR = "unknown_error"


class ErrorInfo(BaseModel):
    """Description of a failed request"""
    error_type: ErrorType
    message: str


class SessionReply(BaseModel):
    """Reply to a single message"""
    ok: bool = Field(True, description="Whether the request was applied")
    event: Optional[PebblesEvent] = Field(None, description="Event emitted by the request, if any")
    state: Optional[GameState] = Field(None, description="Game state after the request")
    error: Optional[ErrorInfo] = None
