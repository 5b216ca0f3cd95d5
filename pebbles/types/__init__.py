"""Data types for the Pebbles game"""

from .game import CounterTurn, DifficultyLevel, GameState, PebblesEvent, Player, Won
from .messages import (
    ErrorInfo,
    ErrorType,
    GiveUp,
    Initialize,
    PebblesAction,
    QueryState,
    Restart,
    SessionReply,
    Turn,
)

__all__ = [
    # Game types
    "DifficultyLevel",
    "Player",
    "GameState",
    "Won",
    "CounterTurn",
    "PebblesEvent",
    # Message types
    "Initialize",
    "Turn",
    "GiveUp",
    "Restart",
    "QueryState",
    "PebblesAction",
    "ErrorType",
    "ErrorInfo",
    "SessionReply",
]
