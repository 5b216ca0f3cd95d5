"""
Error Handler for the Pebbles game.

This module defines the named failures raised by the game engine and the
helpers the session uses to turn them into error replies.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from pebbles.types.game import CounterTurn
from pebbles.types.messages import ErrorInfo, ErrorType

logger = logging.getLogger(__name__)


class PebblesError(Exception):
    """Base class for game failures."""

    error_type = ErrorType.UNKNOWN_ERROR


class InvalidParametersError(PebblesError, ValueError):
    """pebbles_count must be strictly greater than max_pebbles_per_turn."""

    error_type = ErrorType.INVALID_PARAMETERS


class InvalidMoveError(PebblesError, ValueError):
    """A turn removed zero pebbles or more than the per-turn limit."""

    error_type = ErrorType.INVALID_MOVE

    def __init__(self, message: str, amount: int):
        super().__init__(message)
        self.amount = amount


class GameOverError(PebblesError):
    """A turn was requested after the game already has a winner."""

    error_type = ErrorType.GAME_OVER


class NotInitializedError(PebblesError):
    """An operation needs a game that has not been initialized yet."""

    error_type = ErrorType.NOT_INITIALIZED


class RandomnessUnavailableError(PebblesError):
    """The random source could not supply a value for the opponent move."""

    error_type = ErrorType.RANDOMNESS_UNAVAILABLE


class ErrorHandler:
    """Maps exceptions raised while handling a message to error replies."""

    @staticmethod
    def classify_error(error: Exception) -> ErrorType:
        """
        Classify an exception into an ErrorType.

        Args:
            error: The exception that occurred

        Returns:
            Classified ErrorType
        """
        if isinstance(error, PebblesError):
            return error.error_type

        # Payloads that fail model validation or JSON decoding
        if isinstance(error, (ValidationError, json.JSONDecodeError)):
            return ErrorType.MALFORMED_MESSAGE

        return ErrorType.UNKNOWN_ERROR

    @staticmethod
    def to_error_info(error: Exception) -> ErrorInfo:
        """Build the error description sent back to the caller."""
        error_type = ErrorHandler.classify_error(error)
        if error_type == ErrorType.UNKNOWN_ERROR:
            logger.error(f"Unexpected error: {error!r}")
        return ErrorInfo(error_type=error_type, message=str(error))

    @staticmethod
    def get_echo_event(error: Exception) -> Optional[CounterTurn]:
        """
        Get the event that accompanies a failed request.

        Rejected moves are echoed back as a counter turn carrying the
        requested amount, the same shape as a move the game accepted.
        """
        if isinstance(error, InvalidMoveError):
            return CounterTurn(amount=error.amount)
        return None
