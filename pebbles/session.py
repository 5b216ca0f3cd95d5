"""Message boundary for a single Pebbles game session."""

import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, TypeAdapter

from pebbles.errors.handler import ErrorHandler
from pebbles.game.engine import GameEngine
from pebbles.logging.storage import GameLogger
from pebbles.types.messages import (
    GiveUp,
    Initialize,
    PebblesAction,
    QueryState,
    Restart,
    SessionReply,
    Turn,
)

logger = logging.getLogger(__name__)

_action_adapter = TypeAdapter(PebblesAction)


class GameSession:
    """
    Accepts Pebbles messages, runs them against the engine and replies.

    Messages may be action models, dicts or JSON text with an "action"
    discriminator. Every message gets a SessionReply; failures come back as
    replies with ok=False instead of raised exceptions.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        storage: Optional[GameLogger] = None
    ):
        self.engine = engine or GameEngine()
        self.storage = storage or GameLogger()

    def handle(self, message: Union[BaseModel, Dict[str, Any], str, bytes]) -> SessionReply:
        """Handle one message and return the reply."""
        action_name = "unknown"
        try:
            action = self.parse_message(message)
            action_name = action.action
            reply = self._dispatch(action)
        except Exception as e:
            logger.warning(f"Request '{action_name}' failed: {e}")
            reply = SessionReply(
                ok=False,
                event=ErrorHandler.get_echo_event(e),
                state=self.engine.get_state() if self.engine.is_initialized else None,
                error=ErrorHandler.to_error_info(e),
            )

        self.storage.log_exchange(action_name, reply)
        return reply

    def handle_json(self, text: Union[str, bytes]) -> str:
        """Handle a JSON message and return the reply as JSON."""
        return self.handle(text).model_dump_json()

    @staticmethod
    def parse_message(message: Union[BaseModel, Dict[str, Any], str, bytes]) -> PebblesAction:
        """Validate a raw message into one of the action models."""
        if isinstance(message, (Initialize, Turn, GiveUp, Restart, QueryState)):
            return message
        if isinstance(message, (str, bytes)):
            message = json.loads(message)
        if isinstance(message, BaseModel):
            message = message.model_dump()
        return _action_adapter.validate_python(message)

    def _dispatch(self, action: PebblesAction) -> SessionReply:
        if isinstance(action, Initialize):
            state = self.engine.initialize(
                action.pebbles_count,
                action.max_pebbles_per_turn,
                action.difficulty,
            )
            return SessionReply(state=state)

        if isinstance(action, Turn):
            state, event = self.engine.take_turn(action.amount)
            return SessionReply(event=event, state=state)

        if isinstance(action, GiveUp):
            state, event = self.engine.give_up()
            return SessionReply(event=event, state=state)

        if isinstance(action, Restart):
            state, event = self.engine.restart(
                action.pebbles_count,
                action.max_pebbles_per_turn,
                action.difficulty,
            )
            return SessionReply(event=event, state=state)

        if isinstance(action, QueryState):
            return SessionReply(state=self.engine.get_state())

        raise ValueError(f"Unknown action: {action!r}")
