"""In-memory history of the messages handled by a Pebbles session."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pebbles.config import HISTORY_MAX_ENTRIES
from pebbles.types.messages import SessionReply

logger = logging.getLogger(__name__)


class GameLogger:
    """Keeps the request/reply history of the single live session in memory."""

    def __init__(self, max_entries: Optional[int] = HISTORY_MAX_ENTRIES):
        """
        Initialize the game logger.

        Args:
            max_entries: Oldest entries are dropped beyond this many (None = keep all)
        """
        self.max_entries = max_entries
        self.history: List[Dict[str, Any]] = []

    def log_exchange(self, action: str, reply: SessionReply) -> None:
        """Record one handled message and the reply sent back."""
        entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "action": action,
            "ok": reply.ok,
            "event": reply.event.model_dump(mode="json") if reply.event else None,
            "pebbles_remaining": reply.state.pebbles_remaining if reply.state else None,
            "winner": reply.state.winner.value if reply.state and reply.state.winner else None,
            "error": reply.error.error_type.value if reply.error else None,
        }
        self.history.append(entry)

        if self.max_entries is not None and len(self.history) > self.max_entries:
            del self.history[: len(self.history) - self.max_entries]

        logger.debug(f"Logged {action}: {entry}")

    def get_history(self, action: Optional[str] = None) -> List[Dict[str, Any]]:
        """Copy of the recorded entries, optionally filtered by action."""
        if action is None:
            return list(self.history)
        return [entry for entry in self.history if entry["action"] == action]

    def clear(self) -> None:
        self.history.clear()
