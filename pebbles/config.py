"""
Configuration constants for the Pebbles game.

Settings are read from environment variables (a local .env file is loaded
first when present).
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Game Defaults
# =============================================================================

DEFAULT_PEBBLES_COUNT = int(os.getenv("PEBBLES_DEFAULT_COUNT", "15"))
DEFAULT_MAX_PEBBLES_PER_TURN = int(os.getenv("PEBBLES_DEFAULT_MAX_PER_TURN", "3"))
DEFAULT_DIFFICULTY = os.getenv("PEBBLES_DEFAULT_DIFFICULTY", "easy")

# "reference" keeps the restart/counter-turn quirks, "classic" drops them
RULES = os.getenv("PEBBLES_RULES", "reference")

# Request/reply entries kept by the session history
HISTORY_MAX_ENTRIES = int(os.getenv("PEBBLES_HISTORY_MAX_ENTRIES", "1000"))

# =============================================================================
# Randomness
# =============================================================================

def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


# Seed for the opponent's random source (unset = system entropy)
RANDOM_SEED = _optional_int(os.getenv("PEBBLES_RANDOM_SEED"))

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging with the configured level and format."""
    level_name = (level or LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level_name,
        format=LOG_FORMAT
    )
