"""Game logic for the Pebbles game"""

from .engine import GameEngine
from .random_source import RandomSource, SystemRandomSource
from .rules import ClassicRules, RulesValidator, get_rules
from .strategy import select_opponent_move

__all__ = [
    "GameEngine",
    "RandomSource",
    "SystemRandomSource",
    "RulesValidator",
    "ClassicRules",
    "get_rules",
    "select_opponent_move",
]
