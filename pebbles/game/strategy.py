"""Opponent move selection for the Pebbles game"""

import logging

from pebbles.game.random_source import RandomSource, draw_u32
from pebbles.types.game import DifficultyLevel

logger = logging.getLogger(__name__)


def _random_move(max_pebbles_per_turn: int, random_source: RandomSource) -> int:
    """Random draw capped at the per-turn limit. Can be 0."""
    return min(draw_u32(random_source), max_pebbles_per_turn)


def select_opponent_move(
    max_pebbles_per_turn: int,
    pebbles_remaining: int,
    difficulty: DifficultyLevel,
    random_source: RandomSource,
) -> int:
    """
    Choose how many pebbles the Program removes.

    Easy draws a random value capped at max_pebbles_per_turn. Hard takes the
    whole pile when it can, otherwise plays the forcing move that leaves a
    multiple of (max_pebbles_per_turn + 1), and falls back to the Easy draw
    when the position is already lost.

    The result is not capped at pebbles_remaining; GameEngine clamps it.

    Raises:
        RandomnessUnavailableError: if a draw was needed and failed
    """
    if difficulty == DifficultyLevel.EASY:
        return _random_move(max_pebbles_per_turn, random_source)

    if max_pebbles_per_turn >= pebbles_remaining:
        return max_pebbles_per_turn

    remainder = pebbles_remaining % (max_pebbles_per_turn + 1)
    if remainder > 0:
        logger.debug(f"Forcing move: taking {remainder} of {pebbles_remaining}")
        return remainder

    return _random_move(max_pebbles_per_turn, random_source)
