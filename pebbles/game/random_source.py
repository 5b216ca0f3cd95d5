"""Randomness sources consumed by the opponent move policy"""

import random
from typing import Optional, Protocol

from pebbles.errors.handler import RandomnessUnavailableError
from pebbles.types.game import U32_MAX


class RandomSource(Protocol):
    """Anything that can hand out uniformly distributed 32-bit unsigned integers."""

    def next_u32(self) -> int:
        ...


class SystemRandomSource:
    """
    RandomSource backed by random.Random.

    Passing a seed makes the sequence reproducible; None draws from system
    entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


def draw_u32(source: RandomSource) -> int:
    """
    Draw one value from a random source.

    Any failure of the source, or a value outside the u32 range, is reported
    as RandomnessUnavailableError.
    """
    try:
        value = source.next_u32()
    except RandomnessUnavailableError:
        raise
    except Exception as e:
        raise RandomnessUnavailableError(f"Random source failed: {e}") from e

    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= U32_MAX:
        raise RandomnessUnavailableError(f"Random source returned an invalid value: {value!r}")
    return value
