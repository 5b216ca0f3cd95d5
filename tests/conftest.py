"""Shared test fixtures for Pebbles game logic."""

from collections.abc import Callable
from typing import Iterable, Optional

import pytest

from pebbles.game.engine import GameEngine
from pebbles.game.rules import RulesValidator
from pebbles.testing.fixed_random import FixedSequenceRandomSource
from pebbles.types.game import DifficultyLevel, GameState, Player


@pytest.fixture
def game_state_factory() -> Callable[..., GameState]:
    """Factory fixture that builds customizable game states for tests."""

    def _factory(
        *,
        pebbles_count: int = 20,
        max_pebbles_per_turn: int = 5,
        difficulty: DifficultyLevel = DifficultyLevel.EASY,
        pebbles_remaining: Optional[int] = None,
        winner: Optional[Player] = None,
    ) -> GameState:
        return GameState(
            pebbles_count=pebbles_count,
            max_pebbles_per_turn=max_pebbles_per_turn,
            difficulty=difficulty,
            pebbles_remaining=pebbles_count if pebbles_remaining is None else pebbles_remaining,
            first_player=Player.USER,
            winner=winner,
        )

    return _factory


@pytest.fixture
def engine_factory() -> Callable[..., GameEngine]:
    """Factory fixture for engines driven by a fixed random sequence."""

    def _factory(
        random_values: Iterable[int] = (),
        *,
        rules: Optional[RulesValidator] = None,
        pebbles_count: Optional[int] = None,
        max_pebbles_per_turn: int = 5,
        difficulty: DifficultyLevel = DifficultyLevel.EASY,
    ) -> GameEngine:
        engine = GameEngine(
            random_source=FixedSequenceRandomSource(random_values),
            rules=rules,
        )
        if pebbles_count is not None:
            engine.initialize(pebbles_count, max_pebbles_per_turn, difficulty)
        return engine

    return _factory
