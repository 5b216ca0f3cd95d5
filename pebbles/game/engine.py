"""Main game engine for the Pebbles game"""

from typing import Optional
import logging

from pebbles.errors.handler import (
    GameOverError,
    InvalidMoveError,
    InvalidParametersError,
    NotInitializedError,
)
from pebbles.game.random_source import RandomSource, SystemRandomSource
from pebbles.game.rules import RulesValidator
from pebbles.game.strategy import select_opponent_move
from pebbles.types.game import CounterTurn, DifficultyLevel, GameState, PebblesEvent, Player, Won

logger = logging.getLogger(__name__)


class GameEngine:
    """Core game engine that owns the single game state and resolves turns."""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        rules: Optional[RulesValidator] = None
    ):
        self.random_source = random_source or SystemRandomSource()
        self.rules_validator = rules or RulesValidator()
        self._state: Optional[GameState] = None

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    def initialize(
        self,
        pebbles_count: int,
        max_pebbles_per_turn: int,
        difficulty: DifficultyLevel = DifficultyLevel.EASY
    ) -> GameState:
        """Create a new game, replacing any game already in progress."""
        new_state = self._build_state(pebbles_count, max_pebbles_per_turn, difficulty)

        if self._state is not None:
            logger.info("Replacing existing game with a new one")
        self._state = new_state

        logger.info(
            f"Initialized game: {pebbles_count} pebbles, "
            f"max {max_pebbles_per_turn} per turn, {new_state.difficulty.value}"
        )
        return self.get_state()

    def restart(
        self,
        pebbles_count: int,
        max_pebbles_per_turn: int,
        difficulty: DifficultyLevel = DifficultyLevel.EASY
    ) -> tuple[GameState, Optional[PebblesEvent]]:
        """
        Replace the current game with a fresh one.

        The winner of the fresh state comes from the ruleset; the reference
        rules hand the restarted game to the Program straight away.

        Returns:
            Tuple of (new game state, Won event or None when no winner is set)
        """
        new_state = self._build_state(pebbles_count, max_pebbles_per_turn, difficulty)
        new_state.winner = self.rules_validator.restart_winner()
        self._state = new_state

        logger.info(
            f"Restarted game: {pebbles_count} pebbles, "
            f"max {max_pebbles_per_turn} per turn, {new_state.difficulty.value}"
        )

        event = Won(player=new_state.winner) if new_state.winner is not None else None
        return self.get_state(), event

    def take_turn(self, requested_count: int) -> tuple[GameState, PebblesEvent]:
        """
        Apply the User's move and answer with the Program's counter move.

        The opponent's move is chosen before anything is written, so a
        failing random source leaves the state exactly as it was.

        Raises:
            NotInitializedError: no game has been started
            GameOverError: the game already has a winner
            InvalidMoveError: amount is 0, above the per-turn limit or above the pile
            RandomnessUnavailableError: the opponent move could not be drawn
        """
        state = self._require_state()

        if state.is_over:
            raise GameOverError(f"Game is over, {state.winner.value} won")

        is_valid, error_msg = self.rules_validator.validate_turn(state, requested_count)
        if not is_valid:
            logger.warning(f"Rejected move of {requested_count}: {error_msg}")
            raise InvalidMoveError(error_msg, requested_count)

        after_user = state.pebbles_remaining - requested_count
        if after_user == 0:
            state.pebbles_remaining = 0
            state.winner = Player.USER
            logger.info("User took the last pebble and won")
            return self.get_state(), Won(player=Player.USER)

        program_count = select_opponent_move(
            state.max_pebbles_per_turn,
            after_user,
            state.difficulty,
            self.random_source,
        )
        if program_count > after_user:
            logger.warning(
                f"Opponent chose {program_count} with only {after_user} left, clamping"
            )
            program_count = after_user

        state.pebbles_remaining = after_user - program_count
        logger.info(
            f"User took {requested_count}, Program took {program_count}, "
            f"{state.pebbles_remaining} remaining"
        )

        if state.pebbles_remaining == 0:
            state.winner = Player.PROGRAM
            logger.info("Program took the last pebble and won")
            return self.get_state(), Won(player=Player.PROGRAM)

        amount = self.rules_validator.counter_turn_amount(requested_count, program_count)
        return self.get_state(), CounterTurn(amount=amount)

    def give_up(self) -> tuple[GameState, PebblesEvent]:
        """User concedes; the Program wins regardless of the current state."""
        state = self._require_state()
        state.winner = Player.PROGRAM
        state.pebbles_remaining = 0

        logger.info("User gave up, Program wins")
        return self.get_state(), Won(player=Player.PROGRAM)

    def get_state(self) -> GameState:
        """Snapshot of the current state. Never changes the stored game."""
        return self._require_state().model_copy(deep=True)

    def _require_state(self) -> GameState:
        if self._state is None:
            raise NotInitializedError("Game has not been initialized")
        return self._state

    def _build_state(
        self,
        pebbles_count: int,
        max_pebbles_per_turn: int,
        difficulty: DifficultyLevel
    ) -> GameState:
        difficulty = DifficultyLevel(difficulty)
        is_valid, error_msg = self.rules_validator.validate_parameters(
            pebbles_count, max_pebbles_per_turn
        )
        if not is_valid:
            logger.warning(f"Invalid game parameters: {error_msg}")
            raise InvalidParametersError(error_msg)

        return GameState(
            pebbles_count=pebbles_count,
            max_pebbles_per_turn=max_pebbles_per_turn,
            difficulty=difficulty,
            pebbles_remaining=pebbles_count,
            first_player=Player.USER,
            winner=None,
        )
