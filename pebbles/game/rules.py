"""Rules validation for Pebbles game actions"""

from typing import Optional

from pebbles.types.game import GameState, Player


class RulesValidator:
    """
    Validates that game actions follow the Pebbles rules.

    Also owns the two observable quirks of the reference game, so that a
    corrected ruleset can override them:
    - restart_winner: restarting a game immediately awards it to the Program
    - counter_turn_amount: the counter turn echoes the User's own move
    """

    name = "reference"

    @staticmethod
    def validate_parameters(
        pebbles_count: int,
        max_pebbles_per_turn: int
    ) -> tuple[bool, Optional[str]]:
        """
        Check that a game can be started with these parameters.
        Returns (is_valid, error_message)
        """
        if pebbles_count <= max_pebbles_per_turn:
            return False, (
                f"pebbles_count ({pebbles_count}) must be greater than "
                f"max_pebbles_per_turn ({max_pebbles_per_turn})"
            )
        return True, None

    @staticmethod
    def validate_turn(game_state: GameState, amount: int) -> tuple[bool, Optional[str]]:
        """
        Check if the User may remove `amount` pebbles.
        Returns (is_valid, error_message)
        """
        if amount < 1:
            return False, "Must remove at least one pebble"

        if amount > game_state.max_pebbles_per_turn:
            return False, f"Cannot remove more than {game_state.max_pebbles_per_turn} pebbles per turn"

        if amount > game_state.pebbles_remaining:
            return False, f"Only {game_state.pebbles_remaining} pebbles remain"

        return True, None

    def restart_winner(self) -> Optional[Player]:
        """Winner recorded on the fresh state when a game is restarted."""
        return Player.PROGRAM

    def counter_turn_amount(self, user_amount: int, program_amount: int) -> int:
        """Payload of the CounterTurn event sent after both sides moved."""
        return user_amount


class ClassicRules(RulesValidator):
    """Rules without the reference quirks: restart starts a live game and
    the counter turn reports how many pebbles the Program removed."""

    name = "classic"

    def restart_winner(self) -> Optional[Player]:
        return None

    def counter_turn_amount(self, user_amount: int, program_amount: int) -> int:
        return program_amount


RULESETS = {
    RulesValidator.name: RulesValidator,
    ClassicRules.name: ClassicRules,
}


def get_rules(name: str) -> RulesValidator:
    """Build a ruleset by name ("reference" or "classic")."""
    try:
        return RULESETS[name]()
    except KeyError:
        raise ValueError(f"Unknown ruleset '{name}', expected one of {sorted(RULESETS)}")
