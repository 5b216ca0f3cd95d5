#!/usr/bin/env python3
"""Play a game of Pebbles against the Program in the terminal."""

import argparse
import logging
import sys
from typing import Iterable, Optional, TextIO

from pebbles import config
from pebbles.game.engine import GameEngine
from pebbles.game.random_source import SystemRandomSource
from pebbles.game.rules import get_rules
from pebbles.session import GameSession
from pebbles.types.game import CounterTurn, DifficultyLevel, Player, Won
from pebbles.types.messages import GiveUp, Initialize, Restart, SessionReply, Turn

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "give up"}
RESTART_COMMANDS = {"r", "restart"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Pebbles against the Program.")
    parser.add_argument("--count", type=int, default=config.DEFAULT_PEBBLES_COUNT,
                        help="Pebbles in the pile at the start")
    parser.add_argument("--max-per-turn", type=int, default=config.DEFAULT_MAX_PEBBLES_PER_TURN,
                        help="Most pebbles that can be removed in one turn")
    parser.add_argument("--difficulty", choices=[level.value for level in DifficultyLevel],
                        default=config.DEFAULT_DIFFICULTY)
    parser.add_argument("--seed", type=int, default=config.RANDOM_SEED,
                        help="Seed for the Program's random moves")
    parser.add_argument("--rules", choices=["reference", "classic"], default=config.RULES)
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def _describe(reply: SessionReply) -> str:
    if not reply.ok:
        return f"Rejected: {reply.error.message}"

    event = reply.event
    if isinstance(event, Won):
        return "You won!" if event.player == Player.USER else "The Program won."
    if isinstance(event, CounterTurn):
        return f"Counter turn ({event.amount}). {reply.state.pebbles_remaining} pebbles left."
    return f"{reply.state.pebbles_remaining} pebbles left."


def run_game(
    session: GameSession,
    setup: Initialize,
    lines: Iterable[str],
    out: TextIO,
) -> int:
    """
    Drive one session from an iterable of input lines.

    Returns:
        0 once a game has been decided (a restart under the reference
        rules decides it for the Program), 1 if input ran out first,
        2 if the game could not be started
    """
    reply = session.handle(setup)
    if not reply.ok:
        print(f"Cannot start game: {reply.error.message}", file=out)
        return 2

    print(
        f"{setup.pebbles_count} pebbles, take 1-{setup.max_pebbles_per_turn} per turn "
        f"({setup.difficulty.value}). Last pebble wins.",
        file=out,
    )

    for line in lines:
        command = line.strip().lower()
        if not command:
            continue

        if command in QUIT_COMMANDS:
            reply = session.handle(GiveUp())
        elif command in RESTART_COMMANDS:
            reply = session.handle(Restart(
                pebbles_count=setup.pebbles_count,
                max_pebbles_per_turn=setup.max_pebbles_per_turn,
                difficulty=setup.difficulty,
            ))
        elif command.isdigit():
            reply = session.handle(Turn(amount=int(command)))
        else:
            print("Enter a number of pebbles, 'r' to restart or 'q' to give up.", file=out)
            continue

        print(_describe(reply), file=out)

        if not reply.ok:
            logger.info(f"Command '{command}' rejected: {reply.error.error_type.value}")

        # Under the reference rules a restart hands the game to the Program
        if reply.ok and isinstance(reply.event, Won):
            logger.info(f"Game finished after '{command}', {reply.event.player.value} won")
            return 0

    return 1


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    # Defaults from the environment bypass argparse choices
    try:
        config.configure_logging(args.log_level)
        rules = get_rules(args.rules)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    engine = GameEngine(
        random_source=SystemRandomSource(args.seed),
        rules=rules,
    )
    session = GameSession(engine)

    try:
        setup = Initialize(
            pebbles_count=args.count,
            max_pebbles_per_turn=args.max_per_turn,
            difficulty=args.difficulty,
        )
    except ValueError as e:
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 2

    return run_game(session, setup, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
