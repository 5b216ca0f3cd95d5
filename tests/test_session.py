"""Tests for the session message boundary."""

import json

import pytest

from pebbles.config import HISTORY_MAX_ENTRIES
from pebbles.game.engine import GameEngine
from pebbles.logging.storage import GameLogger
from pebbles.session import GameSession
from pebbles.testing.fixed_random import FailingRandomSource, FixedSequenceRandomSource
from pebbles.types.game import CounterTurn, DifficultyLevel, Player, Won
from pebbles.types.messages import ErrorType, GiveUp, Initialize, QueryState, Restart, Turn


@pytest.fixture
def session():
    return GameSession(GameEngine(random_source=FixedSequenceRandomSource([3, 1, 2])))


def _init(session, count=20, max_per_turn=5, difficulty="easy"):
    return session.handle({
        "action": "initialize",
        "pebbles_count": count,
        "max_pebbles_per_turn": max_per_turn,
        "difficulty": difficulty,
    })


def test_initialize_replies_with_state(session):
    reply = _init(session)

    assert reply.ok
    assert reply.event is None
    assert reply.state.pebbles_remaining == 20
    assert reply.state.difficulty == DifficultyLevel.EASY


def test_initialize_rejection_is_textual(session):
    reply = _init(session, count=5, max_per_turn=5)

    assert not reply.ok
    assert reply.error.error_type == ErrorType.INVALID_PARAMETERS
    assert "must be greater than" in reply.error.message
    assert reply.state is None


def test_turn_reply_carries_event_and_state(session):
    _init(session)

    reply = session.handle(Turn(amount=2))

    assert reply.ok
    assert reply.event == CounterTurn(amount=2)
    assert reply.state.pebbles_remaining == 15


@pytest.mark.parametrize("amount", [0, 6])
def test_invalid_turn_is_echoed_as_counter_turn(session, amount):
    _init(session)

    reply = session.handle(Turn(amount=amount))

    assert not reply.ok
    assert reply.error.error_type == ErrorType.INVALID_MOVE
    assert reply.event == CounterTurn(amount=amount)
    assert reply.state.pebbles_remaining == 20
    assert reply.state.winner is None


def test_give_up_and_restart_replies(session):
    _init(session)

    reply = session.handle(GiveUp())
    assert reply.event == Won(player=Player.PROGRAM)
    assert reply.state.pebbles_remaining == 0

    reply = session.handle(Restart(pebbles_count=20, max_pebbles_per_turn=5, difficulty="hard"))
    assert reply.ok
    assert reply.event == Won(player=Player.PROGRAM)
    assert reply.state.difficulty == DifficultyLevel.HARD
    assert reply.state.winner == Player.PROGRAM


def test_turn_after_game_over_reports_game_over(session):
    _init(session)
    session.handle(GiveUp())

    reply = session.handle(Turn(amount=2))

    assert not reply.ok
    assert reply.error.error_type == ErrorType.GAME_OVER
    assert reply.event is None


def test_query_state_is_read_only(session):
    _init(session)
    session.handle(Turn(amount=2))

    first = session.handle(QueryState())
    second = session.handle(QueryState())

    assert first.ok and second.ok
    assert first.state == second.state
    assert first.state.pebbles_remaining == 15


def test_messages_before_initialize_are_rejected(session):
    for message in (QueryState(), Turn(amount=1), GiveUp()):
        reply = session.handle(message)
        assert not reply.ok
        assert reply.error.error_type == ErrorType.NOT_INITIALIZED


def test_randomness_failure_is_reported():
    session = GameSession(GameEngine(random_source=FailingRandomSource()))
    _init(session)

    reply = session.handle(Turn(amount=2))

    assert not reply.ok
    assert reply.error.error_type == ErrorType.RANDOMNESS_UNAVAILABLE
    assert reply.state.pebbles_remaining == 20


@pytest.mark.parametrize("raw", [
    "not json",
    '{"action": "dance"}',
    '{"action": "turn"}',
    '{"action": "turn", "amount": -1}',
    '{"action": "initialize", "pebbles_count": 20, "max_pebbles_per_turn": 5, "difficulty": "expert"}',
])
def test_malformed_messages(session, raw):
    reply = session.handle(raw)

    assert not reply.ok
    assert reply.error.error_type == ErrorType.MALFORMED_MESSAGE


def test_json_round_trip_preserves_field_names(session):
    init_reply = json.loads(session.handle_json(
        '{"action": "initialize", "pebbles_count": 20, "max_pebbles_per_turn": 5, "difficulty": "easy"}'
    ))
    assert init_reply["ok"] is True
    assert init_reply["state"] == {
        "pebbles_count": 20,
        "max_pebbles_per_turn": 5,
        "difficulty": "easy",
        "pebbles_remaining": 20,
        "first_player": "user",
        "winner": None,
    }

    turn_reply = json.loads(session.handle_json('{"action": "turn", "amount": 2}'))
    assert turn_reply["event"] == {"event": "counter_turn", "amount": 2}

    give_up_reply = json.loads(session.handle_json('{"action": "give_up"}'))
    assert give_up_reply["event"] == {"event": "won", "player": "program"}
    assert give_up_reply["state"]["winner"] == "program"


def test_history_records_each_exchange(session):
    _init(session)
    session.handle(Turn(amount=0))
    session.handle(Turn(amount=2))

    history = session.storage.get_history()
    assert [entry["action"] for entry in history] == ["initialize", "turn", "turn"]
    assert history[1]["error"] == "invalid_move"
    assert history[2]["event"] == {"event": "counter_turn", "amount": 2}
    assert history[2]["pebbles_remaining"] == 15
    assert len(session.storage.get_history("turn")) == 2


def test_parse_message_accepts_models_and_dicts():
    model = Initialize(pebbles_count=10, max_pebbles_per_turn=2)

    assert GameSession.parse_message(model) is model
    assert GameSession.parse_message({"action": "give_up"}) == GiveUp()


def test_history_is_capped_by_default():
    storage = GameLogger()
    assert storage.max_entries == HISTORY_MAX_ENTRIES

    session = GameSession(GameEngine(random_source=FixedSequenceRandomSource([])), storage)
    for _ in range(HISTORY_MAX_ENTRIES + 5):
        session.handle(QueryState())

    assert len(storage.get_history()) == HISTORY_MAX_ENTRIES


def test_history_cap_drops_oldest_entries(session):
    session.storage = GameLogger(max_entries=2)
    _init(session)
    session.handle(Turn(amount=2))
    session.handle(GiveUp())

    assert [entry["action"] for entry in session.storage.get_history()] == ["turn", "give_up"]
