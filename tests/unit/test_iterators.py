"""Unit tests for CurrentPlayerIterator."""

from __future__ import annotations

from itertools import islice

from marlcore.core.iterators import CurrentPlayerIterator
from marlcore.envs import TakeAwayEnv


def _env(**kwargs) -> TakeAwayEnv:
    env = TakeAwayEnv(**kwargs)
    env.reset()
    return env


class TestCurrentPlayerIterator:
    def test_start_returns_current_player_without_advancing(self):
        env = _env()
        it = CurrentPlayerIterator(env)
        assert it.start() == "player_0"
        assert env.current_player == "player_0"

    def test_advance_moves_cursor_then_reports(self):
        env = _env()
        it = CurrentPlayerIterator(env)
        it.start()
        assert it.advance() == "player_1"
        assert env.current_player == "player_1"
        assert it.advance() == "player_0"

    def test_iteration_protocol(self):
        env = _env(players=("a", "b", "c"))
        players = list(islice(CurrentPlayerIterator(env), 7))
        assert players == ["a", "b", "c", "a", "b", "c", "a"]

    def test_keeps_going_past_terminal(self):
        env = _env(n_stones=1)
        it = iter(CurrentPlayerIterator(env))
        assert next(it) == "player_0"
        env.act(1)
        assert env.is_terminated()
        for _ in range(10):
            next(it)
        assert env.is_terminated()

    def test_follows_cursor_moved_elsewhere(self):
        env = _env()
        it = CurrentPlayerIterator(env)
        assert next(it) == "player_0"
        env.next_player()
        # the iterator reads the env; it keeps no cursor of its own
        assert next(it) == "player_0"
