"""RockPaperScissorsEnv — the reference simultaneous game.

Two players pick rock (0), paper (1) or scissors (2) at the same time.
Each round pays +1 to the winner and -1 to the loser (0 each on a draw).
The episode terminates after ``max_rounds`` rounds.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import Any

from gymnasium import spaces

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, DynamicStyle


class Move(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2


def _beats(a: Move, b: Move) -> bool:
    return (a - b) % 3 == 1


class RockPaperScissorsEnv(BaseEnvironment):
    """Simultaneous two-player rock-paper-scissors over several rounds."""

    def __init__(
        self,
        max_rounds: int = 3,
        players: tuple[AgentID, AgentID] = ("player_0", "player_1"),
    ) -> None:
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be >= 1, got {max_rounds}")
        if len(players) != 2 or players[0] == players[1]:
            raise ValueError(f"Need exactly two distinct players, got {players!r}")
        self._max_rounds = max_rounds
        self._players = tuple(players)
        self._action_space = spaces.Discrete(len(Move))
        self._round: int | None = None
        self._last_moves: dict[AgentID, Move] = {}
        self._rewards: dict[AgentID, float] = {}

    @property
    def dynamic_style(self) -> DynamicStyle:
        return DynamicStyle.SIMULTANEOUS

    @property
    def players(self) -> tuple[AgentID, ...]:
        return self._players

    def reset(self, seed: int | None = None) -> None:
        self._round = 0
        self._last_moves = {}
        self._rewards = {p: 0.0 for p in self._players}

    def act(self, action: Iterable[Any]) -> None:
        if self._round is None:
            raise RuntimeError("Must call reset() before act().")
        if self.is_terminated():
            raise RuntimeError("Episode is done. Call reset().")
        moves = tuple(action)
        if len(moves) != len(self._players):
            raise ValueError(
                f"Expected {len(self._players)} actions, got {len(moves)}"
            )
        parsed = {p: Move(int(m)) for p, m in zip(self._players, moves)}

        a, b = self._players
        if _beats(parsed[a], parsed[b]):
            self._rewards = {a: 1.0, b: -1.0}
        elif _beats(parsed[b], parsed[a]):
            self._rewards = {a: -1.0, b: 1.0}
        else:
            self._rewards = {a: 0.0, b: 0.0}
        self._last_moves = parsed
        self._round += 1

    @property
    def round(self) -> int:
        return self._round or 0

    @property
    def elapsed_steps(self) -> int:
        return self.round

    def state(self, player: AgentID) -> dict[str, Any]:
        opponent = next(p for p in self._players if p != player)
        last = self._last_moves.get(opponent)
        return {
            "round": self.round,
            "opponent_last_move": int(last) if last is not None else None,
        }

    def reward(self, player: AgentID) -> float:
        return self._rewards.get(player, 0.0)

    def is_terminated(self) -> bool:
        return self._round is not None and self._round >= self._max_rounds

    def action_space(self, player: AgentID) -> spaces.Discrete:
        return self._action_space
