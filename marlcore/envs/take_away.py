"""TakeAwayEnv — two-or-more player Nim, the reference sequential game.

Players take turns removing 1..max_take stones from a shared pile.
Whoever takes the last stone wins (+1); everyone else loses (-1).

The environment never advances its turn cursor on its own: act() only
changes the pile, next_player() moves the cursor.
"""

from __future__ import annotations

from typing import Any

from gymnasium import spaces

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, DynamicStyle


class TakeAwayEnv(BaseEnvironment):
    """Turn-based take-away game with a shared pile of stones."""

    def __init__(
        self,
        n_stones: int = 10,
        max_take: int = 3,
        players: tuple[AgentID, ...] = ("player_0", "player_1"),
    ) -> None:
        if n_stones < 1:
            raise ValueError(f"n_stones must be >= 1, got {n_stones}")
        if max_take < 1:
            raise ValueError(f"max_take must be >= 1, got {max_take}")
        if len(players) < 2 or len(set(players)) != len(players):
            raise ValueError(f"Need at least two distinct players, got {players!r}")
        self._n_stones = n_stones
        self._max_take = max_take
        self._players = tuple(players)
        self._action_space = spaces.Discrete(max_take, start=1)
        self._remaining: int | None = None
        self._turn = 0
        self._moves = 0
        self._winner: AgentID | None = None

    # ------------------------------------------------------------------
    # Trait / players
    # ------------------------------------------------------------------

    @property
    def dynamic_style(self) -> DynamicStyle:
        return DynamicStyle.SEQUENTIAL

    @property
    def players(self) -> tuple[AgentID, ...]:
        return self._players

    @property
    def current_player(self) -> AgentID:
        return self._players[self._turn]

    def next_player(self) -> None:
        self._turn = (self._turn + 1) % len(self._players)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self, seed: int | None = None) -> None:
        self._remaining = self._n_stones
        self._turn = 0
        self._moves = 0
        self._winner = None

    def act(self, action: Any) -> None:
        if self._remaining is None:
            raise RuntimeError("Must call reset() before act().")
        if self.is_terminated():
            raise RuntimeError("Episode is done. Call reset().")
        take = int(action)
        if take not in self.legal_actions(self.current_player):
            raise ValueError(
                f"Illegal move {action!r} with {self._remaining} stones left"
            )
        self._remaining -= take
        self._moves += 1
        if self._remaining == 0:
            self._winner = self.current_player

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def remaining(self) -> int | None:
        return self._remaining

    @property
    def elapsed_steps(self) -> int:
        return self._moves

    @property
    def winner(self) -> AgentID | None:
        return self._winner

    def state(self, player: AgentID) -> dict[str, Any]:
        return {
            "remaining": self._remaining,
            "is_my_turn": player == self.current_player,
        }

    def reward(self, player: AgentID) -> float:
        if self._winner is None:
            return 0.0
        return 1.0 if player == self._winner else -1.0

    def is_terminated(self) -> bool:
        return self._winner is not None

    def action_space(self, player: AgentID) -> spaces.Discrete:
        return self._action_space

    def legal_actions(self, player: AgentID) -> list[int]:
        if self._remaining is None or self.is_terminated():
            return []
        return list(range(1, min(self._max_take, self._remaining) + 1))
