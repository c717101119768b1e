"""PettingZoo AECEnv adapter — exposes a turn-based PettingZoo game.

PettingZoo moves ``agent_selection`` inside ``step()``.  The adapter keeps
its own cursor so that act() leaves the current player unchanged and only
next_player() catches up with the wrapped environment.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from gymnasium import spaces
from pettingzoo import AECEnv

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, DynamicStyle


def action_mask_to_legal(observation: Any, info: dict[str, Any] | None = None) -> list[int] | None:
    """Indices allowed by an ``action_mask`` in the observation or info, if any."""
    mask = None
    if isinstance(observation, dict) and "action_mask" in observation:
        mask = observation["action_mask"]
    elif info and "action_mask" in info:
        mask = info["action_mask"]
    if mask is None:
        return None
    return [int(i) for i in np.flatnonzero(np.asarray(mask))]


class AECEnvironment(BaseEnvironment):
    """Sequential BaseEnvironment wrapper around a PettingZoo AECEnv."""

    def __init__(self, env: AECEnv) -> None:
        self._env = env
        self._players: tuple[AgentID, ...] = tuple(env.possible_agents)
        self._current: AgentID | None = None
        self._steps = 0

    @property
    def unwrapped(self) -> AECEnv:
        return self._env

    @property
    def dynamic_style(self) -> DynamicStyle:
        return DynamicStyle.SEQUENTIAL

    @property
    def players(self) -> tuple[AgentID, ...]:
        return self._players

    @property
    def current_player(self) -> AgentID:
        if self._current is None:
            raise RuntimeError("Must call reset() before reading current_player.")
        return self._current

    def next_player(self) -> None:
        self._current = self._env.agent_selection

    def reset(self, seed: int | None = None) -> None:
        self._env.reset(seed=seed)
        self._current = self._env.agent_selection
        self._steps = 0

    def act(self, action: Any) -> None:
        player = self.current_player
        # PettingZoo only accepts None from an agent that is already done.
        if self._env.terminations.get(player, False) or self._env.truncations.get(player, False):
            action = None
        self._env.step(action)
        self._steps += 1

    @property
    def elapsed_steps(self) -> int:
        return self._steps

    def state(self, player: AgentID) -> Any:
        return self._env.observe(player)

    def reward(self, player: AgentID) -> float:
        return float(self._env.rewards.get(player, 0.0))

    def is_terminated(self) -> bool:
        live = self._env.agents
        if not live:
            return True
        return all(
            self._env.terminations.get(a, False) or self._env.truncations.get(a, False)
            for a in live
        )

    def action_space(self, player: AgentID) -> spaces.Space:
        return self._env.action_space(player)

    def legal_actions(self, player: AgentID) -> list[int] | None:
        if player not in self._env.agents:
            return []
        return action_mask_to_legal(
            self._env.observe(player), self._env.infos.get(player)
        )
