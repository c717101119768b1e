"""PettingZoo ParallelEnv adapter — exposes a simultaneous PettingZoo game.

Thin wrapper that translates between the ParallelEnv dict-in/dict-out
API and the per-player queries the run loops use.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from gymnasium import spaces
from pettingzoo import ParallelEnv

from marlcore.adapters.pettingzoo_aec import action_mask_to_legal
from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, DynamicStyle


class ParallelEnvironment(BaseEnvironment):
    """Simultaneous BaseEnvironment wrapper around a PettingZoo ParallelEnv."""

    def __init__(self, env: ParallelEnv) -> None:
        self._env = env
        self._players: tuple[AgentID, ...] = tuple(env.possible_agents)
        self._observations: dict[AgentID, Any] = {}
        self._rewards: dict[AgentID, float] = {}
        self._terminations: dict[AgentID, bool] = {}
        self._truncations: dict[AgentID, bool] = {}
        self._infos: dict[AgentID, dict[str, Any]] = {}
        self._started = False
        self._steps = 0

    @property
    def unwrapped(self) -> ParallelEnv:
        return self._env

    @property
    def dynamic_style(self) -> DynamicStyle:
        return DynamicStyle.SIMULTANEOUS

    @property
    def players(self) -> tuple[AgentID, ...]:
        return self._players

    def reset(self, seed: int | None = None) -> None:
        obs, infos = self._env.reset(seed=seed)
        self._observations = dict(obs)
        self._infos = dict(infos)
        self._rewards = {p: 0.0 for p in self._players}
        self._terminations = {p: False for p in self._players}
        self._truncations = {p: False for p in self._players}
        self._started = True
        self._steps = 0

    def act(self, action: Iterable[Any]) -> None:
        if not self._started:
            raise RuntimeError("Must call reset() before act().")
        live = set(self._env.agents)
        joint = {p: a for p, a in zip(self._players, action) if p in live}
        obs, rewards, terminations, truncations, infos = self._env.step(joint)
        self._observations.update(obs)
        self._rewards = {p: float(rewards.get(p, 0.0)) for p in self._players}
        self._terminations.update(terminations)
        self._truncations.update(truncations)
        self._infos.update(infos)
        self._steps += 1

    @property
    def elapsed_steps(self) -> int:
        return self._steps

    def state(self, player: AgentID) -> Any:
        return self._observations.get(player)

    def reward(self, player: AgentID) -> float:
        return self._rewards.get(player, 0.0)

    def is_terminated(self) -> bool:
        if not self._started:
            return False
        if not self._env.agents:
            return True
        return all(
            self._terminations.get(p, False) or self._truncations.get(p, False)
            for p in self._env.agents
        )

    def action_space(self, player: AgentID) -> spaces.Space:
        return self._env.action_space(player)

    def legal_actions(self, player: AgentID) -> list[int] | None:
        return action_mask_to_legal(
            self._observations.get(player), self._infos.get(player)
        )
