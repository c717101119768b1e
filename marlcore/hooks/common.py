"""Stock hooks: per-episode rewards and lengths, timing, periodic callbacks.

Each instance tracks a single player when used inside a MultiAgentHook,
or the whole environment when used with the single loop.
"""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage
from marlcore.hooks.base import BaseHook


def _reward(env: BaseEnvironment, player: AgentID | None) -> float:
    if player is None:
        return float(sum(env.reward(p) for p in env.players))
    return float(env.reward(player))


class TotalRewardPerEpisode(BaseHook):
    """Sum of rewards a player collects in each episode.

    In a sequential game a player that did not make the final move never
    sees a POST_ACT at the terminal state, so its terminal reward is picked
    up at POST_EPISODE instead.
    """

    def __init__(self) -> None:
        self.rewards: list[float] = []
        self.reward = 0.0
        self._saw_terminal = False

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is Stage.PRE_EPISODE:
            self.reward = 0.0
            self._saw_terminal = False
        elif stage is Stage.POST_ACT:
            self.reward += _reward(env, player)
            self._saw_terminal = env.is_terminated()
        elif stage is Stage.POST_EPISODE:
            if env.is_terminated() and not self._saw_terminal:
                self.reward += _reward(env, player)
            self.rewards.append(self.reward)


class StepsPerEpisode(BaseHook):
    """Number of turns a player took in each episode."""

    def __init__(self) -> None:
        self.steps: list[int] = []
        self.count = 0

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is Stage.PRE_EPISODE:
            self.count = 0
        elif stage is Stage.POST_ACT:
            self.count += 1
        elif stage is Stage.POST_EPISODE:
            self.steps.append(self.count)


class TimePerStep(BaseHook):
    """Wall-clock seconds between consecutive POST_ACT notifications."""

    def __init__(self, max_steps: int = 100) -> None:
        self.times: deque[float] = deque(maxlen=max_steps)
        self._last: float | None = None

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is Stage.PRE_EXPERIMENT:
            self._last = time.perf_counter()
        elif stage is Stage.POST_ACT:
            now = time.perf_counter()
            if self._last is not None:
                self.times.append(now - self._last)
            self._last = now


class DoEveryNStep(BaseHook):
    """Call ``fn(t, policy, env)`` after every ``n``-th turn (t counts turns)."""

    def __init__(
        self,
        fn: Callable[[int, Any, BaseEnvironment], Any],
        n: int = 1,
        stage: Stage = Stage.POST_ACT,
    ) -> None:
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        self.fn = fn
        self.n = n
        self.stage = stage
        self.t = 0

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is not self.stage:
            return
        self.t += 1
        if self.t % self.n == 0:
            self.fn(self.t, policy, env)


class DoEveryNEpisode(BaseHook):
    """Call ``fn(t, policy, env)`` after every ``n``-th episode."""

    def __init__(
        self,
        fn: Callable[[int, Any, BaseEnvironment], Any],
        n: int = 1,
        stage: Stage = Stage.POST_EPISODE,
    ) -> None:
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        self.fn = fn
        self.n = n
        self.stage = stage
        self.t = 0

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is not self.stage:
            return
        self.t += 1
        if self.t % self.n == 0:
            self.fn(self.t, policy, env)
