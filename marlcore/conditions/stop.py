"""Stop conditions — predicates deciding when the whole experiment halts.

Every condition is called as ``condition(policy, env) -> bool`` once per
turn (sequential) or per round (simultaneous).  Counters advance on each
call, so a condition instance belongs to a single run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from marlcore.core.base_env import BaseEnvironment


class StopAfterStep:
    """Stop once ``step`` checks have been made."""

    def __init__(self, step: int) -> None:
        if step < 1:
            raise ValueError(f"step must be >= 1, got {step}")
        self.step = step
        self.cur = 0

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        self.cur += 1
        return self.cur >= self.step


class StopAfterEpisode:
    """Stop once ``episode`` episodes have terminated."""

    def __init__(self, episode: int) -> None:
        if episode < 1:
            raise ValueError(f"episode must be >= 1, got {episode}")
        self.episode = episode
        self.cur = 0

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        if env.is_terminated():
            self.cur += 1
        return self.cur >= self.episode


class StopWhenDone:
    """Stop the first time the environment reports termination."""

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        return env.is_terminated()


class StopSignal:
    """Stop once ``set()`` has been called, e.g. from a hook callback."""

    def __init__(self) -> None:
        self.is_stop = False

    def set(self) -> None:
        self.is_stop = True

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        return self.is_stop


class ComposedStopCondition:
    """Combine conditions with ``any`` (default) or ``all``.

    Every sub-condition is evaluated on each call so stateful counters
    keep advancing even when an earlier one already decided.
    """

    def __init__(
        self,
        *conditions: Callable[[Any, BaseEnvironment], bool],
        reducer: Callable[[list[bool]], bool] = any,
    ) -> None:
        if not conditions:
            raise ValueError("ComposedStopCondition needs at least one condition")
        self.conditions = conditions
        self.reducer = reducer

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        return self.reducer([cond(policy, env) for cond in self.conditions])
