"""Reset conditions — predicates deciding when the current episode ends."""

from __future__ import annotations

from typing import Any

from marlcore.core.base_env import BaseEnvironment


class ResetAtTerminal:
    """End the episode when the environment reports termination."""

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        return env.is_terminated()


class ResetAfterNSteps:
    """End the episode at termination or once ``n`` moves have been made.

    Reads ``env.elapsed_steps`` instead of counting its own calls, so the
    answer only changes when the environment does.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        self.n = n

    def __call__(self, policy: Any, env: BaseEnvironment) -> bool:
        return env.is_terminated() or env.elapsed_steps >= self.n

    def __repr__(self) -> str:
        return f"ResetAfterNSteps({self.n})"
