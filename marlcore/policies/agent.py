"""Agent — a policy bundled with an experience cache and trajectory.

The cache collects one player's (state, action, reward, terminated)
pieces as the stages arrive:

  PRE_ACT   state of the environment from this player's point of view
  plan()    action chosen by the wrapped policy
  POST_ACT  reward and termination flag, then the completed transition
            is committed to the trajectory

Because each Agent only ever receives its own player's stages, every
agent accumulates its own trace even when only one of them acts per
environment step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage, Transition
from marlcore.policies.base import BasePolicy
from marlcore.policies.trajectory import Trajectory

_UNSET = object()


@dataclass(slots=True)
class AgentCache:
    """Partially-built transition for the player's current turn."""

    state: Any = _UNSET
    action: Any = _UNSET

    def has_state(self) -> bool:
        return self.state is not _UNSET

    def has_action(self) -> bool:
        return self.action is not _UNSET

    def clear(self) -> None:
        self.state = _UNSET
        self.action = _UNSET


class Agent(BasePolicy):
    """Wraps a policy and records its player's experience."""

    def __init__(self, policy: BasePolicy, trajectory: Trajectory | None = None) -> None:
        self.policy = policy
        self.trajectory = trajectory if trajectory is not None else Trajectory()
        self.cache = AgentCache()
        self.last_state: Any = None
        self.last_action: Any = None

    # ------------------------------------------------------------------
    # Cache delivery
    # ------------------------------------------------------------------

    def push_state(self, state: Any) -> None:
        """Deliver the observation the next action will be chosen from."""
        self.cache.state = state
        self.last_state = state

    def push_outcome(self, player: AgentID, reward: float, terminated: bool) -> None:
        """Deliver reward and termination, completing the cached transition."""
        if not self.cache.has_state():
            raise RuntimeError(
                f"Agent for {player!r} received an outcome before any state."
            )
        # Players that did not act this turn still see reward/termination,
        # but only an acting player has a transition to commit.
        if self.cache.has_action():
            self.trajectory.push(
                Transition(
                    player=player,
                    state=self.cache.state,
                    action=self.cache.action,
                    reward=float(reward),
                    terminated=bool(terminated),
                )
            )
        self.cache.clear()

    # ------------------------------------------------------------------
    # Policy protocol
    # ------------------------------------------------------------------

    def plan(self, env: BaseEnvironment, player: AgentID | None = None) -> Any:
        action = self.policy.plan(env, player)
        self.cache.action = action
        self.last_action = action
        return action

    def push(
        self, stage: Stage, env: BaseEnvironment, player: AgentID | None = None
    ) -> None:
        if stage is Stage.PRE_EPISODE:
            self.cache.clear()
            self.last_state = None
            self.last_action = None
        elif stage is Stage.PRE_ACT:
            self.push_state(env.state(player))
        elif stage is Stage.POST_ACT:
            self.push_outcome(player, env.reward(player), env.is_terminated())
        elif stage is Stage.POST_EPISODE:
            self.cache.clear()
        self.policy.push(stage, env, player)

    def optimise(self, stage: Stage) -> None:
        self.policy.optimise(stage)

    def __repr__(self) -> str:
        return f"Agent({self.policy!r}, transitions={len(self.trajectory)})"
