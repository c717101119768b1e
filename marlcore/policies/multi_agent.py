"""MultiAgentPolicy — per-player policy container.

Maps each player identity to its own policy.  The mapping is fixed at
construction; only the contents of the individual policies change over
an experiment.
"""

from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage
from marlcore.policies.base import BasePolicy


class MultiAgentPolicy(BasePolicy):
    """Policy made of one sub-policy per player, indexed by player identity."""

    def __init__(self, agents: Mapping[AgentID, BasePolicy]) -> None:
        self._agents: dict[AgentID, BasePolicy] = dict(agents)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, player: AgentID) -> BasePolicy:
        try:
            return self._agents[player]
        except KeyError:
            raise KeyError(f"No policy registered for player {player!r}") from None

    def __contains__(self, player: object) -> bool:
        return player in self._agents

    def __iter__(self) -> Iterator[BasePolicy]:
        return iter(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)

    def keys(self) -> KeysView[AgentID]:
        return self._agents.keys()

    def same_keys(self, other: Any) -> bool:
        """True if ``other`` is addressed by exactly the same player set."""
        return set(self.keys()) == set(other.keys())

    # ------------------------------------------------------------------
    # Policy protocol
    # ------------------------------------------------------------------

    def plan(self, env: BaseEnvironment, player: AgentID | None = None) -> Any:
        """Lazily yield one action per player, in ``env.players`` order.

        With an explicit ``player`` this just asks that player's policy.
        """
        if player is not None:
            return self[player].plan(env, player)
        return (self[p].plan(env, p) for p in env.players)

    def push(
        self, stage: Stage, env: BaseEnvironment, player: AgentID | None = None
    ) -> None:
        """Broadcast ``stage`` to every player's policy."""
        if player is not None:
            self[player].push(stage, env, player)
            return
        for p in env.players:
            self[p].push(stage, env, p)

    def optimise(self, stage: Stage) -> None:
        """Ask every policy to optimise, in insertion order."""
        for policy in self:
            policy.optimise(stage)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._agents.items())
        return f"MultiAgentPolicy({inner})"
