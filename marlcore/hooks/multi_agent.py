"""MultiAgentHook — per-player hook container."""

from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage
from marlcore.hooks.base import BaseHook
from marlcore.policies.multi_agent import MultiAgentPolicy


class MultiAgentHook(BaseHook):
    """Hook made of one sub-hook per player, indexed by player identity."""

    def __init__(self, hooks: Mapping[AgentID, BaseHook]) -> None:
        self._hooks: dict[AgentID, BaseHook] = dict(hooks)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __getitem__(self, player: AgentID) -> BaseHook:
        try:
            return self._hooks[player]
        except KeyError:
            raise KeyError(f"No hook registered for player {player!r}") from None

    def __contains__(self, player: object) -> bool:
        return player in self._hooks

    def __iter__(self) -> Iterator[BaseHook]:
        return iter(self._hooks.values())

    def __len__(self) -> int:
        return len(self._hooks)

    def keys(self) -> KeysView[AgentID]:
        return self._hooks.keys()

    def same_keys(self, other: Any) -> bool:
        return set(self.keys()) == set(other.keys())

    # ------------------------------------------------------------------
    # Hook protocol
    # ------------------------------------------------------------------

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        """Notify each player's hook, handing it that player's policy.

        When ``policy`` is not a MultiAgentPolicy every hook receives it
        unchanged.  An explicit ``player`` limits the push to that hook.
        """
        targets = (player,) if player is not None else env.players
        for p in targets:
            p_policy = policy[p] if isinstance(policy, MultiAgentPolicy) else policy
            self[p].push(stage, p_policy, env, p)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._hooks.items())
        return f"MultiAgentHook({inner})"
