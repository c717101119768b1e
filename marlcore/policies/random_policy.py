"""Random policy — picks legal actions uniformly at random (deterministic given seed)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from gymnasium import spaces

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.seeding import player_seeds
from marlcore.core.types import AgentID

from marlcore.policies.base import BasePolicy


class RandomPolicy(BasePolicy):
    """Uniformly random policy, fully deterministic given its seed.

    Prefers the environment's legal actions when it reports them; otherwise
    samples from the player's action space.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng: np.random.Generator = np.random.default_rng(seed)

    def plan(self, env: BaseEnvironment, player: AgentID | None = None) -> Any:
        legal = env.legal_actions(player)
        if legal is not None:
            if not legal:
                # terminal position; nothing to choose from
                return None
            return legal[int(self._rng.integers(len(legal)))]

        space = env.action_space(player)
        if isinstance(space, spaces.Discrete):
            return int(space.start) + int(self._rng.integers(space.n))
        return space.sample()

    @classmethod
    def per_player(cls, players: Iterable[AgentID], seed: int) -> dict[AgentID, RandomPolicy]:
        """One independently seeded RandomPolicy per player, derived from ``seed``."""
        return {p: cls(s) for p, s in player_seeds(players, seed).items()}

    def __repr__(self) -> str:
        return "RandomPolicy()"
