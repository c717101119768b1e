"""Per-player seeding.

One root seed fans out into an independent seed for every player, so a
whole multi-agent experiment is reproducible from a single integer.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from marlcore.core.types import AgentID


def player_seeds(players: Iterable[AgentID], seed: int) -> dict[AgentID, int]:
    """Spawn one child seed per player from ``seed``, keyed by player.

    A player's seed depends only on ``seed`` and its position in ``players``.
    """
    players = tuple(players)
    children = np.random.SeedSequence(seed).spawn(len(players))
    return {p: int(child.generate_state(1)[0]) for p, child in zip(players, children)}
