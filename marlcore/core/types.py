"""Framework-level types used across all environments and policies.

These are the shared vocabulary of the turn-management core.
Game-specific types (e.g., take-away moves) live in their respective
env modules, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Agent identity
# ---------------------------------------------------------------------------

AgentID = str  # unique within an experiment


# ---------------------------------------------------------------------------
# Lifecycle stages
# ---------------------------------------------------------------------------

class Stage(Enum):
    """Lifecycle markers that policies and hooks react to.

    Carries no payload; used purely as a dispatch tag.
    """

    PRE_EXPERIMENT = "pre_experiment"
    PRE_EPISODE = "pre_episode"
    PRE_ACT = "pre_act"
    POST_ACT = "post_act"
    POST_EPISODE = "post_episode"
    POST_EXPERIMENT = "post_experiment"


# ---------------------------------------------------------------------------
# Turn discipline
# ---------------------------------------------------------------------------

class DynamicStyle(Enum):
    """How players move: one at a time, or all together each step."""

    SEQUENTIAL = "sequential"
    SIMULTANEOUS = "simultaneous"


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Transition:
    """One completed (state, action, reward, terminated) record of a player."""

    player: AgentID
    state: Any
    action: Any
    reward: float
    terminated: bool
