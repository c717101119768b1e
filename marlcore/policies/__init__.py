"""Policies package — policy contract, per-player containers and stock policies."""

from __future__ import annotations

from marlcore.policies.agent import Agent, AgentCache
from marlcore.policies.base import BasePolicy
from marlcore.policies.multi_agent import MultiAgentPolicy
from marlcore.policies.random_policy import RandomPolicy
from marlcore.policies.trajectory import Trajectory

__all__ = [
    "Agent",
    "AgentCache",
    "BasePolicy",
    "MultiAgentPolicy",
    "RandomPolicy",
    "Trajectory",
]
