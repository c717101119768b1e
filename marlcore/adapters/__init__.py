"""Adapters exposing PettingZoo environments to the run loops."""

from marlcore.adapters.pettingzoo_aec import AECEnvironment
from marlcore.adapters.pettingzoo_parallel import ParallelEnvironment

__all__ = ["AECEnvironment", "ParallelEnvironment"]
