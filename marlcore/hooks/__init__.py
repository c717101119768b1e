"""Hooks package — observers notified at every lifecycle stage."""

from __future__ import annotations

from marlcore.hooks.base import BaseHook, ComposedHook, EmptyHook
from marlcore.hooks.common import (
    DoEveryNEpisode,
    DoEveryNStep,
    StepsPerEpisode,
    TimePerStep,
    TotalRewardPerEpisode,
)
from marlcore.hooks.multi_agent import MultiAgentHook
from marlcore.hooks.run_logger_hook import RunLoggerHook

__all__ = [
    "BaseHook",
    "ComposedHook",
    "DoEveryNEpisode",
    "DoEveryNStep",
    "EmptyHook",
    "MultiAgentHook",
    "RunLoggerHook",
    "StepsPerEpisode",
    "TimePerStep",
    "TotalRewardPerEpisode",
]
