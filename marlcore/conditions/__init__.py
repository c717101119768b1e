"""Stop and reset conditions, plus builders from their configs."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from marlcore.config.schema import ResetConfig, StopConfig
from marlcore.conditions.reset import ResetAfterNSteps, ResetAtTerminal
from marlcore.conditions.stop import (
    ComposedStopCondition,
    StopAfterEpisode,
    StopAfterStep,
    StopSignal,
    StopWhenDone,
)


def build_stop_condition(config: StopConfig) -> Callable[[Any, Any], bool]:
    """Instantiate the stop condition a validated StopConfig describes."""
    if config.max_steps is not None:
        return StopAfterStep(config.max_steps)
    if config.max_episodes is not None:
        return StopAfterEpisode(config.max_episodes)
    return StopWhenDone()


def build_reset_condition(config: ResetConfig) -> Callable[[Any, Any], bool]:
    """Instantiate the episode-boundary condition a ResetConfig describes."""
    if config.kind == "n_steps":
        return ResetAfterNSteps(config.n_steps)
    return ResetAtTerminal()


__all__ = [
    "ComposedStopCondition",
    "ResetAfterNSteps",
    "ResetAtTerminal",
    "StopAfterEpisode",
    "StopAfterStep",
    "StopSignal",
    "StopWhenDone",
    "build_reset_condition",
    "build_stop_condition",
]
