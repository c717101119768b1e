"""Configuration schema for an experiment — single source of truth.

This module defines the Pydantic models that describe how long an
experiment runs and what it records.  Concrete environments and
policies are built in code and are not part of the schema.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Section 1: Experiment Identity
# ---------------------------------------------------------------------------

class ExperimentIdentity(BaseModel):
    """What this experiment is."""

    name: str = Field(
        default="experiment",
        min_length=1,
        description="Human-readable experiment name, used as the run id prefix.",
    )
    seed: int = Field(
        ge=0,
        description="Root seed for full reproducibility.",
    )


# ---------------------------------------------------------------------------
# Section 2: Stop Condition
# ---------------------------------------------------------------------------

class StopConfig(BaseModel):
    """When the whole experiment halts.  Exactly one criterion must be set."""

    max_steps: int | None = Field(
        default=None, ge=1,
        description="Stop after this many stop-condition checks (turns or rounds).",
    )
    max_episodes: int | None = Field(
        default=None, ge=1,
        description="Stop after this many terminated episodes.",
    )
    stop_when_done: bool = Field(
        default=False,
        description="Stop the first time the environment reports termination.",
    )

    @model_validator(mode="after")
    def exactly_one_criterion(self) -> StopConfig:
        chosen = [
            self.max_steps is not None,
            self.max_episodes is not None,
            self.stop_when_done,
        ]
        if sum(chosen) != 1:
            raise ValueError(
                "Exactly one of max_steps, max_episodes or stop_when_done must be set "
                f"(got {sum(chosen)})."
            )
        return self


# ---------------------------------------------------------------------------
# Section 3: Episode Boundary
# ---------------------------------------------------------------------------

class ResetConfig(BaseModel):
    """When an episode ends and the environment is reset."""

    kind: Literal["terminal", "n_steps"] = Field(
        default="terminal",
        description="'terminal' = on termination only. 'n_steps' = also after n_steps moves.",
    )
    n_steps: int | None = Field(
        default=None, ge=1,
        description="Moves per episode before a reset (only for kind='n_steps').",
    )

    @model_validator(mode="after")
    def n_steps_matches_kind(self) -> ResetConfig:
        if self.kind == "n_steps" and self.n_steps is None:
            raise ValueError("n_steps is required when kind='n_steps'.")
        if self.kind == "terminal" and self.n_steps is not None:
            raise ValueError("n_steps is only valid when kind='n_steps'.")
        return self


# ---------------------------------------------------------------------------
# Section 4: Instrumentation
# ---------------------------------------------------------------------------

class InstrumentationConfig(BaseModel):
    """What run artifacts to write and how often."""

    enable_step_metrics: bool = Field(
        default=True,
        description="Write per-player turn records to metrics.jsonl.",
    )
    enable_episode_metrics: bool = Field(
        default=True,
        description="Write per-player episode totals to events.jsonl.",
    )
    step_log_frequency: int = Field(
        default=1, ge=1,
        description="Log turn records every N turns of a player. 1 = every turn.",
    )
    run_dir: Path = Field(
        default=Path("storage/runs"),
        description="Base directory under which each run gets its own folder.",
    )


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

class ExperimentConfig(BaseModel):
    """Complete configuration for one experiment run."""

    identity: ExperimentIdentity
    stop: StopConfig
    reset: ResetConfig = ResetConfig()
    instrumentation: InstrumentationConfig = InstrumentationConfig()
