"""Default experiment configuration.

Provides a sensible baseline for quick experiments.
"""

from marlcore.config.schema import (
    ExperimentConfig,
    ExperimentIdentity,
    InstrumentationConfig,
    ResetConfig,
    StopConfig,
)


def default_config(seed: int = 42) -> ExperimentConfig:
    """Return a complete, valid default experiment config."""
    return ExperimentConfig(
        identity=ExperimentIdentity(name="experiment", seed=seed),
        stop=StopConfig(max_episodes=100),
        reset=ResetConfig(),
        instrumentation=InstrumentationConfig(),
    )
