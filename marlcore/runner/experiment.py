"""Experiment — a policy, environment, stop condition and hook bundled to run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from marlcore.config.schema import ExperimentConfig
from marlcore.conditions import build_reset_condition, build_stop_condition
from marlcore.core.base_env import BaseEnvironment
from marlcore.hooks.base import BaseHook, EmptyHook
from marlcore.hooks.multi_agent import MultiAgentHook
from marlcore.hooks.run_logger_hook import RunLoggerHook
from marlcore.policies.base import BasePolicy
from marlcore.policies.multi_agent import MultiAgentPolicy
from marlcore.runner import multi_agent
from marlcore.runner.loop import Condition, run_loop
from marlcore.runner.run_logger import RunLogger

logger = logging.getLogger(__name__)


@dataclass
class Experiment:
    """Everything needed for one run.

    A MultiAgentPolicy is driven by the multi-agent run loop (and must come
    with a MultiAgentHook); any other policy by the single loop.
    """

    policy: BasePolicy
    env: BaseEnvironment
    stop_condition: Condition
    hook: BaseHook = field(default_factory=EmptyHook)
    description: str = ""
    reset_condition: Condition | None = None

    def run(self) -> BasePolicy:
        if self.description:
            logger.info("running experiment: %s", self.description)
        if isinstance(self.policy, MultiAgentPolicy):
            if not isinstance(self.hook, MultiAgentHook):
                raise TypeError(
                    "A MultiAgentPolicy must be paired with a MultiAgentHook, "
                    f"got {type(self.hook).__name__}"
                )
            return multi_agent.run(
                self.policy, self.env, self.stop_condition, self.hook, self.reset_condition
            )
        return run_loop(
            self.policy, self.env, self.stop_condition, self.hook, self.reset_condition
        )


def build_experiment(
    config: ExperimentConfig,
    policy: MultiAgentPolicy,
    env: BaseEnvironment,
    *,
    run_id: str | None = None,
    extra_hooks: dict[str, BaseHook] | None = None,
) -> Experiment:
    """Assemble a multi-agent Experiment from a validated config.

    Each player gets a RunLoggerHook writing under
    ``instrumentation.run_dir / run_id``, composed after any extra hook
    given for that player.
    """
    run_id = run_id or f"{config.identity.name}_seed{config.identity.seed}"
    run_logger = RunLogger(config.instrumentation.run_dir, run_id)
    run_logger.write_config(config.model_dump(mode="json"))

    extra_hooks = extra_hooks or {}
    hooks: dict[str, Any] = {}
    for player in policy.keys():
        log_hook = RunLoggerHook(run_logger, config.instrumentation)
        extra = extra_hooks.get(player)
        hooks[player] = extra + log_hook if extra is not None else log_hook

    return Experiment(
        policy=policy,
        env=env,
        stop_condition=build_stop_condition(config.stop),
        hook=MultiAgentHook(hooks),
        description=config.identity.name,
        reset_condition=build_reset_condition(config.reset),
    )
