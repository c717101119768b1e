"""Single loop — every player moves at once, the environment advances per round.

Drives single-agent experiments and simultaneous multi-agent games alike:
``policy.plan(env)`` produces the whole round's action (for a
MultiAgentPolicy, one action per player) and ``env.act`` applies it once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from marlcore.conditions.reset import ResetAtTerminal
from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import Stage
from marlcore.hooks.base import BaseHook
from marlcore.policies.base import BasePolicy

logger = logging.getLogger(__name__)

Condition = Callable[[Any, BaseEnvironment], bool]


def see_last_observation(policy: BasePolicy, env: BaseEnvironment) -> None:
    """Plan once more so the policy sees the final state; the action is dropped.

    A MultiAgentPolicy plans lazily, so its generator is drained here.
    """
    actions = policy.plan(env)
    if isinstance(actions, Iterator):
        for _ in actions:
            pass


def run_loop(
    policy: BasePolicy,
    env: BaseEnvironment,
    stop_condition: Condition,
    hook: BaseHook,
    reset_condition: Condition | None = None,
) -> BasePolicy:
    """Run episodes until ``stop_condition`` holds; return ``policy``."""
    if reset_condition is None:
        reset_condition = ResetAtTerminal()

    hook.push(Stage.PRE_EXPERIMENT, policy, env)
    policy.push(Stage.PRE_EXPERIMENT, env)
    is_stop = False
    episode = 0
    while not is_stop:
        env.reset()
        logger.debug("episode %d started", episode)
        policy.push(Stage.PRE_EPISODE, env)
        policy.optimise(Stage.PRE_EPISODE)
        hook.push(Stage.PRE_EPISODE, policy, env)

        while not reset_condition(policy, env):  # one episode
            policy.push(Stage.PRE_ACT, env)
            policy.optimise(Stage.PRE_ACT)
            hook.push(Stage.PRE_ACT, policy, env)

            action = policy.plan(env)
            env.act(action)

            policy.push(Stage.POST_ACT, env)
            policy.optimise(Stage.POST_ACT)
            hook.push(Stage.POST_ACT, policy, env)

            if stop_condition(policy, env):
                is_stop = True
                logger.info("stop condition met in episode %d", episode)
                policy.push(Stage.PRE_ACT, env)
                policy.optimise(Stage.PRE_ACT)
                hook.push(Stage.PRE_ACT, policy, env)
                see_last_observation(policy, env)
                break

        policy.push(Stage.POST_EPISODE, env)
        policy.optimise(Stage.POST_EPISODE)
        hook.push(Stage.POST_EPISODE, policy, env)
        logger.debug("episode %d finished", episode)
        episode += 1

    policy.push(Stage.POST_EXPERIMENT, env)
    hook.push(Stage.POST_EXPERIMENT, policy, env)
    return policy
