"""Multi-agent run loop — picks the turn discipline from the environment.

``run`` checks that policies and hooks address the same players, then
reads ``env.dynamic_style`` once:

  SEQUENTIAL    ``run_sequential``: one player acts per turn, in the order
                the environment's current-player cursor dictates
  SIMULTANEOUS  ``run_simultaneous``: all players act each round, via the
                single loop
"""

from __future__ import annotations

import logging

from marlcore.conditions.reset import ResetAtTerminal
from marlcore.core.base_env import BaseEnvironment
from marlcore.core.iterators import CurrentPlayerIterator
from marlcore.core.types import DynamicStyle, Stage
from marlcore.hooks.multi_agent import MultiAgentHook
from marlcore.policies.multi_agent import MultiAgentPolicy
from marlcore.runner.loop import Condition, run_loop, see_last_observation

logger = logging.getLogger(__name__)


def run(
    multiagent_policy: MultiAgentPolicy,
    env: BaseEnvironment,
    stop_condition: Condition,
    hook: MultiAgentHook,
    reset_condition: Condition | None = None,
) -> MultiAgentPolicy:
    """Run a multi-agent experiment and return the policy container.

    Raises ValueError before touching the environment if the policy and
    hook containers are keyed by different players, or if the environment
    declares an unknown dynamic style.
    """
    if not multiagent_policy.same_keys(hook):
        raise ValueError("MultiAgentPolicy and MultiAgentHook must have the same keys")
    if reset_condition is None:
        reset_condition = ResetAtTerminal()

    style = env.dynamic_style
    if style is DynamicStyle.SEQUENTIAL:
        return run_sequential(multiagent_policy, env, stop_condition, hook, reset_condition)
    if style is DynamicStyle.SIMULTANEOUS:
        return run_simultaneous(multiagent_policy, env, stop_condition, hook, reset_condition)
    raise ValueError(f"Unsupported dynamic style: {style!r}")


def run_sequential(
    multiagent_policy: MultiAgentPolicy,
    env: BaseEnvironment,
    stop_condition: Condition,
    multiagent_hook: MultiAgentHook,
    reset_condition: Condition,
) -> MultiAgentPolicy:
    """Turn-based loop: PRE_ACT, plan, act, POST_ACT for one player per turn.

    When the stop condition fires, every player (not only the one who just
    moved) is shown the final state and asked to plan once more before the
    episode closes.  An ordinary episode end skips that step since the next
    PRE_EPISODE follows immediately.
    """
    multiagent_hook.push(Stage.PRE_EXPERIMENT, multiagent_policy, env)
    multiagent_policy.push(Stage.PRE_EXPERIMENT, env)
    is_stop = False
    episode = 0
    while not is_stop:
        env.reset()
        logger.debug("episode %d started", episode)
        multiagent_policy.push(Stage.PRE_EPISODE, env)
        multiagent_policy.optimise(Stage.PRE_EPISODE)
        multiagent_hook.push(Stage.PRE_EPISODE, multiagent_policy, env)

        while not (reset_condition(multiagent_policy, env) or is_stop):  # one episode
            for player in CurrentPlayerIterator(env):
                policy = multiagent_policy[player]
                hook = multiagent_hook[player]

                policy.push(Stage.PRE_ACT, env, player)
                policy.optimise(Stage.PRE_ACT)
                hook.push(Stage.PRE_ACT, policy, env, player)

                action = policy.plan(env, player)
                env.act(action)

                policy.push(Stage.POST_ACT, env, player)
                policy.optimise(Stage.POST_ACT)
                hook.push(Stage.POST_ACT, policy, env, player)

                if stop_condition(policy, env):
                    is_stop = True
                    logger.info("stop condition met in episode %d after %r moved", episode, player)
                    multiagent_policy.push(Stage.PRE_ACT, env)
                    multiagent_policy.optimise(Stage.PRE_ACT)
                    multiagent_hook.push(Stage.PRE_ACT, multiagent_policy, env)
                    see_last_observation(multiagent_policy, env)
                    break

                if reset_condition(multiagent_policy, env):
                    break

        multiagent_policy.push(Stage.POST_EPISODE, env)
        multiagent_policy.optimise(Stage.POST_EPISODE)
        multiagent_hook.push(Stage.POST_EPISODE, multiagent_policy, env)
        logger.debug("episode %d finished", episode)
        episode += 1

    multiagent_policy.push(Stage.POST_EXPERIMENT, env)
    multiagent_hook.push(Stage.POST_EXPERIMENT, multiagent_policy, env)
    return multiagent_policy


def run_simultaneous(
    multiagent_policy: MultiAgentPolicy,
    env: BaseEnvironment,
    stop_condition: Condition,
    hook: MultiAgentHook,
    reset_condition: Condition,
) -> MultiAgentPolicy:
    """All players act together each round; delegates to the single loop."""
    run_loop(multiagent_policy, env, stop_condition, hook, reset_condition)
    return multiagent_policy
