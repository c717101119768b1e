"""RunLoggerHook — streams a player's turns and episode totals to a RunLogger.

Respects InstrumentationConfig flags and step_log_frequency.  Several
per-player hooks may share one RunLogger; each record carries its agent_id.
"""

from __future__ import annotations

from typing import Any

from marlcore.config.schema import InstrumentationConfig
from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage
from marlcore.hooks.base import BaseHook
from marlcore.runner.definitions import EventType
from marlcore.runner.run_logger import RunLogger


class RunLoggerHook(BaseHook):
    """Writes turn records, boundary events and a per-player episode summary."""

    def __init__(
        self,
        run_logger: RunLogger,
        config: InstrumentationConfig | None = None,
    ) -> None:
        self._logger = run_logger
        self._config = config or InstrumentationConfig()
        self._episode = 0
        self._step = 0
        self._total_steps = 0
        self._episode_reward = 0.0
        self._episode_rewards: list[float] = []
        self._episode_steps: list[int] = []

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        if stage is Stage.PRE_EPISODE:
            self._step = 0
            self._episode_reward = 0.0
        elif stage is Stage.POST_ACT:
            self._on_post_act(policy, env, player)
        elif stage is Stage.POST_EPISODE:
            self._on_post_episode(env, player)
        elif stage is Stage.POST_EXPERIMENT:
            self._on_post_experiment(player)

    def _on_post_act(self, policy: Any, env: BaseEnvironment, player: AgentID | None) -> None:
        reward = float(env.reward(player)) if player is not None else 0.0
        step = self._step
        self._step += 1
        self._total_steps += 1
        self._episode_reward += reward

        if not self._config.enable_step_metrics:
            return
        if step % self._config.step_log_frequency != 0:
            return

        action = getattr(policy, "last_action", None)
        self._logger.log_step_metrics([{
            "episode": self._episode,
            "step": step,
            "agent_id": player,
            "action": action,
            "reward": reward,
            "terminated": env.is_terminated(),
        }])

    def _on_post_episode(self, env: BaseEnvironment, player: AgentID | None) -> None:
        if self._config.enable_episode_metrics:
            self._logger.log_events([{
                "event": EventType.EPISODE_END.value,
                "episode": self._episode,
                "agent_id": player,
                "steps": self._step,
                "total_reward": self._episode_reward,
                "terminated": env.is_terminated(),
            }])
        self._episode_rewards.append(self._episode_reward)
        self._episode_steps.append(self._step)
        self._episode += 1

    def _on_post_experiment(self, player: AgentID | None) -> None:
        self._logger.log_events([{
            "event": EventType.EXPERIMENT_END.value,
            "agent_id": player,
            "episodes": self._episode,
            "total_steps": self._total_steps,
        }])
        rewards = self._episode_rewards
        self._logger.write_episode_summary({
            player if player is not None else "all": {
                "episodes": self._episode,
                "total_steps": self._total_steps,
                "episode_rewards": rewards,
                "episode_steps": self._episode_steps,
                "mean_reward": sum(rewards) / len(rewards) if rewards else 0.0,
            },
        })
