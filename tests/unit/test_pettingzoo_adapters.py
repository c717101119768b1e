"""Tests for the PettingZoo AEC and Parallel adapters."""

from __future__ import annotations

import numpy as np
import pytest
from gymnasium import spaces
from pettingzoo import AECEnv, ParallelEnv

from marlcore.adapters import AECEnvironment, ParallelEnvironment
from marlcore.adapters.pettingzoo_aec import action_mask_to_legal
from marlcore.conditions import StopAfterEpisode, StopWhenDone
from marlcore.core.types import DynamicStyle
from marlcore.hooks import MultiAgentHook, StepsPerEpisode, TotalRewardPerEpisode
from marlcore.policies import Agent, BasePolicy, MultiAgentPolicy, RandomPolicy
from marlcore.runner.multi_agent import run


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class CountdownAEC(AECEnv):
    """Players alternately subtract 1 (action 0) or 2 (action 1); reaching 0 wins."""

    metadata = {"render_modes": [], "name": "countdown_v0"}

    def __init__(self, start: int = 5) -> None:
        super().__init__()
        self.possible_agents = ["p0", "p1"]
        self._start = start
        self.left = start

    def observation_space(self, agent):
        return spaces.Dict({
            "left": spaces.Discrete(self._start + 1),
            "action_mask": spaces.MultiBinary(2),
        })

    def action_space(self, agent):
        return spaces.Discrete(2)

    def reset(self, seed=None, options=None):
        self.agents = list(self.possible_agents)
        self.rewards = {a: 0 for a in self.agents}
        self._cumulative_rewards = {a: 0 for a in self.agents}
        self.terminations = {a: False for a in self.agents}
        self.truncations = {a: False for a in self.agents}
        self.infos = {a: {} for a in self.agents}
        self.agent_selection = "p0"
        self.left = self._start

    def observe(self, agent):
        mask = np.array([1, 1 if self.left >= 2 else 0], dtype=np.int8)
        return {"left": self.left, "action_mask": mask}

    def step(self, action):
        agent = self.agent_selection
        other = "p1" if agent == "p0" else "p0"
        self.left -= int(action) + 1
        self.rewards = {a: 0 for a in self.agents}
        if self.left <= 0:
            self.rewards[agent] = 1
            self.rewards[other] = -1
            self.terminations = {a: True for a in self.agents}
        self.agent_selection = other


class MatchingPenniesParallel(ParallelEnv):
    """p0 wins a round when both coins match, p1 otherwise."""

    metadata = {"render_modes": [], "name": "pennies_v0"}

    def __init__(self, rounds: int = 2) -> None:
        super().__init__()
        self.possible_agents = ["p0", "p1"]
        self.agents = []
        self.rounds = rounds
        self.t = 0

    def observation_space(self, agent):
        return spaces.Discrete(self.rounds + 1)

    def action_space(self, agent):
        return spaces.Discrete(2)

    def reset(self, seed=None, options=None):
        self.agents = list(self.possible_agents)
        self.t = 0
        return {a: 0 for a in self.agents}, {a: {} for a in self.agents}

    def step(self, actions):
        self.t += 1
        match = actions["p0"] == actions["p1"]
        rewards = {"p0": 1 if match else -1, "p1": -1 if match else 1}
        done = self.t >= self.rounds
        observations = {a: self.t for a in self.agents}
        terminations = {a: done for a in self.agents}
        truncations = {a: False for a in self.agents}
        infos = {a: {} for a in self.agents}
        if done:
            self.agents = []
        return observations, rewards, terminations, truncations, infos


class ConstantPolicy(BasePolicy):
    def __init__(self, action: int) -> None:
        self.action = action

    def plan(self, env, player=None):
        return self.action


# ---------------------------------------------------------------------------
# AEC adapter
# ---------------------------------------------------------------------------

class TestAECEnvironment:
    def test_trait_and_players(self):
        env = AECEnvironment(CountdownAEC())
        assert env.dynamic_style is DynamicStyle.SEQUENTIAL
        assert env.players == ("p0", "p1")

    def test_current_player_requires_reset(self):
        with pytest.raises(RuntimeError, match="reset"):
            AECEnvironment(CountdownAEC()).current_player

    def test_act_keeps_cursor_until_next_player(self):
        env = AECEnvironment(CountdownAEC())
        env.reset()
        env.act(0)
        assert env.current_player == "p0"
        assert env.unwrapped.agent_selection == "p1"
        env.next_player()
        assert env.current_player == "p1"
        assert env.elapsed_steps == 1

    def test_reward_and_termination_for_mover(self):
        env = AECEnvironment(CountdownAEC(start=2))
        env.reset()
        env.act(1)
        assert env.is_terminated()
        assert env.reward("p0") == 1.0
        assert env.reward("p1") == -1.0

    def test_legal_actions_from_mask(self):
        env = AECEnvironment(CountdownAEC(start=1))
        env.reset()
        assert env.legal_actions("p0") == [0]

    def test_full_run(self):
        env = AECEnvironment(CountdownAEC(start=6))
        agents = {p: Agent(RandomPolicy(seed=i)) for i, p in enumerate(env.players)}
        hook = MultiAgentHook({p: TotalRewardPerEpisode() for p in env.players})

        run(MultiAgentPolicy(agents), env, StopAfterEpisode(3), hook)

        for i in range(3):
            assert hook["p0"].rewards[i] + hook["p1"].rewards[i] == 0.0
        assert all(t.action in (0, 1) for a in agents.values() for t in a.trajectory)


# ---------------------------------------------------------------------------
# Parallel adapter
# ---------------------------------------------------------------------------

class TestParallelEnvironment:
    def test_trait(self):
        assert ParallelEnvironment(MatchingPenniesParallel()).dynamic_style is DynamicStyle.SIMULTANEOUS

    def test_act_before_reset(self):
        with pytest.raises(RuntimeError, match="reset"):
            ParallelEnvironment(MatchingPenniesParallel()).act([0, 0])

    def test_step_bookkeeping(self):
        env = ParallelEnvironment(MatchingPenniesParallel(rounds=2))
        env.reset()
        assert env.state("p0") == 0
        assert not env.is_terminated()
        env.act([1, 0])
        assert env.reward("p0") == -1.0
        assert env.reward("p1") == 1.0
        assert env.state("p1") == 1
        env.act([1, 1])
        assert env.is_terminated()
        assert env.elapsed_steps == 2
        env.reset()
        assert env.elapsed_steps == 0

    def test_full_run(self):
        env = ParallelEnvironment(MatchingPenniesParallel(rounds=3))
        policy = MultiAgentPolicy({"p0": ConstantPolicy(1), "p1": ConstantPolicy(1)})
        hook = MultiAgentHook({"p0": TotalRewardPerEpisode(), "p1": StepsPerEpisode()})

        run(policy, env, StopWhenDone(), hook)

        assert hook["p0"].rewards == [3.0]
        assert hook["p1"].steps == [3]


class TestActionMask:
    def test_from_observation(self):
        assert action_mask_to_legal({"action_mask": np.array([0, 1, 1])}) == [1, 2]

    def test_from_info(self):
        assert action_mask_to_legal(np.zeros(3), {"action_mask": [1, 0, 1]}) == [0, 2]

    def test_absent(self):
        assert action_mask_to_legal(np.zeros(3), {}) is None
