"""Unit tests for Agent caching and Trajectory storage."""

from __future__ import annotations

import pytest

from marlcore.core.seeding import player_seeds
from marlcore.core.types import Stage, Transition
from marlcore.envs import TakeAwayEnv
from marlcore.policies import Agent, AgentCache, BasePolicy, RandomPolicy, Trajectory


class FixedPolicy(BasePolicy):
    def __init__(self, action: int) -> None:
        self.action = action
        self.stages: list = []
        self.optimised: list = []

    def plan(self, env, player=None):
        return self.action

    def push(self, stage, env, player=None):
        self.stages.append((stage, player))

    def optimise(self, stage):
        self.optimised.append(stage)


def _env(n_stones: int = 5) -> TakeAwayEnv:
    env = TakeAwayEnv(n_stones=n_stones)
    env.reset()
    return env


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------

class TestAgentCache:
    def test_full_turn_commits_transition(self):
        env = _env()
        agent = Agent(FixedPolicy(2))

        agent.push(Stage.PRE_ACT, env, "player_0")
        action = agent.plan(env, "player_0")
        env.act(action)
        agent.push(Stage.POST_ACT, env, "player_0")

        assert len(agent.trajectory) == 1
        assert agent.trajectory[0] == Transition(
            player="player_0",
            state={"remaining": 5, "is_my_turn": True},
            action=2,
            reward=0.0,
            terminated=False,
        )
        assert not agent.cache.has_state()

    def test_winning_move_records_terminal_reward(self):
        env = _env(n_stones=2)
        agent = Agent(FixedPolicy(2))
        agent.push(Stage.PRE_ACT, env, "player_0")
        env.act(agent.plan(env, "player_0"))
        agent.push(Stage.POST_ACT, env, "player_0")

        transition = agent.trajectory[0]
        assert transition.reward == 1.0
        assert transition.terminated is True

    def test_outcome_without_state_raises(self):
        env = _env()
        agent = Agent(FixedPolicy(1))
        with pytest.raises(RuntimeError, match="before any state"):
            agent.push(Stage.POST_ACT, env, "player_0")

    def test_outcome_without_action_commits_nothing(self):
        env = _env()
        agent = Agent(FixedPolicy(1))
        agent.push(Stage.PRE_ACT, env, "player_1")
        agent.push(Stage.POST_ACT, env, "player_1")
        assert len(agent.trajectory) == 0

    def test_stages_forwarded_to_wrapped_policy(self):
        env = _env()
        inner = FixedPolicy(1)
        agent = Agent(inner)
        agent.push(Stage.PRE_EPISODE, env, "player_0")
        agent.optimise(Stage.PRE_EPISODE)
        assert inner.stages == [(Stage.PRE_EPISODE, "player_0")]
        assert inner.optimised == [Stage.PRE_EPISODE]

    def test_pre_episode_clears_cache(self):
        env = _env()
        agent = Agent(FixedPolicy(1))
        agent.push(Stage.PRE_ACT, env, "player_0")
        agent.plan(env, "player_0")
        agent.push(Stage.PRE_EPISODE, env, "player_0")
        assert agent.cache == AgentCache()
        assert agent.last_state is None
        assert agent.last_action is None


# ---------------------------------------------------------------------------
# Trajectory
# ---------------------------------------------------------------------------

def _t(i: int) -> Transition:
    return Transition(player="p", state=i, action=0, reward=0.0, terminated=False)


class TestTrajectory:
    def test_capacity_drops_oldest(self):
        traj = Trajectory(capacity=3)
        for i in range(5):
            traj.push(_t(i))
        assert [t.state for t in traj] == [2, 3, 4]
        assert traj.is_full()

    def test_unbounded(self):
        traj = Trajectory()
        for i in range(100):
            traj.push(_t(i))
        assert len(traj) == 100
        assert not traj.is_full()

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            Trajectory(capacity=0)

    def test_clear(self):
        traj = Trajectory()
        traj.push(_t(0))
        traj.clear()
        assert len(traj) == 0


# ---------------------------------------------------------------------------
# RandomPolicy
# ---------------------------------------------------------------------------

class TestRandomPolicy:
    def test_only_legal_moves(self):
        env = _env(n_stones=2)
        policy = RandomPolicy(seed=0)
        for _ in range(50):
            assert policy.plan(env, "player_0") in (1, 2)

    def test_same_seed_same_actions(self):
        env = _env(n_stones=10)
        p1, p2 = RandomPolicy(seed=7), RandomPolicy(seed=7)
        assert [p1.plan(env, "player_0") for _ in range(20)] == [
            p2.plan(env, "player_0") for _ in range(20)
        ]

    def test_terminal_position_yields_none(self):
        env = _env(n_stones=1)
        env.act(1)
        assert RandomPolicy(seed=0).plan(env, "player_1") is None

    def test_per_player_seeds_differ(self):
        env = _env(n_stones=10)
        policies = RandomPolicy.per_player(["player_0", "player_1"], seed=42)
        assert list(policies) == ["player_0", "player_1"]
        moves = {
            p: [pol.plan(env, p) for _ in range(30)] for p, pol in policies.items()
        }
        assert moves["player_0"] != moves["player_1"]

    def test_per_player_reproducible(self):
        env = _env(n_stones=10)
        first = RandomPolicy.per_player(["a", "b"], seed=1)["b"]
        second = RandomPolicy.per_player(["a", "b"], seed=1)["b"]
        assert [first.plan(env, "b") for _ in range(10)] == [second.plan(env, "b") for _ in range(10)]


class TestPlayerSeeds:
    def test_one_distinct_seed_per_player(self):
        seeds = player_seeds(("a", "b", "c"), seed=3)
        assert list(seeds) == ["a", "b", "c"]
        assert len(set(seeds.values())) == 3

    def test_depends_on_root_seed_and_position(self):
        assert player_seeds(["a", "b"], seed=3) == player_seeds(iter(["a", "b"]), seed=3)
        assert player_seeds(["a", "b"], seed=3) != player_seeds(["a", "b"], seed=4)
        assert player_seeds(["x", "y"], seed=3)["y"] == player_seeds(["a", "b"], seed=3)["b"]
