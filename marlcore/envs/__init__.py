"""Reference environments: one sequential and one simultaneous game."""

from marlcore.envs.rock_paper_scissors import Move, RockPaperScissorsEnv
from marlcore.envs.take_away import TakeAwayEnv

__all__ = ["Move", "RockPaperScissorsEnv", "TakeAwayEnv"]
