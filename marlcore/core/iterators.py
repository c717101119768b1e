"""Current-player iteration for sequential (turn-based) environments."""

from __future__ import annotations

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID


class CurrentPlayerIterator:
    """Yields the acting player of a sequential environment, turn after turn.

    The first value is the environment's current player.  Every following
    value is produced by asking the environment to advance its turn cursor
    (``next_player()``) and reading ``current_player`` again.

    The iterator is unbounded: it never raises ``StopIteration``, even once
    the environment is terminated.  Stopping consumption is the run loop's
    job.  It is not restartable; build a fresh one for each episode.
    """

    def __init__(self, env: BaseEnvironment) -> None:
        self._env = env
        self._started = False

    @property
    def env(self) -> BaseEnvironment:
        return self._env

    def start(self) -> AgentID:
        """Return the current player without touching the cursor."""
        self._started = True
        return self._env.current_player

    def advance(self) -> AgentID:
        """Move the cursor to the next player and return it."""
        self._env.next_player()
        return self._env.current_player

    def __iter__(self) -> CurrentPlayerIterator:
        return self

    def __next__(self) -> AgentID:
        if not self._started:
            return self.start()
        return self.advance()
