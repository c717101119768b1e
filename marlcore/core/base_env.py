"""Abstract base environment — the environment contract.

Every environment the run loops drive (reference games, PettingZoo
adapters, or user code) must implement this interface.

This class enforces:
  1. Lifecycle   — reset() starts a fresh episode and a fresh turn cursor
  2. Act         — act() is the only state-mutating call of a turn
  3. Turn cursor — current_player / next_player() for sequential games
  4. Per-player  — state(), reward() addressed by player identity
  5. Trait       — dynamic_style declares Sequential vs. Simultaneous
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gymnasium import spaces

from marlcore.core.types import AgentID, DynamicStyle


class BaseEnvironment(ABC):
    """Abstract multi-agent environment contract.  Game-agnostic."""

    # ------------------------------------------------------------------
    # Trait
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def dynamic_style(self) -> DynamicStyle:
        """Sequential (turn-based) or Simultaneous. Fixed per instance."""
        ...

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @abstractmethod
    def reset(self, seed: int | None = None) -> None:
        """Start a fresh episode. Also resets the current-player cursor."""
        ...

    # ------------------------------------------------------------------
    # Act
    # ------------------------------------------------------------------

    @abstractmethod
    def act(self, action: Any) -> None:
        """Apply an action.

        Sequential environments receive the current player's action.
        Simultaneous environments receive an iterable of actions, one per
        player in ``players`` order.
        """
        ...

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def players(self) -> tuple[AgentID, ...]:
        """All player identities, in a fixed order."""
        ...

    @property
    def current_player(self) -> AgentID:
        """The player whose turn it is (sequential environments only)."""
        raise NotImplementedError(
            f"{type(self).__name__} does not track a current player."
        )

    def next_player(self) -> None:
        """Advance the turn cursor to the next acting player."""
        raise NotImplementedError(
            f"{type(self).__name__} does not track a current player."
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @abstractmethod
    def state(self, player: AgentID) -> Any:
        """Observation of the environment from ``player``'s point of view."""
        ...

    @abstractmethod
    def reward(self, player: AgentID) -> float:
        """Reward ``player`` received from the most recent act()."""
        ...

    @abstractmethod
    def is_terminated(self) -> bool:
        """True if the episode has terminated."""
        ...

    @abstractmethod
    def action_space(self, player: AgentID) -> spaces.Space:
        """Gymnasium space of valid actions for ``player``."""
        ...

    @property
    def elapsed_steps(self) -> int:
        """Number of act() calls since the last reset()."""
        raise NotImplementedError(
            f"{type(self).__name__} does not count its steps."
        )

    def legal_actions(self, player: AgentID) -> list[Any] | None:
        """Currently legal actions for ``player``, or None if unrestricted."""
        return None
