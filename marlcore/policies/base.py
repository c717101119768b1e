"""Base policy interface for pluggable decision makers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage


class BasePolicy(ABC):
    """Interface that all policies must implement.

    ``push`` and ``optimise`` default to no-ops so that simple policies
    only need to implement ``plan``.
    """

    @abstractmethod
    def plan(self, env: BaseEnvironment, player: AgentID | None = None) -> Any:
        """Choose an action for ``player`` given the current environment."""

    def push(
        self, stage: Stage, env: BaseEnvironment, player: AgentID | None = None
    ) -> None:
        """React to a lifecycle stage."""

    def optimise(self, stage: Stage) -> None:
        """Run a learning update, if any is due at ``stage``."""
