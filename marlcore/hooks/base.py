"""Base hook interface — observers that record outcomes without deciding."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from marlcore.core.base_env import BaseEnvironment
from marlcore.core.types import AgentID, Stage


class BaseHook:
    """A hook reacts to lifecycle stages.  The default reaction is nothing."""

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        """Observe ``stage`` for ``policy`` acting in ``env``."""

    def __add__(self, other: BaseHook) -> ComposedHook:
        return ComposedHook(self, other)


class EmptyHook(BaseHook):
    """Hook that records nothing."""


class ComposedHook(BaseHook):
    """Fixed, ordered sequence of sub-hooks notified one after another."""

    def __init__(self, *hooks: BaseHook) -> None:
        self.hooks: tuple[BaseHook, ...] = hooks

    def push(
        self,
        stage: Stage,
        policy: Any,
        env: BaseEnvironment,
        player: AgentID | None = None,
    ) -> None:
        for hook in self.hooks:
            hook.push(stage, policy, env, player)

    def __add__(self, other: BaseHook) -> ComposedHook:
        return ComposedHook(*self.hooks, other)

    def __iter__(self) -> Iterator[BaseHook]:
        return iter(self.hooks)

    def __len__(self) -> int:
        return len(self.hooks)

    def __getitem__(self, index: int) -> BaseHook:
        return self.hooks[index]
