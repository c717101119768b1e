"""Bounded in-memory trajectory of completed transitions."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from marlcore.core.types import Transition


class Trajectory:
    """FIFO store of ``Transition`` records; oldest dropped past capacity."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: deque[Transition] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int | None:
        return self._capacity

    def push(self, transition: Transition) -> None:
        self._items.append(transition)

    def clear(self) -> None:
        self._items.clear()

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transition]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Transition:
        return self._items[index]
