"""A queue that releases items only once their due time has arrived."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .timing import Instant

__all__ = ["ItemContainer", "TimeQueue"]

T = TypeVar("T")


@dataclass(frozen=True)
class ItemContainer(Generic[T]):
    """An item together with the Instant at which it becomes due."""

    instant: Instant
    item: T


class TimeQueue(Generic[T]):
    """Items ordered by due time; the earliest is released first."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, ItemContainer[T]]] = []
        self._counter = itertools.count()

    def add_item(self, instant: Instant, item: T) -> None:
        """Add an item due at the given Instant."""
        due = Instant(instant.nanos)
        heapq.heappush(self._heap, (due.nanos, next(self._counter), ItemContainer(due, item)))

    def has_item(self) -> bool:
        """Whether an item is due now."""
        if not self._heap:
            return False
        return self._heap[0][2].instant <= Instant.now()

    def pop_item(self) -> Any:
        """Remove and return the earliest item if it is due, else None."""
        if not self.has_item():
            return None
        return heapq.heappop(self._heap)[2].item

    def peek_entry(self) -> ItemContainer[T] | None:
        """Return the earliest entry without removing it, due or not."""
        return self._heap[0][2] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)