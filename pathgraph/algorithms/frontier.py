"""Frontier containers driving the search loops.

A frontier holds discovered-but-unprocessed entries. The traversal routine
only needs ``push``, ``pop`` and ``len()``, so the order in which nodes are
expanded is decided entirely by the frontier type:

- `StackFrontier`: last-in-first-out, gives depth-first order.
- `QueueFrontier`: first-in-first-out, gives breadth-first order.
- `MinCostFrontier`: smallest ``(cost, node)`` first, used by Dijkstra.
"""

from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from typing import Deque, Generic, List, Protocol, Tuple, TypeVar

from pathgraph.algorithms.base import Cost, NodeID

T = TypeVar("T")


class Frontier(Protocol[T]):
    """Minimal interface shared by all frontiers."""

    def push(self, item: T) -> None: ...

    def pop(self) -> T: ...

    def __len__(self) -> int: ...


class StackFrontier(Generic[T]):
    """Last-in-first-out frontier backed by a list."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class QueueFrontier(Generic[T]):
    """First-in-first-out frontier backed by a deque."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class MinCostFrontier:
    """Binary-heap frontier of ``(cost, node)`` entries, cheapest first.

    Entries are never removed or decreased in place. A node may be present
    several times with different costs; callers skip outdated entries when
    they are popped.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Cost, NodeID]] = []

    def push(self, item: Tuple[Cost, NodeID]) -> None:
        heappush(self._heap, item)

    def pop(self) -> Tuple[Cost, NodeID]:
        return heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
