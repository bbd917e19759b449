"""Fringe containers deciding the order in which candidate paths are expanded.

The insertion policy of the fringe fully determines the search order:

- ``StackFringe``: new paths go to the front (depth-first order).
- ``QueueFringe``: new paths go to the back (breadth-first order).
- ``PriorityFringe``: the cheapest path by :class:`~gsearch.model.path.Path`
  total order is always in front (uniform-cost order).

Each fringe is owned by a single search run. ``snapshot()`` returns the paths
front to back, i.e. in the order the engine would pop them.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterable, List, Tuple

from gsearch.model.path import Path


class Fringe(ABC):
    """Ordered working set of paths not yet expanded."""

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        for path in paths:
            self.push(path)

    @abstractmethod
    def push(self, path: Path) -> None:
        """Insert a newly generated path."""

    @abstractmethod
    def pop(self) -> Path:
        """Remove and return the front path.

        Raises:
            IndexError: If the fringe is empty.
        """

    @abstractmethod
    def snapshot(self) -> Tuple[Path, ...]:
        """Return the paths front to back without modifying the fringe."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.snapshot())!r})"


class StackFringe(Fringe):
    """LIFO fringe: each pushed path becomes the front."""

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._items: List[Path] = []
        super().__init__(paths)

    def push(self, path: Path) -> None:
        self._items.append(path)

    def pop(self) -> Path:
        return self._items.pop()

    def snapshot(self) -> Tuple[Path, ...]:
        return tuple(reversed(self._items))

    def __len__(self) -> int:
        return len(self._items)


class QueueFringe(Fringe):
    """FIFO fringe: pushed paths wait behind everything already queued."""

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._items: Deque[Path] = deque()
        super().__init__(paths)

    def push(self, path: Path) -> None:
        self._items.append(path)

    def pop(self) -> Path:
        return self._items.popleft()

    def snapshot(self) -> Tuple[Path, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)


class PriorityFringe(Fringe):
    """Min-heap fringe keyed by the Path total order.

    Pops in the same order as appending and re-sorting the whole fringe after
    every insertion, at O(log n) per push.
    """

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._heap: List[Path] = []
        super().__init__(paths)

    def push(self, path: Path) -> None:
        heapq.heappush(self._heap, path)

    def pop(self) -> Path:
        return heapq.heappop(self._heap)

    def snapshot(self) -> Tuple[Path, ...]:
        return tuple(sorted(self._heap))

    def __len__(self) -> int:
        return len(self._heap)
