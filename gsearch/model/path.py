"""Immutable candidate path held by a search fringe.

A ``Path`` stores the visited states newest-first, so the state to expand next
is ``states[0]``, together with the accumulated edge cost. Extending a path
returns a new object; a path is never modified after construction.

Paths are totally ordered by ``(cost, frontier state, length, joined states)``.
Cost-ordered fringes rely on this order, and the final comparison on the
rendered state sequence keeps ties between distinct paths deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, total_ordering
from typing import Any, Iterable, Iterator, Tuple

from gsearch.types.base import Cost, State


@total_ordering
@dataclass(frozen=True)
class Path:
    """A route through the state space, most recent state first.

    Attributes:
        states: Visited states, newest first. Never empty.
        cost: Sum of edge costs along the route.
    """

    states: Tuple[State, ...]
    cost: Cost = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.states, tuple):
            object.__setattr__(self, "states", tuple(self.states))
        if not self.states:
            raise ValueError("A path must contain at least one state.")

    @classmethod
    def root(cls, state: State) -> Path:
        """Return the zero-cost single-state path a search starts from."""
        return cls((state,), 0.0)

    @classmethod
    def from_route(cls, route: Iterable[State], cost: Cost = 0.0) -> Path:
        """Build a path from states given in travel order (oldest first)."""
        return cls(tuple(reversed(tuple(route))), cost)

    @property
    def length(self) -> int:
        """Number of states on the path (edges + 1)."""
        return len(self.states)

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[State]:
        return iter(self.states)

    def next_state(self) -> State:
        """Return the frontier state, the one to expand next."""
        return self.states[0]

    def did_visit(self, state: State) -> bool:
        return state in self.states

    def add_state(self, state: State, edge_cost: Cost) -> Path:
        """Return a new path extended by ``state`` over an edge of ``edge_cost``."""
        return Path((state,) + self.states, self.cost + edge_cost)

    @cached_property
    def nodes_seq(self) -> Tuple[State, ...]:
        """States in travel order, from the root to the frontier."""
        return tuple(reversed(self.states))

    @cached_property
    def _joined(self) -> str:
        return ", ".join(str(state) for state in self.states)

    def sort_key(self) -> Tuple[Cost, State, int, str]:
        """Key realizing the total order used by cost-sorted fringes.

        The last element compares the states rendered with ``str``, not the
        states themselves. States of one space should share a single type:
        distinct states with the same rendering (``1`` and ``"1"``) would tie.
        """
        return (self.cost, self.states[0], self.length, self._joined)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return "<" + ",".join(str(state) for state in self.states) + ">"
