"""Base types and enums for state-space search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import (
    Any,
    Hashable,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

#: Represents a numeric edge or path cost.
Cost = Union[int, float]

#: Opaque identifier of a position in the search space. The search core only
#: stores, compares (``==`` and ``<``) and renders (``str``) states.
State = Hashable


@dataclass(frozen=True)
class StateNode:
    """A state resolved by a state space, with its node attributes.

    Attributes:
        state: The state this node stands for.
        attrs: Read-only node attributes reported by the state space.
    """

    state: State
    attrs: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )


@runtime_checkable
class StateSpace(Protocol):
    """Contract the search engine requires from a graph.

    Implementations own node and edge storage; the engine only resolves the
    initial state once, asks for successors and reads edge costs.
    """

    def get_node(self, state: State) -> StateNode:
        """Resolve ``state`` to a node.

        Raises:
            StateNotFoundError: If the state is absent.
        """
        ...

    def expand_state(self, state: State) -> Iterable[State]:
        """Return the successor states of ``state`` in any order."""
        ...

    def cost_between(self, state: State, successor: State) -> Optional[Cost]:
        """Return the cost of the edge ``state -> successor``, or None."""
        ...


class ExpansionOrder(IntEnum):
    """Order in which sibling successors are inserted into the fringe."""

    #: Ascending natural order of states.
    NATURAL = 1
    #: Descending natural order of states.
    REVERSE = 2

    @property
    def reverse(self) -> bool:
        return self is ExpansionOrder.REVERSE


class SearchStrategy(IntEnum):
    """Uninformed search strategies available from the catalog."""

    DEPTH_FIRST = 1
    BREADTH_FIRST = 2
    DEPTH_LIMITED = 3
    ITERATIVE_DEEPENING = 4
    UNIFORM_COST = 5

    @classmethod
    def from_string(cls, value: str) -> "SearchStrategy":
        """Parse a string into a SearchStrategy enum value.

        Args:
            value: Case-insensitive name; dashes and spaces may replace
                underscores (e.g. "depth-first", "Uniform Cost").

        Returns:
            The corresponding SearchStrategy member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid search strategy '{value}'. Valid values are: {valid}"
            ) from None
