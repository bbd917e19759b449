"""Search problem definition."""

from __future__ import annotations

from dataclasses import dataclass

from gsearch.types.base import State, StateNode, StateSpace


@dataclass(frozen=True)
class Problem:
    """A state space with an initial node and a goal state.

    The initial node is validated against the state space on construction;
    this is the only check performed before a search begins.

    Attributes:
        state_space: Graph supplying successors and edge costs.
        initial_node: Node the search starts from.
        goal_state: State that ends the search when popped from the fringe.

    Raises:
        StateNotFoundError: If the initial state is not in the state space.
    """

    state_space: StateSpace
    initial_node: StateNode
    goal_state: State

    def __post_init__(self) -> None:
        self.state_space.get_node(self.initial_node.state)

    @classmethod
    def from_state(
        cls, state_space: StateSpace, initial_state: State, goal_state: State
    ) -> Problem:
        """Create a problem by resolving ``initial_state`` through the state space.

        Raises:
            StateNotFoundError: If ``initial_state`` is not in the state space.
        """
        return cls(state_space, state_space.get_node(initial_state), goal_state)

    @property
    def initial_state(self) -> State:
        return self.initial_node.state
