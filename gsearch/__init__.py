"""gsearch: uninformed search over state-space graphs.

gsearch finds whether a goal state is reachable from an initial state using a
pluggable strategy: depth-first, breadth-first, depth-limited, iterative
deepening or uniform-cost (branch-and-bound). Any object implementing the
``StateSpace`` contract can be searched; ``StrictMultiDiGraph`` is a
NetworkX-based implementation.

Primary API:
    Problem - State space, initial node and goal state
    Path - Immutable candidate path, newest state first
    depth_first(), breadth_first(), depth_limited(d), iterative_deepening(),
    uniform_cost() - Strategy factories
    create_algorithm() - Create a strategy by name

Example:
    from gsearch import Problem, StrictMultiDiGraph, uniform_cost

    g = StrictMultiDiGraph()
    for state in "ABCD":
        g.add_node(state)
    g.add_edge("A", "B", cost=1)
    g.add_edge("A", "C", cost=4)
    g.add_edge("B", "D", cost=1)
    g.add_edge("C", "D", cost=1)

    problem = Problem.from_state(g, "A", "D")
    path = uniform_cost().find_path(problem)  # <D,B,A>, cost 2.0
"""

from __future__ import annotations

from gsearch import logging
from gsearch._version import __version__
from gsearch.algorithms import (
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    GeneralSearch,
    IterativeDeepeningSearch,
    SearchAlgorithm,
    SearchOutcome,
    UniformCostSearch,
    available_strategies,
    breadth_first,
    create_algorithm,
    depth_first,
    depth_limited,
    iterative_deepening,
    uniform_cost,
)
from gsearch.config import SEARCH_CONFIG, SearchConfig
from gsearch.graph import StrictMultiDiGraph
from gsearch.model import Path, Problem
from gsearch.trace import ExpansionRecorder, format_fringe, format_step
from gsearch.types import (
    ExpansionOrder,
    SearchStrategy,
    StateNode,
    StateNotFoundError,
    StateSpace,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Path",
    "Problem",
    "StateNode",
    "StateSpace",
    "StrictMultiDiGraph",
    # Algorithms
    "SearchAlgorithm",
    "SearchOutcome",
    "GeneralSearch",
    "DepthFirstSearch",
    "BreadthFirstSearch",
    "DepthLimitedSearch",
    "UniformCostSearch",
    "IterativeDeepeningSearch",
    "depth_first",
    "breadth_first",
    "depth_limited",
    "iterative_deepening",
    "uniform_cost",
    "create_algorithm",
    "available_strategies",
    # Types
    "ExpansionOrder",
    "SearchStrategy",
    "StateNotFoundError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Tracing
    "ExpansionRecorder",
    "format_fringe",
    "format_step",
    # Utilities
    "logging",
]
