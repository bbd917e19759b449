"""Search engine, fringes and the strategy catalog."""

from gsearch.algorithms.base import (
    GeneralSearch,
    SearchAlgorithm,
    SearchOutcome,
    TraceCallback,
)
from gsearch.algorithms.fringe import Fringe, PriorityFringe, QueueFringe, StackFringe
from gsearch.algorithms.strategies import (
    STRATEGY_REGISTRY,
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    UniformCostSearch,
    available_strategies,
    breadth_first,
    create_algorithm,
    depth_first,
    depth_limited,
    uniform_cost,
)
from gsearch.algorithms.iterative_deepening import (
    IterativeDeepeningSearch,
    iterative_deepening,
)

__all__ = [
    "GeneralSearch",
    "SearchAlgorithm",
    "SearchOutcome",
    "TraceCallback",
    "Fringe",
    "StackFringe",
    "QueueFringe",
    "PriorityFringe",
    "STRATEGY_REGISTRY",
    "DepthFirstSearch",
    "BreadthFirstSearch",
    "DepthLimitedSearch",
    "UniformCostSearch",
    "IterativeDeepeningSearch",
    "depth_first",
    "breadth_first",
    "depth_limited",
    "uniform_cost",
    "iterative_deepening",
    "available_strategies",
    "create_algorithm",
]
