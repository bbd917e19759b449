"""Catalog of uninformed search strategies.

Every strategy is a fixed configuration of :class:`GeneralSearch`:

=====================  =========  ============  ===========
Strategy               Order      Fringe        Depth limit
=====================  =========  ============  ===========
Depth-first            reverse    stack         none
Breadth-first          natural    queue         none
Depth-limited(d)       reverse    stack         d
Uniform-cost           natural    priority      none
=====================  =========  ============  ===========

Depth-first strategies sort successors in reverse so that, once each is pushed
onto the stack in turn, the smallest state ends up in front.

Strategies are registered by :class:`~gsearch.types.base.SearchStrategy` and
can be created by name through :func:`create_algorithm`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from gsearch.algorithms.base import GeneralSearch, SearchAlgorithm
from gsearch.algorithms.fringe import PriorityFringe, QueueFringe, StackFringe
from gsearch.types.base import ExpansionOrder, SearchStrategy

STRATEGY_REGISTRY: Dict[SearchStrategy, Callable[..., SearchAlgorithm]] = {}


def register_strategy(strategy: SearchStrategy) -> Any:
    """Class decorator registering a :class:`SearchAlgorithm` for ``strategy``.

    Raises:
        ValueError: If ``strategy`` is already registered.
    """

    def decorator(cls):
        if strategy in STRATEGY_REGISTRY:
            raise ValueError(f"Strategy '{strategy.name}' already registered.")
        STRATEGY_REGISTRY[strategy] = cls
        return cls

    return decorator


@register_strategy(SearchStrategy.DEPTH_FIRST)
class DepthFirstSearch(GeneralSearch):
    """Expand the most recently generated path first."""

    def __init__(self) -> None:
        super().__init__(
            name="Depth 1st search",
            expansion_order=ExpansionOrder.REVERSE,
            fringe_type=StackFringe,
        )


@register_strategy(SearchStrategy.BREADTH_FIRST)
class BreadthFirstSearch(GeneralSearch):
    """Expand paths level by level; the first goal found has fewest edges."""

    def __init__(self) -> None:
        super().__init__(
            name="Breadth 1st search",
            expansion_order=ExpansionOrder.NATURAL,
            fringe_type=QueueFringe,
        )


@register_strategy(SearchStrategy.DEPTH_LIMITED)
class DepthLimitedSearch(GeneralSearch):
    """Depth-first search that does not expand paths longer than ``depth_limit``.

    With limit ``L`` a goal is found iff it lies at most ``L`` edges from the
    initial state: paths of ``L + 1`` states are goal-tested but not expanded.
    """

    def __init__(self, depth_limit: int) -> None:
        super().__init__(
            name=f"Depth-limited search (depth-limit = {depth_limit})",
            expansion_order=ExpansionOrder.REVERSE,
            fringe_type=StackFringe,
            depth_limit=depth_limit,
        )


@register_strategy(SearchStrategy.UNIFORM_COST)
class UniformCostSearch(GeneralSearch):
    """Branch-and-bound: always expand the cheapest path.

    Ties on cost are broken by frontier state, then path length, then the
    rendered state sequence. Edges without a reported cost count as
    ``SEARCH_CONFIG.default_edge_cost`` (0.0).
    """

    def __init__(self) -> None:
        super().__init__(
            name="Uniform Search (Branch-and-bound)",
            expansion_order=ExpansionOrder.NATURAL,
            fringe_type=PriorityFringe,
        )


def depth_first() -> DepthFirstSearch:
    return DepthFirstSearch()


def breadth_first() -> BreadthFirstSearch:
    return BreadthFirstSearch()


def depth_limited(depth: int) -> DepthLimitedSearch:
    return DepthLimitedSearch(depth)


def uniform_cost() -> UniformCostSearch:
    return UniformCostSearch()


def available_strategies() -> List[str]:
    """Return the names of all registered strategies."""
    return [strategy.name for strategy in sorted(STRATEGY_REGISTRY)]


def create_algorithm(
    strategy: Union[SearchStrategy, str],
    depth_limit: Optional[int] = None,
    **kwargs: Any,
) -> SearchAlgorithm:
    """Instantiate a registered strategy.

    Args:
        strategy: Strategy enum member or its name (see
            :meth:`SearchStrategy.from_string`).
        depth_limit: Required for ``DEPTH_LIMITED``, ignored otherwise.
        **kwargs: Extra constructor arguments, e.g. ``max_depth`` for
            iterative deepening.

    Returns:
        A ready-to-use search algorithm.

    Raises:
        ValueError: If the strategy is unknown or a depth-limited search is
            requested without a limit.
    """
    if isinstance(strategy, str):
        strategy = SearchStrategy.from_string(strategy)
    try:
        impl = STRATEGY_REGISTRY[strategy]
    except KeyError:
        raise ValueError(f"Strategy '{strategy.name}' is not registered.") from None

    if strategy is SearchStrategy.DEPTH_LIMITED:
        if depth_limit is None:
            raise ValueError("Depth-limited search requires a depth_limit.")
        return impl(depth_limit, **kwargs)
    return impl(**kwargs)
