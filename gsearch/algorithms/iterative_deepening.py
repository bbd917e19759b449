"""Iterative-deepening search driver.

Runs :class:`DepthLimitedSearch` with limits 0, 1, 2, ... and succeeds on the
first limit that reaches the goal. Every iteration is an independent search
from scratch. Without a bound the loop ends only on success or when an
iteration held back no path at its limit, meaning every cycle-free path has
been explored; on an infinite state space with no solution it would not end,
so callers can pass ``max_depth`` or a ``should_stop`` cancellation hook.

A trace object that also has a ``start_iteration(limit)`` method is told where
each depth-limited run begins, see :class:`gsearch.trace.ExpansionRecorder`.
"""

from __future__ import annotations

from itertools import count
from typing import Callable, Optional

from gsearch.algorithms.base import SearchAlgorithm, SearchOutcome, TraceCallback
from gsearch.algorithms.strategies import DepthLimitedSearch, register_strategy
from gsearch.config import SEARCH_CONFIG
from gsearch.logging import get_logger
from gsearch.model.problem import Problem
from gsearch.types.base import SearchStrategy

logger = get_logger(__name__)


@register_strategy(SearchStrategy.ITERATIVE_DEEPENING)
class IterativeDeepeningSearch(SearchAlgorithm):
    """Depth-limited search repeated with increasing limits.

    Args:
        max_depth: Largest limit to try. Falls back to
            ``SEARCH_CONFIG.max_depth``; None means no bound.
        should_stop: Optional cancellation hook, checked before each limit.
            Returning True ends the search unsuccessfully.

    Raises:
        ValueError: If ``max_depth`` is negative.
    """

    def __init__(
        self,
        max_depth: Optional[int] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.max_depth = SEARCH_CONFIG.resolve_max_depth(max_depth)
        self.should_stop = should_stop

    @property
    def name(self) -> str:
        return "Iterative deepening search"

    def run(
        self, problem: Problem, trace: Optional[TraceCallback] = None
    ) -> SearchOutcome:
        total_expansions = 0
        outcome: Optional[SearchOutcome] = None
        start_iteration = getattr(trace, "start_iteration", None)

        for limit in count():
            if self.max_depth is not None and limit > self.max_depth:
                logger.debug("%s: max_depth %d exhausted", self.name, self.max_depth)
                break
            if self.should_stop is not None and self.should_stop():
                logger.debug("%s: cancelled before L=%d", self.name, limit)
                break

            logger.debug("%s: L=%d", self.name, limit)
            if start_iteration is not None:
                start_iteration(limit)
            outcome = DepthLimitedSearch(limit).run(problem, trace)
            total_expansions += outcome.expansions

            if outcome.found:
                break
            if not outcome.cutoff:
                logger.debug(
                    "%s: no path held back at L=%d, search space exhausted",
                    self.name,
                    limit,
                )
                break

        if outcome is None:
            return SearchOutcome(self.name, None, 0)
        return SearchOutcome(
            self.name,
            outcome.path,
            total_expansions,
            outcome.cutoff,
            outcome.depth_limit,
        )


def iterative_deepening(
    max_depth: Optional[int] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> IterativeDeepeningSearch:
    return IterativeDeepeningSearch(max_depth=max_depth, should_stop=should_stop)
