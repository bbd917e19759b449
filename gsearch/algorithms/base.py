"""Generic fringe-expansion search engine.

``GeneralSearch`` implements the classic General-Search loop over a fringe of
candidate :class:`~gsearch.model.path.Path` objects. A concrete strategy is a
configuration of three things:

- the expansion order used to sort sibling successors before insertion,
- the fringe container deciding where new paths are inserted,
- an optional depth limit on the paths that may be expanded.

The loop is iterative, so deep or wide state spaces do not grow the call stack.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Type

from gsearch.algorithms.fringe import Fringe
from gsearch.config import SEARCH_CONFIG
from gsearch.logging import get_logger
from gsearch.model.path import Path
from gsearch.model.problem import Problem
from gsearch.types.base import ExpansionOrder, State

logger = get_logger(__name__)

#: Observational callback receiving the fringe, front to back, at the start of
#: every expansion step.
TraceCallback = Callable[[Sequence[Path]], None]


@dataclass(frozen=True)
class SearchOutcome:
    """Result of a single search run.

    Attributes:
        algorithm: Display name of the strategy that ran.
        path: Goal-matching path, or None when the goal was not reached.
        expansions: Number of paths popped from the fringe.
        cutoff: True if some path with unexplored successors was held back by
            the depth limit.
        depth_limit: Depth limit in force (the last one tried for iterative
            deepening), or None.
    """

    algorithm: str
    path: Optional[Path]
    expansions: int
    cutoff: bool = False
    depth_limit: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.path is not None

    def __bool__(self) -> bool:
        return self.found


class SearchAlgorithm(abc.ABC):
    """Interface shared by every search strategy."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Display name of the strategy."""

    @abc.abstractmethod
    def run(
        self, problem: Problem, trace: Optional[TraceCallback] = None
    ) -> SearchOutcome:
        """Search ``problem`` and report the full outcome."""

    def search(self, problem: Problem, trace: Optional[TraceCallback] = None) -> bool:
        """Return True iff the goal state of ``problem`` is reached.

        Args:
            problem: Problem to solve.
            trace: Optional callback receiving the fringe before each step.
        """
        return self.run(problem, trace).found

    def find_path(
        self, problem: Problem, trace: Optional[TraceCallback] = None
    ) -> Optional[Path]:
        """Return the goal-matching path, or None if the goal is not reached."""
        return self.run(problem, trace).path

    def get_name(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class GeneralSearch(SearchAlgorithm):
    """Configurable General-Search over a fringe of paths.

    Each step pops the front path. If its frontier state is the goal the
    search succeeds; success is decided on pop, not when a path is generated.
    Otherwise the frontier is expanded: successors already on the path are
    dropped (paths never revisit a state), the rest are sorted by the
    expansion order and pushed into the fringe one by one.

    A depth limit ``L`` stops expansion of paths whose length (state count)
    is greater than ``L``; such paths are still goal-tested when popped.

    Args:
        name: Display name.
        expansion_order: Sort order of sibling successors before insertion.
        fringe_type: Fringe container class realizing the insertion policy.
        depth_limit: Optional depth limit, must be non-negative.

    Raises:
        ValueError: If ``depth_limit`` is negative.
    """

    def __init__(
        self,
        name: str,
        expansion_order: ExpansionOrder,
        fringe_type: Type[Fringe],
        depth_limit: Optional[int] = None,
    ) -> None:
        if depth_limit is not None and depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {depth_limit}")
        self._name = name
        self.expansion_order = expansion_order
        self.fringe_type = fringe_type
        self.depth_limit = depth_limit

    @property
    def name(self) -> str:
        return self._name

    def at_depth_limit(self, path: Path) -> bool:
        """Return True if ``path`` may not be expanded under the depth limit."""
        return self.depth_limit is not None and path.length > self.depth_limit

    def _successors(self, problem: Problem, path: Path) -> List[State]:
        frontier = path.next_state()
        children = [
            child
            for child in problem.state_space.expand_state(frontier)
            if not path.did_visit(child)
        ]
        children.sort(reverse=self.expansion_order.reverse)
        return children

    def run(
        self, problem: Problem, trace: Optional[TraceCallback] = None
    ) -> SearchOutcome:
        state_space = problem.state_space
        default_cost = SEARCH_CONFIG.default_edge_cost
        log_expansions = SEARCH_CONFIG.log_expansions

        fringe = self.fringe_type([Path.root(problem.initial_state)])
        expansions = 0
        cutoff = False

        logger.debug(
            "%s: searching from %s to %s",
            self.name,
            problem.initial_state,
            problem.goal_state,
        )

        while fringe:
            if trace is not None:
                trace(fringe.snapshot())

            path = fringe.pop()
            expansions += 1
            frontier = path.next_state()
            if log_expansions:
                logger.debug("%s: popped %s (cost=%s)", self.name, path, path.cost)

            if frontier == problem.goal_state:
                logger.debug(
                    "%s: goal reached after %d expansions, path=%s cost=%s",
                    self.name,
                    expansions,
                    path,
                    path.cost,
                )
                return SearchOutcome(
                    self.name, path, expansions, cutoff, self.depth_limit
                )

            children = self._successors(problem, path)
            if self.at_depth_limit(path):
                cutoff = cutoff or bool(children)
                continue

            for child in children:
                edge_cost = state_space.cost_between(frontier, child)
                if edge_cost is None:
                    edge_cost = default_cost
                fringe.push(path.add_state(child, edge_cost))

        logger.debug(
            "%s: fringe exhausted after %d expansions (cutoff=%s)",
            self.name,
            expansions,
            cutoff,
        )
        return SearchOutcome(self.name, None, expansions, cutoff, self.depth_limit)
