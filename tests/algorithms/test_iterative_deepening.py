import pytest

from gsearch.algorithms.iterative_deepening import (
    IterativeDeepeningSearch,
    iterative_deepening,
)
from gsearch.algorithms.strategies import depth_limited
from gsearch.config import SEARCH_CONFIG
from gsearch.model.problem import Problem
from gsearch.trace import ExpansionRecorder
from gsearch.types.base import StateNode


class CountingSpace:
    """Infinite state space over non-negative ints: n -> n + 1, n + 2."""

    def get_node(self, state):
        return StateNode(state)

    def expand_state(self, state):
        return {state + 1, state + 2}

    def cost_between(self, state, successor):
        return successor - state


def test_name():
    assert iterative_deepening().get_name() == "Iterative deepening search"


def test_finds_goal_at_smallest_limit(diamond):
    outcome = iterative_deepening().run(Problem.from_state(diamond, "A", "D"))
    assert outcome.found
    assert outcome.depth_limit == 2
    assert outcome.path.nodes_seq == ("A", "B", "D")
    # L=0: A; L=1: A, B, C; L=2: A, B, D
    assert outcome.expansions == 7


def test_trace_is_forwarded_to_every_iteration(diamond):
    recorder = ExpansionRecorder()
    assert iterative_deepening().search(Problem.from_state(diamond, "A", "D"), recorder)
    assert recorder.expanded == ["A", "A", "B", "C", "A", "B", "D"]


def test_goal_equals_initial(diamond):
    outcome = iterative_deepening().run(Problem.from_state(diamond, "A", "A"))
    assert outcome.found
    assert outcome.depth_limit == 0
    assert outcome.expansions == 1


def test_matches_depth_limited_results(cyclic):
    """Succeeds with the first limit for which depth-limited search succeeds."""
    problem = Problem.from_state(cyclic, "A", "E")
    first_success = next(
        limit for limit in range(10) if depth_limited(limit).search(problem)
    )
    assert iterative_deepening().run(problem).depth_limit == first_success == 2


def test_stops_when_finite_space_is_exhausted(cyclic):
    outcome = iterative_deepening().run(Problem.from_state(cyclic, "A", "D"))
    assert not outcome.found
    assert not outcome.cutoff
    # longest cycle-free path from A visits A, B, C, E
    assert outcome.depth_limit == 3


def test_max_depth_bounds_infinite_search():
    problem = Problem.from_state(CountingSpace(), 0, -1)
    outcome = iterative_deepening(max_depth=5).run(problem)
    assert not outcome.found
    assert outcome.cutoff
    assert outcome.depth_limit == 5


def test_finds_goal_in_infinite_space():
    outcome = iterative_deepening().run(Problem.from_state(CountingSpace(), 0, 7))
    assert outcome.found
    assert outcome.depth_limit == 4
    assert outcome.path.length == 5
    assert outcome.path.cost == 7


def test_should_stop_cancels_before_first_limit(diamond):
    outcome = IterativeDeepeningSearch(should_stop=lambda: True).run(
        Problem.from_state(diamond, "A", "D")
    )
    assert not outcome.found
    assert outcome.expansions == 0
    assert outcome.depth_limit is None


def test_should_stop_checked_before_each_limit():
    calls = []

    def stop_after_three():
        calls.append(None)
        return len(calls) > 3

    outcome = iterative_deepening(should_stop=stop_after_three).run(
        Problem.from_state(CountingSpace(), 0, -1)
    )
    assert not outcome.found
    assert outcome.depth_limit == 2
    assert len(calls) == 4


def test_max_depth_from_config(monkeypatch):
    monkeypatch.setattr(SEARCH_CONFIG, "max_depth", 1)
    assert IterativeDeepeningSearch().max_depth == 1
    assert IterativeDeepeningSearch(max_depth=4).max_depth == 4


def test_negative_max_depth_raises():
    with pytest.raises(ValueError, match="non-negative"):
        IterativeDeepeningSearch(max_depth=-1)


def test_recorder_table_marks_each_limit(diamond):
    recorder = ExpansionRecorder()
    assert iterative_deepening().search(Problem.from_state(diamond, "A", "D"), recorder)
    assert recorder.render().splitlines() == [
        "L=0",
        "A      [<A>]",
        "L=1",
        "A      [<A>]",
        "B      [<B,A> <C,A>]",
        "C      [<C,A>]",
        "L=2",
        "A      [<A>]",
        "B      [<B,A> <C,A>]",
        "D      [<D,B,A> <C,A>]",
    ]


def test_plain_callable_trace_gets_only_fringes(diamond):
    snapshots = []
    problem = Problem.from_state(diamond, "A", "D")
    iterative_deepening().search(problem, snapshots.append)
    assert len(snapshots) == 7
    assert all(isinstance(fringe, tuple) for fringe in snapshots)
