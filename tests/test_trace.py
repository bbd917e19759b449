import logging

from gsearch.algorithms.strategies import breadth_first
from gsearch.logging import get_logger
from gsearch.model.path import Path
from gsearch.model.problem import Problem
from gsearch.trace import ExpansionRecorder, format_fringe, format_step


def test_format_fringe():
    assert format_fringe([Path.root("A")]) == "[<A>]"
    assert format_fringe([Path(("B", "A"), 1), Path(("C", "A"), 4)]) == (
        "[<B,A> <C,A>]"
    )
    assert format_fringe([]) == "[]"


def test_format_step():
    assert format_step([Path.root("A")]) == "A      [<A>]"
    assert format_step([Path(("B", "A"), 1)], width=2) == "B  [<B,A>]"


def test_recorder_collects_breadth_first_table(diamond):
    recorder = ExpansionRecorder()
    assert breadth_first().search(Problem.from_state(diamond, "A", "D"), recorder)

    assert len(recorder) == 4
    assert recorder.expanded == ["A", "B", "C", "D"]
    assert recorder.render().splitlines() == [
        "A      [<A>]",
        "B      [<B,A> <C,A>]",
        "C      [<C,A> <D,B,A>]",
        "D      [<D,B,A> <D,C,A>]",
    ]

    recorder.clear()
    assert len(recorder) == 0
    assert recorder.expanded == []


def test_recorder_emits_through_logger(diamond, caplog):
    logger = get_logger("gsearch.tests.trace")
    recorder = ExpansionRecorder(logger=logger)
    with caplog.at_level(logging.INFO, logger="gsearch"):
        breadth_first().search(Problem.from_state(diamond, "A", "B"), recorder)

    lines = [r.getMessage() for r in caplog.records if r.name == "gsearch.tests.trace"]
    assert lines == ["A      [<A>]", "B      [<B,A> <C,A>]"]


def test_recorder_start_iteration_row(caplog):
    logger = get_logger("gsearch.tests.trace")
    recorder = ExpansionRecorder(logger=logger)
    with caplog.at_level(logging.INFO, logger="gsearch"):
        recorder.start_iteration(3)
        recorder([Path.root("A")])

    assert recorder.steps == ["L=3", "A      [<A>]"]
    assert recorder.expanded == ["A"]
    assert [r.getMessage() for r in caplog.records if r.name == logger.name] == [
        "L=3",
        "A      [<A>]",
    ]
