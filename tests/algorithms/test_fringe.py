import pytest

from gsearch.algorithms.fringe import PriorityFringe, QueueFringe, StackFringe
from gsearch.model.path import Path

P1 = Path(("B", "A"), 1)
P2 = Path(("C", "A"), 4)
P3 = Path(("D", "B", "A"), 2)


def test_stack_fringe_is_lifo():
    fringe = StackFringe([P1, P2])
    fringe.push(P3)
    assert fringe.snapshot() == (P3, P2, P1)
    assert fringe.pop() == P3
    assert fringe.pop() == P2
    assert len(fringe) == 1


def test_queue_fringe_is_fifo():
    fringe = QueueFringe([P1, P2])
    fringe.push(P3)
    assert fringe.snapshot() == (P1, P2, P3)
    assert fringe.pop() == P1
    assert fringe.snapshot() == (P2, P3)


def test_priority_fringe_orders_by_path_order():
    fringe = PriorityFringe()
    for path in (P2, P1, P3):
        fringe.push(path)
    assert fringe.snapshot() == (P1, P3, P2)
    assert [fringe.pop() for _ in range(3)] == [P1, P3, P2]


def test_priority_fringe_breaks_cost_ties_deterministically():
    tie_a = Path(("C", "A"), 1)
    tie_b = Path(("C", "B", "A"), 1)
    tie_c = Path(("B", "X", "A"), 1)
    fringe = PriorityFringe([tie_b, tie_a, tie_c])
    assert fringe.snapshot() == (tie_c, tie_a, tie_b)


@pytest.mark.parametrize("fringe_type", [StackFringe, QueueFringe, PriorityFringe])
def test_empty_fringe(fringe_type):
    fringe = fringe_type()
    assert not fringe
    assert len(fringe) == 0
    assert fringe.snapshot() == ()
    with pytest.raises(IndexError):
        fringe.pop()


@pytest.mark.parametrize("fringe_type", [StackFringe, QueueFringe, PriorityFringe])
def test_snapshot_does_not_consume(fringe_type):
    fringe = fringe_type([P1, P2])
    fringe.snapshot()
    assert len(fringe) == 2
    assert fringe


def test_fringe_repr():
    assert repr(QueueFringe([P1])).startswith("QueueFringe([Path(")
