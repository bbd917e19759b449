"""Shared state-space fixtures for the test suite.

Graphs are built on ``StrictMultiDiGraph`` with edge costs in the ``cost``
attribute. Each fixture documents its shape.
"""

from __future__ import annotations

import pytest

from gsearch.graph import StrictMultiDiGraph


def build_graph(nodes, edges) -> StrictMultiDiGraph:
    """Return a graph with ``nodes`` and ``(src, dst, cost)`` edges.

    A cost of None adds the edge without a cost attribute.
    """
    g = StrictMultiDiGraph()
    for node in nodes:
        g.add_node(node)
    for src, dst, cost in edges:
        if cost is None:
            g.add_edge(src, dst)
        else:
            g.add_edge(src, dst, cost=cost)
    return g


@pytest.fixture
def diamond():
    # Cost:
    #        [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [4]        [1]  │
    #   └────────►C─────────┘
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("A", "C", 4), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def shortcut():
    # Cost:
    #       [1]      [1]      [1]
    #   A───────►B───────►C───────►D
    #   │                          ▲
    #   └──────────────────────────┘
    #               [10]
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("C", "D", 1), ("A", "D", 10)],
    )


@pytest.fixture
def cyclic():
    # Cost (all edges [1], both directions between A, B and C):
    #   A◄──────►B◄──────►C───────►E
    #   ▲                 ▲
    #   └─────────────────┘
    #   D is isolated.
    return build_graph(
        "ABCDE",
        [
            ("A", "B", 1),
            ("B", "A", 1),
            ("B", "C", 1),
            ("C", "B", 1),
            ("A", "C", 1),
            ("C", "A", 1),
            ("C", "E", 1),
        ],
    )


@pytest.fixture
def unweighted():
    # No costs on any edge:
    #   A───────►B
    #   │        │
    #   │        ▼
    #   └───────►C
    return build_graph("ABC", [("A", "B", None), ("A", "C", None), ("B", "C", None)])


@pytest.fixture
def parallel_edges():
    # Parallel edges A->B with costs [5, 2, (none)], B->C [3]
    g = build_graph("ABC", [("A", "B", 5), ("A", "B", 2), ("B", "C", 3)])
    g.add_edge("A", "B", label="no-cost")
    return g


@pytest.fixture
def graph_factory():
    """Return :func:`build_graph` for tests needing an ad-hoc graph."""
    return build_graph
