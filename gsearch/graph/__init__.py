"""Graph implementations of the state-space contract."""

from gsearch.graph.strict_multidigraph import StrictMultiDiGraph

__all__ = ["StrictMultiDiGraph"]
