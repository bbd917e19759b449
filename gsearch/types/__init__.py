"""Shared types for gsearch."""

from gsearch.types.base import (
    Cost,
    ExpansionOrder,
    SearchStrategy,
    State,
    StateNode,
    StateSpace,
)
from gsearch.types.errors import StateNotFoundError

__all__ = [
    "Cost",
    "ExpansionOrder",
    "SearchStrategy",
    "State",
    "StateNode",
    "StateNotFoundError",
    "StateSpace",
]
