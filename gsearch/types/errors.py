"""Exceptions raised by gsearch."""

from __future__ import annotations

from typing import Hashable


class StateNotFoundError(KeyError):
    """Raised when a state is not present in a state space.

    Subclasses ``KeyError`` so callers treating the state space as a mapping
    can keep catching the built-in error.

    Attributes:
        state: The state that could not be resolved.
    """

    def __init__(self, state: Hashable) -> None:
        super().__init__(state)
        self.state = state

    def __str__(self) -> str:
        return f"State '{self.state}' not found in the state space."
