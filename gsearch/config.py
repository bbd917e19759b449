"""Configuration classes for gsearch components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Defaults shared by the search strategies."""

    # Upper bound on iterative-deepening limits; None keeps the loop unbounded
    max_depth: Optional[int] = None

    # Edge cost used when the state space reports none for an edge
    default_edge_cost: float = 0.0

    # Log every popped path at DEBUG level
    log_expansions: bool = False

    def resolve_max_depth(self, explicit: Optional[int] = None) -> Optional[int]:
        """Return the depth bound to use for an iterative-deepening run.

        Args:
            explicit: Bound supplied by the caller; wins over the configured one.

        Returns:
            The bound, or None when the run is unbounded.

        Raises:
            ValueError: If the resulting bound is negative.
        """
        bound = self.max_depth if explicit is None else explicit
        if bound is not None and bound < 0:
            raise ValueError(f"max_depth must be non-negative, got {bound}")
        return bound


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
