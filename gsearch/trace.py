"""Helpers for human-readable expansion traces.

Search strategies accept an optional trace callback receiving the fringe at
the start of every step. The helpers here turn those snapshots into the
classic two-column table of "state expanded" and "fringe contents"::

    A      [<A>]
    B      [<B,A> <C,A>]

Iterative deepening marks the start of each depth-limited run with an
``L=<limit>`` row when the trace object has a ``start_iteration`` method.
The helpers only observe the fringe and never influence the search.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from gsearch.model.path import Path


def format_fringe(fringe: Sequence[Path]) -> str:
    """Render a fringe as ``[<B,A> <C,A>]``."""
    return "[" + " ".join(str(path) for path in fringe) + "]"


def format_step(fringe: Sequence[Path], width: int = 6) -> str:
    """Render one trace row: the state expanded next and the fringe.

    Args:
        fringe: Fringe snapshot, front first. Must not be empty.
        width: Column width of the expanded-state column.
    """
    return f"{str(fringe[0].next_state()):<{width}} {format_fringe(fringe)}"


class ExpansionRecorder:
    """Trace callback collecting formatted steps.

    Args:
        logger: Optional logger; each step is also emitted through it.
        level: Level used when emitting through ``logger``.

    Example:
        >>> recorder = ExpansionRecorder()
        >>> breadth_first().search(problem, recorder)  # doctest: +SKIP
        >>> print("\\n".join(recorder.steps))  # doctest: +SKIP
    """

    def __init__(
        self, logger: Optional[logging.Logger] = None, level: int = logging.INFO
    ) -> None:
        self.steps: List[str] = []
        self.expanded: List[object] = []
        self.logger = logger
        self.level = level

    def __call__(self, fringe: Sequence[Path]) -> None:
        self.expanded.append(fringe[0].next_state())
        self._emit(format_step(fringe))

    def _emit(self, line: str) -> None:
        self.steps.append(line)
        if self.logger is not None:
            self.logger.log(self.level, line)

    def start_iteration(self, limit: int) -> None:
        """Add the ``L=<limit>`` row opening a depth-limited run."""
        self._emit(f"L={limit}")

    def __len__(self) -> int:
        return len(self.steps)

    def clear(self) -> None:
        self.steps.clear()
        self.expanded.clear()

    def render(self) -> str:
        return "\n".join(self.steps)
