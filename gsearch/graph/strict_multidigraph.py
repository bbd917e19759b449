"""Strict multi-directed graph usable as a search state space.

``StrictMultiDiGraph`` extends ``networkx.MultiDiGraph`` with strict node and
edge bookkeeping and implements the :class:`~gsearch.types.base.StateSpace`
contract, so a graph built with it can be handed directly to a
:class:`~gsearch.model.problem.Problem`.
"""

from __future__ import annotations

from itertools import count
from types import MappingProxyType
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple

import networkx as nx

from gsearch.types.base import Cost, State, StateNode
from gsearch.types.errors import StateNotFoundError

EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[State, State, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """A multi-directed graph with strict rules and unique edge keys.

    Rules:
      - Adding an edge never creates missing nodes.
      - Adding an existing node or reusing an edge key raises ValueError.
      - Removing a missing node or edge raises ValueError.
      - Edge keys are unique across the whole graph; integer keys are
        generated when none is given.

    Edge costs are read from the ``cost_attr`` edge attribute (``"cost"`` by
    default). Parallel edges are allowed; the cheapest one defines the cost
    between two states.
    """

    def __init__(self, *args, cost_attr: str = "cost", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.cost_attr = cost_attr
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._key_counter = count()

    def new_edge_key(self, src: State, dst: State) -> EdgeID:
        """Return the next free integer edge key."""
        key = next(self._key_counter)
        while key in self._edges:
            key = next(self._key_counter)
        return key

    #
    # Node management
    #
    def add_node(self, n: State, **attr: Any) -> None:
        """Add a single state.

        Raises:
            ValueError: If the state already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    def remove_node(self, n: State) -> None:
        """Remove a state together with its incident edges.

        Raises:
            ValueError: If the state does not exist.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        for e_id in [k for k, (s, t, _, _) in self._edges.items() if n in (s, t)]:
            del self._edges[e_id]
        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: State,
        v_for_edge: State,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge between two existing states.

        Args:
            u_for_edge: Source state. Must exist in the graph.
            v_for_edge: Target state. Must exist in the graph.
            key: Unique edge key; generated when None.
            **attr: Edge attributes, e.g. ``cost=2.5``.

        Returns:
            The key of the new edge.

        Raises:
            ValueError: If either state is missing or the key is taken.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],
        )
        return key

    def remove_edge(self, u: State, v: State, key: Optional[EdgeID] = None) -> None:
        """Remove the edge ``key`` from ``u`` to ``v``, or all of them if no key.

        Raises:
            ValueError: If a state is missing, ``key`` does not connect ``u`` to
                ``v``, or there is no edge from ``u`` to ``v``.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")

        if key is None:
            keys = self.edges_between(u, v)
            if not keys:
                raise ValueError(f"No edges from '{u}' to '{v}' to remove.")
        else:
            if key not in self._edges:
                raise ValueError(f"No edge with id='{key}' found from {u} to {v}.")
            src, dst, _, _ = self._edges[key]
            if (src, dst) != (u, v):
                raise ValueError(
                    f"Edge with id='{key}' goes from {src} to {dst}, not {u} to {v}."
                )
            keys = [key]

        for e_id in keys:
            self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove a directed edge by its key.

        Raises:
            ValueError: If no edge has this key.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src, dst, _, _ = self._edges.pop(key)
        super().remove_edge(src, dst, key=key)

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Return all edges as ``{key: (src, dst, key, attrs)}``."""
        return self._edges

    def edges_between(self, u: State, v: State) -> List[EdgeID]:
        """List the keys of all edges from ``u`` to ``v`` (empty if none)."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())

    #
    # StateSpace contract
    #
    def get_node(self, state: State) -> StateNode:
        """Resolve a state to a :class:`StateNode`.

        Raises:
            StateNotFoundError: If the state is not a node of this graph.
        """
        if state not in self:
            raise StateNotFoundError(state)
        return StateNode(state, MappingProxyType(dict(self.nodes[state])))

    def expand_state(self, state: State) -> Set[State]:
        """Return the set of states reachable over one outgoing edge."""
        if state not in self:
            raise StateNotFoundError(state)
        return set(self.succ[state])

    def cost_between(self, state: State, successor: State) -> Optional[Cost]:
        """Return the cheapest cost over parallel edges ``state -> successor``.

        Edges lacking the cost attribute are ignored. None is returned when
        there is no edge or no edge carries a cost.
        """
        costs = [
            attrs[self.cost_attr]
            for attrs in self.succ.get(state, {}).get(successor, {}).values()
            if attrs.get(self.cost_attr) is not None
        ]
        return min(costs) if costs else None
