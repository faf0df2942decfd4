"""
Concrete directed, weighted graph backed by nested mappings.

Implements the Graph interface using a vertex -> (neighbour -> cost)
representation. At most one cost exists per ordered vertex pair; adding the
pair again with a different cost overwrites the old one.
"""

import logging
from typing import AbstractSet, Any, Dict, Hashable, Optional

from config import GraphConfig
from edge import Edge, build_edge, check_cost
from errors import InvalidArgumentError
from graph import Graph
from vertex_store import VertexStore

logger = logging.getLogger(__name__)


class AdjacencyMapGraph(Graph):
    """
    Simple directed graph backed by a vertex -> (neighbour -> cost) mapping.

    Every vertex has an entry in the outer mapping, possibly empty, from the
    moment it is added until it is removed. Point queries are O(1) on average.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config or GraphConfig()
        self.config.validate()
        self._vertices = VertexStore()
        self._adj: Dict[Hashable, Dict[Hashable, Any]] = {}

    # --- Vertex set queries --------------------------------------------------

    def clear(self) -> None:
        self._vertices.clear()
        self._adj.clear()
        logger.debug("Cleared adjacency-map graph")

    def contains(self, v: Hashable) -> bool:
        return v in self._vertices

    def contains_vertex(self, v: Hashable) -> bool:
        return v in self._vertices

    def is_empty(self) -> bool:
        return len(self._vertices) == 0

    def size(self) -> int:
        return len(self._vertices)

    # --- Mutation ------------------------------------------------------------

    def add_vertex(self, v: Hashable) -> bool:
        added = self._vertices.add(v)
        if added:
            self._adj[v] = {}
        return added

    def add_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        """
        Add or update the directed edge v1 -> v2.

        Returns False only when the pair already carries an equal cost. An
        overwrite with a different cost counts as a change and returns True.
        """
        if v1 is None or v2 is None or cost is None:
            raise InvalidArgumentError("cannot add an edge for a None vertex or cost")
        self._vertices.require(v1, v2)
        # Queries rebuild Edge values from the map, so the cost must make one.
        build_edge(v1, v2, cost)
        check_cost(cost)
        self.config.check_edge(v1, v2, cost)

        out = self._adj[v1]
        if v2 in out:
            if out[v2] == cost:
                return False
            logger.debug(f"Overwriting cost of {v1!r} -> {v2!r}: {out[v2]!r} -> {cost!r}")
        out[v2] = cost
        return True

    def remove_vertex(self, v: Hashable) -> bool:
        if not self._vertices.discard(v):
            return False
        outgoing = len(self._adj.pop(v))
        incoming = 0
        for out in self._adj.values():
            if out.pop(v, None) is not None:
                incoming += 1
        logger.debug(
            f"Removed vertex {v!r} with {outgoing} outgoing and {incoming} incoming edges"
        )
        return True

    def remove_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        if v1 is None or v2 is None or cost is None:
            raise InvalidArgumentError("cannot remove an edge for a None vertex or cost")
        build_edge(v1, v2, cost)
        out = self._adj.get(v1)
        if out is None or v2 not in out or out[v2] != cost:
            return False
        del out[v2]
        return True

    # --- Edge queries --------------------------------------------------------

    def get_edge_cost(self, v1: Hashable, v2: Hashable) -> Optional[Any]:
        if v1 is None:
            return None
        return self._adj.get(v1, {}).get(v2)

    def are_adjacent(self, v1: Hashable, v2: Hashable) -> bool:
        if v1 is None or v2 is None:
            return False
        return v2 in self._adj.get(v1, {})

    def get_adjacent(self, v: Hashable) -> AbstractSet[Hashable]:
        if v is None:
            return frozenset()
        return frozenset(self._adj.get(v, {}))

    def get_vertices(self) -> AbstractSet[Hashable]:
        return self._vertices.snapshot()

    def get_edges(self, v: Hashable) -> AbstractSet[Edge]:
        if v is None:
            raise InvalidArgumentError("cannot get edges for a None vertex")
        return frozenset(Edge(v, dst, cost) for dst, cost in self._adj.get(v, {}).items())

    def get_all_edges(self) -> AbstractSet[Edge]:
        return frozenset(
            Edge(src, dst, cost)
            for src, out in self._adj.items()
            for dst, cost in out.items()
        )
