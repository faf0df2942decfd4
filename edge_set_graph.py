"""
Concrete directed, weighted multigraph backed by a flat set of edges.

Each distinct (source, destination, cost) triple is stored once, so the same
ordered vertex pair may carry several parallel edges with different costs.
Queries scan the whole edge set; this backend trades speed for multigraph
semantics.
"""

import logging
from typing import AbstractSet, Any, Hashable, List, Optional, Set

from config import GraphConfig
from edge import Edge, build_edge, check_cost
from errors import InvalidArgumentError
from graph import Graph
from vertex_store import VertexStore

logger = logging.getLogger(__name__)


class EdgeSetGraph(Graph):
    """
    Directed multigraph backed by a set of Edge values.

    Complexity:
        O(1) average for add_edge/remove_edge, O(E) for every adjacency query.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config or GraphConfig()
        self.config.validate()
        self._vertices = VertexStore()
        self._edges: Set[Edge] = set()

    # --- Vertex set queries --------------------------------------------------

    def clear(self) -> None:
        self._vertices.clear()
        self._edges.clear()
        logger.debug("Cleared edge-set graph")

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
        return self._vertices.add(v)

    def add_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        """
        Insert the edge (v1, v2, cost).

        Returns False only if an equal triple is already stored. A new cost for
        an existing pair adds a parallel edge.
        """
        if v1 is None or v2 is None or cost is None:
            raise InvalidArgumentError("cannot add an edge for a None vertex or cost")
        self._vertices.require(v1, v2)
        edge = build_edge(v1, v2, cost)
        check_cost(cost)
        self.config.check_edge(v1, v2, cost)

        if edge in self._edges:
            return False
        self._edges.add(edge)
        return True

    def remove_vertex(self, v: Hashable) -> bool:
        """
        Remove v and every edge touching it, parallel copies included.

        Incident edges are collected before the vertex leaves the store, since
        adjacency queries against a missing vertex answer nothing.
        """
        if v not in self._vertices:
            return False
        incident: List[Edge] = [
            e for e in self._edges if e.source == v or e.destination == v
        ]
        self._vertices.discard(v)
        for e in incident:
            self._edges.discard(e)
        logger.debug(f"Removed vertex {v!r} with {len(incident)} incident edges")
        return True

    def remove_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        if v1 is None or v2 is None or cost is None:
            raise InvalidArgumentError("cannot remove an edge for a None vertex or cost")
        edge = build_edge(v1, v2, cost)
        if edge not in self._edges:
            return False
        self._edges.remove(edge)
        return True

    # --- Edge queries --------------------------------------------------------

    def get_edge_cost(self, v1: Hashable, v2: Hashable) -> Optional[Any]:
        """
        Cost of the edge v1 -> v2, or None.

        With parallel edges the lowest cost wins, so the costs of parallel
        edges must be mutually orderable.
        """
        costs = [e.cost for e in self._matching(v1, v2)]
        if not costs:
            return None
        return min(costs)

    def are_adjacent(self, v1: Hashable, v2: Hashable) -> bool:
        if v1 not in self._vertices or v2 not in self._vertices:
            return False
        return bool(self._matching(v1, v2))

    def get_adjacent(self, v: Hashable) -> AbstractSet[Hashable]:
        if v not in self._vertices:
            return frozenset()
        return frozenset(e.destination for e in self._edges if e.source == v)

    def get_vertices(self) -> AbstractSet[Hashable]:
        return self._vertices.snapshot()

    def get_edges(self, v: Hashable) -> AbstractSet[Edge]:
        if v is None:
            raise InvalidArgumentError("cannot get edges for a None vertex")
        return frozenset(e for e in self._edges if e.source == v)

    def get_all_edges(self) -> AbstractSet[Edge]:
        return frozenset(self._edges)

    def _matching(self, v1: Hashable, v2: Hashable) -> List[Edge]:
        if v1 is None or v2 is None:
            return []
        return [e for e in self._edges if e.source == v1 and e.destination == v2]
