"""
Directed, weighted graph abstraction.

Vertices are any hashable values with value equality.
Edges are directed: v1 -> v2 with an arbitrary cost.

Two backends implement this contract (see edge_set_graph and
adjacency_map_graph). They differ on parallel edges: the edge-set backend
keeps one edge per distinct (v1, v2, cost) triple, the adjacency-map backend
keeps at most one cost per (v1, v2) pair and overwrites it on re-insertion.
Callers that depend on multigraph behaviour must know which backend they hold.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Hashable, Iterator, Optional

from edge import Edge


class Graph(ABC):
    """Directed, weighted graph over hashable vertices."""

    # --- Vertex set queries --------------------------------------------------

    @abstractmethod
    def clear(self) -> None:
        """Remove every vertex and edge. Calling it on an empty graph is a no-op."""
        raise NotImplementedError

    @abstractmethod
    def contains(self, v: Hashable) -> bool:
        """True if v is a vertex of the graph."""
        raise NotImplementedError

    @abstractmethod
    def contains_vertex(self, v: Hashable) -> bool:
        """Alias of contains()."""
        raise NotImplementedError

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the graph has no vertices."""
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        """Number of vertices in the graph."""
        raise NotImplementedError

    # --- Mutation ------------------------------------------------------------

    @abstractmethod
    def add_vertex(self, v: Hashable) -> bool:
        """
        Add vertex v.

        Returns False if v was already present.
        Raises InvalidArgumentError if v is None.
        """
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        """
        Add a directed edge v1 -> v2 with the given cost.

        Both vertices must already be in the graph. Raises InvalidArgumentError
        if any argument is None, if either vertex is missing, or if the edge
        breaks the graph's GraphConfig policy.

        Returns True if the graph changed.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, v: Hashable) -> bool:
        """
        Remove v together with every edge leaving or entering it.

        Returns False if v was not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, v1: Hashable, v2: Hashable, cost: Any) -> bool:
        """
        Remove the edge v1 -> v2 carrying exactly this cost.

        Returns True iff an edge was removed.
        Raises InvalidArgumentError if any argument is None.
        """
        raise NotImplementedError

    # --- Edge queries --------------------------------------------------------

    @abstractmethod
    def get_edge_cost(self, v1: Hashable, v2: Hashable) -> Optional[Any]:
        """Cost of the edge v1 -> v2, or None if there is no such edge."""
        raise NotImplementedError

    @abstractmethod
    def are_adjacent(self, v1: Hashable, v2: Hashable) -> bool:
        """
        True iff at least one edge v1 -> v2 exists.

        Missing or None vertices give False rather than an error.
        """
        raise NotImplementedError

    @abstractmethod
    def get_adjacent(self, v: Hashable) -> AbstractSet[Hashable]:
        """Vertices reachable from v along one edge (empty if v is missing)."""
        raise NotImplementedError

    @abstractmethod
    def get_vertices(self) -> AbstractSet[Hashable]:
        """Read-only snapshot of all vertices."""
        raise NotImplementedError

    @abstractmethod
    def get_edges(self, v: Hashable) -> AbstractSet[Edge]:
        """
        All edges whose source is v.

        Raises InvalidArgumentError if v is None; a missing vertex yields an
        empty set.
        """
        raise NotImplementedError

    @abstractmethod
    def get_all_edges(self) -> AbstractSet[Edge]:
        """Read-only snapshot of every edge in the graph."""
        raise NotImplementedError

    # --- Python protocol -----------------------------------------------------

    def __contains__(self, v: object) -> bool:
        return self.contains(v)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.get_vertices())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.size()}, "
            f"edges={len(self.get_all_edges())})"
        )
