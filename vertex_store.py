"""
Vertex bookkeeping shared by every graph backend.
"""

from typing import AbstractSet, Hashable, Iterator, Set

from errors import InvalidArgumentError


class VertexStore:
    """
    Set of vertices owned by a graph.

    Backends compose one of these and layer their own edge storage on top.
    """

    def __init__(self) -> None:
        self._vertices: Set[Hashable] = set()

    def add(self, vertex: Hashable) -> bool:
        """Insert vertex. Returns False if it was already present."""
        if vertex is None:
            raise InvalidArgumentError("cannot add a None vertex")
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        return True

    def discard(self, vertex: Hashable) -> bool:
        """Remove vertex. Returns False if it was not present."""
        if vertex is None or vertex not in self._vertices:
            return False
        self._vertices.remove(vertex)
        return True

    def require(self, *vertices: Hashable) -> None:
        """Raise InvalidArgumentError for the first vertex not in the store."""
        for vertex in vertices:
            if vertex not in self._vertices:
                raise InvalidArgumentError(f"vertex {vertex!r} is not in the graph")

    def clear(self) -> None:
        self._vertices.clear()

    def snapshot(self) -> AbstractSet[Hashable]:
        return frozenset(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex is not None and vertex in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._vertices)
