"""
Path-search interface and the graph snapshot it searches over.

Keeps search algorithms separate from graph storage. A pathfinder reads the
graph once, through build_search_nodes(), and works on the resulting node
structure. Graphs publish no change notifications, so a snapshot goes stale if
the graph is mutated afterwards: build it from a graph that will stay fixed
for the lifetime of the search.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from typing import Any, Dict, Hashable, List, Optional, Tuple

from errors import InvalidArgumentError
from graph import Graph

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class PathfindingNode:
    """
    One vertex of a search snapshot plus its outgoing links.

    links holds (neighbour node, edge cost) pairs, one per edge, so parallel
    edges from a multigraph each get their own entry.
    """

    vertex: Hashable
    links: List[Tuple["PathfindingNode", Any]] = field(default_factory=list)

    def add_neighbor(self, node: "PathfindingNode", cost: Any) -> None:
        self.links.append((node, cost))

    @property
    def neighbors(self) -> List["PathfindingNode"]:
        return [node for node, _ in self.links]


def build_search_nodes(graph: Graph) -> Dict[Hashable, PathfindingNode]:
    """
    Snapshot graph into a vertex -> PathfindingNode mapping.

    Raises:
        InvalidArgumentError: if graph is None or has no vertices.
    """
    if graph is None or graph.is_empty():
        raise InvalidArgumentError("cannot build a search snapshot of a None or empty graph")

    nodes: Dict[Hashable, PathfindingNode] = {
        v: PathfindingNode(v) for v in graph.get_vertices()
    }
    edges = graph.get_all_edges()
    for e in edges:
        nodes[e.source].add_neighbor(nodes[e.destination], e.cost)

    logger.debug(f"Built search snapshot with {len(nodes)} nodes and {len(edges)} links")
    return nodes


class Pathfinder(ABC):
    """
    Interface for point-to-point path search over a graph snapshot.
    """

    @abstractmethod
    def find_path(self, start: Hashable, end: Hashable) -> bool:
        """
        Search for a path from start to end.

        Returns:
            True if a path was found.
        """
        raise NotImplementedError

    @abstractmethod
    def path_from(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """
        Ordered vertices of the path start -> end, empty if there is none.
        """
        raise NotImplementedError

    @abstractmethod
    def path_cost(self, start: Hashable, end: Hashable) -> Optional[Any]:
        """
        Total cost of the path start -> end, or None if there is none.
        """
        raise NotImplementedError
