"""
Immutable weighted edge value type.

Edges are directed: source -> destination with an arbitrary cost. Equality and
hashing cover all three fields, so two edges built from equal values are the
same edge when stored in a set.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Tuple

from errors import InvalidArgumentError


@dataclass(frozen=True)
class Edge:
    """Directed edge source -> destination with a cost."""

    source: Hashable
    destination: Hashable
    cost: Any

    def __post_init__(self) -> None:
        if self.source is None:
            raise InvalidArgumentError("source vertex cannot be None")
        if self.destination is None:
            raise InvalidArgumentError("destination vertex cannot be None")
        try:
            hash(self.cost)
        except TypeError:
            raise InvalidArgumentError(f"edge cost must be hashable, got {self.cost!r}") from None

    @property
    def pair(self) -> Tuple[Hashable, Hashable]:
        """(source, destination) of this edge."""
        return self.source, self.destination

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.destination


def check_cost(cost: Any) -> None:
    """
    Reject a cost that a graph could not match again once stored.

    Removal and the "same cost" check compare by value, so a stored cost must
    equal itself. NaN does not.
    """
    if cost != cost:
        raise InvalidArgumentError(f"edge cost must equal itself, got {cost!r}")


def build_edge(source: Hashable, destination: Hashable, cost: Any) -> Edge:
    """
    Build an edge between two vertices with the given cost.

    Raises:
        InvalidArgumentError: if either vertex is None or cost is unhashable.
    """
    return Edge(source, destination, cost)
