"""
Edge insertion policy shared by every graph backend.

The defaults accept everything the graph contract allows: self loops and
negative costs. Turning a flag off makes add_edge reject matching edges.
"""

from dataclasses import dataclass
from typing import Any, Hashable

from errors import InvalidArgumentError


@dataclass(frozen=True)
class GraphConfig:
    """
    Policy knobs for a graph instance.

    Attributes
    ----------
    allow_self_loops:
        Accept edges whose source equals their destination.
    allow_negative_costs:
        Accept edges whose cost compares below zero. Checking this requires
        numeric costs.
    """

    allow_self_loops: bool = True
    allow_negative_costs: bool = True

    def validate(self) -> None:
        """Raise ValueError if any flag is not a bool."""

        for name in ("allow_self_loops", "allow_negative_costs"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"GraphConfig.{name} must be a bool.")

    def check_edge(self, source: Hashable, destination: Hashable, cost: Any) -> None:
        """Raise InvalidArgumentError if the edge breaks this policy."""

        if not self.allow_self_loops and source == destination:
            raise InvalidArgumentError(f"self loops are not allowed (vertex {source!r})")
        if self.allow_negative_costs:
            return
        try:
            negative = cost < 0
        except TypeError:
            raise InvalidArgumentError(
                f"cost {cost!r} cannot be checked for sign; negative costs are not allowed"
            ) from None
        if negative:
            raise InvalidArgumentError(f"negative costs are not allowed (cost {cost!r})")
