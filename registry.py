"""Registry of graph backends by name.

Lets callers such as workload generators or path-search components pick a
storage strategy from a string (e.g. from an experiment config) without
importing the concrete classes.
"""
from __future__ import annotations

import logging
from typing import Callable, Mapping, MutableMapping, Optional

from adjacency_map_graph import AdjacencyMapGraph
from config import GraphConfig
from edge_set_graph import EdgeSetGraph
from graph import Graph

logger = logging.getLogger(__name__)

GraphFactory = Callable[[Optional[GraphConfig]], Graph]


class GraphRegistry:
    """Backend name -> graph factory table.

    A factory is any callable taking an optional :class:`GraphConfig` and
    returning an empty graph; backend classes themselves qualify.
    """

    def __init__(self) -> None:
        self._factories: MutableMapping[str, GraphFactory] = {}

    def register(self, name: str, factory: GraphFactory) -> None:
        """Make ``factory`` available as ``name``.

        Names are claimed once: registering a taken name raises
        :class:`ValueError` and leaves the existing factory in place.
        """

        if name in self._factories:
            raise ValueError(f"Graph backend '{name}' is already registered.")
        self._factories[name] = factory
        logger.debug(f"Registered graph backend '{name}'")

    def get(self, name: str) -> GraphFactory:
        """Look up the factory for ``name``; unknown names raise :class:`KeyError`."""

        return self._factories[name]

    def all(self) -> Mapping[str, GraphFactory]:
        """Name -> factory snapshot; editing it does not touch the registry."""

        return dict(self._factories)

    def create(self, name: str, config: Optional[GraphConfig] = None) -> Graph:
        """Build an empty graph from the backend registered under ``name``."""

        return self.get(name)(config)


default_registry = GraphRegistry()
default_registry.register("edge_set", EdgeSetGraph)
default_registry.register("adjacency_map", AdjacencyMapGraph)


def create_graph(name: str, config: Optional[GraphConfig] = None) -> Graph:
    """Build an empty graph using the default registry."""

    return default_registry.create(name, config)
