"""
Unit tests for GraphConfig policies applied by both backends.
"""

import pytest

from adjacency_map_graph import AdjacencyMapGraph
from config import GraphConfig
from edge_set_graph import EdgeSetGraph
from errors import InvalidArgumentError


BACKENDS = [EdgeSetGraph, AdjacencyMapGraph]


def test_defaults_are_permissive():
    config = GraphConfig()

    assert config.allow_self_loops
    assert config.allow_negative_costs
    config.check_edge(1, 1, -1)


def test_validate_rejects_non_bool():
    with pytest.raises(ValueError):
        GraphConfig(allow_self_loops="no").validate()


@pytest.mark.parametrize("backend", BACKENDS)
def test_backend_validates_config(backend):
    with pytest.raises(ValueError):
        backend(GraphConfig(allow_negative_costs=0))


@pytest.mark.parametrize("backend", BACKENDS)
def test_self_loops_can_be_forbidden(backend):
    g = backend(GraphConfig(allow_self_loops=False))
    g.add_vertex(1)
    g.add_vertex(2)

    with pytest.raises(InvalidArgumentError):
        g.add_edge(1, 1, 3)
    assert g.add_edge(1, 2, 3) is True
    assert not g.are_adjacent(1, 1)


@pytest.mark.parametrize("backend", BACKENDS)
def test_negative_costs_can_be_forbidden(backend):
    g = backend(GraphConfig(allow_negative_costs=False))
    g.add_vertex(1)
    g.add_vertex(2)

    with pytest.raises(InvalidArgumentError):
        g.add_edge(1, 2, -0.5)
    assert g.add_edge(1, 2, 0) is True
    assert g.get_edge_cost(1, 2) == 0


@pytest.mark.parametrize("backend", BACKENDS)
def test_unorderable_cost_under_sign_policy(backend):
    g = backend(GraphConfig(allow_negative_costs=False))
    g.add_vertex(1)
    g.add_vertex(2)

    with pytest.raises(InvalidArgumentError, match="'heavy'"):
        g.add_edge(1, 2, "heavy")
    assert g.get_all_edges() == frozenset()
