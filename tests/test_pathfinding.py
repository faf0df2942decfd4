"""
Unit tests for the path-search snapshot and interface.
"""

import pytest

from adjacency_map_graph import AdjacencyMapGraph
from edge_set_graph import EdgeSetGraph
from errors import InvalidArgumentError
from pathfinding import Pathfinder, PathfindingNode, build_search_nodes


def test_snapshot_mirrors_graph():
    g = AdjacencyMapGraph()
    for v in "abc":
        g.add_vertex(v)
    g.add_edge("a", "b", 1.0)
    g.add_edge("a", "c", 4.0)
    g.add_edge("b", "c", 2.0)

    nodes = build_search_nodes(g)

    assert set(nodes) == {"a", "b", "c"}
    assert {(n.vertex, cost) for n, cost in nodes["a"].links} == {("b", 1.0), ("c", 4.0)}
    assert [n.vertex for n in nodes["b"].neighbors] == ["c"]
    assert nodes["c"].links == []
    # links point at the shared node objects, not copies
    assert nodes["b"].neighbors[0] is nodes["c"]


def test_parallel_edges_get_separate_links():
    g = EdgeSetGraph()
    g.add_vertex(1)
    g.add_vertex(2)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 6)

    nodes = build_search_nodes(g)

    assert sorted(cost for _, cost in nodes[1].links) == [5, 6]


def test_snapshot_does_not_follow_later_mutation():
    g = AdjacencyMapGraph()
    g.add_vertex(1)
    g.add_vertex(2)
    nodes = build_search_nodes(g)

    g.add_edge(1, 2, 1)

    assert nodes[1].links == []


def test_snapshot_rejects_empty_or_none_graph():
    with pytest.raises(InvalidArgumentError):
        build_search_nodes(EdgeSetGraph())
    with pytest.raises(InvalidArgumentError):
        build_search_nodes(None)


def test_pathfinding_node_identity():
    assert PathfindingNode("a") != PathfindingNode("a")


def test_pathfinder_is_abstract():
    with pytest.raises(TypeError):
        Pathfinder()
