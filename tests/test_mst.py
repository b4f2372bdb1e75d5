"""Tests for the minimum spanning tree engines."""

from itertools import combinations

import pytest

from trainpaths.domain.errors import InvalidVertexError
from trainpaths.domain.models import WeightedEdge
from trainpaths.graph.edge_list import EdgeListGraph
from trainpaths.graph.mst import (
    MST_ALGORITHMS,
    MinimumSpanningTree,
    UnionFind,
    eager_prim,
    kruskal,
)
from trainpaths.graph.paths import INFINITY
from trainpaths.graph.views import TrainNetworkView, by_length, closing_city

ENGINES = [kruskal, eager_prim]

# Five vertices, several equal weights and a redundant heavy edge
EDGES = [
    WeightedEdge(0, 1, 4),
    WeightedEdge(0, 2, 3),
    WeightedEdge(1, 2, 1),
    WeightedEdge(1, 3, 2),
    WeightedEdge(2, 3, 4),
    WeightedEdge(3, 4, 2),
    WeightedEdge(2, 4, 5),
    WeightedEdge(0, 4, 9),
]


def brute_force_minimum(vertex_count, edges):
    best = None
    for subset in combinations(edges, vertex_count - 1):
        components = UnionFind(vertex_count)
        if all(components.union(e.from_vertex, e.to_vertex) for e in subset):
            weight = sum(e.weight for e in subset)
            best = weight if best is None else min(best, weight)
    return best


def tree_is_acyclic(vertex_count, tree: MinimumSpanningTree) -> bool:
    components = UnionFind(vertex_count)
    return all(components.union(e.from_vertex, e.to_vertex) for e in tree.edges)


@pytest.mark.parametrize("engine", ENGINES)
def test_tree_weight_is_minimal(engine):
    graph = EdgeListGraph(5, EDGES, directed=False)

    tree = engine(graph)

    assert tree.total_weight == brute_force_minimum(5, EDGES)
    assert tree.edge_count == 4
    assert tree.is_spanning(5)
    assert tree_is_acyclic(5, tree)


def test_kruskal_on_ring_selects_expected_edges(ring_network):
    view = TrainNetworkView(ring_network, by_length, directed=False)

    tree = kruskal(view)

    assert set(tree.edges) == {
        WeightedEdge(0, 1, 1),
        WeightedEdge(2, 3, 1),
        WeightedEdge(1, 2, 2),
    }
    assert tree.total_weight == 4


def test_eager_prim_on_ring_matches_kruskal_weight(ring_network):
    view = TrainNetworkView(ring_network, by_length, directed=False)

    tree = eager_prim(view)

    assert tree.total_weight == 4
    assert tree.edges == (
        WeightedEdge(0, 1, 1),
        WeightedEdge(1, 2, 2),
        WeightedEdge(2, 3, 1),
    )


@pytest.mark.parametrize("engine", ENGINES)
def test_closed_city_lines_still_join_the_tree(ring_network, engine):
    # Closing B leaves it reachable only through infinite-weight lines
    view = TrainNetworkView(ring_network, closing_city(1, by_length), directed=False)

    tree = engine(view)

    assert tree.is_spanning(4)
    assert tree.total_weight == INFINITY
    assert {frozenset((e.from_vertex, e.to_vertex)) for e in tree.edges} == {
        frozenset((2, 3)),
        frozenset((0, 3)),
        frozenset((0, 1)),
    }


@pytest.mark.parametrize("engine", ENGINES)
def test_single_vertex_gives_empty_tree(engine):
    tree = engine(EdgeListGraph(1, directed=False))

    assert tree.edges == ()
    assert tree.total_weight == 0
    assert tree.is_spanning(1)


@pytest.mark.parametrize("engine", ENGINES)
def test_disconnected_graph_gives_spanning_forest(engine):
    graph = EdgeListGraph(
        4, [WeightedEdge(0, 1, 1), WeightedEdge(2, 3, 2)], directed=False
    )

    forest = engine(graph)

    assert forest.edge_count == 2
    assert forest.total_weight == 3
    assert not forest.is_spanning(4)


def test_eager_prim_from_other_start_has_same_weight():
    graph = EdgeListGraph(5, EDGES, directed=False)

    assert eager_prim(graph, start=3).total_weight == kruskal(graph).total_weight


def test_eager_prim_rejects_invalid_start():
    with pytest.raises(InvalidVertexError):
        eager_prim(EdgeListGraph(2, directed=False), start=2)


def test_empty_graph():
    assert kruskal(EdgeListGraph(0)).edges == ()
    assert eager_prim(EdgeListGraph(0)).edges == ()


def test_union_find_tracks_components():
    components = UnionFind(5)

    assert components.union(0, 1)
    assert components.union(3, 4)
    assert not components.union(1, 0)
    assert components.connected(0, 1)
    assert not components.connected(1, 3)
    assert components.count == 3


def test_mst_registry():
    assert MST_ALGORITHMS == {"kruskal": kruskal, "eager_prim": eager_prim}
