from pathlib import Path

import pytest

from trainpaths.domain.errors import (
    InvalidVertexError,
    NetworkLoadError,
    UnreachableVertexError,
)
from trainpaths.domain.models import WeightedEdge
from trainpaths.graph.dijkstra import dijkstra
from trainpaths.graph.edge_list import EdgeListGraph, load_edge_list


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_load_edge_list_contains_all_edges():
    graph = load_edge_list(DATA_DIR / "tinyEWD.txt")

    assert graph.vertex_count() == 8
    assert graph.edge_count() == 15

    edges = []
    graph.for_each_edge(edges.append)
    assert edges[0] == WeightedEdge(4, 5, 0.35)
    assert edges[-1] == WeightedEdge(6, 4, 0.93)


def test_load_edge_list_adjacency_follows_file_order():
    graph = load_edge_list(DATA_DIR / "tinyEWD.txt")

    adjacent = []
    graph.for_each_adjacent_edge(0, adjacent.append)

    assert adjacent == [WeightedEdge(0, 4, 0.38), WeightedEdge(0, 2, 0.26)]


def test_load_edge_list_truncated_file(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("3\n2\n0 1 1.0\n", encoding="utf-8")

    with pytest.raises(NetworkLoadError) as excinfo:
        load_edge_list(path)

    assert excinfo.value.file_path == str(path)


def test_load_edge_list_vertex_out_of_range(tmp_path):
    path = tmp_path / "bad_vertex.txt"
    path.write_text("2\n1\n0 5 1.0\n", encoding="utf-8")

    with pytest.raises(NetworkLoadError):
        load_edge_list(path)


def test_load_edge_list_missing_file(tmp_path):
    with pytest.raises(NetworkLoadError):
        load_edge_list(tmp_path / "missing.txt")


def test_tiny_ewd_distances_from_zero():
    graph = load_edge_list(DATA_DIR / "tinyEWD.txt")

    result = dijkstra(graph, 0)

    expected = [0.0, 1.05, 0.26, 0.99, 0.38, 0.73, 1.51, 0.60]
    for v, distance in enumerate(expected):
        assert result.distance_to(v) == pytest.approx(distance)


def test_dijkstra_finds_direct_edge():
    # Minimal graph with a direct edge 0 -> 1
    graph = EdgeListGraph(2, [WeightedEdge(0, 1, 10.0)])

    result = dijkstra(graph, 0)

    assert result.path_to(1) == [WeightedEdge(0, 1, 10.0)]
    assert result.distance_to(1) == 10.0


def test_dijkstra_chooses_shortest_path():
    # 0 can reach 2 directly, but 0->1->2 is shorter
    graph = EdgeListGraph(
        3,
        [
            WeightedEdge(0, 1, 3.0),
            WeightedEdge(0, 2, 10.0),
            WeightedEdge(1, 2, 4.0),
        ],
    )

    result = dijkstra(graph, 0)

    assert result.vertices_to(2) == [0, 1, 2]
    assert result.distance_to(2) == 7.0


def test_dijkstra_no_path_raises_unreachable():
    graph = EdgeListGraph(2)

    result = dijkstra(graph, 0)

    assert not result.has_path_to(1)
    with pytest.raises(UnreachableVertexError) as excinfo:
        result.path_to(1)
    assert excinfo.value.vertex == 1
    assert excinfo.value.source == 0


def test_undirected_edge_list_exposes_both_directions():
    graph = EdgeListGraph(2, [WeightedEdge(0, 1, 2.0)], directed=False)

    from_one = []
    graph.for_each_adjacent_edge(1, from_one.append)
    all_edges = []
    graph.for_each_edge(all_edges.append)

    assert from_one == [WeightedEdge(1, 0, 2.0)]
    assert all_edges == [WeightedEdge(0, 1, 2.0)]


def test_edge_list_rejects_unknown_vertex():
    graph = EdgeListGraph(2)

    with pytest.raises(InvalidVertexError):
        graph.add_edge(WeightedEdge(0, 2, 1.0))
    with pytest.raises(InvalidVertexError):
        graph.for_each_adjacent_edge(-1, lambda edge: None)


def test_for_each_vertex_visits_in_ascending_order():
    graph = EdgeListGraph(4)

    visited = []
    graph.for_each_vertex(visited.append)

    assert visited == [0, 1, 2, 3]


def test_edge_endpoints():
    edge = WeightedEdge(3, 5, 0.5)

    assert edge.either() == 3
    assert edge.other(3) == 5
    assert edge.other(edge.either()) == 5
    assert edge.other(5) == 3
    assert edge.reversed() == WeightedEdge(5, 3, 0.5)


def test_edge_other_rejects_foreign_vertex():
    edge = WeightedEdge(3, 5, 0.5)

    with pytest.raises(InvalidVertexError) as excinfo:
        edge.other(4)

    assert excinfo.value.vertex == 4


def test_self_loop_other_is_the_same_vertex():
    assert WeightedEdge(2, 2, 0).other(2) == 2
