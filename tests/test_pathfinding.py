import pytest

from wgraph import NO_PATH, NodeNotFoundError, NoPathError
from wgraph.analysis import PathFinder, dijkstra, reconstruct_path

from .conftest import build_graph


def test_shortest_path_prefers_lighter_route(triangle):
    finder = PathFinder(triangle)

    assert finder.shortest_path_dist(1, 3) == 2.0
    assert finder.shortest_path(1, 3) == [1, 2, 3]
    assert finder.shortest_path(3, 1) == [3, 2, 1]


def test_shortest_path_on_larger_graph(sample_graph):
    finder = PathFinder(sample_graph)

    assert finder.shortest_path_dist(0, 4) == 20.0
    assert finder.shortest_path(0, 4) == [0, 2, 5, 4]
    assert finder.shortest_path_dist(0, 3) == 20.0
    assert finder.shortest_path(0, 3) == [0, 2, 3]


def test_trivial_path(triangle):
    finder = PathFinder(triangle)

    assert finder.shortest_path_dist(2, 2) == 0
    assert finder.shortest_path(2, 2) == [2]


def test_no_path_between_components(two_components):
    finder = PathFinder(two_components)

    assert finder.shortest_path_dist(1, 4) == NO_PATH
    assert finder.shortest_path(1, 4) is None


def test_missing_nodes_report_no_path(triangle):
    finder = PathFinder(triangle)

    assert finder.shortest_path_dist(1, 42) == NO_PATH
    assert finder.shortest_path(42, 1) is None


def test_zero_weight_edges():
    graph = build_graph([1, 2, 3], [(1, 2, 0.0), (2, 3, 0.0), (1, 3, 0.5)])
    finder = PathFinder(graph)

    assert finder.shortest_path_dist(1, 3) == 0.0
    assert finder.shortest_path(1, 3) == [1, 2, 3]


def test_reweighting_changes_route(triangle):
    finder = PathFinder(triangle)
    triangle.connect(1, 3, 1.5)

    assert finder.shortest_path_dist(1, 3) == 1.5
    assert finder.shortest_path(1, 3) == [1, 3]


def test_strict_variants_raise(two_components):
    finder = PathFinder(two_components)

    with pytest.raises(NodeNotFoundError) as excinfo:
        finder.shortest_path_or_raise(1, 42)
    assert excinfo.value.key == 42

    with pytest.raises(NodeNotFoundError):
        finder.shortest_path_dist_or_raise(42, 1)

    with pytest.raises(NoPathError) as excinfo:
        finder.shortest_path_dist_or_raise(1, 3)
    assert (excinfo.value.src, excinfo.value.dest) == (1, 3)

    with pytest.raises(NoPathError):
        finder.shortest_path_or_raise(2, 4)

    assert finder.shortest_path_or_raise(1, 2) == [1, 2]
    assert finder.shortest_path_dist_or_raise(3, 4) == 2.0


def test_dijkstra_stops_at_destination(sample_graph):
    state, predecessors = dijkstra(sample_graph, 0, 1)

    assert state.tag(1) == 7.0
    assert predecessors[1] == 0
    # node 4 is farther than 1 and is never finalized
    assert state.tag(4) > 7.0


def test_dijkstra_full_sweep(sample_graph):
    state, _ = dijkstra(sample_graph, 0)

    assert [state.tag(key) for key in range(6)] == [0.0, 7.0, 9.0, 20.0, 20.0, 11.0]


def test_reconstruct_path_guards_broken_chains():
    assert reconstruct_path({3: 2}, 1, 3, max_length=5) is None
    assert reconstruct_path({3: 2, 2: 3}, 1, 3, max_length=5) is None
    assert reconstruct_path({3: 2, 2: 1}, 1, 3, max_length=5) == [1, 2, 3]
    assert reconstruct_path({}, 4, 4, max_length=0) == [4]
