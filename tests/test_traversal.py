import math

from wgraph import Label, WeightedGraph
from wgraph.analysis import bfs, is_connected, reachable_from

from .conftest import build_graph


def test_empty_and_single_node_graphs_are_connected():
    graph = WeightedGraph()
    assert is_connected(graph)

    graph.add_node(5)
    assert is_connected(graph)


def test_path_graph_is_connected_until_edge_removed():
    graph = build_graph([1, 2, 3], [(1, 2, 1.0), (2, 3, 1.0)])
    assert is_connected(graph)

    graph.remove_edge(2, 3)
    assert not is_connected(graph)


def test_too_few_edges_is_disconnected():
    graph = build_graph([1, 2, 3, 4], [(1, 2, 1.0), (2, 3, 1.0)])
    assert not is_connected(graph)


def test_enough_edges_but_disconnected():
    # 4 nodes and 3 edges, but node 4 is isolated
    graph = build_graph([1, 2, 3, 4], [(1, 2, 1.0), (2, 3, 1.0), (1, 3, 1.0)])
    assert not is_connected(graph)


def test_bfs_labels_and_hop_counts(sample_graph):
    sample_graph.add_node(99)
    state = bfs(sample_graph, 0)

    assert state.label(99) is Label.UNVISITED
    assert math.isinf(state.tag(99))
    assert state.count(Label.FINALIZED) == 6
    assert state.count(Label.FRONTIER) == 0
    assert state.tag(0) == 0
    assert state.tag(5) == 1
    assert state.tag(4) == 2


def test_bfs_from_missing_node_visits_nothing(triangle):
    state = bfs(triangle, 42)
    assert state.count(Label.UNVISITED) == 3


def test_bfs_leaves_graph_untouched(triangle):
    mc = triangle.get_mc()
    triangle.get_node(1).tag = 7.0

    bfs(triangle, 1)

    assert triangle.get_mc() == mc
    assert triangle.get_node(1).tag == 7.0


def test_reachable_from(two_components):
    assert sorted(reachable_from(two_components, 3)) == [3, 4]
    assert sorted(reachable_from(two_components, 1)) == [1, 2]
