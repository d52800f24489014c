import pytest

from wgraph import WeightedGraph


def build_graph(keys, edges):
    graph = WeightedGraph()
    for key in keys:
        graph.add_node(key)
    for node1, node2, weight in edges:
        graph.connect(node1, node2, weight)
    return graph


@pytest.fixture
def triangle():
    # 1 -> 3 directly costs 5.0, through 2 costs 2.0
    return build_graph([1, 2, 3], [(1, 2, 1.0), (2, 3, 1.0), (1, 3, 5.0)])


@pytest.fixture
def two_components():
    return build_graph([1, 2, 3, 4], [(1, 2, 1.0), (3, 4, 2.0)])


@pytest.fixture
def sample_graph():
    return build_graph(
        range(6),
        [
            (0, 1, 7.0),
            (0, 2, 9.0),
            (0, 5, 14.0),
            (1, 2, 10.0),
            (1, 3, 15.0),
            (2, 3, 11.0),
            (2, 5, 2.0),
            (3, 4, 6.0),
            (4, 5, 9.0),
        ],
    )
