"""
wgraph - Weighted Undirected Graph Library

A Python library for building weighted, undirected graphs keyed by integers
and running graph algorithms on them: deep copy, connectivity testing,
shortest path distance and route, and versioned save/load.

Main Classes:
    WeightedGraph: Node and edge storage with symmetric weighted adjacency
    GraphAlgorithms: Algorithms facade wrapping a WeightedGraph
    NodeInfo: Vertex representation in the graph

Example:
    >>> from wgraph import WeightedGraph, GraphAlgorithms
    >>> graph = WeightedGraph()
    >>> for key in (1, 2, 3):
    ...     graph.add_node(key)
    >>> graph.connect(1, 2, 1.0)
    >>> graph.connect(2, 3, 1.0)
    >>> GraphAlgorithms(graph).shortest_path(1, 3)
    [1, 2, 3]
"""

__version__ = "0.1.0"

from wgraph.classes.node import NodeInfo, Label
from wgraph.classes.errors import GraphError, NodeNotFoundError, NoPathError, PersistenceError
from wgraph.core.graph import WeightedGraph, NO_EDGE
from wgraph.core.algorithms import GraphAlgorithms, clone
from wgraph.analysis.pathfinding import NO_PATH
from wgraph.formats.persistence import save_graph, load_graph

__all__ = [
    'WeightedGraph',
    'GraphAlgorithms',
    'NodeInfo',
    'Label',
    'NO_EDGE',
    'NO_PATH',
    'clone',
    'save_graph',
    'load_graph',
    'GraphError',
    'NodeNotFoundError',
    'NoPathError',
    'PersistenceError',
]
