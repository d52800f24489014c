"""
Algorithms facade for weighted graphs.

This module provides the GraphAlgorithms class, which wraps a WeightedGraph
and delegates to the traversal, pathfinding and persistence modules.
"""

import logging
from typing import List, Optional

from .graph import WeightedGraph
from ..analysis.traversal import is_connected
from ..analysis.pathfinding import PathFinder
from ..formats.persistence import save_graph, load_graph
from ..classes.errors import PersistenceError

logger = logging.getLogger(__name__)


def clone(graph: WeightedGraph) -> WeightedGraph:
    """
    Deep copy a graph by replaying its nodes and edges into a new one.

    Args:
        graph: Source graph

    Returns:
        A new graph equal to ``graph`` that shares no storage with it
    """
    copy = WeightedGraph()
    for node in graph.get_nodes():
        copy.add_node(node.key)
        copy.get_node(node.key).info = node.info
    for key in graph:
        for neighbor_id, weight in graph.adjacency_list[key].items():
            copy.connect(key, neighbor_id, weight)
    return copy


class GraphAlgorithms:
    """
    Graph algorithms over a wrapped WeightedGraph.

    The wrapped graph is only read by these methods; traversal scratch data
    is allocated per call. Only load() replaces the wrapped graph.
    """

    __hash__ = None

    def __init__(self, graph: Optional[WeightedGraph] = None):
        """
        Initialize the algorithms wrapper.

        Args:
            graph: Graph to operate on, a new empty graph if omitted
        """
        self._graph = WeightedGraph()
        self._pathfinder = PathFinder(self._graph)
        self.init(graph)

    # ========================================================================
    # GRAPH ACCESS
    # ========================================================================

    def init(self, graph: Optional[WeightedGraph]) -> None:
        """Point this wrapper at another graph. None is ignored."""
        if graph is None:
            return
        self._graph = graph
        self._pathfinder = PathFinder(graph)

    def get_graph(self) -> WeightedGraph:
        """Get the wrapped graph."""
        return self._graph

    # ========================================================================
    # STRUCTURE
    # ========================================================================

    def copy(self) -> WeightedGraph:
        """Deep copy of the wrapped graph."""
        return clone(self._graph)

    def is_connected(self) -> bool:
        """Check whether every node of the wrapped graph reaches every other."""
        return is_connected(self._graph)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def shortest_path_dist(self, src: int, dest: int) -> float:
        """Shortest path length from ``src`` to ``dest``, or NO_PATH."""
        return self._pathfinder.shortest_path_dist(src, dest)

    def shortest_path(self, src: int, dest: int) -> Optional[List[int]]:
        """Shortest route ``[src, ..., dest]``, or None."""
        return self._pathfinder.shortest_path(src, dest)

    def shortest_path_dist_or_raise(self, src: int, dest: int) -> float:
        """Shortest path length, raising NodeNotFoundError or NoPathError."""
        return self._pathfinder.shortest_path_dist_or_raise(src, dest)

    def shortest_path_or_raise(self, src: int, dest: int) -> List[int]:
        """Shortest route, raising NodeNotFoundError or NoPathError."""
        return self._pathfinder.shortest_path_or_raise(src, dest)

    # ========================================================================
    # PERSISTENCE
    # ========================================================================

    def save(self, file_path: str) -> bool:
        """
        Save the wrapped graph.

        Args:
            file_path: Destination path

        Returns:
            True if the graph was written
        """
        return save_graph(self._graph, file_path)

    def load(self, file_path: str) -> bool:
        """
        Replace the wrapped graph with one loaded from a file.

        The wrapped graph is left exactly as it was if loading fails.

        Args:
            file_path: Path of a file written by save()

        Returns:
            True if the graph was loaded and is now wrapped
        """
        try:
            graph = load_graph(file_path)
        except PersistenceError:
            return False

        self.init(graph)
        logger.info(f"Loaded graph with {graph.node_size()} nodes from {file_path}")
        return True

    # ========================================================================
    # PROTOCOLS
    # ========================================================================

    def __eq__(self, other):
        """Compare the wrapped graph with another graph or wrapper."""
        if isinstance(other, GraphAlgorithms):
            other = other.get_graph()
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._graph == other

    def __repr__(self):
        return f"GraphAlgorithms({self._graph!r})"

    def __str__(self):
        return f"GraphAlgorithms: {self._graph}"
