"""
Shortest path analysis for weighted graphs.

This module provides Dijkstra's algorithm and route reconstruction on top of
WeightedGraph. Edge weights are non-negative, so a node's distance is final
once it leaves the priority queue.
"""

import heapq
import logging
import math
from typing import Dict, List, Optional, Tuple

from ..classes.errors import NodeNotFoundError, NoPathError
from ..classes.node import Label
from ..core.graph import WeightedGraph
from .traversal import TraversalState

logger = logging.getLogger(__name__)

# Returned by distance queries when no path exists
NO_PATH = -1.0


def dijkstra(graph: WeightedGraph, src: int, dest: Optional[int] = None) -> Tuple[TraversalState, Dict[int, int]]:
    """
    Run Dijkstra's algorithm from a source node.

    The heap may hold stale entries for a node whose distance was lowered
    after it was pushed; those are skipped once the node is FINALIZED.

    Args:
        graph: Graph to search
        src: Key of the source node
        dest: Optional key at which the sweep stops early

    Returns:
        Tuple of (traversal state whose tags are the tentative distances,
        predecessor map for every relaxed node)
    """
    state = TraversalState(graph.nodes, tag=math.inf)
    predecessors: Dict[int, int] = {}
    if src not in graph:
        return state, predecessors

    state.set_tag(src, 0.0)
    heap: List[Tuple[float, int]] = [(0.0, src)]

    while heap:
        current_distance, current_id = heapq.heappop(heap)
        if state.label(current_id) is Label.FINALIZED:
            continue
        if current_id == dest or math.isinf(current_distance):
            break

        for neighbor_id, weight in graph.adjacency_list[current_id].items():
            if state.label(neighbor_id) is not Label.UNVISITED:
                continue
            candidate = current_distance + weight
            if candidate < state.tag(neighbor_id):
                state.set_tag(neighbor_id, candidate)
                predecessors[neighbor_id] = current_id
                heapq.heappush(heap, (candidate, neighbor_id))

        state.set_label(current_id, Label.FINALIZED)

    return state, predecessors


def reconstruct_path(predecessors: Dict[int, int], src: int, dest: int, max_length: int) -> Optional[List[int]]:
    """
    Rebuild the route from ``src`` to ``dest`` by walking predecessors backward.

    The walk stops after ``max_length`` steps, so a cycle in the predecessor
    map cannot loop forever.

    Args:
        predecessors: Map from node key to the key it was relaxed from
        src: Source node key
        dest: Destination node key
        max_length: Upper bound on the number of hops (the node count)

    Returns:
        Ordered list of keys ``[src, ..., dest]``, or None if the chain
        does not lead back to ``src``
    """
    if src == dest:
        return [src]

    path = [dest]
    current_id = dest
    for _ in range(max_length):
        current_id = predecessors.get(current_id)
        if current_id is None:
            return None
        path.append(current_id)
        if current_id == src:
            path.reverse()
            return path

    logger.warning(f"Predecessor chain from {dest} did not reach {src} within {max_length} steps")
    return None


class PathFinder:
    """
    Shortest path queries over a weighted graph.

    This class provides methods for:
    - Shortest path distance between two nodes
    - Shortest route between two nodes
    - Strict variants that raise instead of returning sentinels
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the path finder.

        Args:
            graph: WeightedGraph instance to analyze
        """
        self.graph = graph

    def shortest_path_dist(self, src: int, dest: int) -> float:
        """
        Length of the shortest path between two nodes.

        Args:
            src: Source node key
            dest: Destination node key

        Returns:
            Sum of edge weights along the shortest path, or NO_PATH if either
            node is missing or the nodes are not connected
        """
        if src not in self.graph or dest not in self.graph:
            return NO_PATH

        state, _ = dijkstra(self.graph, src, dest)
        distance = state.tag(dest)
        if math.isinf(distance):
            return NO_PATH
        return distance

    def shortest_path(self, src: int, dest: int) -> Optional[List[int]]:
        """
        Shortest route between two nodes.

        Args:
            src: Source node key
            dest: Destination node key

        Returns:
            Ordered list of keys from ``src`` to ``dest`` inclusive, or None
            if either node is missing or the nodes are not connected
        """
        if src not in self.graph or dest not in self.graph:
            return None

        state, predecessors = dijkstra(self.graph, src, dest)
        if math.isinf(state.tag(dest)):
            return None
        return reconstruct_path(predecessors, src, dest, self.graph.node_size())

    def shortest_path_dist_or_raise(self, src: int, dest: int) -> float:
        """
        Like shortest_path_dist, but raises instead of returning NO_PATH.

        Raises:
            NodeNotFoundError: If ``src`` or ``dest`` is not in the graph
            NoPathError: If the nodes are not connected
        """
        self._require_nodes(src, dest)
        distance = self.shortest_path_dist(src, dest)
        if distance == NO_PATH:
            raise NoPathError(f"No path from {src} to {dest}", src=src, dest=dest)
        return distance

    def shortest_path_or_raise(self, src: int, dest: int) -> List[int]:
        """
        Like shortest_path, but raises instead of returning None.

        Raises:
            NodeNotFoundError: If ``src`` or ``dest`` is not in the graph
            NoPathError: If the nodes are not connected
        """
        self._require_nodes(src, dest)
        path = self.shortest_path(src, dest)
        if path is None:
            raise NoPathError(f"No path from {src} to {dest}", src=src, dest=dest)
        return path

    def _require_nodes(self, *keys: int) -> None:
        for key in keys:
            if key not in self.graph:
                raise NodeNotFoundError(f"Node not in graph: {key}", key=key)
