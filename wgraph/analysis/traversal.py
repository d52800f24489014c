"""
Breadth-first traversal and connectivity analysis.

Traversal scratch data (label and tag per node) lives in a TraversalState
allocated for each call, so the graph itself is never written to.
"""

import logging
import math
from collections import deque
from typing import Dict, Iterable, List

from ..classes.node import Label
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class TraversalState:
    """
    Per-call label and tag storage for a set of node keys.

    Tags hold the BFS visit marker or Dijkstra's tentative distance.
    """

    def __init__(self, keys: Iterable[int], tag: float = 0.0):
        self.labels: Dict[int, Label] = {}
        self.tags: Dict[int, float] = {}
        for key in keys:
            self.labels[key] = Label.UNVISITED
            self.tags[key] = tag

    def label(self, key: int) -> Label:
        return self.labels[key]

    def set_label(self, key: int, label: Label) -> None:
        self.labels[key] = label

    def tag(self, key: int) -> float:
        return self.tags[key]

    def set_tag(self, key: int, tag: float) -> None:
        self.tags[key] = tag

    def count(self, label: Label) -> int:
        """Number of nodes currently carrying a label."""
        return sum(1 for value in self.labels.values() if value is label)


def bfs(graph: WeightedGraph, start_id: int) -> TraversalState:
    """
    Run a breadth-first sweep from a start node.

    Every node reachable from ``start_id`` ends FINALIZED; every other node
    stays UNVISITED. The tag of a finalized node is its hop count from the
    start node, and +inf for nodes that were never reached.

    Args:
        graph: Graph to traverse
        start_id: Key of the start node

    Returns:
        The traversal state after the queue has drained
    """
    state = TraversalState(graph.nodes, tag=math.inf)
    if start_id not in graph:
        return state

    state.set_tag(start_id, 0.0)
    queue = deque([start_id])

    while queue:
        current_id = queue.popleft()
        if state.label(current_id) is Label.FINALIZED:
            continue

        for neighbor_id in graph.adjacency_list[current_id]:
            if state.label(neighbor_id) is Label.UNVISITED:
                state.set_label(neighbor_id, Label.FRONTIER)
                state.set_tag(neighbor_id, state.tag(current_id) + 1)
                queue.append(neighbor_id)

        state.set_label(current_id, Label.FINALIZED)

    return state


def reachable_from(graph: WeightedGraph, start_id: int) -> List[int]:
    """Keys of every node reachable from a start node, the start included."""
    state = bfs(graph, start_id)
    return [key for key, label in state.labels.items() if label is Label.FINALIZED]


def is_connected(graph: WeightedGraph) -> bool:
    """
    Check whether every node can reach every other node.

    Graphs with zero or one node are connected. A graph with fewer than
    ``n - 1`` edges cannot span its nodes and is rejected without
    traversal.

    Args:
        graph: Graph to check

    Returns:
        True if the graph is connected
    """
    node_count = graph.node_size()
    if node_count <= 1:
        return True
    if graph.edge_size() < node_count - 1:
        logger.debug(f"Graph has {graph.edge_size()} edges for {node_count} nodes, cannot be connected")
        return False

    start_id = next(iter(graph.nodes))
    state = bfs(graph, start_id)
    finalized = state.count(Label.FINALIZED)
    logger.debug(f"BFS from {start_id} finalized {finalized} of {node_count} nodes")
    return finalized == node_count
