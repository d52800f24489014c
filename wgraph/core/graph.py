"""
Core graph data structure for weighted undirected graphs.

This module provides the fundamental graph structure without high-level operations.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple, ValuesView

from ..classes.node import NodeInfo

logger = logging.getLogger(__name__)

# Returned by get_edge when the two keys are not connected
NO_EDGE = -1.0


class WeightedGraph:
    """
    Weighted undirected graph keyed by integer node IDs.

    This class manages the fundamental graph representation without
    traversal algorithms. It provides:
    - Node creation and removal
    - Symmetric weighted edge maintenance
    - Vertex, edge and modification counters
    - Structural (value based) equality
    """

    __hash__ = None

    def __init__(self):
        """Initialize an empty graph."""
        # Vertex mappings
        self.nodes: Dict[int, NodeInfo] = {}

        # Graph structure, both directions of every edge are stored
        self.adjacency_list: Dict[int, Dict[int, float]] = {}

        self._vertex_count = 0
        self._edge_count = 0
        self._mc = 0

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_node(self, key: int) -> Optional[NodeInfo]:
        """
        Get a node by its key.

        Args:
            key: Node key

        Returns:
            The node object, or None if not found
        """
        return self.nodes.get(key)

    def get_nodes(self) -> ValuesView:
        """Get a live view of all nodes in the graph."""
        return self.nodes.values()

    def has_edge(self, node1: int, node2: int) -> bool:
        """
        Check whether an edge connects two distinct nodes.

        Args:
            node1: First node key
            node2: Second node key

        Returns:
            True if the nodes are adjacent
        """
        if node1 == node2:
            return False
        neighbors = self.adjacency_list.get(node1)
        return neighbors is not None and node2 in neighbors

    def get_edge(self, node1: int, node2: int) -> float:
        """
        Get the weight of the edge between two nodes.

        Args:
            node1: First node key
            node2: Second node key

        Returns:
            The edge weight, or NO_EDGE if the nodes are not adjacent
        """
        if not self.has_edge(node1, node2):
            return NO_EDGE
        return self.adjacency_list[node1][node2]

    def neighbors(self, key: int) -> Set[int]:
        """
        Get the keys of all nodes directly connected to a node.

        Args:
            key: Node key

        Returns:
            Set of neighbor keys, empty if the node is absent or isolated
        """
        return set(self.adjacency_list.get(key, ()))

    def get_neighbor_nodes(self, key: int) -> List[NodeInfo]:
        """Get the node objects adjacent to a node, in adjacency order."""
        return [self.nodes[n] for n in self.adjacency_list.get(key, ())]

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """
        Iterate over every undirected edge exactly once.

        Yields:
            Tuples of (smaller key, larger key, weight)
        """
        for node1, neighbors in self.adjacency_list.items():
            for node2, weight in neighbors.items():
                if node1 < node2:
                    yield node1, node2, weight

    def node_size(self) -> int:
        """Get the number of nodes in the graph."""
        return self._vertex_count

    def edge_size(self) -> int:
        """Get the number of undirected edges in the graph."""
        return self._edge_count

    def get_mc(self) -> int:
        """
        Get the modification counter.

        The counter grows by one on every structural change and is meant
        as an advisory staleness signal for callers.
        """
        return self._mc

    # ========================================================================
    # MUTATIONS
    # ========================================================================

    def add_node(self, key: int) -> None:
        """
        Add a node with the given key.

        Adding a key that already exists does nothing.

        Args:
            key: Node key
        """
        if key in self.nodes:
            logger.debug(f"Node {key} already exists, skipping add")
            return

        self.nodes[key] = NodeInfo(key)
        self.adjacency_list[key] = {}
        self._vertex_count += 1
        self._mc += 1

    def remove_node(self, key: int) -> Optional[NodeInfo]:
        """
        Remove a node and every edge incident to it.

        Args:
            key: Node key

        Returns:
            The removed node, or None if the key was not in the graph
        """
        if key not in self.nodes:
            return None

        for neighbor_id in list(self.adjacency_list[key]):
            self.remove_edge(neighbor_id, key)

        del self.adjacency_list[key]
        self._vertex_count -= 1
        self._mc += 1
        logger.debug(f"Removed node {key}")
        return self.nodes.pop(key)

    def connect(self, node1: int, node2: int, weight: float) -> None:
        """
        Connect two nodes with a weighted edge, or reweight an existing one.

        The call does nothing when the keys are equal, when either key is
        absent, when the weight is negative or NaN, or when the edge already has
        this weight.

        Args:
            node1: First node key
            node2: Second node key
            weight: Non-negative edge weight
        """
        if not weight >= 0:
            logger.debug(f"Rejected invalid weight {weight} for edge ({node1}, {node2})")
            return
        if node1 == node2:
            return
        if node1 not in self.nodes or node2 not in self.nodes:
            logger.debug(f"Cannot connect ({node1}, {node2}): missing node")
            return

        current = self.adjacency_list[node1].get(node2)
        if current is None:
            self._edge_count += 1
        elif current == weight:
            return

        self.adjacency_list[node1][node2] = weight
        self.adjacency_list[node2][node1] = weight
        self._mc += 1

    def remove_edge(self, node1: int, node2: int) -> None:
        """
        Remove the edge between two nodes if there is one.

        Args:
            node1: First node key
            node2: Second node key
        """
        if not self.has_edge(node1, node2):
            return

        del self.adjacency_list[node1][node2]
        del self.adjacency_list[node2][node1]
        self._edge_count -= 1
        self._mc += 1

    # ========================================================================
    # PROTOCOLS
    # ========================================================================

    def __contains__(self, key) -> bool:
        return key in self.nodes

    def __iter__(self) -> Iterator[int]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return self._vertex_count

    def __eq__(self, other):
        """
        Structural equality.

        Two graphs are equal when they hold the same number of nodes and
        edges and every edge of this graph exists in the other with the
        same weight. A GraphAlgorithms wrapper is compared through the
        graph it wraps.
        """
        if self is other:
            return True
        if not isinstance(other, WeightedGraph):
            inner = getattr(other, 'get_graph', None)
            if inner is None:
                return NotImplemented
            other = inner()
            if not isinstance(other, WeightedGraph):
                return NotImplemented

        if self._vertex_count != other._vertex_count or self._edge_count != other._edge_count:
            return False

        for node1, node2, weight in self.edges():
            if other.get_edge(node1, node2) != weight:
                return False
        return True

    def __repr__(self):
        return f"WeightedGraph(nodes={self._vertex_count}, edges={self._edge_count}, mc={self._mc})"

    def __str__(self):
        edge_strings = [f"{{{n1},{n2};{w}}}" for n1, n2, w in self.edges()]
        return f"Ver: {list(self.nodes)}\nEdg: [{', '.join(edge_strings)}]"
