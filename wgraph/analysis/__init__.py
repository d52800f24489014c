"""
Graph analysis modules for traversal and path finding.

This module contains breadth-first connectivity analysis and Dijkstra
shortest path search.
"""

from .traversal import TraversalState, bfs, is_connected, reachable_from
from .pathfinding import PathFinder, NO_PATH, dijkstra, reconstruct_path

__all__ = [
    'TraversalState',
    'bfs',
    'is_connected',
    'reachable_from',
    'PathFinder',
    'NO_PATH',
    'dijkstra',
    'reconstruct_path',
]
