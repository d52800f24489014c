"""
Vertex representation for the weighted graph.
"""

from enum import Enum


class Label(Enum):
    """Traversal marker used by BFS and Dijkstra sweeps."""

    UNVISITED = 0
    FRONTIER = 1
    FINALIZED = 2


class NodeInfo:
    """
    A uniquely keyed vertex.

    Identity is the integer key alone: ``info`` and ``tag`` are caller
    metadata and never take part in equality or hashing.
    """

    __slots__ = ('_key', 'info', 'tag')

    def __init__(self, key: int, info: str = "", tag: float = 0.0):
        self._key = key
        self.info = info
        self.tag = tag

    @property
    def key(self) -> int:
        """Unique key of this vertex within its graph."""
        return self._key

    def __eq__(self, other):
        if not isinstance(other, NodeInfo):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f"NodeInfo(key={self._key}, info={self.info!r}, tag={self.tag})"
