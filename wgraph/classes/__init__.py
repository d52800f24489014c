"""
Core data classes for weighted graph representation.

This module contains the fundamental data structures and error types used
throughout the wgraph library.
"""

from .node import NodeInfo, Label
from .errors import GraphError, NodeNotFoundError, NoPathError, PersistenceError

__all__ = [
    'NodeInfo',
    'Label',
    'GraphError',
    'NodeNotFoundError',
    'NoPathError',
    'PersistenceError',
]
