"""
Core graph data structures and management.

This module contains the fundamental graph representation and the
algorithms facade built on top of it.
"""

from .graph import WeightedGraph, NO_EDGE
from .algorithms import GraphAlgorithms, clone

__all__ = ['WeightedGraph', 'NO_EDGE', 'GraphAlgorithms', 'clone']
