"""
Persistence formats for weighted graphs.
"""

from .persistence import FORMAT_VERSION, save_graph, load_graph, try_load_graph

__all__ = ['FORMAT_VERSION', 'save_graph', 'load_graph', 'try_load_graph']
