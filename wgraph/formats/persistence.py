"""
Versioned save and load of weighted graphs.

Graphs are written field by field into a numpy ``.npz`` archive:

    format_version  int64 scalar
    keys            int64[n]     node keys
    infos           str[n]       node info strings, aligned with keys
    edge_src        int64[m]     smaller key of each undirected edge
    edge_dst        int64[m]     larger key of each undirected edge
    edge_weight     float64[m]   edge weights

Only plain arrays are stored, so archives load with ``allow_pickle=False``.
"""

import logging
import zipfile
from typing import Optional

import numpy as np

from ..classes.errors import PersistenceError
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_FIELDS = ('format_version', 'keys', 'infos', 'edge_src', 'edge_dst', 'edge_weight')

# Failures np.load and archive access can raise on unreadable input
_LOAD_ERRORS = (OSError, EOFError, KeyError, TypeError, ValueError, zipfile.BadZipFile)


def save_graph(graph: WeightedGraph, file_path: str) -> bool:
    """
    Save a graph to a file.

    The graph is only read, never modified. Errors are logged and reported
    through the return value rather than raised.

    Args:
        graph: Graph to save
        file_path: Destination path, written exactly as given

    Returns:
        True if the file was written successfully
    """
    try:
        edge_list = list(graph.edges())
        arrays = {
            'format_version': np.int64(FORMAT_VERSION),
            'keys': np.array(list(graph.nodes), dtype=np.int64),
            'infos': np.array([node.info for node in graph.get_nodes()], dtype=np.str_),
            'edge_src': np.array([edge[0] for edge in edge_list], dtype=np.int64),
            'edge_dst': np.array([edge[1] for edge in edge_list], dtype=np.int64),
            'edge_weight': np.array([edge[2] for edge in edge_list], dtype=np.float64),
        }

        # Going through a file object keeps numpy from appending ".npz"
        with open(file_path, 'wb') as f:
            np.savez(f, **arrays)
    except (OSError, ValueError, OverflowError) as e:
        logger.error(f"Failed to save graph to {file_path}: {e}")
        return False

    logger.info(f"Saved graph with {graph.node_size()} nodes and {graph.edge_size()} edges to {file_path}")
    return True


def load_graph(file_path: str) -> WeightedGraph:
    """
    Load a graph previously written by save_graph.

    Args:
        file_path: Path of the archive to read

    Returns:
        A new graph equal to the one that was saved

    Raises:
        PersistenceError: If the file cannot be read or does not hold a
            valid graph
    """
    try:
        archive = np.load(file_path, allow_pickle=False)
        if not hasattr(archive, 'files'):
            raise ValueError("not an npz archive")
        with archive:
            missing = [name for name in _FIELDS if name not in archive.files]
            if missing:
                raise KeyError(f"missing fields {missing}")

            version_field = archive['format_version']
            if version_field.shape != ():
                raise ValueError("format_version is not a scalar")
            version = int(version_field)
            if version != FORMAT_VERSION:
                raise ValueError(f"unsupported format version {version}")

            keys = archive['keys']
            infos = archive['infos']
            edge_src = archive['edge_src']
            edge_dst = archive['edge_dst']
            edge_weight = archive['edge_weight']
    except _LOAD_ERRORS as e:
        logger.warning(f"Failed to load graph from {file_path}: {e}")
        raise PersistenceError(f"Failed to load graph from {file_path}", cause=e, file_path=str(file_path))

    try:
        return _build_graph(keys, infos, edge_src, edge_dst, edge_weight)
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid graph data in {file_path}: {e}")
        raise PersistenceError(f"Invalid graph data in {file_path}", cause=e, file_path=str(file_path))


def try_load_graph(file_path: str) -> Optional[WeightedGraph]:
    """Load a graph, returning None instead of raising on failure."""
    try:
        return load_graph(file_path)
    except PersistenceError:
        return None


def _build_graph(keys, infos, edge_src, edge_dst, edge_weight) -> WeightedGraph:
    """
    Rebuild a graph from decoded arrays, validating them on the way.

    Raises:
        ValueError: If the arrays do not describe a valid graph
    """
    if len(keys) != len(infos):
        raise ValueError(f"{len(keys)} keys but {len(infos)} info strings")
    if not len(edge_src) == len(edge_dst) == len(edge_weight):
        raise ValueError("edge arrays have different lengths")
    if not all(np.issubdtype(array.dtype, np.integer) for array in (keys, edge_src, edge_dst)):
        raise ValueError("node keys must be integers")
    if not np.issubdtype(edge_weight.dtype, np.floating):
        raise ValueError("edge weights must be floating point")
    if len(np.unique(keys)) != len(keys):
        raise ValueError("duplicate node keys")
    if np.any(edge_src == edge_dst):
        raise ValueError("self-loop edge")
    if np.any(np.isnan(edge_weight)) or np.any(edge_weight < 0):
        raise ValueError("invalid edge weight")

    graph = WeightedGraph()
    for key, info in zip(keys, infos):
        graph.add_node(int(key))
        graph.get_node(int(key)).info = str(info)

    for node1, node2, weight in zip(edge_src, edge_dst, edge_weight):
        node1, node2 = int(node1), int(node2)
        if node1 not in graph or node2 not in graph:
            raise ValueError(f"edge ({node1}, {node2}) references an unknown node")
        graph.connect(node1, node2, float(weight))

    if graph.edge_size() != len(edge_src):
        raise ValueError("duplicate edges")

    logger.debug(f"Rebuilt graph with {graph.node_size()} nodes and {graph.edge_size()} edges")
    return graph
