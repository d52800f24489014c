"""Typed errors for the wgraph library.

Structural no-ops (self-loops, negative weights, duplicate nodes) are not
errors and never raise. These types cover the conditions that callers must
be told about explicitly: unknown keys on strict lookups, unreachable
targets on strict lookups, and persistence faults.

All errors inherit from GraphError and can optionally wrap a root cause
exception for debugging.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphError(Exception):
    """Base error for the wgraph library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NodeNotFoundError(GraphError):
    """A key passed to a strict lookup is not in the graph.

    Attributes:
        key: The missing node key
    """

    key: Optional[int] = None


@dataclass
class NoPathError(GraphError):
    """No path connects the requested nodes.

    Attributes:
        src: Source node key
        dest: Destination node key
    """

    src: Optional[int] = None
    dest: Optional[int] = None


@dataclass
class PersistenceError(GraphError):
    """Saving or loading a graph failed.

    Attributes:
        file_path: Path of the file involved, if any
    """

    file_path: Optional[str] = None
