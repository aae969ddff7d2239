"""
Core domain models for the path finding system.

This module defines the data structures stored in a graph and the
bookkeeping records the solvers queue while traversing it:
- Node: a uniquely identified vertex with its adjacency list and payload
- Connection: one traversal step, a node together with the node it was
  reached from

The payload carried by a node is owned by the caller. The solvers never read
or mutate it; it is only handed back to callbacks through the graph.
"""

from dataclasses import dataclass, field
from typing import List, Optional

# Parent of the start node in a traversal
NO_PARENT = None


def _is_node_id(value: object) -> bool:
    """Return True if value can be used as a node identifier."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Node[P]:
    """
    A vertex of the graph.

    Attributes:
        id (int): Identifier, unique among every node of the graph
        connections (List[int]): Ordered ids of the nodes this node can reach.
            The order decides in which order callbacks see candidates and how
            ties are broken when a path is rebuilt.
        payload (P): Caller-owned value attached to the node
    """

    id: int
    connections: List[int] = field(default_factory=list)
    payload: P | None = None

    def __post_init__(self):
        """Validate identifiers after initialization."""
        if not _is_node_id(self.id):
            raise TypeError("id must be an integer")

        if isinstance(self.connections, (str, bytes)):
            raise TypeError("connections must be a sequence of node ids")
        try:
            self.connections = list(self.connections)
        except TypeError:
            raise TypeError("connections must be a sequence of node ids")

        for connection in self.connections:
            if not _is_node_id(connection):
                raise TypeError(f"connection {connection!r} of node {self.id} is not a node id")

    @property
    def degree(self) -> int:
        """Number of outgoing connections."""
        return len(self.connections)


@dataclass(frozen=True)
class Connection:
    """
    A queued traversal step.

    Attributes:
        to (int): Node reached by this step
        parent (Optional[int]): Node the step was taken from, ``NO_PARENT`` for
            the start
    """

    to: int
    parent: Optional[int] = NO_PARENT
