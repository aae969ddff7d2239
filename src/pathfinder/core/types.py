"""
Core type definitions and protocols.

This module provides the read interface the route solvers need from a graph,
so that callers can hand them any store exposing it.
"""

from typing import Any, Optional, Protocol, Sequence

from .models import Node


class GraphProtocol(Protocol):
    """Protocol defining required graph operations."""

    def get_node(self, node_id: int) -> Optional[Node[Any]]:
        """Get a node, or None when it is absent."""
        ...

    def get_neighbors(self, node_id: int) -> Sequence[int]:
        """Get the ordered outgoing neighbors of a node."""
        ...

    def has_node(self, node_id: int) -> bool:
        """Check if a node exists."""
        ...

    def has_edge(self, from_node: int, to_node: int) -> bool:
        """Check if an edge exists between nodes."""
        ...
