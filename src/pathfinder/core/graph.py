"""
Graph store keyed by integer node identifiers.

This module provides the NodeSet class that holds the nodes of a graph
together with their adjacency lists. It has no algorithmic logic of its own;
the route solvers only use its read interface.

The store does not enforce that every id listed in a node's connections is
itself registered. Looking up an unknown id yields no node and no neighbors,
so dangling adjacency entries behave like dead ends.
"""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from .models import Node

# Constants
DEFAULT_CAPACITY_HINT = 0


class NodeSet[P]:
    """
    Mapping from node id to Node.

    Registering an id that is already present replaces the previous node;
    records are never merged. There is no removal operation.

    The store does no locking. Concurrent read-only searches over the same
    NodeSet are fine as long as nobody registers nodes at the same time.

    Attributes:
        capacity_hint (int): Expected number of nodes, as given by the caller
    """

    def __init__(self, capacity_hint: int = DEFAULT_CAPACITY_HINT):
        """
        Initialize an empty node set.

        Args:
            capacity_hint (int): Expected number of nodes. Only recorded;
                Python dictionaries grow on demand.
        """
        if not isinstance(capacity_hint, int) or isinstance(capacity_hint, bool):
            raise TypeError("capacity_hint must be an integer")
        if capacity_hint < 0:
            raise ValueError("capacity_hint must be non-negative")

        self.capacity_hint = capacity_hint
        self._nodes: Dict[int, Node[P]] = {}

    @classmethod
    def create(cls, capacity_hint: int = DEFAULT_CAPACITY_HINT) -> "NodeSet[P]":
        """Create an empty node set."""
        return cls(capacity_hint)

    def register_node(
        self, node_id: int, connections: Iterable[int], payload: Optional[P] = None
    ) -> Node[P]:
        """
        Insert or replace the node stored under node_id.

        Args:
            node_id: Identifier of the node
            connections: Ordered ids of the nodes it connects to
            payload: Caller-owned value attached to the node

        Returns:
            The registered Node
        """
        node = Node(id=node_id, connections=connections, payload=payload)
        self._nodes[node_id] = node
        return node

    def add_node(self, node: Node[P]) -> None:
        """Insert or replace an already built node."""
        if not isinstance(node, Node):
            raise TypeError("node must be a Node instance")
        self._nodes[node.id] = node

    def get_node(self, node_id: int) -> Optional[Node[P]]:
        """Get the node stored under node_id, or None when it is absent."""
        return self._nodes.get(node_id)

    def has_node(self, node_id: int) -> bool:
        """Check if a node is registered."""
        return node_id in self._nodes

    def get_neighbors(self, node_id: int) -> Tuple[int, ...]:
        """
        Get the ordered connections of a node.

        Unknown ids have no neighbors.
        """
        node = self._nodes.get(node_id)
        if node is None:
            return ()
        return tuple(node.connections)

    def has_edge(self, from_node: int, to_node: int) -> bool:
        """Check if from_node lists to_node among its connections."""
        node = self._nodes.get(from_node)
        return node is not None and to_node in node.connections

    def get_payload(self, node_id: int) -> Optional[P]:
        """Get the payload of a node, or None when the node is absent."""
        node = self._nodes.get(node_id)
        return node.payload if node is not None else None

    def nodes(self) -> Iterator[Node[P]]:
        """Iterate over the registered nodes in registration order."""
        return iter(list(self._nodes.values()))

    def edge_count(self) -> int:
        """Number of adjacency entries over every node."""
        return sum(node.degree for node in self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: Any) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._nodes))

    def __repr__(self) -> str:
        return f"NodeSet(nodes={len(self._nodes)}, edges={self.edge_count()})"
