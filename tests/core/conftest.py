"""Shared test fixtures."""

from dataclasses import dataclass
from typing import Optional

import pytest

from pathfinder.core.graph import NodeSet
from pathfinder.core.graph_paths.types import weight_connections


@dataclass
class StarSystem:
    """Payload of a star map node."""

    name: str
    security: float


def security_weight(graph: NodeSet, previous: Optional[int], current: int, to: int) -> float:
    """Make lawless systems (security below 0.5) a hundred times more expensive."""
    system = graph.get_payload(to)
    if system is not None and system.security < 0.5:
        return 100.0
    return weight_connections(graph, previous, current, to)


@pytest.fixture
def star_map() -> NodeSet[StarSystem]:
    """
    Fixture providing an undirected star map:

    Amarr - Sarum - Kor-Azor - Ashab - Jita
      |               (99)               |
    Youl ---------- Tama ----------------+

    Youl and Tama are lawless. Kor-Azor lists the unregistered system 99.
    Thera has no connections.
    """
    graph: NodeSet[StarSystem] = NodeSet.create(8)
    graph.register_node(1, [2, 5], StarSystem("Amarr", 1.0))
    graph.register_node(2, [1, 3], StarSystem("Sarum", 0.9))
    graph.register_node(3, [2, 99, 4], StarSystem("Kor-Azor", 0.8))
    graph.register_node(4, [3, 7], StarSystem("Ashab", 0.7))
    graph.register_node(5, [1, 6], StarSystem("Youl", 0.1))
    graph.register_node(6, [5, 7], StarSystem("Tama", 0.2))
    graph.register_node(7, [4, 6], StarSystem("Jita", 0.9))
    graph.register_node(8, [], StarSystem("Thera", 0.5))
    return graph


@pytest.fixture
def chain_graph() -> NodeSet[None]:
    """
    Fixture providing an undirected chain 1-2-3-4 with a shortcut 1-4
    and an isolated node 5.
    """
    graph: NodeSet[None] = NodeSet.create(5)
    graph.register_node(1, [2, 4])
    graph.register_node(2, [1, 3])
    graph.register_node(3, [2, 4])
    graph.register_node(4, [3, 1])
    graph.register_node(5, [])
    return graph


@pytest.fixture
def diamond_graph() -> NodeSet[None]:
    """
    Fixture providing an undirected diamond:

      1
     / \\
    2   3
     \\ /
      4

    Node 4 lists 3 before 2.
    """
    graph: NodeSet[None] = NodeSet.create(4)
    graph.register_node(1, [2, 3])
    graph.register_node(2, [1, 4])
    graph.register_node(3, [1, 4])
    graph.register_node(4, [3, 2])
    return graph


@pytest.fixture
def directed_chain() -> NodeSet[None]:
    """Fixture providing a one-way chain 1 -> 2 -> 3 without reverse adjacency."""
    graph: NodeSet[None] = NodeSet.create(3)
    graph.register_node(1, [2])
    graph.register_node(2, [3])
    graph.register_node(3, [])
    return graph


@pytest.fixture
def security_weight_func():
    """Fixture providing a weight function that avoids lawless systems."""
    return security_weight
