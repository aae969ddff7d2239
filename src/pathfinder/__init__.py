"""
Pathfinder - Route solving over caller-supplied graphs

This package finds routes between nodes of a graph of integer-identified
nodes and their adjacency lists. It includes:

- A graph store keyed by node id, carrying an opaque payload per node
- A fast breadth-first solver with a pluggable node admission predicate
- A weighted solver with a pluggable edge weight function that can veto edges

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "Pathfinder Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Pathfinder requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import InvalidEdgeError, NoPathFoundError
from .core.graph import NodeSet
from .core.graph_paths import (
    PathFinding,
    PathResult,
    PathType,
    check_all,
    create_graph,
    solve_unweighted,
    solve_weighted,
    weight_connections,
)
from .core.models import Node

__all__ = [
    "InvalidEdgeError",
    "Node",
    "NodeSet",
    "NoPathFoundError",
    "PathFinding",
    "PathResult",
    "PathType",
    "check_all",
    "create_graph",
    "solve_unweighted",
    "solve_weighted",
    "weight_connections",
]
