"""Core graph functionality."""

from .exceptions import (
    CostOverflowError,
    GraphOperationError,
    InvalidEdgeError,
    NegativeWeightError,
    NoPathFoundError,
    ValidationError,
)
from .models import NO_PARENT, Connection, Node
from .types import GraphProtocol
from .graph import NodeSet

__all__ = [
    "Connection",
    "CostOverflowError",
    "GraphOperationError",
    "GraphProtocol",
    "InvalidEdgeError",
    "NO_PARENT",
    "NegativeWeightError",
    "Node",
    "NodeSet",
    "NoPathFoundError",
    "ValidationError",
]
