"""
Data models for route solving.

This module provides the data structures returned and recorded by the solvers:
- PathResult: Ordered node ids of a solved route, with its cost
- PerformanceMetrics: Counters and timings of one search

Example:
    >>> result = PathResult(nodes=[1, 2, 3], total_weight=2.0)
    >>> result.validate(graph)  # Ensures every hop is an edge of the graph
    >>> result.hops
    2
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ..exceptions import ValidationError
from ..types import GraphProtocol
from .types import PathType


@dataclass(frozen=True)
class PathResult:
    """
    Container for a solved route.

    Attributes:
        nodes: Node ids from the start node to the end node, both included
        total_weight: Hop count for the fast solver, accumulated cost for the
            weighted solver
        path_type: Solver that produced the route

    Example:
        >>> result = PathFinding.weighted_route(graph, 1, 4)
        >>> print(f"{result.start} -> {result.end} in {result.hops} jumps")
    """

    nodes: List[int]
    total_weight: float
    path_type: PathType = PathType.FAST

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.nodes, list):
            raise TypeError("nodes must be a list")

        if not self.nodes:
            raise ValueError("nodes cannot be empty")

        if isinstance(self.total_weight, bool) or not isinstance(self.total_weight, (int, float)):
            raise TypeError("total_weight must be a numeric value")

        if not isinstance(self.path_type, PathType):
            raise TypeError("path_type must be a PathType enum")

    def __len__(self) -> int:
        """Return the number of nodes in the route."""
        return len(self.nodes)

    def __getitem__(self, index: int) -> int:
        """Get a node id from the route by index."""
        return self.nodes[index]

    def __iter__(self) -> Iterator[int]:
        """Return an iterator over the route's node ids."""
        return iter(self.nodes)

    @property
    def start(self) -> int:
        return self.nodes[0]

    @property
    def end(self) -> int:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges travelled."""
        return len(self.nodes) - 1

    def validate(self, graph: GraphProtocol) -> None:
        """
        Validate the route against a graph.

        Checks that every consecutive pair of nodes is an edge of the graph.

        Args:
            graph: The graph the route was solved on

        Raises:
            ValidationError: If a hop is not an edge of the graph
        """
        for current, following in zip(self.nodes, self.nodes[1:]):
            if not graph.has_edge(current, following):
                raise ValidationError(f"Edge from {current} to {following} not found in graph")


@dataclass
class PerformanceMetrics:
    """
    Container for the counters of one search.

    Attributes:
        operation: Name of the solver
        start_time: Search start timestamp
        end_time: Search end timestamp (0.0 if not completed)
        nodes_explored: Number of queue entries expanded
        callback_calls: Number of admission or weight callback invocations
        path_length: Number of nodes in the returned route, if any
        max_memory_used: Peak resident memory during the search (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0
    callback_calls: int = 0
    path_length: Optional[int] = None
    max_memory_used: Optional[int] = None
    extra: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

    @property
    def duration(self) -> float:
        """Search duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        result: Dict[str, Union[str, float, int, None]] = {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
            "callback_calls": self.callback_calls,
            "path_length": self.path_length,
            "max_memory_used": self.max_memory_used,
        }
        result.update(self.extra)
        return result
