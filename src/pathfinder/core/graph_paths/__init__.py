"""Graph route solving functionality."""

from typing import Any, List, Optional

from ..graph import DEFAULT_CAPACITY_HINT, NodeSet
from ..types import GraphProtocol
from .algorithms.fast import FastPathFinder
from .algorithms.weighted import WeightedPathFinder
from .base import PathFinder
from .models import PathResult, PerformanceMetrics
from .types import (
    AdmitFunc,
    PathType,
    WeightFunc,
    check_all,
    prune_nodes,
    reject_nodes,
    weight_connections,
)
from .utils import MAX_COST

__all__ = [
    "AdmitFunc",
    "FastPathFinder",
    "MAX_COST",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PerformanceMetrics",
    "WeightFunc",
    "WeightedPathFinder",
    "check_all",
    "create_graph",
    "prune_nodes",
    "reject_nodes",
    "solve_unweighted",
    "solve_weighted",
    "weight_connections",
]


class PathFinding:
    """Static interface for route solving operations."""

    @staticmethod
    def fast_route(
        graph: GraphProtocol,
        start_node: int,
        end_node: int,
        check: AdmitFunc = check_all,
        max_memory_mb: Optional[float] = None,
    ) -> PathResult:
        """Find the route with the fewest hops through admitted nodes."""
        finder = FastPathFinder(graph, max_memory_mb=max_memory_mb)
        return finder.find_path(start_node, end_node, check)

    @staticmethod
    def weighted_route(
        graph: GraphProtocol,
        start_node: int,
        end_node: int,
        weight_func: WeightFunc = weight_connections,
        max_memory_mb: Optional[float] = None,
    ) -> PathResult:
        """Find the cheapest route under a weight function."""
        finder = WeightedPathFinder(graph, max_memory_mb=max_memory_mb)
        return finder.find_path(start_node, end_node, weight_func)

    @classmethod
    def find_path(
        cls,
        graph: GraphProtocol,
        start_node: int,
        end_node: int,
        path_type: PathType = PathType.FAST,
        callback: Optional[Any] = None,
        **kwargs,
    ) -> PathResult:
        """
        Generic route solving interface.

        Args:
            graph: Graph to search
            start_node: Node to start from
            end_node: Node to reach
            path_type: Solver to use
            callback: Admission predicate for PathType.FAST, weight function
                for PathType.WEIGHTED. Defaults to the matching standard
                callback.
            **kwargs: Finder options such as max_memory_mb

        Raises:
            NoPathFoundError: If no route exists
        """
        if path_type == PathType.FAST:
            return cls.fast_route(graph, start_node, end_node, callback or check_all, **kwargs)
        if path_type == PathType.WEIGHTED:
            return cls.weighted_route(
                graph, start_node, end_node, callback or weight_connections, **kwargs
            )
        raise ValueError(f"Unsupported path type: {path_type}")


def create_graph(capacity_hint: int = DEFAULT_CAPACITY_HINT) -> NodeSet[Any]:
    """Create an empty graph."""
    return NodeSet.create(capacity_hint)


def solve_unweighted(
    graph: GraphProtocol, start_node: int, end_node: int, check: AdmitFunc = check_all
) -> List[int]:
    """
    Solve a route with the fast solver and return its node ids.

    Raises:
        NoPathFoundError: If no route exists
    """
    return PathFinding.fast_route(graph, start_node, end_node, check).nodes


def solve_weighted(
    graph: GraphProtocol,
    start_node: int,
    end_node: int,
    weight_func: WeightFunc = weight_connections,
) -> List[int]:
    """
    Solve a route with the weighted solver and return its node ids.

    Raises:
        NoPathFoundError: If no route exists
        Exception: Whatever the weight function raised, other than
            InvalidEdgeError
    """
    return PathFinding.weighted_route(graph, start_node, end_node, weight_func).nodes
