"""Type definitions and standard callbacks for route solving."""

from enum import Enum
from typing import Any, Callable, Iterable, Optional

from ..exceptions import InvalidEdgeError
from ..types import GraphProtocol


class PathType(Enum):
    """Enumeration of route solvers."""

    FAST = "fast"  # Breadth-first, hop count only
    WEIGHTED = "weighted"  # Label-correcting relaxation over callback costs


# Type alias for admission predicates: (graph, candidate) -> admitted
AdmitFunc = Callable[[GraphProtocol, int], bool]

# Type alias for weight functions: (graph, previous, current, candidate) -> cost,
# previous is NO_PARENT while expanding the start node
WeightFunc = Callable[[GraphProtocol, Optional[int], int, int], float]


def check_all(graph: GraphProtocol, node_id: int) -> bool:
    """Admit every node. Makes the fast solver a plain breadth-first search."""
    return True


def weight_connections(
    graph: GraphProtocol, previous: Optional[int], current: int, to: int
) -> float:
    """
    Give the same weight to every edge.

    With this function the weighted solver returns routes of the same length
    as the fast solver using ``check_all``.
    """
    return 1.0


def reject_nodes(node_ids: Iterable[int]) -> AdmitFunc:
    """
    Build an admission predicate refusing the given nodes.

    Example:
        >>> check = reject_nodes([30003345, 30000895])
        >>> route = PathFinding.fast_route(graph, source, target, check)
    """
    rejected = frozenset(node_ids)

    def check(graph: GraphProtocol, node_id: int) -> bool:
        return node_id not in rejected

    return check


def prune_nodes(
    node_ids: Iterable[int], weight_func: WeightFunc = weight_connections
) -> WeightFunc:
    """
    Wrap a weight function so that every edge into the given nodes is vetoed.

    Pruned nodes can still be the start of a route, since no edge leads into
    the start node of a search.

    Args:
        node_ids: Nodes that must not be entered
        weight_func: Weight function used for every other edge

    Returns:
        Weight function raising InvalidEdgeError for pruned candidates

    Example:
        >>> weight = prune_nodes([30003345, 30000895])
        >>> route = PathFinding.weighted_route(graph, source, target, weight)
    """
    pruned = frozenset(node_ids)

    def weight(graph: GraphProtocol, previous: Optional[int], current: int, to: int) -> Any:
        if to in pruned:
            raise InvalidEdgeError(f"node {to} is pruned")
        return weight_func(graph, previous, current, to)

    weight.__name__ = f"prune_{getattr(weight_func, '__name__', 'weight')}"
    return weight
