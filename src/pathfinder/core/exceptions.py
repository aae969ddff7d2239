"""
Custom exceptions for the path finding system.

This module defines the hierarchy of exceptions raised by the graph store and
the route solvers. Each exception type corresponds to one outcome a caller may
want to handle separately:

* ``NoPathFoundError`` is an expected, recoverable outcome of a search.
* ``InvalidEdgeError`` is raised by weight functions to veto a single edge.
* ``NegativeWeightError`` and ``CostOverflowError`` report weight functions
  that break the cost contract.

Any other exception raised from inside a caller-supplied callback is not part
of this hierarchy and reaches the caller unchanged.
"""

from typing import Optional


class ValidationError(Exception):
    """
    Raised when data validation fails.

    Examples:
        * Path result with a hop that is not an edge of the graph
        * Empty path result
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for every failure a solver reports on its own
    behalf, as opposed to errors propagated from callbacks.
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NoPathFoundError(GraphOperationError):
    """
    Raised when no valid path connects the start and end nodes.

    This covers a target that is unreachable through admitted nodes or
    non-vetoed edges, as well as a reconstruction walk that cannot get back
    to the start node.

    Attributes:
        start_node: Node the search started from
        end_node: Node the search was looking for
    """

    def __init__(
        self,
        start_node: int,
        end_node: int,
        message: Optional[str] = None,
    ):
        self.start_node = start_node
        self.end_node = end_node
        super().__init__(message or f"No path exists between {start_node} and {end_node}")


class InvalidEdgeError(Exception):
    """
    Raised by a weight function to veto one edge.

    The weighted solver skips the edge for the traversal context it was
    evaluated in and carries on. The same edge may still be used when it is
    reached with a different previous node.
    """


class NegativeWeightError(GraphOperationError):
    """Raised when a weight function returns a negative cost."""


class CostOverflowError(GraphOperationError):
    """
    Raised when a cost reaches the maximum representable value.

    Examples:
        * Weight function returned ``inf`` or ``nan``
        * Weight function returned ``MAX_COST`` itself
        * Accumulated route cost reached ``MAX_COST``
    """
