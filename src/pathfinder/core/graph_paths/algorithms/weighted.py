"""
Weighted route solver.

This solver uses a weight function instead of a connection count, so it has to
look at more nodes before it is sure of its result. In exchange it can solve
routes the fast solver cannot, such as reaching a distant node when the
intermediate nodes are very low priority.

Weight functions must not return very large numbers: any cost, or any route
cost, that reaches MAX_COST aborts the search with CostOverflowError.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Tuple

from ...exceptions import InvalidEdgeError, NoPathFoundError
from ...models import Connection
from ..base import PathFinder
from ..models import PathResult, PerformanceMetrics
from ..types import PathType, WeightFunc, weight_connections
from ..utils import MAX_COST, accumulate_cost, check_cost

logger = logging.getLogger(__name__)


class WeightedPathFinder(PathFinder[PathResult]):
    """
    Label-correcting relaxation driven by a vetoable weight function.

    Nodes are expanded in FIFO order rather than by cost. A node whose best
    known cost improves is queued again, so the search behaves like a bounded
    Bellman-Ford and converges on the cheapest route for non-negative costs.
    A queued entry whose node has since been improved from another parent is
    dropped, so every expansion uses the context its cost was reached in.
    The best cost found for the target so far prunes every candidate that
    cannot beat it. The target itself is never expanded.

    The weight function receives the node visited before the current one, so
    costs may depend on the two preceding hops. Raising InvalidEdgeError vetoes
    the edge in that context only; any other exception aborts the search and
    reaches the caller unchanged.
    """

    operation = "weighted_route"

    def find_path(
        self, start_node: int, end_node: int, weight_func: WeightFunc = weight_connections
    ) -> PathResult:
        """
        Find the cheapest route between two nodes.

        Args:
            start_node: Node to start from
            end_node: Node to reach
            weight_func: Called as ``weight_func(graph, previous, current,
                candidate)``; returns a non-negative cost or raises
                InvalidEdgeError

        Returns:
            PathResult from start_node to end_node inclusive, with its cost

        Raises:
            NoPathFoundError: If no route of valid edges reaches end_node
            NegativeWeightError: If the weight function returns a negative cost
            CostOverflowError: If a cost reaches MAX_COST
        """
        with self._search_context() as metrics:
            if start_node == end_node:
                metrics.path_length = 1
                return PathResult([start_node], 0.0, PathType.WEIGHTED)

            logger.debug(f"Starting weighted route search from {start_node} to {end_node}")
            costs, parents = self._relax(start_node, end_node, weight_func, metrics)
            if end_node not in costs:
                logger.debug(
                    f"Weighted route search exhausted after {metrics.nodes_explored} nodes"
                )
                raise NoPathFoundError(start_node, end_node)

            path = self._walk_back(start_node, end_node, parents)
            metrics.path_length = len(path)
            logger.debug(f"Route to {end_node} costs {costs[end_node]} over {len(path) - 1} hops")
            return PathResult(path, costs[end_node], PathType.WEIGHTED)

    def _relax(
        self,
        start_node: int,
        end_node: int,
        weight_func: WeightFunc,
        metrics: PerformanceMetrics,
    ) -> Tuple[Dict[int, float], Dict[int, int]]:
        """Relax edges until no cost improves, returning best costs and parent links."""
        costs: Dict[int, float] = {start_node: 0.0}
        parents: Dict[int, int] = {}
        top = MAX_COST
        queue: Deque[Connection] = deque([Connection(start_node)])
        relaxations = 0

        while queue:
            self.memory_manager.check_memory()
            current = queue.popleft()

            # Superseded entries would pair the best cost with a stale previous node
            if current.parent != parents.get(current.to):
                continue

            metrics.nodes_explored += 1
            current_cost = costs[current.to]

            for candidate in self.graph.get_neighbors(current.to):
                metrics.callback_calls += 1
                try:
                    local_cost = weight_func(self.graph, current.parent, current.to, candidate)
                except InvalidEdgeError:
                    continue

                local_cost = check_cost(local_cost, current.parent, current.to, candidate)
                new_cost = accumulate_cost(current_cost, local_cost)

                # Nothing above the best route to the target can beat it
                if new_cost > top:
                    continue

                known = costs.get(candidate)
                if known is not None and new_cost >= known:
                    continue

                costs[candidate] = new_cost
                parents[candidate] = current.to
                relaxations += 1

                if candidate == end_node:
                    # Cheaper routes may still be pending in the queue
                    top = new_cost
                    continue

                queue.append(Connection(candidate, current.to))

        metrics.extra["relaxations"] = relaxations
        return costs, parents

    def _walk_back(self, start_node: int, end_node: int, parents: Dict[int, int]) -> List[int]:
        """Follow parent links from the target back to the start node."""
        path = [end_node]
        walk = end_node

        # A chain longer than the number of labelled nodes is a cycle
        for _ in range(len(parents)):
            if walk == start_node:
                break
            walk = parents[walk]
            path.append(walk)

        if walk != start_node:
            logger.warning(
                f"Parent chain from {end_node} does not lead back to {start_node}"
            )
            raise NoPathFoundError(
                start_node,
                end_node,
                f"Route between {start_node} and {end_node} cannot be walked back "
                f"from node {walk}",
            )

        path.reverse()
        return path
