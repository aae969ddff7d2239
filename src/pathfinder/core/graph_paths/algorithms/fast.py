"""
Breadth-first route solver.

The fast solver counts connections to the target while letting the caller
refuse nodes with an admission predicate. It cannot prioritise nodes, only
accept or refuse them, so it fails more often than the weighted solver when
nodes are filtered.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from ...exceptions import NoPathFoundError
from ...models import NO_PARENT, Connection
from ..base import PathFinder
from ..models import PathResult, PerformanceMetrics
from ..types import AdmitFunc, PathType, check_all

logger = logging.getLogger(__name__)

# Distance placeholder for nodes discovered but not dequeued yet
PENDING = -1


class FastPathFinder(PathFinder[PathResult]):
    """
    Breadth-first search with a per-node admission predicate.

    The predicate is asked about each node once, the first time the node is
    discovered. A refused node is still marked as seen so it is never asked
    about again, but it is not expanded. The returned route has the smallest
    hop count among routes made only of admitted nodes.

    Each dequeued node remembers the node it was discovered from, and the
    route is rebuilt by following those links back from the target, so
    one-way edges are walked back correctly.
    """

    operation = "fast_route"

    def find_path(
        self, start_node: int, end_node: int, check: AdmitFunc = check_all
    ) -> PathResult:
        """
        Find the route with the fewest hops between two nodes.

        Args:
            start_node: Node to start from
            end_node: Node to reach
            check: Admission predicate, must be a pure function of
                (graph, node id)

        Returns:
            PathResult from start_node to end_node inclusive

        Raises:
            NoPathFoundError: If end_node cannot be reached through admitted
                nodes
        """
        with self._search_context() as metrics:
            if start_node == end_node:
                metrics.path_length = 1
                return PathResult([start_node], 0.0, PathType.FAST)

            logger.debug(f"Starting fast route search from {start_node} to {end_node}")
            parents = self._explore(start_node, end_node, check, metrics)
            if parents is None:
                logger.debug(
                    f"Fast route search exhausted after {metrics.nodes_explored} nodes"
                )
                raise NoPathFoundError(start_node, end_node)

            path = self._walk_back(start_node, end_node, parents)
            metrics.path_length = len(path)
            return PathResult(path, float(len(path) - 1), PathType.FAST)

    def _explore(
        self,
        start_node: int,
        end_node: int,
        check: AdmitFunc,
        metrics: PerformanceMetrics,
    ) -> Optional[Dict[int, int]]:
        """Run the breadth-first search, returning parent links or None if unreached."""
        distances: Dict[int, int] = {start_node: 0}
        parents: Dict[int, int] = {}
        queue: Deque[Connection] = deque([Connection(start_node)])

        while queue:
            self.memory_manager.check_memory()
            current = queue.popleft()
            metrics.nodes_explored += 1

            if current.parent is not NO_PARENT:
                distances[current.to] = distances[current.parent] + 1
                parents[current.to] = current.parent

            # Exit as soon as the target comes out of the queue
            if current.to == end_node:
                logger.debug(f"Reached {end_node} at distance {distances[end_node]}")
                return parents

            for neighbor in self.graph.get_neighbors(current.to):
                if neighbor in distances:
                    continue

                metrics.callback_calls += 1
                if check(self.graph, neighbor):
                    queue.append(Connection(neighbor, current.to))
                # Mark refused nodes too so the predicate never sees them twice
                distances[neighbor] = PENDING

        return None

    def _walk_back(self, start_node: int, end_node: int, parents: Dict[int, int]) -> List[int]:
        """Follow discovery links from the target back to the start node."""
        path = [end_node]
        walk = end_node

        # Every hop of a breadth-first tree is a distinct dequeued node
        for _ in range(len(parents)):
            if walk == start_node:
                break
            walk = parents[walk]
            path.append(walk)

        if walk != start_node:
            logger.warning(f"Discovery chain from {end_node} does not lead back to {start_node}")
            raise NoPathFoundError(
                start_node,
                end_node,
                f"Route between {start_node} and {end_node} cannot be walked back "
                f"from node {walk}",
            )

        path.reverse()
        return path
