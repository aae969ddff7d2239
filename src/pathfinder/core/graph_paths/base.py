from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Iterator, Optional

from ..types import GraphProtocol
from .models import PathResult, PerformanceMetrics
from .utils import MemoryManager


class PathFinder[T: PathResult](ABC):
    """Abstract base class for route solvers."""

    operation = "path"

    def __init__(self, graph: GraphProtocol, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and optional memory limit."""
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb)
        self.metrics: Optional[PerformanceMetrics] = None

    @abstractmethod
    def find_path(self, start_node: int, end_node: int, *args, **kwargs) -> T:
        """
        Find a route between nodes.

        Raises:
            NoPathFoundError: If no route exists
        """
        pass

    @contextmanager
    def _search_context(self) -> Iterator[PerformanceMetrics]:
        """Record metrics for one search, whether it succeeds or not."""
        self.memory_manager.reset_peak_memory()
        metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        self.metrics = metrics
        try:
            yield metrics
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = self.memory_manager.peak_memory
