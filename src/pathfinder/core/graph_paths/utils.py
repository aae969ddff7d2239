"""
Utility functions for route solving.
"""

import gc
import logging
import math
import os
import sys
import time
from typing import Any, Optional

import psutil

from ..exceptions import CostOverflowError, NegativeWeightError

# Configure logging
logger = logging.getLogger(__name__)

# Constants
MAX_COST = sys.float_info.max  # Open upper bound, never a valid cost
COST_EXCEEDED_MSG = "Path cost exceeded maximum value"


def check_cost(cost: Any, previous: int, current: int, to: int) -> float:
    """
    Validate a cost returned by a weight function.

    Zero is a valid cost. Negative costs are unsupported, and a cost at or
    beyond MAX_COST would be indistinguishable from the open upper bound.

    Returns:
        The cost as a float

    Raises:
        TypeError: If the cost is not numeric
        NegativeWeightError: If the cost is negative
        CostOverflowError: If the cost is not finite or reaches MAX_COST
    """
    if isinstance(cost, bool) or not isinstance(cost, (int, float)):
        raise TypeError(
            f"Weight of edge {current} -> {to} must be numeric, got {type(cost).__name__}"
        )

    cost = float(cost)
    if math.isnan(cost) or math.isinf(cost) or cost >= MAX_COST:
        raise CostOverflowError(f"{COST_EXCEEDED_MSG} on edge {current} -> {to} (from {previous})")
    if cost < 0:
        raise NegativeWeightError(f"Negative weight {cost} found on edge {current} -> {to}")
    return cost


def accumulate_cost(total: float, cost: float) -> float:
    """Add an edge cost to a route cost, refusing to reach MAX_COST."""
    new_total = total + cost
    if math.isinf(new_total) or new_total >= MAX_COST:
        raise CostOverflowError(COST_EXCEEDED_MSG)
    return new_total


class MemoryManager:
    """Memory ceiling for long running searches."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
