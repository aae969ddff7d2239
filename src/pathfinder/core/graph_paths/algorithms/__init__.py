"""Route solver implementations."""

from .fast import FastPathFinder
from .weighted import WeightedPathFinder

__all__ = [
    "FastPathFinder",
    "WeightedPathFinder",
]
