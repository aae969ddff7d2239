"""
Tests for route results and search metrics.
"""

import pytest

from pathfinder.core.exceptions import ValidationError
from pathfinder.core.graph_paths.models import PathResult, PerformanceMetrics
from pathfinder.core.graph_paths.types import PathType


def test_path_result_accessors():
    """Test PathResult properties and sequence behavior."""
    result = PathResult(nodes=[1, 2, 3], total_weight=2.0, path_type=PathType.WEIGHTED)

    assert len(result) == 3
    assert result.hops == 2
    assert result.start == 1
    assert result.end == 3
    assert result[1] == 2
    assert list(result) == [1, 2, 3]


def test_path_result_validation(chain_graph):
    """Test route validation against the graph."""
    PathResult(nodes=[1, 2, 3], total_weight=2.0).validate(chain_graph)
    PathResult(nodes=[5], total_weight=0.0).validate(chain_graph)

    with pytest.raises(ValidationError, match="Edge from 1 to 3 not found in graph"):
        PathResult(nodes=[1, 3], total_weight=1.0).validate(chain_graph)


def test_path_result_rejects_bad_input():
    """Test PathResult initialization checks."""
    with pytest.raises(ValueError, match="nodes cannot be empty"):
        PathResult(nodes=[], total_weight=0.0)
    with pytest.raises(TypeError, match="nodes must be a list"):
        PathResult(nodes=(1, 2), total_weight=1.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="total_weight must be a numeric value"):
        PathResult(nodes=[1], total_weight="0")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="path_type must be a PathType enum"):
        PathResult(nodes=[1], total_weight=0.0, path_type="fast")  # type: ignore[arg-type]


def test_path_result_is_frozen():
    """Test that results cannot be reassigned after return."""
    result = PathResult(nodes=[1], total_weight=0.0)
    with pytest.raises(AttributeError):
        result.total_weight = 5.0  # type: ignore[misc]


def test_performance_metrics():
    """Test metrics duration and serialization."""
    metrics = PerformanceMetrics(operation="fast_route", start_time=10.0)
    assert metrics.duration == 0.0

    metrics.end_time = 10.25
    metrics.nodes_explored = 12
    metrics.extra["relaxations"] = 3
    data = metrics.to_dict()

    assert data["duration_ms"] == pytest.approx(250.0)
    assert data["nodes_explored"] == 12
    assert data["relaxations"] == 3


def test_performance_metrics_validation():
    """Test metrics initialization checks."""
    with pytest.raises(ValueError, match="operation must be a non-empty string"):
        PerformanceMetrics(operation=" ", start_time=0.0)
    with pytest.raises(TypeError, match="start_time must be a numeric value"):
        PerformanceMetrics(operation="fast_route", start_time="now")  # type: ignore[arg-type]
