"""Unit tests for the WorkspaceBounds class."""

import numpy as np
import pytest

from grasp_reachability.perception import Pointcloud
from grasp_reachability.reachability import WorkspaceBounds


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        ([0.0, 0.0, 0.0], True),
        ([1.0, -1.0, 0.5], True),  # Limits are inclusive
        ([1.0001, 0.0, 0.0], False),
        ([0.0, -1.5, 0.0], False),
        ([0.0, 0.0, 0.6], False),
    ],
)
def test_workspace_contains(point: list[float], expected: bool) -> None:
    """Verify that points are contained by the workspace exactly when within every limit."""
    # Arrange - Construct the workspace [-1, 1] x [-1, 1] x [0, 0.5]
    workspace = WorkspaceBounds.from_sequence([-1.0, 1.0, -1.0, 1.0, 0.0, 0.5])

    # Act/Assert - Evaluate whether the workspace contains the point
    assert workspace.contains(np.array(point)) == expected


def test_workspace_rejects_inverted_limits() -> None:
    """Verify that a workspace whose minimum exceeds its maximum raises a ValueError."""
    with pytest.raises(ValueError, match="y-limits"):
        WorkspaceBounds(0.0, 1.0, 2.0, 1.0, 0.0, 1.0)


def test_workspace_from_sequence_requires_six_values() -> None:
    """Verify that constructing a workspace from the wrong number of values raises an error."""
    with pytest.raises(ValueError, match="6 values"):
        WorkspaceBounds.from_sequence([0.0, 1.0])


def test_pointcloud_rejects_wrong_shape() -> None:
    """Verify that a pointcloud must be constructed from an array of shape (N, 3)."""
    with pytest.raises(ValueError, match=r"\(N, 3\)"):
        Pointcloud(np.zeros((4, 2)))


def test_pointcloud_remove_invalid_points() -> None:
    """Verify that NaN and infinite points are removed from a pointcloud."""
    # Arrange - One valid point and two invalid points
    cloud = Pointcloud(np.array([[0.0, 0.0, 0.0], [np.nan, 0.0, 0.0], [0.0, np.inf, 1.0]]))

    # Act - Remove the invalid points
    result = cloud.remove_invalid_points()

    # Assert - Expect only the valid point to remain
    assert len(result) == 1
