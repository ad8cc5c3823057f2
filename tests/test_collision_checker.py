"""Unit tests for the swept-cylinder collision test against pointclouds."""

import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given

from grasp_reachability.grasps import GraspFrame
from grasp_reachability.perception import Pointcloud
from grasp_reachability.reachability import (
    CylinderCollisionChecker,
    SweptCylinder,
    is_collision_free,
)
from grasp_reachability.reachability.collision_checker import SCAN_CHUNK_SIZE

from .strategies.grasp_strategies import centers, grasp_frames

# With the pre-grasp position at the origin and approach +z, the checked region spans
# z in (-0.055, 0) within a radius of 0.06 m of the z-axis.
POSITION = np.zeros(3)
APPROACH = np.array([0.0, 0.0, 1.0])
INSIDE_POINT = [0.01, -0.02, -0.02]


@given(grasp_frames(), st.integers(min_value=0, max_value=100))
def test_empty_cloud_is_collision_free(frame: GraspFrame, max_colliding_points: int) -> None:
    """Verify that no grasp collides with an empty pointcloud."""
    # Arrange/Act - Check the grasp against a pointcloud without any points
    cloud = Pointcloud.empty()
    result = is_collision_free(frame.center, frame.approach, cloud, max_colliding_points)

    # Assert - Expect the grasp to be collision-free
    assert result


@pytest.mark.parametrize(
    ("point", "expected_inside"),
    [
        (INSIDE_POINT, True),
        ([0.0, 0.0, -0.054], True),
        ([0.0, 0.0, -0.08], False),  # Beyond the supporting plane
        ([0.0, 0.0, 0.01], False),  # Above the upper cap
        ([0.07, 0.0, -0.02], False),  # Outside the radius
        ([0.0, 0.059, -0.02], True),
    ],
)
def test_swept_cylinder_contains(point: list[float], expected_inside: bool) -> None:
    """Verify which points are considered inside the swept cylinder."""
    # Arrange - Construct the cylinder swept by a grasp approaching along +z
    cylinder = SweptCylinder.from_grasp(POSITION, APPROACH)

    # Act - Evaluate whether the point lies inside
    mask = cylinder.contains(np.array([point]))

    # Assert - Expect the mask to match the expected result
    assert mask.tolist() == [expected_inside]


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=50))
def test_collision_threshold_boundary(num_inside: int, num_outside: int) -> None:
    """Verify that a grasp collides exactly when more than the tolerated points are inside."""
    # Arrange - Create a pointcloud with a known number of points inside the cylinder
    inside = np.tile(INSIDE_POINT, (num_inside, 1))
    outside = np.tile([1.0, 1.0, 1.0], (num_outside, 1))
    cloud = Pointcloud(np.vstack([inside, outside]))

    # Act/Assert - A count equal to the maximum is collision-free; one point fewer tolerated isn't
    assert is_collision_free(POSITION, APPROACH, cloud, max_colliding_points=num_inside)
    if num_inside > 0:
        assert not is_collision_free(POSITION, APPROACH, cloud, max_colliding_points=num_inside - 1)


@given(centers())
def test_collision_free_when_points_are_behind_grasp(offset: np.ndarray) -> None:
    """Verify that points behind the pre-grasp position never collide."""
    # Arrange - Place points above the upper cap of the cylinder
    points = np.abs(offset) + np.array([0.0, 0.0, 0.001])
    cloud = Pointcloud(points.reshape(1, 3))

    # Act/Assert - Expect the grasp to be collision-free even with zero tolerance
    assert is_collision_free(POSITION, APPROACH, cloud, max_colliding_points=0)


def test_collision_scan_exits_early(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that the scan stops once the colliding points exceed the tolerated maximum."""
    # Arrange - Fill several scan chunks with colliding points and count evaluated chunks
    cloud = Pointcloud(np.tile(INSIDE_POINT, (3 * SCAN_CHUNK_SIZE, 1)))
    num_chunks = []
    original_contains = SweptCylinder.contains

    def counting_contains(self: SweptCylinder, points: np.ndarray) -> np.ndarray:
        num_chunks.append(len(points))
        return original_contains(self, points)

    monkeypatch.setattr(SweptCylinder, "contains", counting_contains)

    # Act - Check for collisions with zero tolerated points
    result = is_collision_free(POSITION, APPROACH, cloud, max_colliding_points=0)

    # Assert - Expect a collision found within the first chunk
    assert not result
    assert num_chunks == [SCAN_CHUNK_SIZE]


def test_collision_checker_uses_configured_threshold() -> None:
    """Verify that the collision checker applies its tolerated number of colliding points."""
    # Arrange - Two points lie inside the cylinder
    cloud = Pointcloud(np.array([INSIDE_POINT, INSIDE_POINT]))

    # Act/Assert - Tolerating two points is collision-free, tolerating one is not
    assert CylinderCollisionChecker(2).is_collision_free(POSITION, APPROACH, cloud)
    assert not CylinderCollisionChecker(1).is_collision_free(POSITION, APPROACH, cloud)


def test_collision_checker_rejects_negative_threshold() -> None:
    """Verify that a negative number of tolerated colliding points raises a ValueError."""
    with pytest.raises(ValueError, match="colliding points"):
        CylinderCollisionChecker(-1)
