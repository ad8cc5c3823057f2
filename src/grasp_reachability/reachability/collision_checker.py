"""Define a collision test between a grasp's swept volume and a pointcloud.

The hand's final approach is approximated by a cylinder whose axis runs from the pre-grasp
position back along the approach direction. A grasp collides if too many pointcloud points lie
inside the half of that cylinder nearer to the pre-grasp position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from grasp_reachability.perception import Pointcloud

CYLINDER_RADIUS_M = 0.06
CYLINDER_LENGTH_M = 0.1
PLANE_OFFSET_M = 0.005
"""Shifts the supporting plane toward the lower cap to ignore noisy points on object sides."""

SCAN_CHUNK_SIZE = 2048


@dataclass(frozen=True)
class SweptCylinder:
    """Cylinder approximating the volume swept by the hand during its final approach."""

    upper_cap: NDArray[np.float64]
    """Center of the cap at the pre-grasp position."""

    lower_cap: NDArray[np.float64]
    """Center of the cap reached by moving back along the approach direction."""

    approach: NDArray[np.float64]
    radius_m: float
    plane_offset_m: float

    @classmethod
    def from_grasp(
        cls,
        position: NDArray[np.float64],
        approach: NDArray[np.float64],
        radius_m: float = CYLINDER_RADIUS_M,
        length_m: float = CYLINDER_LENGTH_M,
        plane_offset_m: float = PLANE_OFFSET_M,
    ) -> SweptCylinder:
        """Construct the swept cylinder of a grasp at the given position and approach."""
        upper_cap = np.asarray(position, dtype=np.float64)
        approach = np.asarray(approach, dtype=np.float64)
        return cls(
            upper_cap=upper_cap,
            lower_cap=upper_cap - length_m * approach,
            approach=approach,
            radius_m=radius_m,
            plane_offset_m=plane_offset_m,
        )

    @property
    def midpoint(self) -> NDArray[np.float64]:
        """Compute the midpoint of the cylinder's axis."""
        return self.upper_cap + 0.5 * (self.lower_cap - self.upper_cap)

    def contains(self, points: NDArray[np.float64]) -> NDArray[np.bool_]:
        """Evaluate which of the given points lie inside the cylinder's upper half.

        :param points: Array of points of shape (N, 3)
        :return: Boolean mask of shape (N,)
        """
        center = self.midpoint
        normal = -1.0 * self.approach
        support = center - self.plane_offset_m * self.approach

        above_plane = (points - support) @ normal < 0
        below_upper_cap = (points - self.upper_cap) @ self.approach < 0
        above_lower_cap = (points - self.lower_cap) @ self.approach > 0

        offsets = points - center
        radial = offsets - np.outer(offsets @ self.approach, self.approach)
        within_radius = np.einsum("ij,ij->i", radial, radial) <= self.radius_m**2

        return above_plane & below_upper_cap & above_lower_cap & within_radius


def is_collision_free(
    position: NDArray[np.float64],
    approach: NDArray[np.float64],
    cloud: Pointcloud,
    max_colliding_points: int,
    radius_m: float = CYLINDER_RADIUS_M,
    length_m: float = CYLINDER_LENGTH_M,
    plane_offset_m: float = PLANE_OFFSET_M,
) -> bool:
    """Evaluate whether a grasp's swept cylinder is free of pointcloud points.

    The pointcloud is scanned once in chunks; the scan stops as soon as the number of points
    inside the cylinder exceeds the tolerated maximum.

    :param position: Pre-grasp position of the hand (upper cylinder cap)
    :param approach: Unit approach vector of the grasp
    :param cloud: Pointcloud of sensed obstacles in the planning frame
    :param max_colliding_points: Maximum number of points tolerated inside the cylinder
    :return: True if at most `max_colliding_points` points lie inside the cylinder, else False
    """
    cylinder = SweptCylinder.from_grasp(position, approach, radius_m, length_m, plane_offset_m)

    num_colliding = 0
    for start in range(0, len(cloud), SCAN_CHUNK_SIZE):
        chunk = cloud.points[start : start + SCAN_CHUNK_SIZE]
        num_colliding += int(np.count_nonzero(cylinder.contains(chunk)))
        if num_colliding > max_colliding_points:
            return False

    return True


class CylinderCollisionChecker:
    """Checks grasps for collisions using a fixed-size swept cylinder."""

    def __init__(
        self,
        max_colliding_points: int,
        radius_m: float = CYLINDER_RADIUS_M,
        length_m: float = CYLINDER_LENGTH_M,
        plane_offset_m: float = PLANE_OFFSET_M,
    ) -> None:
        """Initialize the checker with its tolerated number of colliding points."""
        if max_colliding_points < 0:
            raise ValueError(f"Cannot tolerate {max_colliding_points} colliding points.")

        self.max_colliding_points = max_colliding_points
        self.radius_m = radius_m
        self.length_m = length_m
        self.plane_offset_m = plane_offset_m

    def is_collision_free(
        self,
        position: NDArray[np.float64],
        approach: NDArray[np.float64],
        cloud: Pointcloud,
    ) -> bool:
        """Evaluate whether the grasp at the given position and approach is collision-free."""
        return is_collision_free(
            position,
            approach,
            cloud,
            self.max_colliding_points,
            radius_m=self.radius_m,
            length_m=self.length_m,
            plane_offset_m=self.plane_offset_m,
        )
