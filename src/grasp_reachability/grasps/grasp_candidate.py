"""Define classes representing grasp candidates and the scored grasps selected from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from grasp_reachability.kinematics import Pose3D


@dataclass(frozen=True)
class GraspCandidate:
    """A grasp proposed by perception, not yet validated for reachability.

    The approach, axis, and binormal vectors form an orthonormal frame describing the hand.
    """

    center: NDArray[np.float64]
    """Center point of the grasp of shape (3,)."""

    surface_center: NDArray[np.float64]
    """Contact point on the object surface of shape (3,); used for the workspace test."""

    approach: NDArray[np.float64]
    """Unit vector along which the hand approaches the object."""

    axis: NDArray[np.float64]
    """Unit vector along the hand axis (orthogonal to the approach vector)."""

    binormal: NDArray[np.float64]
    """Unit vector completing the grasp frame."""

    width: float
    """Aperture (meters) that the hand must open to enclose the object."""

    @classmethod
    def from_vectors(
        cls,
        center: NDArray | list[float],
        surface_center: NDArray | list[float],
        approach: NDArray | list[float],
        axis: NDArray | list[float],
        width: float,
    ) -> GraspCandidate:
        """Construct a grasp candidate whose binormal is computed as (axis x approach).

        :param center: Center point of the grasp
        :param surface_center: Contact point on the object surface
        :param approach: Unit approach vector of the grasp
        :param axis: Unit hand axis of the grasp
        :param width: Required aperture of the hand (meters)
        :return: Constructed GraspCandidate instance
        """
        approach_v = np.asarray(approach, dtype=np.float64)
        axis_v = np.asarray(axis, dtype=np.float64)
        return cls(
            center=np.asarray(center, dtype=np.float64),
            surface_center=np.asarray(surface_center, dtype=np.float64),
            approach=approach_v,
            axis=axis_v,
            binormal=np.cross(axis_v, approach_v),
            width=float(width),
        )


@dataclass(frozen=True)
class GraspScored:
    """A grasp found to be reachable by the arm and free of collisions with the point cloud."""

    candidate_index: int
    """Index of the originating candidate in the filtered batch."""

    pose: Pose3D
    """Pre-grasp pose of the hand (position and orientation) solved by inverse kinematics."""

    approach: NDArray[np.float64]
    """Approach vector of the (rotated) grasp frame used to compute the pose."""

    width: float
    """Aperture (meters) of the originating candidate."""

    joint_positions: tuple[float, ...]
    """Arm joint positions (radians) reaching the pose."""

    score: float = 0.0
    """Placeholder score; ranking is left to downstream consumers."""
