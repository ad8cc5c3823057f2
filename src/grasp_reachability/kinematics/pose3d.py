"""Define a class to represent poses in 3D space."""

from __future__ import annotations

from dataclasses import dataclass

from grasp_reachability.kinematics.kinematics_core import DEFAULT_FRAME
from grasp_reachability.kinematics.point3d import Point3D
from grasp_reachability.kinematics.rotations import Quaternion


@dataclass(frozen=True)
class Pose3D:
    """A position and orientation in 3D space, stamped with its reference frame."""

    position: Point3D
    orientation: Quaternion
    ref_frame: str = DEFAULT_FRAME

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D corresponding to the identity transformation."""
        return Pose3D(Point3D(0.0, 0.0, 0.0), Quaternion.identity(), ref_frame)
