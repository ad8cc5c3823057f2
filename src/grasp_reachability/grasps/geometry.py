"""Define functions that enumerate the hand poses reachable from a grasp candidate.

Given a grasp frame, these functions rotate the frame about its binormal, derive the two hand
orientations (the hand can close on a grasp from either rotational side), and build the pre-grasp
pose at which inverse kinematics is solved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np
from pyquaternion import Quaternion as Q

from grasp_reachability.grasps.grasp_frame import GraspFrame
from grasp_reachability.kinematics import Point3D, Pose3D, Quaternion

if TYPE_CHECKING:
    from numpy.typing import NDArray

AxisOrder = Tuple[int, int, int]
"""Physical hand columns receiving the (approach, axis, binormal) columns, in that order."""

MIN_GRASP_ANGLE_DEG = -15.0
MAX_GRASP_ANGLE_DEG = 15.0


def sample_grasp_angles(num_additional_grasps: int) -> NDArray[np.float64]:
    """Sample the angles (degrees) by which each grasp is rotated about its binormal.

    :param num_additional_grasps: Number of grasps generated in addition to the original one
    :return: [0.0] if no additional grasps are requested, else (k + 1) angles evenly spaced
        over the closed interval [-15, 15] degrees, in increasing order
    """
    if num_additional_grasps < 0:
        raise ValueError(f"Cannot generate {num_additional_grasps} additional grasps.")
    if num_additional_grasps == 0:
        return np.array([0.0])
    return np.linspace(MIN_GRASP_ANGLE_DEG, MAX_GRASP_ANGLE_DEG, num_additional_grasps + 1)


def rotate_grasp_frame(frame: GraspFrame, theta_deg: float) -> GraspFrame:
    """Rotate the hand axis and the outward approach direction about the frame's binormal.

    The approach vector of the result points away from the object (the negated input approach
    is rotated). The binormal is recomputed as (axis x approach) to keep the frame orthonormal.

    :param frame: Grasp frame to be rotated
    :param theta_deg: Rotation angle (degrees)
    :return: Rotated grasp frame with the same center
    """
    rotation = Q(axis=frame.binormal, radians=np.deg2rad(theta_deg))
    axis = rotation.rotate(frame.axis)
    approach = rotation.rotate(-1.0 * frame.approach)

    return GraspFrame(
        center=frame.center,
        approach=approach,
        axis=axis,
        binormal=np.cross(axis, approach),
    )


def reorder_hand_axes(matrix: NDArray[np.float64], axis_order: AxisOrder) -> NDArray[np.float64]:
    """Reorder the columns of a hand rotation matrix to match the axes of the robot hand.

    :param matrix: Rotation matrix with columns (approach, axis, binormal)
    :param axis_order: Permutation of (0, 1, 2); column i of the input becomes column axis_order[i]
    :return: Rotation matrix with its columns reordered
    """
    if sorted(axis_order) != [0, 1, 2]:
        raise ValueError(f"Hand axis order must be a permutation of (0, 1, 2), got {axis_order}.")

    reordered = np.zeros((3, 3))
    reordered[:, list(axis_order)] = matrix
    return reordered


def compute_hand_orientations(
    frame: GraspFrame,
    axis_order: AxisOrder,
) -> tuple[Quaternion, Quaternion]:
    """Compute the two hand orientations that can execute the given grasp frame.

    The second orientation is obtained by rotating the frame's approach and axis vectors by
    180 degrees about the approach vector.

    :param frame: (Rotated) grasp frame
    :param axis_order: Mapping from (approach, axis, binormal) to the hand's physical axes
    :return: Pair of unit quaternions (orientation A, orientation B)
    """
    r_matrix = np.zeros((3, 3))
    r_matrix[:, 0] = -1.0 * frame.approach
    r_matrix[:, 1] = frame.axis
    r_matrix[:, 2] = np.cross(r_matrix[:, 0], r_matrix[:, 1])

    flip = Q(axis=frame.approach, radians=np.pi)
    q_matrix = np.zeros((3, 3))
    q_matrix[:, 0] = flip.rotate(frame.approach)
    q_matrix[:, 1] = flip.rotate(frame.axis)
    q_matrix[:, 2] = np.cross(q_matrix[:, 0], q_matrix[:, 1])

    orientations = []
    for matrix in (r_matrix, q_matrix):
        quat = Quaternion.from_rotation_matrix(reorder_hand_axes(matrix, axis_order))
        quat.normalize()  # Absorb numerical drift from the matrix conversion
        orientations.append(quat)

    return orientations[0], orientations[1]


def build_grasp_pose(
    frame: GraspFrame,
    orientation: Quaternion,
    hand_offset: float,
    planning_frame: str,
) -> Pose3D:
    """Build the pre-grasp pose of the hand for the given frame and orientation.

    :param frame: (Rotated) grasp frame
    :param orientation: Hand orientation at the pose
    :param hand_offset: Standoff distance (meters) along the negative approach direction
    :param planning_frame: Reference frame in which the pose is expressed
    :return: Pose at which the inverse kinematics problem is solved
    """
    position = frame.center - hand_offset * frame.approach
    return Pose3D(Point3D.from_array(position), orientation, planning_frame)
