"""Define functions to convert between the grasp filter's data structures and ROS messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import rospy
from geometry_msgs.msg import Point, Pose, PoseStamped
from geometry_msgs.msg import Quaternion as QuaternionMsg
from sensor_msgs import point_cloud2

from grasp_reachability.grasps import GraspCandidate
from grasp_reachability.ik import extract_joint_range
from grasp_reachability.perception import Pointcloud

if TYPE_CHECKING:
    from sensor_msgs.msg import JointState, PointCloud2

    from grasp_reachability.io.config import ReachabilityConfig
    from grasp_reachability.kinematics import Point3D, Pose3D, Quaternion


def point_to_msg(point: Point3D) -> Point:
    """Convert the given point into a geometry_msgs/Point message."""
    return Point(point.x, point.y, point.z)


def quaternion_to_msg(q: Quaternion) -> QuaternionMsg:
    """Convert the given quaternion into a geometry_msgs/Quaternion message."""
    return QuaternionMsg(q.x, q.y, q.z, q.w)


def pose_to_msg(pose: Pose3D) -> Pose:
    """Convert the given pose into a geometry_msgs/Pose message."""
    return Pose(point_to_msg(pose.position), quaternion_to_msg(pose.orientation))


def pose_to_stamped_msg(pose: Pose3D) -> PoseStamped:
    """Convert the given pose into a geometry_msgs/PoseStamped message stamped with now."""
    msg = PoseStamped()
    msg.header.stamp = rospy.Time.now()
    msg.header.frame_id = pose.ref_frame
    msg.pose = pose_to_msg(pose)
    return msg


def grasp_candidate_from_msg(grasp_msg) -> GraspCandidate:
    """Construct a GraspCandidate from an agile_grasp/Grasp message.

    The message carries no binormal, so it is computed from the approach and axis vectors.
    """

    def to_list(vector_msg) -> list[float]:
        return [vector_msg.x, vector_msg.y, vector_msg.z]

    return GraspCandidate.from_vectors(
        center=to_list(grasp_msg.center),
        surface_center=to_list(grasp_msg.surface_center),
        approach=to_list(grasp_msg.approach),
        axis=to_list(grasp_msg.axis),
        width=grasp_msg.width.data,
    )


def pointcloud_from_msg(cloud_msg: PointCloud2) -> Pointcloud:
    """Construct a Pointcloud from a sensor_msgs/PointCloud2 message, skipping invalid points."""
    xyz = list(point_cloud2.read_points(cloud_msg, field_names=("x", "y", "z")))
    if not xyz:
        return Pointcloud.empty()
    return Pointcloud(np.array(xyz, dtype=np.float64)).remove_invalid_points()


def arm_joints_from_joint_state_msg(
    joint_state: JointState,
    config: ReachabilityConfig,
) -> tuple[float, ...]:
    """Extract the arm's joint positions from a sensor_msgs/JointState of the full robot."""
    first, last = config.joint_state_indices
    return extract_joint_range(joint_state.position, first, last)
