"""Define handles to the ROS services solving inverse kinematics for the grasp filter."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

import rospy
from grasp_selection.srv import SolveIK, SolveIKRequest
from moveit_msgs.srv import GetPositionIK, GetPositionIKRequest

from grasp_reachability.ik import (
    ClosedFormIKRequest,
    ClosedFormIKResponse,
    IKBackend,
    JointSpaceIKRequest,
    JointSpaceIKResponse,
)
from grasp_reachability.ros.msg_conversion import pose_to_msg, pose_to_stamped_msg

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")

MOVEIT_IK_SERVICE = "/compute_ik"
IKFAST_IK_SERVICE = "/ikfast_solver"


class RosIKService(Generic[RequestT, ResponseT]):
    """A handle to a ROS service that converts requests and responses to and from messages."""

    def __init__(
        self,
        name: str,
        service_type: type,
        request_to_msg: Callable[[RequestT], Any],
        response_from_msg: Callable[[Any], ResponseT],
    ) -> None:
        """Initialize a proxy for the named service.

        :param name: Name of the ROS service
        :param service_type: Type of the ROS service (e.g., moveit_msgs/GetPositionIK)
        :param request_to_msg: Converts a backend-neutral request into a request message
        :param response_from_msg: Converts a response message into a backend-neutral response
        """
        self.name = name
        self._proxy = rospy.ServiceProxy(name, service_type)
        self._request_to_msg = request_to_msg
        self._response_from_msg = response_from_msg

    def exists(self) -> bool:
        """Evaluate whether the service is currently advertised."""
        try:
            rospy.wait_for_service(self.name, timeout=0.1)
        except rospy.ROSException:
            return False
        return True

    def __call__(self, request: RequestT) -> ResponseT:
        """Call the service and convert its response."""
        response_msg = self._proxy(self._request_to_msg(request))
        return self._response_from_msg(response_msg)


def joint_space_request_to_msg(request: JointSpaceIKRequest) -> GetPositionIKRequest:
    """Convert a joint-space IK request into a moveit_msgs/GetPositionIK request."""
    msg = GetPositionIKRequest()
    msg.ik_request.group_name = request.group_name
    msg.ik_request.ik_link_name = request.link_name
    msg.ik_request.pose_stamped = pose_to_stamped_msg(request.pose)
    msg.ik_request.timeout = rospy.Duration.from_sec(request.timeout_s)
    msg.ik_request.avoid_collisions = False
    if hasattr(msg.ik_request, "attempts"):  # Field was removed in later MoveIt releases
        msg.ik_request.attempts = request.attempts
    return msg


def joint_space_response_from_msg(msg: Any) -> JointSpaceIKResponse:
    """Convert a moveit_msgs/GetPositionIK response into a joint-space IK response."""
    return JointSpaceIKResponse(
        error_code=msg.error_code.val,
        joint_positions=tuple(msg.solution.joint_state.position),
    )


def closed_form_request_to_msg(request: ClosedFormIKRequest) -> SolveIKRequest:
    """Convert a closed-form IK request into a grasp_selection/SolveIK request."""
    msg = SolveIKRequest()
    msg.target_pose = pose_to_msg(request.pose)
    return msg


def closed_form_response_from_msg(msg: Any) -> ClosedFormIKResponse:
    """Convert a grasp_selection/SolveIK response into a closed-form IK response."""
    return ClosedFormIKResponse(success=bool(msg.success), joint_positions=tuple(msg.solution))


def create_ros_ik_service(backend: IKBackend) -> RosIKService:
    """Create the handle to the ROS service of the given IK backend."""
    if backend == IKBackend.JOINT_SPACE:
        return RosIKService(
            MOVEIT_IK_SERVICE,
            GetPositionIK,
            joint_space_request_to_msg,
            joint_space_response_from_msg,
        )
    if backend == IKBackend.CLOSED_FORM:
        return RosIKService(
            IKFAST_IK_SERVICE,
            SolveIK,
            closed_form_request_to_msg,
            closed_form_response_from_msg,
        )

    raise ValueError(f"Unrecognized IK backend: {backend}")
