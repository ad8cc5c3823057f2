"""Define clients that solve inverse kinematics (IK) for grasp poses via external services.

Two backends share the `IKClient` interface:
    - A joint-space backend calling a numeric solver (e.g., MoveIt's /compute_ik), whose
        response covers the full robot and is cut down to the arm's joints.
    - A closed-form backend (e.g., IKFast) whose response covers exactly the arm's joints.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from grasp_reachability.ik.ik_service import (
    NO_IK_SOLUTION,
    ClosedFormIKRequest,
    ClosedFormIKResponse,
    IKService,
    JointSpaceIKRequest,
    JointSpaceIKResponse,
)
from grasp_reachability.io.logging import log_info, log_warning

if TYPE_CHECKING:
    from threading import Event

    from grasp_reachability.io.config import ReachabilityConfig
    from grasp_reachability.kinematics import Pose3D


class IKBackend(Enum):
    """Inverse kinematics backends supported by the grasp filter."""

    JOINT_SPACE = "moveit"
    CLOSED_FORM = "ikfast"


class IKServiceUnavailableError(RuntimeError):
    """An error raised when an IK service does not become available in time."""


@dataclass(frozen=True)
class IKSolution:
    """Outcome of an IK query: a success flag and, if successful, the arm's joint positions."""

    success: bool
    joint_positions: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Verify that failed solutions carry no joint positions."""
        if not self.success and self.joint_positions:
            raise ValueError("A failed IK solution cannot contain joint positions.")

    @classmethod
    def failure(cls) -> IKSolution:
        """Construct an IK solution representing failure."""
        return IKSolution(success=False)


def extract_joint_range(
    joint_positions: Sequence[float],
    first: int,
    last: int,
) -> tuple[float, ...]:
    """Extract the contiguous joint positions with indices in [first, last] (inclusive)."""
    return tuple(float(q) for q in joint_positions[first : last + 1])


class IKClient(ABC):
    """An interface for solving the inverse kinematics of the arm at a target pose."""

    def __init__(self, service: IKService) -> None:
        """Initialize the client with a handle to its external IK service."""
        self._service = service

    @abstractmethod
    def solve(self, pose: Pose3D) -> IKSolution:
        """Solve for arm joint positions placing the IK link at the given pose.

        :param pose: Target pose in the planning frame
        :return: IK solution whose joints are empty if no solution was found
        """
        ...

    def wait_until_ready(
        self,
        timeout_s: float | None = None,
        stop_event: Event | None = None,
        poll_interval_s: float = 1.0,
    ) -> None:
        """Block until the IK service becomes available.

        By default, retries indefinitely once per `poll_interval_s`.

        :param timeout_s: Optional duration (seconds) after which waiting gives up
        :param stop_event: Optional event that cancels the wait once set
        :param poll_interval_s: Delay (seconds) between checks for the service
        :raises IKServiceUnavailableError: If the wait timed out or was cancelled
        """
        deadline_s = None if timeout_s is None else time.monotonic() + timeout_s

        while not self._service.exists():
            if stop_event is not None and stop_event.is_set():
                log_warning("Stopped waiting for inverse kinematics service.")
                raise IKServiceUnavailableError("Stopped waiting for inverse kinematics service.")
            if deadline_s is not None and time.monotonic() >= deadline_s:
                message = f"Inverse kinematics service was unavailable after {timeout_s} seconds."
                log_warning(message)
                raise IKServiceUnavailableError(message)

            log_info("Waiting for inverse kinematics service ...")
            if stop_event is not None:
                stop_event.wait(poll_interval_s)
            else:
                time.sleep(poll_interval_s)

        log_info("Inverse kinematics service is available")


class JointSpaceIKClient(IKClient):
    """Solves IK using a numeric solver over a kinematic group of the full robot."""

    def __init__(
        self,
        service: IKService[JointSpaceIKRequest, JointSpaceIKResponse],
        group_name: str,
        link_name: str,
        joint_indices: tuple[int, int],
        attempts: int = 1,
        timeout_s: float = 0.1,
        wait_for_service: bool = True,
    ) -> None:
        """Initialize the client and (by default) wait for its service to become available.

        :param service: Handle to the numeric IK service
        :param group_name: Name of the kinematic group solved for
        :param link_name: Name of the link placed at the target pose
        :param joint_indices: Indices [first, last] of the arm's joints in the robot's state
        :param attempts: Number of attempts made by the solver
        :param timeout_s: Duration (seconds) after which the solver gives up
        :param wait_for_service: Whether to block until the service is available
        """
        super().__init__(service)
        self.group_name = group_name
        self.link_name = link_name
        self.joint_indices = joint_indices
        self.attempts = attempts
        self.timeout_s = timeout_s

        if wait_for_service:
            self.wait_until_ready()

    def solve(self, pose: Pose3D) -> IKSolution:
        """Solve IK at the given pose, keeping only the arm's joints of the robot's solution."""
        request = JointSpaceIKRequest(
            pose=pose,
            group_name=self.group_name,
            link_name=self.link_name,
            attempts=self.attempts,
            timeout_s=self.timeout_s,
        )
        response: JointSpaceIKResponse = self._service(request)

        if response.error_code == NO_IK_SOLUTION:
            return IKSolution.failure()

        first, last = self.joint_indices
        return IKSolution(True, extract_joint_range(response.joint_positions, first, last))


class ClosedFormIKClient(IKClient):
    """Solves IK using a closed-form solver for the arm."""

    def __init__(
        self,
        service: IKService[ClosedFormIKRequest, ClosedFormIKResponse],
        wait_for_service: bool = True,
    ) -> None:
        """Initialize the client and (by default) wait for its service to become available."""
        super().__init__(service)

        if wait_for_service:
            self.wait_until_ready()

    def solve(self, pose: Pose3D) -> IKSolution:
        """Solve IK at the given pose using the closed-form solver."""
        response: ClosedFormIKResponse = self._service(ClosedFormIKRequest(pose))
        if not response.success:
            return IKSolution.failure()
        return IKSolution(True, tuple(float(q) for q in response.joint_positions))


def create_ik_client(
    config: ReachabilityConfig,
    service: IKService,
    wait_for_service: bool = True,
) -> IKClient:
    """Create the IK client for the backend selected by the given configuration.

    :param config: Configuration of the grasp filter
    :param service: Handle to the IK service matching the configured backend
    :param wait_for_service: Whether to block until the service is available
    :return: Constructed IK client
    """
    if config.ik_backend == IKBackend.JOINT_SPACE:
        return JointSpaceIKClient(
            service,
            group_name=config.move_group,
            link_name=config.arm_link,
            joint_indices=config.ik_joint_indices,
            attempts=config.ik_attempts,
            timeout_s=config.ik_timeout_s,
            wait_for_service=wait_for_service,
        )
    if config.ik_backend == IKBackend.CLOSED_FORM:
        return ClosedFormIKClient(service, wait_for_service=wait_for_service)

    raise ValueError(f"Unrecognized IK backend: {config.ik_backend}")
