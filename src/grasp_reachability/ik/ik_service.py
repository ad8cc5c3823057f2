"""Define backend-neutral requests and responses exchanged with inverse kinematics services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from grasp_reachability.kinematics import Pose3D

NO_IK_SOLUTION = -31
"""Error code of a joint-space IK response for which no solution exists (per MoveIt)."""

RequestT = TypeVar("RequestT", contravariant=True)
ResponseT = TypeVar("ResponseT", covariant=True)


class IKService(Protocol[RequestT, ResponseT]):
    """Protocol for a handle to an external inverse kinematics service."""

    def exists(self) -> bool:
        """Evaluate whether the service is currently available."""
        ...

    def __call__(self, request: RequestT) -> ResponseT:
        """Call the service with the given request and block until it responds."""
        ...


@dataclass(frozen=True)
class JointSpaceIKRequest:
    """Request for a numeric IK solver over a kinematic group."""

    pose: Pose3D
    group_name: str
    link_name: str
    attempts: int
    timeout_s: float


@dataclass(frozen=True)
class JointSpaceIKResponse:
    """Response of a numeric IK solver: an error code and the full robot's joint positions."""

    error_code: int
    joint_positions: tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ClosedFormIKRequest:
    """Request for a closed-form IK solver, which only needs the target pose."""

    pose: Pose3D


@dataclass(frozen=True)
class ClosedFormIKResponse:
    """Response of a closed-form IK solver, whose solution contains only the arm's joints."""

    success: bool
    joint_positions: tuple[float, ...] = field(default_factory=tuple)
