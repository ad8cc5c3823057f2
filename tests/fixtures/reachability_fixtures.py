"""Define test doubles and factories for exercising the grasp filter without ROS."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from grasp_reachability.grasps import GraspCandidate
from grasp_reachability.ik import ClosedFormIKResponse
from grasp_reachability.io.config import ReachabilityConfig
from grasp_reachability.perception import Pointcloud
from grasp_reachability.reachability import CylinderCollisionChecker


class FakeIKService:
    """An IK service double that records its requests and becomes available after some checks."""

    def __init__(self, respond: Callable[[Any, int], Any], unavailable_checks: int = 0) -> None:
        """Initialize the fake service.

        :param respond: Maps (request, number of calls so far) to a response
        :param unavailable_checks: Number of availability checks that fail before succeeding
        """
        self.requests: list[Any] = []
        self.num_exists_calls = 0
        self._respond = respond
        self._unavailable_checks = unavailable_checks

    def exists(self) -> bool:
        """Report the service as unavailable until enough checks have been made."""
        self.num_exists_calls += 1
        return self.num_exists_calls > self._unavailable_checks

    def __call__(self, request: Any) -> Any:
        """Record the request and produce a response."""
        self.requests.append(request)
        return self._respond(request, len(self.requests))


def always_solvable(_request: Any, num_calls: int) -> ClosedFormIKResponse:
    """Respond with a distinct six-joint solution for every call."""
    return ClosedFormIKResponse(success=True, joint_positions=(float(num_calls),) * 6)


def never_solvable(_request: Any, _num_calls: int) -> ClosedFormIKResponse:
    """Respond that no IK solution exists."""
    return ClosedFormIKResponse(success=False)


class CountingCollisionChecker(CylinderCollisionChecker):
    """A cylinder collision checker that counts how often it is evaluated."""

    def __init__(self, max_colliding_points: int) -> None:
        """Initialize the checker with zero recorded evaluations."""
        super().__init__(max_colliding_points)
        self.num_checks = 0

    def is_collision_free(
        self,
        position: np.ndarray,
        approach: np.ndarray,
        cloud: Pointcloud,
    ) -> bool:
        """Count the evaluation, then check for collisions as usual."""
        self.num_checks += 1
        return super().is_collision_free(position, approach, cloud)


def make_config(**overrides: Any) -> ReachabilityConfig:
    """Construct a grasp filter configuration, replacing any of its defaults with `overrides`."""
    params: dict[str, Any] = {
        "workspace": (-1.0, 1.0, -1.0, 1.0, -1.0, 1.0),
        "min_aperture": 0.01,
        "max_aperture": 0.1,
        "num_additional_grasps": 0,
        "axis_order": (0, 1, 2),
        "planning_frame": "base",
        "hand_offset": 0.08,
        "arm_link": "gripper_link",
        "move_group": "arm",
        "max_colliding_points": 0,
        "ik_joint_indices": (0, 5),
        "joint_state_indices": (0, 5),
        "ik_backend": "ikfast",
    }
    params.update(overrides)
    return ReachabilityConfig(**params)


def make_candidate(
    surface_center: tuple[float, float, float] = (0.5, 0.0, 0.2),
    width: float = 0.05,
) -> GraspCandidate:
    """Construct a grasp candidate approaching along +x with its hand axis along +y."""
    return GraspCandidate.from_vectors(
        center=[0.5, 0.0, 0.2],
        surface_center=list(surface_center),
        approach=[1.0, 0.0, 0.0],
        axis=[0.0, 1.0, 0.0],
        width=width,
    )


def cloud_blocking_candidate() -> Pointcloud:
    """Construct a pointcloud with a single point in front of `make_candidate()`'s pre-grasp pose.

    With the default hand offset (0.08 m), the swept cylinder's upper half spans x in (0.58, 0.635).
    """
    return Pointcloud(np.array([[0.6, 0.0, 0.2]]))
