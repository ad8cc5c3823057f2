"""Define a filter selecting the grasps that a robot arm can reach without collisions."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from grasp_reachability.grasps import (
    GraspFrame,
    GraspScored,
    build_grasp_pose,
    compute_hand_orientations,
    rotate_grasp_frame,
    sample_grasp_angles,
)
from grasp_reachability.io.logging import console, log_info
from grasp_reachability.reachability.collision_checker import CylinderCollisionChecker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grasp_reachability.grasps import GraspCandidate
    from grasp_reachability.ik import IKClient
    from grasp_reachability.io.config import ReachabilityConfig
    from grasp_reachability.perception import Pointcloud


class ReachabilityFilter:
    """Selects grasp poses that are reachable by inverse kinematics and free of collisions."""

    def __init__(
        self,
        config: ReachabilityConfig,
        ik_client: IKClient,
        collision_checker: CylinderCollisionChecker | None = None,
    ) -> None:
        """Initialize the filter using its configuration and an IK client.

        :param config: Configuration of the grasp filter
        :param ik_client: Client solving inverse kinematics for the configured backend
        :param collision_checker: Optional collision checker (defaults to the configured cylinder)
        """
        self.config = config
        self.workspace = config.workspace_bounds
        self.ik_client = ik_client
        self.collision_checker = collision_checker or CylinderCollisionChecker(
            config.max_colliding_points,
        )

    def _log(self, message: str) -> None:
        if self.config.verbose:
            log_info(message)

    def select_feasible_grasps(
        self,
        candidates: Sequence[GraspCandidate],
        cloud: Pointcloud,
    ) -> list[GraspScored]:
        """Select every grasp pose generated from the candidates that the arm can execute.

        Output is ordered by candidate, then by increasing sampled angle, then by hand orientation.

        :param candidates: Grasp candidates proposed by perception
        :param cloud: Snapshot of the pointcloud of sensed obstacles (treated as read-only)
        :return: List of reachable, collision-free grasps with placeholder scores
        """
        selected: list[GraspScored] = []

        for i, candidate in enumerate(candidates):
            x, y, z = candidate.center
            self._log(f"Checking if grasp {i}, position ({x:.2f}, {y:.2f}, {z:.2f}), is reachable.")

            if not self.workspace.contains(candidate.surface_center):
                self._log(f"Grasp {i} lies outside of the workspace.")
                continue

            if not self.config.min_aperture <= candidate.width <= self.config.max_aperture:
                self._log(
                    f"Grasp {i} is too small/large for the hand (min, max): {candidate.width:.4f} "
                    f"({self.config.min_aperture:.4f}, {self.config.max_aperture:.4f})",
                )
                continue

            selected.extend(self._select_from_candidate(i, candidate, cloud))

        return selected

    def _select_from_candidate(
        self,
        index: int,
        candidate: GraspCandidate,
        cloud: Pointcloud,
    ) -> list[GraspScored]:
        """Evaluate all rotated frames and hand orientations of a single grasp candidate."""
        selected: list[GraspScored] = []
        frame = GraspFrame.from_candidate(candidate)

        for j, theta_deg in enumerate(sample_grasp_angles(self.config.num_additional_grasps)):
            rotated = rotate_grasp_frame(frame, theta_deg)
            orientations = compute_hand_orientations(rotated, self.config.axis_order)

            # The swept cylinder only depends on the position and approach, shared by orientations
            collision_free: bool | None = None

            for k, orientation in enumerate(orientations):
                if collision_free is False:
                    break

                pose = build_grasp_pose(
                    rotated,
                    orientation,
                    self.config.hand_offset,
                    self.config.planning_frame,
                )

                start_s = time.perf_counter()
                ik_solution = self.ik_client.solve(pose)
                self._log(f"IK runtime: {time.perf_counter() - start_s:.2f} seconds")
                if not ik_solution.success:
                    self._log(f"IK failed for grasp {index}, approach {j}, orientation {k}.")
                    continue

                if collision_free is None:
                    start_s = time.perf_counter()
                    collision_free = self.collision_checker.is_collision_free(
                        pose.position.to_array(),
                        rotated.approach,
                        cloud,
                    )
                    elapsed_s = time.perf_counter() - start_s
                    self._log(f"Collision checker runtime: {elapsed_s:.2f} seconds")
                    if not collision_free:
                        self._log(f"Grasp {index}, approach {j}, orientation {k} collides.")
                        continue

                if self.config.verbose:
                    console.print("IK solution:", ik_solution.joint_positions)

                selected.append(
                    GraspScored(
                        candidate_index=index,
                        pose=pose,
                        approach=rotated.approach,
                        width=candidate.width,
                        joint_positions=ik_solution.joint_positions,
                        score=0.0,
                    ),
                )

        return selected
