"""Define the Pydantic model validating the configuration of the grasp filter."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from grasp_reachability.ik.ik_client import IKBackend
from grasp_reachability.io.yaml_utils import load_yaml_data
from grasp_reachability.reachability.workspace import WorkspaceBounds

WORKSPACE = Tuple[float, float, float, float, float, float]
"""Workspace limits of the form [xmin, xmax, ymin, ymax, zmin, zmax]."""

INDEX_RANGE = Tuple[int, int]
"""An inclusive range [first, last] of joint indices."""


class ReachabilityConfig(BaseModel):
    """Configuration of the grasp filter, read once at startup."""

    workspace: WORKSPACE
    min_aperture: float = Field(ge=0, description="Minimum aperture of the hand (meters)")
    max_aperture: float = Field(ge=0, description="Maximum aperture of the hand (meters)")
    num_additional_grasps: int = Field(default=0, ge=0)
    axis_order: Tuple[int, int, int] = (0, 1, 2)
    planning_frame: str = "base"
    hand_offset: float = Field(description="Standoff (meters) of the pre-grasp pose")
    arm_link: str = Field(description="Link placed at the grasp pose when solving IK")
    move_group: str = Field(description="Kinematic group solved for by the joint-space IK")
    max_colliding_points: int = Field(ge=0)
    ik_joint_indices: INDEX_RANGE = Field(description="Arm joints within an IK solution")
    joint_state_indices: INDEX_RANGE = Field(description="Arm joints within a robot joint state")
    ik_backend: IKBackend = IKBackend.JOINT_SPACE
    ik_attempts: int = Field(default=1, ge=1)
    ik_timeout_s: float = Field(default=0.1, gt=0)
    verbose: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def check_consistency(self) -> ReachabilityConfig:
        """Verify that the configured ranges and the hand axis order are well-formed."""
        WorkspaceBounds.from_sequence(self.workspace)  # Raises ValueError on inverted limits

        if self.min_aperture > self.max_aperture:
            raise ValueError(f"Inverted aperture range: [{self.min_aperture}, {self.max_aperture}]")

        if sorted(self.axis_order) != [0, 1, 2]:
            raise ValueError(f"Hand axis order isn't a permutation of (0, 1, 2): {self.axis_order}")

        for name, (first, last) in (
            ("ik_joint_indices", self.ik_joint_indices),
            ("joint_state_indices", self.joint_state_indices),
        ):
            if first < 0 or first > last:
                raise ValueError(f"Invalid joint index range {name}: [{first}, {last}]")

        return self

    @property
    def workspace_bounds(self) -> WorkspaceBounds:
        """Retrieve the workspace limits as axis-aligned bounds."""
        return WorkspaceBounds.from_sequence(self.workspace)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> ReachabilityConfig:
        """Load and validate a grasp filter configuration from a YAML file."""
        return cls.model_validate(load_yaml_data(yaml_path))
