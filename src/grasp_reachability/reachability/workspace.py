"""Define a class to represent the axis-aligned workspace reachable by the robot arm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass(frozen=True)
class WorkspaceBounds:
    """An axis-aligned box of (x,y,z) limits (meters) in the planning frame."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_min: float
    z_max: float

    def __post_init__(self) -> None:
        """Verify that the minimum of each axis does not exceed its maximum."""
        for axis, lower, upper in self._limits():
            if lower > upper:
                raise ValueError(f"Workspace {axis}-limits are inverted: [{lower}, {upper}]")

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> WorkspaceBounds:
        """Construct workspace bounds from a sequence [xmin, xmax, ymin, ymax, zmin, zmax]."""
        if len(values) != 6:
            raise ValueError(f"WorkspaceBounds expects 6 values, got {len(values)}")
        return cls(*(float(v) for v in values))

    def _limits(self) -> list[tuple[str, float, float]]:
        return [
            ("x", self.x_min, self.x_max),
            ("y", self.y_min, self.y_max),
            ("z", self.z_min, self.z_max),
        ]

    def contains(self, point: NDArray[np.float64]) -> bool:
        """Evaluate whether the workspace contains the given (x,y,z) point (limits inclusive)."""
        x, y, z = np.asarray(point, dtype=np.float64)
        return (
            self.x_min <= x <= self.x_max
            and self.y_min <= y <= self.y_max
            and self.z_min <= z <= self.z_max
        )
