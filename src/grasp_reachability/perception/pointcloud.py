"""Define a class to represent snapshots of 3D pointclouds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


class Pointcloud:
    """A pointcloud of 3D points expressed in the planning frame."""

    def __init__(self, points: NDArray[np.float64]) -> None:
        """Initialize the pointcloud using a NumPy array of shape (N, 3).

        :param points: Array containing 3D point data
        """
        points = np.asarray(points, dtype=np.float64)
        if len(points.shape) != 2 or points.shape[1] != 3:
            raise ValueError(f"Pointcloud expects an array of shape (N, 3), got {points.shape}")

        self.points = points
        """Points in the pointcloud; shape (N, 3)."""

    def __len__(self) -> int:
        """Retrieve the length of (i.e., number of points in) the pointcloud."""
        return self.points.shape[0]

    @classmethod
    def empty(cls) -> Pointcloud:
        """Construct a pointcloud containing no points."""
        return Pointcloud(np.zeros((0, 3)))

    def remove_invalid_points(self) -> Pointcloud:
        """Construct a copy of the pointcloud without its NaN or infinite points."""
        valid = np.all(np.isfinite(self.points), axis=1)
        return Pointcloud(self.points[valid])
