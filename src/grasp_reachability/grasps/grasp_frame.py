"""Define a class representing the orthonormal frame of a (possibly rotated) grasp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from grasp_reachability.grasps.grasp_candidate import GraspCandidate


@dataclass(frozen=True)
class GraspFrame:
    """A grasp center together with its approach, axis, and binormal unit vectors."""

    center: NDArray[np.float64]
    approach: NDArray[np.float64]
    axis: NDArray[np.float64]
    binormal: NDArray[np.float64]

    @classmethod
    def from_candidate(cls, candidate: GraspCandidate) -> GraspFrame:
        """Construct the unrotated frame of the given grasp candidate."""
        return cls(
            center=candidate.center,
            approach=candidate.approach,
            axis=candidate.axis,
            binormal=candidate.binormal,
        )
