"""Import classes and functions describing grasps and their geometry."""

from .geometry import AxisOrder as AxisOrder
from .geometry import build_grasp_pose as build_grasp_pose
from .geometry import compute_hand_orientations as compute_hand_orientations
from .geometry import reorder_hand_axes as reorder_hand_axes
from .geometry import rotate_grasp_frame as rotate_grasp_frame
from .geometry import sample_grasp_angles as sample_grasp_angles
from .grasp_candidate import GraspCandidate as GraspCandidate
from .grasp_candidate import GraspScored as GraspScored
from .grasp_frame import GraspFrame as GraspFrame
