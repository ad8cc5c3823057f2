"""Import classes and definitions for positions, rotations, and poses in 3D space."""

from .kinematics_core import DEFAULT_FRAME as DEFAULT_FRAME
from .point3d import Point3D as Point3D
from .pose3d import Pose3D as Pose3D
from .rotations import Quaternion as Quaternion
