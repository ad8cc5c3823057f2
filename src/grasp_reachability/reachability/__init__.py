"""Import classes and functions deciding whether grasps are reachable and collision-free."""

from .collision_checker import CylinderCollisionChecker as CylinderCollisionChecker
from .collision_checker import SweptCylinder as SweptCylinder
from .collision_checker import is_collision_free as is_collision_free
from .reachability_filter import ReachabilityFilter as ReachabilityFilter
from .workspace import WorkspaceBounds as WorkspaceBounds
