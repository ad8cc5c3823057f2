"""Import ROS adapters for the grasp filter's configuration, messages, and IK services."""

from .ik_services import RosIKService as RosIKService
from .ik_services import create_ros_ik_service as create_ros_ik_service
from .params import load_reachability_config as load_reachability_config
