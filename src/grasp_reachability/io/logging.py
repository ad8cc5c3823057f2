"""Define utility functions to log through ROS when it is available, else via `logging`."""

from rich.console import Console

try:
    import rospy

    ROS_PRESENT = True
except ModuleNotFoundError:
    ROS_PRESENT = False

import logging

logger = logging.getLogger("grasp_reachability")
console = Console()


def log_info(message: str) -> None:
    """Log the given string at the info level."""
    if ROS_PRESENT:
        rospy.loginfo(message)
    else:
        logger.info(message)


def log_warning(message: str) -> None:
    """Log the given string at the warning level."""
    if ROS_PRESENT:
        rospy.logwarn(message)
    else:
        logger.warning(message)

