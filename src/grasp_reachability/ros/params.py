"""Define utility functions to load the grasp filter's configuration from ROS parameters."""

from __future__ import annotations

from typing import Any

import rospy

from grasp_reachability.io.config import ReachabilityConfig


def get_ros_params(namespace: str, names: list[str]) -> dict[str, Any]:
    """Retrieve the parameters that exist under the given namespace.

    :param namespace: Namespace prefix of the parameters (e.g., "~" for private parameters)
    :param names: Names of the parameters to be retrieved
    :return: Map from each existing parameter's name to its value
    """
    return {
        name: rospy.get_param(namespace + name)
        for name in names
        if rospy.has_param(namespace + name)
    }


def load_reachability_config(namespace: str = "~") -> ReachabilityConfig:
    """Load and validate the grasp filter's configuration from the ROS parameter server.

    Parameters missing from the server take their default values (if any).
    """
    params = get_ros_params(namespace, list(ReachabilityConfig.model_fields))
    return ReachabilityConfig.model_validate(params)
