"""Import classes representing sensed data consumed by the grasp filter."""

from .pointcloud import Pointcloud as Pointcloud
