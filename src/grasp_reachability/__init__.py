"""Filter grasp candidates down to those a robot arm can reach without colliding."""
