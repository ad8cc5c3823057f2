"""Define core constants shared by the kinematic data structures."""

DEFAULT_FRAME = "base"
