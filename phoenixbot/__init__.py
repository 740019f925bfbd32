"""Motion control, odometry, in-memory devices and match routines for a competition robot."""

__version__ = "0.1.0"

__all__ = [
    "autons",
    "devices",
    "drive",
    "field_moves",
    "hardware",
    "motion",
    "odom",
    "pid",
    "robot",
    "util",
]