"""Arc-based odometry for one- and two-tracker drives."""

import math

from phoenixbot.util import to_rad


class Odom:
    """Tracks field-centric position from tracker distances and a gyro heading.

    Orientation is clockwise-positive with 0 degrees pointing along +Y.
    """

    def __init__(self):
        self.x_position = 0.0
        self.y_position = 0.0
        self.orientation_deg = 0.0
        self.forward_center_distance = 0.0
        self.sideways_center_distance = 0.0
        self.forward_position = 0.0
        self.sideways_position = 0.0

    def set_physical_distances(self, forward_center_distance, sideways_center_distance):
        """Set the trackers' offsets from the robot's center in inches."""
        self.forward_center_distance = forward_center_distance
        self.sideways_center_distance = sideways_center_distance

    def set_position(self, x_position, y_position, orientation_deg, forward_position, sideways_position):
        """Reset the pose along with the trackers' current readings."""
        self.forward_position = forward_position
        self.sideways_position = sideways_position
        self.x_position = x_position
        self.y_position = y_position
        self.orientation_deg = orientation_deg

    def update_position(self, forward_position, sideways_position, orientation_deg):
        """Advance the pose from new tracker readings (inches) and heading (degrees)."""
        forward_delta = forward_position - self.forward_position
        sideways_delta = sideways_position - self.sideways_position
        self.forward_position = forward_position
        self.sideways_position = sideways_position

        orientation_rad = to_rad(orientation_deg)
        prev_orientation_rad = to_rad(self.orientation_deg)
        orientation_delta_rad = orientation_rad - prev_orientation_rad
        self.orientation_deg = orientation_deg

        if orientation_delta_rad == 0:
            local_x = sideways_delta
            local_y = forward_delta
        else:
            chord = 2 * math.sin(orientation_delta_rad / 2)
            local_x = chord * (sideways_delta / orientation_delta_rad + self.sideways_center_distance)
            local_y = chord * (forward_delta / orientation_delta_rad + self.forward_center_distance)

        if local_x == 0 and local_y == 0:
            local_polar_angle = 0.0
            local_polar_length = 0.0
        else:
            local_polar_angle = math.atan2(local_y, local_x)
            local_polar_length = math.hypot(local_x, local_y)

        global_polar_angle = local_polar_angle - prev_orientation_rad - orientation_delta_rad / 2

        self.x_position += local_polar_length * math.cos(global_polar_angle)
        self.y_position += local_polar_length * math.sin(global_polar_angle)