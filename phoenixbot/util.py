"""Angle, voltage and settling helpers shared by the motion code."""

import math

MAX_VOLTAGE = 12.0


def reduce_0_to_360(angle):
    """Return the equivalent angle in the range [0, 360)."""
    reduced = angle % 360.0
    if reduced >= 360.0:
        reduced -= 360.0
    return reduced


def reduce_negative_180_to_180(angle):
    """Return the equivalent angle in the range [-180, 180)."""
    reduced = (angle + 180.0) % 360.0
    if reduced >= 360.0:
        reduced -= 360.0
    return reduced - 180.0


def reduce_negative_90_to_90(angle):
    """Return the equivalent angle in [-90, 90), or the opposite one if none exists."""
    reduced = (angle + 90.0) % 180.0
    if reduced >= 180.0:
        reduced -= 180.0
    return reduced - 90.0


def to_rad(angle_deg):
    """Convert degrees to radians."""
    return angle_deg / (180.0 / math.pi)


def to_deg(angle_rad):
    """Convert radians to degrees."""
    return angle_rad * (180.0 / math.pi)


def clamp(value, minimum, maximum):
    """Limit value to [minimum, maximum]; assumes minimum <= maximum."""
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


def is_reversed(value):
    """A negative port number marks a reversed motor."""
    return value < 0


def to_volt(percent):
    """Scale a joystick percentage to motor volts."""
    return percent * MAX_VOLTAGE / 100.0


def to_port(port):
    """Convert a 1-based three-wire port number to an index, falling back to 0."""
    if port > 8 or port < 1:
        return 0
    return port - 1


def deadband(value, width):
    """Zero out joystick values smaller in magnitude than width."""
    if abs(value) < width:
        return 0
    return value


def is_line_settled(desired_x, desired_y, desired_angle_deg, current_x, current_y):
    """Whether the robot has crossed the line through the target perpendicular to the given angle."""
    angle = to_rad(desired_angle_deg)
    return (desired_y - current_y) * math.cos(angle) <= -(desired_x - current_x) * math.sin(angle)


def _voltage_ratio(drive_output, heading_output):
    return max(abs(drive_output + heading_output), abs(drive_output - heading_output)) / MAX_VOLTAGE


def left_voltage_scaling(drive_output, heading_output):
    """Left side voltage, scaled down proportionally so neither side exceeds 12 V."""
    ratio = _voltage_ratio(drive_output, heading_output)
    if ratio > 1:
        return (drive_output + heading_output) / ratio
    return drive_output + heading_output


def right_voltage_scaling(drive_output, heading_output):
    """Right side voltage, scaled down proportionally so neither side exceeds 12 V."""
    ratio = _voltage_ratio(drive_output, heading_output)
    if ratio > 1:
        return (drive_output - heading_output) / ratio
    return drive_output - heading_output


def clamp_min_voltage(drive_output, drive_min_voltage):
    """Raise a nonzero output to at least the minimum voltage, keeping its sign."""
    if -drive_min_voltage < drive_output < 0:
        return -drive_min_voltage
    if 0 < drive_output < drive_min_voltage:
        return drive_min_voltage
    return drive_output