"""Odometry-based turning toward a point and holonomic driving to a pose."""

import math

from phoenixbot.drive import LOOP_PERIOD_MS
from phoenixbot.hardware import Direction
from phoenixbot.pid import PID
from phoenixbot.util import clamp, reduce_negative_180_to_180, to_deg, to_rad


def _pick(value, default):
    return default if value is None else value


def _bearing_deg(drive, x_position, y_position):
    """Clockwise-from-+Y bearing from the robot to a field point, in degrees."""
    return to_deg(
        math.atan2(x_position - drive.get_x_position(), y_position - drive.get_y_position())
    )


def turn_to_point(
    drive,
    x_position,
    y_position,
    extra_angle_deg=0.0,
    turn_max_voltage=None,
    turn_settle_error=None,
    turn_settle_time=None,
    turn_timeout=None,
    turn_kp=None,
    turn_ki=None,
    turn_kd=None,
    turn_starti=None,
):
    """Turn in place to face a field point, plus extra_angle_deg past it.

    For example, extra_angle_deg=180 points the back of the robot at the point.
    """
    max_voltage = _pick(turn_max_voltage, drive.turn_max_voltage)
    turn_pid = PID(
        reduce_negative_180_to_180(
            _bearing_deg(drive, x_position, y_position) - drive.get_absolute_heading()
        ),
        _pick(turn_kp, drive.turn_kp),
        _pick(turn_ki, drive.turn_ki),
        _pick(turn_kd, drive.turn_kd),
        _pick(turn_starti, drive.turn_starti),
        _pick(turn_settle_error, drive.turn_settle_error),
        _pick(turn_settle_time, drive.turn_settle_time),
        _pick(turn_timeout, drive.turn_timeout),
    )
    while not turn_pid.is_settled():
        error = reduce_negative_180_to_180(
            _bearing_deg(drive, x_position, y_position)
            - drive.get_absolute_heading()
            + extra_angle_deg
        )
        output = clamp(turn_pid.compute(error), -max_voltage, max_voltage)
        drive.drive_with_voltage(output, -output)
        drive.sleep(LOOP_PERIOD_MS)


def holonomic_drive_to_pose(
    drive,
    x_position,
    y_position,
    angle=None,
    drive_max_voltage=None,
    heading_max_voltage=None,
    drive_settle_error=None,
    drive_settle_time=None,
    drive_timeout=None,
    drive_kp=None,
    drive_ki=None,
    drive_kd=None,
    drive_starti=None,
    heading_kp=None,
    heading_ki=None,
    heading_kd=None,
    heading_starti=None,
):
    """Drive and turn at once to a pose on a holonomic chassis.

    Uses the heading constants for turning but the turn exit conditions to
    settle, and exits only once both driving and turning have settled.
    """
    left_front, right_front, left_back, right_back = drive.holonomic_motors()
    angle = _pick(angle, drive.get_absolute_heading())
    drive_max_voltage = _pick(drive_max_voltage, drive.drive_max_voltage)
    heading_max_voltage = _pick(heading_max_voltage, drive.heading_max_voltage)

    drive_pid = PID(
        math.hypot(x_position - drive.get_x_position(), y_position - drive.get_y_position()),
        _pick(drive_kp, drive.drive_kp),
        _pick(drive_ki, drive.drive_ki),
        _pick(drive_kd, drive.drive_kd),
        _pick(drive_starti, drive.drive_starti),
        _pick(drive_settle_error, drive.drive_settle_error),
        _pick(drive_settle_time, drive.drive_settle_time),
        _pick(drive_timeout, drive.drive_timeout),
    )
    turn_pid = PID(
        angle - drive.get_absolute_heading(),
        _pick(heading_kp, drive.heading_kp),
        _pick(heading_ki, drive.heading_ki),
        _pick(heading_kd, drive.heading_kd),
        _pick(heading_starti, drive.heading_starti),
        drive.turn_settle_error,
        drive.turn_settle_time,
        drive.turn_timeout,
    )

    while not (drive_pid.is_settled() and turn_pid.is_settled()):
        dx = x_position - drive.get_x_position()
        dy = y_position - drive.get_y_position()
        drive_error = math.hypot(dx, dy)
        turn_error = reduce_negative_180_to_180(angle - drive.get_absolute_heading())

        drive_output = clamp(drive_pid.compute(drive_error), -drive_max_voltage, drive_max_voltage)
        turn_output = clamp(turn_pid.compute(turn_error), -heading_max_voltage, heading_max_voltage)

        travel_angle = math.atan2(dy, dx)
        heading_rad = to_rad(drive.get_absolute_heading())
        diagonal_a = drive_output * math.cos(heading_rad + travel_angle - math.pi / 4)
        diagonal_b = drive_output * math.cos(-heading_rad - travel_angle + 3 * math.pi / 4)

        left_front.spin(Direction.FORWARD, diagonal_a + turn_output)
        left_back.spin(Direction.FORWARD, diagonal_b + turn_output)
        right_back.spin(Direction.FORWARD, diagonal_a - turn_output)
        right_front.spin(Direction.FORWARD, diagonal_b - turn_output)
        drive.sleep(LOOP_PERIOD_MS)