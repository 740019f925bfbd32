"""Odometry-based moves: driving to a point and boomerang driving to a pose."""

import math

from phoenixbot.drive import LOOP_PERIOD_MS
from phoenixbot.pid import PID
from phoenixbot.util import (
    clamp,
    clamp_min_voltage,
    is_line_settled,
    left_voltage_scaling,
    reduce_negative_180_to_180,
    reduce_negative_90_to_90,
    right_voltage_scaling,
    to_deg,
    to_rad,
)


def _pick(value, default):
    return default if value is None else value


def _bearing_deg(drive, x_position, y_position):
    """Clockwise-from-+Y bearing from the robot to a field point, in degrees."""
    return to_deg(
        math.atan2(x_position - drive.get_x_position(), y_position - drive.get_y_position())
    )


def _distance_to(drive, x_position, y_position):
    return math.hypot(x_position - drive.get_x_position(), y_position - drive.get_y_position())


def _apply_outputs(drive, drive_output, heading_output, heading_scale_factor,
                   drive_max_voltage, heading_max_voltage, drive_min_voltage):
    limit = abs(heading_scale_factor) * drive_max_voltage
    drive_output = clamp(drive_output, -limit, limit)
    heading_output = clamp(heading_output, -heading_max_voltage, heading_max_voltage)
    drive_output = clamp_min_voltage(drive_output, drive_min_voltage)
    drive.drive_with_voltage(
        left_voltage_scaling(drive_output, heading_output),
        right_voltage_scaling(drive_output, heading_output),
    )


def drive_to_point(
    drive,
    x_position,
    y_position,
    drive_min_voltage=None,
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
    """Drive to a field point with one PID for distance and one for heading.

    Drives backwards when that is quicker, scales drive output by the cosine
    of the heading error, and exits early once the robot crosses the line
    through the target perpendicular to the starting approach.
    """
    drive_min_voltage = _pick(drive_min_voltage, drive.drive_min_voltage)
    drive_max_voltage = _pick(drive_max_voltage, drive.drive_max_voltage)
    heading_max_voltage = _pick(heading_max_voltage, drive.heading_max_voltage)
    drive_settle_error = _pick(drive_settle_error, drive.drive_settle_error)

    drive_pid = PID(
        _distance_to(drive, x_position, y_position),
        _pick(drive_kp, drive.drive_kp),
        _pick(drive_ki, drive.drive_ki),
        _pick(drive_kd, drive.drive_kd),
        _pick(drive_starti, drive.drive_starti),
        drive_settle_error,
        _pick(drive_settle_time, drive.drive_settle_time),
        _pick(drive_timeout, drive.drive_timeout),
    )
    start_angle_deg = _bearing_deg(drive, x_position, y_position)
    heading_pid = PID(
        start_angle_deg - drive.get_absolute_heading(),
        _pick(heading_kp, drive.heading_kp),
        _pick(heading_ki, drive.heading_ki),
        _pick(heading_kd, drive.heading_kd),
        _pick(heading_starti, drive.heading_starti),
    )

    def line_settled():
        return is_line_settled(
            x_position, y_position, start_angle_deg, drive.get_x_position(), drive.get_y_position()
        )

    prev_line_settled = line_settled()
    while not drive_pid.is_settled():
        settled_now = line_settled()
        if settled_now and not prev_line_settled:
            break
        prev_line_settled = settled_now

        drive_error = _distance_to(drive, x_position, y_position)
        heading_error = reduce_negative_180_to_180(
            _bearing_deg(drive, x_position, y_position) - drive.get_absolute_heading()
        )
        drive_output = drive_pid.compute(drive_error)

        heading_scale_factor = math.cos(to_rad(heading_error))
        drive_output *= heading_scale_factor
        heading_output = heading_pid.compute(reduce_negative_90_to_90(heading_error))

        if drive_error < drive_settle_error:
            heading_output = 0.0

        _apply_outputs(drive, drive_output, heading_output, heading_scale_factor,
                       drive_max_voltage, heading_max_voltage, drive_min_voltage)
        drive.sleep(LOOP_PERIOD_MS)


def drive_to_pose(
    drive,
    x_position,
    y_position,
    angle,
    lead=None,
    setback=None,
    drive_min_voltage=None,
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
    """Drive to a point and orientation with a boomerang controller.

    The robot chases a carrot point set back from the target along the
    target angle by lead times the remaining distance plus setback. Once
    near the carrot, or past the target's center line, it corrects toward
    the final angle instead.
    """
    lead = _pick(lead, drive.boomerang_lead)
    setback = _pick(setback, drive.boomerang_setback)
    drive_min_voltage = _pick(drive_min_voltage, drive.drive_min_voltage)
    drive_max_voltage = _pick(drive_max_voltage, drive.drive_max_voltage)
    heading_max_voltage = _pick(heading_max_voltage, drive.heading_max_voltage)
    drive_settle_error = _pick(drive_settle_error, drive.drive_settle_error)

    target_distance = _distance_to(drive, x_position, y_position)
    drive_pid = PID(
        target_distance,
        _pick(drive_kp, drive.drive_kp),
        _pick(drive_ki, drive.drive_ki),
        _pick(drive_kd, drive.drive_kd),
        _pick(drive_starti, drive.drive_starti),
        drive_settle_error,
        _pick(drive_settle_time, drive.drive_settle_time),
        _pick(drive_timeout, drive.drive_timeout),
    )
    heading_pid = PID(
        _bearing_deg(drive, x_position, y_position) - drive.get_absolute_heading(),
        _pick(heading_kp, drive.heading_kp),
        _pick(heading_ki, drive.heading_ki),
        _pick(heading_kd, drive.heading_kd),
        _pick(heading_starti, drive.heading_starti),
    )

    def side_of_line(line_angle):
        return is_line_settled(
            x_position, y_position, line_angle, drive.get_x_position(), drive.get_y_position()
        )

    prev_line_settled = side_of_line(angle)
    crossed_center_line = False
    prev_center_line_side = side_of_line(angle + 90)
    angle_rad = to_rad(angle)

    while not drive_pid.is_settled():
        line_settled = side_of_line(angle)
        if line_settled and not prev_line_settled:
            break
        prev_line_settled = line_settled

        if side_of_line(angle + 90) != prev_center_line_side:
            crossed_center_line = True

        target_distance = _distance_to(drive, x_position, y_position)
        carrot_offset = lead * target_distance + setback
        carrot_x = x_position - math.sin(angle_rad) * carrot_offset
        carrot_y = y_position - math.cos(angle_rad) * carrot_offset

        drive_error = _distance_to(drive, carrot_x, carrot_y)
        heading_error = reduce_negative_180_to_180(
            _bearing_deg(drive, carrot_x, carrot_y) - drive.get_absolute_heading()
        )

        if drive_error < drive_settle_error or crossed_center_line or drive_error < setback:
            heading_error = reduce_negative_180_to_180(angle - drive.get_absolute_heading())
            drive_error = target_distance

        drive_output = drive_pid.compute(drive_error)

        heading_scale_factor = math.cos(to_rad(heading_error))
        drive_output *= heading_scale_factor
        heading_output = heading_pid.compute(reduce_negative_90_to_90(heading_error))

        _apply_outputs(drive, drive_output, heading_output, heading_scale_factor,
                       drive_max_voltage, heading_max_voltage, drive_min_voltage)
        drive.sleep(LOOP_PERIOD_MS)