"""Chassis control: PID turns, drives and swings, odometry and joystick driving."""

import math
import threading
import time
from enum import Enum

from phoenixbot.hardware import BrakeMode, Direction
from phoenixbot.odom import Odom
from phoenixbot.pid import PID
from phoenixbot.util import (
    clamp,
    deadband,
    reduce_0_to_360,
    reduce_negative_180_to_180,
    to_volt,
)

LOOP_PERIOD_MS = 10
TRACKING_PERIOD_S = 0.005
JOYSTICK_DEADBAND = 5


class DriveSetup(Enum):
    ZERO_TRACKER_NO_ODOM = "zero_tracker_no_odom"
    ZERO_TRACKER_ODOM = "zero_tracker_odom"
    TANK_ONE_FORWARD_ENCODER = "tank_one_forward_encoder"
    TANK_ONE_FORWARD_ROTATION = "tank_one_forward_rotation"
    TANK_ONE_SIDEWAYS_ENCODER = "tank_one_sideways_encoder"
    TANK_ONE_SIDEWAYS_ROTATION = "tank_one_sideways_rotation"
    TANK_TWO_ENCODER = "tank_two_encoder"
    TANK_TWO_ROTATION = "tank_two_rotation"
    HOLONOMIC_TWO_ENCODER = "holonomic_two_encoder"
    HOLONOMIC_TWO_ROTATION = "holonomic_two_rotation"


_FORWARD_ONLY = {
    DriveSetup.TANK_ONE_FORWARD_ENCODER,
    DriveSetup.TANK_ONE_FORWARD_ROTATION,
    DriveSetup.ZERO_TRACKER_ODOM,
}
_WITH_SIDEWAYS = {
    DriveSetup.TANK_ONE_SIDEWAYS_ENCODER,
    DriveSetup.TANK_ONE_SIDEWAYS_ROTATION,
    DriveSetup.TANK_TWO_ENCODER,
    DriveSetup.TANK_TWO_ROTATION,
    DriveSetup.HOLONOMIC_TWO_ENCODER,
    DriveSetup.HOLONOMIC_TWO_ROTATION,
}
_FORWARD_FROM_DRIVE = {
    DriveSetup.ZERO_TRACKER_ODOM,
    DriveSetup.TANK_ONE_SIDEWAYS_ENCODER,
    DriveSetup.TANK_ONE_SIDEWAYS_ROTATION,
}


def _real_sleep(ms):
    time.sleep(ms / 1000.0)


def _pick(value, default):
    return default if value is None else value


class Drive:
    """Tank or holonomic chassis with optional tracking-wheel odometry.

    Trackers are any objects with a position() in degrees. The sleep callable
    takes milliseconds and is called once per control-loop iteration.
    """

    def __init__(
        self,
        drive_setup,
        left,
        right,
        gyro,
        wheel_diameter,
        wheel_ratio,
        gyro_scale,
        left_front=None,
        right_front=None,
        left_back=None,
        right_back=None,
        forward_tracker=None,
        forward_tracker_diameter=0.0,
        forward_tracker_center_distance=0.0,
        sideways_tracker=None,
        sideways_tracker_diameter=0.0,
        sideways_tracker_center_distance=0.0,
        sleep=None,
    ):
        self.drive_setup = drive_setup
        self.left = left
        self.right = right
        self.gyro = gyro
        self.wheel_diameter = wheel_diameter
        self.wheel_ratio = wheel_ratio
        self.gyro_scale = gyro_scale
        self.drive_in_to_deg_ratio = wheel_ratio / 360.0 * math.pi * wheel_diameter
        self.left_front = left_front
        self.right_front = right_front
        self.left_back = left_back
        self.right_back = right_back
        self.forward_tracker = forward_tracker
        self.forward_tracker_diameter = forward_tracker_diameter
        self.forward_tracker_center_distance = forward_tracker_center_distance
        self.forward_tracker_in_to_deg_ratio = math.pi * forward_tracker_diameter / 360.0
        self.sideways_tracker = sideways_tracker
        self.sideways_tracker_diameter = sideways_tracker_diameter
        self.sideways_tracker_center_distance = sideways_tracker_center_distance
        self.sideways_tracker_in_to_deg_ratio = math.pi * sideways_tracker_diameter / 360.0
        self._sleep = sleep if sleep is not None else _real_sleep
        self._tracking = None

        self.turn_max_voltage = 0.0
        self.turn_kp = 0.0
        self.turn_ki = 0.0
        self.turn_kd = 0.0
        self.turn_starti = 0.0
        self.turn_settle_error = 0.0
        self.turn_settle_time = 0.0
        self.turn_timeout = 0.0

        self.drive_min_voltage = 0.0
        self.drive_max_voltage = 0.0
        self.drive_kp = 0.0
        self.drive_ki = 0.0
        self.drive_kd = 0.0
        self.drive_starti = 0.0
        self.drive_settle_error = 0.0
        self.drive_settle_time = 0.0
        self.drive_timeout = 0.0

        self.heading_max_voltage = 0.0
        self.heading_kp = 0.0
        self.heading_ki = 0.0
        self.heading_kd = 0.0
        self.heading_starti = 0.0

        self.swing_max_voltage = 0.0
        self.swing_kp = 0.0
        self.swing_ki = 0.0
        self.swing_kd = 0.0
        self.swing_starti = 0.0
        self.swing_settle_error = 0.0
        self.swing_settle_time = 0.0
        self.swing_timeout = 0.0

        self.boomerang_lead = 0.0
        self.boomerang_setback = 0.0

        self.odom = Odom()
        if drive_setup in _FORWARD_ONLY:
            self.odom.set_physical_distances(forward_tracker_center_distance, 0.0)
        elif drive_setup in _WITH_SIDEWAYS:
            self.odom.set_physical_distances(
                forward_tracker_center_distance, sideways_tracker_center_distance
            )

    def sleep(self, ms):
        """Wait one control period using the configured sleep."""
        self._sleep(ms)

    def drive_with_voltage(self, left_voltage, right_voltage):
        """Drive each side at the given voltage out of 12."""
        self.left.spin(Direction.FORWARD, left_voltage)
        self.right.spin(Direction.FORWARD, right_voltage)

    def set_turn_constants(self, max_voltage, kp, ki, kd, starti):
        self.turn_max_voltage = max_voltage
        self.turn_kp = kp
        self.turn_ki = ki
        self.turn_kd = kd
        self.turn_starti = starti

    def set_drive_constants(self, max_voltage, kp, ki, kd, starti):
        self.drive_max_voltage = max_voltage
        self.drive_kp = kp
        self.drive_ki = ki
        self.drive_kd = kd
        self.drive_starti = starti

    def set_heading_constants(self, max_voltage, kp, ki, kd, starti):
        self.heading_max_voltage = max_voltage
        self.heading_kp = kp
        self.heading_ki = ki
        self.heading_kd = kd
        self.heading_starti = starti

    def set_swing_constants(self, max_voltage, kp, ki, kd, starti):
        self.swing_max_voltage = max_voltage
        self.swing_kp = kp
        self.swing_ki = ki
        self.swing_kd = kd
        self.swing_starti = starti

    def set_turn_exit_conditions(self, settle_error, settle_time, timeout):
        self.turn_settle_error = settle_error
        self.turn_settle_time = settle_time
        self.turn_timeout = timeout

    def set_drive_exit_conditions(self, settle_error, settle_time, timeout):
        self.drive_settle_error = settle_error
        self.drive_settle_time = settle_time
        self.drive_timeout = timeout

    def set_swing_exit_conditions(self, settle_error, settle_time, timeout):
        self.swing_settle_error = settle_error
        self.swing_settle_time = settle_time
        self.swing_timeout = timeout

    def get_absolute_heading(self):
        """Scale-corrected gyro heading in [0, 360)."""
        return reduce_0_to_360(self.gyro.rotation() * 360.0 / self.gyro_scale)

    def get_left_position_in(self):
        return self.left.position() * self.drive_in_to_deg_ratio

    def get_right_position_in(self):
        return self.right.position() * self.drive_in_to_deg_ratio

    def drive_stop(self, mode):
        """Stop both sides with the given brake mode."""
        self.left.stop(mode)
        self.right.stop(mode)

    def _heading_error(self, angle):
        return reduce_negative_180_to_180(angle - self.get_absolute_heading())

    def turn_to_angle(
        self,
        angle,
        max_voltage=None,
        settle_error=None,
        settle_time=None,
        timeout=None,
        kp=None,
        ki=None,
        kd=None,
        starti=None,
    ):
        """Turn in place to a field-centric angle, whichever way is shorter."""
        max_voltage = _pick(max_voltage, self.turn_max_voltage)
        turn_pid = PID(
            self._heading_error(angle),
            _pick(kp, self.turn_kp),
            _pick(ki, self.turn_ki),
            _pick(kd, self.turn_kd),
            _pick(starti, self.turn_starti),
            _pick(settle_error, self.turn_settle_error),
            _pick(settle_time, self.turn_settle_time),
            _pick(timeout, self.turn_timeout),
        )
        while not turn_pid.is_settled():
            output = turn_pid.compute(self._heading_error(angle))
            output = clamp(output, -max_voltage, max_voltage)
            self.drive_with_voltage(output, -output)
            self._sleep(LOOP_PERIOD_MS)

    def drive_distance(
        self,
        distance,
        heading=None,
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
        """Drive a distance in inches while holding a heading (the current one by default)."""
        heading = _pick(heading, self.get_absolute_heading())
        drive_max_voltage = _pick(drive_max_voltage, self.drive_max_voltage)
        heading_max_voltage = _pick(heading_max_voltage, self.heading_max_voltage)
        drive_pid = PID(
            distance,
            _pick(drive_kp, self.drive_kp),
            _pick(drive_ki, self.drive_ki),
            _pick(drive_kd, self.drive_kd),
            _pick(drive_starti, self.drive_starti),
            _pick(drive_settle_error, self.drive_settle_error),
            _pick(drive_settle_time, self.drive_settle_time),
            _pick(drive_timeout, self.drive_timeout),
        )
        heading_pid = PID(
            self._heading_error(heading),
            _pick(heading_kp, self.heading_kp),
            _pick(heading_ki, self.heading_ki),
            _pick(heading_kd, self.heading_kd),
            _pick(heading_starti, self.heading_starti),
        )
        start = (self.get_left_position_in() + self.get_right_position_in()) / 2.0
        while not drive_pid.is_settled():
            average = (self.get_left_position_in() + self.get_right_position_in()) / 2.0
            drive_error = distance + start - average
            drive_output = drive_pid.compute(drive_error)
            heading_output = heading_pid.compute(self._heading_error(heading))

            drive_output = clamp(drive_output, -drive_max_voltage, drive_max_voltage)
            heading_output = clamp(heading_output, -heading_max_voltage, heading_max_voltage)

            self.drive_with_voltage(drive_output + heading_output, drive_output - heading_output)
            self._sleep(LOOP_PERIOD_MS)

    def _swing_pid(self, angle, settle_error, settle_time, timeout, kp, ki, kd, starti):
        return PID(
            self._heading_error(angle),
            _pick(kp, self.swing_kp),
            _pick(ki, self.swing_ki),
            _pick(kd, self.swing_kd),
            _pick(starti, self.swing_starti),
            _pick(settle_error, self.swing_settle_error),
            _pick(settle_time, self.swing_settle_time),
            _pick(timeout, self.swing_timeout),
        )

    def left_swing_to_angle(
        self,
        angle,
        max_voltage=None,
        settle_error=None,
        settle_time=None,
        timeout=None,
        kp=None,
        ki=None,
        kd=None,
        starti=None,
    ):
        """Turn to an angle driving only the left side; without a limit the turn voltage applies."""
        limit = _pick(max_voltage, self.turn_max_voltage)
        swing_pid = self._swing_pid(angle, settle_error, settle_time, timeout, kp, ki, kd, starti)
        while not swing_pid.is_settled():
            output = swing_pid.compute(self._heading_error(angle))
            output = clamp(output, -limit, limit)
            self.left.spin(Direction.FORWARD, output)
            self.right.stop(BrakeMode.HOLD)
            self._sleep(LOOP_PERIOD_MS)

    def right_swing_to_angle(
        self,
        angle,
        max_voltage=None,
        settle_error=None,
        settle_time=None,
        timeout=None,
        kp=None,
        ki=None,
        kd=None,
        starti=None,
    ):
        """Turn to an angle driving only the right side; without a limit the turn voltage applies."""
        limit = _pick(max_voltage, self.turn_max_voltage)
        swing_pid = self._swing_pid(angle, settle_error, settle_time, timeout, kp, ki, kd, starti)
        while not swing_pid.is_settled():
            output = swing_pid.compute(self._heading_error(angle))
            output = clamp(output, -limit, limit)
            self.right.spin(Direction.REVERSE, output)
            self.left.stop(BrakeMode.HOLD)
            self._sleep(LOOP_PERIOD_MS)

    def get_forward_tracker_position(self):
        """Forward tracker distance in inches, per the drive setup."""
        if self.drive_setup in _FORWARD_FROM_DRIVE:
            return self.get_right_position_in()
        if self.forward_tracker is None:
            raise RuntimeError("no forward tracker configured")
        return self.forward_tracker.position() * self.forward_tracker_in_to_deg_ratio

    def get_sideways_tracker_position(self):
        """Sideways tracker distance in inches, or 0 for setups without one."""
        if self.drive_setup in _FORWARD_ONLY:
            return 0.0
        if self.sideways_tracker is None:
            raise RuntimeError("no sideways tracker configured")
        return self.sideways_tracker.position() * self.sideways_tracker_in_to_deg_ratio

    def set_heading(self, orientation_deg):
        """Tell the gyro which way the robot is facing."""
        self.gyro.set_rotation(orientation_deg * self.gyro_scale / 360.0)

    def set_coordinates(self, x_position, y_position, orientation_deg):
        """Reset the pose and start background position tracking."""
        self.odom.set_position(
            x_position,
            y_position,
            orientation_deg,
            self.get_forward_tracker_position(),
            self.get_sideways_tracker_position(),
        )
        self.set_heading(orientation_deg)
        self.start_tracking()

    def track_once(self):
        """Update odometry from the current sensor readings."""
        self.odom.update_position(
            self.get_forward_tracker_position(),
            self.get_sideways_tracker_position(),
            self.get_absolute_heading(),
        )

    def _track_loop(self, stop):
        while not stop.is_set():
            self.track_once()
            stop.wait(TRACKING_PERIOD_S)

    @property
    def tracking(self):
        """Whether background tracking is running."""
        return self._tracking is not None

    def start_tracking(self):
        """Run track_once in a background thread, replacing any running one."""
        self.stop_tracking()
        stop = threading.Event()
        thread = threading.Thread(target=self._track_loop, args=(stop,), daemon=True)
        self._tracking = (thread, stop)
        thread.start()

    def stop_tracking(self):
        """Stop background tracking if it is running."""
        if self._tracking is None:
            return
        thread, stop = self._tracking
        self._tracking = None
        stop.set()
        thread.join()

    def get_x_position(self):
        return self.odom.x_position

    def get_y_position(self):
        return self.odom.y_position

    def control_arcade(self, controller):
        """Left stick throttle and right stick turn, both cubically curved."""
        throttle = deadband(controller.axis("axis3"), JOYSTICK_DEADBAND)
        turn = deadband(controller.axis("axis1"), JOYSTICK_DEADBAND)
        curved_turn = turn ** 3 * 0.0001
        curved_throttle = throttle ** 3 * 0.0001
        self.left.spin(Direction.FORWARD, to_volt(curved_throttle + curved_turn))
        self.right.spin(Direction.FORWARD, to_volt(curved_throttle - curved_turn))

    def control_tank(self, controller):
        """Left stick drives the left side, right stick the right side."""
        left_throttle = deadband(controller.axis("axis3"), JOYSTICK_DEADBAND)
        right_throttle = deadband(controller.axis("axis2"), JOYSTICK_DEADBAND)
        self.left.spin(Direction.FORWARD, to_volt(left_throttle))
        self.right.spin(Direction.FORWARD, to_volt(right_throttle))

    def holonomic_motors(self):
        """The four corner motors (left front, right front, left back, right back)."""
        motors = (self.left_front, self.right_front, self.left_back, self.right_back)
        if any(motor is None for motor in motors):
            raise RuntimeError("holonomic control needs all four corner motors")
        return motors

    def control_holonomic(self, controller):
        """Left stick throttle and strafe, right stick turn."""
        left_front, right_front, left_back, right_back = self.holonomic_motors()
        throttle = deadband(controller.axis("axis3"), JOYSTICK_DEADBAND)
        turn = deadband(controller.axis("axis1"), JOYSTICK_DEADBAND)
        strafe = deadband(controller.axis("axis4"), JOYSTICK_DEADBAND)
        left_front.spin(Direction.FORWARD, to_volt(throttle + turn + strafe))
        right_front.spin(Direction.FORWARD, to_volt(throttle - turn - strafe))
        left_back.spin(Direction.FORWARD, to_volt(throttle + turn - strafe))
        right_back.spin(Direction.FORWARD, to_volt(throttle - turn + strafe))