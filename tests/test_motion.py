import math

import pytest

from phoenixbot.drive import Drive, DriveSetup
from phoenixbot.hardware import Gyro, Motor, MotorGroup
from phoenixbot.motion import drive_to_point, drive_to_pose


class Simulator:
    """Moves the robot in proportion to the commanded side voltages on every sleep."""

    def __init__(self, frozen=False):
        self.ticks = 0
        self.frozen = frozen
        self.drive = None
        self.on_tick = None

    def __call__(self, ms):
        self.ticks += 1
        if self.on_tick is not None:
            self.on_tick(self)
        if self.frozen:
            return
        left = self.drive.left.motors[0].voltage
        right = self.drive.right.motors[0].voltage
        self.drive.gyro.rotation_deg += (left - right) * 0.5
        heading = math.radians(self.drive.get_absolute_heading())
        speed = (left + right) / 2 * 0.05
        self.drive.odom.x_position += speed * math.sin(heading)
        self.drive.odom.y_position += speed * math.cos(heading)


def make_drive(sim, timeout=5000):
    drive = Drive(
        DriveSetup.ZERO_TRACKER_NO_ODOM,
        MotorGroup(Motor()),
        MotorGroup(Motor()),
        Gyro(),
        3.25,
        1.0,
        360,
        sleep=sim,
    )
    drive.set_drive_constants(8, 1.5, 0, 0, 0)
    drive.set_heading_constants(6, 0.3, 0, 0, 0)
    drive.set_drive_exit_conditions(1.5, 300, timeout)
    drive.drive_min_voltage = 0
    drive.boomerang_lead = 0.5
    drive.boomerang_setback = 0
    sim.drive = drive
    return drive


def test_drive_to_point_straight_ahead_reaches_target():
    sim = Simulator()
    drive = make_drive(sim)
    drive_to_point(drive, 0, 24)
    assert drive.get_y_position() == pytest.approx(24, abs=1.5)
    assert drive.get_x_position() == pytest.approx(0, abs=0.01)


def test_drive_to_point_sideways_target_reaches_target():
    sim = Simulator()
    drive = make_drive(sim)
    drive_to_point(drive, 24, 0)
    distance = math.hypot(24 - drive.get_x_position(), 0 - drive.get_y_position())
    assert distance < 2.0


def test_drive_to_point_times_out_when_robot_cannot_move():
    sim = Simulator(frozen=True)
    drive = make_drive(sim, timeout=200)
    drive_to_point(drive, 0, 24)
    assert sim.ticks * 10 > 200
    assert (sim.ticks - 1) * 10 <= 200


def test_drive_to_point_stationary_robot_gets_capped_voltage():
    sim = Simulator(frozen=True)
    drive = make_drive(sim, timeout=50)
    drive_to_point(drive, 0, 24)
    assert drive.left.motors[0].voltage == pytest.approx(8)
    assert drive.right.motors[0].voltage == pytest.approx(8)


def test_drive_to_point_breaks_when_crossing_line():
    sim = Simulator(frozen=True)
    drive = make_drive(sim)

    def teleport(s):
        s.drive.odom.y_position = 30

    sim.on_tick = teleport
    drive_to_point(drive, 0, 24)
    assert sim.ticks == 1


def test_drive_to_point_min_voltage_applies():
    sim = Simulator(frozen=True)
    drive = make_drive(sim, timeout=20)
    drive.set_drive_constants(8, 0.01, 0, 0, 0)
    drive_to_point(drive, 0, 24, 5)
    assert drive.left.motors[0].voltage == pytest.approx(5)


def test_drive_to_pose_straight_reaches_target():
    sim = Simulator()
    drive = make_drive(sim)
    drive_to_pose(drive, 0, 24, 0)
    assert drive.get_y_position() == pytest.approx(24, abs=1.5)
    assert drive.get_x_position() == pytest.approx(0, abs=0.01)


def test_drive_to_pose_times_out_with_default_timeout():
    sim = Simulator(frozen=True)
    drive = make_drive(sim, timeout=100)
    drive_to_pose(drive, 0, 24, 0)
    assert sim.ticks * 10 > 100
    assert (sim.ticks - 1) * 10 <= 100


def test_drive_to_pose_explicit_timeout_overrides_default():
    sim = Simulator(frozen=True)
    drive = make_drive(sim, timeout=5000)
    drive_to_pose(drive, 0, 24, 0, 0.5, 0, 0, 8, 6, 1.5, 300, 60)
    assert sim.ticks * 10 > 60
    assert (sim.ticks - 1) * 10 <= 60


def test_drive_to_pose_breaks_when_crossing_line():
    sim = Simulator(frozen=True)
    drive = make_drive(sim)

    def teleport(s):
        s.drive.odom.y_position = 30

    sim.on_tick = teleport
    drive_to_pose(drive, 0, 24, 0)
    assert sim.ticks == 1