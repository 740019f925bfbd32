import pytest

from phoenixbot.devices import Devices, build_chassis, create_devices
from phoenixbot.drive import DriveSetup


def test_create_devices_attaches_tank_chassis():
    devices = create_devices()
    assert devices.chassis.drive_setup is DriveSetup.TANK_ONE_FORWARD_ROTATION


def test_drive_motor_reversal_matches_configuration():
    devices = create_devices()
    reversed_flags = [m.reversed for m in (devices.fld, devices.mld, devices.bld,
                                           devices.frd, devices.mrd, devices.brd)]
    assert reversed_flags == [False, True, True, True, False, False]
    assert devices.hooks.reversed is True
    assert devices.intake.reversed is False
    assert devices.lb.reversed is False


def test_chassis_uses_device_motors_and_gyro():
    devices = create_devices()
    chassis = devices.chassis
    assert chassis.left.motors == [devices.fld, devices.mld, devices.bld]
    assert chassis.right.motors == [devices.frd, devices.mrd, devices.brd]
    assert chassis.gyro is devices.inertial


def test_chassis_heading_follows_inertial():
    devices = create_devices()
    devices.inertial.set_rotation(450)
    assert devices.chassis.get_absolute_heading() == pytest.approx(90)


def test_forward_tracker_reads_vertical_odom_linearly():
    devices = create_devices()
    devices.vertical_odom.angle_deg = 180
    half = devices.chassis.get_forward_tracker_position()
    devices.vertical_odom.angle_deg = 360
    full = devices.chassis.get_forward_tracker_position()
    assert full == pytest.approx(2 * half)
    assert half > 0


def test_sideways_tracker_is_zero_for_forward_only_setup():
    devices = create_devices()
    assert devices.chassis.get_sideways_tracker_position() == 0.0


def test_odom_uses_forward_center_distance_only():
    devices = create_devices()
    assert devices.chassis.odom.forward_center_distance == 7
    assert devices.chassis.odom.sideways_center_distance == 0.0


def test_build_chassis_passes_sleep_through():
    calls = []
    devices = Devices()
    chassis = build_chassis(devices, calls.append)
    chassis.set_turn_constants(12, 0.45, 0.015, 5, 15)
    chassis.set_turn_exit_conditions(1, 300, 30)
    chassis.turn_to_angle(90)
    assert calls
    assert all(ms == 10 for ms in calls)


def test_left_position_scales_with_motor_position():
    devices = create_devices()
    devices.fld.set_position(100)
    first = devices.chassis.get_left_position_in()
    devices.fld.set_position(200)
    assert devices.chassis.get_left_position_in() == pytest.approx(2 * first)


def test_separate_devices_do_not_share_state():
    first = create_devices()
    second = create_devices()
    first.p_mogo.set(True)
    assert second.p_mogo.value is False
    assert first.p_mogo.value is True