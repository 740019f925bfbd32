import math

import pytest

from phoenixbot.util import (
    clamp,
    clamp_min_voltage,
    deadband,
    is_line_settled,
    is_reversed,
    left_voltage_scaling,
    reduce_0_to_360,
    reduce_negative_180_to_180,
    reduce_negative_90_to_90,
    right_voltage_scaling,
    to_deg,
    to_port,
    to_rad,
    to_volt,
)

ANGLES = [-1080.5, -725.0, -360.0, -180.0, -90.0, -0.25, 0.0, 45.5, 90.0, 179.9, 180.0, 359.9, 360.0, 721.0]


def _is_multiple(value, period):
    turns = value / period
    return math.isclose(turns, round(turns), abs_tol=1e-9)


@pytest.mark.parametrize("angle", ANGLES)
def test_reduce_0_to_360_range_and_equivalence(angle):
    result = reduce_0_to_360(angle)
    assert 0 <= result < 360
    assert _is_multiple(result - angle, 360)


@pytest.mark.parametrize("angle", ANGLES)
def test_reduce_negative_180_to_180_range_and_equivalence(angle):
    result = reduce_negative_180_to_180(angle)
    assert -180 <= result < 180
    assert _is_multiple(result - angle, 360)


@pytest.mark.parametrize("angle", ANGLES)
def test_reduce_negative_90_to_90_range_and_equivalence(angle):
    result = reduce_negative_90_to_90(angle)
    assert -90 <= result < 90
    assert _is_multiple(result - angle, 180)


def test_reduce_keeps_in_range_angles():
    assert reduce_0_to_360(45.5) == 45.5
    assert reduce_negative_180_to_180(-179.0) == -179.0
    assert reduce_negative_90_to_90(89.0) == 89.0


def test_reduce_upper_bound_wraps_to_lower_bound():
    assert reduce_0_to_360(360.0) == 0
    assert reduce_negative_180_to_180(180.0) == -180
    assert reduce_negative_90_to_90(90.0) == -90


def test_radian_conversion():
    assert to_rad(180) == pytest.approx(math.pi)
    assert to_deg(math.pi) == pytest.approx(180)


@pytest.mark.parametrize("angle", [-270.0, -1.5, 0.0, 33.3, 720.0])
def test_degree_radian_round_trip(angle):
    assert to_deg(to_rad(angle)) == pytest.approx(angle)


def test_clamp():
    assert clamp(15, -12, 12) == 12
    assert clamp(-15, -12, 12) == -12
    assert clamp(3.5, -12, 12) == 3.5


def test_is_reversed():
    assert is_reversed(-2) is True
    assert is_reversed(2) is False
    assert is_reversed(0) is False


def test_to_volt():
    assert to_volt(100) == pytest.approx(12)
    assert to_volt(-100) == pytest.approx(-12)
    assert to_volt(0) == 0


@pytest.mark.parametrize("port", range(1, 9))
def test_to_port_valid(port):
    assert to_port(port) == port - 1


@pytest.mark.parametrize("port", [0, -3, 9, 22])
def test_to_port_invalid_falls_back(port):
    assert to_port(port) == 0


def test_deadband():
    assert deadband(3, 5) == 0
    assert deadband(-4.9, 5) == 0
    assert deadband(5, 5) == 5
    assert deadband(-7, 5) == -7


def test_is_line_settled():
    assert is_line_settled(0, 10, 0, 0, 5) is False
    assert is_line_settled(0, 10, 0, 0, 12) is True
    assert is_line_settled(0, 10, 0, 0, 10) is True
    assert is_line_settled(10, 0, 90, 4, 0) is False
    assert is_line_settled(10, 0, 90, 11, 0) is True


def test_voltage_scaling_passes_small_outputs():
    drive, heading = 6.0, 2.0
    left = left_voltage_scaling(drive, heading)
    right = right_voltage_scaling(drive, heading)
    assert left == pytest.approx(drive + heading)
    assert right == pytest.approx(drive - heading)


@pytest.mark.parametrize("drive,heading", [(12.0, 6.0), (-20.0, 3.0), (8.0, -9.0)])
def test_voltage_scaling_limits_and_keeps_ratio(drive, heading):
    left = left_voltage_scaling(drive, heading)
    right = right_voltage_scaling(drive, heading)
    assert max(abs(left), abs(right)) == pytest.approx(12)
    assert left * (drive - heading) == pytest.approx(right * (drive + heading))


def test_clamp_min_voltage():
    assert clamp_min_voltage(0.5, 3) == 3
    assert clamp_min_voltage(-0.5, 3) == -3
    assert clamp_min_voltage(0, 3) == 0
    assert clamp_min_voltage(5, 3) == 5
    assert clamp_min_voltage(-5, 3) == -5