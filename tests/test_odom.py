import math

import pytest

from phoenixbot.odom import Odom


def _odom(orientation=0.0, forward=0.0, sideways=0.0):
    odom = Odom()
    odom.set_physical_distances(0, 0)
    odom.set_position(0, 0, orientation, forward, sideways)
    return odom


def test_set_position_stores_pose():
    odom = Odom()
    odom.set_position(3, -4, 45, 1.5, 2.5)
    assert (odom.x_position, odom.y_position, odom.orientation_deg) == (3, -4, 45)
    assert (odom.forward_position, odom.sideways_position) == (1.5, 2.5)


def test_forward_motion_at_zero_heading_moves_along_y():
    odom = _odom()
    odom.update_position(10, 0, 0)
    assert odom.x_position == pytest.approx(0, abs=1e-9)
    assert odom.y_position == pytest.approx(10)


def test_forward_motion_at_ninety_moves_along_x():
    odom = _odom(orientation=90)
    odom.update_position(10, 0, 90)
    assert odom.x_position == pytest.approx(10)
    assert odom.y_position == pytest.approx(0, abs=1e-9)


def test_sideways_motion_at_zero_heading_moves_along_x():
    odom = _odom()
    odom.update_position(0, 5, 0)
    assert odom.x_position == pytest.approx(5)
    assert odom.y_position == pytest.approx(0, abs=1e-9)


def test_deltas_are_relative_to_previous_reading():
    odom = _odom(forward=100)
    odom.update_position(104, 0, 0)
    assert odom.y_position == pytest.approx(4)
    assert odom.forward_position == 104


def test_no_motion_keeps_position():
    odom = _odom()
    odom.update_position(0, 0, 0)
    assert (odom.x_position, odom.y_position) == (0, 0)


def test_forward_and_back_returns_to_origin():
    odom = _odom(orientation=30)
    odom.update_position(10, 0, 30)
    odom.update_position(0, 0, 30)
    assert odom.x_position == pytest.approx(0, abs=1e-9)
    assert odom.y_position == pytest.approx(0, abs=1e-9)


def test_turn_in_place_with_offset_tracker_stays_put():
    center = 7.0
    odom = Odom()
    odom.set_physical_distances(center, 0)
    odom.set_position(0, 0, 0, 0, 0)
    odom.update_position(-center * math.pi / 2, 0, 90)
    assert odom.x_position == pytest.approx(0, abs=1e-9)
    assert odom.y_position == pytest.approx(0, abs=1e-9)
    assert odom.orientation_deg == 90


def test_quarter_arc_ends_at_corner():
    radius = 10.0
    odom = _odom()
    odom.update_position(radius * math.pi / 2, 0, 90)
    assert odom.x_position == pytest.approx(radius)
    assert odom.y_position == pytest.approx(radius)