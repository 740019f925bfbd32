"""Autonomous routines, their tuning constants and the color-sorting task."""

import threading

from phoenixbot.hardware import BrakeMode, Color, Direction

COLOR_SORT_EJECT_MS = 350
COLOR_SORT_PERIOD_S = 0.002
HOOKS_MAX_RPM = 600
DEGREES_PER_REV = 360


def default_constants(chassis):
    """Reset the chassis to the default motion constants and exit conditions."""
    chassis.set_drive_constants(10, 1.5, 5, 7.5, 0)
    chassis.set_heading_constants(6, 0.3, 0, 0, 0)
    chassis.set_turn_constants(12, 0.45, 0.015, 5, 15)
    chassis.set_swing_constants(12, 0.45, 0.015, 5, 15)

    chassis.set_drive_exit_conditions(1.5, 300, 600)
    chassis.set_turn_exit_conditions(1, 300, 600)
    chassis.set_swing_exit_conditions(1, 300, 750)


def odom_constants(chassis):
    """Default constants tuned for odometry moves: slower, looser settling."""
    default_constants(chassis)
    chassis.heading_max_voltage = 10
    chassis.drive_max_voltage = 8
    chassis.drive_settle_error = 3
    chassis.boomerang_lead = 0.5
    chassis.drive_min_voltage = 0


def _wait(devices, ms):
    devices.chassis.sleep(ms)


def _run_steps(devices, steps):
    """Run each step of a routine, in order, against the devices."""
    for step in steps:
        step(devices)


# Routines that have no moves planned yet; each runs its steps in order.
_LEFT2STAKE_STEPS = ()
_SKILLS_STEPS = ()


def color_sort_step(devices, reject_color, active=True):
    """Run one color-sort check; return True if a ring was ejected."""
    if not active:
        return False
    optical = devices.color_sort_optical
    if optical.is_near_object():
        if optical.color() == reject_color:
            devices.p_color_sort.set(True)
            _wait(devices, COLOR_SORT_EJECT_MS)
            devices.p_color_sort.set(False)
            return True
    else:
        devices.p_color_sort.set(False)
    return False


def color_sort_task(devices, reject_color, stop):
    """Eject rings of reject_color until the stop event is set."""
    while not stop.is_set():
        color_sort_step(devices, reject_color, True)
        stop.wait(COLOR_SORT_PERIOD_S)


def _start_color_sort(devices, reject_color):
    stop = threading.Event()
    threading.Thread(
        target=color_sort_task, args=(devices, reject_color, stop), daemon=True
    ).start()
    return stop


def blue4ring(devices):
    """Red negative side, one plus four."""
    chassis = devices.chassis
    chassis.drive_distance(-2)
    chassis.right_swing_to_angle(-40)
    devices.lb.spin_for(-500)
    chassis.drive_distance(-5)
    devices.lb.spin_for(600)
    chassis.right_swing_to_angle(-20)
    chassis.drive_distance(-17, -15, 8, 6)
    chassis.drive_distance(-14, -15, 5, 6)
    chassis.drive_stop(BrakeMode.HOLD)
    devices.p_mogo.set(True)
    chassis.turn_to_angle(135)
    chassis.drive_distance(9)
    devices.intake.spin(Direction.REVERSE)
    devices.hooks.spin(Direction.REVERSE)
    chassis.drive_distance(26, 90, 7, 6)
    chassis.drive_distance(10, 90, 7, 6)
    chassis.drive_distance(-14)
    chassis.right_swing_to_angle(0)
    chassis.drive_distance(15)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 600)
    chassis.turn_to_angle(-65)
    devices.p_intake.set(True)
    chassis.drive_distance(25)
    chassis.drive_distance(17, -65, 7, 6)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 300)
    devices.p_intake.set(False)
    chassis.turn_to_angle(-180)
    chassis.drive_distance(10)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 300)
    devices.lb.spin_for(-500)


def red4ring(devices):
    """Blue negative side, one plus four (experimental)."""
    chassis = devices.chassis
    chassis.drive_distance(-2)
    chassis.left_swing_to_angle(40)
    devices.lb.spin_for(-500)
    chassis.drive_distance(-5)
    devices.lb.spin_for(600)
    chassis.right_swing_to_angle(-20)
    chassis.drive_distance(-17, 15, 8, 6)
    chassis.drive_distance(-14, 15, 5, 6)
    chassis.drive_stop(BrakeMode.HOLD)
    devices.p_mogo.set(True)
    chassis.turn_to_angle(-135)
    chassis.drive_distance(9)
    devices.intake.spin(Direction.REVERSE)
    devices.hooks.spin(Direction.REVERSE)
    chassis.drive_distance(26, -90, 7, 6)
    chassis.drive_distance(10, -90, 7, 6)
    chassis.drive_distance(-14)
    chassis.right_swing_to_angle(0)
    chassis.drive_distance(15)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 600)
    chassis.turn_to_angle(65)
    devices.p_intake.set(True)
    chassis.drive_distance(25)
    chassis.drive_distance(17, 65, 7, 6)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 300)
    devices.p_intake.set(False)
    chassis.turn_to_angle(180)
    chassis.drive_distance(10)
    chassis.drive_stop(BrakeMode.HOLD)
    _wait(devices, 300)
    devices.lb.spin_for(-500)


def right2stake(devices):
    """Color-sort test run; returns the stop event of the sorting task it starts."""
    stop = _start_color_sort(devices, Color.RED)
    devices.p_mogo.set(True)
    devices.hooks.set_velocity(500 / HOOKS_MAX_RPM * 100)
    devices.hooks.spin(Direction.REVERSE)
    devices.intake.spin(Direction.REVERSE)
    return stop


def left2stake(devices):
    """Red negative v2: runs its planned steps, of which there are none yet."""
    _run_steps(devices, _LEFT2STAKE_STEPS)


def blue_SAWP(devices):
    """Red goal rush v2; returns the stop event of the sorting task it starts."""
    chassis = devices.chassis
    stop = _start_color_sort(devices, Color.BLUE)
    devices.intake.spin(Direction.REVERSE)
    chassis.drive_distance(40.25, -27, 10, 6, 1.5, 300, 900)
    chassis.drive_stop(BrakeMode.HOLD)
    chassis.turn_to_angle(19)
    devices.lb.spin_for(-600)
    chassis.drive_distance(3)
    chassis.turn_to_angle(120)
    devices.lb.spin_for(-100)
    chassis.turn_to_angle(60)
    chassis.drive_distance(-18, 60, 6, 6)
    chassis.drive_stop(BrakeMode.COAST)
    _wait(devices, 200)
    devices.p_mogo.set(True)
    _wait(devices, 175)
    devices.hooks.spin(Direction.REVERSE)
    _wait(devices, 200)
    devices.lb.spin_for(825)
    devices.hooks.stop()
    devices.intake.stop()
    chassis.turn_to_angle(110)
    devices.p_doinker2.set(True)
    chassis.drive_distance(55, 135, 10, 6, 1.5, 300, 1200)
    chassis.turn_to_angle(30)
    devices.p_doinker2.set(False)
    devices.intake.spin(Direction.FORWARD)
    _wait(devices, 100)
    devices.intake.spin(Direction.REVERSE)
    devices.hooks.spin(Direction.REVERSE)
    chassis.drive_distance(30)
    chassis.drive_stop(BrakeMode.HOLD)
    return stop


def red_SAWP(devices):
    """Blue goal rush v2; returns the stop event of the sorting task it starts."""
    chassis = devices.chassis
    stop = _start_color_sort(devices, Color.RED)
    devices.intake.spin(Direction.REVERSE)
    chassis.drive_distance(39, 27, 10, 6, 1.5, 300, 900)
    chassis.drive_stop(BrakeMode.HOLD)
    chassis.turn_to_angle(-21)
    devices.lb.spin_for(-600)
    chassis.drive_distance(3)
    chassis.turn_to_angle(-120)
    devices.lb.spin_for(-100)
    chassis.turn_to_angle(-45)
    chassis.drive_distance(-18, -65, 6, 6)
    chassis.drive_stop(BrakeMode.COAST)
    _wait(devices, 200)
    devices.p_mogo.set(True)
    _wait(devices, 175)
    devices.hooks.spin(Direction.REVERSE)
    _wait(devices, 200)
    devices.lb.spin_for(825)
    devices.hooks.stop()
    devices.intake.stop()
    chassis.turn_to_angle(-110)
    devices.p_doinker.set(True)
    chassis.drive_distance(55, -135, 10, 6, 1.5, 300, 1200)
    chassis.turn_to_angle(-30)
    devices.p_doinker.set(False)
    devices.intake.spin(Direction.FORWARD)
    _wait(devices, 100)
    devices.intake.spin(Direction.REVERSE)
    devices.hooks.spin(Direction.REVERSE)
    chassis.drive_distance(30)
    chassis.drive_stop(BrakeMode.HOLD)
    return stop


def _safe_routine(devices, doinker, sign):
    chassis = devices.chassis
    devices.hooks.set_velocity(100)
    doinker.set(True)
    devices.intake.spin(Direction.REVERSE)
    chassis.turn_to_angle(sign * 20)
    chassis.drive_distance(33)
    _wait(devices, 200)
    doinker.set(False)
    _wait(devices, 400)
    chassis.drive_distance(-14)
    _wait(devices, 200)
    doinker.set(True)
    _wait(devices, 200)
    chassis.drive_distance(-3)
    doinker.set(False)
    chassis.turn_to_angle(sign * 190)
    chassis.drive_distance(-18, sign * 190, 6, 6)
    _wait(devices, 400)
    devices.p_mogo.set(True)
    _wait(devices, 200)
    chassis.drive_distance(9)
    chassis.drive_stop(BrakeMode.HOLD)
    devices.hooks.spin_for(-1.5 * DEGREES_PER_REV)
    _wait(devices, 200)
    chassis.turn_to_angle(0)
    chassis.drive_distance(-10)
    _wait(devices, 200)
    devices.p_mogo.set(False)
    devices.intake.stop(BrakeMode.COAST)
    _wait(devices, 400)
    chassis.turn_to_angle(sign * 270)
    chassis.drive_distance(-15)
    chassis.drive_distance(-12, sign * 270, 4, 6)
    _wait(devices, 600)
    devices.p_mogo.set(True)
    chassis.drive_stop(BrakeMode.HOLD)
    devices.hooks.spin(Direction.REVERSE)
    _wait(devices, 500)
    chassis.turn_to_angle(sign * 220)
    chassis.drive_distance(30)


def left_safe(devices):
    """Goal rush v1 from the left, using the first doinker."""
    _safe_routine(devices, devices.p_doinker, 1)


def right_safe(devices):
    """Goal rush v1 from the right, using the second doinker."""
    _safe_routine(devices, devices.p_doinker2, -1)


def skills(devices):
    """Skills run: runs its planned steps, of which there are none yet."""
    _run_steps(devices, _SKILLS_STEPS)