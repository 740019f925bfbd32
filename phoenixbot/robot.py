"""Competition flow: auton selection, autonomous dispatch and driver control."""

from phoenixbot.autons import (
    blue4ring,
    blue_SAWP,
    default_constants,
    left2stake,
    left_safe,
    red4ring,
    red_SAWP,
    right2stake,
    right_safe,
    skills,
)
from phoenixbot.hardware import BrakeMode, Direction

ROBOT_TITLE = "7686X Phoenix Rising"
DEFAULT_AUTON = 2
DRIVER_LOOP_MS = 20
TOGGLE_DEBOUNCE_MS = 200
HOLD_PAUSE_MS = 10
LADY_BROWN_PERIOD_MS = 20
LADY_BROWN_GEAR_RATIO = 3
DEGREES_PER_REV = 360

AUTONS = (
    ("Red Neg 1+4", blue4ring),
    ("Blue Neg 1+4", right2stake),
    ("Red Negative 1+4", left2stake),
    ("Red Goal Rush", blue_SAWP),
    ("Blue Goal Rush", red_SAWP),
    ("Red 4 Ring", red4ring),
    ("Skills", skills),
    ("Left Safe", left_safe),
    ("Right Safe", right_safe),
)


class LadyBrownPID:
    """Position controller that drives the lady brown arm toward a fixed target.

    The arm angle is the rotation sensor reading divided by the gear ratio.
    The previous error is never advanced, so the derivative term acts on the
    raw error of each step.
    """

    def __init__(self, target_position=-38.0, kp=0.095, ki=0.0, kd=0.015):
        self.target_position = target_position
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.error = 0.0
        self.previous_error = 0.0
        self.integral = 0.0
        self.derivative = 0.0
        self.current_position = 0.0
        self.power = 0.0

    def step(self, rotation_degrees):
        """Return the arm voltage for the given rotation sensor reading in degrees."""
        self.current_position = rotation_degrees / LADY_BROWN_GEAR_RATIO
        self.error = self.target_position - self.current_position
        self.integral += self.error
        self.derivative = self.error - self.previous_error
        self.power = self.kp * self.error + self.ki * self.integral + self.kd * self.derivative
        return self.power


class Robot:
    """Ties the devices and chassis to the pre-auton, autonomous and driver phases."""

    def __init__(self, devices):
        if devices.chassis is None:
            raise ValueError("devices need a chassis")
        self.devices = devices
        self.current_auton_selection = DEFAULT_AUTON
        self.auto_started = False
        self.spin_hooks = False
        self.mogo_state = False
        self.doinker_state1 = False
        self.doinker_state2 = False
        self.battery_percent = 100
        self.lady_brown = LadyBrownPID()
        self._usercontrol_started = False

    def _wait(self, ms):
        self.devices.chassis.sleep(ms)

    def pre_auton_setup(self):
        """Load default constants and prepare the mechanisms for the match."""
        d = self.devices
        default_constants(d.chassis)
        d.lb.set_velocity(100)
        d.lb.set_max_torque(100)
        d.intake.set_velocity(100)
        d.intake.set_max_torque(100)
        d.hooks.set_velocity(90)
        d.hooks.set_max_torque(100)
        d.lady_rotation.set_position(0)
        d.color_sort_optical.set_light(True)

    def selected_auton_name(self):
        """Name of the selected routine, or None if the selection is out of range."""
        if 0 <= self.current_auton_selection < len(AUTONS):
            return AUTONS[self.current_auton_selection][0]
        return None

    def select_next_auton(self):
        """Advance the selection, wrapping after the last routine; return the new index."""
        self.current_auton_selection = (self.current_auton_selection + 1) % len(AUTONS)
        return self.current_auton_selection

    def status_lines(self):
        """Lines shown on the brain screen while waiting for the match."""
        lines = [
            ROBOT_TITLE,
            "Battery Percentage:",
            f"{self.battery_percent:d}",
            "Chassis Heading Reading:",
            f"{self.devices.chassis.get_absolute_heading():f}",
            "Selected Auton:",
        ]
        name = self.selected_auton_name()
        if name is not None:
            lines.append(name)
        lines.append(f"{self.devices.lady_rotation.position() / DEGREES_PER_REV:f}")
        return lines

    def autonomous(self):
        """Run the selected routine and return whatever it returns."""
        self.auto_started = True
        if not 0 <= self.current_auton_selection < len(AUTONS):
            return None
        _, routine = AUTONS[self.current_auton_selection]
        return routine(self.devices)

    def _intake_step(self, controller):
        d = self.devices
        direction = None
        if controller.pressing("l1"):
            direction = Direction.FORWARD
        elif controller.pressing("r1"):
            direction = Direction.REVERSE
        if direction is None:
            d.intake.stop()
            d.hooks.stop()
        elif not self.spin_hooks:
            d.intake.stop(BrakeMode.HOLD)
            d.hooks.stop(BrakeMode.HOLD)
            self._wait(HOLD_PAUSE_MS)
        else:
            d.intake.spin(direction)
            d.hooks.spin(direction)

    def _toggle(self, controller, button, attribute, output):
        if controller.pressing(button):
            state = not getattr(self, attribute)
            setattr(self, attribute, state)
            output.set(state)
            self._wait(TOGGLE_DEBOUNCE_MS)

    def _lady_brown_step(self, controller):
        lb = self.devices.lb
        if controller.pressing("r2"):
            lb.spin(Direction.REVERSE)
        elif controller.pressing("x"):
            lb.spin(Direction.FORWARD)
        elif controller.pressing("y"):
            power = self.lady_brown.step(self.devices.lady_rotation.position())
            lb.spin(Direction.FORWARD, power)
            self._wait(LADY_BROWN_PERIOD_MS)
        elif not controller.pressing("r2") and not controller.pressing("l2"):
            lb.stop()
            lb.set_brake(BrakeMode.HOLD)

    def usercontrol_step(self):
        """Run one iteration of the driver-control loop."""
        d = self.devices
        controller = d.controller
        if not self._usercontrol_started:
            d.lady_rotation.set_position(0)
            self._usercontrol_started = True

        self._intake_step(controller)
        self._toggle(controller, "b", "mogo_state", d.p_mogo)
        self._toggle(controller, "left", "doinker_state1", d.p_doinker)
        self._toggle(controller, "right", "doinker_state2", d.p_doinker2)
        d.p_doinker2.set(controller.pressing("l2"))
        self._lady_brown_step(controller)
        d.chassis.control_arcade(controller)
        self._wait(DRIVER_LOOP_MS)