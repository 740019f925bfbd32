"""In-memory models of the robot's motors, sensors and controller."""

from enum import Enum

from phoenixbot.util import MAX_VOLTAGE, clamp


class BrakeMode(Enum):
    COAST = "coast"
    BRAKE = "brake"
    HOLD = "hold"


class Direction(Enum):
    FORWARD = 1
    REVERSE = -1


class Color(Enum):
    NONE = "none"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    ORANGE = "orange"
    PURPLE = "purple"
    WHITE = "white"


class Motor:
    """A motor holding its commanded voltage, settings and encoder position in degrees."""

    def __init__(self, reversed_=False):
        self.reversed = reversed_
        self.voltage = 0.0
        self.spinning = False
        self.velocity_percent = 50.0
        self.max_torque_percent = 100.0
        self.brake_mode = BrakeMode.COAST
        self.stop_mode = BrakeMode.COAST
        self.position_deg = 0.0

    @property
    def output_voltage(self):
        """Voltage actually applied to the motor, after reversal."""
        return -self.voltage if self.reversed else self.voltage

    def spin(self, direction, voltage=None):
        """Spin at the given voltage, or at the set velocity when none is given."""
        if voltage is None:
            voltage = self.velocity_percent * MAX_VOLTAGE / 100.0
        self.voltage = direction.value * voltage
        self.spinning = True

    def stop(self, mode=None):
        """Stop with the given brake mode, or with the configured one."""
        self.voltage = 0.0
        self.spinning = False
        self.stop_mode = mode if mode is not None else self.brake_mode

    def position(self):
        return self.position_deg

    def set_position(self, degrees):
        self.position_deg = degrees

    def spin_for(self, degrees):
        """Turn the motor by a relative amount and leave it stopped."""
        self.position_deg += degrees
        self.stop()

    def set_velocity(self, percent):
        self.velocity_percent = clamp(percent, -100.0, 100.0)

    def set_max_torque(self, percent):
        self.max_torque_percent = clamp(percent, 0.0, 100.0)

    def set_brake(self, mode):
        self.brake_mode = mode


class MotorGroup:
    """Motors driven together; the group's position is that of its first motor."""

    def __init__(self, *args):
        if not args:
            raise ValueError("a motor group needs at least one motor")
        self.motors = list(args)

    def spin(self, direction, voltage=None):
        for motor in self.motors:
            motor.spin(direction, voltage)

    def stop(self, mode=None):
        for motor in self.motors:
            motor.stop(mode)

    def position(self):
        return self.motors[0].position()


class Gyro:
    """Inertial sensor reporting unbounded rotation in degrees."""

    def __init__(self):
        self.rotation_deg = 0.0

    def rotation(self):
        return self.rotation_deg

    def set_rotation(self, degrees):
        self.rotation_deg = degrees


class RotationSensor:
    """Rotation sensor; angle_deg is the physical shaft angle."""

    def __init__(self, reversed_=False):
        self.reversed = reversed_
        self.angle_deg = 0.0
        self._offset = 0.0

    def _signed_angle(self):
        return -self.angle_deg if self.reversed else self.angle_deg

    def position(self):
        return self._signed_angle() - self._offset

    def set_position(self, degrees):
        self._offset = self._signed_angle() - degrees


class DigitalOut:
    """A three-wire digital output such as a pneumatic solenoid."""

    def __init__(self):
        self.value = False
        self.history = []

    def set(self, value):
        self.value = bool(value)
        self.history.append(self.value)


class OpticalSensor:
    """Optical sensor; near and detected are set by whatever feeds it readings."""

    def __init__(self):
        self.near = False
        self.detected = Color.NONE
        self.light_on = False

    def is_near_object(self):
        return self.near

    def color(self):
        return self.detected

    def set_light(self, on):
        self.light_on = bool(on)


AXES = ("axis1", "axis2", "axis3", "axis4")
BUTTONS = ("l1", "l2", "r1", "r2", "up", "down", "left", "right", "x", "b", "y", "a")


class Controller:
    """Handheld controller: four axes in [-100, 100] and a set of buttons."""

    def __init__(self):
        self.axes = dict.fromkeys(AXES, 0)
        self.buttons = dict.fromkeys(BUTTONS, False)

    def axis(self, name):
        key = name.lower()
        if key not in self.axes:
            raise ValueError(f"unknown axis: {name}")
        return self.axes[key]

    def pressing(self, button):
        key = button.lower()
        if key not in self.buttons:
            raise ValueError(f"unknown button: {button}")
        return self.buttons[key]