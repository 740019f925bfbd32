"""The robot's device configuration and its chassis."""

from dataclasses import dataclass, field

from phoenixbot.drive import Drive, DriveSetup
from phoenixbot.hardware import (
    Controller,
    DigitalOut,
    Gyro,
    Motor,
    MotorGroup,
    OpticalSensor,
    RotationSensor,
)

PORTS = {
    "fld": 8,
    "mld": 13,
    "bld": 1,
    "frd": 16,
    "mrd": 11,
    "brd": 12,
    "intake": 4,
    "hooks": 2,
    "inertial": 14,
    "lb": 7,
    "color_sort_optical": 10,
    "lady_rotation": 21,
    "vertical_odom": 9,
}

THREE_WIRE_PORTS = {
    "p_doinker": "F",
    "p_mogo": "H",
    "p_intake": "E",
    "p_doinker2": "G",
    "p_color_sort": "D",
}

WHEEL_DIAMETER = 3.25
WHEEL_RATIO = 0.75
GYRO_SCALE = 360
FORWARD_TRACKER_DIAMETER = 2.75
FORWARD_TRACKER_CENTER_DISTANCE = 7
SIDEWAYS_TRACKER_DIAMETER = -2.75
SIDEWAYS_TRACKER_CENTER_DISTANCE = 5.5


def _motor(reversed_):
    return lambda: Motor(reversed_)


@dataclass
class Devices:
    """Every motor, sensor and output on the robot, plus its chassis."""

    controller: Controller = field(default_factory=Controller)
    fld: Motor = field(default_factory=_motor(False))
    mld: Motor = field(default_factory=_motor(True))
    bld: Motor = field(default_factory=_motor(True))
    frd: Motor = field(default_factory=_motor(True))
    mrd: Motor = field(default_factory=_motor(False))
    brd: Motor = field(default_factory=_motor(False))
    intake: Motor = field(default_factory=_motor(False))
    hooks: Motor = field(default_factory=_motor(True))
    inertial: Gyro = field(default_factory=Gyro)
    p_doinker: DigitalOut = field(default_factory=DigitalOut)
    p_mogo: DigitalOut = field(default_factory=DigitalOut)
    p_intake: DigitalOut = field(default_factory=DigitalOut)
    lb: Motor = field(default_factory=_motor(False))
    color_sort_optical: OpticalSensor = field(default_factory=OpticalSensor)
    lady_rotation: RotationSensor = field(default_factory=lambda: RotationSensor(False))
    vertical_odom: RotationSensor = field(default_factory=lambda: RotationSensor(False))
    p_doinker2: DigitalOut = field(default_factory=DigitalOut)
    p_color_sort: DigitalOut = field(default_factory=DigitalOut)
    chassis: Drive | None = None


def build_chassis(devices, sleep=None):
    """Build the tank chassis with one forward rotation tracker from the devices."""
    return Drive(
        DriveSetup.TANK_ONE_FORWARD_ROTATION,
        MotorGroup(devices.fld, devices.mld, devices.bld),
        MotorGroup(devices.frd, devices.mrd, devices.brd),
        devices.inertial,
        WHEEL_DIAMETER,
        WHEEL_RATIO,
        GYRO_SCALE,
        forward_tracker=devices.vertical_odom,
        forward_tracker_diameter=FORWARD_TRACKER_DIAMETER,
        forward_tracker_center_distance=FORWARD_TRACKER_CENTER_DISTANCE,
        sideways_tracker=None,
        sideways_tracker_diameter=SIDEWAYS_TRACKER_DIAMETER,
        sideways_tracker_center_distance=SIDEWAYS_TRACKER_CENTER_DISTANCE,
        sleep=sleep,
    )


def create_devices(sleep=None):
    """Create all devices and attach the chassis built from them."""
    devices = Devices()
    devices.chassis = build_chassis(devices, sleep)
    return devices