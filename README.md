# phoenixbot

Motion control for a six-motor tank-drive competition robot: a PID
controller with settling logic, arc-based odometry, a drivetrain class with
turn, drive and swing moves, odometry moves (drive to point, drive to pose,
turn to point, holonomic drive to pose), match routines, and a driver-control
step. Every device (motors, rotation sensors, the inertial sensor,
pneumatics, the optical sensor and the controller) is a plain Python object,
so the whole robot runs and can be tested on an ordinary computer.

The package has no runtime dependencies beyond the standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `phoenixbot.util` | Angle reduction, unit conversion, clamping, deadband, line settling and voltage scaling helpers |
| `phoenixbot.pid` | `PID`, a controller with an integral start window, sign-change reset and settle/timeout detection |
| `phoenixbot.odom` | `Odom`, arc-method position tracking from one or two tracking wheels and a heading |
| `phoenixbot.hardware` | In-memory devices: `Motor`, `MotorGroup`, `Gyro`, `RotationSensor`, `DigitalOut`, `OpticalSensor`, `Controller`, and the `BrakeMode`, `Direction` and `Color` enums |
| `phoenixbot.drive` | `DriveSetup` and `Drive`: turning, driving, swinging, odometry tracking and joystick control |
| `phoenixbot.motion` | `drive_to_point` and `drive_to_pose` (boomerang controller) |
| `phoenixbot.field_moves` | `turn_to_point` and `holonomic_drive_to_pose` |
| `phoenixbot.devices` | `Devices`, `create_devices` and `build_chassis`: the robot's configured hardware and chassis |
| `phoenixbot.autons` | `default_constants`, `odom_constants`, the colour-sort step and task, and the match routines |
| `phoenixbot.robot` | `LadyBrownPID` and `Robot`: pre-match setup, routine selection, autonomous and driver control |

## Helpers

```python
from phoenixbot.util import clamp, deadband, reduce_negative_180_to_180, to_volt

reduce_negative_180_to_180(270.0)   # -90.0
clamp(15.0, -12.0, 12.0)            # 12.0
deadband(3.0, 5.0)                  # 0
to_volt(50.0)                       # 6.0
```

## PID control

A controller is built with its starting error, gains, integral start window,
exit conditions and update period. Each call to `compute()` counts as one
update period (10 ms by default).

```python
from phoenixbot.pid import PID

pid = PID(24.0, 1.5, 5.0, 7.5, 0.0, 1.5, 300.0, 600.0, 10.0)

error = 24.0
while not pid.is_settled():
    output = pid.compute(error)
    error -= 0.05 * output
```

The controller is settled once the error has stayed under `settle_error` for
longer than `settle_time` milliseconds, or once it has run longer than
`timeout` milliseconds. A timeout of 0 means it never times out.

## Odometry

```python
from phoenixbot.odom import Odom

odom = Odom()
odom.set_physical_distances(7.0, 0.0)
odom.set_position(0.0, 0.0, 0.0, 0.0, 0.0)
odom.update_position(12.0, 0.0, 0.0)   # forward tracker moved 12 inches
odom.x_position, odom.y_position
```

Heading is field-centric and clockwise-positive, with 0 degrees facing
positive Y. A `Drive` keeps its own `Odom`; `Drive.track_once()` updates it
from the sensors, and `Drive.set_coordinates()` resets the pose and starts a
background tracking thread (stop it with `Drive.stop_tracking()`).

## Running the robot

`create_devices` builds the robot's hardware and attaches a chassis made by
`build_chassis`. Both take a `sleep` callable that receives a number of
milliseconds; pass one that advances a simulation, or leave it out to really
wait.

```python
from phoenixbot.devices import create_devices
from phoenixbot.robot import Robot

devices = create_devices(lambda ms: None)
robot = Robot(devices)

robot.pre_auton_setup()
robot.select_next_auton()
print(robot.selected_auton_name())
print("\n".join(robot.status_lines()))

robot.autonomous()        # runs the selected routine
robot.usercontrol_step()  # one pass of the driver-control loop
```

Routine selection cycles through nine routines and wraps back to the first.
Routines that start the colour-sort thread return the `threading.Event` that
stops it.

Each driver-control step reads the controller: L1/R1 run the intake and
hooks, B toggles the goal clamp, Left and Right toggle the two doinkers, the
second doinker then follows L2, R2 and X drive the lift, Y steps
`LadyBrownPID` toward its target, and the sticks drive the chassis in arcade
mode.

## What it does not do

The package does not talk to real motors or sensors, and it has no command
to run. It does not run the match itself: there is no screen loop before the
match and no field-control callbacks. The caller decides when to call
`pre_auton_setup`, `autonomous` and `usercontrol_step`, and feeds the devices
their readings.

## Tests

The test suite uses pytest and is installed with the `test` extra.