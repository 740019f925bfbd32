import pytest

from phoenixbot.hardware import (
    BrakeMode,
    Color,
    Controller,
    DigitalOut,
    Direction,
    Gyro,
    Motor,
    MotorGroup,
    OpticalSensor,
    RotationSensor,
)


def test_motor_spin_direction_sets_sign():
    motor = Motor()
    motor.spin(Direction.FORWARD, 6.5)
    assert motor.voltage == 6.5
    assert motor.spinning is True
    motor.spin(Direction.REVERSE, 6.5)
    assert motor.voltage == -6.5


def test_motor_spin_without_voltage_uses_velocity():
    motor = Motor()
    motor.set_velocity(100)
    motor.spin(Direction.REVERSE)
    assert motor.voltage == pytest.approx(-12)


def test_motor_velocity_and_torque_are_limited():
    motor = Motor()
    motor.set_velocity(500)
    motor.set_max_torque(150)
    assert motor.velocity_percent == 100
    assert motor.max_torque_percent == 100


def test_reversed_motor_inverts_output():
    motor = Motor(reversed_=True)
    motor.spin(Direction.FORWARD, 4)
    assert motor.output_voltage == -4
    assert motor.voltage == 4


def test_motor_stop_uses_given_or_configured_mode():
    motor = Motor()
    motor.spin(Direction.FORWARD, 3)
    motor.stop(BrakeMode.HOLD)
    assert motor.voltage == 0
    assert motor.spinning is False
    assert motor.stop_mode is BrakeMode.HOLD
    motor.set_brake(BrakeMode.BRAKE)
    motor.stop()
    assert motor.stop_mode is BrakeMode.BRAKE


def test_motor_position_and_spin_for():
    motor = Motor()
    motor.set_position(100)
    motor.spin_for(-500)
    assert motor.position() == 100 - 500
    assert motor.spinning is False


def test_motor_group_applies_to_all_and_reports_first_position():
    first, second = Motor(), Motor(reversed_=True)
    first.position_deg = 42
    second.position_deg = -7
    group = MotorGroup(first, second)
    group.spin(Direction.FORWARD, 5)
    assert [m.voltage for m in group.motors] == [5, 5]
    assert group.position() == 42
    group.stop(BrakeMode.HOLD)
    assert all(m.voltage == 0 and m.stop_mode is BrakeMode.HOLD for m in group.motors)


def test_empty_motor_group_rejected():
    with pytest.raises(ValueError):
        MotorGroup()


def test_gyro_rotation_round_trip():
    gyro = Gyro()
    gyro.set_rotation(-450.5)
    assert gyro.rotation() == -450.5


def test_rotation_sensor_zeroing_and_reversal():
    sensor = RotationSensor()
    sensor.angle_deg = 90
    sensor.set_position(0)
    assert sensor.position() == 0
    sensor.angle_deg += 30
    assert sensor.position() == pytest.approx(30)

    reversed_sensor = RotationSensor(reversed_=True)
    reversed_sensor.angle_deg = 30
    assert reversed_sensor.position() == -30


def test_digital_out_records_values():
    out = DigitalOut()
    out.set(1)
    out.set(0)
    assert out.value is False
    assert out.history == [True, False]


def test_optical_sensor_readings():
    sensor = OpticalSensor()
    assert sensor.is_near_object() is False
    sensor.near = True
    sensor.detected = Color.RED
    sensor.set_light(True)
    assert sensor.is_near_object() is True
    assert sensor.color() is Color.RED
    assert sensor.light_on is True


def test_controller_axes_and_buttons():
    controller = Controller()
    controller.axes["axis3"] = 75
    controller.buttons["r1"] = True
    assert controller.axis("Axis3") == 75
    assert controller.axis("axis1") == 0
    assert controller.pressing("R1") is True
    assert controller.pressing("l2") is False


def test_controller_unknown_names_raise():
    controller = Controller()
    with pytest.raises(ValueError):
        controller.axis("axis9")
    with pytest.raises(ValueError):
        controller.pressing("z")