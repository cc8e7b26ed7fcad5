import math

import pytest

from drivekit.motors import BrakeType, GearSetting, Motor, MotorGroup, to_volt


def test_to_volt_converts_millivolts():
    assert to_volt(6000, millivolts=True) == pytest.approx(6)
    assert to_volt(6, millivolts=False) == 6


def test_motor_defaults_and_port_name():
    motor = Motor(4, name="intake")
    assert motor.port_name() == "PORT5"
    assert motor.gear_cartridge is GearSetting.RATIO_6_1


def test_motor_spin_direction_and_stop():
    motor = Motor(0)
    motor.spin(False, 12)
    assert motor.voltage == -12
    motor.brake = BrakeType.BRAKE
    motor.stop()
    assert motor.voltage == 0
    assert motor.stopped_with is BrakeType.BRAKE


def test_group_len_iter_and_stopping():
    motors = [Motor(0), Motor(1), Motor(2)]
    group = MotorGroup(motors)
    group.set_stopping(BrakeType.HOLD)
    assert len(group) == 3
    assert [m.brake for m in group] == [BrakeType.HOLD] * 3


def test_set_voltage_then_spin_uses_stored_voltage():
    group = MotorGroup([Motor(0), Motor(1)])
    group.set_voltage(12000, millivolts=True)
    assert all(m.velocity_percent == pytest.approx(100) for m in group)
    group.spin(True)
    assert [m.voltage for m in group] == [12, 12]
    assert group.is_spinning()


def test_stop_uses_given_brake():
    group = MotorGroup([Motor(0), Motor(1)])
    group.spin(True, 5)
    group.stop(BrakeType.COAST)
    assert not group.is_spinning()
    assert all(m.stopped_with is BrakeType.COAST for m in group)


def test_spin_for_time_ends_holding():
    group = MotorGroup([Motor(0), Motor(1)])
    group.spin_for_time(0, 8, forward=True)
    assert group.voltage() == 0
    assert all(m.stopped_with is BrakeType.HOLD for m in group)


def test_positions_reset_and_first_motor_reported():
    group = MotorGroup([Motor(0), Motor(1)])
    group.set_position(90)
    assert group.position() == 90
    group.reset_position()
    assert group.position() == 0


def test_readings_and_averages():
    group = MotorGroup([Motor(0, current=1.0, temperature=40), Motor(1, current=3.0, temperature=50)])
    group.spin(True, 6)
    assert group.current() == pytest.approx(4.0)
    assert group.average_current() == pytest.approx(2.0)
    assert group.average_temperature() == pytest.approx(45)
    assert group.average_voltage() == pytest.approx(6)


def test_empty_group_values():
    group = MotorGroup()
    assert group.position() == 0
    assert group.voltage() == 0
    assert math.isnan(group.average_voltage())
    group.spin_for_time(0, 12, True)
    assert len(group) == 0