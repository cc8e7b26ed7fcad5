"""Simulated motors and motor groups with group-level helpers."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum

from drivekit.util import volt_to_percent


class GearSetting(Enum):
    RATIO_6_1 = "6:1"
    RATIO_18_1 = "18:1"
    RATIO_36_1 = "36:1"


class BrakeType(Enum):
    COAST = "coast"
    BRAKE = "brake"
    HOLD = "hold"


def to_volt(voltage, millivolts=False):
    """Convert to volts; ``millivolts`` marks the input as mV."""
    return voltage / 1000.0 if millivolts else voltage


@dataclass
class Motor:
    """A motor's configuration and its last commanded and measured values."""

    port: int
    reversed: bool = False
    gear_cartridge: GearSetting = GearSetting.RATIO_6_1
    name: str = ""
    voltage: float = 0.0
    velocity_percent: float = 0.0
    position: float = 0.0
    current: float = 0.0
    temperature: float = 0.0
    brake: BrakeType = BrakeType.COAST
    stopped_with: BrakeType | None = None

    def port_name(self):
        return f"PORT{self.port + 1}"

    @property
    def is_spinning(self):
        return self.voltage != 0

    def spin(self, forward=True, voltage=0.0):
        self.voltage = voltage if forward else -voltage
        self.stopped_with = None

    def stop(self, brake=None):
        """Stop the motor using ``brake``, or the configured stopping mode."""
        self.voltage = 0.0
        self.stopped_with = self.brake if brake is None else brake


class MotorGroup:
    """Several motors commanded together."""

    def __init__(self, motors=()):
        self.motors = list(motors)
        self.target_voltage = 0.0

    def __len__(self):
        return len(self.motors)

    def __iter__(self):
        return iter(self.motors)

    def _average(self, values):
        values = list(values)
        return sum(values) / len(values) if values else math.nan

    def set_stopping(self, brake):
        for motor in self.motors:
            motor.brake = brake

    def set_voltage(self, voltage, millivolts=False):
        """Store the group's default voltage and matching velocity percentage."""
        self.target_voltage = to_volt(voltage, millivolts)
        for motor in self.motors:
            motor.velocity_percent = volt_to_percent(self.target_voltage)

    def reset_position(self):
        self.set_position(0.0)

    def set_position(self, value):
        for motor in self.motors:
            motor.position = value

    def spin(self, forward=True, voltage=None):
        """Spin every motor, at ``voltage`` or at the stored group voltage."""
        volts = self.target_voltage if voltage is None else voltage
        for motor in self.motors:
            motor.spin(forward, volts)

    def spin_for_time(self, seconds, voltage, forward=True):
        """Spin for ``seconds`` and then stop holding position."""
        if not self.motors:
            return
        self.spin(forward, voltage)
        time.sleep(seconds)
        self.stop(BrakeType.HOLD)

    def is_spinning(self):
        return any(motor.is_spinning for motor in self.motors)

    def stop(self, brake=None):
        for motor in self.motors:
            motor.stop(brake)

    def position(self):
        return self.motors[0].position if self.motors else 0.0

    def voltage(self):
        return self.motors[0].voltage if self.motors else 0.0

    def average_voltage(self):
        return self._average(m.voltage for m in self.motors)

    def current(self):
        """Total current drawn by the group."""
        return sum(m.current for m in self.motors)

    def average_current(self):
        return self._average(m.current for m in self.motors)

    def average_temperature(self):
        return self._average(m.temperature for m in self.motors)