"""Autonomous routines and the constant sets they calibrate with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from drivekit.constants import AutoVariation


@dataclass(frozen=True)
class Routine:
    """A named autonomous routine; ``body`` runs it on a chassis."""

    name: str
    body: Callable


def default_constants(chassis):
    """Apply the default driver-control, PID and exit-condition constants."""
    chassis.set_control_constants(5, 10, 1.019, 5, 10, 1.019)
    # Each constant set is (max_voltage, kp, ki, kd, starti).
    chassis.set_drive_constants(12, 1, 0.3, 10, 1)
    chassis.set_heading_constants(12, 0.17, 0.02, 1.35, 2.5)
    chassis.set_turn_constants(12, 0.16, 0.01, 0.95, 15)
    chassis.set_swing_constants(12, 0.16, 0.01, 0.95, 15)
    # Each exit condition set is (settle_error, settle_time, timeout).
    chassis.set_turn_exit_conditions(1.5, 150, 1000)
    chassis.set_drive_exit_conditions(1, 150, 2000)
    chassis.set_swing_exit_conditions(1.25, 150, 2000)


def odom_constants(chassis):
    """Default constants adjusted for odometry-based motions."""
    default_constants(chassis)
    c = chassis.constants
    c.heading_max_voltage = 12
    c.drive_max_voltage = 12
    c.drive_settle_error = 3
    c.boomerang_lead = 0.5
    c.boomerang_setback = 2


def _start_at_origin(chassis, variation):
    chassis.set_coordinates(0, 0, 0)


_ROUTINE_NAMES = (
    "blue left middle",
    "blue left sawp",
    "blue left no middle",
    "blue right middle",
    "blue right sawp",
    "blue right no middle",
    "red left middle",
    "red left sawp",
    "red left no middle",
    "red right middle",
    "red right sawp",
    "red right no middle",
    "skills",
)

_ROUTINES = tuple(Routine(name, _start_at_origin) for name in _ROUTINE_NAMES)


def routines():
    """All routines in selector order."""
    return _ROUTINES


def run_routine(name, chassis, calibrate=False, variation=AutoVariation.ONE):
    """Calibrate for or run the routine called ``name`` and return it."""
    for routine in _ROUTINES:
        if routine.name == name:
            break
    else:
        raise ValueError(f"unknown routine: {name!r}")
    if calibrate:
        odom_constants(chassis)
    else:
        routine.body(chassis, AutoVariation(variation))
    return routine