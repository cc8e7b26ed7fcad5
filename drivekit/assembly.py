"""Intake, conveyor and pneumatics of the robot, driven from controller buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from drivekit.motors import Motor
from drivekit.piston import Piston

_FULL_VOLTAGE = 12
_MIDDLE_SCORE_VOLTAGE = 3


class Flow(IntEnum):
    """Goal the intake feeds when L1 is held."""

    TOP = 1
    MIDDLE = 2


class IntakeMode(IntEnum):
    TOP = 1
    MIDDLE = 2
    BOTTOM = 3
    STOPPED = 4


@dataclass(frozen=True)
class Buttons:
    """Snapshot of the controller buttons the assembly reads."""

    l1: bool = False
    l2: bool = False
    right: bool = False
    down: bool = False
    x: bool = False
    y: bool = False
    b: bool = False


class Assembly:
    """Intake motors plus wings, scraper and park pistons."""

    def __init__(self, intake=None, low_center=None, high_center=None, score=None,
                 wings=None, scraper=None, park=None):
        self.intake = intake if intake is not None else Motor(0)
        self.low_center = low_center if low_center is not None else Motor(1)
        self.high_center = high_center if high_center is not None else Motor(2)
        self.score = score if score is not None else Motor(3)
        self.wings = wings if wings is not None else Piston()
        self.scraper = scraper if scraper is not None else Piston()
        self.park = park if park is not None else Piston()
        self.flow = Flow.TOP
        self.intake_mode = IntakeMode.TOP
        self._held = {"x": False, "y": False, "b": False}

    @property
    def motors(self):
        return (self.intake, self.low_center, self.high_center, self.score)

    def _new_press(self, name, pressing):
        fresh = pressing and not self._held[name]
        self._held[name] = pressing
        return fresh

    def control(self, buttons):
        """Update flow, intake mode and pistons from one button snapshot."""
        if buttons.right:
            self.flow = Flow.TOP
        elif buttons.down:
            self.flow = Flow.MIDDLE

        if buttons.l1:
            self.intake_mode = IntakeMode.TOP if self.flow is Flow.TOP else IntakeMode.MIDDLE
        elif buttons.l2:
            self.intake_mode = IntakeMode.BOTTOM
        else:
            self.intake_mode = IntakeMode.STOPPED

        if self._new_press("y", buttons.y):
            self.wings.toggle()
        if self._new_press("b", buttons.b):
            self.scraper.toggle()
        if self._new_press("x", buttons.x):
            self.park.toggle()

    def apply_intake(self):
        """Drive the intake motors according to the current intake mode."""
        mode = self.intake_mode
        if mode is IntakeMode.STOPPED:
            for motor in self.motors:
                motor.stop()
            return
        if mode is IntakeMode.TOP:
            for motor in self.motors:
                motor.spin(True, _FULL_VOLTAGE)
        elif mode is IntakeMode.MIDDLE:
            for motor in (self.intake, self.low_center, self.high_center):
                motor.spin(True, _FULL_VOLTAGE)
            self.score.spin(False, _MIDDLE_SCORE_VOLTAGE)
        elif mode is IntakeMode.BOTTOM:
            for motor in self.motors:
                motor.spin(False, _FULL_VOLTAGE)