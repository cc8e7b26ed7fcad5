"""Discrete PID controller with settle and timeout exit conditions."""

from __future__ import annotations

from dataclasses import dataclass

_TICK_MS = 10


@dataclass
class PID:
    """PID controller stepped once every 10 ms.

    The integral term only accumulates while the error is smaller than
    ``starti``, and is cleared whenever the error changes sign.
    """

    error: float = 0.0
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    starti: float = 0.0
    settle_error: float = 0.0
    settle_time: float = 0.0
    timeout: float = 0.0
    accumulated_error: float = 0.0
    previous_error: float = 0.0
    output: float = 0.0
    time_spent_settled: float = 0.0
    time_spent_running: float = 0.0

    def compute(self, error):
        """Advance one tick with ``error`` and return the controller output."""
        if abs(error) < self.starti:
            self.accumulated_error += error
        if (error > 0 > self.previous_error) or (error < 0 < self.previous_error):
            self.accumulated_error = 0.0

        self.output = (
            self.kp * error
            + self.ki * self.accumulated_error
            + self.kd * (error - self.previous_error)
        )
        self.previous_error = error
        self.error = error

        if abs(error) < self.settle_error:
            self.time_spent_settled += _TICK_MS
        else:
            self.time_spent_settled = 0
        self.time_spent_running += _TICK_MS
        return self.output

    def is_settled(self):
        """True once the timeout has passed or the error stayed small long enough."""
        if self.timeout != 0 and self.time_spent_running > self.timeout:
            return True
        return self.time_spent_settled > self.settle_time