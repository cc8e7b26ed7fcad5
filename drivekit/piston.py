"""Pneumatic piston driven through a solenoid output."""

from __future__ import annotations


class Piston:
    """Tracks the extended state of a piston and drives its solenoid.

    ``solenoid`` is a callable receiving the new state. When ``state`` is
    given the solenoid is set to it immediately; otherwise the piston starts
    retracted without touching the output.
    """

    def __init__(self, solenoid=None, state=None):
        self._solenoid = solenoid
        self._state = False
        if state is not None:
            self.set(state)

    @property
    def state(self):
        return self._state

    def _apply(self):
        if self._solenoid is not None:
            self._solenoid(self._state)

    def open(self):
        self.set(True)

    def close(self):
        self.set(False)

    def toggle(self):
        self.set(not self._state)

    def set(self, state):
        self._state = bool(state)
        self._apply()