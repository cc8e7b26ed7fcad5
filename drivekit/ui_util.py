"""Identifiers for UI components and unit conversion for screen layout."""

from __future__ import annotations

from drivekit.constants import UIDistanceUnits

_TYPE_FACTOR = 10000
_GROUP_FACTOR = 1000

_PIXELS_PER_UNIT = {
    UIDistanceUnits.INCHES: 96.0,
    UIDistanceUnits.CENTIMETERS: 37.79527559,
    UIDistanceUnits.PIXELS: 1.0,
}


class IdAllocator:
    """Hands out component identifiers of the form ``T G U...``.

    The ten-thousands digit holds the component type, the thousands digit
    the toggle group, and the rest is a counter shared by all identifiers
    from this allocator.
    """

    def __init__(self):
        self._counter = 0

    @property
    def issued(self):
        """Number of identifiers created so far."""
        return self._counter

    def create(self, component_type, toggle_group=0):
        """Return a new identifier; both digits must lie in 0..9."""
        for label, value in (("component type", component_type), ("toggle group", toggle_group)):
            if not 0 <= value <= 9:
                raise ValueError(f"{label} must be in 0-9, got {value!r}")
        self._counter += 1
        return int(component_type) * _TYPE_FACTOR + int(toggle_group) * _GROUP_FACTOR + self._counter


def decode_component_type(component_id):
    return component_id // _TYPE_FACTOR


def decode_toggle_group(component_id):
    return (component_id % _TYPE_FACTOR) // _GROUP_FACTOR


def decode_unique_id(component_id):
    return (component_id % _TYPE_FACTOR) % _GROUP_FACTOR


def to_pixels(distance, units):
    """Convert a distance in ``units`` to screen pixels."""
    try:
        factor = _PIXELS_PER_UNIT[units]
    except KeyError:
        raise ValueError(f"unknown distance unit: {units!r}") from None
    return factor * distance