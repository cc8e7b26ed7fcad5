"""Distance sensors and wall-based odometry axis resets."""

from __future__ import annotations

import math
from dataclasses import dataclass

from drivekit.constants import DistancePosition, WallPosition
from drivekit.util import to_rad

_SENSOR_NAMES = {
    DistancePosition.FRONT_SENSOR: "front_distance_sensor",
    DistancePosition.REAR_SENSOR: "rear_distance_sensor",
    DistancePosition.LEFT_SENSOR: "left_distance_sensor",
    DistancePosition.RIGHT_SENSOR: "right_distance_sensor",
}

_SENSOR_ANGLE_OFFSETS = {
    DistancePosition.FRONT_SENSOR: 0,
    DistancePosition.REAR_SENSOR: 180,
    DistancePosition.LEFT_SENSOR: 90,
    DistancePosition.RIGHT_SENSOR: 270,
}

_WALL_POSITIONS = {
    WallPosition.TOP_WALL: 70,
    WallPosition.BOTTOM_WALL: -70,
    WallPosition.LEFT_WALL: -70,
    WallPosition.RIGHT_WALL: 70,
}

_WALL_ANGLE_OFFSETS = {
    WallPosition.TOP_WALL: 270,
    WallPosition.BOTTOM_WALL: 270,
    WallPosition.LEFT_WALL: 90,
    WallPosition.RIGHT_WALL: 90,
}


def sensor_name(position):
    return _SENSOR_NAMES[position]


def sensor_angle_offset(position):
    """Mounting angle of a sensor relative to the robot's front, in degrees."""
    return _SENSOR_ANGLE_OFFSETS[position]


def wall_position_constant(wall):
    """Field coordinate of the wall along the axis it resets, in inches."""
    return _WALL_POSITIONS[wall]


def wall_angle_offset(wall):
    return _WALL_ANGLE_OFFSETS[wall]


@dataclass
class DistanceSensor:
    """A distance sensor mounted on the robot.

    ``reading`` holds the latest measured distance in inches.
    """

    port: int
    position: DistancePosition
    x_center_offset: float = 0.0
    y_center_offset: float = 0.0
    reading: float = 0.0

    def port_name(self):
        return f"PORT{self.port + 1}"

    def name(self):
        return sensor_name(self.position)

    def object_distance(self):
        return self.reading


class DistanceReset:
    """Computes an odometry coordinate from a sensor facing a field wall."""

    def __init__(self, sensors=()):
        self.sensors = list(sensors)

    def get_reset_axis_pos(self, sensor_position, wall, angle):
        """Coordinate along the axis ``wall`` fixes; 0 if no sensor is mounted there."""
        matching = [s for s in self.sensors if s.position is sensor_position]
        if not matching:
            return 0.0
        sensor = matching[-1]

        distance = sensor.object_distance()
        x_offset = sensor.x_center_offset
        y_offset = sensor.y_center_offset
        wall_pos = wall_position_constant(wall)
        theta = to_rad(angle + wall_angle_offset(wall) + sensor_angle_offset(sensor_position))
        heading = to_rad(angle)

        if wall.resets_x:
            return (wall_pos + math.cos(theta) * distance
                    - math.cos(heading) * x_offset - math.sin(heading) * y_offset)
        if wall in (WallPosition.TOP_WALL, WallPosition.BOTTOM_WALL):
            return (wall_pos + math.sin(theta) * distance
                    + math.sin(heading) * x_offset - math.cos(heading) * y_offset)
        return math.nan