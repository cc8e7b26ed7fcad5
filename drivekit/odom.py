"""Position tracking from two tracking wheels and a heading source."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from drivekit.util import Point, to_rad


@dataclass
class Odometry:
    """Arc-based dead reckoning of the robot's field position."""

    forward_center_distance: float = 0.0
    sideways_center_distance: float = 0.0
    forward_position: float = 0.0
    sideways_position: float = 0.0
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    orientation_deg: float = 0.0

    def set_physical_distances(self, forward_center_distance, sideways_center_distance):
        self.forward_center_distance = forward_center_distance
        self.sideways_center_distance = sideways_center_distance

    def set_position(self, position, orientation_deg, forward_position, sideways_position):
        self.forward_position = forward_position
        self.sideways_position = sideways_position
        self.position = position
        self.orientation_deg = orientation_deg

    def update_position(self, forward_position, sideways_position, orientation_deg):
        """Integrate new tracker readings and heading into the position."""
        forward_delta = forward_position - self.forward_position
        sideways_delta = sideways_position - self.sideways_position
        self.forward_position = forward_position
        self.sideways_position = sideways_position

        orientation_rad = to_rad(orientation_deg)
        prev_orientation_rad = to_rad(self.orientation_deg)
        delta_rad = orientation_rad - prev_orientation_rad
        self.orientation_deg = orientation_deg

        if delta_rad == 0:
            local_x = sideways_delta
            local_y = forward_delta
        else:
            chord = 2 * math.sin(delta_rad / 2)
            local_x = chord * (sideways_delta / delta_rad + self.sideways_center_distance)
            local_y = chord * (forward_delta / delta_rad + self.forward_center_distance)

        if local_x == 0 and local_y == 0:
            polar_angle = 0.0
            polar_length = 0.0
        else:
            polar_angle = math.atan2(local_y, local_x)
            polar_length = math.hypot(local_x, local_y)

        global_angle = polar_angle - prev_orientation_rad - delta_rad / 2
        self.position = Point(
            self.position.x + polar_length * math.cos(global_angle),
            self.position.y + polar_length * math.sin(global_angle),
        )