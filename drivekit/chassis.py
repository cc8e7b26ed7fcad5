"""Tank-drive chassis: tuning constants, odometry, wall resets and driver control."""

from __future__ import annotations

import math
from dataclasses import dataclass

from drivekit.constants import Color, DriveMode, WallPosition
from drivekit.distance import DistanceReset
from drivekit.motors import BrakeType
from drivekit.odom import Odometry
from drivekit.util import (
    Point,
    deadband,
    mirror_angle,
    mirror_x,
    mirror_y,
    percent_to_volt,
    print_colored,
    reduce_0_to_360,
    sign,
)

_TANK_DEADBAND = 5


@dataclass
class ChassisConstants:
    """Tuning values for driver control and the motion controllers."""

    control_throttle_deadband: float = 0.0
    control_throttle_min_output: float = 0.0
    control_throttle_curve_gain: float = 1.0
    control_turn_deadband: float = 0.0
    control_turn_min_output: float = 0.0
    control_turn_curve_gain: float = 1.0

    drive_max_voltage: float = 0.0
    drive_kp: float = 0.0
    drive_ki: float = 0.0
    drive_kd: float = 0.0
    drive_starti: float = 0.0

    heading_max_voltage: float = 0.0
    heading_kp: float = 0.0
    heading_ki: float = 0.0
    heading_kd: float = 0.0
    heading_starti: float = 0.0

    turn_max_voltage: float = 0.0
    turn_kp: float = 0.0
    turn_ki: float = 0.0
    turn_kd: float = 0.0
    turn_starti: float = 0.0

    swing_max_voltage: float = 0.0
    swing_kp: float = 0.0
    swing_ki: float = 0.0
    swing_kd: float = 0.0
    swing_starti: float = 0.0

    turn_settle_error: float = 0.0
    turn_settle_time: float = 0.0
    turn_timeout: float = 0.0
    drive_settle_error: float = 0.0
    drive_settle_time: float = 0.0
    drive_timeout: float = 0.0
    swing_settle_error: float = 0.0
    swing_settle_time: float = 0.0
    swing_timeout: float = 0.0

    drive_min_voltage: float = 0.0
    boomerang_lead: float = 0.0
    boomerang_setback: float = 0.0


def curve(value, deadband_width, min_output, curve_gain):
    """Exponential joystick curve on a -100..100 scale with a minimum output."""
    if abs(value) <= deadband_width:
        return 0.0
    g = abs(value) - deadband_width
    g_max = 100 - deadband_width
    raw_curve = curve_gain ** (g - 100) * g * sign(value)
    raw_curve_max = curve_gain ** (g_max - 100) * g_max
    if raw_curve_max == 0:
        raise ValueError("curve is undefined for a deadband of 100")
    return (100.0 - min_output) / 100 * raw_curve * 100 / raw_curve_max + min_output * sign(value)


def _round_half_away(value):
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Chassis:
    """Two motor groups, two tracking wheels and a heading sensor.

    Sensor readings are plain attributes: ``inertial_rotation`` (raw degrees),
    ``forward_tracker_deg`` and ``sideways_tracker_deg`` (wheel degrees).
    """

    def __init__(
        self,
        left_drive,
        right_drive,
        inertial_scale=360.0,
        forward_tracker_diameter=2.75,
        forward_tracker_center_distance=0.0,
        sideways_tracker_diameter=2.75,
        sideways_tracker_center_distance=0.0,
        reset_sensors=None,
    ):
        self.left_drive = left_drive
        self.right_drive = right_drive
        self.inertial_scale = inertial_scale
        self.forward_tracker_diameter = forward_tracker_diameter
        self.forward_tracker_inch_to_deg_ratio = math.pi * forward_tracker_diameter / 360.0
        self.sideways_tracker_diameter = sideways_tracker_diameter
        self.sideways_tracker_inch_to_deg_ratio = math.pi * sideways_tracker_diameter / 360.0
        self.reset_sensors = reset_sensors if reset_sensors is not None else DistanceReset()

        self.constants = ChassisConstants()
        self.odom = Odometry()
        self.odom.set_physical_distances(forward_tracker_center_distance, sideways_tracker_center_distance)

        self.inertial_rotation = 0.0
        self.forward_tracker_deg = 0.0
        self.sideways_tracker_deg = 0.0

        self.position_tracking = False
        self.control_disabled = False
        self.selected_drive_mode = None
        self._angles_mirrored = False
        self._x_pos_mirrored = False
        self._y_pos_mirrored = False

    # Tuning

    def set_control_constants(self, throttle_deadband, throttle_min_output, throttle_curve_gain,
                              turn_deadband, turn_min_output, turn_curve_gain):
        c = self.constants
        c.control_throttle_deadband = throttle_deadband
        c.control_throttle_min_output = throttle_min_output
        c.control_throttle_curve_gain = throttle_curve_gain
        c.control_turn_deadband = turn_deadband
        c.control_turn_min_output = turn_min_output
        c.control_turn_curve_gain = turn_curve_gain

    def _set_pid(self, prefix, max_voltage, kp, ki, kd, starti):
        for suffix, value in (("max_voltage", max_voltage), ("kp", kp), ("ki", ki),
                              ("kd", kd), ("starti", starti)):
            setattr(self.constants, f"{prefix}_{suffix}", value)

    def _set_exit(self, prefix, settle_error, settle_time, timeout):
        for suffix, value in (("settle_error", settle_error), ("settle_time", settle_time),
                              ("timeout", timeout)):
            setattr(self.constants, f"{prefix}_{suffix}", value)

    def set_turn_constants(self, max_voltage, kp, ki, kd, starti):
        self._set_pid("turn", max_voltage, kp, ki, kd, starti)

    def set_drive_constants(self, max_voltage, kp, ki, kd, starti):
        self._set_pid("drive", max_voltage, kp, ki, kd, starti)

    def set_heading_constants(self, max_voltage, kp, ki, kd, starti):
        self._set_pid("heading", max_voltage, kp, ki, kd, starti)

    def set_swing_constants(self, max_voltage, kp, ki, kd, starti):
        self._set_pid("swing", max_voltage, kp, ki, kd, starti)

    def set_turn_exit_conditions(self, settle_error, settle_time, timeout):
        self._set_exit("turn", settle_error, settle_time, timeout)

    def set_drive_exit_conditions(self, settle_error, settle_time, timeout):
        self._set_exit("drive", settle_error, settle_time, timeout)

    def set_swing_exit_conditions(self, settle_error, settle_time, timeout):
        self._set_exit("swing", settle_error, settle_time, timeout)

    def set_tracking_offsets(self, forward_center_distance, sideways_center_distance):
        self.odom.set_physical_distances(forward_center_distance, sideways_center_distance)

    # Motors

    def set_brake_type(self, brake):
        self.left_drive.set_stopping(brake)
        self.right_drive.set_stopping(brake)

    def drive_with_voltage(self, left_voltage, right_voltage):
        self.left_drive.spin(True, left_voltage)
        self.right_drive.spin(True, right_voltage)

    def stop_drive(self, brake):
        self.left_drive.stop(brake)
        self.right_drive.stop(brake)

    # Heading and mirroring

    def get_absolute_heading(self):
        """Heading in [0, 360) corrected by the inertial scale."""
        return reduce_0_to_360(self.inertial_rotation * 360.0 / self.inertial_scale)

    def mirror_all_auton_angles(self):
        self._angles_mirrored = True

    def mirror_all_auton_x_pos(self):
        self._x_pos_mirrored = True

    def mirror_all_auton_y_pos(self):
        self._y_pos_mirrored = True

    def disable_mirroring(self):
        self._angles_mirrored = False
        self._x_pos_mirrored = False
        self._y_pos_mirrored = False

    @property
    def angles_mirrored(self):
        return self._angles_mirrored

    @property
    def x_pos_mirrored(self):
        return self._x_pos_mirrored

    @property
    def y_pos_mirrored(self):
        return self._y_pos_mirrored

    # Odometry

    @property
    def forward_tracker_position(self):
        """Forward tracking wheel travel in inches."""
        return self.forward_tracker_deg * self.forward_tracker_inch_to_deg_ratio

    @property
    def sideways_tracker_position(self):
        """Sideways tracking wheel travel in inches."""
        return self.sideways_tracker_deg * self.sideways_tracker_inch_to_deg_ratio

    @property
    def x_position(self):
        return self.odom.position.x

    @property
    def y_position(self):
        return self.odom.position.y

    def set_heading(self, orientation_deg):
        self.inertial_rotation = orientation_deg * self.inertial_scale / 360.0

    def set_coordinates(self, x, y, orientation_deg):
        """Place the robot on the field, applying any enabled mirroring."""
        self.position_tracking = True
        self.forward_tracker_deg = 0.0
        self.sideways_tracker_deg = 0.0

        orientation_deg = mirror_angle(orientation_deg, self._angles_mirrored)
        x = mirror_x(x, self._x_pos_mirrored)
        y = mirror_y(y, self._y_pos_mirrored)

        self.odom.set_position(Point(x, y), orientation_deg,
                               self.forward_tracker_position, self.sideways_tracker_position)
        self.set_heading(orientation_deg)

    def update_odometry(self):
        """Feed the current sensor readings to odometry and return the position."""
        self.odom.update_position(self.forward_tracker_position, self.sideways_tracker_position,
                                  self.get_absolute_heading())
        return self.odom.position

    def reset_axis(self, sensor_position, wall, max_reset_distance):
        """Reset one coordinate from a distance sensor facing ``wall``.

        The reset is applied only when it moves the coordinate by less than
        ``max_reset_distance``; returns whether it was applied.
        """
        heading = self.get_absolute_heading()
        new_pos = self.reset_sensors.get_reset_axis_pos(sensor_position, wall, heading)
        reset_x = wall not in (WallPosition.TOP_WALL, WallPosition.BOTTOM_WALL)
        odom_x = self.x_position
        odom_y = self.y_position
        new_x, new_y = (new_pos, odom_y) if reset_x else (odom_x, new_pos)
        axis = "X" if reset_x else "Y"
        old_axis_value = odom_x if reset_x else odom_y
        summary = f"Old: ({odom_x:f}, {odom_y:f}) ->  New: ({new_x:f}, {new_y:f})"

        if abs(new_pos - old_axis_value) < max_reset_distance:
            self.set_coordinates(new_x, new_y, heading)
            print_colored(f"Reset Odom {axis} Position Successfully", Color.GREEN)
            print_colored(summary, Color.BRIGHT_GREEN)
            return True

        print_colored(f"Reset Odom {axis} Position Failed", Color.RED)
        print_colored(summary, Color.BRIGHT_RED)
        return False

    # Driver control

    def disable_control(self):
        self.control_disabled = True

    def enable_control(self):
        self.control_disabled = False

    def _throttle_curve(self, value):
        c = self.constants
        return _round_half_away(curve(value, c.control_throttle_deadband,
                                      c.control_throttle_min_output, c.control_throttle_curve_gain))

    def _turn_curve(self, value):
        c = self.constants
        return _round_half_away(curve(value, c.control_turn_deadband,
                                      c.control_turn_min_output, c.control_turn_curve_gain))

    def control(self, mode, axes):
        """Drive from joystick values.

        ``axes`` maps controller axis numbers (1 right X, 2 right Y, 3 left Y)
        to values in -100..100; missing axes read as 0.
        """
        if self.control_disabled:
            self.stop_drive(BrakeType.COAST)
            return
        self.selected_drive_mode = mode
        axis1 = axes.get(1, 0)
        axis2 = axes.get(2, 0)
        axis3 = axes.get(3, 0)
        c = self.constants

        if mode is DriveMode.SPLIT_ARCADE:
            throttle = deadband(axis3, c.control_throttle_deadband)
            turn = deadband(axis1, c.control_turn_deadband)
            left, right = throttle + turn, throttle - turn
        elif mode is DriveMode.SPLIT_ARCADE_CURVED:
            throttle = self._throttle_curve(axis3)
            turn = self._turn_curve(axis1)
            left, right = throttle + turn, throttle - turn
        elif mode is DriveMode.TANK:
            left = deadband(axis3, _TANK_DEADBAND)
            right = deadband(axis2, _TANK_DEADBAND)
        elif mode is DriveMode.TANK_CURVED:
            left = self._throttle_curve(axis3)
            right = self._throttle_curve(axis2)
        else:
            raise ValueError(f"unknown drive mode: {mode!r}")

        self.left_drive.spin(True, percent_to_volt(left))
        self.right_drive.spin(True, percent_to_volt(right))