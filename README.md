# drivekit

Building blocks for the software of a two-sided (tank) drivetrain
competition robot, written as plain Python objects so that the control logic
can be run and tested on any machine:

- angle, voltage and geometry helpers
- a PID controller with settle and timeout exit conditions
- tracking-wheel odometry
- distance-sensor resets of one odometry axis against a field wall
- simulated motors, motor groups and pistons
- a chassis with tuning constants, mirroring and joystick drive curves
- a registry of autonomous routines and their constant sets
- an intake/conveyor assembly driven from controller buttons
- component identifiers and a few touch-screen UI components

The package has no dependencies outside the standard library and provides no
command-line program.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### `drivekit.constants`

Enums: `DriveMode`, `Direction`, `AutoVariation`, `DistancePosition`,
`WallPosition` (with `resets_x`), `Color` (with `is_bright`),
`UIDistanceUnits`, `InputType`, `TextAlign`, `Autons`, `ComponentKind`.
Every enum has a `parse(text)` class method that accepts names in any case,
with spaces or dashes for underscores, and raises `ValueError` for unknown
names. Also screen size (`SCREEN_WIDTH`, `SCREEN_HEIGHT`), three-wire port
numbers `PORT_A`…`PORT_H` and the UI colour palette as hex strings.

### `drivekit.util`

- `Point(x, y)` – frozen dataclass.
- `clamp`, `deadband`, `deadband_squared`, `sign`.
- `percent_to_volt`, `volt_to_percent` (12 V is 100 %), `to_rad`, `to_deg`.
- `reduce_0_to_360`, `reduce_negative_180_to_180`, `reduce_negative_90_to_90`
  (raise `ValueError` for non-finite angles).
- `mirror_angle`, `mirror_direction`, `mirror_x`, `mirror_y`,
  `angle_error(error, direction)`.
- `is_line_settled`, `left_voltage_scaling`, `right_voltage_scaling`,
  `clamp_min_voltage`.
- `dist(p1, p2)` and `line_circle_intersections(center, radius, p1, p2)`,
  which returns the intersections lying on the segment.
- `to_string_float(num, precision, remove_trailing_zero=False)`.
- `to_ansi(color)`, `colorize(value, color)` and
  `print_colored(value, color, file=None)` for ANSI-coloured console lines.
- `TextFileStore(root)` – newline-separated record files (`.txt` only) in a
  directory: `create`, `wipe`, `append`, `remove_duplicates`, `read_lines`
  (newest record first) and `text_file_exists`.

### `drivekit.pid`

`PID` dataclass (`kp`, `ki`, `kd`, `starti`, `settle_error`, `settle_time`,
`timeout`, …). `compute(error)` advances one 10 ms tick and returns the
output; the integral only accumulates while `|error| < starti` and is cleared
when the error changes sign. `is_settled()` is true after the timeout (if
non-zero) or once the error has stayed below `settle_error` for longer than
`settle_time`.

### `drivekit.odom`

`Odometry` with `set_physical_distances`, `set_position` and
`update_position(forward_position, sideways_position, orientation_deg)`,
which integrates tracker travel and heading into `position`.

### `drivekit.distance`

`DistanceSensor(port, position, x_center_offset, y_center_offset, reading)`
and `DistanceReset(sensors)`, whose `get_reset_axis_pos(sensor_position,
wall, angle)` computes the coordinate a wall reading implies (0 when no
sensor is mounted at that position). Lookup helpers: `sensor_name`,
`sensor_angle_offset`, `wall_position_constant`, `wall_angle_offset`.

### `drivekit.piston`

`Piston(solenoid=None, state=None)` with `state`, `open`, `close`, `toggle`
and `set`. `solenoid` is any callable that receives the new state.

### `drivekit.motors`

`Motor` dataclass (port, reversal, `GearSetting`, last commanded voltage,
position, current, temperature, `BrakeType`) with `spin`, `stop` and
`port_name`. `MotorGroup(motors)` iterates over its motors and offers
`set_stopping`, `set_voltage`, `spin`, `spin_for_time` (blocks, then stops
with `HOLD`), `stop`, `is_spinning`, `reset_position`, `set_position`,
`position`, `voltage`, `average_voltage`, `current` (total),
`average_current` and `average_temperature`. `to_volt(voltage, millivolts)`
converts millivolts.

### `drivekit.chassis`

`Chassis(left_drive, right_drive, inertial_scale=360.0, ...)` holds its
tuning in a `ChassisConstants` dataclass set through `set_control_constants`,
`set_drive_constants`, `set_heading_constants`, `set_turn_constants`,
`set_swing_constants` and the `set_*_exit_conditions` methods. Sensor
readings are plain attributes (`inertial_rotation`, `forward_tracker_deg`,
`sideways_tracker_deg`). It offers `get_absolute_heading`, `set_heading`,
`set_coordinates` (applying any enabled mirroring), `update_odometry`,
`reset_axis(sensor_position, wall, max_reset_distance)`, the mirroring
switches, `drive_with_voltage`, `stop_drive`, `set_brake_type`,
`enable_control` / `disable_control`, and `control(mode, axes)`, which drives
the motor groups from a mapping of controller axis numbers (1 right X,
2 right Y, 3 left Y) to values in -100..100. `curve(...)` is the exponential
joystick curve used by the curved drive modes.

### `drivekit.autons`

`default_constants(chassis)` and `odom_constants(chassis)` apply the standard
constant sets. `routines()` lists the thirteen named `Routine`s in selector
order; `run_routine(name, chassis, calibrate=False, variation=...)` either
applies the odometry constants or runs the routine, and raises `ValueError`
for an unknown name.

### `drivekit.assembly`

`Assembly` with four intake motors and the wings, scraper and park pistons.
`control(buttons)` takes a `Buttons` snapshot: Right/Down choose the `Flow`,
L1/L2 choose the `IntakeMode`, and fresh presses of Y, B and X toggle the
wings, scraper and park. `apply_intake()` spins or stops the motors for the
current mode.

### `drivekit.ui_util`

`IdAllocator.create(component_type, toggle_group=0)` issues identifiers of
the form type·10000 + group·1000 + counter; `decode_component_type`,
`decode_toggle_group`, `decode_unique_id` take them apart. `to_pixels`
converts inches, centimetres or pixels to pixels.

### `drivekit.components`

`Drawable` (abstract), `Box` (a rectangle that records itself on its
`surface` list when rendered), and the components `Graphic` (a group of
drawables moved and resized by their bounding box), `Background` (position
settable once) and `Button` with `ButtonState`, `set_states`,
`set_callback`, `handle_touch(touch_x, touch_y, pressing, now_ms)` and
`handle_cursor(cursor_x, cursor_y, select_pressed, now_ms)`. Every component
has `needs_update()`, true once after a change that needs a redraw.

## Example

```python
from drivekit.autons import default_constants
from drivekit.chassis import Chassis
from drivekit.constants import DriveMode
from drivekit.motors import Motor, MotorGroup

left = MotorGroup([Motor(0), Motor(1)])
right = MotorGroup([Motor(2, reversed=True), Motor(3, reversed=True)])
chassis = Chassis(left, right)
default_constants(chassis)

chassis.control(DriveMode.SPLIT_ARCADE, {3: 50, 1: 0})
print(left.voltage())            # 6.0

chassis.set_coordinates(0, 0, 0)
chassis.forward_tracker_deg = 360
print(chassis.update_odometry())  # about one wheel circumference along +y
```

```python
from drivekit.pid import PID
from drivekit.util import reduce_negative_180_to_180

pid = PID(kp=0.16, ki=0.01, kd=0.95, starti=15,
          settle_error=1.5, settle_time=150, timeout=1000)
output = pid.compute(reduce_negative_180_to_180(10.0 - 350.0))
print(output, pid.is_settled())
```

## What it does not do

- It does not talk to real motors, sensors, a controller or a brain screen;
  all devices are simulated objects whose readings you set yourself.
- It has no background tasks: odometry advances only when
  `Chassis.update_odometry()` is called, and driver control only when
  `Chassis.control()` / `Assembly.control()` are called.
- The chassis has no autonomous motion commands (driving a distance,
  turning to an angle, following a path); the registered routines only place
  the robot at the origin.
- There are no UI screens, no auton selector, console or graph view, and no
  render loop; only the component building blocks above.
- There is no command-line program.

## Tests

```
pytest
```