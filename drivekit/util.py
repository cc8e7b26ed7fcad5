"""Math helpers, console colouring and a text-file store for logged data."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path

from drivekit.constants import Color, Direction


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def clamp(value, minimum, maximum):
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


def deadband(value, width):
    """Return 0 when ``value`` lies within ``width`` of zero."""
    if abs(value) < width:
        return 0
    return value


def deadband_squared(value, width):
    """Deadband followed by a squared response on a -100..100 scale."""
    if abs(value) < width:
        return 0
    scaled = (value / 100.0) ** 2 * 100
    return scaled if value > 0 else -scaled


def percent_to_volt(percent):
    return percent * 12.0 / 100.0


def volt_to_percent(volt):
    return volt / 12.0 * 100.0


def to_rad(angle_deg):
    return angle_deg / (180.0 / math.pi)


def to_deg(angle_rad):
    return angle_rad * (180.0 / math.pi)


def sign(value):
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _wrap(angle, low, span):
    if not math.isfinite(angle):
        raise ValueError(f"angle must be finite, got {angle!r}")
    result = (angle - low) % span
    if result >= span:
        result -= span
    return result + low


def reduce_negative_180_to_180(angle):
    """Wrap an angle into [-180, 180)."""
    return _wrap(angle, -180.0, 360.0)


def reduce_negative_90_to_90(angle):
    """Wrap an angle into [-90, 90) using a period of 180."""
    return _wrap(angle, -90.0, 180.0)


def reduce_0_to_360(angle):
    """Wrap an angle into [0, 360)."""
    return _wrap(angle, 0.0, 360.0)


def mirror_angle(angle, mirror):
    if mirror:
        return reduce_0_to_360(360 - angle)
    return angle


def mirror_direction(direction, mirror):
    if mirror:
        if direction is Direction.CW:
            return Direction.CCW
        if direction is Direction.CCW:
            return Direction.CW
    return direction


def mirror_x(x, mirror):
    return -x if mirror else x


def mirror_y(y, mirror):
    return -y if mirror else y


def angle_error(error, direction):
    """Adjust a heading error so the turn goes the requested way."""
    if direction is Direction.CW:
        return error + 360 if error < 0 else error
    if direction is Direction.CCW:
        return error - 360 if error > 0 else error
    if direction is Direction.FASTEST:
        return reduce_negative_180_to_180(error)
    raise ValueError(f"unknown direction: {direction!r}")


def is_line_settled(desired_x, desired_y, desired_angle_deg, current_x, current_y):
    """True once the robot has crossed the line through the target perpendicular to its heading."""
    angle = to_rad(desired_angle_deg)
    return (desired_y - current_y) * math.cos(angle) <= -(desired_x - current_x) * math.sin(angle)


def _scaling_ratio(drive_output, heading_output):
    return max(abs(drive_output + heading_output), abs(drive_output - heading_output)) / 12.0


def left_voltage_scaling(drive_output, heading_output):
    ratio = _scaling_ratio(drive_output, heading_output)
    if ratio > 1:
        return (drive_output + heading_output) / ratio
    return drive_output + heading_output


def right_voltage_scaling(drive_output, heading_output):
    ratio = _scaling_ratio(drive_output, heading_output)
    if ratio > 1:
        return (drive_output - heading_output) / ratio
    return drive_output - heading_output


def clamp_min_voltage(drive_output, drive_min_voltage):
    if -drive_min_voltage < drive_output < 0:
        return -drive_min_voltage
    if 0 < drive_output < drive_min_voltage:
        return drive_min_voltage
    return drive_output


def dist(p1, p2):
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def line_circle_intersections(center, radius, p1, p2):
    """Points where the segment p1-p2 meets the circle, in solution order."""
    o1 = Point(p1.x - center.x, p1.y - center.y)
    o2 = Point(p2.x - center.x, p2.y - center.y)
    dx = o2.x - o1.x
    dy = o2.y - o1.y
    dr = dist(o1, o2)
    if dr == 0:
        return []
    cross = o1.x * o2.y - o1.y * o2.x
    discriminant = radius**2 * dr**2 - cross**2
    if discriminant < 0:
        return []

    root = math.sqrt(discriminant)
    sgn = -1 if dy < 0 else 1
    dr2 = dr**2
    solutions = (
        Point((cross * dy + sgn * dx * root) / dr2 + center.x,
              (-cross * dx + abs(dy) * root) / dr2 + center.y),
        Point((cross * dy - sgn * dx * root) / dr2 + center.x,
              (-cross * dx - abs(dy) * root) / dr2 + center.y),
    )
    min_x, max_x = min(p1.x, p2.x), max(p1.x, p2.x)
    min_y, max_y = min(p1.y, p2.y), max(p1.y, p2.y)
    return [
        s for s in solutions
        if min_x <= s.x <= max_x and min_y <= s.y <= max_y
    ]


_ANSI_CODES = {
    Color.BLACK: "\x1b[30m",
    Color.RED: "\x1b[31m",
    Color.GREEN: "\x1b[32m",
    Color.YELLOW: "\x1b[33m",
    Color.BLUE: "\x1b[34m",
    Color.MAGENTA: "\x1b[35m",
    Color.CYAN: "\x1b[36m",
    Color.WHITE: "\x1b[37m",
    Color.BRIGHT_BLACK: "\x1b[90m",
    Color.BRIGHT_RED: "\x1b[91m",
    Color.BRIGHT_GREEN: "\x1b[92m",
    Color.BRIGHT_YELLOW: "\x1b[93m",
    Color.BRIGHT_BLUE: "\x1b[94m",
    Color.BRIGHT_MAGENTA: "\x1b[95m",
    Color.BRIGHT_CYAN: "\x1b[96m",
    Color.BRIGHT_WHITE: "\x1b[97m",
}

_ANSI_RESET = "\x1b[0m"


def to_ansi(color):
    return _ANSI_CODES[color]


def _format_value(value):
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def colorize(value, color=Color.WHITE):
    """Format ``value`` wrapped in the ANSI codes for ``color``."""
    return f"{to_ansi(color)}{_format_value(value)}{_ANSI_RESET}"


def print_colored(value, color=Color.WHITE, file=None):
    stream = sys.stdout if file is None else file
    stream.write(colorize(value, color) + "\n")
    stream.flush()


def to_string_float(num, precision, remove_trailing_zero=False):
    """Fixed-point text, optionally without trailing fractional zeros."""
    text = f"{num:.{precision}f}"
    if remove_trailing_zero and "." in text:
        text = text.rstrip("0").rstrip(".")
        if text == "-0":
            text = "0"
    return text


class TextFileStore:
    """Newline-separated record files kept in one directory.

    Every record is written as a newline followed by its text, so a file
    starts with a newline and records read back newest first.
    """

    def __init__(self, root):
        self.root = Path(root)

    @property
    def available(self):
        return self.root.is_dir()

    def _path(self, file_name):
        return self.root / file_name

    def text_file_exists(self, file_name):
        if not self.available:
            return False
        if not self._path(file_name).is_file():
            print_colored(f"{file_name} NOT FOUND", Color.BRIGHT_RED)
            return False
        if not file_name.endswith(".txt"):
            print_colored(f"{file_name} IS NOT A .TXT", Color.BRIGHT_RED)
            return False
        return True

    def create(self, file_name):
        """Create an empty file if missing; False when the store is unavailable."""
        if not self.available:
            return False
        self._path(file_name).touch(exist_ok=True)
        return True

    def _read(self, file_name):
        with open(self._path(file_name), encoding="utf-8", newline="") as fh:
            return fh.read()

    def _write(self, file_name, content, mode="w"):
        with open(self._path(file_name), mode, encoding="utf-8", newline="") as fh:
            fh.write(content)

    def wipe(self, file_name):
        if self.text_file_exists(file_name):
            self._write(file_name, "")

    def append(self, file_name, data):
        if self.text_file_exists(file_name):
            self._write(file_name, "\n" + data, mode="a")

    def remove_duplicates(self, file_name, duplicate_word):
        """Drop every record that contains ``duplicate_word``."""
        if not self.text_file_exists(file_name):
            return
        head, *records = self._read(file_name).split("\n")
        kept = [head] + [r for r in records if duplicate_word not in r]
        self._write(file_name, "\n".join(kept))

    def read_lines(self, file_name):
        """Records of the file, newest first; ``[""]`` if the file is unusable."""
        if not self.text_file_exists(file_name):
            return [""]
        _, *records = self._read(file_name).split("\n")
        return list(reversed(records))