"""Enumerations and fixed values shared across the drive and UI code."""

from __future__ import annotations

from enum import Enum, IntEnum

SCREEN_WIDTH = 480
SCREEN_HEIGHT = 240

PORT_A = 0
PORT_B = 1
PORT_C = 2
PORT_D = 3
PORT_E = 4
PORT_F = 5
PORT_G = 6
PORT_H = 7

# Main UI palette.
UI_WHITE = "#ffffff"
UI_LIGHT_GRAY = "#999999"
UI_MED_GRAY = "#666666"
UI_DARK_GRAY = "#434343"
UI_BLACK = "#000000"
UI_RED = "#ff0000"

CONFIG_MACRO_BTN_BG_COLOR = "#000000"
CONFIG_DATA_BTN_BG_COLOR = "#232323"
CONFIG_TEST_BTN_BG_COLOR = "#323232"

PNEUMATIC_PORT_BG_COLORS = {
    "A": "#303030",
    "B": "#595959",
    "C": "#858585",
    "D": "#cccccc",
    "E": "#303030",
    "F": "#595959",
    "G": "#858585",
    "H": "#858585",
}

AUTON_TOGGLE_BLUE_BG_COLOR = "#25a3e3"
AUTON_TOGGLE_RED_BG_COLOR = "#f14a41"
AUTON_TOGGLE_LEFT_BG_COLOR = "#d4e404"
AUTON_TOGGLE_RIGHT_BG_COLOR = "#6410a4"
AUTON_TOGGLE_QUALS_BG_COLOR = "#ff0000"
AUTON_TOGGLE_ELIMS_BG_COLOR = "#33e013"
AUTON_TOGGLE_OFF_BG_COLOR = "#666666"
AUTON_TOGGLE_SAWP_BG_COLOR = "#ff9900"


class _Parsable:
    """Adds lookup of members by a loosely written name."""

    @classmethod
    def parse(cls, text):
        """Return the member named by ``text``; case, spaces and dashes are ignored."""
        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown {cls.__name__}: {text!r}") from None


class DriveMode(_Parsable, Enum):
    """Driver-control schemes."""

    SPLIT_ARCADE = "split_arcade"
    SPLIT_ARCADE_CURVED = "split_arcade_curved"
    TANK = "tank"
    TANK_CURVED = "tank_curved"


class Direction(_Parsable, Enum):
    """Rotation direction for turns and swings."""

    FASTEST = "fastest"
    CW = "cw"
    CCW = "ccw"


class AutoVariation(_Parsable, IntEnum):
    """Variation number of an autonomous routine."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


class DistancePosition(_Parsable, Enum):
    """Mounting side of a distance sensor."""

    FRONT_SENSOR = "front"
    REAR_SENSOR = "rear"
    LEFT_SENSOR = "left"
    RIGHT_SENSOR = "right"


class WallPosition(_Parsable, Enum):
    """Field wall used for an odometry reset."""

    TOP_WALL = "top"
    BOTTOM_WALL = "bottom"
    LEFT_WALL = "left"
    RIGHT_WALL = "right"

    @property
    def resets_x(self):
        """True when a reading against this wall fixes the X coordinate."""
        return self in (WallPosition.LEFT_WALL, WallPosition.RIGHT_WALL)


class Color(_Parsable, Enum):
    """Terminal colours for console output."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    @property
    def is_bright(self):
        return self.name.startswith("BRIGHT_")


class UIDistanceUnits(_Parsable, Enum):
    """Units for positions and sizes of UI elements."""

    INCHES = "inches"
    CENTIMETERS = "centimeters"
    PIXELS = "pixels"


class InputType(_Parsable, Enum):
    """Source of UI input."""

    CONTROLLER = "controller"
    TOUCHSCREEN = "touchscreen"


class TextAlign(_Parsable, Enum):
    LEFT = "left"
    CENTER = "center"


class Autons(_Parsable, Enum):
    """Toggle groups of the autonomous selector."""

    RED_BLUE = "red_blue"
    RINGS_GOAL = "rings_goal"
    QUALS_ELIMS = "quals_elims"
    OFF_SAWP = "off_sawp"
    OFF_SKILLS = "off_skills"


class ComponentKind(_Parsable, IntEnum):
    """Type digit stored in UI component identifiers."""

    GRAPHIC = 1
    BACKGROUND = 2
    LABEL = 3
    BUTTON = 4
    TOGGLE = 5
    TEXTBOX = 6