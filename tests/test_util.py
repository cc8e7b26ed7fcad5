import io
import math

import pytest

from drivekit.constants import Color, Direction
from drivekit.util import (
    Point,
    TextFileStore,
    angle_error,
    clamp,
    clamp_min_voltage,
    colorize,
    deadband,
    deadband_squared,
    dist,
    is_line_settled,
    left_voltage_scaling,
    line_circle_intersections,
    mirror_angle,
    mirror_direction,
    mirror_x,
    mirror_y,
    percent_to_volt,
    print_colored,
    reduce_0_to_360,
    reduce_negative_180_to_180,
    reduce_negative_90_to_90,
    right_voltage_scaling,
    sign,
    to_ansi,
    to_deg,
    to_rad,
    to_string_float,
    volt_to_percent,
)

ANGLES = [-1000.5, -360, -180, -90.25, -1, 0, 45, 179.9, 180, 359.99, 360, 725]


def _congruent(a, b, period):
    r = (a - b) % period
    return math.isclose(r, 0, abs_tol=1e-6) or math.isclose(r, period, abs_tol=1e-6)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-2, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_deadband():
    assert deadband(3, 5) == 0
    assert deadband(-7, 5) == -7


def test_deadband_squared():
    assert deadband_squared(4, 5) == 0
    assert deadband_squared(100, 5) == pytest.approx(100)
    assert deadband_squared(-100, 5) == pytest.approx(-100)
    for v in range(-100, 101, 7):
        out = deadband_squared(v, 5)
        assert abs(out) <= abs(v) + 1e-9
        assert sign(out) in (0, sign(v))


def test_percent_volt_round_trip():
    assert percent_to_volt(100) == pytest.approx(12)
    for v in (-12, -3.5, 0, 6, 11.9):
        assert percent_to_volt(volt_to_percent(v)) == pytest.approx(v)


def test_rad_deg_round_trip():
    assert to_rad(180) == pytest.approx(math.pi)
    for a in ANGLES:
        assert to_deg(to_rad(a)) == pytest.approx(a)


def test_sign():
    assert sign(-3.2) == -1
    assert sign(0) == 0
    assert sign(8) == 1


@pytest.mark.parametrize("angle", ANGLES)
def test_reduce_ranges(angle):
    a = reduce_0_to_360(angle)
    assert 0 <= a < 360 and _congruent(a, angle, 360)
    b = reduce_negative_180_to_180(angle)
    assert -180 <= b < 180 and _congruent(b, angle, 360)
    c = reduce_negative_90_to_90(angle)
    assert -90 <= c < 90 and _congruent(c, angle, 180)


def test_reduce_boundaries():
    assert reduce_0_to_360(360) == 0
    assert reduce_negative_180_to_180(180) == -180
    assert reduce_negative_180_to_180(-180) == -180
    assert reduce_negative_90_to_90(90) == -90


def test_reduce_rejects_non_finite():
    with pytest.raises(ValueError):
        reduce_0_to_360(math.inf)
    with pytest.raises(ValueError):
        reduce_negative_180_to_180(math.nan)


@pytest.mark.parametrize("angle", [0, 30, 90, 200, 359])
def test_mirror_angle_is_involution(angle):
    assert mirror_angle(angle, False) == angle
    mirrored = mirror_angle(angle, True)
    assert 0 <= mirrored < 360
    assert mirror_angle(mirrored, True) == pytest.approx(angle)


def test_mirror_direction_and_axes():
    assert mirror_direction(Direction.CW, True) is Direction.CCW
    assert mirror_direction(Direction.CCW, True) is Direction.CW
    assert mirror_direction(Direction.FASTEST, True) is Direction.FASTEST
    assert mirror_direction(Direction.CW, False) is Direction.CW
    assert mirror_x(4, True) == -4 and mirror_x(4, False) == 4
    assert mirror_y(-2.5, True) == 2.5 and mirror_y(-2.5, False) == -2.5


@pytest.mark.parametrize("error", [-350, -90, -1, 0, 1, 90, 270])
def test_angle_error(error):
    cw = angle_error(error, Direction.CW)
    ccw = angle_error(error, Direction.CCW)
    fastest = angle_error(error, Direction.FASTEST)
    assert cw >= 0 and _congruent(cw, error, 360)
    assert ccw <= 0 and _congruent(ccw, error, 360)
    assert -180 <= fastest < 180 and _congruent(fastest, error, 360)


def test_angle_error_rejects_unknown_direction():
    with pytest.raises(ValueError):
        angle_error(10, "cw")


def test_is_line_settled():
    assert is_line_settled(0, 0, 0, 0, 5)
    assert not is_line_settled(0, 0, 0, 0, -5)
    assert is_line_settled(0, 0, 90, 5, 0)
    assert not is_line_settled(0, 0, 90, -5, 0)


def test_voltage_scaling_passthrough():
    assert left_voltage_scaling(4, 2) == 6
    assert right_voltage_scaling(4, 2) == 2


def test_voltage_scaling_saturates():
    left = left_voltage_scaling(10, 6)
    right = right_voltage_scaling(10, 6)
    assert max(abs(left), abs(right)) == pytest.approx(12)
    assert left * (10 - 6) == pytest.approx(right * (10 + 6))


def test_clamp_min_voltage():
    assert clamp_min_voltage(1, 3) == 3
    assert clamp_min_voltage(-1, 3) == -3
    assert clamp_min_voltage(0, 3) == 0
    assert clamp_min_voltage(7, 3) == 7


def test_dist():
    assert dist(Point(0, 0), Point(3, 4)) == pytest.approx(5)
    assert dist(Point(1, 2), Point(1, 2)) == 0


def test_line_circle_horizontal_segment():
    found = line_circle_intersections(Point(0, 0), 2, Point(-5, 0), Point(5, 0))
    xs = sorted(p.x for p in found)
    assert xs == pytest.approx([-2, 2])
    assert all(p.y == pytest.approx(0) for p in found)


def test_line_circle_points_on_circle():
    center = Point(1, 1)
    found = line_circle_intersections(center, 3, Point(-6, -4), Point(7, 5))
    assert len(found) == 2
    for p in found:
        assert dist(center, p) == pytest.approx(3)
        assert -6 <= p.x <= 7 and -4 <= p.y <= 5


def test_line_circle_segment_bounds():
    assert line_circle_intersections(Point(0, 0), 2, Point(-1, 0), Point(1, 0)) == []
    one = line_circle_intersections(Point(0, 0), 2, Point(0, 0), Point(5, 0))
    assert len(one) == 1 and one[0].x == pytest.approx(2)
    assert line_circle_intersections(Point(0, 0), 1, Point(-5, 3), Point(5, 3)) == []
    assert line_circle_intersections(Point(0, 0), 1, Point(2, 2), Point(2, 2)) == []


def test_ansi_and_colorize():
    assert to_ansi(Color.RED) == "\x1b[31m"
    assert to_ansi(Color.BRIGHT_WHITE) == "\x1b[97m"
    assert colorize("hi", Color.GREEN) == "\x1b[32mhi\x1b[0m"
    assert colorize(True, Color.RED) == "\x1b[31m1\x1b[0m"
    assert colorize(1.5, Color.RED) == "\x1b[31m1.500000\x1b[0m"
    assert len({to_ansi(c) for c in Color}) == len(Color)


def test_print_colored_writes_line():
    buf = io.StringIO()
    print_colored(42, Color.CYAN, buf)
    assert buf.getvalue() == colorize(42, Color.CYAN) + "\n"


def test_to_string_float():
    assert to_string_float(1.5, 3, False) == "1.500"
    assert to_string_float(1.5, 3, True) == "1.5"
    assert to_string_float(2.0, 2, True) == "2"
    assert to_string_float(-0.0001, 2, True) == "0"
    assert to_string_float(100, 0, True) == "100"


@pytest.fixture
def store(tmp_path):
    s = TextFileStore(tmp_path)
    assert s.create("log.txt")
    return s


def test_store_exists_rules(tmp_path, store):
    assert store.text_file_exists("log.txt")
    assert not store.text_file_exists("missing.txt")
    (tmp_path / "data.csv").write_text("")
    assert not store.text_file_exists("data.csv")


def test_store_unavailable(tmp_path):
    s = TextFileStore(tmp_path / "absent")
    assert not s.create("log.txt")
    assert not s.text_file_exists("log.txt")
    assert s.read_lines("log.txt") == [""]


def test_store_append_reads_newest_first(store):
    store.append("log.txt", "first")
    store.append("log.txt", "second")
    assert store.read_lines("log.txt") == ["second", "first"]


def test_store_wipe(store):
    store.append("log.txt", "entry")
    store.wipe("log.txt")
    assert store.read_lines("log.txt") == []


def test_store_remove_duplicates(store):
    for line in ("keep", "drop me", "keep too", "drop again"):
        store.append("log.txt", line)
    store.remove_duplicates("log.txt", "drop")
    assert store.read_lines("log.txt") == ["keep too", "keep"]


def test_store_missing_file_reads_placeholder(store):
    assert store.read_lines("nothing.txt") == [""]