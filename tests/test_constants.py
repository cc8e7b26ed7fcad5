import pytest

from drivekit.constants import (
    AutoVariation,
    Autons,
    Color,
    ComponentKind,
    Direction,
    DistancePosition,
    DriveMode,
    InputType,
    TextAlign,
    UIDistanceUnits,
    WallPosition,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("split arcade curved", DriveMode.SPLIT_ARCADE_CURVED),
        ("TANK", DriveMode.TANK),
        ("tank-curved", DriveMode.TANK_CURVED),
    ],
)
def test_drive_mode_parse(text, expected):
    assert DriveMode.parse(text) is expected


def test_parse_accepts_every_member_name():
    for enum_cls in (
        DriveMode,
        Direction,
        AutoVariation,
        DistancePosition,
        WallPosition,
        Color,
        UIDistanceUnits,
        InputType,
        TextAlign,
        Autons,
        ComponentKind,
    ):
        for member in enum_cls:
            assert enum_cls.parse(member.name.lower()) is member


def test_parse_unknown_raises():
    with pytest.raises(ValueError):
        Direction.parse("sideways")


def test_auto_variation_numbers():
    assert AutoVariation(3) is AutoVariation.THREE
    assert [int(v) for v in AutoVariation] == [1, 2, 3, 4]
    with pytest.raises(ValueError):
        AutoVariation(5)


def test_component_kind_matches_id_digits():
    assert ComponentKind.GRAPHIC == 1
    assert ComponentKind.BUTTON == 4
    assert ComponentKind.TEXTBOX == 6
    assert ComponentKind(5) is ComponentKind.TOGGLE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("left_wall", True),
        ("right_wall", True),
        ("top_wall", False),
        ("bottom_wall", False),
    ],
)
def test_wall_resets_x(text, expected):
    assert WallPosition.parse(text).resets_x is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("bright_cyan", True),
        ("bright_black", True),
        ("cyan", False),
        ("white", False),
    ],
)
def test_color_brightness(text, expected):
    assert Color.parse(text).is_bright is expected


def test_color_bright_and_plain_counts_match():
    parsed = [Color.parse(member.name.lower()) for member in Color]
    bright = [c for c in parsed if c.is_bright]
    plain = [c for c in parsed if not c.is_bright]
    assert len(bright) == len(plain) == 8