from drivekit.assembly import Assembly, Buttons, Flow, IntakeMode
from drivekit.motors import BrakeType


def test_starts_feeding_top_goal():
    assembly = Assembly()
    assert assembly.intake_mode is IntakeMode.TOP
    assembly.apply_intake()
    assert [m.voltage for m in assembly.motors] == [12, 12, 12, 12]


def test_l1_uses_flow():
    assembly = Assembly()
    assembly.control(Buttons(l1=True))
    assert assembly.intake_mode is IntakeMode.TOP
    assembly.control(Buttons(down=True, l1=True))
    assert assembly.flow is Flow.MIDDLE
    assert assembly.intake_mode is IntakeMode.MIDDLE
    assembly.apply_intake()
    assert assembly.score.voltage == -3
    assert assembly.intake.voltage == 12


def test_flow_persists_until_right():
    assembly = Assembly()
    assembly.control(Buttons(down=True))
    assembly.control(Buttons(l1=True))
    assert assembly.intake_mode is IntakeMode.MIDDLE
    assembly.control(Buttons(right=True, l1=True))
    assert assembly.flow is Flow.TOP
    assert assembly.intake_mode is IntakeMode.TOP


def test_l2_reverses_everything():
    assembly = Assembly()
    assembly.control(Buttons(l2=True))
    assembly.apply_intake()
    assert assembly.intake_mode is IntakeMode.BOTTOM
    assert [m.voltage for m in assembly.motors] == [-12, -12, -12, -12]


def test_no_buttons_stops():
    assembly = Assembly()
    assembly.apply_intake()
    assembly.control(Buttons())
    assembly.apply_intake()
    assert assembly.intake_mode is IntakeMode.STOPPED
    assert all(not m.is_spinning for m in assembly.motors)
    assert all(m.stopped_with is BrakeType.COAST for m in assembly.motors)


def test_wings_toggle_once_per_press():
    assembly = Assembly()
    assembly.control(Buttons(y=True))
    assembly.control(Buttons(y=True))
    assert assembly.wings.state is True
    assembly.control(Buttons())
    assembly.control(Buttons(y=True))
    assert assembly.wings.state is False


def test_scraper_and_park_buttons():
    assembly = Assembly()
    assembly.control(Buttons(b=True, x=True))
    assert assembly.scraper.state is True
    assert assembly.park.state is True
    assert assembly.wings.state is False
    assembly.control(Buttons(b=False, x=True))
    assembly.control(Buttons(b=True, x=True))
    assert assembly.scraper.state is False
    assert assembly.park.state is True