import pytest

from thrustpad.app import main
from thrustpad.controller import Controller


def _position(c):
    return f"x={c.x:g} y={c.y:g}"


def test_no_actions_reports_start_and_prints_message(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == _position(Controller())
    assert "I have printed" in captured.err


def test_left_action_moves_and_advances_frame(capsys):
    assert main(["left"]) == 0
    expected = Controller()
    expected.move_left()
    expected.update_state()
    assert capsys.readouterr().out.strip() == _position(expected)


def test_thrust_then_frames(capsys):
    assert main(["thrust", "right", "--frames", "5"]) == 0
    expected = Controller()
    expected.apply_thrust()
    expected.update_state()
    expected.move_right()
    expected.update_state()
    expected.run(5)
    assert capsys.readouterr().out.strip() == _position(expected)


def test_unknown_action_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["jump"])
    assert info.value.code == 2


def test_negative_frames_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--frames", "-1"])
    assert info.value.code == 2