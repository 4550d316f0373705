import pytest

from dungeonquest.commands import Direction, InputCommand, command_to_direction


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("w", InputCommand.MOVE_UP),
        ("a", InputCommand.MOVE_LEFT),
        ("s", InputCommand.MOVE_DOWN),
        ("d", InputCommand.MOVE_RIGHT),
        ("print", InputCommand.PRINT_CHARACTER),
        ("exit", InputCommand.EXIT),
    ],
)
def test_parse_commands(text, expected):
    assert InputCommand.parse(text) is expected


def test_parse_command_ignores_case_and_whitespace():
    assert InputCommand.parse("  PRINT ") is InputCommand.PRINT_CHARACTER
    assert InputCommand.parse("W") is InputCommand.MOVE_UP
    assert InputCommand.parse("Exit\n") is InputCommand.EXIT


@pytest.mark.parametrize("text", ["", "x", "up", "quit"])
def test_parse_invalid_command(text):
    with pytest.raises(ValueError, match="Invalid command"):
        InputCommand.parse(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("w", Direction.UP),
        ("A", Direction.LEFT),
        (" s", Direction.DOWN),
        ("d", Direction.RIGHT),
    ],
)
def test_parse_direction(text, expected):
    assert Direction.parse(text) is expected


@pytest.mark.parametrize("text", ["", "   ", "q", "1"])
def test_parse_invalid_direction(text):
    with pytest.raises(ValueError, match="Invalid Direction"):
        Direction.parse(text)


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        (InputCommand.MOVE_UP, Direction.UP),
        (InputCommand.MOVE_LEFT, Direction.LEFT),
        (InputCommand.MOVE_DOWN, Direction.DOWN),
        (InputCommand.MOVE_RIGHT, Direction.RIGHT),
    ],
)
def test_command_to_direction(command, expected):
    assert command_to_direction(command) is expected


@pytest.mark.parametrize("command", [InputCommand.PRINT_CHARACTER, InputCommand.EXIT])
def test_command_to_direction_rejects_non_moves(command):
    with pytest.raises(ValueError, match="not a move command"):
        command_to_direction(command)


def test_opposite_directions_cancel():
    up = Direction.parse("w")
    down = Direction.parse("s")
    left = Direction.parse("a")
    right = Direction.parse("d")
    assert up.dx + down.dx == 0
    assert up.dy + down.dy == 0
    assert left.dx + right.dx == 0
    assert left.dy + right.dy == 0


def test_up_decreases_row():
    up = command_to_direction(InputCommand.MOVE_UP)
    right = command_to_direction(InputCommand.MOVE_RIGHT)
    assert up.dy < 0
    assert up.dx == 0
    assert right.dx > 0