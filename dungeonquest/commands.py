"""Player commands and movement directions."""

from __future__ import annotations

from enum import Enum


class InputCommand(Enum):
    MOVE_UP = "w"
    MOVE_LEFT = "a"
    MOVE_DOWN = "s"
    MOVE_RIGHT = "d"
    PRINT_CHARACTER = "print"
    EXIT = "exit"

    @staticmethod
    def parse(text: str) -> InputCommand:
        """Read a command word, ignoring case and surrounding whitespace."""
        try:
            return InputCommand(text.strip().lower())
        except ValueError:
            raise ValueError("Invalid command") from None


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @staticmethod
    def parse(text: str) -> Direction:
        """Read a direction from the first non-blank character: w, a, s or d."""
        stripped = text.strip()
        if not stripped:
            raise ValueError("Invalid Direction")
        try:
            return _KEY_TO_DIRECTION[stripped[0].lower()]
        except KeyError:
            raise ValueError("Invalid Direction") from None


_KEY_TO_DIRECTION: dict[str, Direction] = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

_COMMAND_TO_DIRECTION: dict[InputCommand, Direction] = {
    InputCommand.MOVE_UP: Direction.UP,
    InputCommand.MOVE_LEFT: Direction.LEFT,
    InputCommand.MOVE_DOWN: Direction.DOWN,
    InputCommand.MOVE_RIGHT: Direction.RIGHT,
}


def command_to_direction(command: InputCommand) -> Direction:
    """Return the direction a move command stands for."""
    try:
        return _COMMAND_TO_DIRECTION[command]
    except KeyError:
        raise ValueError("Invalid conversion: command is not a move command") from None