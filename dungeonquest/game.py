"""The game loop, saving and loading, and the command-line entry point."""

from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass, field

from .character import Character, create_character_from_input
from .commands import InputCommand, command_to_direction
from .game_map import GameMap
from .high_scores import HIGH_SCORE_PATH, save_score
from .tokens import Console, TokenReader

_MOVES = {
    InputCommand.MOVE_UP,
    InputCommand.MOVE_LEFT,
    InputCommand.MOVE_DOWN,
    InputCommand.MOVE_RIGHT,
}


@dataclass
class Game:
    """A running game: the level, the player and the current map."""

    level: int
    player: Character
    current_map: GameMap
    rng: random.Random | None = field(default=None, compare=False, repr=False)
    high_score_path: str | os.PathLike[str] = HIGH_SCORE_PATH

    @staticmethod
    def new(level: int = 1, console: Console | None = None, rng: random.Random | None = None) -> Game:
        """Ask the player for a character and generate the map for the level."""
        player = create_character_from_input(console or Console())
        return Game(level, player, GameMap.from_level(level, rng), rng)

    def start(self, console: Console | None = None) -> None:
        """Run the command loop until the player exits or dies."""
        console = console or Console()
        while self.player.is_alive():
            console.say(self.current_map.render())
            try:
                command = InputCommand.parse(console.reader.next_token())
                if command in _MOVES:
                    self.current_map.move(self.player, command_to_direction(command), console)
                    if self.current_map.on_next_level_field():
                        self.player.level_up(console)
                        console.say("Generating new map")
                        self.level += 1
                        self.current_map = GameMap.from_level(self.level, self.rng)
                elif command is InputCommand.PRINT_CHARACTER:
                    console.say(self.player.describe())
                else:
                    self._exit(console)
                    return
            except (ValueError, OSError) as error:
                console.say(str(error))
        console.say("You Died")
        self.update_high_scores()

    def _exit(self, console: Console) -> None:
        console.out.write("Do you wish to save the game?(y):")
        console.out.flush()
        answer = console.reader.next_char()
        if answer != "y":
            return
        console.reader.read_line()
        console.out.write("Enter file path:")
        console.out.flush()
        self.save(console.reader.read_line())

    def save(self, path: str | os.PathLike[str]) -> None:
        with open(path, "w", encoding="utf-8") as file:
            file.write(f"{self.level}\n{self.player.serialize()}\n{self.current_map.serialize()}\n")

    @staticmethod
    def load(path: str | os.PathLike[str]) -> Game:
        with open(path, encoding="utf-8") as file:
            reader = TokenReader(file)
            level = reader.next_int()
            player = Character.deserialize(reader)
            current_map = GameMap.deserialize(reader)
        return Game(level, player, current_map)

    def update_high_scores(self) -> None:
        save_score(self.level, self.player, self.high_score_path)


def main(argv: list[str] | None = None) -> int:
    """Load the saved game named on the command line, or start a new one at level 1."""
    args = sys.argv[1:] if argv is None else argv
    console = Console()
    try:
        game = Game.load(args[0]) if args else Game.new(1, console)
        game.start(console)
    except EOFError:
        return 0
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())