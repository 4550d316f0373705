"""The dungeon grid: generation, movement and persistence."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .character import Character
from .commands import Direction
from .monster import Monster
from .tiles import CharacterTile, EmptyTile, Tile, TreasureTile, WallTile, MonsterTile, deserialize_tile
from .tokens import Console, TokenReader

START_X = 1
START_Y = 1
MONSTER_NAME = "Dragon"


def level_parameters(level: int) -> tuple[int, int, int, int]:
    """Return (width, height, monsters, treasures) for a level; each grows like a Fibonacci sequence."""
    if level < 1:
        raise ValueError("Starting level need to be at least 1")
    if level == 1:
        return 10, 10, 2, 2
    previous = (10, 10, 2, 2)
    current = (15, 10, 3, 2)
    for _ in range(2, level):
        previous, current = current, tuple(a + b for a, b in zip(current, previous))
    width, height, monsters, treasures = current
    return width, height, monsters, treasures


@dataclass
class GameMap:
    """A walled grid of tiles with the player's position."""

    width: int = 0
    height: int = 0
    number_of_monsters: int = 0
    number_of_treasures: int = 0
    grid: list[list[Tile]] = field(default_factory=list)
    character_x: int = 0
    character_y: int = 0

    @staticmethod
    def from_level(level: int, rng: random.Random | None = None) -> GameMap:
        """Generate a fresh map for the level with monsters and treasures at random places."""
        width, height, monsters, treasures = level_parameters(level)
        grid: list[list[Tile]] = [
            [
                WallTile() if y in (0, height - 1) or x in (0, width - 1) else EmptyTile()
                for x in range(width)
            ]
            for y in range(height)
        ]
        grid[START_Y][START_X] = CharacterTile()

        positions = [
            (x, y)
            for y, row in enumerate(grid)
            for x, tile in enumerate(row)
            if tile.is_empty()
        ]
        if len(positions) < monsters + treasures:
            raise ValueError("Map is too small for its monsters and treasures")
        (rng or random).shuffle(positions)

        for x, y in positions[:monsters]:
            grid[y][x] = MonsterTile(Monster(MONSTER_NAME, level), rng)
        for x, y in positions[monsters:monsters + treasures]:
            grid[y][x] = TreasureTile.random(level, rng)

        return GameMap(width, height, monsters, treasures, grid, START_X, START_Y)

    def render(self) -> str:
        rows = ["".join(str(tile) for tile in row) for row in self.grid]
        rows.append(f"Character coords: {{{self.character_x}, {self.character_y}}}")
        return "\n".join(rows)

    def _target(self, direction: Direction) -> tuple[int, int]:
        return self.character_x + direction.dx, self.character_y + direction.dy

    def can_move(self, direction: Direction) -> bool:
        x, y = self._target(direction)
        return not isinstance(self.grid[y][x], WallTile)

    def move(self, character: Character, direction: Direction, console: Console | None = None) -> None:
        """Step the player one tile, letting the tile act on the character first."""
        if not self.can_move(direction):
            return
        console = console or Console()
        x, y = self._target(direction)
        target = self.grid[y][x]
        target.apply(character, console)
        remaining = target.on_expended()
        self.grid[y][x] = self.grid[self.character_y][self.character_x]
        self.grid[self.character_y][self.character_x] = remaining
        self.character_x, self.character_y = x, y

    def on_next_level_field(self) -> bool:
        return self.character_y == self.height - 2 and self.character_x == self.width - 2

    def serialize(self) -> str:
        header = (
            f"{self.width} {self.height} {self.number_of_monsters} "
            f"{self.number_of_treasures} {self.character_x} {self.character_y}"
        )
        return "\n".join([header, *(tile.serialize() for row in self.grid for tile in row)])

    @staticmethod
    def deserialize(reader: TokenReader) -> GameMap:
        width = reader.next_int()
        height = reader.next_int()
        monsters = reader.next_int()
        treasures = reader.next_int()
        x = reader.next_int()
        y = reader.next_int()
        grid = [[deserialize_tile(reader) for _ in range(width)] for _ in range(height)]
        return GameMap(width, height, monsters, treasures, grid, x, y)