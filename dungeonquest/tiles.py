"""Map tiles: walls, floor, the player, monsters and treasure."""

from __future__ import annotations

import copy
import random
from abc import ABC
from dataclasses import dataclass, field
from typing import ClassVar

from .battle import battle
from .character import Character
from .items import Armor, Item, ItemType, Spell, Weapon, deserialize_item
from .monster import Monster
from .tokens import Console, TokenReader


class Tile(ABC):
    """One square of the map."""

    symbol: ClassVar[str]

    def __str__(self) -> str:
        return self.symbol

    def apply(self, character: Character, console: Console) -> None:
        """Act on a character stepping onto this tile."""

    def is_empty(self) -> bool:
        return False

    def on_expended(self) -> Tile:
        """Return the tile that stands here once it has been stepped on."""
        return self

    def serialize(self) -> str:
        return self.symbol

    def clone(self) -> Tile:
        return copy.copy(self)


@dataclass
class WallTile(Tile):
    symbol: ClassVar[str] = "#"


@dataclass
class EmptyTile(Tile):
    symbol: ClassVar[str] = "."

    def is_empty(self) -> bool:
        return True


@dataclass
class CharacterTile(Tile):
    symbol: ClassVar[str] = "C"

    def apply(self, character: Character, console: Console) -> None:
        console.say(character.describe())


@dataclass
class MonsterTile(Tile):
    """A monster that fights whoever steps here and stays until it is beaten."""

    monster: Monster
    rng: random.Random | None = field(default=None, compare=False, repr=False)

    symbol: ClassVar[str] = "M"

    def apply(self, character: Character, console: Console) -> None:
        battle(character, self.monster, console, self.rng)

    def on_expended(self) -> Tile:
        return self if self.monster.is_alive() else EmptyTile()

    def serialize(self) -> str:
        return f"{self.symbol} {self.monster.serialize()}"

    def clone(self) -> Tile:
        return MonsterTile(copy.copy(self.monster), self.rng)


@dataclass
class TreasureTile(Tile):
    """An item the player may equip; the treasure is gone once visited."""

    item: Item
    item_type: ItemType

    symbol: ClassVar[str] = "T"

    def apply(self, character: Character, console: Console) -> None:
        console.say(self.item.describe())
        console.out.write("Equip item? ")
        console.out.flush()
        if console.reader.next_char().lower() == "y":
            character.equip_item(self.item, self.item_type)

    def on_expended(self) -> Tile:
        return EmptyTile()

    def serialize(self) -> str:
        return f"{self.symbol} {self.item_type} {self.item.serialize()}"

    def clone(self) -> Tile:
        return TreasureTile(self.item.clone(), self.item_type)

    @staticmethod
    def random(level: int, rng: random.Random | None = None) -> TreasureTile:
        """Make a treasure of a random type whose bonus grows with the level."""
        item_type = _TREASURE_ORDER[(rng or random).randrange(len(_TREASURE_ORDER))]
        item_class, name = _TREASURE_ITEMS[item_type]
        return TreasureTile(item_class(name, TreasureTile.bonus_from_level(level)), item_type)

    @staticmethod
    def bonus_from_level(level: int) -> float:
        bonus = 20.0
        for _ in range(1, level):
            bonus *= 1.1
        return bonus


_TREASURE_ORDER = (ItemType.ARMOR, ItemType.WEAPON, ItemType.SPELL)

_TREASURE_ITEMS: dict[ItemType, tuple[type[Item], str]] = {
    ItemType.ARMOR: (Armor, "Armor"),
    ItemType.WEAPON: (Weapon, "Sword"),
    ItemType.SPELL: (Spell, "Spell"),
}

_SIMPLE_TILES: dict[str, type[Tile]] = {
    WallTile.symbol: WallTile,
    EmptyTile.symbol: EmptyTile,
    CharacterTile.symbol: CharacterTile,
}


def deserialize_tile(reader: TokenReader) -> Tile:
    """Read one tile written by Tile.serialize."""
    symbol = reader.next_char()
    if symbol in _SIMPLE_TILES:
        return _SIMPLE_TILES[symbol]()
    if symbol == MonsterTile.symbol:
        return MonsterTile(Monster.deserialize(reader))
    if symbol == TreasureTile.symbol:
        item_type = ItemType.parse(reader.next_token())
        return TreasureTile(deserialize_item(reader, item_type), item_type)
    raise ValueError("Unsupported tile type")