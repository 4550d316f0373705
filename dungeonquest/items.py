"""Equipment: armor, weapons and spells."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .tokens import TokenReader, format_number, quote


class ItemType(Enum):
    ARMOR = "Armor"
    WEAPON = "Weapon"
    SPELL = "Spell"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(text: str) -> ItemType:
        try:
            return ItemType(text)
        except ValueError:
            raise ValueError(f"Invalid item type: {text!r}") from None


@dataclass
class Item:
    """A named piece of equipment with a percentage bonus."""

    name: str
    bonus: float

    type_name: ClassVar[str] = "Common Item"

    def _multiplier(self) -> float:
        return self.bonus / 100

    def apply_bonus(self, damage: float) -> float:
        return damage * self._multiplier()

    def clone(self) -> Item:
        return dataclasses.replace(self)

    def describe(self) -> str:
        return f"{self.type_name}: {self.name} {format_number(self.bonus)}"

    def serialize(self) -> str:
        return f"{quote(self.name)} {format_number(self.bonus)}"


@dataclass
class Armor(Item):
    """Reduces incoming damage by its bonus percentage."""

    type_name: ClassVar[str] = "Armor"

    def _multiplier(self) -> float:
        return 1 - super()._multiplier()


@dataclass
class Weapon(Item):
    """Increases physical damage by its bonus percentage."""

    type_name: ClassVar[str] = "Weapon"

    def _multiplier(self) -> float:
        return 1 + super()._multiplier()


@dataclass
class Spell(Item):
    """Increases magical damage by its bonus percentage."""

    type_name: ClassVar[str] = "Spell"

    def _multiplier(self) -> float:
        return 1 + super()._multiplier()


_ITEM_CLASSES: dict[ItemType, type[Item]] = {
    ItemType.ARMOR: Armor,
    ItemType.WEAPON: Weapon,
    ItemType.SPELL: Spell,
}


def deserialize_item(reader: TokenReader, item_type: ItemType) -> Item:
    """Read a quoted name and a bonus and build an item of the given type."""
    name = reader.next_quoted()
    bonus = reader.next_float()
    try:
        cls = _ITEM_CLASSES[item_type]
    except KeyError:
        raise ValueError("Item type is not supported") from None
    return cls(name, bonus)