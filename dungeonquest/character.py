"""The player's character: stats, equipment, combat and persistence."""

from __future__ import annotations

import copy as _copy
from enum import Enum
from typing import TYPE_CHECKING

from .character_class import CharacterClass
from .items import Armor, Item, ItemType, Spell, Weapon, deserialize_item
from .tokens import Console, TokenReader, format_number, quote

if TYPE_CHECKING:
    from .monster import Monster


class AttackType(Enum):
    WEAPON = "Weapon"
    SPELL = "Spell"


_INITIAL_STATS: dict[CharacterClass, tuple[int, int, int]] = {
    CharacterClass.HUMAN: (45, 30, 80),
    CharacterClass.MAGE: (25, 70, 100),
    CharacterClass.WARRIOR: (60, 25, 120),
}

LEVEL_UP_POINTS = 30


class Character:
    """A player character with class-based stats and three equipment slots."""

    def __init__(self, name: str, character_class: CharacterClass = CharacterClass.HUMAN) -> None:
        try:
            strength, mana, health = _INITIAL_STATS[character_class]
        except KeyError:
            raise ValueError("Character class is not defined") from None
        self.name = name
        self.character_class = character_class
        self.strength = strength
        self.mana = mana
        self.max_health = health
        self.current_health = float(health)
        self.armor: Item = Armor("Clothes", 0)
        self.weapon: Item = Weapon("Basic sword", 20)
        self.spell: Item = Spell("Fireball", 20)

    def __repr__(self) -> str:
        return (
            f"Character(name={self.name!r}, character_class={self.character_class}, "
            f"strength={self.strength}, mana={self.mana}, "
            f"health={self.current_health}/{self.max_health})"
        )

    def __lt__(self, other: Character) -> bool:
        return self.name < other.name

    def __gt__(self, other: Character) -> bool:
        return self.name > other.name

    def take_damage(self, damage: float) -> None:
        self.current_health = max(0.0, self.current_health - self.armor.apply_bonus(damage))

    def heal(self) -> None:
        """Restore 20% of max health above half health, otherwise bring health up to half."""
        if self.current_health > self.max_health * 0.5:
            self.current_health = min(
                self.current_health + 0.2 * self.max_health, float(self.max_health)
            )
        else:
            self.current_health = 0.5 * self.max_health

    def deal_damage(self, monster: Monster, attack_type: AttackType) -> None:
        if attack_type is AttackType.WEAPON:
            monster.take_damage(self.weapon.apply_bonus(float(self.strength)))
        else:
            monster.take_damage(self.spell.apply_bonus(float(self.mana)))

    def is_alive(self) -> bool:
        return self.current_health != 0

    def describe(self) -> str:
        return "\n".join(
            [
                f"{self.name}({self.character_class})",
                f"Strength: {self.strength}, Mana: {self.mana}, "
                f"Health: {format_number(self.current_health)}\\{self.max_health}",
                "Equipment: ",
                self.armor.describe(),
                self.weapon.describe(),
                self.spell.describe(),
            ]
        )

    def equip_item(self, item: Item | None, item_type: ItemType) -> None:
        """Put a copy of the item into the slot for its type; None leaves the slot alone."""
        if item is None:
            return
        if item_type is ItemType.ARMOR:
            self.armor = item.clone()
        elif item_type is ItemType.WEAPON:
            self.weapon = item.clone()
        else:
            self.spell = item.clone()

    def copy(self) -> Character:
        """Return an independent copy, equipment included."""
        duplicate = _copy.copy(self)
        duplicate.armor = self.armor.clone()
        duplicate.weapon = self.weapon.clone()
        duplicate.spell = self.spell.clone()
        return duplicate

    @staticmethod
    def choose_attack(console: Console) -> AttackType:
        """Ask until the player picks a weapon or a spell attack."""
        while True:
            console.say("Attack type: 1.Weapon, 2.Spell")
            choice = console.reader.next_token()
            if choice in ("1", "Weapon"):
                return AttackType.WEAPON
            if choice in ("2", "Spell"):
                return AttackType.SPELL
            console.say("Invalid attack type")

    def level_up(self, console: Console) -> None:
        """Let the player spend level-up points on strength, mana or hp."""
        points_left = LEVEL_UP_POINTS
        console.say("Level UP!")
        while points_left != 0:
            console.say(f"You have {points_left} points left")
            console.out.write("Increase stat(stat points): ")
            console.out.flush()
            stat = console.reader.next_token()
            points = console.reader.next_int()
            if 0 <= points <= points_left:
                points_left -= points
                self.increase_stat(stat, points)
            else:
                console.say("You don't have enough points for that")

    def increase_stat(self, stat: str, points: int) -> None:
        if stat == "strength":
            self.strength += points
        elif stat == "mana":
            self.mana += points
        elif stat == "hp":
            self.max_health += points
            self.current_health += points
        else:
            raise ValueError("Invalid stat")

    def serialize(self) -> str:
        return "\n".join(
            [
                f"{quote(self.name)} {self.character_class} {self.strength} {self.mana} "
                f"{self.max_health} {format_number(self.current_health)}",
                self.armor.serialize(),
                self.weapon.serialize(),
                self.spell.serialize(),
            ]
        )

    @staticmethod
    def deserialize(reader: TokenReader) -> Character:
        name = reader.next_quoted()
        character = Character(name, CharacterClass.parse(reader.next_token()))
        character.strength = reader.next_int()
        character.mana = reader.next_int()
        character.max_health = reader.next_int()
        character.current_health = reader.next_float()
        character.armor = deserialize_item(reader, ItemType.ARMOR)
        character.weapon = deserialize_item(reader, ItemType.WEAPON)
        character.spell = deserialize_item(reader, ItemType.SPELL)
        return character

    def serialize_for_high_score(self) -> str:
        return (
            f"{quote(self.name)} {self.character_class} {self.strength} "
            f"{self.mana} {self.max_health}"
        )

    @staticmethod
    def deserialize_for_high_score(reader: TokenReader) -> Character:
        name = reader.next_quoted()
        character = Character(name, CharacterClass.parse(reader.next_token()))
        character.strength = reader.next_int()
        character.mana = reader.next_int()
        character.max_health = reader.next_int()
        character.current_health = 0.0
        return character


def create_character_from_input(console: Console) -> Character:
    """Ask the player for a name and a class and build the character."""
    console.out.write("Enter character name :")
    console.out.flush()
    name = console.reader.next_token()
    console.say("Pick a class: 1. Human, 2. Mage, 3. Warrior")
    character_class = CharacterClass.parse(console.reader.next_token())
    return Character(name, character_class)