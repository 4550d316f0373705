"""Monsters that grow stronger and tougher with the level."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from .tokens import TokenReader, format_number, quote


class _Damageable(Protocol):
    def take_damage(self, damage: float) -> None: ...


@dataclass(init=False)
class Monster:
    """A monster whose stats and damage resistance depend on its level."""

    name: str
    strength: int
    mana: int
    max_health: int
    current_health: float
    taken_damage_mult: float

    def __init__(self, name: str = "", level: int = 1) -> None:
        if level < 1:
            raise ValueError("Monster level must be at least 1")
        self.name = name
        self.strength = 25 + 10 * (level - 1)
        self.mana = 25 + 10 * (level - 1)
        self.max_health = 50 + 10 * (level - 1)
        self.current_health = float(self.max_health)
        self.taken_damage_mult = Monster.starting_taken_damage_mult(level)

    def take_damage(self, damage: float) -> None:
        self.current_health = max(0.0, self.current_health - damage * self.taken_damage_mult)

    def deal_damage(self, character: _Damageable, rng: random.Random | None = None) -> None:
        """Hit the character with either strength or mana, chosen at random."""
        choice = (rng or random).randrange(2)
        character.take_damage(self.strength if choice == 0 else self.mana)

    def is_alive(self) -> bool:
        return self.current_health != 0

    def describe(self) -> str:
        return (
            f"{self.name}\n"
            f"Strength: {self.strength}, Mana: {self.mana}, "
            f"Health: {format_number(self.current_health)}\\{self.max_health}\n"
            f"Damage reduction mult: {format_number(self.taken_damage_mult)}"
        )

    @staticmethod
    def starting_taken_damage_mult(level: int) -> float:
        """Fraction of incoming damage a monster of this level takes; never below 0.01."""
        reduction = 15.0
        for _ in range(level - 1):
            reduction += reduction * 0.05
        return max(1.0, 100 - reduction) / 100

    def serialize(self) -> str:
        return (
            f"{quote(self.name)} {self.strength} {self.mana} {self.max_health} "
            f"{format_number(self.current_health)} {format_number(self.taken_damage_mult)}"
        )

    @staticmethod
    def deserialize(reader: TokenReader) -> Monster:
        monster = Monster()
        monster.name = reader.next_quoted()
        monster.strength = reader.next_int()
        monster.mana = reader.next_int()
        monster.max_health = reader.next_int()
        monster.current_health = reader.next_float()
        monster.taken_damage_mult = reader.next_float()
        return monster