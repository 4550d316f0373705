"""The playable character classes."""

from __future__ import annotations

from enum import Enum


class CharacterClass(Enum):
    HUMAN = "Human"
    MAGE = "Mage"
    WARRIOR = "Warrior"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(text: str) -> CharacterClass:
        try:
            return CharacterClass(text)
        except ValueError:
            raise ValueError("Invalid character class choice") from None