"""Turn-based fights between the player and a monster."""

from __future__ import annotations

import random

from .character import Character
from .monster import Monster
from .tokens import Console, format_number


def _status(character: Character, monster: Monster) -> str:
    return (
        f"Character: {format_number(character.current_health)}, "
        f"Monster: {format_number(monster.current_health)}"
    )


def battle(
    character: Character,
    monster: Monster,
    console: Console | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Fight until one side falls; return True if the player wins (and is then healed)."""
    console = console or Console()
    chooser = rng or random
    console.say("A battle begins!")
    player_turn = chooser.randrange(2) == 0

    while character.is_alive() and monster.is_alive():
        console.say(_status(character, monster))
        if player_turn:
            attack = Character.choose_attack(console)
            character.deal_damage(monster, attack)
        else:
            monster.deal_damage(character, rng)
        console.say(f"After: {_status(character, monster)}")
        player_turn = not player_turn

    console.say(f"End: {_status(character, monster)}")

    if character.is_alive():
        console.say("Player wins!")
        character.heal()
        return True
    console.say("Player died!")
    return False