import io
import random

import pytest

from dungeonquest.character import AttackType, Character, create_character_from_input
from dungeonquest.character_class import CharacterClass
from dungeonquest.items import Armor, ItemType, Spell, Weapon
from dungeonquest.monster import Monster
from dungeonquest.tokens import Console, TokenReader


def make_console(text):
    return Console(reader=TokenReader(text), out=io.StringIO())


@pytest.mark.parametrize(
    "name, cls, strength, mana, health",
    [
        ("Bob", CharacterClass.HUMAN, 45, 30, 80),
        ("Gandalf", CharacterClass.MAGE, 25, 70, 100),
        ("Conan", CharacterClass.WARRIOR, 60, 25, 120),
    ],
)
def test_initial_stats(name, cls, strength, mana, health):
    character = Character(name, cls)
    output = character.describe()
    assert f"Strength: {strength}" in output
    assert f"Mana: {mana}" in output
    assert character.current_health == health


def test_character_can_die():
    character = Character("Test", CharacterClass.HUMAN)
    character.take_damage(100.0)
    assert character.is_alive() is False


def test_heal_below_half_brings_to_half():
    character = Character("Healer", CharacterClass.HUMAN)
    character.take_damage(45.0)
    character.heal()
    assert character.current_health == 40


def test_heal_above_half_adds_twenty_percent():
    character = Character("Healer", CharacterClass.HUMAN)
    character.take_damage(30.0)
    character.heal()
    assert character.current_health == 66


def test_overheal_caps_at_max_health():
    character = Character("Healer", CharacterClass.HUMAN)
    character.heal()
    assert character.current_health == 80


def test_copy_is_equivalent():
    original = Character("Hero", CharacterClass.WARRIOR)
    original.take_damage(20.0)
    duplicate = original.copy()
    assert duplicate.describe() == original.describe()


def test_copy_is_independent():
    original = Character("Hero", CharacterClass.WARRIOR)
    duplicate = original.copy()
    duplicate.equip_item(Armor("Plate", 40), ItemType.ARMOR)
    duplicate.take_damage(10)
    assert original.current_health == 120
    assert "Clothes" in original.describe()
    assert "Plate" in duplicate.describe()


def test_equip_armor():
    character = Character("Hero", CharacterClass.HUMAN)
    character.equip_item(Armor("Leather Armor", 50), ItemType.ARMOR)
    character.take_damage(20)
    assert "Leather Armor 50" in character.describe()
    assert character.current_health == 70


def test_equip_weapon():
    character = Character("Hero", CharacterClass.HUMAN)
    character.equip_item(Weapon("Steel Sword", 50), ItemType.WEAPON)
    assert "Steel Sword 50" in character.describe()


def test_equip_spell():
    character = Character("Hero", CharacterClass.HUMAN)
    character.equip_item(Spell("Ice Spear", 50), ItemType.SPELL)
    assert "Ice Spear 50" in character.describe()


def test_equip_none_keeps_slot():
    character = Character("Hero", CharacterClass.HUMAN)
    character.equip_item(None, ItemType.WEAPON)
    assert "Weapon: Basic sword 20" in character.describe()


def test_character_and_monster_deal_damage():
    dragon = Monster("Dragon", 1)
    hero = Character("Hero", CharacterClass.HUMAN)
    hero.deal_damage(dragon, AttackType.WEAPON)
    dragon.deal_damage(hero, random.Random(0))
    assert dragon.current_health == pytest.approx(4.1, rel=1e-4)
    assert hero.current_health == pytest.approx(55, rel=1e-4)


def test_spell_attack_uses_mana():
    dragon = Monster("Dragon", 1)
    mage = Character("Merlin", CharacterClass.MAGE)
    mage.deal_damage(dragon, AttackType.SPELL)
    # 70 mana * 1.2 fireball = 84, reduced by 0.85 -> exceeds 50 health
    assert dragon.current_health == 0
    assert not dragon.is_alive()


def test_choose_attack_retries_on_invalid():
    console = make_console("3 Spell\n")
    assert Character.choose_attack(console) is AttackType.SPELL
    assert "Invalid attack type" in console.out.getvalue()


def test_choose_attack_by_number():
    console = make_console("1\n")
    assert Character.choose_attack(console) is AttackType.WEAPON


def test_increase_stat():
    character = Character("Hero", CharacterClass.HUMAN)
    character.increase_stat("hp", 5)
    character.increase_stat("mana", 3)
    assert character.max_health == 85
    assert character.current_health == 85
    assert character.mana == 33


def test_increase_stat_invalid():
    character = Character("Hero", CharacterClass.HUMAN)
    with pytest.raises(ValueError, match="Invalid stat"):
        character.increase_stat("luck", 5)


def test_level_up_spends_points():
    character = Character("Hero", CharacterClass.HUMAN)
    console = make_console("strength 10\nmana 40\nhp 20\n")
    character.level_up(console)
    assert character.strength == 55
    assert character.mana == 30
    assert character.max_health == 100
    assert character.current_health == 100
    output = console.out.getvalue()
    assert "Level UP!" in output
    assert "You don't have enough points for that" in output


def test_serialize_round_trip():
    character = Character("Sir Robin", CharacterClass.MAGE)
    character.take_damage(12.5)
    character.equip_item(Armor("Iron Mail", 30), ItemType.ARMOR)
    restored = Character.deserialize(TokenReader(character.serialize()))
    assert restored.describe() == character.describe()
    assert restored.current_health == pytest.approx(87.5)
    assert restored.armor.apply_bonus(100) == pytest.approx(70)


def test_serialize_format():
    character = Character("Bob", CharacterClass.HUMAN)
    assert character.serialize().splitlines() == [
        '"Bob" Human 45 30 80 80',
        '"Clothes" 0',
        '"Basic sword" 20',
        '"Fireball" 20',
    ]


def test_high_score_round_trip():
    character = Character("Old Hero", CharacterClass.WARRIOR)
    text = character.serialize_for_high_score()
    assert text == '"Old Hero" Warrior 60 25 120'
    restored = Character.deserialize_for_high_score(TokenReader(text))
    assert restored.name == "Old Hero"
    assert restored.character_class is CharacterClass.WARRIOR
    assert restored.serialize_for_high_score() == text


def test_ordering_by_name():
    alice = Character("Alice", CharacterClass.MAGE)
    bob = Character("Bob", CharacterClass.HUMAN)
    assert alice < bob
    assert bob > alice
    assert sorted([bob, alice])[0].name == "Alice"


def test_create_character_from_input():
    console = make_console("Zed\nWarrior\n")
    character = create_character_from_input(console)
    assert character.name == "Zed"
    assert character.character_class is CharacterClass.WARRIOR
    assert character.current_health == 120


def test_create_character_rejects_unknown_class():
    console = make_console("Zed\n2\n")
    with pytest.raises(ValueError, match="Invalid character class choice"):
        create_character_from_input(console)