import pytest

from dungeonquest.character_class import CharacterClass


@pytest.mark.parametrize("text, expected", [
    ("Human", CharacterClass.HUMAN),
    ("Mage", CharacterClass.MAGE),
    ("Warrior", CharacterClass.WARRIOR),
])
def test_parse_known_classes(text, expected):
    assert CharacterClass.parse(text) is expected


@pytest.mark.parametrize("character_class", list(CharacterClass))
def test_text_round_trip(character_class):
    assert CharacterClass.parse(str(character_class)) is character_class


@pytest.mark.parametrize("text", ["human", "1", "Rogue", ""])
def test_parse_rejects_other_text(text):
    with pytest.raises(ValueError, match="Invalid character class choice"):
        CharacterClass.parse(text)