# dungeonquest

A small turn-based dungeon crawler for the terminal. You create a hero, walk
a walled map, fight monsters, pick up treasure and move on to ever larger
levels. When your hero dies, the run is recorded in a high-score table.

## Installing

```
pip install .
```

## Playing

Start a new game at level 1:

```
dungeonquest
```

Or continue a saved game by passing the path of a save file:

```
dungeonquest mysave.txt
```

If the save file cannot be read, the error is printed and the command exits
with status 1. Reaching the end of input ends the game quietly.

A new game asks for a character name (a single word) and a class, typed by
name: `Human`, `Mage` or `Warrior`. Each class starts with different
strength, mana and health, and with clothes, a basic sword and a Fireball
spell.

### The map

| Symbol | Meaning            |
|--------|--------------------|
| `#`    | wall               |
| `.`    | empty floor        |
| `C`    | your character     |
| `M`    | monster            |
| `T`    | treasure           |

The map is printed before every command, followed by your coordinates.
Reach the bottom-right corner of the floor to level up: you receive 30
attribute points to spend on `strength`, `mana` or `hp`, entered as a stat
and a number (for example `strength 10`), and a new, larger map is
generated.

### Commands

Commands are not case-sensitive.

| Command | Action                          |
|---------|---------------------------------|
| `w`     | move up                         |
| `a`     | move left                       |
| `s`     | move down                       |
| `d`     | move right                      |
| `print` | show your character             |
| `exit`  | quit, optionally saving to file |

On `exit` the game asks whether to save; answer `y` and then give a file
path.

Stepping onto a monster starts a battle; who strikes first is chosen at
random. On your turn choose `1`/`Weapon` (damage from strength) or
`2`/`Spell` (damage from mana). Monsters hit back with either their strength
or their mana. Monsters on higher levels take a smaller share of the damage
dealt to them. Winning a battle heals you: by 20% of your maximum health if
you are above half health, otherwise up to half.

Stepping onto treasure shows the item and asks whether to equip it
(`y` to accept). Armor reduces incoming damage; weapons and spells increase
the damage you deal. The treasure is gone once visited.

### High scores

When your hero dies, the level reached is written to `highScores.txt` in
the current directory, highest level first and, within a level, by name.

## Using it as a library

The pieces of the game are usable on their own:

```python
import random

from dungeonquest.character import Character, AttackType
from dungeonquest.character_class import CharacterClass
from dungeonquest.monster import Monster

hero = Character("Hero", CharacterClass.HUMAN)
dragon = Monster("Dragon", 1)
hero.deal_damage(dragon, AttackType.WEAPON)
dragon.deal_damage(hero, random.Random())
print(hero.describe())
print(dragon.describe())
```

Other entry points:

- `dungeonquest.game_map.GameMap.from_level(level, rng)` builds a map for a
  level; `level_parameters(level)` gives its size and contents.
- `dungeonquest.battle.battle(character, monster, console, rng)` runs a fight.
- `dungeonquest.game.Game.load(path)` and `Game.save(path)` read and write
  save files.
- `dungeonquest.high_scores.load_scores(path)` reads a high-score table and
  `save_score(level, player, path)` adds an entry.
- `dungeonquest.tokens.Console` bundles the input reader and output stream,
  so a game can be driven from any text source.

## Running the tests

```
pip install ".[test]"
pytest
```