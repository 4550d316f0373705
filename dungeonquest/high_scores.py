"""The high score table: levels reached, best first."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .character import Character
from .tokens import TokenReader

HIGH_SCORE_PATH = "highScores.txt"


@dataclass
class Score:
    level: int
    player: Character

    def serialize(self) -> str:
        return f"{self.level} {self.player.serialize_for_high_score()}"


def load_scores(path: str | os.PathLike[str] = HIGH_SCORE_PATH) -> list[Score]:
    """Read the table; a missing file means no scores yet."""
    try:
        with open(path, encoding="utf-8") as file:
            lines = file.readlines()
    except FileNotFoundError:
        return []
    scores = []
    for line in lines:
        if not line.strip():
            continue
        reader = TokenReader(line)
        level = reader.next_int()
        scores.append(Score(level, Character.deserialize_for_high_score(reader)))
    return scores


def save_score(
    level: int, player: Character, path: str | os.PathLike[str] = HIGH_SCORE_PATH
) -> list[Score]:
    """Insert a score before the first lower level (or same level, later name) and rewrite the table."""
    scores = load_scores(path)
    current = Score(level, player)
    position = next(
        (
            index
            for index, score in enumerate(scores)
            if level > score.level or (level == score.level and player < score.player)
        ),
        len(scores),
    )
    scores.insert(position, current)
    with open(path, "w", encoding="utf-8") as file:
        file.writelines(f"{score.serialize()}\n" for score in scores)
    return scores