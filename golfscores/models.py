from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


SCORE_HEADER: Tuple[str, str, str] = ("Score", "Course", "Date")

ScoreKey = Tuple[str, str, str]


@dataclass(frozen=True)
class Score:
    """A single recorded round: the score, where it was played and when.

    Course and date are stored trimmed, so a round built in memory equals the
    same round loaded back from disk.
    """

    score: int
    course: str
    date: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", int(self.score))
        object.__setattr__(self, "course", self.course.strip())
        object.__setattr__(self, "date", self.date.strip())

    def to_row(self) -> List[str]:
        """Persisted column order: Score, Course, Date."""
        return [str(self.score), self.course, self.date]

    @property
    def key(self) -> ScoreKey:
        """Identity used to keep a player's file free of duplicate rounds."""
        return str(self.score), self.course, self.date
