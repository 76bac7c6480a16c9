from dataclasses import dataclass
from typing import Optional

import pyarrow as pa

from .team import Team


@dataclass(frozen=True)
class Score:
    points1: int
    points2: int

    @classmethod
    def from_string(cls, score: str) -> "Score":
        """Create a Score from a string like '86-72' or '86:72'"""
        for sep in ("-", ":"):
            if sep in score:
                p1, p2 = score.split(sep, 1)
                try:
                    return cls(int(p1), int(p2))
                except ValueError:
                    break
        raise ValueError(f"Invalid score format: {score}")

    @classmethod
    def from_tuple(cls, score: tuple[int, int]) -> "Score":
        """Create a Score from a tuple like (86, 72)"""
        return cls(*score)

    @classmethod
    def from_any(cls, score: str | tuple[int, int]) -> "Score":
        """Create a Score from various input formats"""
        if isinstance(score, Score):
            return score
        if isinstance(score, str):
            return cls.from_string(score)
        if isinstance(score, (tuple, list)):
            return cls.from_tuple(score)
        raise ValueError(f"Cannot create Score from {score}")

    def __str__(self) -> str:
        return f"{self.points1}:{self.points2}"

    @property
    def is_tie(self) -> bool:
        return self.points1 == self.points2

    @property
    def winner(self) -> int | None:
        """Return 1 if side 1 won, 2 if side 2 won, None on a tie"""
        if self.is_tie:
            return None
        return 1 if self.points1 > self.points2 else 2

    @property
    def points(self) -> tuple[int, int]:
        return (self.points1, self.points2)

    @property
    def points_diff(self) -> int:
        return self.points1 - self.points2

    def as_dict(self) -> dict[str, any]:
        return {
            "points1": self.points1,
            "points2": self.points2,
            "winner": self.winner,
            "points_diff": self.points_diff,
        }


@dataclass
class MatchResult:
    team1: Team
    team2: Team
    score: Score
    stage: Optional[str] = None
    round: int | None = None
    penalties: Optional[Score] = None
    shootout_rounds: int = 0

    def __post_init__(self):
        self.score = Score.from_any(self.score)
        if self.penalties is not None:
            self.penalties = Score.from_any(self.penalties)
        self.id: str = f"{self.team1.id}:{self.team2.id}"

    @property
    def went_to_penalties(self) -> bool:
        return self.penalties is not None

    @property
    def deciding_score(self) -> Score:
        return self.penalties if self.went_to_penalties else self.score

    @property
    def winner(self) -> Optional[Team]:
        side = self.deciding_score.winner
        if side is None:
            return None
        return self.team1 if side == 1 else self.team2

    @property
    def loser(self) -> Optional[Team]:
        side = self.deciding_score.winner
        if side is None:
            return None
        return self.team2 if side == 1 else self.team1

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def __str__(self):
        result = f"{self.team1.name} - {self.team2.name} ({self.score})"
        if self.went_to_penalties:
            result += f" pen. {self.penalties}"
        return result

    def as_dict(self) -> dict[str, any]:
        return {
            "id": self.id,
            "team1": self.team1.id,
            "team2": self.team2.id,
            "stage": self.stage,
            "round": self.round,
            "score": list(self.score.points),
            "penalties": list(self.penalties.points) if self.penalties else None,
            "winner": self.winner.id if self.winner else None,
            "loser": self.loser.id if self.loser else None,
        }

    @property
    def df(self):
        return pa.Table.from_pylist([self.as_dict()])
