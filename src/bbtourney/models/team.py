from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from munch import munchify


@dataclass(frozen=True)
class Team:
    name: str
    ranking: float = 0
    code: Optional[str] = None
    wins: int = 0
    losses: int = 0
    points: int = 0
    scored: int = 0
    conceded: int = 0

    @property
    def id(self) -> str:
        return self.code or self.name

    @property
    def goal_difference(self) -> int:
        return self.scored - self.conceded

    @property
    def sort_key(self) -> tuple:
        return (-self.points, -self.goal_difference, -self.scored)

    def record(self, scored: int, conceded: int, points: int = 0, win: bool = False,
               loss: bool = False) -> "Team":
        """Return a copy with one more match added to the statistics."""
        return replace(
            self,
            scored=self.scored + scored,
            conceded=self.conceded + conceded,
            points=self.points + points,
            wins=self.wins + int(win),
            losses=self.losses + int(loss),
        )

    def reset(self) -> "Team":
        return Team(self.name, self.ranking, self.code)

    def __str__(self):
        return f"{self.name} (Ranking: {self.ranking})"

    def as_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "ranking": self.ranking,
            "wins": self.wins,
            "losses": self.losses,
            "points": self.points,
            "scored": self.scored,
            "conceded": self.conceded,
            "goal difference": self.goal_difference,
        }

    def munchify(self):
        return munchify(self.as_dict())

    @classmethod
    def from_dict(cls, data):
        """Create a Team from a roster entry or from ``as_dict`` output.

        Roster entries look like ``{"Team": "Canada", "ISOCode": "CAN",
        "FIBARanking": 7}``.
        """
        if "Team" in data:
            return cls(data["Team"], data["FIBARanking"], data.get("ISOCode"))
        return cls(
            data["name"],
            data.get("ranking", 0),
            data.get("code"),
            data.get("wins", 0),
            data.get("losses", 0),
            data.get("points", 0),
            data.get("scored", 0),
            data.get("conceded", 0),
        )


def rank_teams(teams: Iterable[Team]) -> List[Team]:
    """Order teams by points, goal difference and points scored.

    The sort is stable: fully tied teams keep their input order.
    """
    return sorted(teams, key=lambda t: t.sort_key)
