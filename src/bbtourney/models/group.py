import logging
from typing import Dict, Iterable, List, Set, Tuple

import polars as pl

from ..config import LOSS_POINTS, WIN_POINTS
from .match import MatchResult
from .round import Round
from .standings import compute_standings
from .team import Team

logger = logging.getLogger(__name__)


class MatchRecord:
    """Which teams have already met, as adjacency sets keyed by team id."""

    def __init__(self):
        self._opponents: Dict[str, Set[str]] = {}

    def record(self, team1: str, team2: str):
        self._opponents.setdefault(team1, set()).add(team2)
        self._opponents.setdefault(team2, set()).add(team1)

    def has_played(self, team1: str, team2: str) -> bool:
        return team2 in self._opponents.get(team1, ())

    def opponents(self, team: str) -> Set[str]:
        return set(self._opponents.get(team, ()))

    @property
    def pairs(self) -> Set[Tuple[str, str]]:
        return {
            tuple(sorted((t1, t2)))
            for t1, opponents in self._opponents.items()
            for t2 in opponents
        }

    def __contains__(self, pair: Tuple[str, str]) -> bool:
        return self.has_played(*pair)

    def __len__(self) -> int:
        return len(self.pairs)


class Group:
    """A round-robin group: every team plays every other team once."""

    def __init__(
        self,
        name: str,
        teams: Iterable[Team],
        win_points: int = WIN_POINTS,
        loss_points: int = LOSS_POINTS,
    ):
        self.name = name
        self.teams: List[Team] = [t.reset() for t in teams]
        self.win_points = win_points
        self.loss_points = loss_points
        self.rounds: List[Round] = []

    @property
    def matches(self) -> List[MatchResult]:
        return [m for r in self.rounds for m in r.matches]

    @property
    def current_round_number(self) -> int:
        return len(self.rounds)

    @property
    def fixtures(self) -> List[Tuple[Team, Team]]:
        n = len(self.teams)
        return [
            (self.teams[i], self.teams[j]) for i in range(n) for j in range(i + 1, n)
        ]

    def add_round(self, name: str = None) -> Round:
        new_round = Round(self.current_round_number + 1, [], name, f"Group {self.name}")
        self.rounds.append(new_round)
        return new_round

    def add_result(self, result: MatchResult) -> MatchResult:
        round = self.add_round()
        round.add_match(result)
        return result

    def play(self, simulator, record: MatchRecord | None = None) -> List[Team]:
        """Simulate every fixture in roster order and return the final standings.

        Group matches ignore form. Each pairing is added to ``record`` so the
        knockout draw can avoid it.
        """
        for team1, team2 in self.fixtures:
            score = simulator.simulate(team1.ranking, team2.ranking)
            result = self.add_result(MatchResult(team1, team2, score))
            if record is not None:
                record.record(team1.id, team2.id)
            logger.debug("Group %s: %s", self.name, result)
        standings = self.standings
        if standings:
            logger.info("Group %s finished, leader %s", self.name, standings[0].name)
        return standings

    @property
    def standings(self) -> List[Team]:
        return compute_standings(
            self.teams, self.matches, self.win_points, self.loss_points
        )

    @property
    def standings_df(self) -> pl.DataFrame:
        if not self.teams:
            return pl.DataFrame()
        return (
            pl.DataFrame([t.as_dict() for t in self.standings])
            .with_row_index("rank", offset=1)
            .with_columns(pl.lit(self.name).alias("group"))
        )

    def as_dict(self):
        return {
            "name": self.name,
            "standings": [t.as_dict() for t in self.standings],
            "rounds": [r.as_dict() for r in self.rounds],
        }
