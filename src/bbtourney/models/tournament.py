import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

import polars as pl

from ..config import TournamentConfig
from ..exceptions import DrawError
from ..simulation.form import calculate_forms
from ..simulation.match import MatchSimulator
from .bracket import Bracket, BracketResult
from .draw import DrawSuccess, DrawUnsatisfiable, KnockoutDraw
from .group import Group, MatchRecord
from .match import MatchResult
from .team import Team, rank_teams

logger = logging.getLogger(__name__)


@dataclass
class TournamentResult:
    forms: Dict[str, int]
    groups: Dict[str, Group]
    ranked: List[Team]
    draw: DrawSuccess
    bracket: BracketResult
    record: MatchRecord = field(default_factory=MatchRecord)

    @property
    def champion(self) -> Team:
        return self.bracket.champion

    @property
    def runner_up(self) -> Team:
        return self.bracket.runner_up

    @property
    def third_place(self) -> Optional[Team]:
        return self.bracket.third_place

    @property
    def quarterfinals(self):
        return self.draw.pairs

    @property
    def standings(self) -> Dict[str, List[Team]]:
        return {name: group.standings for name, group in self.groups.items()}

    @property
    def matches(self) -> List[MatchResult]:
        group_matches = [m for g in self.groups.values() for m in g.matches]
        return group_matches + self.bracket.matches

    @property
    def standings_df(self) -> pl.DataFrame:
        frames = [g.standings_df for g in self.groups.values() if g.teams]
        if not frames:
            return pl.DataFrame()
        return pl.concat(frames)

    def as_dict(self):
        return {
            "forms": self.forms,
            "groups": {name: g.as_dict() for name, g in self.groups.items()},
            "ranked": [t.id for t in self.ranked],
            "draw": self.draw.as_dict(),
            "bracket": self.bracket.as_dict(),
        }


class Tournament:
    """Group stage, knockout draw and bracket run as one linear pipeline.

    All randomness comes from ``rng``, consumed group by group in fixture
    order and then match by match through the bracket, so a seeded source
    reproduces the whole tournament.
    """

    def __init__(
        self,
        name: str,
        rosters: Mapping[str, Sequence[dict | Team]],
        exhibitions: Mapping[str, list] | None = None,
        config: TournamentConfig | None = None,
        rng=None,
    ):
        self.id = str(uuid.uuid4())
        self.name = name
        self.config = config or TournamentConfig()
        self.rng = rng if rng is not None else random
        self.rosters = {
            label: [t if isinstance(t, Team) else Team.from_dict(t) for t in teams]
            for label, teams in rosters.items()
        }
        self.exhibitions = dict(exhibitions or {})
        self.simulator = MatchSimulator(self.rng, self.config)
        self.record = MatchRecord()
        self.groups: Dict[str, Group] = {}

    @classmethod
    def seeded(cls, name, rosters, exhibitions=None, config=None, seed: int = 0):
        return cls(name, rosters, exhibitions, config, random.Random(seed))

    @property
    def teams(self) -> List[Team]:
        return [t for teams in self.rosters.values() for t in teams]

    def play_group_stage(self) -> Dict[str, Group]:
        self.groups = {}
        self.record = MatchRecord()
        for label, teams in self.rosters.items():
            group = Group(label, teams, self.config.win_points, self.config.loss_points)
            group.play(self.simulator, self.record)
            self.groups[label] = group
        return self.groups

    def rank_for_knockout(self) -> List[Team]:
        all_teams = [t for g in self.groups.values() for t in g.standings]
        return rank_teams(all_teams)[: self.config.team_rank_limit]

    def draw_knockout(self, ranked: Sequence[Team]) -> DrawSuccess:
        result = KnockoutDraw(ranked, self.record, self.config.max_draw_attempts).draw()
        if isinstance(result, DrawUnsatisfiable):
            raise DrawError(result.reason)
        return result

    def simulate(self) -> TournamentResult:
        forms = calculate_forms(self.exhibitions)
        groups = self.play_group_stage()
        ranked = self.rank_for_knockout()
        draw = self.draw_knockout(ranked)
        bracket = Bracket(
            draw.pairs, self.simulator, forms, self.config.third_place_mode
        ).run()
        logger.info("%s won by %s", self.name, bracket.champion.name)
        return TournamentResult(forms, groups, ranked, draw, bracket, self.record)
