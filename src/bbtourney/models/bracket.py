import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..config import FINAL, STAGE_NAMES, THIRD_PLACE, THIRD_PLACE_MODES
from ..simulation.form import form_of
from .match import MatchResult
from .round import Round
from .team import Team

logger = logging.getLogger(__name__)


@dataclass
class BracketResult:
    rounds: List[Round] = field(default_factory=list)
    champion: Optional[Team] = None
    runner_up: Optional[Team] = None
    third_place: Optional[Team] = None
    fourth_place: Optional[Team] = None

    @property
    def matches(self) -> List[MatchResult]:
        return [m for r in self.rounds for m in r.matches]

    def get_round(self, stage: str) -> Optional[Round]:
        for round in self.rounds:
            if round.stage == stage:
                return round
        return None

    def as_dict(self):
        def _id(team):
            return team.id if team else None

        return {
            "rounds": [r.as_dict() for r in self.rounds],
            "champion": _id(self.champion),
            "runner_up": _id(self.runner_up),
            "third_place": _id(self.third_place),
            "fourth_place": _id(self.fourth_place),
        }


class Bracket:
    """Single elimination from the quarterfinals on.

    Winners meet in bracket order (match 1 winner vs match 2 winner, and so
    on) without re-seeding. Knockout matches use each team's form.
    """

    def __init__(
        self,
        pairs: Sequence[Tuple[Team, Team]],
        simulator,
        forms: Mapping[str, int] | None = None,
        third_place_mode: str = "runner_up",
    ):
        if third_place_mode not in THIRD_PLACE_MODES:
            raise ValueError(f"Invalid third place mode: {third_place_mode!r}")
        self.pairs = list(pairs)
        n = len(self.pairs)
        if n == 0 or n & (n - 1):
            raise ValueError(f"A bracket needs a power of two number of pairs, got {n}")
        self.simulator = simulator
        self.forms: Dict[str, int] = dict(forms or {})
        self.third_place_mode = third_place_mode
        self.result = BracketResult()

    def _stage_name(self, round_size: int) -> str:
        return STAGE_NAMES.get(round_size, f"Round of {round_size}")

    def _add_round(self, stage: str) -> Round:
        round = Round(len(self.result.rounds) + 1, [], stage, stage)
        self.result.rounds.append(round)
        return round

    def play_match(self, team1: Team, team2: Team) -> MatchResult:
        """Simulate one knockout match, settling ties with a penalty shootout."""
        score = self.simulator.simulate(
            team1.ranking,
            team2.ranking,
            form_of(self.forms, team1.id),
            form_of(self.forms, team2.id),
        )
        match = MatchResult(team1, team2, score)
        if match.score.is_tie:
            penalties, rounds = self.simulator.decide_shootout()
            match = MatchResult(
                team1, team2, score, penalties=penalties, shootout_rounds=rounds
            )
        return match

    def play_round(self, stage: str, pairs: Sequence[Tuple[Team, Team]]) -> Round:
        round = self._add_round(stage)
        for team1, team2 in pairs:
            match = self.play_match(team1, team2)
            round.add_match(match)
            logger.debug("%s: %s", stage, match)
        logger.info(
            "%s finished, advancing: %s",
            stage,
            ", ".join(t.name for t in round.winners),
        )
        return round

    @staticmethod
    def _pair_up(teams: List[Team]) -> List[Tuple[Team, Team]]:
        return [(teams[i], teams[i + 1]) for i in range(0, len(teams) - 1, 2)]

    def run(self) -> BracketResult:
        pairs = self.pairs
        semifinal_losers: List[Team] = []

        while len(pairs) > 1:
            stage = self._stage_name(len(pairs) * 2)
            round = self.play_round(stage, pairs)
            if len(pairs) == 2:
                semifinal_losers = round.losers
            pairs = self._pair_up(round.winners)

        if self.third_place_mode == "playoff" and len(semifinal_losers) == 2:
            third_place = self.play_round(THIRD_PLACE, [tuple(semifinal_losers)])
            self.result.third_place = third_place.winners[0]
            self.result.fourth_place = third_place.losers[0]

        final = self.play_round(FINAL, pairs).matches[0]
        self.result.champion = final.winner
        self.result.runner_up = final.loser
        if self.third_place_mode == "runner_up":
            # Third place doubles as the final's loser in this mode
            self.result.third_place = final.loser

        logger.info(
            "Champion %s, runner-up %s, third place %s",
            self.result.champion.name,
            self.result.runner_up.name,
            self.result.third_place.name if self.result.third_place else None,
        )
        return self.result
