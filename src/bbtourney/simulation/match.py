import logging
import math
from typing import Tuple

from ..config import BASE_POINTS, RANKING_DIFFERENCE_FACTOR, TournamentConfig
from .scoring import ScoreGenerator

logger = logging.getLogger(__name__)


def expected_points(
    team_ranking: float,
    opponent_ranking: float,
    base_points: float = BASE_POINTS,
    ranking_difference_factor: float = RANKING_DIFFERENCE_FACTOR,
) -> float:
    """Expected points for a team against an opponent.

    A higher opponent ranking value raises the team's expectation.
    """
    ranking_difference = opponent_ranking - team_ranking
    return base_points + ranking_difference * ranking_difference_factor


class MatchSimulator:
    def __init__(self, rng=None, config: TournamentConfig | None = None):
        self.config = config or TournamentConfig()
        self.scores = ScoreGenerator(rng)

    @property
    def rng(self):
        return self.scores.rng

    def expected_points(self, team_ranking: float, opponent_ranking: float) -> float:
        return expected_points(
            team_ranking,
            opponent_ranking,
            self.config.base_points,
            self.config.ranking_difference_factor,
        )

    def simulate(
        self, ranking1: float, ranking2: float, form1: int = 0, form2: int = 0
    ) -> Tuple[int, int]:
        lambda1 = self.expected_points(ranking1, ranking2) + form1
        lambda2 = self.expected_points(ranking2, ranking1) + form2
        score1 = self.scores.generate(lambda1)
        score2 = self.scores.generate(lambda2)
        logger.debug(
            "Simulated %s:%s (lambda %.1f / %.1f)", score1, score2, lambda1, lambda2
        )
        return score1, score2

    def shootout(self) -> Tuple[int, int]:
        """One penalty shootout, each side scoring uniformly in [0, penalty_goals)."""
        goals = self.config.penalty_goals
        score1 = math.floor(self.rng.random() * goals)
        score2 = math.floor(self.rng.random() * goals)
        return score1, score2

    def decide_shootout(self) -> Tuple[Tuple[int, int], int]:
        """Repeat shootouts until one side scores more.

        Returns the deciding shootout and how many were needed.
        """
        rounds = 0
        while True:
            rounds += 1
            score1, score2 = self.shootout()
            if score1 != score2:
                return (score1, score2), rounds
            logger.debug("Shootout tied %s:%s, repeating", score1, score2)
