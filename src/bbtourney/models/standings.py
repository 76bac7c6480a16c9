"""Group standings as a fold over match results.

Teams are immutable snapshots. ``apply_match`` never mutates its input and
returns a new mapping, so a table can be recomputed from any prefix of the
match list.
"""
from typing import Dict, Iterable, List

from ..config import LOSS_POINTS, WIN_POINTS
from .match import MatchResult
from .team import Team, rank_teams

Standings = Dict[str, Team]


def new_standings(teams: Iterable[Team]) -> Standings:
    return {team.id: team.reset() for team in teams}


def apply_match(
    standings: Standings,
    result: MatchResult,
    win_points: int = WIN_POINTS,
    loss_points: int = LOSS_POINTS,
) -> Standings:
    """Fold one match result into the standings.

    Scored and conceded are updated for both sides. The team with the strictly
    higher score gets ``win_points`` and a win, the other ``loss_points`` and a
    loss. A tied match changes neither points nor win/loss counts.
    """
    id1, id2 = result.team1.id, result.team2.id
    if id1 not in standings or id2 not in standings:
        raise KeyError(f"Match {result.id} involves a team outside the standings")

    s1, s2 = result.score.points
    team1 = standings[id1]
    team2 = standings[id2]

    if s1 > s2:
        team1 = team1.record(s1, s2, win_points, win=True)
        team2 = team2.record(s2, s1, loss_points, loss=True)
    elif s2 > s1:
        team1 = team1.record(s1, s2, loss_points, loss=True)
        team2 = team2.record(s2, s1, win_points, win=True)
    else:
        team1 = team1.record(s1, s2)
        team2 = team2.record(s2, s1)

    updated = dict(standings)
    updated[id1] = team1
    updated[id2] = team2
    return updated


def compute_standings(
    teams: Iterable[Team],
    results: Iterable[MatchResult],
    win_points: int = WIN_POINTS,
    loss_points: int = LOSS_POINTS,
) -> List[Team]:
    """Rebuild a ranked table from scratch out of the full result list."""
    standings = new_standings(teams)
    for result in results:
        standings = apply_match(standings, result, win_points, loss_points)
    return rank_teams(standings.values())
