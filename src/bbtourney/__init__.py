from .config import TournamentConfig
from .exceptions import DrawError, TournamentError
from .models.bracket import Bracket, BracketResult
from .models.draw import DrawSuccess, DrawUnsatisfiable, Hat, KnockoutDraw
from .models.group import Group, MatchRecord
from .models.match import MatchResult, Score
from .models.team import Team, rank_teams
from .models.tournament import Tournament, TournamentResult
from .simulation import MatchSimulator, ScoreGenerator, calculate_forms

__all__ = [
    'TournamentConfig',
    'DrawError',
    'TournamentError',
    'Bracket',
    'BracketResult',
    'DrawSuccess',
    'DrawUnsatisfiable',
    'Hat',
    'KnockoutDraw',
    'Group',
    'MatchRecord',
    'MatchResult',
    'Score',
    'Team',
    'rank_teams',
    'Tournament',
    'TournamentResult',
    'MatchSimulator',
    'ScoreGenerator',
    'calculate_forms',
]
