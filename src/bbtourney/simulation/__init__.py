from .form import calculate_forms, form_of
from .match import MatchSimulator, expected_points
from .scoring import ScoreGenerator, poisson_score

__all__ = [
    'calculate_forms',
    'form_of',
    'MatchSimulator',
    'expected_points',
    'ScoreGenerator',
    'poisson_score',
]
