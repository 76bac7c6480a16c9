from dataclasses import dataclass

# Group stage points
WIN_POINTS = 2
LOSS_POINTS = 1

# Number of teams that reach the knockout draw
TEAM_RANK_LIMIT = 8

# Expected points model
BASE_POINTS = 80
RANKING_DIFFERENCE_FACTOR = 0.1

# Penalty shootout scores are drawn from [0, PENALTY_GOALS)
PENALTY_GOALS = 5

HAT_NAMES = ("D", "E", "F", "G")

# Two teams per hat, so hats F and G have 2 * 2 joint rotation states
DEFAULT_MAX_DRAW_ATTEMPTS = 4

QUARTER_FINALS = "Quarter Finals"
SEMI_FINALS = "Semi Finals"
THIRD_PLACE = "Third Place"
FINAL = "Final"

STAGE_NAMES = {
    2: FINAL,
    4: SEMI_FINALS,
    8: QUARTER_FINALS,
}

THIRD_PLACE_MODES = ("runner_up", "playoff")


@dataclass(frozen=True)
class TournamentConfig:
    win_points: int = WIN_POINTS
    loss_points: int = LOSS_POINTS
    team_rank_limit: int = TEAM_RANK_LIMIT
    base_points: float = BASE_POINTS
    ranking_difference_factor: float = RANKING_DIFFERENCE_FACTOR
    penalty_goals: int = PENALTY_GOALS
    max_draw_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS
    # "runner_up" reports the final loser as third place, "playoff" plays
    # the semifinal losers against each other
    third_place_mode: str = "runner_up"

    def __post_init__(self):
        if self.third_place_mode not in THIRD_PLACE_MODES:
            raise ValueError(
                f"Invalid third place mode: {self.third_place_mode!r} "
                f"(expected one of {', '.join(THIRD_PLACE_MODES)})"
            )
        if self.max_draw_attempts < 1:
            raise ValueError("max_draw_attempts must be at least 1")
