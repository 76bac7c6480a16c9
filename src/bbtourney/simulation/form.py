import logging
from typing import Dict, List, Mapping

from ..models.match import Score

logger = logging.getLogger(__name__)


def calculate_forms(exhibitions: Mapping[str, List[dict]]) -> Dict[str, int]:
    """Cumulative point differential per team over its exhibition matches.

    ``exhibitions`` maps a team code to entries like
    ``{"Date": "06/07/24", "Opponent": "GER", "Result": "92-80"}``. Teams whose
    entry is not a list are skipped and end up with no form (0).
    """
    forms = {}
    for team, matches in exhibitions.items():
        if not isinstance(matches, (list, tuple)):
            logger.warning(
                "Incorrect data format for team %s. Expected a list, got %s",
                team,
                type(matches).__name__,
            )
            continue
        forms[team] = sum(Score.from_string(m["Result"]).points_diff for m in matches)
    return forms


def form_of(forms: Mapping[str, int], team_id: str) -> int:
    return forms.get(team_id, 0)
