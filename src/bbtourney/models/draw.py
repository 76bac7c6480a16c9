"""Knockout draw: seeded hats and repeat-free quarterfinal pairings.

The eight best teams are split into four hats of two. Hat D teams meet hat G
teams and hat E teams meet hat F teams, never pairing two teams that already
met in the group stage. Each attempt pairs greedily in hat order; after a
failed attempt hats G and F are rotated and the draw is tried again.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple, Union

from ..config import DEFAULT_MAX_DRAW_ATTEMPTS, HAT_NAMES, TEAM_RANK_LIMIT
from ..exceptions import DrawError
from .group import MatchRecord
from .team import Team

logger = logging.getLogger(__name__)

Pair = Tuple[Team, Team]


@dataclass
class Hat:
    name: str
    teams: List[Team] = field(default_factory=list)

    def rotate(self):
        """Move the first team to the end."""
        if self.teams:
            self.teams.append(self.teams.pop(0))

    def copy(self) -> "Hat":
        return Hat(self.name, self.teams[:])

    def __iter__(self):
        return iter(self.teams)

    def __len__(self) -> int:
        return len(self.teams)

    def __str__(self):
        return f"{self.name}: {', '.join(t.name for t in self.teams)}"

    def as_dict(self):
        return {"name": self.name, "teams": [t.id for t in self.teams]}


@dataclass(frozen=True)
class DrawSuccess:
    pairs: List[Pair]
    hats: List[Hat]
    attempts: int

    def as_dict(self):
        return {
            "hats": [h.as_dict() for h in self.hats],
            "pairs": [(t1.id, t2.id) for t1, t2 in self.pairs],
            "attempts": self.attempts,
        }


@dataclass(frozen=True)
class DrawUnsatisfiable:
    attempts: int
    reason: str


DrawResult = Union[DrawSuccess, DrawUnsatisfiable]


def make_hats(ranked: Sequence[Team], hat_names: Sequence[str] = HAT_NAMES) -> List[Hat]:
    """Split ranked teams into consecutive hats of equal size."""
    size = len(ranked) // len(hat_names)
    return [
        Hat(name, list(ranked[i * size:(i + 1) * size]))
        for i, name in enumerate(hat_names)
    ]


class KnockoutDraw:
    def __init__(
        self,
        ranked: Sequence[Team],
        record: MatchRecord | None = None,
        max_attempts: int = DEFAULT_MAX_DRAW_ATTEMPTS,
    ):
        if len(ranked) != TEAM_RANK_LIMIT:
            raise DrawError(
                f"The knockout draw needs exactly {TEAM_RANK_LIMIT} teams, "
                f"got {len(ranked)}"
            )
        self.ranked = list(ranked)
        self.record = record if record is not None else MatchRecord()
        self.max_attempts = max_attempts
        self.hats = make_hats(self.ranked)

    @property
    def pairings(self) -> List[Tuple[Hat, Hat]]:
        """Source and target hat for each side of the bracket."""
        d, e, f, g = self.hats
        return [(d, g), (e, f)]

    def _find_opponent(self, team: Team, hat: Hat, used: Set[str]) -> Optional[Team]:
        for opponent in hat:
            if opponent.id not in used and not self.record.has_played(
                team.id, opponent.id
            ):
                return opponent
        return None

    def _try_pairing(self) -> List[Pair]:
        pairs = []
        used: Set[str] = set()
        for source, target in self.pairings:
            for team in source:
                opponent = self._find_opponent(team, target, used)
                if opponent:
                    pairs.append((team, opponent))
                    used.add(team.id)
                    used.add(opponent.id)
        return pairs

    def draw(self) -> DrawResult:
        """Pair the hats, retrying with rotated hats until every team is paired.

        F and G rotate together after each failure. Whenever G is back to its
        starting order F gets one extra rotation, so every combination of the
        two hats' orders is eventually tried.
        """
        _, _, hat_f, hat_g = self.hats
        expected = len(self.ranked) // 2

        for attempt in range(1, self.max_attempts + 1):
            pairs = self._try_pairing()
            if len(pairs) == expected:
                logger.info("Knockout draw completed after %d attempt(s)", attempt)
                return DrawSuccess(pairs, [h.copy() for h in self.hats], attempt)

            logger.debug(
                "Draw attempt %d paired %d of %d matches, rotating hats %s and %s",
                attempt,
                len(pairs),
                expected,
                hat_g.name,
                hat_f.name,
            )
            hat_g.rotate()
            hat_f.rotate()
            if attempt % len(hat_g) == 0:
                hat_f.rotate()

        reason = (
            f"No repeat-free quarterfinal pairing found in {self.max_attempts} attempts"
        )
        logger.warning(reason)
        return DrawUnsatisfiable(self.max_attempts, reason)
