from dataclasses import dataclass, field
from typing import List, Optional

import pyarrow as pa

from .match import MatchResult
from .team import Team


@dataclass
class Round:
    number: int
    matches: List[MatchResult] = field(default_factory=list)
    name: Optional[str] = None
    stage: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = f"Round {self.number}"

    @property
    def winners(self) -> List[Team]:
        return [m.winner for m in self.matches]

    @property
    def losers(self) -> List[Team]:
        return [m.loser for m in self.matches]

    def add_match(self, match: MatchResult):
        match.round = self.number
        if self.stage:
            match.stage = self.stage
        self.matches.append(match)

    def as_dict(self):
        return {
            "number": self.number,
            "name": self.name,
            "stage": self.stage,
            "matches": [m.as_dict() for m in self.matches],
        }

    @property
    def df(self):
        return pa.Table.from_pylist([m.as_dict() for m in self.matches])
