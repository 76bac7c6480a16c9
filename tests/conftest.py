import pytest

from bbtourney.models.team import Team


class ScriptedRandom:
    """Random source replaying a fixed list of floats, then a default."""

    def __init__(self, values, default=0.5):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class ScriptedSimulator:
    """Match simulator returning predetermined scores in call order."""

    def __init__(self, scores, shootouts=()):
        self.scores = list(scores)
        self.shootouts = list(shootouts)
        self.calls = []

    def simulate(self, ranking1, ranking2, form1=0, form2=0):
        self.calls.append((ranking1, ranking2, form1, form2))
        return self.scores.pop(0)

    def decide_shootout(self):
        rounds = 0
        while True:
            rounds += 1
            score = self.shootouts.pop(0)
            if score[0] != score[1]:
                return score, rounds


@pytest.fixture
def eight_teams():
    return [Team(f"Team {i}", i, f"T{i}") for i in range(1, 9)]

