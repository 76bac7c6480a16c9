"""
Tests for the single elimination bracket.
"""

import random

import pytest

from bbtourney.config import FINAL, QUARTER_FINALS, SEMI_FINALS, THIRD_PLACE
from bbtourney.models.bracket import Bracket
from bbtourney.simulation.match import MatchSimulator

from conftest import ScriptedSimulator


@pytest.fixture
def quarterfinals(eight_teams):
    t = eight_teams
    return [(t[0], t[7]), (t[1], t[6]), (t[2], t[5]), (t[3], t[4])]


def first_side_wins(n):
    return [(90, 80)] * n


class TestBracketRun:
    def test_stages_in_bracket_order(self, quarterfinals):
        bracket = Bracket(quarterfinals, ScriptedSimulator(first_side_wins(7)))
        result = bracket.run()

        assert [r.stage for r in result.rounds] == [QUARTER_FINALS, SEMI_FINALS, FINAL]
        # QF winners T1, T2, T3, T4 meet as 1-2 and 3-4
        assert [m.id for m in result.get_round(SEMI_FINALS).matches] == ["T1:T2", "T3:T4"]
        assert [m.id for m in result.get_round(FINAL).matches] == ["T1:T3"]
        assert result.champion.id == "T1"
        assert result.runner_up.id == "T3"

    def test_higher_scorer_advances(self, quarterfinals):
        scores = [(70, 80), (90, 80), (90, 80), (90, 80), (60, 61), (90, 80), (90, 80)]
        result = Bracket(quarterfinals, ScriptedSimulator(scores)).run()
        assert [t.id for t in result.rounds[0].winners] == ["T8", "T2", "T3", "T4"]
        assert [t.id for t in result.rounds[1].winners] == ["T2", "T3"]
        assert result.champion.id == "T2"

    def test_forms_passed_to_simulator(self, quarterfinals):
        sim = ScriptedSimulator(first_side_wins(7))
        Bracket(quarterfinals, sim, forms={"T1": 12, "T8": -4}).run()
        assert sim.calls[0] == (1, 8, 12, -4)
        assert sim.calls[1] == (2, 7, 0, 0)

    def test_tie_goes_to_shootout(self, quarterfinals):
        scores = [(80, 80)] + first_side_wins(6)
        sim = ScriptedSimulator(scores, shootouts=[(3, 3), (1, 4)])
        result = Bracket(quarterfinals, sim).run()

        match = result.rounds[0].matches[0]
        assert match.went_to_penalties
        assert str(match.penalties) == "1:4"
        assert match.shootout_rounds == 2
        assert match.winner.id == "T8"
        assert result.get_round(SEMI_FINALS).matches[0].team1.id == "T8"

    def test_tied_final_decided_on_penalties(self, quarterfinals):
        scores = first_side_wins(6) + [(77, 77)]
        sim = ScriptedSimulator(scores, shootouts=[(4, 2)])
        result = Bracket(quarterfinals, sim).run()
        assert result.champion.id == "T1"
        assert result.runner_up.id == "T3"


class TestThirdPlace:
    def test_runner_up_mode_reports_final_loser(self, quarterfinals):
        result = Bracket(quarterfinals, ScriptedSimulator(first_side_wins(7))).run()
        assert result.third_place == result.runner_up
        assert result.fourth_place is None
        assert result.get_round(THIRD_PLACE) is None

    def test_playoff_mode_plays_semifinal_losers(self, quarterfinals):
        # QF x4, SF x2, third place (second side wins), final
        scores = first_side_wins(6) + [(70, 75), (90, 80)]
        sim = ScriptedSimulator(scores)
        result = Bracket(quarterfinals, sim, third_place_mode="playoff").run()

        assert [r.stage for r in result.rounds] == [
            QUARTER_FINALS,
            SEMI_FINALS,
            THIRD_PLACE,
            FINAL,
        ]
        assert result.get_round(THIRD_PLACE).matches[0].id == "T2:T4"
        assert result.third_place.id == "T4"
        assert result.fourth_place.id == "T2"
        assert result.runner_up.id == "T3"
        assert result.third_place != result.runner_up

    def test_invalid_mode(self, quarterfinals):
        with pytest.raises(ValueError):
            Bracket(quarterfinals, ScriptedSimulator([]), third_place_mode="coin_toss")


class TestBracketShape:
    def test_single_pair_is_a_final(self, eight_teams):
        result = Bracket([(eight_teams[0], eight_teams[1])], ScriptedSimulator([(1, 2)])).run()
        assert [r.stage for r in result.rounds] == [FINAL]
        assert result.champion.id == "T2"

    def test_rejects_uneven_bracket(self, eight_teams):
        t = eight_teams
        with pytest.raises(ValueError):
            Bracket([(t[0], t[1]), (t[2], t[3]), (t[4], t[5])], ScriptedSimulator([]))

    def test_seeded_run_is_reproducible(self, quarterfinals):
        first = Bracket(quarterfinals, MatchSimulator(random.Random(17))).run()
        second = Bracket(quarterfinals, MatchSimulator(random.Random(17))).run()
        assert first.as_dict() == second.as_dict()
        assert len(first.matches) == 7
