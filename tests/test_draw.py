"""
Tests for the knockout draw.

Hats for eight ranked teams T1..T8: D = T1, T2; E = T3, T4; F = T5, T6;
G = T7, T8.
"""

import itertools

import pytest

from bbtourney.exceptions import DrawError
from bbtourney.models.draw import (
    DrawSuccess,
    DrawUnsatisfiable,
    Hat,
    KnockoutDraw,
    make_hats,
)
from bbtourney.models.group import MatchRecord


def ids(pairs):
    return [(t1.id, t2.id) for t1, t2 in pairs]


def record_of(*pairs):
    record = MatchRecord()
    for t1, t2 in pairs:
        record.record(t1, t2)
    return record


class TestHats:
    def test_make_hats(self, eight_teams):
        hats = make_hats(eight_teams)
        assert [h.name for h in hats] == ["D", "E", "F", "G"]
        assert [[t.id for t in h] for h in hats] == [
            ["T1", "T2"],
            ["T3", "T4"],
            ["T5", "T6"],
            ["T7", "T8"],
        ]

    def test_rotate(self, eight_teams):
        hat = Hat("G", eight_teams[6:])
        hat.rotate()
        assert [t.id for t in hat] == ["T8", "T7"]
        hat.rotate()
        assert [t.id for t in hat] == ["T7", "T8"]

    def test_copy_is_independent(self, eight_teams):
        hat = Hat("G", eight_teams[6:])
        snapshot = hat.copy()
        hat.rotate()
        assert [t.id for t in snapshot] == ["T7", "T8"]


class TestKnockoutDraw:
    def test_no_history_pairs_in_hat_order(self, eight_teams):
        result = KnockoutDraw(eight_teams).draw()
        assert isinstance(result, DrawSuccess)
        assert result.attempts == 1
        assert ids(result.pairs) == [("T1", "T7"), ("T2", "T8"), ("T3", "T5"), ("T4", "T6")]

    def test_picks_the_only_unplayed_opponent_without_retry(self, eight_teams):
        # T1 has met every hat G team but T8
        result = KnockoutDraw(eight_teams, record_of(("T1", "T7"))).draw()
        assert result.attempts == 1
        assert ids(result.pairs)[0] == ("T1", "T8")
        assert ids(result.pairs) == [("T1", "T8"), ("T2", "T7"), ("T3", "T5"), ("T4", "T6")]

    def test_retries_with_rotated_hats(self, eight_teams):
        # T1 takes T7 first, which leaves T2 only with T8, already played
        result = KnockoutDraw(eight_teams, record_of(("T2", "T8"))).draw()
        assert result.attempts == 2
        assert ids(result.pairs) == [("T1", "T8"), ("T2", "T7"), ("T3", "T6"), ("T4", "T5")]
        assert [[t.id for t in h] for h in result.hats[2:]] == [["T6", "T5"], ["T8", "T7"]]

    def test_reaches_mixed_rotations(self, eight_teams):
        # G must be rotated while F must stay in its original order
        record = record_of(("T2", "T8"), ("T4", "T5"))
        result = KnockoutDraw(eight_teams, record).draw()
        assert isinstance(result, DrawSuccess)
        assert result.attempts == 4
        assert ids(result.pairs) == [("T1", "T8"), ("T2", "T7"), ("T3", "T5"), ("T4", "T6")]

    def test_unsatisfiable(self, eight_teams):
        record = record_of(("T1", "T7"), ("T1", "T8"))
        result = KnockoutDraw(eight_teams, record).draw()
        assert isinstance(result, DrawUnsatisfiable)
        assert result.attempts == 4
        assert "4 attempts" in result.reason

    def test_attempt_cap(self, eight_teams):
        record = record_of(("T2", "T8"))
        result = KnockoutDraw(eight_teams, record, max_attempts=1).draw()
        assert isinstance(result, DrawUnsatisfiable)
        assert result.attempts == 1

    def test_wrong_team_count(self, eight_teams):
        with pytest.raises(DrawError):
            KnockoutDraw(eight_teams[:6])

    def test_as_dict(self, eight_teams):
        data = KnockoutDraw(eight_teams).draw().as_dict()
        assert data["attempts"] == 1
        assert data["hats"][0] == {"name": "D", "teams": ["T1", "T2"]}
        assert data["pairs"][0] == ("T1", "T7")


# -----------------------------------------------------------------------------
# Exhaustive check over every possible group-stage history between the hats
# -----------------------------------------------------------------------------

CROSS_PAIRS = [
    ("T1", "T7"), ("T1", "T8"), ("T2", "T7"), ("T2", "T8"),
    ("T3", "T5"), ("T3", "T6"), ("T4", "T5"), ("T4", "T6"),
]


def valid_assignment_exists(record):
    def side_ok(a, b, c, d):
        straight = not record.has_played(a, c) and not record.has_played(b, d)
        crossed = not record.has_played(a, d) and not record.has_played(b, c)
        return straight or crossed

    return side_ok("T1", "T2", "T7", "T8") and side_ok("T3", "T4", "T5", "T6")


@pytest.mark.parametrize(
    "played",
    [
        combo
        for n in range(len(CROSS_PAIRS) + 1)
        for combo in itertools.combinations(CROSS_PAIRS, n)
    ],
)
def test_draw_finds_assignment_whenever_one_exists(eight_teams, played):
    record = record_of(*played)
    result = KnockoutDraw(eight_teams, record).draw()

    if valid_assignment_exists(record):
        assert isinstance(result, DrawSuccess)
        assert len(result.pairs) == 4
        assert not any(record.has_played(t1.id, t2.id) for t1, t2 in result.pairs)
        assert sorted(t.id for pair in result.pairs for t in pair) == sorted(
            t.id for t in eight_teams
        )
    else:
        assert isinstance(result, DrawUnsatisfiable)
