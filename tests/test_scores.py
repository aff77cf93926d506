import pytest

from schoolcup.models import Score
from schoolcup.scores import MSG_NOT_NUMBER, MSG_PARTIAL, clear_score, parse_score_inputs, set_score


@pytest.mark.parametrize(
    "home, away, expected",
    [
        ("", "", (True, None, None)),
        ("  ", "", (True, None, None)),
        (None, None, (True, None, None)),
        ("2", "2", (True, 2, 2)),
        (" 3 ", "0", (True, 3, 0)),
        ("10", "07", (True, 10, 7)),
        ("2", "", (False, None, None)),
        ("", "1", (False, None, None)),
        ("2", "x", (False, None, None)),
        ("-1", "0", (False, None, None)),
        ("1.5", "0", (False, None, None)),
        ("+1", "0", (False, None, None)),
        ("9" * 5000, "1", (False, None, None)),
        ("1234567890", "0", (False, None, None)),
        ("123456789", "0", (True, 123456789, 0)),
    ],
)
def test_parse_score_inputs(home, away, expected):
    parsed = parse_score_inputs(home, away)
    assert (parsed.valid, parsed.home_goals, parsed.away_goals) == expected


def test_invalid_inputs_carry_a_message():
    assert parse_score_inputs("2", "").message == MSG_PARTIAL
    assert parse_score_inputs("2", "x").message == MSG_NOT_NUMBER


def test_blank_pair_means_clear():
    assert parse_score_inputs("", "").is_clear
    assert not parse_score_inputs("0", "0").is_clear


def test_set_score_overwrites_without_touching_input():
    original = {"m1": Score(1, 0)}
    updated = set_score(original, "m1", 2, 2)
    assert updated == {"m1": Score(2, 2)}
    assert original == {"m1": Score(1, 0)}


@pytest.mark.parametrize("home, away", [(-1, 0), (0, -3), (1.0, 0), (True, 0), ("1", 0)])
def test_set_score_rejects_bad_goals(home, away):
    with pytest.raises(ValueError):
        set_score({}, "m1", home, away)


def test_clear_score_is_noop_when_absent():
    scores = {"m1": Score(1, 1)}
    assert clear_score(scores, "m2") == scores
    assert clear_score(scores, "m1") == {}


def test_overlong_goal_count_is_rejected_not_raised():
    parsed = parse_score_inputs("9" * 5000, "1")
    assert not parsed.valid
    assert parsed.message == MSG_NOT_NUMBER
