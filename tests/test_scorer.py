import pytest

from worth_finishing.core.config import EngineConfig, Weights
from worth_finishing.core.decision_types import GameInputs
from worth_finishing.engine.scorer import BasicScorer, clamp_score, format_number, round_half_away


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (-2.5, -3),
        (0.5, 1),
        (-0.5, -1),
        (7.2, 7),
        (-8.604, -9),
        (19.44, 19),
        (0.0, 0),
    ],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


def test_time_investment_tie_rounds_away_from_zero():
    scorer = BasicScorer()
    item = scorer.time_investment(GameInputs(3.0, 5.0, 5, 5, False))

    assert item.value == -3
    assert item.calculation == "38% invested"


def test_time_investment_bounds():
    scorer = BasicScorer()

    assert scorer.time_investment(GameInputs(12.0, 0.0, 5, 5, False)).value == 10
    assert scorer.time_investment(GameInputs(0.0, 12.0, 5, 5, False)).value == -10
    assert scorer.time_investment(GameInputs(0.0, 0.0, 5, 5, False)) is None


def test_remaining_time_penalty_only_triggers_on_long_low_enjoyment():
    scorer = BasicScorer()

    assert scorer.remaining_time_penalty(GameInputs(0.0, 20.0, 1, 5, False)) is None
    assert scorer.remaining_time_penalty(GameInputs(0.0, 80.0, 6, 5, False)) is None

    item = scorer.remaining_time_penalty(GameInputs(3.0, 40.0, 3, 8, False))
    assert item.value == -7
    assert item.calculation == "40hrs left, enjoyment 3/10"


def test_remaining_time_penalty_caps_hours_at_fifty():
    scorer = BasicScorer()

    at_cap = scorer.remaining_time_penalty(GameInputs(0.0, 50.0, 1, 5, False))
    past_cap = scorer.remaining_time_penalty(GameInputs(0.0, 500.0, 1, 5, False))

    assert at_cap.value == -15
    assert past_cap.value == -15


@pytest.mark.parametrize(
    "backlog, expected",
    [(1, 0), (4, -8), (5, -11), (8, -19), (10, -25)],
)
def test_backlog_penalty(backlog, expected):
    item = BasicScorer().backlog_penalty(GameInputs(1.0, 1.0, 5, backlog, False))

    assert item.value == expected
    assert item.calculation == f"Pressure level: {backlog}/10"


def test_terms_follow_fixed_order():
    breakdown = BasicScorer().score(GameInputs(3.0, 40.0, 3, 8, True))

    assert [i.label for i in breakdown] == [
        "Base enjoyment score",
        "Time investment modifier",
        "Long remaining time penalty",
        "Backlog pressure penalty",
        "Completionist bonus",
    ]


def test_weights_are_read_from_config():
    config = EngineConfig(weights=Weights(completionist_bonus=5.0, backlog_penalty_max=50.0))
    scorer = BasicScorer(config)
    inputs = GameInputs(1.0, 1.0, 5, 10, True)

    assert scorer.completionist_bonus(inputs).value == 5
    assert scorer.backlog_penalty(inputs).value == -50


def test_clamp_score():
    assert clamp_score(-5) == 0
    assert clamp_score(125) == 100
    assert clamp_score(42) == 42


def test_format_number_drops_trailing_zero():
    assert format_number(40.0) == "40"
    assert format_number(12.5) == "12.5"


def test_time_investment_survives_hour_sum_overflow():
    scorer = BasicScorer()

    even = scorer.time_investment(GameInputs(1e308, 1e308, 5, 5, False))
    lopsided = scorer.time_investment(GameInputs(1.5e308, 0.5e308, 5, 5, False))

    assert (even.value, even.calculation) == (0, "50% invested")
    assert (lopsided.value, lopsided.calculation) == (5, "75% invested")


def test_huge_hours_print_in_exponent_form():
    item = BasicScorer().remaining_time_penalty(GameInputs(0.0, 1e308, 1, 5, False))

    assert item.value == -15
    assert item.calculation == "1e+308hrs left, enjoyment 1/10"
