"""Tests for the scoring function."""

import pytest

from icelatro.engine.hand_detector import HandType, detect_hand
from icelatro.engine.scoring import ScoringEngine, calculate_score, score_breakdown

from helpers import cards


def test_ace_and_king_high_card() -> None:
    assert calculate_score(cards("A♠", "K♥")) == 25


def test_three_fives() -> None:
    breakdown = score_breakdown(cards("5♠", "5♥", "5♦"))

    assert breakdown.hand_type is HandType.THREE_OF_A_KIND
    assert breakdown.card_points == 15
    assert breakdown.rarity == 4
    assert breakdown.final_score == 60


@pytest.mark.parametrize(
    ("played", "expected"),
    [
        (("2♠", "2♥", "2♦", "2♣", "5♠"), (8 + 5) * 8),
        (("J♠", "Q♠", "K♠", "A♠", "2♠"), (10 + 10 + 10 + 15 + 2) * 5),
        (("10♥", "10♦", "J♣", "J♠", "A♠"), (20 + 20 + 15) * 3),
        (("7♣",), 7),
    ],
)
def test_sum_times_rarity(played: tuple, expected: int) -> None:
    assert calculate_score(cards(*played)) == expected


def test_empty_selection_scores_zero() -> None:
    assert calculate_score([]) == 0


def test_score_hand_matches_score_cards() -> None:
    engine = ScoringEngine()
    played = cards("Q♠", "Q♥", "3♦")

    assert engine.score_hand(detect_hand(played)) == engine.score_cards(played)


def test_scoring_is_pure() -> None:
    played = cards("9♠", "9♥")
    before = list(played)

    first = calculate_score(played)
    second = calculate_score(played)

    assert first == second == 36
    assert played == before


def test_breakdown_to_dict() -> None:
    data = score_breakdown(cards("A♠", "A♥")).to_dict()

    assert data["hand_type"] == "PAIR"
    assert data["final_score"] == 60
    assert [c["id"] for c in data["cards"]] == ["A♠", "A♥"]
