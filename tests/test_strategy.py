"""Tests for automated card selection."""

import random

from icelatro.engine.game import GameState
from icelatro.engine.hand_detector import HandType
from icelatro.engine.strategy import BasicStrategy, SmartStrategy, best_play, evaluate_plays

from helpers import cards


def test_best_play_finds_four_of_a_kind() -> None:
    hand = cards("9♠", "9♥", "9♦", "9♣", "A♠", "2♥", "3♦", "4♣")

    option = best_play(hand)

    assert option.hand_type is HandType.FOUR_OF_A_KIND
    assert option.score == (36 + 15) * 8
    assert set(option.ids) == {"9♠", "9♥", "9♦", "9♣", "A♠"}


def test_best_play_of_empty_hand() -> None:
    assert best_play([]) is None


def test_evaluate_plays_is_sorted_and_bounded() -> None:
    hand = cards("2♠", "3♥", "4♦")

    options = evaluate_plays(hand, max_cards=2)

    assert len(options) == 3 + 3
    assert all(len(o.cards) <= 2 for o in options)
    assert [o.score for o in options] == sorted((o.score for o in options), reverse=True)


def test_basic_strategy_keeps_pairs() -> None:
    game = GameState(rng=random.Random(3))
    game.hand.cards = cards("K♠", "K♥", "2♦", "3♣", "4♠", "6♥", "7♦", "8♣")

    assert BasicStrategy().select_cards_to_discard(game.snapshot()) == []


def test_basic_strategy_discards_low_loose_cards() -> None:
    game = GameState(rng=random.Random(3))
    game.hand.cards = cards("2♠", "3♥", "4♦", "6♣", "7♠", "9♥", "J♦", "A♣")

    assert BasicStrategy().select_cards_to_discard(game.snapshot()) == ["2♠", "3♥", "4♦"]


def test_no_discard_without_discards_left() -> None:
    game = GameState(rng=random.Random(3))
    game.discards_left = 0
    game.hand.cards = cards("2♠", "3♥", "4♦", "6♣", "7♠", "9♥", "J♦", "A♣")

    assert BasicStrategy().select_cards_to_discard(game.snapshot()) == []
    assert SmartStrategy().select_cards_to_discard(game.snapshot()) == []


def test_smart_strategy_skips_discard_when_goal_is_reachable() -> None:
    game = GameState(rng=random.Random(3))
    game.hand.cards = cards("A♠", "A♥", "A♦", "K♣", "K♠", "2♥", "3♦", "4♣")

    assert SmartStrategy().select_cards_to_discard(game.snapshot()) == []


def test_smart_strategy_keeps_groups_and_dominant_suit() -> None:
    game = GameState(rng=random.Random(3))
    game.points_goal = 10_000
    game.hand.cards = cards("2♠", "2♥", "5♦", "7♦", "9♦", "3♣", "4♠", "8♥")

    thrown = SmartStrategy().select_cards_to_discard(game.snapshot())

    assert thrown == ["3♣", "4♠", "8♥"]


def test_strategy_play_ids_come_from_hand() -> None:
    snapshot = GameState(rng=random.Random(11)).snapshot()

    ids = SmartStrategy().select_cards_to_play(snapshot)

    assert 1 <= len(ids) <= 5
    assert set(ids) <= set(snapshot.hand_ids)
