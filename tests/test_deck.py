"""Tests for the deck model and dealing."""

import random
from collections import Counter
from dataclasses import FrozenInstanceError

import pytest

from icelatro.engine.deck import (
    CARD_POINTS,
    DECK_SIZE,
    VALUES,
    Deck,
    Hand,
    Suit,
    create_deck,
    deal,
)

from helpers import card


def test_standard_deck_has_every_value_suit_pair_once() -> None:
    deck = Deck.standard_52()

    assert len(deck) == DECK_SIZE == 52
    pairs = {(c.value, c.suit) for c in deck.cards}
    assert pairs == {(v, s) for v in VALUES for s in Suit}


def test_card_ids_are_unique_within_a_deck(rng: random.Random) -> None:
    deck = create_deck(rng)

    ids = [c.id for c in deck.cards]
    assert len(set(ids)) == 52


def test_card_id_format() -> None:
    first = Deck.standard_52().cards[0]
    assert first.id == "2♠-0"


def test_create_deck_is_a_permutation(rng: random.Random) -> None:
    shuffled = create_deck(rng)
    ordered = Deck.standard_52()

    assert sorted(c.id for c in shuffled.cards) == sorted(c.id for c in ordered.cards)
    assert [c.id for c in shuffled.cards] != [c.id for c in ordered.cards]


def test_shuffle_is_uniform_across_positions() -> None:
    rng = random.Random(2024)
    samples = 5200
    expected = samples / 52
    positions = (0, 25, 51)
    counts = {p: Counter() for p in positions}

    for _ in range(samples):
        deck = create_deck(rng)
        for p in positions:
            counts[p][deck.cards[p].id] += 1

    for p in positions:
        assert len(counts[p]) == 52
        for seen in counts[p].values():
            assert abs(seen - expected) < expected * 0.5


def test_card_points_scale() -> None:
    assert [CARD_POINTS[v] for v in ("2", "9", "10")] == [2, 9, 10]
    assert CARD_POINTS["J"] == CARD_POINTS["Q"] == CARD_POINTS["K"] == 10
    assert CARD_POINTS["A"] == 15
    assert card("A♥").points == 15


def test_deal_takes_from_the_end_of_the_deck(rng: random.Random) -> None:
    deck = create_deck(rng)
    tail = list(reversed(deck.cards[-8:]))
    hand = Hand()

    dealt = deal(deck, hand, 8)

    assert dealt == tail
    assert hand.cards == tail
    assert len(deck) == 44
    assert not (deck.ids() & hand.ids())


def test_deal_tops_up_a_partial_hand(rng: random.Random) -> None:
    deck = create_deck(rng)
    hand = Hand()
    deal(deck, hand, 8)
    hand.remove(hand.cards[:3])

    dealt = deal(deck, hand, 8)

    assert len(dealt) == 3
    assert hand.size() == 8


def test_deal_stops_when_deck_runs_out() -> None:
    deck = Deck(cards=[card("2♠"), card("3♠")])
    hand = Hand()

    dealt = deal(deck, hand, 8)

    assert len(dealt) == 2
    assert hand.size() == 2
    assert deck.draw() is None


def test_hand_select_keeps_hand_order_and_skips_unknown_ids() -> None:
    hand = Hand([card("2♠"), card("3♥"), card("4♦")])

    selected = hand.select(["4♦", "missing", "2♠"])

    assert [c.id for c in selected] == ["2♠", "4♦"]


def test_card_is_immutable() -> None:
    c = card("K♣")
    with pytest.raises(FrozenInstanceError):
        c.value = "A"
    assert str(c) == "K♣"


def test_hand_owns_its_card_list() -> None:
    given = [card("2♠"), card("3♥")]
    hand = Hand(given)

    hand.add([card("4♦")])
    hand.remove([given[0]])

    assert [c.id for c in given] == ["2♠", "3♥"]
    assert [c.id for c in hand] == ["3♥", "4♦"]
