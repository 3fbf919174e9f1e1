"""
Deck management for the ICElatro engine.
Handles card creation, shuffling, dealing, and the player's hand.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class Suit(Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"


VALUES = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]

# Scoring weight of each value. Not poker rank: faces are flat 10, ace is 15.
CARD_POINTS = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9, "10": 10,
    "J": 10, "Q": 10, "K": 10, "A": 15
}

DECK_SIZE = len(VALUES) * len(Suit)


@dataclass(frozen=True)
class Card:
    value: str
    suit: Suit
    id: str

    @property
    def points(self) -> int:
        """Point value this card adds to a play."""
        return CARD_POINTS[self.value]

    def to_dict(self) -> dict:
        return {"value": self.value, "suit": self.suit.value, "id": self.id}

    def __str__(self) -> str:
        return f"{self.value}{self.suit.value}"

    def __repr__(self) -> str:
        return self.__str__()


def make_card_id(value: str, suit: Suit, uid: int) -> str:
    return f"{value}{suit.value}-{uid}"


@dataclass
class Deck:
    """Ordered draw pile. Cards are dealt from the end."""
    cards: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)  # played or discarded, never redrawn

    @classmethod
    def standard_52(cls) -> "Deck":
        """Create an unshuffled 52-card deck, each card tagged with a unique id."""
        cards = []
        uid = 0
        for suit in Suit:
            for value in VALUES:
                cards.append(Card(value=value, suit=suit, id=make_card_id(value, suit, uid)))
                uid += 1
        return cls(cards=cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle in place (Fisher-Yates via random.shuffle)."""
        (rng or random).shuffle(self.cards)

    def draw(self) -> Optional[Card]:
        """Take one card off the end. Returns None once the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def discard(self, cards: list[Card]) -> None:
        """Move spent cards to the discard pile."""
        self.discard_pile.extend(cards)

    def cards_remaining(self) -> int:
        return len(self.cards)

    def ids(self) -> set[str]:
        return {c.id for c in self.cards}

    def __len__(self) -> int:
        return len(self.cards)


def create_deck(rng: Optional[random.Random] = None) -> Deck:
    """Fresh 52-card deck in a uniformly random order."""
    deck = Deck.standard_52()
    deck.shuffle(rng)
    return deck


class Hand:
    """Represents cards currently held in hand."""

    def __init__(self, cards: list[Card] = None):
        self.cards: list[Card] = list(cards) if cards else []

    def add(self, cards: list[Card]) -> None:
        self.cards.extend(cards)

    def select(self, ids: Iterable[str]) -> list[Card]:
        """Cards whose id is in `ids`, in hand order. Unknown ids are skipped."""
        wanted = set(ids)
        return [c for c in self.cards if c.id in wanted]

    def remove(self, cards: list[Card]) -> list[Card]:
        """Remove and return specified cards from hand."""
        removed = []
        for card in cards:
            if card in self.cards:
                self.cards.remove(card)
                removed.append(card)
        return removed

    def clear(self) -> list[Card]:
        """Remove and return all cards."""
        cards = self.cards
        self.cards = []
        return cards

    def ids(self) -> set[str]:
        return {c.id for c in self.cards}

    def size(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.__str__()})"


def deal(deck: Deck, hand: Hand, target_size: int) -> list[Card]:
    """
    Move cards one at a time from the end of the deck into the hand until
    the hand holds `target_size` cards or the deck runs out.

    Returns the cards dealt. An exhausted deck just leaves a short hand.
    """
    dealt = []
    while hand.size() < target_size:
        card = deck.draw()
        if card is None:
            logger.debug("Deck exhausted with hand at %d/%d", hand.size(), target_size)
            break
        hand.add([card])
        dealt.append(card)
    return dealt
