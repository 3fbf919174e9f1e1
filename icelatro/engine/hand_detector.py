"""
Hand detection for the ICElatro engine.
Classifies a played selection into a combination and its rarity tier.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from .deck import Card


class HandType(Enum):
    """Combinations, valued by rarity tier (the scoring multiplier)."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 8

    @property
    def rarity(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class DetectedHand:
    """Result of hand detection."""
    hand_type: HandType
    cards: list[Card]

    @property
    def rarity(self) -> int:
        return self.hand_type.rarity


@dataclass
class HandDetectorConfig:
    """Configuration for hand detection rules."""
    flush_size: int = 5     # Minimum cards for a flush


def value_counts(cards: list[Card]) -> list[int]:
    return list(Counter(c.value for c in cards).values())


def is_four_of_a_kind(cards: list[Card]) -> bool:
    return 4 in value_counts(cards)


def is_full_house(cards: list[Card]) -> bool:
    counts = value_counts(cards)
    return 3 in counts and 2 in counts


def is_flush(cards: list[Card], min_cards: int = 5) -> bool:
    if len(cards) < min_cards:
        return False
    return all(c.suit == cards[0].suit for c in cards)


def is_three_of_a_kind(cards: list[Card]) -> bool:
    return 3 in value_counts(cards)


def is_two_pair(cards: list[Card]) -> bool:
    return value_counts(cards).count(2) == 2


def is_pair(cards: list[Card]) -> bool:
    return value_counts(cards).count(2) == 1


class HandDetector:
    """
    Detects which combination a selection makes.

    Predicates are tried in a fixed order and the first match wins, so a
    full house is caught before three of a kind. Straights do not exist.
    """

    def __init__(self, config: HandDetectorConfig = None):
        self.config = config or HandDetectorConfig()

    def classify(self, cards: list[Card]) -> HandType:
        if is_four_of_a_kind(cards):
            return HandType.FOUR_OF_A_KIND
        if is_full_house(cards):
            return HandType.FULL_HOUSE
        if is_flush(cards, self.config.flush_size):
            return HandType.FLUSH
        if is_three_of_a_kind(cards):
            return HandType.THREE_OF_A_KIND
        if is_two_pair(cards):
            return HandType.TWO_PAIR
        if is_pair(cards):
            return HandType.PAIR
        return HandType.HIGH_CARD

    def detect(self, cards: list[Card]) -> DetectedHand:
        """Detect the combination made by the played cards."""
        return DetectedHand(self.classify(cards), list(cards))


def detect_hand(cards: list[Card], config: HandDetectorConfig = None) -> DetectedHand:
    """Convenience function to detect a hand."""
    detector = HandDetector(config)
    return detector.detect(cards)


def combination_rarity(cards: list[Card]) -> int:
    """Rarity tier (1-8) of a selection."""
    return HandDetector().classify(cards).rarity
