"""
Card selection strategies for automated play.
"""

from itertools import combinations
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from .deck import Card
from .game import GameSnapshot
from .hand_detector import HandType
from .scoring import ScoringEngine, ScoreBreakdown


@dataclass
class PlayOption:
    """A possible play with its score."""
    ids: list[str]
    cards: list[Card]
    hand_type: HandType
    score: int
    breakdown: ScoreBreakdown


def evaluate_plays(cards: list[Card], max_cards: int = 5,
                   engine: ScoringEngine = None) -> list[PlayOption]:
    """Score every subset of 1..max_cards cards, best first."""
    engine = engine or ScoringEngine()
    options = []
    for size in range(1, min(max_cards, len(cards)) + 1):
        for combo in combinations(cards, size):
            breakdown = engine.score_cards(list(combo))
            options.append(PlayOption(
                ids=[c.id for c in combo],
                cards=list(combo),
                hand_type=breakdown.hand_type,
                score=breakdown.final_score,
                breakdown=breakdown
            ))
    options.sort(key=lambda o: o.score, reverse=True)
    return options


def best_play(cards: list[Card], max_cards: int = 5,
              engine: ScoringEngine = None) -> Optional[PlayOption]:
    """The highest scoring selection from `cards`, or None for an empty hand."""
    options = evaluate_plays(cards, max_cards, engine)
    return options[0] if options else None


class BasicStrategy:
    """
    Plays the best scoring selection.
    Discards low loose cards only when the best play is a high card.
    """

    def __init__(self, max_cards: int = 5):
        self.max_cards = max_cards
        self.scoring_engine = ScoringEngine()

    def select_cards_to_play(self, snapshot: GameSnapshot) -> list[str]:
        option = best_play(list(snapshot.hand), self.max_cards, self.scoring_engine)
        return option.ids if option else []

    def select_cards_to_discard(self, snapshot: GameSnapshot) -> list[str]:
        if snapshot.discards_left <= 0 or snapshot.deck_remaining == 0:
            return []

        cards = list(snapshot.hand)
        option = best_play(cards, self.max_cards, self.scoring_engine)
        if option is None or option.hand_type != HandType.HIGH_CARD:
            return []

        value_counts = Counter(c.value for c in cards)
        lonely = [c for c in cards if value_counts[c.value] == 1]
        lonely.sort(key=lambda c: c.points)
        return [c.id for c in lonely[:min(3, self.max_cards)]]


class SmartStrategy(BasicStrategy):
    """
    Discards only when the best play cannot clear the remaining goal in
    the hands left. Keeps grouped values and the dominant suit.
    """

    def select_cards_to_discard(self, snapshot: GameSnapshot) -> list[str]:
        if snapshot.discards_left <= 0 or snapshot.deck_remaining == 0:
            return []

        cards = list(snapshot.hand)
        option = best_play(cards, self.max_cards, self.scoring_engine)
        if option is None:
            return []

        needed = snapshot.points_goal - snapshot.score
        if option.score * snapshot.hands_left >= needed:
            return []

        value_counts = Counter(c.value for c in cards)
        suit_counts = Counter(c.suit for c in cards)
        flush_suit, flush_count = suit_counts.most_common(1)[0]
        chase_flush = flush_count >= 3

        def keep(card: Card) -> bool:
            if value_counts[card.value] >= 2:
                return True
            return chase_flush and card.suit == flush_suit

        candidates = [c for c in cards if not keep(c)]
        candidates.sort(key=lambda c: c.points)
        return [c.id for c in candidates[:self.max_cards]]
