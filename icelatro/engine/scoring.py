"""
Scoring engine for the ICElatro engine.
Turns a detected hand into points.
"""

from dataclasses import dataclass, field

from .deck import Card
from .hand_detector import DetectedHand, HandDetector, HandType


@dataclass(frozen=True)
class ScoreBreakdown:
    """Detailed breakdown of how a play was scored."""
    hand_type: HandType
    card_points: int
    rarity: int
    final_score: int
    cards: tuple[Card, ...] = ()
    details: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "hand_type": self.hand_type.name,
            "card_points": self.card_points,
            "rarity": self.rarity,
            "final_score": self.final_score,
            "cards": [c.to_dict() for c in self.cards],
        }


class ScoringEngine:
    """
    Calculates scores.

    Score = (sum of card points) × rarity tier
    """

    def __init__(self, detector: HandDetector = None):
        self.detector = detector or HandDetector()

    def score_hand(self, hand: DetectedHand) -> ScoreBreakdown:
        """Score an already-detected hand."""
        details = [f"+{c.points} ({c})" for c in hand.cards]
        card_points = sum(c.points for c in hand.cards)
        details.append(f"x{hand.rarity} ({hand.hand_type.label})")

        return ScoreBreakdown(
            hand_type=hand.hand_type,
            card_points=card_points,
            rarity=hand.rarity,
            final_score=card_points * hand.rarity,
            cards=tuple(hand.cards),
            details=tuple(details),
        )

    def score_cards(self, cards: list[Card]) -> ScoreBreakdown:
        """Detect and score a selection in one step."""
        return self.score_hand(self.detector.detect(cards))


def calculate_score(cards: list[Card]) -> int:
    """Convenience function to calculate score."""
    return ScoringEngine().score_cards(cards).final_score


def score_breakdown(cards: list[Card]) -> ScoreBreakdown:
    """Get detailed score breakdown."""
    return ScoringEngine().score_cards(cards)
