"""
ICElatro engine components.
"""

from .deck import Card, Deck, Hand, Suit, VALUES, CARD_POINTS, create_deck, deal
from .hand_detector import HandType, DetectedHand, HandDetector, HandDetectorConfig, detect_hand, combination_rarity
from .scoring import ScoringEngine, ScoreBreakdown, calculate_score, score_breakdown
from .game import GameConfig, GamePhase, GameSnapshot, GameState, RoundResult
