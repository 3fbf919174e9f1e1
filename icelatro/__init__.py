"""
ICElatro card game engine
"""

from .engine.deck import Card, Deck, Hand, Suit, create_deck, deal
from .engine.hand_detector import HandType, DetectedHand, HandDetector, detect_hand, combination_rarity
from .engine.scoring import ScoringEngine, ScoreBreakdown, calculate_score, score_breakdown
from .engine.game import GameConfig, GamePhase, GameSnapshot, GameState, RoundResult

__version__ = "0.1.0"
