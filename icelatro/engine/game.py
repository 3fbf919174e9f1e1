"""
Game state and round progression for ICElatro.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional

from .deck import Card, Deck, Hand, create_deck, deal
from .hand_detector import HandDetector
from .history import RunHistory
from .scoring import ScoringEngine, ScoreBreakdown

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    IN_ROUND = auto()
    ROUND_WON = auto()
    ROUND_LOST = auto()


class RoundResult(Enum):
    """Outcome flag handed to the presentation layer."""
    NONE = "none"
    WON_ROUND = "won-round"
    LOST_GAME = "lost-game"


@dataclass
class GameConfig:
    """Configuration for a game."""
    starting_hands: int = 4
    starting_discards: int = 3
    hand_size: int = 8
    starting_goal: int = 100
    goal_multiplier: int = 2
    max_selection: int = 5
    # Score carries over into the next round unless this is set
    reset_score_each_round: bool = False

    def validate(self) -> None:
        if self.starting_hands < 1:
            raise ValueError(f"starting_hands must be at least 1, got {self.starting_hands}")
        if self.starting_discards < 0:
            raise ValueError(f"starting_discards must not be negative, got {self.starting_discards}")
        if self.hand_size < 1:
            raise ValueError(f"hand_size must be at least 1, got {self.hand_size}")
        if self.starting_goal < 1:
            raise ValueError(f"starting_goal must be at least 1, got {self.starting_goal}")
        if self.goal_multiplier < 1:
            raise ValueError(f"goal_multiplier must be at least 1, got {self.goal_multiplier}")
        if self.max_selection < 1:
            raise ValueError(f"max_selection must be at least 1, got {self.max_selection}")


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game after a transition."""
    hand: tuple[Card, ...]
    score: int
    points_goal: int
    round: int
    hands_left: int
    discards_left: int
    phase: GamePhase = GamePhase.IN_ROUND
    deck_remaining: int = 0
    last_play: Optional[ScoreBreakdown] = None

    @property
    def result(self) -> RoundResult:
        if self.phase == GamePhase.ROUND_WON:
            return RoundResult.WON_ROUND
        if self.phase == GamePhase.ROUND_LOST:
            return RoundResult.LOST_GAME
        return RoundResult.NONE

    @property
    def hand_ids(self) -> list[str]:
        return [c.id for c in self.hand]

    def to_dict(self) -> dict:
        return {
            "hand": [c.to_dict() for c in self.hand],
            "score": self.score,
            "points_goal": self.points_goal,
            "round": self.round,
            "hands_left": self.hands_left,
            "discards_left": self.discards_left,
            "result": self.result.value,
            "deck_remaining": self.deck_remaining,
            "last_play": self.last_play.to_dict() if self.last_play else None,
        }


@dataclass
class RoundLog:
    """Per-round counters kept for the history."""
    hands_played: list = field(default_factory=list)  # (hand_type, points) pairs
    discards_used: int = 0


class GameState:
    """
    Owns the deck, the hand and the round counters.

    Every request runs to completion and returns a GameSnapshot. Invalid
    requests are no-ops: the caller just gets the unchanged snapshot back.
    A concluding play parks the game in ROUND_WON or ROUND_LOST until
    finish_round() moves it on.
    """

    def __init__(self, config: GameConfig = None, rng: Optional[random.Random] = None,
                 preset_name: str = "standard"):
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = rng

        self.history = RunHistory(preset_name=preset_name)
        self.hand_detector = HandDetector()
        self.scoring_engine = ScoringEngine(self.hand_detector)

        self.deck = Deck()
        self.hand = Hand()
        self.score = 0
        self.points_goal = self.config.starting_goal
        self.round = 1
        self.hands_left = self.config.starting_hands
        self.discards_left = self.config.starting_discards
        self.phase = GamePhase.IN_ROUND
        self.last_play: Optional[ScoreBreakdown] = None
        self._round_log = RoundLog()

        self.start_game()

    # Engine boundary

    def start_game(self) -> GameSnapshot:
        """(Re)initialize everything for round 1."""
        self.score = 0
        self.round = 1
        self.points_goal = self.config.starting_goal
        self._new_deal()

        self.history.add_game_start(
            points_goal=self.points_goal,
            hands=self.hands_left,
            discards=self.discards_left,
            hand=[c.id for c in self.hand]
        )
        logger.info("Game started: goal %d, %d cards in hand", self.points_goal, self.hand.size())
        return self.snapshot()

    def play_selection(self, ids: Iterable[str]) -> GameSnapshot:
        """Score the selected cards and advance the round counters."""
        if self.phase != GamePhase.IN_ROUND:
            logger.debug("Play ignored: round already over (%s)", self.phase.name)
            return self.snapshot()

        cards = self._resolve_selection(ids)
        if cards is None:
            return self.snapshot()

        played = self.hand.remove(cards)
        self.deck.discard(played)

        breakdown = self.scoring_engine.score_cards(played)
        self.score += breakdown.final_score
        self.hands_left -= 1
        self.last_play = breakdown
        self._round_log.hands_played.append((breakdown.hand_type.name, breakdown.final_score))

        self.history.add_play(
            round_number=self.round,
            cards=[c.id for c in played],
            hand_type=breakdown.hand_type.name,
            points=breakdown.final_score,
            score=self.score
        )
        logger.debug("Played %s as %s for %d (score %d/%d)",
                     played, breakdown.hand_type.name, breakdown.final_score,
                     self.score, self.points_goal)

        # Reaching the goal wins even on the last hand
        if self.score >= self.points_goal:
            self._conclude_round(GamePhase.ROUND_WON)
        elif self.hands_left == 0:
            self._conclude_round(GamePhase.ROUND_LOST)
        else:
            self.draw_hand()

        return self.snapshot()

    def discard_selection(self, ids: Iterable[str]) -> GameSnapshot:
        """Throw away the selected cards and refill the hand."""
        if self.phase != GamePhase.IN_ROUND:
            logger.debug("Discard ignored: round already over (%s)", self.phase.name)
            return self.snapshot()

        if self.discards_left <= 0:
            logger.debug("Discard ignored: no discards remaining")
            return self.snapshot()

        cards = self._resolve_selection(ids)
        if cards is None:
            return self.snapshot()

        discarded = self.hand.remove(cards)
        self.deck.discard(discarded)
        self.discards_left -= 1
        self._round_log.discards_used += 1

        drawn = self.draw_hand()
        self.history.add_discard(
            round_number=self.round,
            cards=[c.id for c in discarded],
            drawn=[c.id for c in drawn]
        )
        logger.debug("Discarded %s, drew %s", discarded, drawn)

        return self.snapshot()

    def finish_round(self) -> GameSnapshot:
        """
        Leave a concluded round.

        A won round escalates the goal and starts the next round; a lost
        round restarts the whole game. No-op while a round is in progress.
        """
        if self.phase == GamePhase.ROUND_WON:
            self._next_round()
        elif self.phase == GamePhase.ROUND_LOST:
            self.start_game()
        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            hand=tuple(self.hand.cards),
            score=self.score,
            points_goal=self.points_goal,
            round=self.round,
            hands_left=self.hands_left,
            discards_left=self.discards_left,
            phase=self.phase,
            deck_remaining=self.deck.cards_remaining(),
            last_play=self.last_play,
        )

    # Internals

    def draw_hand(self) -> list[Card]:
        """Draw cards up to hand size."""
        return deal(self.deck, self.hand, self.config.hand_size)

    def _resolve_selection(self, ids: Iterable[str]) -> Optional[list[Card]]:
        """
        Map a selection of ids onto cards in hand.

        Returns None when the request must be rejected. Ids that are not in
        the hand are dropped silently.
        """
        if isinstance(ids, str):
            ids = [ids]
        distinct = list(dict.fromkeys(ids))

        if not distinct or len(distinct) > self.config.max_selection:
            logger.debug("Selection rejected: %d cards (allowed 1-%d)",
                         len(distinct), self.config.max_selection)
            return None

        cards = self.hand.select(distinct)
        if not cards:
            logger.debug("Selection rejected: none of %s are in hand", distinct)
            return None
        if len(cards) < len(distinct):
            logger.debug("Dropped %d ids not in hand", len(distinct) - len(cards))
        return cards

    def _new_deal(self) -> None:
        """Fresh shuffled deck, reset budgets, refill the hand."""
        self.hands_left = self.config.starting_hands
        self.discards_left = self.config.starting_discards
        self.phase = GamePhase.IN_ROUND
        self.last_play = None
        self._round_log = RoundLog()

        self.deck = create_deck(self.rng)
        self.hand.clear()
        self.draw_hand()

    def _conclude_round(self, phase: GamePhase) -> None:
        self.phase = phase
        success = phase == GamePhase.ROUND_WON
        plays = self._round_log.hands_played
        best_hand = max(plays, key=lambda p: p[1])[0] if plays else None

        self.history.add_round_result(
            round_number=self.round,
            score=self.score,
            required=self.points_goal,
            success=success,
            hands_used=self.config.starting_hands - self.hands_left,
            discards_used=self._round_log.discards_used,
            best_hand=best_hand,
            hands_played=list(plays)
        )
        if success:
            logger.info("Round %d won: %d/%d", self.round, self.score, self.points_goal)
        else:
            logger.info("Round %d lost: %d/%d", self.round, self.score, self.points_goal)

    def _next_round(self) -> None:
        self.round += 1
        self.points_goal *= self.config.goal_multiplier
        if self.config.reset_score_each_round:
            self.score = 0
        self._new_deal()
        logger.info("Round %d started: goal %d", self.round, self.points_goal)
