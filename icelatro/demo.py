#!/usr/bin/env python3
"""
Demo script for ICElatro.
Shows hand detection, scoring, a single round and a batch of games.
"""

import logging
import random

from icelatro.engine.deck import Card, Suit
from icelatro.engine.hand_detector import detect_hand
from icelatro.engine.scoring import score_breakdown
from icelatro.engine.game import GameState, GamePhase
from icelatro.engine.strategy import evaluate_plays
from icelatro.simulator import Simulator, simulate_round


def _card(value: str, suit: Suit) -> Card:
    return Card(value, suit, f"{value}{suit.value}")


def demo_hand_detection():
    """Demonstrate hand detection."""
    print("=" * 60)
    print("HAND DETECTION DEMO")
    print("=" * 60)

    test_hands = [
        # Pair
        [_card("K", Suit.HEARTS), _card("K", Suit.DIAMONDS), _card("5", Suit.CLUBS)],
        # Two pair
        [_card("2", Suit.SPADES), _card("2", Suit.HEARTS), _card("3", Suit.DIAMONDS),
         _card("3", Suit.CLUBS), _card("5", Suit.SPADES)],
        # Flush
        [_card("A", Suit.HEARTS), _card("K", Suit.HEARTS), _card("10", Suit.HEARTS),
         _card("7", Suit.HEARTS), _card("2", Suit.HEARTS)],
        # Full House
        [_card("Q", Suit.HEARTS), _card("Q", Suit.DIAMONDS), _card("Q", Suit.CLUBS),
         _card("9", Suit.SPADES), _card("9", Suit.HEARTS)],
    ]

    for cards in test_hands:
        detected = detect_hand(cards)
        print(f"\nCards: {', '.join(str(c) for c in cards)}")
        print(f"  Hand: {detected.hand_type.label} (tier {detected.rarity})")


def demo_scoring():
    """Demonstrate scoring calculation."""
    print("\n" + "=" * 60)
    print("SCORING DEMO")
    print("=" * 60)

    cards = [_card("5", Suit.SPADES), _card("5", Suit.HEARTS), _card("5", Suit.DIAMONDS)]
    breakdown = score_breakdown(cards)

    print(f"\nPlayed: {', '.join(str(c) for c in cards)}")
    print(f"Detected: {breakdown.hand_type.label}")
    print(f"  Card points: {breakdown.card_points}")
    print(f"  Rarity: x{breakdown.rarity}")
    print(f"\n  FINAL SCORE: {breakdown.final_score}")


def demo_single_round(seed: int = 1):
    """Demonstrate one round played by the default strategy."""
    print("\n" + "=" * 60)
    print("SINGLE ROUND SIMULATION")
    print("=" * 60)

    game = GameState(rng=random.Random(seed))
    print(f"\nOpening hand: {game.hand}")
    print("Top plays:")
    for option in evaluate_plays(game.hand.cards)[:3]:
        print(f"    {option.hand_type.label:<16} {option.score:>4}  {option.cards}")

    won = simulate_round(game)
    print(f"\nRound {game.round} - Goal {game.points_goal}")
    print(f"  Score: {game.score}")
    print(f"  Result: {'WON' if won else 'LOST'}")

    round_result = game.history.round_results()[-1].data
    print(f"  Hands used: {round_result['hands_used']}")
    print(f"  Discards used: {round_result['discards_used']}")
    print("\nHands played:")
    for hand_type, points in round_result["hands_played"]:
        print(f"    {hand_type}: {points}")

    snapshot = game.finish_round()
    if snapshot.phase == GamePhase.IN_ROUND:
        print(f"\nNext: round {snapshot.round}, goal {snapshot.points_goal}")


def demo_monte_carlo(runs: int = 100, seed: int = 1):
    """Run many games to see how far the strategy gets."""
    print("\n" + "=" * 60)
    print(f"MONTE CARLO SIMULATION ({runs} runs)")
    print("=" * 60)

    sim = Simulator(seed=seed)
    print(sim.run_batch("standard", runs=runs))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    demo_hand_detection()
    demo_scoring()
    demo_single_round()
    demo_monte_carlo()

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
