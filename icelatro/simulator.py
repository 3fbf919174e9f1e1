"""
Main API for ICElatro simulation.
Plays whole games with an automated strategy and aggregates the results.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .engine.game import GamePhase, GameState
from .engine.strategy import BasicStrategy, SmartStrategy
from .presets import Preset, StrategyType, build_config, get_preset, list_presets

logger = logging.getLogger(__name__)


@dataclass
class RoundDetail:
    """Details of a single round attempt."""
    round: int
    score: int
    required: int
    success: bool
    hands_played: list  # List of (hand_type, points) pairs
    hands_used: int
    discards_used: int

    @property
    def margin_pct(self) -> float:
        if self.required == 0:
            return 0
        return (self.score - self.required) / self.required * 100


@dataclass
class RunSummary:
    """Summary of one simulated game."""
    rounds_won: int
    final_round: int
    final_goal: int
    final_score: int
    best_play: Optional[dict]
    preset_used: str
    round_history: list[RoundDetail] = None

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  Reached round {self.final_round} (goal {self.final_goal:,})",
            f"{'='*50}",
            f"  Rounds won: {self.rounds_won}",
            f"  Final score: {self.final_score:,}",
        ]
        if self.best_play:
            lines.append(f"  Best play: {self.best_play['hand_type']} for {self.best_play['points']:,}")
        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "rounds_won": self.rounds_won,
            "final_round": self.final_round,
            "final_goal": self.final_goal,
            "final_score": self.final_score,
            "best_play": self.best_play,
            "preset_used": self.preset_used,
        }


@dataclass
class BatchResult:
    """Results from multiple simulated games."""
    runs: int
    avg_rounds_won: float
    max_round: int
    avg_final_score: float
    round_distribution: dict[int, int]
    preset_used: str

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  BATCH RESULTS ({self.runs} runs)",
            f"  Preset: {self.preset_used}",
            f"{'='*50}",
            f"  Avg rounds won: {self.avg_rounds_won:.2f}",
            f"  Max round reached: {self.max_round}",
            f"  Avg final score: {self.avg_final_score:.0f}",
            "",
            "  Round distribution:",
        ]

        for rnd in sorted(self.round_distribution.keys()):
            count = self.round_distribution[rnd]
            pct = count / self.runs * 100
            bar = "█" * int(pct / 2)
            lines.append(f"    Round {rnd}: {count:>3} ({pct:>5.1f}%) {bar}")

        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "runs": self.runs,
            "avg_rounds_won": self.avg_rounds_won,
            "max_round": self.max_round,
            "avg_final_score": self.avg_final_score,
            "round_distribution": self.round_distribution,
            "preset_used": self.preset_used,
        }


def simulate_round(game: GameState, strategy=None) -> bool:
    """
    Play the current round until it concludes.

    Returns True if the round was won. The game is left in its concluded
    phase; call finish_round() to move on. A round where the engine stops
    accepting the strategy's plays is abandoned as unwon.
    """
    limit = game.config.max_selection
    if strategy is None:
        strategy = BasicStrategy(max_cards=limit)

    snapshot = game.snapshot()
    while snapshot.phase == GamePhase.IN_ROUND:
        # Discard only while a hand remains to use the new cards
        if snapshot.discards_left > 0 and snapshot.hands_left > 1:
            discard_ids = strategy.select_cards_to_discard(snapshot)[:limit]
            if discard_ids:
                snapshot = game.discard_selection(discard_ids)

        play_ids = strategy.select_cards_to_play(snapshot)[:limit]
        if not play_ids:
            logger.warning("Round %d stalled with an empty hand", snapshot.round)
            break

        before = snapshot
        snapshot = game.play_selection(play_ids)
        if snapshot == before:
            logger.warning("Round %d stalled: play of %s was rejected", snapshot.round, play_ids)
            break

    return snapshot.phase == GamePhase.ROUND_WON


class Simulator:
    """
    Main simulator class.

    Usage:
        sim = Simulator(seed=7)
        result = sim.run("standard")
        print(result)

        # Or run many:
        batch = sim.run_batch("standard", runs=100)
        print(batch)
    """

    def __init__(self, seed: Optional[int] = None, max_rounds: int = 20):
        self.rng = random.Random(seed)
        self.max_rounds = max_rounds

    def _get_strategy(self, strategy_type: StrategyType, max_cards: int = 5):
        """Get strategy instance from type, limited to `max_cards` per play."""
        strategies = {
            StrategyType.BASIC: BasicStrategy,
            StrategyType.SMART: SmartStrategy,
        }
        return strategies.get(strategy_type, SmartStrategy)(max_cards=max_cards)

    def _resolve_preset(self, preset: Union[str, Preset]) -> tuple[Preset, str]:
        if isinstance(preset, str):
            p = get_preset(preset)
            if p is None:
                raise ValueError(f"Unknown preset: {preset}. Available: {list_presets()}")
            return p, preset
        return preset, preset.name

    def run(self, preset: Union[str, Preset] = "standard",
            verbose: bool = False,
            strategy_override: StrategyType = None,
            log_dir: Optional[str] = None) -> RunSummary:
        """
        Play one game until its first lost round (or max_rounds).

        Args:
            preset: Preset name (string) or Preset object
            verbose: Print each round result
            strategy_override: StrategyType to use instead of the preset's
            log_dir: If set, the game history is saved there as JSON

        Returns:
            RunSummary with results
        """
        p, preset_name = self._resolve_preset(preset)
        config = build_config(p)
        strategy = self._get_strategy(strategy_override or p.strategy, max_cards=config.max_selection)

        game = GameState(config=config, rng=self.rng, preset_name=preset_name)
        rounds_won = 0

        while True:
            won = simulate_round(game, strategy)

            if verbose:
                status = "WIN" if won else "LOSS"
                print(f"Round {game.round}: {game.score:,}/{game.points_goal:,} - {status}")

            if not won:
                break
            rounds_won += 1
            if game.round >= self.max_rounds:
                break
            game.finish_round()

        if log_dir:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            log_path = Path(log_dir) / f"run_{timestamp}_{preset_name}.json"
            game.history.save(str(log_path))

        round_history = []
        for event in game.history.round_results():
            data = event.data
            round_history.append(RoundDetail(
                round=event.round,
                score=data.get("score", 0),
                required=data.get("required", 0),
                success=data.get("success", False),
                hands_played=data.get("hands_played", []),
                hands_used=data.get("hands_used", 0),
                discards_used=data.get("discards_used", 0),
            ))

        best = game.history.best_play()
        return RunSummary(
            rounds_won=rounds_won,
            final_round=game.round,
            final_goal=game.points_goal,
            final_score=game.score,
            best_play=best.data if best else None,
            preset_used=preset_name,
            round_history=round_history,
        )

    def run_batch(self, preset: Union[str, Preset] = "standard",
                  runs: int = 100, verbose: bool = False,
                  strategy_override: StrategyType = None) -> BatchResult:
        """
        Run multiple games and aggregate results.

        Args:
            preset: Preset name or Preset object
            runs: Number of games
            verbose: Print progress

        Returns:
            BatchResult with aggregated stats
        """
        if runs < 1:
            raise ValueError(f"runs must be at least 1, got {runs}")
        _, preset_name = self._resolve_preset(preset)

        total_rounds_won = 0
        total_score = 0
        max_round = 0
        round_distribution = {}

        for i in range(runs):
            if verbose and (i + 1) % 10 == 0:
                print(f"  Run {i + 1}/{runs}...")

            summary = self.run(preset, strategy_override=strategy_override)

            total_rounds_won += summary.rounds_won
            total_score += summary.final_score
            max_round = max(max_round, summary.final_round)
            round_distribution[summary.final_round] = round_distribution.get(summary.final_round, 0) + 1

        return BatchResult(
            runs=runs,
            avg_rounds_won=total_rounds_won / runs,
            max_round=max_round,
            avg_final_score=total_score / runs,
            round_distribution=round_distribution,
            preset_used=preset_name,
        )


# Convenience functions
def run(preset: str = "standard", verbose: bool = False, seed: Optional[int] = None) -> RunSummary:
    """Quick run with default simulator."""
    sim = Simulator(seed=seed)
    return sim.run(preset, verbose)


def run_batch(preset: str = "standard", runs: int = 100, verbose: bool = False,
              seed: Optional[int] = None) -> BatchResult:
    """Quick batch run with default simulator."""
    sim = Simulator(seed=seed)
    return sim.run_batch(preset, runs, verbose)
