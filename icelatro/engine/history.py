"""
Game history tracking.
Captures plays, discards and round results as the engine runs.
"""

from dataclasses import dataclass, asdict
from typing import Optional
import json
from pathlib import Path


@dataclass
class GameEvent:
    """Single event in a game."""
    round: int
    event_type: str  # "game_start", "play", "discard", "round_result"
    data: dict
    timestamp: int = 0  # event sequence number


class RunHistory:
    """Captures the course of a game across rounds."""

    def __init__(self, preset_name: str = "standard"):
        self.events: list[GameEvent] = []
        self.metadata = {"preset": preset_name}
        self._event_counter = 0

    def add_event(self, round_number: int, event_type: str, data: dict):
        """Add an event to the history."""
        self.events.append(GameEvent(
            round=round_number,
            event_type=event_type,
            data=data,
            timestamp=self._event_counter
        ))
        self._event_counter += 1

    def add_game_start(self, points_goal: int, hands: int, discards: int, hand: list[str]):
        """Log the start (or restart) of a game."""
        self.add_event(
            round_number=1,
            event_type="game_start",
            data={
                "points_goal": points_goal,
                "hands": hands,
                "discards": discards,
                "hand": hand
            }
        )

    def add_play(self, round_number: int, cards: list[str], hand_type: str, points: int, score: int):
        self.add_event(
            round_number=round_number,
            event_type="play",
            data={
                "cards": cards,
                "hand_type": hand_type,
                "points": points,
                "score": score
            }
        )

    def add_discard(self, round_number: int, cards: list[str], drawn: list[str]):
        self.add_event(
            round_number=round_number,
            event_type="discard",
            data={"cards": cards, "drawn": drawn}
        )

    def add_round_result(self, round_number: int, score: int, required: int, success: bool,
                         hands_used: int, discards_used: int = 0,
                         best_hand: str = None, hands_played: list = None):
        """Log a finished round."""
        margin = score - required
        margin_pct = (margin / required * 100) if required > 0 else 0

        data = {
            "score": score,
            "required": required,
            "success": success,
            "margin": margin,
            "margin_pct": round(margin_pct, 1),
            "hands_used": hands_used,
            "discards_used": discards_used,
            "best_hand": best_hand,
            "close_call": abs(margin_pct) < 20
        }

        if hands_played:
            data["hands_played"] = hands_played  # List of (hand_type, points) pairs

        self.add_event(
            round_number=round_number,
            event_type="round_result",
            data=data
        )

    def round_results(self) -> list[GameEvent]:
        return [e for e in self.events if e.event_type == "round_result"]

    def get_close_calls(self) -> list[GameEvent]:
        """Get all close call rounds."""
        return [e for e in self.round_results() if e.data.get("close_call")]

    def best_play(self) -> Optional[GameEvent]:
        plays = [e for e in self.events if e.event_type == "play"]
        if not plays:
            return None
        return max(plays, key=lambda e: e.data["points"])

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "metadata": self.metadata,
            "events": [asdict(e) for e in self.events],
            "summary": self._generate_summary()
        }

    def _generate_summary(self) -> dict:
        """Generate a quick summary of the game."""
        results = self.round_results()
        best = self.best_play()

        return {
            "rounds_attempted": len(results),
            "rounds_won": sum(1 for e in results if e.data.get("success")),
            "close_calls": len(self.get_close_calls()),
            "plays": sum(1 for e in self.events if e.event_type == "play"),
            "discards": sum(1 for e in self.events if e.event_type == "discard"),
            "best_play": best.data if best else None
        }

    def save(self, filepath: str):
        """Save history to JSON."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: str) -> 'RunHistory':
        """Load history from JSON."""
        with open(filepath, encoding='utf-8') as f:
            data = json.load(f)

        history = cls(preset_name=data["metadata"]["preset"])
        history.metadata = data["metadata"]

        for event_data in data["events"]:
            history.events.append(GameEvent(**event_data))
            history._event_counter = max(history._event_counter, event_data["timestamp"] + 1)

        return history
