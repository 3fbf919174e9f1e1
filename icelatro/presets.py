"""
Preset configurations for ICElatro.
Allows easy setup of different rule variants and automated playstyles.
"""

from dataclasses import dataclass, field, fields
from typing import Optional
from enum import Enum

from .engine.game import GameConfig


class StrategyType(Enum):
    BASIC = "basic"
    SMART = "smart"


@dataclass
class Preset:
    """A complete preset configuration for a game."""
    name: str
    description: str
    strategy: StrategyType = StrategyType.SMART
    config_overrides: dict = field(default_factory=dict)


# Built-in presets
PRESETS = {
    "standard": Preset(
        name="Standard",
        description="4 hands, 3 discards, goal starts at 100 and doubles",
    ),

    "extra_hands": Preset(
        name="Extra Hands",
        description="One more hand per round",
        config_overrides={"starting_hands": 5},
    ),

    "extra_discards": Preset(
        name="Extra Discards",
        description="Two more discards per round",
        config_overrides={"starting_discards": 5},
    ),

    "big_hand": Preset(
        name="Big Hand",
        description="Hold 10 cards instead of 8",
        config_overrides={"hand_size": 10},
    ),

    "steep": Preset(
        name="Steep",
        description="Goal triples after every round",
        config_overrides={"goal_multiplier": 3},
    ),

    "no_discards": Preset(
        name="No Discards",
        description="Play what you are dealt",
        strategy=StrategyType.BASIC,
        config_overrides={"starting_discards": 0},
    ),
}


def get_preset(name: str) -> Optional[Preset]:
    """Get a preset by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a preset."""
    preset = get_preset(name)
    if preset:
        return {
            "name": preset.name,
            "description": preset.description,
            "strategy": preset.strategy.value,
            "config": preset.config_overrides,
        }
    return None


def build_config(preset: Preset) -> GameConfig:
    """GameConfig with the preset's overrides applied. Unknown keys are ignored."""
    config = GameConfig()
    known = {f.name for f in fields(GameConfig)}
    for key, value in preset.config_overrides.items():
        if key in known:
            setattr(config, key, value)
    config.validate()
    return config
