"""Tests for preset configurations."""

import pytest

from icelatro.engine.game import GameConfig
from icelatro.presets import PRESETS, Preset, build_config, get_preset, get_preset_info, list_presets


def test_standard_preset_matches_defaults() -> None:
    assert build_config(get_preset("standard")) == GameConfig()


def test_lookup_normalises_names() -> None:
    assert get_preset("Extra Hands") is PRESETS["extra_hands"]
    assert get_preset("missing") is None


def test_overrides_are_applied_and_unknown_keys_ignored() -> None:
    preset = Preset(name="x", description="", config_overrides={"hand_size": 6, "jokers": 3})

    config = build_config(preset)

    assert config.hand_size == 6
    assert not hasattr(config, "jokers")


def test_invalid_override_fails_validation() -> None:
    with pytest.raises(ValueError):
        build_config(Preset(name="x", description="", config_overrides={"starting_hands": 0}))


@pytest.mark.parametrize("name", list_presets())
def test_every_preset_builds(name: str) -> None:
    build_config(PRESETS[name])
    assert get_preset_info(name)["name"] == PRESETS[name].name


def test_preset_info_for_unknown_name() -> None:
    assert get_preset_info("missing") is None
