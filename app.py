"""
ICElatro Web App
Streamlit interface for playing the game and running simulations.
"""

import streamlit as st
import pandas as pd

from icelatro.engine.game import GameState, RoundResult
from icelatro.engine.scoring import score_breakdown
from icelatro.simulator import Simulator
from icelatro.presets import PRESETS, build_config

# Page config
st.set_page_config(
    page_title="ICElatro",
    page_icon="🃏",
    layout="centered"
)

st.title("🃏 ICElatro")


def get_game() -> GameState:
    """One engine instance per browser session."""
    if "game" not in st.session_state:
        st.session_state.game = GameState()
    return st.session_state.game


# Callbacks run before the rerun, while the selection widget may still be reset
def on_play():
    get_game().play_selection(st.session_state.get("selection", []))
    st.session_state.selection = []


def on_discard():
    get_game().discard_selection(st.session_state.get("selection", []))
    st.session_state.selection = []


def on_finish_round():
    get_game().finish_round()
    st.session_state.selection = []


@st.cache_resource
def get_simulator():
    return Simulator()


play_tab, sim_tab = st.tabs(["Play", "Simulate"])

with play_tab:
    game = get_game()
    snapshot = game.snapshot()

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Round", snapshot.round)
    with col2:
        st.metric("Score", f"{snapshot.score} / {snapshot.points_goal}")
    with col3:
        st.metric("Hands Left", snapshot.hands_left)
    with col4:
        st.metric("Discards Left", snapshot.discards_left)

    if snapshot.last_play:
        st.caption(f"Last play: {snapshot.last_play.hand_type.label} for {snapshot.last_play.final_score}")

    if snapshot.result == RoundResult.WON_ROUND:
        st.success(f"Round won! Score: {snapshot.score}")
        st.button("Next round", type="primary", on_click=on_finish_round)

    elif snapshot.result == RoundResult.LOST_GAME:
        st.error(f"You lost! Final score: {snapshot.score}")
        st.button("Start over", type="primary", on_click=on_finish_round)

    else:
        labels = {c.id: str(c) for c in snapshot.hand}
        selected = st.multiselect(
            f"Select up to {game.config.max_selection} cards",
            options=snapshot.hand_ids,
            format_func=lambda card_id: labels[card_id],
            max_selections=game.config.max_selection,
            key="selection",
        )

        if selected:
            preview = score_breakdown([c for c in snapshot.hand if c.id in selected])
            st.write(f"**{preview.hand_type.label}**: {preview.card_points} × {preview.rarity} = {preview.final_score}")

        col1, col2 = st.columns(2)
        with col1:
            st.button("Play", type="primary", use_container_width=True,
                      disabled=not selected, on_click=on_play)
        with col2:
            st.button("Discard", use_container_width=True,
                      disabled=not selected or snapshot.discards_left == 0, on_click=on_discard)

    st.caption(f"{snapshot.deck_remaining} cards left in deck")

with sim_tab:
    sim = get_simulator()

    preset_options = list(PRESETS.keys())
    selected_preset = st.selectbox(
        "Preset",
        options=preset_options,
        format_func=lambda key: PRESETS[key].name
    )
    preset = PRESETS[selected_preset]
    st.markdown(f"*{preset.description}*")
    st.markdown(f"**Strategy:** {preset.strategy.value}")

    num_runs = st.slider("Number of Runs", min_value=10, max_value=500, value=100, step=10)

    if st.button("🎲 Run Simulation", use_container_width=True):
        with st.spinner("Running simulation..."):
            result = sim.run_batch(selected_preset, runs=num_runs)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Avg Rounds Won", f"{result.avg_rounds_won:.2f}")
        with col2:
            st.metric("Max Round", result.max_round)
        with col3:
            st.metric("Avg Final Score", f"{result.avg_final_score:.0f}")

        config = build_config(preset)
        st.caption(f"{config.starting_hands} hands, {config.starting_discards} discards, "
                   f"{config.hand_size} cards, goal x{config.goal_multiplier} per round")

        st.subheader("Round Reached")
        chart_data = pd.DataFrame({
            'Round': list(result.round_distribution.keys()),
            'Runs': list(result.round_distribution.values())
        }).sort_values('Round')

        st.bar_chart(chart_data.set_index('Round'))
