"""Blackjack Autoplay — Streamlit Dashboard.

Two tabs:
  Tab 1 — Autoplay Outcomes   (Plotly bar chart + summary metrics)
  Tab 2 — Threshold Sweep     (single-seat results for every stand-on value)

Run:
    streamlit run app.py
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from blackjack.analysis.outcome_chart import build_outcome_figure
from blackjack.analysis.simulator import compare_thresholds, simulate_rounds
from blackjack.config import MAX_PLAYERS, MIN_PLAYERS
from blackjack.logging_utils import setup_logging

setup_logging()

# ─── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Blackjack Autoplay",
    page_icon="🃏",
    layout="wide",
)


@st.cache_data
def _run_simulation(n_rounds: int, n_players: int, stand_on: int, seed: int):
    return simulate_rounds(n_rounds, n_players=n_players, stand_on=stand_on, seed=seed)


@st.cache_data
def _run_sweep(n_rounds: int, seed: int):
    return compare_thresholds(list(range(12, 21)), n_rounds=n_rounds, seed=seed)


# ─── Sidebar controls ─────────────────────────────────────────────────────────

with st.sidebar:
    st.title("🃏 Blackjack Autoplay")
    st.markdown("---")

    n_players = st.slider("Players", min_value=MIN_PLAYERS, max_value=MAX_PLAYERS, value=1)
    stand_on = st.slider("Players stand on", min_value=12, max_value=21, value=17)
    n_rounds = st.slider("Rounds", min_value=500, max_value=50_000, value=2_000, step=500)
    seed = st.number_input("Seed", min_value=0, value=42, step=1)

    st.markdown("---")
    st.caption("House hits on 16 or less, stands on 17+.")

tab1, tab2 = st.tabs(["Autoplay Outcomes", "Threshold Sweep"])

# ── Tab 1: Autoplay Outcomes ──────────────────────────────────────────────────

with tab1:
    st.header("Autoplay Outcomes")

    with st.spinner(f"Playing {n_rounds:,} rounds …"):
        result = _run_simulation(n_rounds, n_players, stand_on, int(seed))

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Seat-rounds", f"{result.n_seat_rounds:,}")
    col2.metric("Mean net / seat", f"{result.mean_score:+.4f}")
    col3.metric("95% CI", f"[{result.ci_95_low:+.3f}, {result.ci_95_high:+.3f}]")
    col4.metric("House bust rate", f"{result.house_bust_rate * 100:.1f}%")

    st.plotly_chart(build_outcome_figure(result), use_container_width=True)

    counts_df = pd.DataFrame(
        {
            "Outcome": [o.name for o in result.outcome_counts()],
            "Count": list(result.outcome_counts().values()),
        }
    )
    st.dataframe(counts_df, use_container_width=True, hide_index=True)

# ── Tab 2: Threshold Sweep ────────────────────────────────────────────────────

with tab2:
    st.header("Threshold Sweep (single seat)")
    st.caption("Same seed for every threshold, so rows differ only by player policy.")

    with st.spinner("Sweeping stand-on thresholds 12–20 …"):
        sweep = _run_sweep(n_rounds, int(seed))

    sweep_df = pd.DataFrame(
        [
            {
                "Stand on": threshold,
                "Win %": r.n_wins / r.n_seat_rounds * 100,
                "Loss %": r.n_losses / r.n_seat_rounds * 100,
                "Push %": r.n_pushes / r.n_seat_rounds * 100,
                "Bust %": r.n_busts / r.n_seat_rounds * 100,
                "Mean net": r.mean_score,
            }
            for threshold, r in sweep.items()
        ]
    )
    st.dataframe(sweep_df.round(3), use_container_width=True, hide_index=True)
