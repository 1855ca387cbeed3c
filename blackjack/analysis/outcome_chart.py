"""Plotly charts for autoplay results.

Two public functions:

    build_outcome_figure(result)
        — Bar chart of WIN / LOSS / PUSH / BUST seat-round counts.
    save_outcome_html(fig, path)
        — Export a figure to a self-contained HTML file.
"""

from __future__ import annotations

import plotly.graph_objects as go

from blackjack.analysis.simulator import SimulationResult
from blackjack.engine.rules import Outcome

# ─── Constants ────────────────────────────────────────────────────────────────

_OUTCOME_COLORS: dict[Outcome, str] = {
    Outcome.WIN: "#2ca02c",
    Outcome.LOSS: "#d62728",
    Outcome.PUSH: "#7f7f7f",
    Outcome.BUST: "#ff7f0e",
}


# ─── Figures ──────────────────────────────────────────────────────────────────


def build_outcome_figure(result: SimulationResult) -> go.Figure:
    """Return a bar chart of seat-round outcomes for one simulation run.

    Hover text shows the count and its share of all seat-rounds.
    """
    counts = result.outcome_counts()
    total = result.n_seat_rounds
    labels = [outcome.name for outcome in counts]
    values = list(counts.values())
    hover = [
        f"{label}<br>Count: {value:,}<br>Share: {value / total * 100:.1f}%"
        for label, value in zip(labels, values)
    ]

    fig = go.Figure(
        go.Bar(
            x=labels,
            y=values,
            marker_color=[_OUTCOME_COLORS[outcome] for outcome in counts],
            text=hover,
            hoverinfo="text",
        )
    )
    fig.update_layout(
        title=(
            f"Outcomes — {result.n_rounds:,} rounds, {result.n_players} seat(s), "
            f"stand on {result.stand_on}"
        ),
        xaxis_title="Outcome",
        yaxis_title="Seat-rounds",
    )
    return fig


def save_outcome_html(fig: go.Figure, path: str) -> None:
    """Write ``fig`` to ``path`` as standalone HTML (plotly.js inlined)."""
    fig.write_html(path, include_plotlyjs=True, full_html=True)
