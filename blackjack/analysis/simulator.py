"""
Monte Carlo autoplay of the round engine.

Plays many silent rounds with threshold players (hit below ``stand_on``)
and summarises how the seats settled against the House.

Each round is played on a fresh Game, so every round starts from a full,
freshly shuffled deck. All games share one seeded numpy Generator, so a
given (n_rounds, n_players, stand_on, seed) always gives the same result.

Net result per seat-round: +1 win, -1 loss or bust, 0 push (see
rules.OUTCOME_SCORES). There is no wagering; the mean is a win-rate summary.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from blackjack.config import MAX_PLAYERS, MIN_PLAYERS
from blackjack.engine.decisions import make_threshold_decision
from blackjack.engine.game import Game
from blackjack.engine.rules import OUTCOME_SCORES, Outcome

# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass
class SimulationResult:
    """Aggregate statistics from an autoplay run.

    Attributes:
        n_rounds:        Rounds played.
        n_players:       Seats per round.
        stand_on:        Threshold the autoplay players stood on.
        n_wins:          Seat-rounds settled WIN.
        n_losses:        Seat-rounds settled LOSS.
        n_pushes:        Seat-rounds settled PUSH.
        n_busts:         Seat-rounds where the player busted.
        n_house_busts:   Rounds where the House busted.
        mean_score:      Mean net result per seat-round.
        std_score:       Sample standard deviation of the net result.
        ci_95_low:       Lower bound of the 95% CI for mean_score.
        ci_95_high:      Upper bound of the 95% CI for mean_score.
        scores:          Raw per seat-round scores (int8), or None unless
                         requested with return_scores=True.
    """

    n_rounds: int
    n_players: int
    stand_on: int
    n_wins: int
    n_losses: int
    n_pushes: int
    n_busts: int
    n_house_busts: int
    mean_score: float
    std_score: float
    ci_95_low: float
    ci_95_high: float
    scores: np.ndarray | None = None

    @property
    def n_seat_rounds(self) -> int:
        return self.n_rounds * self.n_players

    @property
    def house_bust_rate(self) -> float:
        return self.n_house_busts / self.n_rounds

    def outcome_counts(self) -> dict[Outcome, int]:
        return {
            Outcome.WIN: self.n_wins,
            Outcome.LOSS: self.n_losses,
            Outcome.PUSH: self.n_pushes,
            Outcome.BUST: self.n_busts,
        }

    def __str__(self) -> str:
        sign = "+" if self.mean_score >= 0 else ""
        return (
            f"Rounds: {self.n_rounds:,} x {self.n_players} seat(s) | "
            f"Stand on: {self.stand_on} | "
            f"W/L/P/B: {self.n_wins}/{self.n_losses}/{self.n_pushes}/{self.n_busts} | "
            f"Mean: {sign}{self.mean_score:.4f} "
            f"[{self.ci_95_low:.4f}, {self.ci_95_high:.4f}] | "
            f"House bust: {self.house_bust_rate * 100:.1f}%"
        )


# ─── Core simulation loop ─────────────────────────────────────────────────────


def _discard(_line: str) -> None:
    pass


def simulate_rounds(
    n_rounds: int = 10_000,
    n_players: int = 1,
    stand_on: int = 17,
    seed: int | None = 42,
    return_scores: bool = False,
) -> SimulationResult:
    """Autoplay n_rounds and return aggregate statistics.

    Args:
        n_rounds:      Number of rounds to play (>= 1).
        n_players:     Seats per round (1-7).
        stand_on:      Autoplay players hit while their total is below this.
        seed:          Seed for the shared numpy Generator. None for a
                       non-deterministic run.
        return_scores: Attach the raw per seat-round score array.

    Returns:
        SimulationResult for the run.

    Raises:
        ValueError: If n_rounds < 1 or n_players is outside 1-7.
    """
    if n_rounds < 1:
        raise ValueError(f"n_rounds must be >= 1, got {n_rounds}.")
    if not MIN_PLAYERS <= n_players <= MAX_PLAYERS:
        raise ValueError(f"n_players must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {n_players}.")

    rng = np.random.default_rng(seed)
    decide = make_threshold_decision(stand_on)
    names = [f"Seat {i + 1}" for i in range(n_players)]

    counts = {outcome: 0 for outcome in Outcome}
    n_house_busts = 0
    scores = np.empty(n_rounds * n_players, dtype=np.int8)
    i = 0

    for _ in range(n_rounds):
        game = Game(names, rng=rng, decide=decide, output=_discard)
        result = game.play()
        if result.house_busted:
            n_house_busts += 1
        for outcome in result.outcomes:
            counts[outcome] += 1
            scores[i] = OUTCOME_SCORES[outcome]
            i += 1

    mean = float(np.mean(scores))
    std = float(np.std(scores, ddof=1)) if len(scores) > 1 else 0.0
    ci_margin = 1.96 * std / math.sqrt(len(scores))

    return SimulationResult(
        n_rounds=n_rounds,
        n_players=n_players,
        stand_on=stand_on,
        n_wins=counts[Outcome.WIN],
        n_losses=counts[Outcome.LOSS],
        n_pushes=counts[Outcome.PUSH],
        n_busts=counts[Outcome.BUST],
        n_house_busts=n_house_busts,
        mean_score=mean,
        std_score=std,
        ci_95_low=mean - ci_margin,
        ci_95_high=mean + ci_margin,
        scores=scores if return_scores else None,
    )


def compare_thresholds(
    thresholds: list[int],
    n_rounds: int = 10_000,
    seed: int = 42,
) -> dict[int, SimulationResult]:
    """Run one single-seat simulation per stand-on threshold, same seed each."""
    return {t: simulate_rounds(n_rounds, n_players=1, stand_on=t, seed=seed) for t in thresholds}


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import sys

    n_rounds = int(sys.argv[1]) if len(sys.argv) > 1 else 20_000
    print(f"Blackjack autoplay — {n_rounds:,} rounds per threshold\n")
    for threshold, result in compare_thresholds([12, 15, 17, 19], n_rounds=n_rounds).items():
        print(f"stand_on={threshold}: {result}")
