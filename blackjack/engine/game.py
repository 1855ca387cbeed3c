"""
Round engine: one Deck, one House, and a fixed list of Players.

Round flow (strictly sequential):
    INITIAL_DEAL → REVEAL → PLAYER_TURNS → HOUSE_REVEAL_SECOND →
    HOUSE_TURN → SETTLEMENT → CLEANUP

Key rules modelled here:
    - Cards come off a populated deck face-up, so the flip in REVEAL turns
      the House's first card face-down (the hole card) and the flip in
      HOUSE_REVEAL_SECOND turns it back face-up. Both are plain toggles.
    - Busted players get no win/lose/push notice; they were told "bust!"
      during their own turn.
    - The deck is populated and shuffled once per engine. Hands are cleared
      after every round but the dealt cards are not returned, so a long
      session eventually deals from an empty deck (a soft, reported no-op).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

import numpy as np

from blackjack.config import MAX_PLAYERS, MIN_PLAYERS, default_seed
from blackjack.logging_utils import get_logger

from .decisions import HitDecision, console_hit_decision
from .deck import Deck
from .participants import House, Output, Player
from .rules import Outcome, settle_player

logger = get_logger(__name__)


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Phase(Enum):
    INITIAL_DEAL = auto()
    REVEAL = auto()
    PLAYER_TURNS = auto()
    HOUSE_REVEAL_SECOND = auto()
    HOUSE_TURN = auto()
    SETTLEMENT = auto()
    CLEANUP = auto()


# ─── Result type ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlayerResult:
    """Final state of one seat: name, final total, and how it settled."""
    name: str
    total: int
    outcome: Outcome


@dataclass
class RoundResult:
    """What happened in one round, captured before CLEANUP.

    ``players`` follows seating order; names need not be unique.
    """
    players: list[PlayerResult] = field(default_factory=list)
    house_total: int = 0
    house_busted: bool = False
    cards_remaining: int = 0

    @property
    def outcomes(self) -> list[Outcome]:
        return [p.outcome for p in self.players]

    def __str__(self) -> str:
        parts = [f"{p.name}: {p.outcome.name} ({p.total})" for p in self.players]
        house = "BUST" if self.house_busted else str(self.house_total)
        return " | ".join(parts) + f" | House: {house} | Deck: {self.cards_remaining}"


# ─── Engine ───────────────────────────────────────────────────────────────────

def _clean_names(names: Iterable[str]) -> list[str]:
    cleaned = [str(name).strip() for name in names]
    if not MIN_PLAYERS <= len(cleaned) <= MAX_PLAYERS:
        raise ValueError(
            f"Expected {MIN_PLAYERS}-{MAX_PLAYERS} player names, got {len(cleaned)}."
        )
    if not all(cleaned):
        raise ValueError("Player names must be non-empty.")
    return cleaned


class Game:
    """Plays rounds of Blackjack for a fixed table.

    Args:
        names: Player display names in seating order (1-7, non-blank).
        rng: Random source for the single shuffle. Defaults to
             ``np.random.default_rng(default_seed())``: BLACKJACK_SEED if set,
             otherwise the wall-clock time. Pass a fixed-seed generator for
             reproducible rounds.
        decide: Hit decision provider shared by all players.
        output: Where game text is written.

    Raises:
        ValueError: If the names list is empty, too long, or has a blank name.
    """

    def __init__(
        self,
        names: Iterable[str],
        rng: np.random.Generator | None = None,
        decide: HitDecision = console_hit_decision,
        output: Output = print,
    ) -> None:
        cleaned = _clean_names(names)
        if rng is None:
            seed = default_seed()
            logger.info("shuffle seed %d", seed)
            rng = np.random.default_rng(seed)

        self._output = output
        self._players = [Player(name, decide=decide, output=output) for name in cleaned]
        self._house = House(output=output)
        self._deck = Deck(rng, output=output)
        self._deck.shuffle()

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def house(self) -> House:
        return self._house

    @property
    def deck(self) -> Deck:
        return self._deck

    def play(self) -> RoundResult:
        """Play one complete round and return its result.

        All game text goes to the output callable as the round unfolds.
        Every hand is empty again when this returns.
        """
        deck, house, players = self._deck, self._house, self._players

        self._enter(Phase.INITIAL_DEAL)
        for player in players:
            deck.deal(player)
            deck.deal(player)
        deck.deal(house)
        deck.deal(house)

        self._enter(Phase.REVEAL)
        house.flip_first_card()
        for player in players:
            self._output(str(player))
        self._output(str(house))

        self._enter(Phase.PLAYER_TURNS)
        for player in players:
            deck.additional_cards(player)

        self._enter(Phase.HOUSE_REVEAL_SECOND)
        house.flip_first_card()
        self._output(str(house))

        self._enter(Phase.HOUSE_TURN)
        deck.additional_cards(house)

        self._enter(Phase.SETTLEMENT)
        result = self._settle()

        self._enter(Phase.CLEANUP)
        for player in players:
            player.clear()
        house.clear()
        result.cards_remaining = deck.remaining()
        return result

    def _settle(self) -> RoundResult:
        house = self._house
        house_total = house.total()
        house_busted = house.is_busted()
        result = RoundResult(house_total=house_total, house_busted=house_busted)

        for player in self._players:
            total = player.total()
            if player.is_busted():
                result.players.append(PlayerResult(player.name, total, Outcome.BUST))
                continue

            outcome = settle_player(total, house_total, house_busted)
            result.players.append(PlayerResult(player.name, total, outcome))
            if outcome is Outcome.WIN:
                player.win()
            elif outcome is Outcome.LOSS:
                player.lose()
            else:
                player.push()

        logger.debug("round settled: %s", result)
        return result

    @staticmethod
    def _enter(phase: Phase) -> None:
        logger.debug("phase %s", phase.name)
