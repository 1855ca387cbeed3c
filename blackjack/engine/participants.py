"""
Table participants: the abstract Participant and its two variants.

    Player  hit decision delegated to a decision provider (console by default)
    House   hits on 16 or less, stands on 17+; controls its hole card

Participants write their notices (bust, win, lose, push) through an output
callable so the engine can run against the console or silently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from blackjack.config import HOUSE_HIT_LIMIT, HOUSE_NAME
from blackjack.logging_utils import get_logger

from .cards import card_to_str
from .decisions import HitDecision, console_hit_decision
from .hand import Hand, is_bust

logger = get_logger(__name__)

# output(line) -> None; print by default
Output = Callable[[str], None]


class Participant(Hand, ABC):
    """A named hand that can decide whether to hit."""

    def __init__(self, name: str, output: Output = print) -> None:
        super().__init__()
        self.name = name
        self._output = output

    @abstractmethod
    def is_hitting(self) -> bool:
        """Return True to take another card."""

    def is_busted(self) -> bool:
        return is_bust(self.total())

    def bust(self) -> None:
        self._output(f"{self.name} bust!")

    def __str__(self) -> str:
        """Display line, e.g. ``'Ann: Ah\\t6c\\t(17)'``.

        The total is omitted while it is 0, i.e. while the first card is
        face-down.
        """
        if not len(self):
            return f"{self.name}: <empty>"
        line = f"{self.name}: " + ''.join(card_to_str(c) + '\t' for c in self)
        total = self.total()
        if total != 0:
            line += f"({total})"
        return line


class Player(Participant):
    """A human-controlled seat at the table."""

    def __init__(
        self,
        name: str,
        decide: HitDecision = console_hit_decision,
        output: Output = print,
    ) -> None:
        super().__init__(name, output)
        self._decide = decide

    def is_hitting(self) -> bool:
        return bool(self._decide(self))

    def win(self) -> None:
        self._output(f"{self.name} wins")

    def lose(self) -> None:
        self._output(f"{self.name} loses")

    def push(self) -> None:
        self._output(f"{self.name} pushes")


class House(Participant):
    """The dealer: fixed hit policy plus hole-card control."""

    def __init__(self, name: str = HOUSE_NAME, output: Output = print) -> None:
        super().__init__(name, output)

    def is_hitting(self) -> bool:
        return self.total() <= HOUSE_HIT_LIMIT

    def flip_first_card(self) -> None:
        """Toggle the visibility of the first card.

        Each call toggles; there is no "ensure shown" mode. On an empty hand
        a notice is written and nothing changes.
        """
        if not len(self):
            logger.warning("%s has no card to flip", self.name)
            self._output("No card to flip")
            return
        self._cards[0].flip()
        logger.debug("%s first card now %s", self.name, 'up' if self._cards[0].face_up else 'down')
