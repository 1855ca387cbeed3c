"""
Deck creation, shuffling, and card dealing.

The deck is a Hand holding the undealt pile. Dealing moves the LAST card of
the pile into the target hand. A populated deck holds the 52 (suit, rank)
combinations in suit-major order (clubs A..K, diamonds A..K, ...), all
face-up.

Shuffling uses a numpy Generator supplied by the owner, so a fixed-seed
generator gives a reproducible deal order.
"""

from __future__ import annotations

import numpy as np

from blackjack.logging_utils import get_logger

from .cards import RANK_ACE, RANK_KING, SUIT_CLUBS, SUIT_SPADES, Card, card_to_str
from .hand import Hand
from .participants import Output, Participant

logger = get_logger(__name__)

OUT_OF_CARDS_MSG: str = "Out of cards. Unable to deal"


class Deck(Hand):
    """A single 52-card deck.

    Args:
        rng: Random source for shuffle(). Defaults to an unseeded
             ``np.random.default_rng()``.
        output: Where the out-of-cards notice is written.

    Examples:
        >>> deck = Deck(np.random.default_rng(7))
        >>> deck.remaining()
        52
        >>> hand = Hand()
        >>> deck.deal(hand)
        True
        >>> deck.remaining(), len(hand)
        (51, 1)
    """

    def __init__(
        self,
        rng: np.random.Generator | None = None,
        output: Output = print,
    ) -> None:
        super().__init__()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._output = output
        self.populate()

    def populate(self) -> None:
        """Discard the current pile and create a fresh ordered 52-card deck."""
        self.clear()
        for suit in range(SUIT_CLUBS, SUIT_SPADES + 1):
            for rank in range(RANK_ACE, RANK_KING + 1):
                self.add(Card(rank, suit))

    def shuffle(self) -> None:
        """Uniformly permute the pile in place."""
        self._rng.shuffle(self._cards)

    def remaining(self) -> int:
        return len(self._cards)

    def deal(self, hand: Hand) -> bool:
        """Move the top card of the pile into ``hand``.

        Returns:
            True if a card was dealt. False if the deck was empty; the
            notice is written and ``hand`` is left unchanged.
        """
        if not self._cards:
            logger.warning("deal requested from an empty deck")
            self._output(OUT_OF_CARDS_MSG)
            return False
        card = self._cards.pop()
        hand.add(card)
        logger.debug("dealt %s, %d left", card_to_str(card), len(self._cards))
        return True

    def additional_cards(self, participant: Participant) -> None:
        """Deal to ``participant`` for as long as it keeps hitting.

        Each dealt card is followed by the participant's display line. The
        loop stops when the participant stands, busts, or the deck runs out.
        A busted participant is then notified.
        """
        while participant.is_hitting() and not participant.is_busted():
            if not self.deal(participant):
                break
            self._output(str(participant))

        if participant.is_busted():
            participant.bust()
