"""
Hand container and total calculation with the soft-ace rule.

Total rule:
    - An empty hand, or a hand whose FIRST card is face-down, totals 0.
      A concealed hole card never leaks the House's strength.
    - Otherwise sum the card values (Ace = 1, face-down cards = 0).
    - If any card is a face-up Ace and the raw sum is <= 11, add 10 once.
      Multiple aces are never promoted more than once.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from blackjack.config import BLACKJACK, SOFT_ACE_BONUS

from .cards import RANK_ACE, Card, hand_to_str


def calculate_total(cards: Sequence[Card]) -> int:
    """Calculate the blackjack total of a card sequence.

    Examples:
        >>> calculate_total([Card(1, 0), Card(6, 1)])    # A 6, soft 17
        17
        >>> calculate_total([Card(13, 0), Card(13, 1), Card(13, 2)])
        30
        >>> calculate_total([Card(1, 0, face_up=False), Card(9, 1)])
        0
    """
    if not cards or cards[0].value() == 0:
        return 0

    total = 0
    has_ace = False
    for card in cards:
        value = card.value()
        if value == RANK_ACE:
            has_ace = True
        total += value

    if has_ace and total + SOFT_ACE_BONUS <= BLACKJACK:
        total += SOFT_ACE_BONUS
    return total


def is_bust(total: int) -> bool:
    """Return True if a total exceeds 21.

    Examples:
        >>> is_bust(21)
        False
        >>> is_bust(22)
        True
    """
    return total > BLACKJACK


class Hand:
    """An ordered collection of cards owned by one holder.

    Cards are moved between hands by reference; a card belongs to exactly
    one hand at a time. No uniqueness is enforced.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Read-only snapshot of the cards, first dealt first."""
        return tuple(self._cards)

    def add(self, card: Card) -> None:
        self._cards.append(card)

    def clear(self) -> None:
        self._cards.clear()

    def total(self) -> int:
        return calculate_total(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({hand_to_str(self._cards)!r})"
