"""
Card model, rank/suit tables, and human-readable I/O helpers.

Card fields:
    rank     1=A, 2..10 literal, 11=J, 12=Q, 13=K
    suit     0=c, 1=d, 2=h, 3=s   (clubs, diamonds, hearts, spades)
    face_up  visibility; a face-down card is worth 0 points and prints as 'XX'

A card's rank and suit are fixed at construction. The only mutation is
flip(), which toggles visibility (used for the House hole card).
"""

from __future__ import annotations

from typing import Iterable

# Rank symbol lookup: index matches rank (index 0 unused).
RANK_NAMES: list[str] = ['', 'A', '2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K']
SUIT_NAMES: list[str] = ['c', 'd', 'h', 's']

RANK_ACE: int = 1
RANK_KING: int = 13

SUIT_CLUBS: int = 0
SUIT_HEARTS: int = 2
SUIT_SPADES: int = 3

HIDDEN_CARD_STR: str = 'XX'


class Card:
    """A single playing card with a face-up/face-down flag.

    Examples:
        >>> card = Card(RANK_KING, SUIT_HEARTS)
        >>> card.value()
        10
        >>> str(card)
        'Kh'
        >>> card.flip()
        >>> card.value(), str(card)
        (0, 'XX')
    """

    __slots__ = ('_rank', '_suit', '_face_up')

    def __init__(self, rank: int, suit: int, face_up: bool = True) -> None:
        if not RANK_ACE <= rank <= RANK_KING:
            raise ValueError(f"Card rank must be 1-13, got {rank}.")
        if not SUIT_CLUBS <= suit <= SUIT_SPADES:
            raise ValueError(f"Card suit must be 0-3, got {suit}.")
        self._rank = rank
        self._suit = suit
        self._face_up = face_up

    @property
    def rank(self) -> int:
        return self._rank

    @property
    def suit(self) -> int:
        return self._suit

    @property
    def face_up(self) -> bool:
        return self._face_up

    def value(self) -> int:
        """Blackjack points: min(rank, 10) when face-up, 0 when face-down.

        Aces count 1 here; the soft-ace upgrade is applied by Hand.total().
        """
        if not self._face_up:
            return 0
        return min(self._rank, 10)

    def flip(self) -> None:
        self._face_up = not self._face_up

    def __str__(self) -> str:
        return card_to_str(self)

    def __repr__(self) -> str:
        state = 'up' if self._face_up else 'down'
        return f"Card({RANK_NAMES[self._rank]}{SUIT_NAMES[self._suit]}, {state})"


def card_to_str(card: Card) -> str:
    """Render a card for display.

    Examples:
        >>> card_to_str(Card(RANK_ACE, SUIT_SPADES))
        'As'
        >>> card_to_str(Card(10, SUIT_CLUBS))
        '10c'
        >>> card_to_str(Card(RANK_ACE, SUIT_SPADES, face_up=False))
        'XX'
    """
    if not card.face_up:
        return HIDDEN_CARD_STR
    return RANK_NAMES[card.rank] + SUIT_NAMES[card.suit]


def str_to_card(s: str, face_up: bool = True) -> Card:
    """Parse a human-readable card string into a new Card.

    The format is <rank><suit> where suit is the last character.
    Rank can be 'A', '2'-'10', 'J', 'Q' or 'K' (case-insensitive).
    Suit can be 'c', 'd', 'h' or 's' (case-insensitive).

    Examples:
        >>> str_to_card('Ah').rank
        1
        >>> str_to_card('10s').value()
        10
        >>> str_to_card('QD').suit
        1

    Raises:
        ValueError: If the string is not a valid card.
    """
    if len(s) < 2:
        raise ValueError(f"Not a card: {s!r}")
    rank_str = s[:-1].upper()
    suit_str = s[-1].lower()
    if rank_str not in RANK_NAMES[1:] or suit_str not in SUIT_NAMES:
        raise ValueError(f"Not a card: {s!r}")
    return Card(RANK_NAMES.index(rank_str), SUIT_NAMES.index(suit_str), face_up)


def hand_to_str(cards: Iterable[Card]) -> str:
    """Convert a sequence of cards to a space-separated string.

    Examples:
        >>> hand_to_str([str_to_card('Ah'), str_to_card('Kd', face_up=False)])
        'Ah XX'
    """
    return ' '.join(card_to_str(c) for c in cards)
