"""
Shared pytest fixtures for Blackjack engine tests.

Provides convenience wrappers around str_to_card for building known hands
and a deck whose deal order is fully scripted.
"""

from __future__ import annotations

import numpy as np
import pytest

from blackjack.engine.cards import Card, str_to_card
from blackjack.engine.deck import Deck
from blackjack.engine.hand import Hand


def cards(*card_strs: str) -> list[Card]:
    """Build a list of face-up cards from human-readable strings.

    Examples:
        >>> [str(c) for c in cards('Ah', '10s')]
        ['Ah', '10s']
    """
    return [str_to_card(s) for s in card_strs]


def hand(*card_strs: str) -> Hand:
    """Build a Hand from human-readable card strings, in order."""
    return Hand(cards(*card_strs))


def stacked_deck(*card_strs: str, output=print) -> Deck:
    """Return a Deck that deals exactly ``card_strs``, first string first.

    Deck.deal() takes the last card of the pile, so the pile is the
    reverse of the requested deal order.
    """
    deck = Deck(np.random.default_rng(0), output=output)
    deck.clear()
    for card in reversed(cards(*card_strs)):
        deck.add(card)
    return deck


class Lines(list):
    """Output sink that records every line written."""

    def __call__(self, line: str) -> None:
        self.append(line)


@pytest.fixture
def rng() -> np.random.Generator:
    """Fixed-seed generator for reproducible shuffles."""
    return np.random.default_rng(42)


@pytest.fixture
def out() -> Lines:
    return Lines()


@pytest.fixture
def h():
    """Expose the hand() helper as a fixture for convenience."""
    return hand
