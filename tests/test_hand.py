"""Tests for blackjack/engine/hand.py — totals, the soft-ace rule, and Hand."""

from __future__ import annotations

import doctest

import pytest

import blackjack.engine.cards as cards_module
import blackjack.engine.hand as hand_module
from blackjack.engine.cards import str_to_card
from blackjack.engine.hand import Hand, calculate_total, is_bust
from tests.conftest import cards, hand


# ─── calculate_total ──────────────────────────────────────────────────────────

class TestCalculateTotal:
    def test_empty_is_zero(self):
        assert calculate_total([]) == 0

    def test_two_plain_cards(self):
        assert calculate_total(cards('10c', '9h')) == 19

    def test_face_cards(self):
        assert calculate_total(cards('Kh', 'Qd')) == 20

    def test_three_kings_no_promotion(self):
        assert calculate_total(cards('Kc', 'Kd', 'Kh')) == 30

    # Soft ace
    def test_ace_six_is_soft_seventeen(self):
        assert calculate_total(cards('Ah', '6c')) == 17

    def test_ace_king_is_twenty_one(self):
        assert calculate_total(cards('As', 'Kd')) == 21

    def test_promotion_at_raw_eleven(self):
        # A+10 raw 11 -> 21
        assert calculate_total(cards('Ac', '4d', '6h')) == 21

    def test_no_promotion_at_raw_twelve(self):
        assert calculate_total(cards('Ac', '5d', '6h')) == 12

    def test_two_aces_promoted_once(self):
        # raw 2 -> 12, never 22
        assert calculate_total(cards('Ac', 'Ad')) == 12

    def test_four_aces_promoted_once(self):
        assert calculate_total(cards('Ac', 'Ad', 'Ah', 'As')) == 14

    def test_ace_after_bust_range_stays_hard(self):
        assert calculate_total(cards('Kc', '9d', 'Ah')) == 20

    # Concealment
    def test_face_down_first_card_totals_zero(self):
        held = [str_to_card('Kc', face_up=False), str_to_card('9d')]
        assert calculate_total(held) == 0

    def test_face_down_first_card_zero_regardless_of_rest(self):
        held = [str_to_card('2c', face_up=False)] + cards('Kd', 'Qh', 'Js')
        assert calculate_total(held) == 0

    def test_face_down_later_card_counts_zero(self):
        held = [str_to_card('Kc'), str_to_card('9d', face_up=False)]
        assert calculate_total(held) == 10

    def test_hidden_ace_is_not_promoted(self):
        held = [str_to_card('5c'), str_to_card('Ad', face_up=False)]
        assert calculate_total(held) == 5


class TestIsBust:
    def test_twenty_one_not_bust(self):
        assert not is_bust(21)

    def test_twenty_two_bust(self):
        assert is_bust(22)

    def test_zero_not_bust(self):
        assert not is_bust(0)


# ─── Hand ─────────────────────────────────────────────────────────────────────

class TestHand:
    def test_starts_empty(self):
        held = Hand()
        assert len(held) == 0
        assert held.total() == 0

    def test_add_appends_in_order(self):
        held = Hand()
        first, second = cards('Ah', '6c')
        held.add(first)
        held.add(second)
        assert held.cards == (first, second)
        assert held.total() == 17

    def test_clear_empties(self):
        held = hand('Kc', 'Kd', 'Kh')
        held.clear()
        assert len(held) == 0
        assert held.total() == 0

    def test_duplicates_allowed(self):
        card = str_to_card('7c')
        held = Hand()
        held.add(card)
        held.add(card)
        assert len(held) == 2
        assert held.total() == 14

    def test_cards_view_is_a_snapshot(self):
        held = hand('2c')
        snapshot = held.cards
        held.add(str_to_card('3d'))
        assert len(snapshot) == 1

    def test_iteration(self):
        held = hand('2c', '3d')
        assert [str(c) for c in held] == ['2c', '3d']

    def test_total_follows_flip(self):
        held = hand('Ah', '9c')
        held.cards[0].flip()
        assert held.total() == 0
        held.cards[0].flip()
        assert held.total() == 20

    def test_repr(self):
        assert repr(hand('Ah', '9c')) == "Hand('Ah 9c')"


class TestDocExamples:
    @pytest.mark.parametrize("module", [hand_module, cards_module])
    def test_examples_run(self, module):
        results = doctest.testmod(module)
        assert results.attempted > 0
        assert results.failed == 0
