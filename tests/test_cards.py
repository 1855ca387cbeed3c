"""Tests for blackjack/engine/cards.py — card values, flipping, and string I/O."""

from __future__ import annotations

import pytest

from blackjack.engine.cards import (
    RANK_ACE,
    RANK_KING,
    RANK_NAMES,
    SUIT_CLUBS,
    SUIT_NAMES,
    SUIT_SPADES,
    Card,
    card_to_str,
    hand_to_str,
    str_to_card,
)


# ─── Card.value ───────────────────────────────────────────────────────────────

class TestCardValue:
    @pytest.mark.parametrize("rank", range(RANK_ACE, RANK_KING + 1))
    def test_face_up_value_is_rank_capped_at_ten(self, rank):
        assert Card(rank, SUIT_CLUBS).value() == min(rank, 10)

    @pytest.mark.parametrize("rank", range(RANK_ACE, RANK_KING + 1))
    def test_face_down_value_is_zero(self, rank):
        assert Card(rank, SUIT_CLUBS, face_up=False).value() == 0

    def test_ace_counts_one(self):
        assert str_to_card('As').value() == 1

    def test_face_cards_count_ten(self):
        assert [str_to_card(s).value() for s in ('Jc', 'Qd', 'Kh')] == [10, 10, 10]


class TestCardConstruction:
    def test_default_is_face_up(self):
        assert Card(5, SUIT_SPADES).face_up

    def test_rank_zero_rejected(self):
        with pytest.raises(ValueError, match="rank"):
            Card(0, SUIT_CLUBS)

    def test_rank_fourteen_rejected(self):
        with pytest.raises(ValueError, match="rank"):
            Card(14, SUIT_CLUBS)

    def test_suit_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="suit"):
            Card(RANK_ACE, 4)

    def test_rank_and_suit_are_read_only(self):
        card = Card(RANK_ACE, SUIT_CLUBS)
        with pytest.raises(AttributeError):
            card.rank = 5  # type: ignore[misc]


# ─── Card.flip ────────────────────────────────────────────────────────────────

class TestFlip:
    def test_flip_hides(self):
        card = str_to_card('9h')
        card.flip()
        assert not card.face_up
        assert card.value() == 0

    def test_flip_twice_restores(self):
        card = str_to_card('9h')
        card.flip()
        card.flip()
        assert card.face_up
        assert card.value() == 9

    def test_flip_keeps_rank_and_suit(self):
        card = str_to_card('Qd')
        card.flip()
        assert (card.rank, card.suit) == (12, 1)


# ─── String helpers ───────────────────────────────────────────────────────────

class TestCardToStr:
    def test_ace(self):
        assert card_to_str(Card(RANK_ACE, SUIT_SPADES)) == 'As'

    def test_ten(self):
        assert card_to_str(Card(10, SUIT_CLUBS)) == '10c'

    def test_king_of_hearts(self):
        assert str(Card(RANK_KING, 2)) == 'Kh'

    def test_face_down_renders_xx(self):
        assert str(Card(RANK_KING, 2, face_up=False)) == 'XX'

    def test_all_52_distinct(self):
        labels = {card_to_str(Card(r, s)) for r in range(1, 14) for s in range(4)}
        assert len(labels) == 52


class TestStrToCard:
    def test_round_trip_every_card(self):
        for rank in range(1, 14):
            for suit in range(4):
                text = RANK_NAMES[rank] + SUIT_NAMES[suit]
                card = str_to_card(text)
                assert (card.rank, card.suit) == (rank, suit)

    def test_case_insensitive(self):
        card = str_to_card('qD')
        assert (card.rank, card.suit) == (12, 1)

    def test_face_down_option(self):
        assert not str_to_card('Ah', face_up=False).face_up

    @pytest.mark.parametrize("bad", ['', 'A', '1c', '11h', 'Ax', 'Zs'])
    def test_invalid_raises(self, bad):
        with pytest.raises(ValueError):
            str_to_card(bad)


class TestHandToStr:
    def test_mixed_visibility(self):
        cards = [str_to_card('Ah'), str_to_card('Kd', face_up=False), str_to_card('10s')]
        assert hand_to_str(cards) == 'Ah XX 10s'

    def test_empty(self):
        assert hand_to_str([]) == ''
