"""Tests for snapshot conversion."""

import pytest
from pydantic import ValidationError

from twentyone.cards import Card
from twentyone.schemas import HandView, card_view, hand_view, participant_view


class TestViews:
    """Tests for converting engine objects to views."""

    def test_card_view(self):
        view = card_view(Card.from_string("QH"))
        assert (view.face, view.suit, view.points) == ("Q", "♥", 10)

    def test_full_hand_view(self, four_aces_and_king):
        view = hand_view(four_aces_and_king)
        assert len(view.cards) == 5
        assert view.total == 14
        assert not view.is_busted
        assert view.hidden_cards == 0

    def test_hidden_hand_view(self, hand_of):
        view = hand_view(hand_of("10C", "7D", "2S"), reveal=False)
        assert [c.face for c in view.cards] == ["10"]
        assert view.hidden_cards == 2
        assert view.total is None

    def test_hidden_empty_hand(self, empty_hand):
        view = hand_view(empty_hand, reveal=False)
        assert view.cards == []
        assert view.total == 0

    def test_participant_view(self, dealer, hand_of):
        dealer.hand = hand_of("KS", "KH", "5C")
        dealer.increment_score()

        view = participant_view(dealer)

        assert view.role == "dealer"
        assert view.score == 1
        assert view.hand.is_busted

    def test_views_are_frozen(self, empty_hand):
        view = hand_view(empty_hand)
        with pytest.raises(ValidationError):
            view.total = 3

    def test_negative_hidden_count_rejected(self):
        with pytest.raises(ValidationError):
            HandView(cards=[], total=None, is_busted=False, is_soft=False, hidden_cards=-1)
