"""Tests for Card and Deck classes."""

import pytest
from random import Random

from hypothesis import given, strategies as st

from twentyone.cards import Card, Deck, Face, Suit, full_deck
from twentyone.config import DECK_SIZE
from twentyone.errors import EmptyDeck


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Face.ACE, Suit.SPADES)
        assert card.face == Face.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Face.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.face = Face.KING

    def test_card_points(self):
        """Test nominal point values."""
        assert Card(Face.TWO, Suit.HEARTS).points == 2
        assert Card(Face.TEN, Suit.HEARTS).points == 10
        assert Card(Face.JACK, Suit.HEARTS).points == 10
        assert Card(Face.QUEEN, Suit.HEARTS).points == 10
        assert Card(Face.KING, Suit.HEARTS).points == 10
        assert Card(Face.ACE, Suit.HEARTS).points == 11

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Face.ACE, Suit.SPADES).is_ace
        assert not Card(Face.KING, Suit.SPADES).is_ace

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Face.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Face.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Face.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Face.KING, Suit.CLUBS)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suit symbols."""
        assert Card.from_string("A♠") == Card(Face.ACE, Suit.SPADES)
        assert Card.from_string("Q♥") == Card(Face.QUEEN, Suit.HEARTS)

    @pytest.mark.parametrize("bad", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, bad):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(bad)

    def test_card_str(self):
        """Test string representation."""
        assert str(Card(Face.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Face.TEN, Suit.DIAMONDS)) == "10♦"
        assert str(Card(Face.JACK, Suit.CLUBS)) == "J♣"

    def test_card_hash(self):
        """Test that equal cards collapse in a set."""
        cards = {Card(Face.ACE, Suit.SPADES), Card(Face.ACE, Suit.SPADES)}
        assert len(cards) == 1


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_creation(self):
        """Test creating a new deck."""
        deck = Deck()
        assert len(deck) == DECK_SIZE
        assert deck.cards_remaining == DECK_SIZE

    def test_full_deck_is_unique(self):
        """Test that the card universe is 4 suits x 13 faces."""
        cards = full_deck()
        assert len(cards) == 52
        assert len(set(cards)) == 52
        assert {c.suit for c in cards} == set(Suit)
        assert {c.face for c in cards} == set(Face)

    def test_deal_removes_cards(self, deck):
        """Test dealing transfers cards out of the deck."""
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert all(isinstance(c, Card) for c in dealt)
        assert len(deck) == 47

    def test_deal_default_is_one_card(self, deck):
        """Test deal() with no count deals a single card."""
        assert len(deck.deal()) == 1
        assert len(deck) == 51

    def test_deal_whole_deck_is_unique(self, deck):
        """Test dealing all 52 cards never repeats a card."""
        dealt = deck.deal(52)
        assert len(set(dealt)) == 52
        assert len(deck) == 0

    def test_deal_past_end_raises(self, deck):
        """Test that over-dealing raises EmptyDeck and deals nothing."""
        deck.deal(50)
        with pytest.raises(EmptyDeck) as excinfo:
            deck.deal(3)
        assert excinfo.value.requested == 3
        assert excinfo.value.remaining == 2
        assert len(deck) == 2

    def test_empty_deck_is_index_error(self, deck):
        """Test EmptyDeck is catchable as IndexError."""
        deck.deal(52)
        with pytest.raises(IndexError):
            deck.deal()

    def test_negative_deal_raises(self, deck):
        """Test dealing a negative count is rejected."""
        with pytest.raises(ValueError):
            deck.deal(-1)

    def test_reset_restores_full_deck(self, deck):
        """Test resetting the deck."""
        deck.deal(10)
        deck.reset()
        assert len(deck) == 52
        assert len(set(deck.deal(52))) == 52

    def test_seeded_decks_deal_identically(self):
        """Test that the same seed gives the same order."""
        first = Deck(rng=Random(7)).deal(52)
        second = Deck(rng=Random(7)).deal(52)
        assert first == second

    def test_reset_reshuffles(self):
        """Test consecutive resets produce a new order."""
        deck = Deck(rng=Random(42))
        first = deck.deal(52)
        deck.reset()
        second = deck.deal(52)
        assert set(first) == set(second)
        assert first != second

    @given(seed=st.integers(min_value=0, max_value=2**32), count=st.integers(0, 52))
    def test_cards_are_conserved(self, seed, count):
        """Test dealt plus remaining always covers the 52-card universe."""
        deck = Deck(rng=Random(seed))
        dealt = deck.deal(count)
        rest = deck.deal(len(deck))
        assert sorted(dealt + rest, key=repr) == sorted(full_deck(), key=repr)
