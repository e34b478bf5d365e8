"""Pytest fixtures for Twenty-One engine tests."""

from random import Random

import pytest

from twentyone.cards import Card, Deck
from twentyone.game import EventEmitter, MatchController, RoundEngine
from twentyone.hand import Hand
from twentyone.participants import Dealer, Player


class RiggedRandom(Random):
    """
    Random source that can put chosen cards on top of the deck.

    Each ``stack`` call queues one arrangement; the next shuffle places
    those cards on top so they are dealt in the given order. With nothing
    queued it shuffles normally.
    """

    def __init__(self, seed: int = 42) -> None:
        super().__init__(seed)
        self._stacks: list[list[Card]] = []

    def stack(self, *cards: str) -> None:
        self._stacks.append([Card.from_string(c) for c in cards])

    def shuffle(self, x) -> None:
        if not self._stacks:
            super().shuffle(x)
            return
        top = self._stacks.pop(0)
        rest = [card for card in x if card not in top]
        # Deck deals from the end of the list
        x[:] = rest + top[::-1]


def make_hand(*cards: str) -> Hand:
    """Build a hand from short card strings like 'AS', '10H'."""
    hand = Hand()
    for card in cards:
        hand.add(Card.from_string(card))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def rigged_rng():
    """Random source with a stackable deck."""
    return RiggedRandom()


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def twenty_one_hand():
    """Ace and King."""
    return make_hand("AS", "KH")


@pytest.fixture
def four_aces_and_king():
    """Four aces and a King, softened four times."""
    return make_hand("AS", "AH", "AD", "AC", "KS")


@pytest.fixture
def bust_hand():
    """King, King, Five."""
    return make_hand("KS", "KH", "5C")


@pytest.fixture
def player():
    return Player("Alice")


@pytest.fixture
def dealer():
    return Dealer("Hal")


@pytest.fixture
def events():
    return EventEmitter()


@pytest.fixture
def table(player, dealer, rigged_rng, events):
    """A round engine over a rigged deck."""
    return RoundEngine(player, dealer, Deck(rng=rigged_rng), events=events)


@pytest.fixture
def match(rigged_rng):
    """A new, unconfigured match over a rigged deck."""
    return MatchController(player_name="Alice", dealer_name="Hal", rng=rigged_rng)


@pytest.fixture
def hand_of():
    """Factory building hands from short card strings."""
    return make_hand
