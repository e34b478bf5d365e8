"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random

from twentyone.errors import EmptyDeck

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits."""

    HEARTS = "♥"
    DIAMONDS = "♦"
    SPADES = "♠"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


class Face(Enum):
    """Card faces, valued by their pip count (J=11 .. A=14)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return self.name[0]

    @property
    def points(self) -> int:
        """Return the nominal point value (Ace = 11, J/Q/K = 10)."""
        if self.value <= 10:
            return self.value
        if self is Face.ACE:
            return 11
        return 10

    @property
    def is_ace(self) -> bool:
        return self is Face.ACE


_FACE_CODES = {str(face): face for face in Face} | {"T": Face.TEN}
_SUIT_CODES = {suit.name[0]: suit for suit in Suit} | {suit.value: suit for suit in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    face: Face
    suit: Suit

    def __str__(self) -> str:
        return f"{self.face}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.face.name}, {self.suit.name})"

    @property
    def points(self) -> int:
        return self.face.points

    @property
    def is_ace(self) -> bool:
        return self.face.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10H', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        face_str, suit_str = s[:-1], s[-1]
        if face_str not in _FACE_CODES:
            raise ValueError(f"Invalid face: {face_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_FACE_CODES[face_str], _SUIT_CODES[suit_str])


def full_deck() -> list[Card]:
    """Return all 52 cards in suit-major order."""
    return [Card(face, suit) for suit in Suit for face in Face]


class Deck:
    """
    A single 52-card deck.

    The top of the deck is the end of the internal list. Only the count of
    remaining cards is exposed; the order stays private.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize and shuffle a new deck."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild all 52 cards and shuffle them."""
        self._cards = full_deck()
        self._rng.shuffle(self._cards)
        logger.debug("Deck reset and shuffled")

    def deal(self, count: int = 1) -> list[Card]:
        """
        Remove cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, in the order they came off the deck

        Raises:
            EmptyDeck: If fewer than ``count`` cards remain (nothing is dealt)
        """
        if count < 0:
            raise ValueError("Cannot deal a negative number of cards")
        if count > len(self._cards):
            raise EmptyDeck(count, len(self._cards))

        dealt = [self._cards.pop() for _ in range(count)]
        logger.debug("Dealt %s (%d remaining)", " ".join(map(str, dealt)), len(self._cards))
        return dealt

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
