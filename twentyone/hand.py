"""Hand evaluation for Twenty-One."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from twentyone.cards import Card
from twentyone.config import BUST_LIMIT

# Difference between an ace counted high (11) and low (1)
ACE_SOFTENING = 10


class RoundOutcome(Enum):
    """Result of a single round, from the table's point of view."""

    PLAYER_BUSTED = "player_busted"
    DEALER_BUSTED = "dealer_busted"
    PLAYER_WON = "player_won"
    DEALER_WON = "dealer_won"
    TIE = "tie"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def player_scores(self) -> bool:
        """Check if this outcome earns the player a point."""
        return self in (RoundOutcome.DEALER_BUSTED, RoundOutcome.PLAYER_WON)

    @property
    def dealer_scores(self) -> bool:
        """Check if this outcome earns the dealer a point."""
        return self in (RoundOutcome.PLAYER_BUSTED, RoundOutcome.DEALER_WON)


@dataclass
class Hand:
    """A Twenty-One hand with total calculation."""

    cards: list[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def reset(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def total(self) -> int:
        """
        Calculate the hand total.

        Aces count 11 and are softened to 1, one at a time, while the
        total is over the bust limit.
        """
        total = 0
        aces = 0

        for card in self.cards:
            total += card.points
            if card.is_ace:
                aces += 1

        while total > BUST_LIMIT and aces > 0:
            total -= ACE_SOFTENING
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """Check if an ace is still being counted as 11."""
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.points for card in self.cards)
        return total_hard + ACE_SOFTENING <= BUST_LIMIT

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted."""
        return self.total > BUST_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        return f"{cards_str} ({self.total})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"


def determine_outcome(player_hand: Hand, dealer_hand: Hand) -> RoundOutcome:
    """
    Compare the player's and dealer's final hands.

    The checks run in a fixed order: a busted player loses before the
    dealer's hand is looked at, then a busted dealer loses, then totals
    are compared.
    """
    if player_hand.is_busted:
        return RoundOutcome.PLAYER_BUSTED

    if dealer_hand.is_busted:
        return RoundOutcome.DEALER_BUSTED

    if player_hand.total > dealer_hand.total:
        return RoundOutcome.PLAYER_WON
    if dealer_hand.total > player_hand.total:
        return RoundOutcome.DEALER_WON
    return RoundOutcome.TIE
