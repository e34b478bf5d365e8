"""Twenty-One engine - 100% UI-agnostic."""

from twentyone.cards import Card, Deck, Face, Suit
from twentyone.errors import EmptyDeck, InvalidConfig, InvalidDecision, TwentyOneError
from twentyone.hand import Hand, RoundOutcome, determine_outcome
from twentyone.participants import Dealer, Decision, Participant, Player, Role

__all__ = [
    "Card",
    "Deck",
    "Face",
    "Suit",
    "EmptyDeck",
    "InvalidConfig",
    "InvalidDecision",
    "TwentyOneError",
    "Hand",
    "RoundOutcome",
    "determine_outcome",
    "Dealer",
    "Decision",
    "Participant",
    "Player",
    "Role",
]
