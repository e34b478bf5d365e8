"""Pydantic snapshots of engine state for presentation layers."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from twentyone.cards import Card
from twentyone.hand import Hand
from twentyone.participants import Participant


class CardView(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    face: str
    suit: str
    points: int


class HandView(BaseModel):
    """
    Hand representation.

    A partially revealed hand lists only its face-up cards, counts the rest
    in ``hidden_cards`` and carries no total.
    """

    model_config = ConfigDict(frozen=True)

    cards: list[CardView]
    total: int | None
    is_busted: bool
    is_soft: bool
    hidden_cards: int = Field(default=0, ge=0)


class ParticipantView(BaseModel):
    """Participant representation."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: Literal["player", "dealer"]
    score: int = Field(..., ge=0)
    hand: HandView


class RoundView(BaseModel):
    """Current round state."""

    model_config = ConfigDict(frozen=True)

    state: str
    player: ParticipantView
    dealer: ParticipantView
    outcome: str | None = None


class MatchView(BaseModel):
    """Current match state."""

    model_config = ConfigDict(frozen=True)

    state: str
    target_score: int | None
    round_number: int
    round: RoundView
    is_match_over: bool
    winner: str | None = None


def card_view(card: Card) -> CardView:
    """Convert a Card to CardView."""
    return CardView(face=str(card.face), suit=str(card.suit), points=card.points)


def hand_view(hand: Hand, reveal: bool = True) -> HandView:
    """Convert a Hand to HandView, showing only the first card unless revealed."""
    if reveal or not hand.cards:
        return HandView(
            cards=[card_view(c) for c in hand.cards],
            total=hand.total,
            is_busted=hand.is_busted,
            is_soft=hand.is_soft,
        )

    return HandView(
        cards=[card_view(hand.cards[0])],
        total=None,
        is_busted=False,
        is_soft=False,
        hidden_cards=len(hand.cards) - 1,
    )


def participant_view(participant: Participant, reveal: bool = True) -> ParticipantView:
    """Convert a Participant to ParticipantView."""
    return ParticipantView(
        name=participant.name,
        role=participant.role.value,
        score=participant.score,
        hand=hand_view(participant.hand, reveal=reveal),
    )
