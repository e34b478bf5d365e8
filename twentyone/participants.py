"""Table participants: the human-driven Player and the policy-driven Dealer."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable

from twentyone.cards import Card, Deck
from twentyone.config import DEALER_STAY_THRESHOLD
from twentyone.errors import InvalidConfig, InvalidDecision
from twentyone.hand import Hand


class Role(Enum):
    """Seat at the table."""

    PLAYER = "player"
    DEALER = "dealer"

    def __str__(self) -> str:
        return self.value.title()


class Decision(Enum):
    """A player's choice on their turn."""

    HIT = "h"
    STAY = "s"
    UNDECIDED = "?"


_DECISION_CODES = {Decision.HIT.value: Decision.HIT, Decision.STAY.value: Decision.STAY}


class Participant(ABC):
    """Common state for anyone holding a hand and a score."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.hand = Hand()
        self.score = 0

    @property
    @abstractmethod
    def role(self) -> Role:
        """Return the seat this participant occupies."""
        ...

    def take(self, cards: list[Card]) -> None:
        """Add dealt cards to the hand."""
        for card in cards:
            self.hand.add(card)

    def increment_score(self) -> None:
        self.score += 1

    def reset_score(self) -> None:
        self.score = 0

    def reset_hand(self) -> None:
        """Clear the hand between rounds."""
        self.hand.reset()

    def reset(self) -> None:
        """Clear hand and score for a new match."""
        self.reset_hand()
        self.reset_score()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, score={self.score}, hand={self.hand!r})"


class Player(Participant):
    """The human-controlled participant; decisions arrive from outside."""

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidConfig(name, "player name must not be empty")
        super().__init__(name.strip())
        self.decision = Decision.UNDECIDED

    @property
    def role(self) -> Role:
        return Role.PLAYER

    def choose(self, raw: str) -> Decision:
        """
        Validate a single raw decision and record it.

        Args:
            raw: User input; 'h' or 's' in any case, surrounding whitespace ignored

        Returns:
            The recorded decision

        Raises:
            InvalidDecision: If the input is not a hit or stay; the previous
                decision is kept
        """
        if not isinstance(raw, str):
            raise InvalidDecision(raw)

        decision = _DECISION_CODES.get(raw.strip().lower())
        if decision is None:
            raise InvalidDecision(raw)

        self.decision = decision
        return decision

    @property
    def wants_hit(self) -> bool:
        return self.decision is Decision.HIT

    @property
    def wants_stay(self) -> bool:
        return self.decision is Decision.STAY

    def reset_hand(self) -> None:
        super().reset_hand()
        self.decision = Decision.UNDECIDED


class Dealer(Participant):
    """The house; draws by a fixed policy and never takes input."""

    def __init__(self, name: str, stay_threshold: int = DEALER_STAY_THRESHOLD) -> None:
        super().__init__(name)
        self.stay_threshold = stay_threshold

    @property
    def role(self) -> Role:
        return Role.DEALER

    def should_hit(self) -> bool:
        """Dealer draws below the stay threshold and never past a bust."""
        return not self.hand.is_busted and self.hand.total < self.stay_threshold

    def play(self, deck: Deck, on_draw: Callable[[Card], None] | None = None) -> list[Card]:
        """
        Draw until the stay threshold is reached or the hand busts.

        Args:
            deck: Deck to draw from
            on_draw: Called after each card lands in the hand

        Returns:
            The cards drawn this turn
        """
        drawn: list[Card] = []
        while self.should_hit():
            cards = deck.deal(1)
            self.take(cards)
            drawn.extend(cards)
            if on_draw is not None:
                on_draw(cards[0])
        return drawn
