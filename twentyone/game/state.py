"""Round and match state enumerations."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING_INITIAL → PLAYER_TURN → DEALER_TURN → RESOLVING → ROUND_COMPLETE

    DEALER_TURN is skipped when the player busts.
    """

    # Fresh deck and empty hands, waiting for the deal
    DEALING_INITIAL = auto()

    # Player hits or stays
    PLAYER_TURN = auto()

    # Dealer draws by policy
    DEALER_TURN = auto()

    # Determining the outcome
    RESOLVING = auto()

    # Outcome known, hands still on the table
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class MatchState(Enum):
    """
    Match state machine states.

    Flow: AWAITING_CONFIG → IN_PROGRESS → MATCH_COMPLETE
    """

    AWAITING_CONFIG = auto()
    IN_PROGRESS = auto()
    MATCH_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
