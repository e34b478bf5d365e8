"""Match controller: repeats rounds until a participant reaches the target score."""

import logging
from random import Random
from typing import Any, Callable

from transitions import Machine

from twentyone.cards import Deck
from twentyone.config import GameConfig, config
from twentyone.errors import InvalidConfig, InvalidDecision
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.round import RoundEngine
from twentyone.game.state import MatchState, RoundState
from twentyone.hand import RoundOutcome
from twentyone.participants import Dealer, Decision, Participant, Player
from twentyone.schemas import MatchView

logger = logging.getLogger(__name__)


def parse_target_score(value: Any) -> int:
    """
    Validate a target score.

    Args:
        value: A positive int, or a string holding one

    Returns:
        The target score

    Raises:
        InvalidConfig: If the value is not a positive whole number
    """
    if isinstance(value, bool):
        raise InvalidConfig(value, "target score must be a whole number")

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidConfig(value, "target score must be a number") from None

    if not isinstance(value, int):
        raise InvalidConfig(value, "target score must be a whole number")
    if value <= 0:
        raise InvalidConfig(value, "target score must be positive")
    return value


class MatchController:
    """
    Runs a match of Twenty-One between one player and the dealer.

    Scores carry across rounds; the first participant to reach the target
    score wins the match.
    """

    STATES = [s.name.lower() for s in MatchState]

    TRANSITIONS = [
        {"trigger": "match_configured", "source": "awaiting_config", "dest": "in_progress"},
        {"trigger": "round_played", "source": "in_progress", "dest": "in_progress"},
        {"trigger": "target_reached", "source": "in_progress", "dest": "match_complete"},
        {
            "trigger": "rematch",
            "source": ["in_progress", "match_complete"],
            "dest": "in_progress",
        },
    ]

    def __init__(
        self,
        player_name: str = "Player",
        dealer_name: str | None = None,
        rules: GameConfig | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a match awaiting its target score.

        Args:
            player_name: Name of the human player (must not be blank)
            dealer_name: Dealer name (picked from the configured names if not provided)
            rules: Table rules (uses global config if not provided)
            rng: Random number generator for reproducible matches
            events: Emitter to publish on (a private one if not provided)

        Raises:
            InvalidConfig: If the player name is blank
        """
        self.rules = rules or config.game
        self.rng = rng or Random(config.seed)
        self.events = events or EventEmitter()

        self.deck = Deck(rng=self.rng)
        self.player = Player(player_name)
        self.dealer = Dealer(
            dealer_name or self.rng.choice(self.rules.dealer_names),
            stay_threshold=self.rules.dealer_stay_threshold,
        )
        self.round = RoundEngine(
            self.player,
            self.dealer,
            self.deck,
            rules=self.rules,
            events=self.events,
        )

        self.target_score: int | None = None
        self.round_number = 0

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_config",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> MatchState:
        """Get current match state as enum."""
        return MatchState[self._machine_state.upper()]  # type: ignore

    @property
    def current_round_outcome(self) -> RoundOutcome | None:
        return self.round.outcome

    @property
    def winner(self) -> Participant | None:
        """Return the participant holding the target score, if any."""
        if self.target_score is None:
            return None
        for participant in (self.player, self.dealer):
            if participant.score == self.target_score:
                return participant
        return None

    @property
    def is_match_over(self) -> bool:
        return self.winner is not None

    def configure(self, target_score: Any) -> int | InvalidConfig:
        """
        Set the score needed to win the match.

        Args:
            target_score: Positive whole number, or a string holding one

        Returns:
            The accepted target, or an InvalidConfig the caller should show
            before asking again
        """
        if self.state != MatchState.AWAITING_CONFIG:
            error = InvalidConfig(target_score, "target score is already set for this match")
            self.events.emit_new(EventType.INVALID_CONFIG, message=str(error))
            return error

        try:
            target = parse_target_score(target_score)
        except InvalidConfig as error:
            logger.info("Rejected target score %r: %s", target_score, error.reason)
            self.events.emit_new(EventType.INVALID_CONFIG, message=str(error))
            return error

        self.target_score = target
        self.match_configured()
        self.events.emit_new(
            EventType.MATCH_STARTED,
            player=self.player.name,
            dealer=self.dealer.name,
            target_score=target,
        )
        logger.info(
            "Match started: %s vs %s, first to %d", self.player, self.dealer, target
        )
        return target

    def start_round(self) -> bool:
        """
        Reset the deck and hands and deal the next round.

        Returns:
            True if a new round was dealt
        """
        if self.state != MatchState.IN_PROGRESS:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="No match in progress",
                state=self.state.name,
            )
            return False

        if not self.round.reset():
            return False

        self.round_number += 1
        return self.round.deal()

    def submit_player_decision(self, raw: str) -> Decision | InvalidDecision:
        """
        Pass one player decision to the current round.

        When the decision ends the round, the match checks whether the
        target score has been reached.
        """
        result = self.round.submit_player_decision(raw)
        if isinstance(result, Decision) and self.round.is_complete:
            self._finish_round()
        return result

    def _finish_round(self) -> None:
        """Advance the match after a resolved round."""
        self.round_played()

        winner = self.winner
        if winner is None:
            return

        self.target_reached()
        self.events.emit_new(
            EventType.MATCH_ENDED,
            winner=winner.name,
            role=winner.role.value,
            rounds=self.round_number,
        )
        logger.info("%s won the match after %d round(s)", winner, self.round_number)

    def play_round(self, decide: Callable[[MatchView], str]) -> RoundOutcome | None:
        """
        Play a whole round, asking ``decide`` for each player decision.

        Args:
            decide: Called with the current snapshot; returns raw player input.
                Rejected input is simply asked for again.

        Returns:
            The round outcome, or None if no round could be started
        """
        if not self.start_round():
            return None

        while self.round.state == RoundState.PLAYER_TURN:
            self.submit_player_decision(decide(self.snapshot()))

        return self.round.outcome

    def new_match(self) -> bool:
        """
        Start over with the same participants and target score.

        Returns:
            True if the match was reset
        """
        if self.state == MatchState.AWAITING_CONFIG:
            self.events.emit_new(EventType.INVALID_ACTION, message="Match is not configured")
            return False

        if not self.round.reset():
            return False

        self.player.reset()
        self.dealer.reset()
        self.round_number = 0

        self.rematch()
        self.events.emit_new(
            EventType.MATCH_STARTED,
            player=self.player.name,
            dealer=self.dealer.name,
            target_score=self.target_score,
        )
        return True

    def snapshot(self) -> MatchView:
        """Build a plain-data view of the match."""
        winner = self.winner
        return MatchView(
            state=self.state.name.lower(),
            target_score=self.target_score,
            round_number=self.round_number,
            round=self.round.snapshot(),
            is_match_over=winner is not None,
            winner=winner.name if winner else None,
        )
