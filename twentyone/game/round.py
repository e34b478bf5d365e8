"""Single-round engine with state machine."""

import logging

from transitions import Machine

from twentyone.cards import Card, Deck
from twentyone.config import GameConfig, config
from twentyone.errors import InvalidDecision
from twentyone.game.events import EventEmitter, EventType
from twentyone.game.state import RoundState
from twentyone.hand import RoundOutcome, determine_outcome
from twentyone.participants import Dealer, Decision, Participant, Player
from twentyone.schemas import RoundView, participant_view

logger = logging.getLogger(__name__)


class RoundEngine:
    """
    Plays one round of Twenty-One: deal, player turn, dealer turn, resolution.

    The engine never reads input itself. Each player decision is submitted
    with a single call, and every result comes back as a return value or an
    event.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_dealt", "source": "dealing_initial", "dest": "player_turn"},
        {"trigger": "player_hits", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_stays", "source": "player_turn", "dest": "dealer_turn"},
        # Dealer turn is skipped against a busted player
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolving"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "round_resolved", "source": "resolving", "dest": "round_complete"},
        {
            "trigger": "next_round",
            "source": ["dealing_initial", "round_complete"],
            "dest": "dealing_initial",
        },
    ]

    def __init__(
        self,
        player: Player,
        dealer: Dealer,
        deck: Deck,
        rules: GameConfig | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a round engine over existing participants and deck.

        Args:
            player: The human-controlled participant
            dealer: The policy-driven participant
            deck: Deck the round deals from
            rules: Table rules (uses global config if not provided)
            events: Emitter to publish on (a private one if not provided)
        """
        self.rules = rules or config.game
        self.player = player
        self.dealer = dealer
        self.deck = deck
        self.events = events or EventEmitter()
        self.outcome: RoundOutcome | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing_initial",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def is_complete(self) -> bool:
        return self.state == RoundState.ROUND_COMPLETE

    @property
    def dealer_revealed(self) -> bool:
        """The dealer's hidden cards are shown once the player's turn is over."""
        return self.state not in (RoundState.DEALING_INITIAL, RoundState.PLAYER_TURN)

    def deal(self) -> bool:
        """
        Deal the opening cards: two to the player, then two to the dealer.

        Returns:
            True if the cards were dealt
        """
        if self.state != RoundState.DEALING_INITIAL:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot deal in current state",
                state=self.state.name,
            )
            return False

        count = self.rules.initial_cards
        self._deal_to(self.player, count)
        # Dealer shows the first card only
        self._deal_to(self.dealer, 1)
        self._deal_to(self.dealer, count - 1, face_up=False)

        self.cards_dealt()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_total=self.player.hand.total,
            cards_remaining=self.deck.cards_remaining,
        )
        logger.debug("Opening hands: player %s, dealer %s", self.player.hand, self.dealer.hand)
        return True

    def _deal_to(self, participant: Participant, count: int, face_up: bool = True) -> list[Card]:
        """Deal cards to a participant."""
        cards = self.deck.deal(count)
        participant.take(cards)
        for card in cards:
            self._announce_card(participant, card, face_up)
        return cards

    def _announce_card(self, participant: Participant, card: Card, face_up: bool = True) -> None:
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=participant.role.value,
            hand_total=participant.hand.total if face_up else None,
        )

    def submit_player_decision(self, raw: str) -> Decision | InvalidDecision:
        """
        Apply one player decision.

        Args:
            raw: Raw player input ('h' to hit, 's' to stay, any case)

        Returns:
            The applied Decision, or an InvalidDecision describing why the
            input was rejected (round state is unchanged in that case)
        """
        if self.state != RoundState.PLAYER_TURN:
            error = InvalidDecision(raw, f"no decision expected during {self.state}")
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=str(error),
                state=self.state.name,
            )
            return error

        try:
            decision = self.player.choose(raw)
        except InvalidDecision as error:
            logger.info("Rejected player input %r", raw)
            self.events.emit_new(EventType.INVALID_ACTION, message=str(error), raw=raw)
            return error

        if decision is Decision.HIT:
            self._hit()
        else:
            self._stay()
        return decision

    def _hit(self) -> None:
        """Player takes one more card."""
        hand = self.player.hand
        self._deal_to(self.player, 1)
        self.events.emit_new(EventType.PLAYER_HIT, hand_total=hand.total)

        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_total=hand.total)
            self.player_busts()
            self._resolve()
            return

        self.player_hits()  # Stay in player turn

    def _stay(self) -> None:
        """Player stands on the current hand."""
        self.events.emit_new(EventType.PLAYER_STAYS, hand_total=self.player.hand.total)
        self.player_stays()
        self._play_dealer()

    def _play_dealer(self) -> None:
        """Dealer draws by policy, then the round resolves."""
        hand = self.dealer.hand
        self.dealer.play(self.deck, on_draw=self._dealer_drew)

        if hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_total=hand.total)
        else:
            self.events.emit_new(EventType.DEALER_STAYS, hand_total=hand.total)

        self.dealer_done()
        self._resolve()

    def _dealer_drew(self, card: Card) -> None:
        """Announce a dealer card with the running total."""
        self._announce_card(self.dealer, card)
        self.events.emit_new(EventType.DEALER_HITS, hand_total=self.dealer.hand.total)

    def _resolve(self) -> None:
        """Determine the outcome and credit the round winner."""
        outcome = determine_outcome(self.player.hand, self.dealer.hand)
        self.outcome = outcome

        if outcome.player_scores:
            self.player.increment_score()
            self.events.emit_new(EventType.PLAYER_WINS, outcome=outcome.value)
        elif outcome.dealer_scores:
            self.dealer.increment_score()
            self.events.emit_new(EventType.DEALER_WINS, outcome=outcome.value)
        else:
            self.events.emit_new(EventType.TIE, total=self.player.hand.total)

        self.events.emit_new(
            EventType.SCORE_UPDATED,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
        )

        self.round_resolved()
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.value,
            player_total=self.player.hand.total,
            dealer_total=self.dealer.hand.total,
        )
        logger.info(
            "Round resolved: %s (%s %d, %s %d)",
            outcome,
            self.player,
            self.player.score,
            self.dealer,
            self.dealer.score,
        )

    def reset(self) -> bool:
        """
        Reset the deck and both hands for the next round; scores are kept.

        Returns:
            True if the round was reset
        """
        if self.state not in (RoundState.DEALING_INITIAL, RoundState.ROUND_COMPLETE):
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot reset a round in play",
                state=self.state.name,
            )
            return False

        self.deck.reset()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=self.deck.cards_remaining)
        self.player.reset_hand()
        self.dealer.reset_hand()
        self.outcome = None

        self.next_round()
        return True

    def snapshot(self, reveal_dealer: bool | None = None) -> RoundView:
        """
        Build a plain-data view of the table.

        Args:
            reveal_dealer: Force the dealer's hand open or closed; by default
                it is hidden until the player's turn is over
        """
        if reveal_dealer is None:
            reveal_dealer = self.dealer_revealed

        return RoundView(
            state=self.state.name.lower(),
            player=participant_view(self.player),
            dealer=participant_view(self.dealer, reveal=reveal_dealer),
            outcome=self.outcome.value if self.outcome else None,
        )
