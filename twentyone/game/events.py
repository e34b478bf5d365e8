"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Match flow events
    MATCH_STARTED = auto()
    MATCH_ENDED = auto()
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Card events
    CARD_DEALT = auto()
    DECK_SHUFFLED = auto()

    # Player events
    PLAYER_HIT = auto()
    PLAYER_STAYS = auto()
    PLAYER_BUSTS = auto()

    # Dealer events
    DEALER_HITS = auto()
    DEALER_STAYS = auto()
    DEALER_BUSTS = auto()

    # Outcome events
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    TIE = auto()
    SCORE_UPDATED = auto()

    # Rejected input
    INVALID_ACTION = auto()
    INVALID_CONFIG = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events let a presentation layer follow the table without polling
    the engine after every call.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """Event emitter supporting per-type and catch-all subscribers."""

    def __init__(self) -> None:
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> bool:
        """
        Unsubscribe from events.

        Returns:
            True if the handler was subscribed
        """
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: GameEvent) -> None:
        """Record an event and pass it to every matching subscriber."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Create and emit a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        self._event_history.clear()
