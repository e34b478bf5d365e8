"""Round and match engines with state management."""

from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import MatchState, RoundState
from twentyone.game.round import RoundEngine
from twentyone.game.match import MatchController, parse_target_score

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "MatchState",
    "RoundState",
    "RoundEngine",
    "MatchController",
    "parse_target_score",
]
