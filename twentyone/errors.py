"""Engine error taxonomy."""

from typing import Any


class TwentyOneError(Exception):
    """Base class for engine errors."""


class InvalidConfig(TwentyOneError, ValueError):
    """A match setting (target score, player name, table rule) was rejected."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid configuration {value!r}: {reason}")


class InvalidDecision(TwentyOneError, ValueError):
    """Player input did not map to a decision; the caller should re-prompt."""

    def __init__(self, raw: Any, reason: str = "expected 'h' (hit) or 's' (stay)") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid decision {raw!r}: {reason}")


class EmptyDeck(TwentyOneError, IndexError):
    """
    More cards were requested than the deck holds.

    A two-participant round on a single 52-card deck can never get here,
    so this is raised rather than recovered from.
    """

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {requested} card(s) from a deck with {remaining} remaining"
        )
