"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from twentyone.errors import InvalidConfig

# Highest total a hand can hold without busting
BUST_LIMIT = 21

# Dealer stops drawing at or above this total
DEALER_STAY_THRESHOLD = 17

INITIAL_CARDS = 2
DECK_SIZE = 52

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_seed() -> int | None:
    """Parse TWENTYONE_SEED environment variable."""
    raw = os.getenv("TWENTYONE_SEED", "").strip()
    if not raw:
        return None
    return int(raw)


def _parse_debug() -> bool:
    return os.getenv("TWENTYONE_DEBUG", "false").lower() == "true"


def _parse_log_level() -> str:
    """Parse TWENTYONE_LOG_LEVEL, falling back to DEBUG in debug mode."""
    default = "DEBUG" if _parse_debug() else "WARNING"
    return os.getenv("TWENTYONE_LOG_LEVEL", default).upper()


@dataclass(frozen=True)
class GameConfig:
    """Table rules for a match."""

    dealer_stay_threshold: int = DEALER_STAY_THRESHOLD
    initial_cards: int = INITIAL_CARDS
    dealer_names: tuple[str, ...] = ("R2D2", "Hal", "Chappie", "Sonny", "Number 5")

    def __post_init__(self) -> None:
        if self.initial_cards < 1:
            raise InvalidConfig(self.initial_cards, "initial_cards must be at least 1")
        if self.dealer_stay_threshold <= 0:
            raise InvalidConfig(self.dealer_stay_threshold, "dealer_stay_threshold must be positive")
        if not self.dealer_names:
            raise InvalidConfig(self.dealer_names, "dealer_names must not be empty")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=_parse_debug)
    log_level: str = field(default_factory=_parse_log_level)
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Logging level (uses the configured level if not provided)

    Returns:
        The package logger
    """
    logger = logging.getLogger("twentyone")
    logger.setLevel(level if level is not None else config.log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


# Global configuration instance
config = AppConfig()
