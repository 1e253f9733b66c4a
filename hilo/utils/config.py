"""
Configuration Management

This module handles all application configuration using environment variables.
Values can also be placed in a .env file next to the game (see env.example).
"""

import os
from functools import lru_cache
from dotenv import load_dotenv

from ..game.models import GameOptions

# Load environment variables from .env file
load_dotenv()


def _read_limit(variable: str, default: str) -> int:
    """Read a positive integer limit, ignoring trailing comments."""
    raw_value = os.getenv(variable, default)
    try:
        value = int(raw_value.split('#')[0].strip())
    except ValueError as e:
        raise ValueError(f"Invalid {variable} value: '{raw_value}'. Must be a number without comments.") from e
    if value < 1:
        raise ValueError(f"Invalid {variable} value: '{raw_value}'. Must be at least 1.")
    return value


def _read_flag(variable: str, default: str = 'false') -> bool:
    return os.getenv(variable, default).strip().lower() in ('true', '1', 'yes')


class Settings:
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local play.
    """

    def __init__(self):
        # Game limits
        self.max_number_of_players: int = _read_limit('HILO_MAX_NUMBER_OF_PLAYERS', '4')
        self.max_number_of_range: int = _read_limit('HILO_MAX_NUMBER_OF_RANGE', '1000')

        # Strict mode: first invalid answer ends the game
        self.finish_game_with_invalid_input: bool = _read_flag('HILO_FINISH_GAME_WITH_INVALID_INPUT')

        # Application Settings
        self.debug: bool = _read_flag('DEBUG')
        self.log_level: str = os.getenv('LOG_LEVEL', 'WARNING')
        self.environment: str = os.getenv('ENVIRONMENT', 'development')

    def game_options(self) -> GameOptions:
        """
        Build the game limits from these settings.

        Returns:
            GameOptions: Immutable player and range limits
        """
        return GameOptions(
            max_number_of_players=self.max_number_of_players,
            max_number_of_range=self.max_number_of_range,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings with caching.

    Uses LRU cache to avoid reloading settings on every call.
    Call get_settings.cache_clear() to pick up changed variables.

    Returns:
        Settings: Application configuration settings
    """
    return Settings()


def is_development() -> bool:
    """
    Check if running in development environment.

    Returns:
        bool: True if in development, False otherwise
    """
    settings = get_settings()
    return settings.environment.lower() in ["development", "dev", "local"]


def is_production() -> bool:
    """
    Check if running in production environment.

    Returns:
        bool: True if in production, False otherwise
    """
    settings = get_settings()
    return settings.environment.lower() in ["production", "prod"]
