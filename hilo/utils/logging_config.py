"""
Logging Configuration

This module sets up basic logging for the game.
Log lines go to stderr so they never interleave with the game's prompts.
"""

import logging
import sys

from .config import get_settings


def setup_logging() -> None:
    """
    Set up basic logging configuration.

    This function configures standard logging for the application.
    """
    settings = get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.WARNING)

    # Configure standard logging
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    # Create application logger
    logger = logging.getLogger(__name__)
    logger.info("Logging configuration initialized")


def get_logger(name: str):
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)


def log_player_action(player_name: str, action: str, **kwargs) -> None:
    """
    Log player actions for debugging.

    Args:
        player_name: Name of the player acting
        action: Action description
        **kwargs: Additional context data
    """
    logger = get_logger("player_actions")
    extra_info = " ".join([f"{k}={v}" for k, v in kwargs.items()])
    logger.debug(f"Player action: player={player_name} action={action} {extra_info}")


def log_game_event(game_id: str, event_type: str, **kwargs) -> None:
    """
    Log game-related events for debugging.

    Args:
        game_id: Unique game identifier
        event_type: Type of game event
        **kwargs: Additional event data
    """
    logger = get_logger("game_events")
    extra_info = " ".join([f"{k}={v}" for k, v in kwargs.items()])
    logger.debug(f"Game event: game_id={game_id} event_type={event_type} {extra_info}")
