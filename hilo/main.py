"""
Hi-Lo Main Application

This is the main entry point for the Hi-Lo console game.
It loads the configuration, sets up logging and runs the game
on the terminal.
"""

import random
import sys
from typing import Optional

from .game.hilo_game import HiLoGame
from .handlers.error_handlers import handle_error
from .handlers.text_channel import ConsoleChannel, TextChannel
from .utils.config import Settings, get_settings
from .utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def create_game(
    settings: Optional[Settings] = None,
    channel: Optional[TextChannel] = None,
    rng: Optional[random.Random] = None,
) -> HiLoGame:
    """
    Build a game from the configuration.

    Args:
        settings: Settings to use, the cached environment settings by default
        channel: Channel to play on, the console by default
        rng: Source for mystery numbers

    Returns:
        HiLoGame: A game ready to start()
    """
    settings = settings or get_settings()
    channel = channel or ConsoleChannel()

    game = HiLoGame(
        settings.game_options(),
        channel,
        rng=rng,
        finish_game_with_invalid_input=settings.finish_game_with_invalid_input,
    )
    logger.info(
        f"Game configured: max_players={settings.max_number_of_players} "
        f"max_range={settings.max_number_of_range} "
        f"strict={settings.finish_game_with_invalid_input}"
    )
    return game


def main() -> None:
    """
    Main entry point for the Hi-Lo game.

    Runs the game until the players stop it and handles any
    unexpected error on the way out.
    """
    channel = ConsoleChannel()

    try:
        setup_logging()
        game = create_game(channel=channel)
        game.start()
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
        channel.write("\nGame stopped. Bye!")
    except Exception as e:
        handle_error(e, channel)
        sys.exit(1)


if __name__ == "__main__":
    main()
