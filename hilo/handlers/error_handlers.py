"""
Error Handlers

This module handles unexpected errors raised while the game runs.
It logs them and tells the players something went wrong.
"""

import traceback
from typing import Optional

from .text_channel import TextChannel
from ..utils.logging_config import get_logger
from ..utils.config import is_development

# Logger setup
logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = (
    "Something went wrong and the game has to stop.\n"
    "Please start it again. If the problem persists, check the game configuration."
)


def format_error_message(error: BaseException) -> str:
    """
    Build the text shown to players for an unexpected error.

    In development the error itself is shown to help debugging.

    Args:
        error: The exception that stopped the game

    Returns:
        str: Message for the players
    """
    try:
        show_details = is_development()
    except ValueError:
        # Settings themselves failed to load, the error is a configuration one
        show_details = True

    if show_details:
        return f"Development error: {type(error).__name__}: {error}"
    return GENERIC_ERROR_MESSAGE


def handle_error(error: BaseException, channel: Optional[TextChannel] = None) -> None:
    """
    Handle an error that escaped the game loop.

    Args:
        error: The exception that stopped the game
        channel: Channel to notify the players on, if still usable
    """
    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    logger.error(
        f"Game error occurred - error_type={type(error).__name__}, "
        f"error_message={error}, traceback={tb}"
    )

    if channel is None:
        return

    try:
        channel.write(format_error_message(error))
    except Exception as send_error:
        # If we can't even send an error message, log it
        logger.error(
            f"Failed to send error message to players - original_error={error}, "
            f"send_error={send_error}"
        )
