"""
Text Channel

This module defines the line-based channel the game talks through and
the console implementation used when the game is run from a terminal.
"""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TextIO

from ..utils.logging_config import get_logger

# Logger setup
logger = get_logger(__name__)


class PromptKind(Enum):
    """What the game is waiting for when it reads a line."""
    NUMBER_OF_PLAYERS = "number_of_players"
    MYSTERY_NUMBER_RANGE = "mystery_number_range"
    PLAYER_NAME = "player_name"
    GUESS = "guess"
    RESTART = "restart"


class TextChannel(ABC):
    """
    Abstract channel shared by all players.

    The game writes the prompt text with write() and then calls read()
    with the kind of answer it expects.
    """

    @abstractmethod
    def write(self, message: str) -> None:
        """Show a line of narration, a prompt or a validation message."""
        pass

    @abstractmethod
    def won_game(self, message: str) -> None:
        """Announce the winner."""
        pass

    @abstractmethod
    def read(self, kind: PromptKind) -> Optional[str]:
        """
        Read one line of input.

        Args:
            kind: The kind of answer the game expects

        Returns:
            Optional[str]: The line without its newline, None at end of input
        """
        pass


class ConsoleChannel(TextChannel):
    """Channel backed by stdin/stdout."""

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    def write(self, message: str) -> None:
        print(message, file=self.output_stream, flush=True)

    def won_game(self, message: str) -> None:
        print(message, file=self.output_stream, flush=True)

    def read(self, kind: PromptKind) -> Optional[str]:
        line = self.input_stream.readline()
        if line == "":
            logger.debug(f"End of input while reading {kind.value}")
            return None
        return line.rstrip("\r\n")
