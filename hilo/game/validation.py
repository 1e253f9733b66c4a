"""
Input Validation

Pure predicates used by the game to decide whether a raw answer can be
accepted. None of them touch game state.
"""

import re
from typing import Optional

from .models import MAX_PLAYER_NAME_CHARACTERS

# Answers must fit a signed 32-bit integer, anything larger counts as malformed
MAX_NUMBER_INPUT = 2**31 - 1
MIN_NUMBER_INPUT = -(2**31)

# Optional sign followed by ASCII digits; no underscores, no other scripts' digits
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_number(raw: Optional[str]) -> Optional[int]:
    """
    Parse a raw answer into an integer.

    Args:
        raw: Text read from the channel, None at end of input

    Returns:
        Optional[int]: The number, or None when the text is not a number
    """
    if raw is None:
        return None
    text = raw.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    number = int(text)
    if number < MIN_NUMBER_INPUT or number > MAX_NUMBER_INPUT:
        return None
    return number


def is_valid_number_of_players(number_of_players: Optional[int], max_number_of_players: int) -> bool:
    return number_of_players is not None and 1 <= number_of_players <= max_number_of_players


def is_valid_mystery_number_range(number_of_range: Optional[int], max_number_of_range: int) -> bool:
    return number_of_range is not None and 1 <= number_of_range <= max_number_of_range


def is_valid_guess(guess: Optional[int], max_number_to_guess: int) -> bool:
    return guess is not None and 1 <= guess <= max_number_to_guess


def is_valid_player_name(player_name: Optional[str]) -> bool:
    """Names are trimmed first and must keep between 1 and 20 characters."""
    if player_name is None:
        return False
    trimmed = player_name.strip()
    return 0 < len(trimmed) <= MAX_PLAYER_NAME_CHARACTERS


def is_valid_restart_option(option: Optional[str]) -> bool:
    return option is not None and option.lower() in ("y", "n")
