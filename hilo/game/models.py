"""
Hi-Lo Game Models

This module defines the data held by a Hi-Lo session: the configured
limits, the per play-through game info and the players with their
hidden mystery numbers and guess history.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


MAX_PLAYER_NAME_CHARACTERS = 20


class GuessHint(Enum):
    """Direction a player should move their next guess."""
    HI = "higher"
    LO = "lower"


@dataclass(frozen=True)
class GameOptions:
    """
    Limits for the whole process lifetime.

    Attributes:
        max_number_of_players: Upper bound for the number of players
        max_number_of_range: Upper bound for the mystery number range
    """
    max_number_of_players: int
    max_number_of_range: int

    def __post_init__(self):
        if self.max_number_of_players < 1:
            raise ValueError(f"max_number_of_players must be at least 1, got {self.max_number_of_players}")
        if self.max_number_of_range < 1:
            raise ValueError(f"max_number_of_range must be at least 1, got {self.max_number_of_range}")


@dataclass
class HiLoPlayer:
    """A player, their hidden mystery number and every guess taken so far."""
    name: str
    mystery_number: int
    guess_numbers: List[int] = field(default_factory=list)

    @property
    def turns_taken(self) -> int:
        return len(self.guess_numbers)

    def hint_for(self, guess: int) -> GuessHint:
        """Return which way the player should go after a wrong guess."""
        return GuessHint.LO if guess > self.mystery_number else GuessHint.HI


@dataclass
class HiLoGameInfo:
    """
    State of a single play-through.

    A new instance is created on every (re)start; nothing is carried over.
    A value of 0 for either setup field means setup was aborted.
    """
    number_of_players: int = 0
    max_number_to_guess: int = 0
    players: List[HiLoPlayer] = field(default_factory=list)
