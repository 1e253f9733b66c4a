"""
Pytest fixtures for the Hi-Lo tests.
"""

from collections import deque
from typing import Dict, List, Optional, Union

import pytest

from hilo.game.hilo_game import HiLoGame
from hilo.game.models import GameOptions
from hilo.handlers.text_channel import PromptKind, TextChannel


class ScriptedChannel(TextChannel):
    """
    Text channel double that answers from a script instead of a terminal.

    Each prompt kind is answered either with a fixed string (repeated
    forever) or a list consumed in order. Every write is recorded.
    """

    def __init__(self, **answers: Union[Optional[str], List[Optional[str]]]):
        self._fixed: Dict[PromptKind, Optional[str]] = {}
        self._queues: Dict[PromptKind, deque] = {}
        for key, value in answers.items():
            kind = PromptKind(key)
            if isinstance(value, list):
                self._queues[kind] = deque(value)
            else:
                self._fixed[kind] = value

        self.writes: List[str] = []
        self.won_game_message: Optional[str] = None
        self.reads: List[PromptKind] = []

    @property
    def write_message(self) -> Optional[str]:
        """Last message written, like the last line on screen."""
        return self.writes[-1] if self.writes else None

    def write(self, message: str) -> None:
        self.writes.append(message)

    def won_game(self, message: str) -> None:
        self.won_game_message = message

    def read(self, kind: PromptKind) -> Optional[str]:
        self.reads.append(kind)
        if kind in self._queues:
            if not self._queues[kind]:
                raise AssertionError(f"Script ran out of answers for {kind.value}")
            return self._queues[kind].popleft()
        if kind in self._fixed:
            return self._fixed[kind]
        raise AssertionError(f"No scripted answer for {kind.value}")


class FixedRandom:
    """Random source that always draws the same mystery number."""

    def __init__(self, number: int):
        self.number = number
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return max(a, min(self.number, b))


@pytest.fixture
def game_options() -> GameOptions:
    return GameOptions(max_number_of_players=4, max_number_of_range=1000)


@pytest.fixture
def make_game(game_options):
    """Build a game around a scripted channel."""

    def _make(channel: ScriptedChannel, mystery_number: int = 7, strict: bool = False) -> HiLoGame:
        return HiLoGame(
            game_options,
            channel,
            rng=FixedRandom(mystery_number),
            finish_game_with_invalid_input=strict,
        )

    return _make
