"""
Hi-Lo Game

This module drives a complete Hi-Lo session over a text channel:
setup of players and range, guessing rounds with higher/lower hints,
winner announcement and the restart question.
"""

import random
import uuid
from typing import Callable, Optional, TypeVar

from .game_states import GameStateMachine, PhaseType
from .models import GameOptions, HiLoGameInfo, HiLoPlayer, MAX_PLAYER_NAME_CHARACTERS
from .validation import (
    parse_number,
    is_valid_number_of_players,
    is_valid_mystery_number_range,
    is_valid_guess,
    is_valid_player_name,
    is_valid_restart_option,
)
from ..handlers.text_channel import PromptKind, TextChannel
from ..utils.logging_config import get_logger, log_game_event, log_player_action

# Logger setup
logger = get_logger(__name__)

T = TypeVar("T")

INTRO_MESSAGE = "\nHI-LO game: you need to find the mystery number to win the game.\n"
FAREWELL_MESSAGE = "Thanks to play the game."


class HiLoGame:
    """
    Game-flow driver for Hi-Lo.

    One instance owns the session state and mutates it in place. Every
    play-through (including a restart) gets a brand-new HiLoGameInfo.

    Invalid answers are re-prompted. With finish_game_with_invalid_input
    set, the first invalid answer aborts the game instead: the roster is
    cleared when it happens during setup, only the current player's guesses
    when it happens during a round, and no restart question is asked.
    """

    def __init__(
        self,
        game_options: GameOptions,
        message: TextChannel,
        game_info: Optional[HiLoGameInfo] = None,
        rng: Optional[random.Random] = None,
        finish_game_with_invalid_input: bool = False,
    ):
        """
        Initialize the game.

        Args:
            game_options: Player and range limits
            message: Channel used for every prompt and announcement
            game_info: Initial game info, replaced on every play-through
            rng: Source for mystery numbers, anything with randint()
            finish_game_with_invalid_input: Abort on the first invalid answer

        Raises:
            ValueError: If the options or the channel are missing
        """
        if message is None:
            raise ValueError("message channel is required")
        if game_options is None:
            raise ValueError("game options are required")

        self.game_options = game_options
        self.message = message
        self.game_info = game_info if game_info is not None else HiLoGameInfo()
        self.random = rng if rng is not None else random.Random()
        self.finish_game_with_invalid_input = finish_game_with_invalid_input

        self.round = 0
        self.winner: Optional[HiLoPlayer] = None
        self.game_id = uuid.uuid4().hex
        self.state_machine = GameStateMachine()
        self._quit_game = False

    @property
    def max_number_of_players(self) -> int:
        return self.game_options.max_number_of_players

    @property
    def max_number_of_range(self) -> int:
        return self.game_options.max_number_of_range

    @property
    def current_phase(self) -> PhaseType:
        return self.state_machine.current_phase

    @property
    def is_aborted(self) -> bool:
        return self._quit_game

    def start(self) -> None:
        """Run play-throughs until a player declines to restart or the game aborts."""
        self.state_machine = GameStateMachine()
        self._quit_game = False

        start_the_game = True
        while start_the_game and not self._quit_game:
            self._reset_play_through()

            self.message.write(INTRO_MESSAGE)
            log_game_event(self.game_id, "game_started")

            number_of_players = self.setup_number_of_players()
            max_number_to_guess = self.setup_mystery_number_range()
            self.game_info = HiLoGameInfo(number_of_players, max_number_to_guess)

            self.setup_players(self.game_info)

            self.play_rounds()

            start_the_game = self.restart()

    def setup_number_of_players(self) -> int:
        """
        Ask how many players take part.

        Returns:
            int: Number of players, 0 if the game was aborted
        """
        if self._quit_game:
            return 0

        self._enter(PhaseType.SETUP_PLAYERS)
        number_of_players = self._ask(
            f"Choose the number of players between 1 and {self.max_number_of_players}",
            PromptKind.NUMBER_OF_PLAYERS,
            self._accept_number_of_players,
            f"Invalid input: number of players must be between 1 and {self.max_number_of_players}\n",
        )
        return number_of_players or 0

    def setup_mystery_number_range(self) -> int:
        """
        Ask for the upper bound of the mystery numbers.

        Returns:
            int: The range, 0 if the game was aborted
        """
        if self._quit_game:
            return 0

        self._enter(PhaseType.SETUP_RANGE)
        number_of_range = self._ask(
            f"Choose the max range for the mystery number until {self.max_number_of_range}",
            PromptKind.MYSTERY_NUMBER_RANGE,
            self._accept_mystery_number_range,
            f"Invalid input: mystery number range must be between 1 and {self.max_number_of_range}\n",
        )
        return number_of_range or 0

    def setup_players(self, game_info: HiLoGameInfo) -> None:
        """
        Ask each player for a name and draw their mystery number.

        An abort clears every player added so far.
        """
        if self._quit_game:
            return

        self._enter(PhaseType.SETUP_NAMES)
        for i in range(1, game_info.number_of_players + 1):
            player_name = self._ask(
                f"\nType the name of Player {i}",
                PromptKind.PLAYER_NAME,
                self._accept_player_name,
                f"Invalid name: player name characters must be between 1 and {MAX_PLAYER_NAME_CHARACTERS}",
            )
            if player_name is None:
                game_info.players.clear()
                return

            player = HiLoPlayer(
                name=player_name,
                mystery_number=self.random.randint(1, game_info.max_number_to_guess),
            )
            game_info.players.append(player)
            log_game_event(self.game_id, "player_created", player=player.name, slot=i)

    def play_rounds(self) -> None:
        """Play rounds until somebody finds their mystery number or the game aborts."""
        if self._quit_game:
            return

        self._enter(PhaseType.GUESSING)
        if not self.game_info.players:
            logger.warning(f"Game {self.game_id} has no players, skipping rounds")
            return

        self.message.write(
            f"\nRandom mystery numbers generated for each player between 1 and {self.game_info.max_number_to_guess}"
        )

        self.round = 1
        game_finished = False
        while not game_finished and not self._quit_game:
            game_finished = self.play_round(self.round)
            if not game_finished and not self._quit_game:
                self.round += 1

    def play_round(self, round_number: int) -> bool:
        """
        Give every player one guess, in order.

        Args:
            round_number: Round being played, used in the announcements

        Returns:
            bool: True if a player won during this round
        """
        self.message.write(f"\n### Round {round_number} starting now ###")
        for player in self.game_info.players:
            guess = self.guess(player)

            if guess is None:
                return False

            if guess == player.mystery_number:
                self.winner = player
                guesses = ",".join(str(number) for number in player.guess_numbers)
                self.message.won_game(
                    f"{player.name}: you won the game after {round_number} rounds\n"
                    f"Check the guess numbers for each round: {guesses}"
                )
                log_game_event(self.game_id, "game_won", player=player.name, round=round_number)
                return True

            hint = player.hint_for(guess)
            self.message.write(f"{player.name}: you need to guess {hint.name} than {guess}")

        return False

    def guess(self, player: HiLoPlayer) -> Optional[int]:
        """
        Ask a player for one guess and record it.

        An abort clears this player's guess history only.

        Returns:
            Optional[int]: The guess, None if the game was aborted
        """
        if self._quit_game:
            return None

        guess = self._ask(
            f"\nNow it's your turn {player.name} to guess the mystery number",
            PromptKind.GUESS,
            self._accept_guess,
            f"Invalid input: guess must be number between 1 and {self.game_info.max_number_to_guess}\n",
        )
        if guess is None:
            player.guess_numbers.clear()
            return None

        player.guess_numbers.append(guess)
        log_player_action(player.name, "guess", round=self.round, turn=player.turns_taken)
        return guess

    def restart(self) -> bool:
        """
        Ask whether to play again.

        Returns:
            bool: True to start a new play-through
        """
        if self._quit_game:
            return False

        self._enter(PhaseType.RESTART)
        option = self._ask(
            "\nRestart the game (y/n): ",
            PromptKind.RESTART,
            self._accept_restart_option,
            "Invalid option: should choose y or n",
        )
        if option is None:
            return False

        if option == "n":
            self.message.write(FAREWELL_MESSAGE)
            self._enter(PhaseType.FINISHED)
            log_game_event(self.game_id, "game_finished")
            return False

        log_game_event(self.game_id, "game_restarted")
        return True

    def _ask(
        self,
        prompt: str,
        kind: PromptKind,
        accept: Callable[[Optional[str]], Optional[T]],
        invalid_message: str,
    ) -> Optional[T]:
        """
        Prompt until accept() returns a value.

        Returns None when the game aborts, either because it already was
        or because strict mode rejected this answer.
        """
        while not self._quit_game:
            self.message.write(prompt)
            value = accept(self.message.read(kind))
            if value is not None:
                return value

            self.message.write(invalid_message)
            logger.debug(f"Invalid {kind.value} input in game {self.game_id}")
            if self.finish_game_with_invalid_input:
                self._abort(kind)
        return None

    def _accept_number_of_players(self, raw: Optional[str]) -> Optional[int]:
        number_of_players = parse_number(raw)
        if is_valid_number_of_players(number_of_players, self.max_number_of_players):
            return number_of_players
        return None

    def _accept_mystery_number_range(self, raw: Optional[str]) -> Optional[int]:
        number_of_range = parse_number(raw)
        if is_valid_mystery_number_range(number_of_range, self.max_number_of_range):
            return number_of_range
        return None

    def _accept_guess(self, raw: Optional[str]) -> Optional[int]:
        guess = parse_number(raw)
        if is_valid_guess(guess, self.game_info.max_number_to_guess):
            return guess
        return None

    @staticmethod
    def _accept_player_name(raw: Optional[str]) -> Optional[str]:
        if is_valid_player_name(raw):
            return raw.strip()
        return None

    @staticmethod
    def _accept_restart_option(raw: Optional[str]) -> Optional[str]:
        if is_valid_restart_option(raw):
            return raw.lower()
        return None

    def _reset_play_through(self) -> None:
        self.game_id = uuid.uuid4().hex
        self.round = 0
        self.winner = None

    def _enter(self, phase: PhaseType) -> None:
        self.state_machine.advance_to(phase)

    def _abort(self, kind: PromptKind) -> None:
        self._quit_game = True
        self._enter(PhaseType.ABORTED)
        logger.info(f"Game {self.game_id} aborted after invalid {kind.value} input")
        log_game_event(self.game_id, "game_aborted", prompt=kind.value)
