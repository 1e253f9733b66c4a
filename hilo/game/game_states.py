"""
Hi-Lo Game State Machine

This module defines the phases of a Hi-Lo play-through and which
transitions between them are legal.
"""

from enum import Enum
from typing import Dict, Any, Set

from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class PhaseType(Enum):
    """Define the different phases of a Hi-Lo game."""
    SETUP_PLAYERS = "setup_players"
    SETUP_RANGE = "setup_range"
    SETUP_NAMES = "setup_names"
    GUESSING = "guessing"
    RESTART = "restart"
    FINISHED = "finished"
    ABORTED = "aborted"


# Any phase that reads input can be aborted in strict mode
ALLOWED_TRANSITIONS: Dict[PhaseType, Set[PhaseType]] = {
    PhaseType.SETUP_PLAYERS: {PhaseType.SETUP_RANGE, PhaseType.ABORTED},
    PhaseType.SETUP_RANGE: {PhaseType.SETUP_NAMES, PhaseType.ABORTED},
    PhaseType.SETUP_NAMES: {PhaseType.GUESSING, PhaseType.ABORTED},
    PhaseType.GUESSING: {PhaseType.RESTART, PhaseType.ABORTED},
    PhaseType.RESTART: {PhaseType.SETUP_PLAYERS, PhaseType.FINISHED, PhaseType.ABORTED},
    PhaseType.FINISHED: set(),
    PhaseType.ABORTED: set(),
}


# Order a play-through moves in when nothing goes wrong
FORWARD_PATH = [
    PhaseType.SETUP_PLAYERS,
    PhaseType.SETUP_RANGE,
    PhaseType.SETUP_NAMES,
    PhaseType.GUESSING,
    PhaseType.RESTART,
]


class PhaseTransitionError(RuntimeError):
    """Raised when the game asks for a phase it cannot reach."""


class GameStateMachine:
    """
    State machine for the Hi-Lo game flow.

    Setup runs players → range → names, then guessing rounds, then the
    restart question which either loops back to setup or finishes.
    FINISHED and ABORTED are terminal.
    """

    def __init__(self):
        """Initialize the state machine at the start of setup."""
        self.current_phase = PhaseType.SETUP_PLAYERS

    @property
    def is_over(self) -> bool:
        return self.current_phase in (PhaseType.FINISHED, PhaseType.ABORTED)

    def can_transition(self, next_phase: PhaseType) -> bool:
        """
        Check if the current phase may move to next_phase.

        Args:
            next_phase: Phase to move to

        Returns:
            bool: True if the transition is allowed
        """
        return next_phase in ALLOWED_TRANSITIONS[self.current_phase]

    def transition(self, next_phase: PhaseType) -> Dict[str, Any]:
        """
        Move to the next phase.

        Args:
            next_phase: Phase to move to

        Returns:
            Dict: Transition result
        """
        if not self.can_transition(next_phase):
            logger.warning(
                f"Rejected phase transition {self.current_phase.value} -> {next_phase.value}"
            )
            return {
                "success": False,
                "phase": self.current_phase.value,
                "message": f"Cannot move from {self.current_phase.value} to {next_phase.value}",
            }

        previous_phase = self.current_phase
        self.current_phase = next_phase
        logger.debug(f"Phase transition: {previous_phase.value} -> {next_phase.value}")

        return {
            "success": True,
            "phase": self.current_phase.value,
            "message": f"Moved from {previous_phase.value} to {next_phase.value}",
        }

    def advance_to(self, target_phase: PhaseType) -> Dict[str, Any]:
        """
        Move to target_phase, passing through the setup phases in between.

        Used when a step of the game runs on its own, e.g. players set up
        directly without asking for the count and range first.

        Args:
            target_phase: Phase to end in

        Returns:
            Dict: Result of the last transition

        Raises:
            PhaseTransitionError: If target_phase cannot be reached
        """
        if target_phase == self.current_phase:
            return {"success": True, "phase": self.current_phase.value, "message": "Already there"}

        if (
            not self.can_transition(target_phase)
            and self.current_phase in FORWARD_PATH
            and target_phase in FORWARD_PATH
            and FORWARD_PATH.index(target_phase) > FORWARD_PATH.index(self.current_phase)
        ):
            start = FORWARD_PATH.index(self.current_phase) + 1
            for phase in FORWARD_PATH[start:FORWARD_PATH.index(target_phase)]:
                self.transition(phase)

        result = self.transition(target_phase)
        if not result["success"]:
            raise PhaseTransitionError(result["message"])
        return result
