import pytest

from hilo.game.game_states import GameStateMachine, PhaseTransitionError, PhaseType


def _advance(sm, *phases):
    for phase in phases:
        result = sm.transition(phase)
        assert result["success"] is True, result["message"]
    return sm


def test_full_flow_until_finished():
    """Drive the state machine through setup, one restart and the final answer."""
    sm = GameStateMachine()
    assert sm.current_phase == PhaseType.SETUP_PLAYERS

    _advance(sm, PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES, PhaseType.GUESSING, PhaseType.RESTART)
    _advance(sm, PhaseType.SETUP_PLAYERS, PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES,
             PhaseType.GUESSING, PhaseType.RESTART, PhaseType.FINISHED)

    assert sm.is_over


@pytest.mark.parametrize("path", [
    [],
    [PhaseType.SETUP_RANGE],
    [PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES],
    [PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES, PhaseType.GUESSING],
    [PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES, PhaseType.GUESSING, PhaseType.RESTART],
])
def test_every_input_phase_can_abort(path):
    sm = _advance(GameStateMachine(), *path)

    result = sm.transition(PhaseType.ABORTED)

    assert result["success"] is True
    assert sm.is_over


def test_illegal_transition_is_rejected():
    sm = GameStateMachine()

    result = sm.transition(PhaseType.GUESSING)

    assert result["success"] is False
    assert result["phase"] == "setup_players"
    assert sm.current_phase == PhaseType.SETUP_PLAYERS


def test_terminal_phases_accept_nothing():
    sm = _advance(GameStateMachine(), PhaseType.ABORTED)

    for phase in PhaseType:
        assert sm.can_transition(phase) is False


def test_advance_to_passes_through_setup_phases():
    sm = GameStateMachine()

    result = sm.advance_to(PhaseType.GUESSING)

    assert result["success"] is True
    assert sm.current_phase == PhaseType.GUESSING


def test_advance_to_current_phase_is_a_no_op():
    sm = GameStateMachine()

    assert sm.advance_to(PhaseType.SETUP_PLAYERS)["success"] is True
    assert sm.current_phase == PhaseType.SETUP_PLAYERS


def test_advance_to_never_moves_backwards():
    sm = _advance(GameStateMachine(), PhaseType.SETUP_RANGE, PhaseType.SETUP_NAMES)

    with pytest.raises(PhaseTransitionError):
        sm.advance_to(PhaseType.SETUP_RANGE)

    assert sm.current_phase == PhaseType.SETUP_NAMES


def test_advance_to_out_of_terminal_phase_raises():
    sm = _advance(GameStateMachine(), PhaseType.ABORTED)

    with pytest.raises(PhaseTransitionError):
        sm.advance_to(PhaseType.GUESSING)
