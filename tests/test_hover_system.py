import pytest

from tictactoe.components.hover_state import HoverAnimationState
from tictactoe.components.interaction import Interaction, InteractionState
from tictactoe.components.tile_material import TileMaterial
from tictactoe.constants import CURSOR_DEFAULT, CURSOR_POINTER
from tictactoe.events.bus import EVENT_CURSOR_CHANGED
from tictactoe.systems.hover_system import HoverSystem, ShaderTimeSystem
from tictactoe.utils.frame_clock import ensure_frame_clock
from tests.helpers import build_board, record


def _setup():
    board = build_board()
    hover = HoverSystem(board.world, board.bus)
    shader = ShaderTimeSystem(board.world)
    clock = ensure_frame_clock(board.world)
    return board, hover, shader, clock


def _interact(board, cell, state):
    board.world.component_for_entity(board.cells[cell], Interaction).set(state)


def _material(board, cell):
    return board.world.component_for_entity(board.cells[cell], TileMaterial)


def test_hover_state_starts_inactive():
    board, hover, _, _ = _setup()
    assert hover.state == HoverAnimationState()
    states = list(board.world.get_component(HoverAnimationState))
    assert len(states) == 1


def test_hover_enter_activates_and_records_start_time():
    board, hover, _, clock = _setup()
    cursors = record(board.bus, EVENT_CURSOR_CHANGED)
    clock.advance(2.5)

    _interact(board, (1, 1), InteractionState.HOVERED)
    hover.process()

    assert hover.state.active is True
    assert hover.state.target == board.cells[(1, 1)]
    assert hover.state.time_started == pytest.approx(2.5)
    assert cursors == [{"icon": CURSOR_POINTER}]


def test_hover_exit_resets_material_and_deactivates():
    board, hover, shader, clock = _setup()
    cursors = record(board.bus, EVENT_CURSOR_CHANGED)
    _interact(board, (0, 0), InteractionState.HOVERED)
    hover.process()
    clock.advance(1.0)
    shader.process()
    assert _material(board, (0, 0)).time == pytest.approx(1.0)

    _interact(board, (0, 0), InteractionState.NONE)
    hover.process()

    assert hover.state.active is False
    assert _material(board, (0, 0)).time == 0.0
    assert cursors[-1] == {"icon": CURSOR_DEFAULT}


def test_shader_time_advances_only_while_active():
    board, hover, shader, clock = _setup()
    clock.advance(10.0)
    _interact(board, (2, 1), InteractionState.HOVERED)
    hover.process()

    clock.advance(0.25)
    shader.process()
    assert _material(board, (2, 1)).time == pytest.approx(0.25)
    clock.advance(0.5)
    shader.process()
    assert _material(board, (2, 1)).time == pytest.approx(0.75)

    _interact(board, (2, 1), InteractionState.NONE)
    hover.process()
    clock.advance(3.0)
    shader.process()
    assert _material(board, (2, 1)).time == 0.0


def test_pressed_does_not_touch_hover_state(caplog):
    board, hover, _, clock = _setup()
    clock.advance(1.0)
    _interact(board, (1, 2), InteractionState.HOVERED)
    hover.process()
    before = (hover.state.active, hover.state.target, hover.state.time_started)

    clock.advance(1.0)
    caplog.set_level("INFO")
    _interact(board, (1, 2), InteractionState.PRESSED)
    hover.process()

    assert (hover.state.active, hover.state.target, hover.state.time_started) == before
    assert "cell (1, 2) pressed" in caplog.text


def test_unchanged_interaction_is_not_reprocessed():
    board, hover, _, clock = _setup()
    cursors = record(board.bus, EVENT_CURSOR_CHANGED)
    _interact(board, (0, 1), InteractionState.HOVERED)
    hover.process()
    hover.process()
    _interact(board, (0, 1), InteractionState.HOVERED)
    hover.process()
    assert len(cursors) == 1


def test_retarget_while_active_keeps_start_time():
    board, hover, shader, clock = _setup()
    clock.advance(1.0)
    _interact(board, (0, 0), InteractionState.HOVERED)
    hover.process()

    clock.advance(2.0)
    _interact(board, (1, 0), InteractionState.HOVERED)
    hover.process()

    assert hover.state.target == board.cells[(1, 0)]
    assert hover.state.time_started == pytest.approx(1.0)
    shader.process()
    assert _material(board, (1, 0)).time == pytest.approx(2.0)


def test_removed_target_is_skipped_silently():
    board, hover, shader, clock = _setup()
    _interact(board, (2, 2), InteractionState.HOVERED)
    hover.process()
    board.world.delete_entity(board.cells[(2, 2)], immediate=True)

    clock.advance(1.0)
    shader.process()

    assert hover.state.active is True


def test_interaction_set_tracks_changes():
    interaction = Interaction()
    interaction.set(InteractionState.NONE)
    assert interaction.consume_change() is False
    interaction.set(InteractionState.HOVERED)
    assert interaction.consume_change() is True
    assert interaction.consume_change() is False


def test_leaving_and_entering_in_one_step_ends_on_the_new_cell():
    board, hover, shader, clock = _setup()
    cursors = record(board.bus, EVENT_CURSOR_CHANGED)
    clock.advance(1.0)
    _interact(board, (1, 0), InteractionState.HOVERED)
    hover.process()

    clock.advance(1.0)
    # (0, 0) was spawned before (1, 0), so the world yields the new cell first.
    _interact(board, (0, 0), InteractionState.HOVERED)
    _interact(board, (1, 0), InteractionState.NONE)
    hover.process()

    assert hover.state.active is True
    assert hover.state.target == board.cells[(0, 0)]
    assert hover.state.time_started == pytest.approx(2.0)
    assert cursors[-1] == {"icon": CURSOR_POINTER}
    assert _material(board, (1, 0)).time == 0.0
