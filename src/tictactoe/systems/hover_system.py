from __future__ import annotations

import logging
from typing import Callable, Dict

from esper import World

from tictactoe.components.board import BoardCell, Hoverable
from tictactoe.components.cursor_icons import CursorIcons
from tictactoe.components.hover_state import HoverAnimationState
from tictactoe.components.interaction import Interaction, InteractionState
from tictactoe.components.tile_material import TileMaterial
from tictactoe.events.bus import EVENT_CURSOR_CHANGED, EventBus
from tictactoe.utils.frame_clock import elapsed_seconds

logger = logging.getLogger(__name__)


def ensure_hover_state(world: World) -> HoverAnimationState:
    for _, state in world.get_component(HoverAnimationState):
        return state
    entity = world.create_entity(HoverAnimationState())
    return world.component_for_entity(entity, HoverAnimationState)


class HoverSystem:
    """Reacts to pointer interaction changes on hoverable cells.

    Only one hover animation is tracked at a time: entering a cell retargets
    the animation but keeps the start time if another cell was still active.
    Within one step cells that lost the pointer are handled before cells that
    gained it, so the outcome does not depend on entity order.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._state = ensure_hover_state(world)
        self._transitions: Dict[InteractionState, Callable[[int, TileMaterial, float], None]] = {
            InteractionState.HOVERED: self._on_hovered,
            InteractionState.NONE: self._on_left,
            InteractionState.PRESSED: self._on_pressed,
        }

    @property
    def state(self) -> HoverAnimationState:
        return self._state

    def process(self) -> None:
        now = elapsed_seconds(self.world)
        changed = [
            (entity, interaction.state, material)
            for entity, (interaction, material, _) in self.world.get_components(
                Interaction, TileMaterial, Hoverable
            )
            if interaction.consume_change()
        ]
        # Leaving cells first so a same-tick move onto a neighbour ends active.
        changed.sort(key=lambda item: item[1] is not InteractionState.NONE)
        for entity, state, material in changed:
            self._transitions[state](entity, material, now)

    def _on_hovered(self, entity: int, material: TileMaterial, now: float) -> None:
        self._set_cursor(self._icons().pointer)
        state = self._state
        state.target = entity
        if not state.active:
            state.time_started = now
        state.active = True

    def _on_left(self, entity: int, material: TileMaterial, now: float) -> None:
        self._set_cursor(self._icons().default)
        material.time = 0.0
        self._state.active = False

    def _on_pressed(self, entity: int, material: TileMaterial, now: float) -> None:
        try:
            cell = self.world.component_for_entity(entity, BoardCell)
        except KeyError:
            logger.info("hoverable %s pressed", entity)
            return
        logger.info("cell (%d, %d) pressed", cell.col, cell.row)

    def _set_cursor(self, icon: str) -> None:
        self.event_bus.emit(EVENT_CURSOR_CHANGED, icon=icon)

    def _icons(self) -> CursorIcons:
        for _, icons in self.world.get_component(CursorIcons):
            return icons
        return CursorIcons()


class ShaderTimeSystem:
    """Advances the active cell's material time while a hover is running."""

    def __init__(self, world: World) -> None:
        self.world = world
        self._state = ensure_hover_state(world)

    def process(self) -> None:
        state = self._state
        if not state.active or state.target is None:
            return
        if not self.world.entity_exists(state.target):
            return
        material = self.world.try_component(state.target, TileMaterial)
        if material is None:
            return
        material.time = elapsed_seconds(self.world) - state.time_started
