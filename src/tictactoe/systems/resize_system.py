from __future__ import annotations

import logging

from esper import World

from tictactoe.components.board_state import set_dimension
from tictactoe.components.node import Node
from tictactoe.events.bus import (
    EVENT_BOARD_DIMENSION_CHANGED,
    EVENT_WINDOW_RESIZED,
    EventBus,
)
from tictactoe.events.queue import EventQueue
from tictactoe.factories.board import find_main_board

logger = logging.getLogger(__name__)


def fit_dimension(width: float, height: float) -> float:
    """The board is square and fits the smaller window side."""
    return min(width, height)


def find_board_dimension(world: World, width: float, height: float) -> float:
    """Establish the initial dimension at startup. Emits no notification."""
    dimension = fit_dimension(width, height)
    set_dimension(world, dimension)
    logger.info("initial board dimension %.1f (window %sx%s)", dimension, width, height)
    return dimension


class ResizeSystem:
    """Turns window resizes into board dimension changes.

    Only the last resize received since the previous step is honoured. When the
    main board has not been spawned yet the resize is dropped.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._resizes = EventQueue(EVENT_WINDOW_RESIZED)
        self.event_bus.subscribe(EVENT_WINDOW_RESIZED, self._resizes.push)

    def process(self) -> None:
        event = self._resizes.drain_last()
        if event is None:
            return
        try:
            width = float(event["width"])
            height = float(event["height"])
        except (KeyError, TypeError, ValueError):
            return
        board = self._main_board_node()
        if board is None:
            return
        dimension = fit_dimension(width, height)
        board.width = dimension
        board.height = dimension
        set_dimension(self.world, dimension)
        logger.debug("board resized to %.1f", dimension)
        self.event_bus.emit(EVENT_BOARD_DIMENSION_CHANGED, dimension=dimension)

    def _main_board_node(self) -> Node | None:
        entity = find_main_board(self.world)
        if entity is None:
            return None
        return self.world.try_component(entity, Node)
