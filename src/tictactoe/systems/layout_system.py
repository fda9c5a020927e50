"""Systems that re-apply board geometry after the board dimension changes.

Each system keeps its own queue of dimension notifications and only acts on
the newest one, so several resizes within a tick cost a single relayout. The
three systems touch disjoint entity sets and can run in any order.
"""
from __future__ import annotations

import logging

from esper import World

from tictactoe.components.board import BoardCell, HorizontalBorder, VerticalBorder
from tictactoe.components.node import Node
from tictactoe.events.bus import EVENT_BOARD_DIMENSION_CHANGED, EventBus
from tictactoe.events.queue import EventQueue
from tictactoe.ui.geometry import Orientation, cell_rect, separator_rect

logger = logging.getLogger(__name__)


class _DimensionSubscriber:
    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._changes = EventQueue(EVENT_BOARD_DIMENSION_CHANGED)
        self.event_bus.subscribe(EVENT_BOARD_DIMENSION_CHANGED, self._changes.push)

    def process(self) -> None:
        event = self._changes.drain_last()
        if event is None:
            return
        try:
            dimension = float(event["dimension"])
        except (KeyError, TypeError, ValueError):
            return
        updated = self.relayout(dimension)
        logger.debug("%s applied dimension %.1f to %d entities", type(self).__name__, dimension, updated)

    def relayout(self, dimension: float) -> int:
        raise NotImplementedError


class VerticalBorderLayoutSystem(_DimensionSubscriber):
    def relayout(self, dimension: float) -> int:
        count = 0
        for _, (border, node) in self.world.get_components(VerticalBorder, Node):
            rect = separator_rect(dimension, border.index, Orientation.VERTICAL)
            node.width = rect.width
            node.height = rect.height
            node.left = rect.left
            count += 1
        return count


class HorizontalBorderLayoutSystem(_DimensionSubscriber):
    def relayout(self, dimension: float) -> int:
        count = 0
        for _, (border, node) in self.world.get_components(HorizontalBorder, Node):
            rect = separator_rect(dimension, border.index, Orientation.HORIZONTAL)
            node.width = rect.width
            node.height = rect.height
            node.top = rect.top
            count += 1
        return count


class CellLayoutSystem(_DimensionSubscriber):
    def relayout(self, dimension: float) -> int:
        count = 0
        for _, (cell, node) in self.world.get_components(BoardCell, Node):
            node.apply(cell_rect(dimension, cell.col, cell.row))
            count += 1
        return count
