from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from esper import World

from tictactoe.components.board import BoardCell
from tictactoe.events.bus import EVENT_TICK, EventBus
from tictactoe.factories.board import setup_board, setup_cells
from tictactoe.systems.resize_system import find_board_dimension
from tictactoe.world import create_world


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height


@dataclass
class Board:
    world: World
    bus: EventBus
    board_entity: int
    cells: dict[tuple[int, int], int] = field(default_factory=dict)


def build_board(width: float = 300, height: float = 300) -> Board:
    """World with the board, separators and cells spawned for a window size."""
    bus = EventBus()
    world = create_world()
    find_board_dimension(world, width, height)
    board_entity = setup_board(world)
    cells: dict[tuple[int, int], int] = {}
    for entity in setup_cells(world):
        cell = world.component_for_entity(entity, BoardCell)
        cells[(cell.col, cell.row)] = entity
    return Board(world=world, bus=bus, board_entity=board_entity, cells=cells)


def make_tick(bus: EventBus):
    def tick(dt: float = 1 / 60) -> None:
        bus.emit(EVENT_TICK, dt=dt)
    return tick


def record(bus: EventBus, name: str) -> list[dict[str, Any]]:
    received: list[dict[str, Any]] = []

    def handler(sender, **kwargs):
        received.append(kwargs)

    bus.subscribe(name, handler)
    return received
