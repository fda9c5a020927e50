"""Factory helpers for spawning the board, its separators and its cells."""
from __future__ import annotations

import logging

from esper import World

from tictactoe.components.board import BoardCell, HorizontalBorder, Hoverable, MainBoard, VerticalBorder
from tictactoe.components.board_state import get_board_dimension
from tictactoe.components.interaction import Interaction
from tictactoe.components.node import BackgroundColor, BorderColor, Node
from tictactoe.components.tile_material import TileMaterial
from tictactoe.constants import (
    BG_COLOR,
    BG_LINES,
    CELL_BORDER_COLOR,
    CELL_BORDER_WIDTH,
    TILE_TEXTURE,
)
from tictactoe.ui.geometry import (
    BORDER_INDICES,
    CELL_INDICES,
    Orientation,
    cell_rect,
    separator_rects,
)

logger = logging.getLogger(__name__)


def setup_board(world: World) -> int:
    """Create the main board node and the four separator lines.

    Returns the main board entity.
    """
    dimension = get_board_dimension(world)
    board_entity = world.create_entity(
        MainBoard(),
        Node(width=dimension, height=dimension),
        BackgroundColor(BG_COLOR),
    )
    vertical = separator_rects(dimension, Orientation.VERTICAL)
    horizontal = separator_rects(dimension, Orientation.HORIZONTAL)
    for index, vertical_rect, horizontal_rect in zip(BORDER_INDICES, vertical, horizontal):
        world.create_entity(
            VerticalBorder(index),
            Node.from_rect(vertical_rect),
            BackgroundColor(BG_LINES),
        )
        world.create_entity(
            HorizontalBorder(index),
            Node.from_rect(horizontal_rect),
            BackgroundColor(BG_LINES),
        )
    logger.debug("board spawned at dimension %.1f", dimension)
    return board_entity


def setup_cells(world: World, *, texture: str = TILE_TEXTURE) -> list[int]:
    """Create the nine hoverable cells, column by column."""
    dimension = get_board_dimension(world)
    cells: list[int] = []
    for col in CELL_INDICES:
        for row in CELL_INDICES:
            cells.append(
                world.create_entity(
                    BoardCell(col, row),
                    Node.from_rect(cell_rect(dimension, col, row)),
                    Hoverable(),
                    Interaction(),
                    TileMaterial(texture=texture),
                    BorderColor(CELL_BORDER_COLOR, width=CELL_BORDER_WIDTH),
                )
            )
    return cells


def find_main_board(world: World) -> int | None:
    for entity, _ in world.get_component(MainBoard):
        return entity
    return None
