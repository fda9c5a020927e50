"""World-level board state kept on the single state entity."""
from __future__ import annotations

from dataclasses import dataclass

from esper import World


@dataclass(slots=True)
class BoardDimension:
    """Side length in pixels of the square board."""
    value: float = 0.0


def ensure_board_dimension(world: World) -> BoardDimension:
    for _, dimension in world.get_component(BoardDimension):
        return dimension
    entity = world.create_entity(BoardDimension())
    return world.component_for_entity(entity, BoardDimension)


def get_board_dimension(world: World) -> float:
    for _, dimension in world.get_component(BoardDimension):
        return dimension.value
    return 0.0


def set_dimension(world: World, value: float) -> None:
    """Overwrite the board dimension. No validation: degenerate values propagate."""
    ensure_board_dimension(world).value = value
