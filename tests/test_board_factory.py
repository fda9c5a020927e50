import pytest

from tictactoe.components.board import BoardCell, HorizontalBorder, Hoverable, MainBoard, VerticalBorder
from tictactoe.components.interaction import Interaction, InteractionState
from tictactoe.components.node import BackgroundColor, Node
from tictactoe.components.tile_material import TileMaterial
from tictactoe.constants import BG_COLOR, BG_LINES, TILE_TEXTURE
from tictactoe.factories.board import find_main_board, setup_board, setup_cells
from tictactoe.world import create_world
from tests.helpers import build_board


def test_setup_board_spawns_board_and_four_separators():
    board = build_board(800, 600)
    world = board.world

    assert find_main_board(world) == board.board_entity
    node = world.component_for_entity(board.board_entity, Node)
    assert (node.width, node.height) == (600, 600)
    assert world.component_for_entity(board.board_entity, BackgroundColor).color == BG_COLOR

    vertical = sorted(border.index for _, border in world.get_component(VerticalBorder))
    horizontal = sorted(border.index for _, border in world.get_component(HorizontalBorder))
    assert vertical == [1, 2]
    assert horizontal == [1, 2]
    for _, (_, background) in world.get_components(VerticalBorder, BackgroundColor):
        assert background.color == BG_LINES


def test_setup_cells_spawns_nine_hoverable_cells():
    board = build_board(300, 300)
    world = board.world

    assert sorted(board.cells) == [(c, r) for c in range(3) for r in range(3)]
    for entity in board.cells.values():
        assert world.has_component(entity, Hoverable)
        assert world.component_for_entity(entity, Interaction).state is InteractionState.NONE
        material = world.component_for_entity(entity, TileMaterial)
        assert material.texture == TILE_TEXTURE
        assert material.time == 0.0

    node = world.component_for_entity(board.cells[(1, 1)], Node)
    assert node.left == pytest.approx(103.0)
    assert node.width == pytest.approx(100.0)


def test_find_main_board_before_setup():
    world = create_world()
    assert find_main_board(world) is None


def test_cells_use_custom_texture():
    world = create_world(dimension=90.0)
    setup_board(world)
    entities = setup_cells(world, texture="stone.png")
    assert len(entities) == 9
    assert all(
        world.component_for_entity(entity, TileMaterial).texture == "stone.png" for entity in entities
    )
    assert len(list(world.get_component(MainBoard))) == 1
    assert len(list(world.get_component(BoardCell))) == 9
