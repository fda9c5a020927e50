from __future__ import annotations

import math

from esper import World

from tictactoe.components.board import BoardCell, HorizontalBorder, MainBoard, VerticalBorder
from tictactoe.components.node import BackgroundColor, BorderColor, Node
from tictactoe.components.tile_material import TileMaterial
from tictactoe.constants import TILE_COLOR, TILE_PULSE_DEPTH, TILE_PULSE_SPEED


def pulse_color(time: float) -> tuple[int, int, int, int]:
    """Tile colour for a material time; ``time == 0`` is the resting colour."""
    if time <= 0.0:
        factor = 1.0
    else:
        factor = 1.0 + TILE_PULSE_DEPTH * math.sin(time * TILE_PULSE_SPEED)
    r, g, b = (max(0, min(255, int(channel * factor))) for channel in TILE_COLOR)
    return r, g, b, 255


class RenderSystem:
    """Draws the board, its separators and its cells with arcade."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def _to_lbwh(self, node: Node) -> tuple[float, float, float, float]:
        # Nodes use a top-left origin; arcade draws from the bottom-left.
        bottom = self.window.height - node.top - node.height
        return node.left, bottom, node.width, node.height

    def process(self) -> None:
        # Local import keeps the layout and hover systems importable without a display.
        import arcade

        for _, (_, node, background) in self.world.get_components(MainBoard, Node, BackgroundColor):
            arcade.draw_lbwh_rectangle_filled(*self._to_lbwh(node), background.color)
        for border_type in (VerticalBorder, HorizontalBorder):
            for _, (_, node, background) in self.world.get_components(border_type, Node, BackgroundColor):
                arcade.draw_lbwh_rectangle_filled(*self._to_lbwh(node), background.color)
        for entity, (_, node, material) in self.world.get_components(BoardCell, Node, TileMaterial):
            lbwh = self._to_lbwh(node)
            arcade.draw_lbwh_rectangle_filled(*lbwh, pulse_color(material.time))
            outline = self.world.try_component(entity, BorderColor)
            if outline is not None:
                arcade.draw_lbwh_rectangle_outline(*lbwh, outline.color, border_width=outline.width)
