"""Entry point for the tic-tac-toe board prototype.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from tictactoe.config import AppConfig
from tictactoe.constants import CURSOR_POINTER
from tictactoe.events.bus import (
    EVENT_CURSOR_CHANGED,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_TICK,
    EVENT_WINDOW_RESIZED,
    EventBus,
)
from tictactoe.factories.board import setup_board, setup_cells
from tictactoe.systems.hover_system import HoverSystem, ShaderTimeSystem
from tictactoe.systems.layout_system import (
    CellLayoutSystem,
    HorizontalBorderLayoutSystem,
    VerticalBorderLayoutSystem,
)
from tictactoe.systems.pointer_system import PointerInteractionSystem
from tictactoe.systems.render import RenderSystem
from tictactoe.systems.resize_system import ResizeSystem, find_board_dimension
from tictactoe.systems.schedule import FrameSchedule
from tictactoe.utils.logging import setup_logging
from tictactoe.world import create_world

logger = logging.getLogger(__name__)


class TicTacToeWindow(Window):
    def __init__(self, config: AppConfig):
        super().__init__(config.window_width, config.window_height, config.window_title, resizable=True)
        self.set_update_rate(config.update_rate)
        self.event_bus = EventBus()
        self.world = create_world()

        find_board_dimension(self.world, self.width, self.height)
        setup_board(self.world)
        setup_cells(self.world)

        # Layout systems
        self.resize_system = ResizeSystem(self.world, self.event_bus)
        self.vertical_border_layout = VerticalBorderLayoutSystem(self.world, self.event_bus)
        self.horizontal_border_layout = HorizontalBorderLayoutSystem(self.world, self.event_bus)
        self.cell_layout = CellLayoutSystem(self.world, self.event_bus)

        # Interaction systems
        self.pointer_system = PointerInteractionSystem(self.world, self.event_bus, self)
        self.hover_system = HoverSystem(self.world, self.event_bus)
        self.shader_time_system = ShaderTimeSystem(self.world)

        self.render_system = RenderSystem(self.world, self)

        self.schedule = FrameSchedule(self.world, self.event_bus)
        self.schedule.add_step("resize", self.resize_system.process)
        self.schedule.add_step("layout_borders_vertical", self.vertical_border_layout.process)
        self.schedule.add_step("layout_borders_horizontal", self.horizontal_border_layout.process)
        self.schedule.add_step("layout_cells", self.cell_layout.process)
        self.schedule.add_step("pointer", self.pointer_system.process)
        self.schedule.add_step("hover", self.hover_system.process)
        self.schedule.add_step("shader_time", self.shader_time_system.process)

        self.event_bus.subscribe(EVENT_CURSOR_CHANGED, self.on_cursor_changed)
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        # pyglet may report the first resize before __init__ has built the bus.
        if hasattr(self, 'event_bus'):
            self.event_bus.emit(EVENT_WINDOW_RESIZED, width=float(width), height=float(height))
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE, x=x, y=y)

    def on_cursor_changed(self, sender, **payload):
        if payload.get("icon") == CURSOR_POINTER:
            self.set_mouse_cursor(self.get_system_mouse_cursor(self.CURSOR_HAND))
        else:
            self.set_mouse_cursor(None)


def main():
    config = AppConfig.from_env()
    setup_logging(config.log_level)
    logger.info("starting %s at %dx%d", config.window_title, config.window_width, config.window_height)
    window = TicTacToeWindow(config)
    run()

if __name__ == "__main__":
    main()
