from esper import World

from tictactoe.components.board_state import BoardDimension
from tictactoe.components.cursor_icons import CursorIcons
from tictactoe.components.hover_state import HoverAnimationState
from tictactoe.utils.frame_clock import FrameClock


def create_world(*, dimension: float = 0.0) -> World:
    """Create the ECS world with its single state entity.

    The state entity owns the board dimension, the hover animation state, the
    frame clock and the cursor icon set. Board elements are spawned separately
    by ``tictactoe.factories.board`` once the initial dimension is known.
    """
    world = World()
    world.create_entity(
        BoardDimension(value=dimension),
        HoverAnimationState(),
        FrameClock(),
        CursorIcons(),
    )
    return world
