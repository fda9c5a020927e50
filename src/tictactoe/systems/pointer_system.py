from __future__ import annotations

from typing import Any

from esper import World

from tictactoe.components.board import Hoverable
from tictactoe.components.interaction import Interaction, InteractionState
from tictactoe.components.node import Node
from tictactoe.events.bus import (
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EventBus,
)

LEFT_BUTTON = 1


class PointerInteractionSystem:
    """Maps window pointer input onto the ``Interaction`` of hoverable nodes.

    Arcade reports positions with a bottom-left origin while nodes are laid out
    from the top-left, so y is flipped against the window height.
    """

    def __init__(self, world: World, event_bus: EventBus, window) -> None:
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._pointer: tuple[float, float] | None = None
        self._pressed = False
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE, self.on_mouse_leave)

    def on_mouse_move(self, sender: Any, **payload: Any) -> None:
        self._track(payload)

    def on_mouse_press(self, sender: Any, **payload: Any) -> None:
        if payload.get("button") != LEFT_BUTTON:
            return
        self._track(payload)
        self._pressed = True

    def on_mouse_release(self, sender: Any, **payload: Any) -> None:
        if payload.get("button") != LEFT_BUTTON:
            return
        self._track(payload)
        self._pressed = False

    def on_mouse_leave(self, sender: Any, **payload: Any) -> None:
        self._pointer = None
        self._pressed = False

    def _track(self, payload: dict) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        try:
            self._pointer = (float(x), float(self.window.height) - float(y))
        except (TypeError, ValueError):
            return

    def process(self) -> None:
        pointer = self._pointer
        for _, (interaction, node, _) in self.world.get_components(Interaction, Node, Hoverable):
            if pointer is None or not node.rect().contains(*pointer):
                interaction.set(InteractionState.NONE)
            elif self._pressed:
                interaction.set(InteractionState.PRESSED)
            else:
                interaction.set(InteractionState.HOVERED)
