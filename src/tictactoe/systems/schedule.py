from __future__ import annotations

import logging
from typing import Any, Callable, List, Tuple

from esper import World

from tictactoe.events.bus import EVENT_TICK, EventBus
from tictactoe.utils.frame_clock import ensure_frame_clock

logger = logging.getLogger(__name__)


class FrameSchedule:
    """Runs per-frame steps in the order they were added.

    Every ``EVENT_TICK`` first advances the frame clock, then calls each step
    once. Resize handling must be added before the layout steps and those
    before anything that reads node geometry, otherwise a resize shows up one
    frame late.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._clock = ensure_frame_clock(world)
        self._steps: List[Tuple[str, Callable[[], None]]] = []
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def add_step(self, name: str, step: Callable[[], None]) -> None:
        name = name.strip()
        if not name:
            raise ValueError("step name must not be empty")
        if any(existing == name for existing, _ in self._steps):
            raise ValueError(f"duplicate step: {name}")
        self._steps.append((name, step))
        logger.debug("scheduled step %s at position %d", name, len(self._steps))

    @property
    def step_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._steps)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        self.run(dt_val)

    def run(self, dt: float) -> None:
        self._clock.advance(dt)
        for _, step in self._steps:
            step()
