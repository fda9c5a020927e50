from __future__ import annotations

from dataclasses import dataclass

from esper import World


@dataclass(slots=True)
class FrameClock:
    """Monotonic game time accumulated from per-frame deltas."""

    elapsed: float = 0.0

    def advance(self, dt: float) -> float:
        # Ignore negative deltas so elapsed time never runs backwards.
        if dt > 0.0:
            self.elapsed += dt
        return self.elapsed


def ensure_frame_clock(world: World) -> FrameClock:
    for _, clock in world.get_component(FrameClock):
        return clock
    entity = world.create_entity(FrameClock())
    return world.component_for_entity(entity, FrameClock)


def elapsed_seconds(world: World) -> float:
    for _, clock in world.get_component(FrameClock):
        return clock.elapsed
    return 0.0
