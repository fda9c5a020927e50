from dataclasses import dataclass


@dataclass(slots=True)
class HoverAnimationState:
    """The one hover animation currently running.

    ``target`` is the cell entity whose ``TileMaterial`` is animated. Only the
    most recently hovered cell is tracked.
    """
    active: bool = False
    target: int | None = None
    time_started: float = 0.0
