from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nobody stores the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                    # payload: dt=float


# ============================================================================
# WINDOW
# ============================================================================
EVENT_WINDOW_RESIZED = "window_resized"                # payload: width=float, height=float
EVENT_CURSOR_CHANGED = "cursor_changed"                # payload: icon=str


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"                        # payload: x, y, dx, dy
EVENT_MOUSE_PRESS = "mouse_press"                      # payload: x, y, button
EVENT_MOUSE_RELEASE = "mouse_release"                  # payload: x, y, button
EVENT_MOUSE_LEAVE = "mouse_leave"                      # payload: x, y


# ============================================================================
# BOARD LAYOUT
# ============================================================================
EVENT_BOARD_DIMENSION_CHANGED = "board_dimension_changed"  # payload: dimension=float
