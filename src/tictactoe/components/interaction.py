from dataclasses import dataclass, field
from enum import Enum, auto


class InteractionState(Enum):
    NONE = auto()
    HOVERED = auto()
    PRESSED = auto()


@dataclass(slots=True)
class Interaction:
    """Pointer interaction of a UI element with change tracking.

    ``set`` flags a change only when the state actually differs; the consumer
    acknowledges it with ``consume_change``.
    """
    state: InteractionState = InteractionState.NONE
    changed: bool = field(default=False)

    def set(self, state: InteractionState) -> None:
        if state is self.state:
            return
        self.state = state
        self.changed = True

    def consume_change(self) -> bool:
        changed = self.changed
        self.changed = False
        return changed
