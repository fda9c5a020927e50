from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class EventQueue:
    """Per-tick buffer for one event type.

    Subscribers push payloads as the bus delivers them; the owning system
    drains the queue once per scheduled step. ``drain_last`` keeps only the
    most recent payload so several notifications arriving in one tick collapse
    into a single piece of work.
    """

    name: str
    _pending: List[Dict[str, Any]] = field(default_factory=list, repr=False)

    def push(self, sender: Any = None, **payload: Any) -> None:
        self._pending.append(dict(payload))

    def drain_last(self) -> Dict[str, Any] | None:
        if not self._pending:
            return None
        last = self._pending[-1]
        self._pending.clear()
        return last

    def __len__(self) -> int:
        return len(self._pending)
