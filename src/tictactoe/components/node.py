from dataclasses import dataclass
from typing import Tuple

from tictactoe.ui.geometry import Rect


@dataclass(slots=True)
class Node:
    """Absolutely positioned UI box in pixels, relative to the board's top-left corner."""
    width: float = 0.0
    height: float = 0.0
    left: float = 0.0
    top: float = 0.0

    @classmethod
    def from_rect(cls, rect: Rect) -> "Node":
        return cls(width=rect.width, height=rect.height, left=rect.left, top=rect.top)

    def apply(self, rect: Rect) -> None:
        self.width = rect.width
        self.height = rect.height
        self.left = rect.left
        self.top = rect.top

    def rect(self) -> Rect:
        return Rect(width=self.width, height=self.height, left=self.left, top=self.top)


@dataclass(slots=True)
class BackgroundColor:
    color: Tuple[int, int, int, int]


@dataclass(slots=True)
class BorderColor:
    color: Tuple[int, int, int, int]
    width: float = 1.0
