from dataclasses import dataclass


@dataclass(slots=True)
class MainBoard:
    """Marker for the square container every other board element is laid out in."""
    pass


@dataclass(frozen=True, slots=True)
class BoardCell:
    """Address of one of the nine grid cells."""
    col: int
    row: int


@dataclass(frozen=True, slots=True)
class VerticalBorder:
    index: int


@dataclass(frozen=True, slots=True)
class HorizontalBorder:
    index: int


@dataclass(slots=True)
class Hoverable:
    pass
