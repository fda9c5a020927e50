"""Pixel geometry for the 3x3 board.

All functions are pure: the rectangles depend only on the board side length
and the element's own address, so they can be recomputed from scratch on every
resize. Coordinates use the UI convention of a top-left origin with ``top``
growing downwards.

Along each axis the board is laid out as::

    cell 0 | line 1 | cell 1 | line 2 | cell 2

Each line is ``dimension * 2%`` thick. Line 1 is centred half a line before the
first third, line 2 half a line after the second third, and the cells are
inset so they never overlap a line.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from tictactoe.constants import GRID_SIZE, LINES_WIDTH_PERCENTAGE, THIRD

CELL_INDICES = tuple(range(GRID_SIZE))
BORDER_INDICES = (1, 2)

# Multiples of half a line width, indexed by cell position along an axis.
_CELL_OFFSET_HALF_LINES = (0.0, 1.0, 3.0)
_CELL_SHRINK_HALF_LINES = (1.0, 0.0, 3.0)


class Orientation(Enum):
    VERTICAL = auto()
    HORIZONTAL = auto()


@dataclass(frozen=True, slots=True)
class Rect:
    width: float
    height: float
    left: float
    top: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


def line_width(dimension: float) -> float:
    return dimension * LINES_WIDTH_PERCENTAGE * 0.01


def _third_offset(dimension: float, index: int) -> float:
    return dimension * (THIRD * index * 0.01)


def _check_cell_index(name: str, value: int) -> None:
    if value not in CELL_INDICES:
        raise ValueError(f"{name} must be one of {CELL_INDICES}, got {value!r}")


def cell_axis(dimension: float, index: int) -> Tuple[float, float]:
    """Return ``(offset, size)`` of the cell at ``index`` along one axis.

    The last cell shrinks by three half lines, the same inset it is shifted by,
    rather than by one line width as earlier versions of this board did. A
    one-line shrink pushes the last row and column half a line past the edge.
    """
    _check_cell_index("index", index)
    half_line = line_width(dimension) * 0.5
    offset = _third_offset(dimension, index) + _CELL_OFFSET_HALF_LINES[index] * half_line
    size = dimension / 3.0 - _CELL_SHRINK_HALF_LINES[index] * half_line
    return offset, size


def cell_rect(dimension: float, col: int, row: int) -> Rect:
    """Rectangle of the cell at ``(col, row)`` for a board of side ``dimension``."""
    _check_cell_index("col", col)
    _check_cell_index("row", row)
    left, width = cell_axis(dimension, col)
    top, height = cell_axis(dimension, row)
    return Rect(width=width, height=height, left=left, top=top)


def separator_position(dimension: float, index: int) -> float:
    """Offset of separator ``index`` (1 or 2) from the board's left/top edge."""
    if index not in BORDER_INDICES:
        raise ValueError(f"separator index must be one of {BORDER_INDICES}, got {index!r}")
    half_line = line_width(dimension) * 0.5
    sign = -1.0 if index == 1 else 1.0
    return _third_offset(dimension, index) + sign * half_line


def separator_rect(dimension: float, index: int, orientation: Orientation) -> Rect:
    position = separator_position(dimension, index)
    thickness = line_width(dimension)
    if orientation is Orientation.VERTICAL:
        return Rect(width=thickness, height=dimension, left=position, top=0.0)
    if orientation is Orientation.HORIZONTAL:
        return Rect(width=dimension, height=thickness, left=0.0, top=position)
    raise ValueError(f"unknown orientation {orientation!r}")


def separator_rects(dimension: float, orientation: Orientation) -> Tuple[Rect, Rect]:
    """Both separators of one orientation, index 1 first."""
    first, second = (separator_rect(dimension, index, orientation) for index in BORDER_INDICES)
    return first, second
