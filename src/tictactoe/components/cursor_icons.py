from dataclasses import dataclass

from tictactoe.constants import CURSOR_DEFAULT, CURSOR_POINTER


@dataclass(frozen=True, slots=True)
class CursorIcons:
    default: str = CURSOR_DEFAULT
    pointer: str = CURSOR_POINTER
