"""
utils.py - Constants, enumerations and grid helpers shared across DropFour
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Default board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

# Grid value of an unoccupied cell
EMPTY = 0


class Player(Enum):
    """The two sides of a game. Grid cells hold these values."""
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Player':
        return Player.SECOND if self == Player.FIRST else Player.FIRST

    @property
    def number(self) -> int:
        """1-based number shown to people."""
        return self.value

    def __str__(self):
        return "X" if self == Player.FIRST else "O"


class Outcome(Enum):
    """How a game stands; WON and DRAW are terminal."""
    UNDETERMINED = auto()
    DRAW = auto()
    WON = auto()

    def is_terminal(self) -> bool:
        return self != Outcome.UNDETERMINED


class Direction(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# (row step, col step); row 0 is the top of the board
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def cell_to_player(value: int):
    """Map a raw grid value to a Player, or None for an empty cell."""
    if value == EMPTY:
        return None
    return Player(int(value))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first, with 0-based column numbers.

    Args:
        grid: The board grid

    Returns:
        Multi-line string representation
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    lines = [border]
    for row in range(rows):
        cells = []
        for col in range(cols):
            player = cell_to_player(grid[row, col])
            cells.append(" " if player is None else str(player))
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(lines)
