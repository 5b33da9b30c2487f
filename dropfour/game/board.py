"""
board.py - Grid storage and column-drop placement for DropFour

The board knows nothing about turns or winners; it only keeps tokens in a
fixed rows x cols numpy grid and enforces gravity when one is dropped.
Row 0 is the top row, so tokens settle at the highest free row index.
"""

import numbers
from typing import List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.game.errors import ColumnFullError, InvalidColumnError
from dropfour.utils import ROWS, COLS, EMPTY, Player, cell_to_player, render_board_ascii


class Board:
    """
    A fixed-size Connect Four style grid.

    Once a cell is filled it is never changed, and in every column the
    filled cells form one unbroken run up from the bottom row.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")

        debug.trace(f"Initializing {rows}x{cols} board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.full((rows, cols), EMPTY, dtype=np.int8)
        # Free cells left in each column, used for O(1) landing-row lookup
        self._free = np.full(cols, rows, dtype=np.int16)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def check_column(self, column) -> int:
        """
        Validate a column index and return it as a plain int.

        Raises:
            InvalidColumnError: for non-integers (bools included) and
                indices outside [0, cols)
        """
        if isinstance(column, bool) or not isinstance(column, numbers.Integral):
            raise InvalidColumnError(column, self.cols)

        column = int(column)
        if not 0 <= column < self.cols:
            raise InvalidColumnError(column, self.cols)

        return column

    def landing_row(self, column: int) -> Optional[int]:
        """Row a token dropped into ``column`` would occupy, or None if full."""
        free = int(self._free[column])
        return free - 1 if free > 0 else None

    def is_column_full(self, column: int) -> bool:
        return self._free[self.check_column(column)] == 0

    def is_full(self) -> bool:
        return not self._free.any()

    def open_columns(self) -> List[int]:
        return [col for col in range(self.cols) if self._free[col] > 0]

    def drop(self, column, player: Player) -> Tuple[int, int]:
        """
        Place a token for ``player`` in the lowest empty cell of ``column``.

        Returns:
            The (row, col) the token landed on

        Raises:
            InvalidColumnError: column is not a valid index
            ColumnFullError: column has no empty cell
        """
        column = self.check_column(column)
        row = self.landing_row(column)
        if row is None:
            raise ColumnFullError(column)

        self.grid[row, column] = player.value
        self._free[column] -= 1
        debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
        return row, column

    def cell(self, row: int, col: int) -> Optional[Player]:
        return cell_to_player(self.grid[row, col])

    def to_rows(self) -> Tuple[Tuple[Optional[Player], ...], ...]:
        """Board contents, top row first."""
        return tuple(
            tuple(cell_to_player(value) for value in row)
            for row in self.grid
        )

    def get_state(self) -> np.ndarray:
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
