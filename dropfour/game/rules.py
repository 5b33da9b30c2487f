"""
rules.py - Win detection for DropFour

Two strategies are provided:

1. ``find_winner`` rescans the whole grid. Every occupied cell is treated as
   the start of a run and walked forward along the four direction vectors.
   Walking one way is enough because a run is always found from whichever
   member the row-major scan reaches first.
2. ``check_win_at`` only inspects the lines through one cell (the token just
   placed), extending both ways. In normal play the two always agree, since
   the last token is the only one that can complete a new run.
"""

from typing import List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.utils import CONNECT_N, DIRECTION_VECTORS, EMPTY, Player, is_valid_position

Coord = Tuple[int, int]


def min_moves_for_win(connect_n: int = CONNECT_N) -> int:
    """
    Fewest tokens that must be on the board before anyone can have won.

    The first player needs connect_n tokens of their own, and the second
    player has moved once between each of them.
    """
    return 2 * connect_n - 1


def find_winner(grid: np.ndarray, move_count: Optional[int] = None,
                connect_n: int = CONNECT_N) -> Optional[Player]:
    """
    Scan the full grid for a run of ``connect_n`` same-owner tokens.

    Args:
        grid: The board grid, row 0 at the top
        move_count: Tokens placed so far; below min_moves_for_win the scan
            is skipped. None always scans.
        connect_n: Run length that wins

    Returns:
        Owner of the first run found in row-major order, or None
    """
    if move_count is not None and move_count < min_moves_for_win(connect_n):
        return None

    rows, cols = grid.shape
    for row in range(rows):
        for col in range(cols):
            value = grid[row, col]
            if value == EMPTY:
                continue

            for dr, dc in DIRECTION_VECTORS.values():
                count = 1
                r, c = row + dr, col + dc
                while (count < connect_n and 0 <= r < rows and 0 <= c < cols
                       and grid[r, c] == value):
                    count += 1
                    r += dr
                    c += dc

                if count >= connect_n:
                    debug.trace(f"Run of {count} starting at ({row}, {col}) "
                                f"along ({dr}, {dc})", "rules")
                    return Player(int(value))

    return None


def winning_line_at(grid: np.ndarray, row: int, col: int,
                    connect_n: int = CONNECT_N) -> List[Coord]:
    """
    Get the run through (row, col) that is at least ``connect_n`` long.

    Returns:
        The run's coordinates ordered along its direction, or an empty list
    """
    value = grid[row, col]
    if value == EMPTY:
        return []

    for dr, dc in DIRECTION_VECTORS.values():
        backward = []
        r, c = row - dr, col - dc
        while is_valid_position(grid, r, c) and grid[r, c] == value:
            backward.append((r, c))
            r -= dr
            c -= dc

        forward = []
        r, c = row + dr, col + dc
        while is_valid_position(grid, r, c) and grid[r, c] == value:
            forward.append((r, c))
            r += dr
            c += dc

        line = backward[::-1] + [(row, col)] + forward
        if len(line) >= connect_n:
            return line

    return []


def check_win_at(grid: np.ndarray, row: int, col: int,
                 connect_n: int = CONNECT_N) -> Optional[Player]:
    """Owner of (row, col) if a winning run passes through it, else None."""
    if winning_line_at(grid, row, col, connect_n):
        return Player(int(grid[row, col]))
    return None
