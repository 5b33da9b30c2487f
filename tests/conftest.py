"""Shared fixtures and move sequences for the DropFour test suite."""

import pytest

from dropfour.debug import DebugLevel, debug

# First: (5,0) (5,1) (5,2) (5,3); Second stacks in column 6
HORIZONTAL_WIN = [0, 6, 1, 6, 2, 6, 3]

# First stacks column 0, Second column 1
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]

# First: (5,0) (4,1) (3,2) (2,3)
DIAGONAL_UP_WIN = [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3]

# Mirror image of DIAGONAL_UP_WIN; First: (2,3) (3,4) (4,5) (5,6)
DIAGONAL_DOWN_WIN = [6 - col for col in DIAGONAL_UP_WIN]

# Fills all 42 cells. Columns end up (bottom-up) as FSFSFS or SFSFSF in the
# order A A B B A A B, which leaves no run longer than two anywhere.
DRAW_SEQUENCE = [0, 2, 2, 0] * 3 + [1, 3, 3, 1] * 3 + [4, 6, 6, 4] * 3 + [5] * 6


def play(game, columns):
    """Apply each column in turn."""
    for column in columns:
        game.apply_move(column)
    return game


@pytest.fixture(autouse=True)
def restore_debug():
    """Keep logging changes made by one test from leaking into the next."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
