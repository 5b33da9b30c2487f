"""
errors.py - Move rejection errors raised by the engine

All of these leave the game untouched; the caller decides whether to ask
for another column.
"""


class MoveError(Exception):
    """Base class for a rejected move."""


class GameFinishedError(MoveError):
    def __init__(self):
        super().__init__("game is already finished")


class InvalidColumnError(MoveError):
    def __init__(self, column, cols: int):
        self.column = column
        self.cols = cols
        # Players type 1-based columns, so the message speaks in those terms
        super().__init__(f"column must be between 1 and {cols}")


class ColumnFullError(MoveError):
    def __init__(self, column: int):
        self.column = column
        super().__init__("column is full")
