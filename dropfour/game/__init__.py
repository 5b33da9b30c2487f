"""
dropfour.game - Core game mechanics for DropFour

Board storage, move application, win detection and the Gymnasium wrapper.
"""

from dropfour.game.board import Board
from dropfour.game.engine import GameState, apply_move, new_game
from dropfour.game.env import DropFourEnv
from dropfour.game.errors import ColumnFullError, GameFinishedError, InvalidColumnError, MoveError

__all__ = [
    'Board', 'GameState', 'new_game', 'apply_move', 'DropFourEnv',
    'MoveError', 'GameFinishedError', 'InvalidColumnError', 'ColumnFullError',
]
