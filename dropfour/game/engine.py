"""
engine.py - Game state and move application for DropFour

GameState owns the board, the move counter, whose turn it is and the
outcome. ``apply_move`` is the only way any of those change; once a game is
won or drawn it accepts nothing further, and a restart means building a new
GameState.
"""

from typing import List, Optional, Tuple

import numpy as np

from dropfour.debug import debug
from dropfour.game.board import Board
from dropfour.game.errors import GameFinishedError, MoveError
from dropfour.game.rules import Coord, check_win_at, find_winner, winning_line_at
from dropfour.utils import ROWS, COLS, CONNECT_N, Outcome, Player


class GameState:
    """
    A single game from the empty board to a win or a draw.

    Args:
        rows: Board height
        cols: Board width
        connect_n: Run length that wins
        incremental: Check only the lines through the placed token instead of
            rescanning the whole board after every move
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 connect_n: int = CONNECT_N, incremental: bool = False):
        if connect_n < 1:
            raise ValueError(f"connect_n must be positive, got {connect_n}")
        if rows >= 1 and cols >= 1 and connect_n > max(rows, cols):
            raise ValueError(f"A run of {connect_n} does not fit on a {rows}x{cols} board")

        self.board = Board(rows, cols)
        self.connect_n = connect_n
        self.incremental = incremental

        self._move_count = 0
        self._current_player = Player.FIRST
        self._outcome = Outcome.UNDETERMINED
        self._winner: Optional[Player] = None
        self._moves_made: List[int] = []
        self._last_move: Optional[Coord] = None

        debug.debug(f"New {rows}x{cols} game, connect {connect_n}"
                    f"{' (incremental)' if incremental else ''}", "engine")

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winner(self) -> Optional[Player]:
        """The winning player; None while undetermined and for a draw."""
        return self._winner

    @property
    def is_finished(self) -> bool:
        return self._outcome.is_terminal()

    @property
    def is_draw(self) -> bool:
        return self._outcome == Outcome.DRAW

    @property
    def last_move(self) -> Optional[Coord]:
        return self._last_move

    @property
    def moves_made(self) -> List[int]:
        return list(self._moves_made)

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def apply_move(self, column) -> None:
        """
        Drop the current player's token into ``column`` (0-indexed).

        On a win the turn stays with the winner; on a full board with no
        winner the game is drawn; otherwise the turn passes to the opponent.

        Raises:
            GameFinishedError: the game is already won or drawn
            InvalidColumnError: column is not in [0, cols)
            ColumnFullError: column has no empty cell
        """
        debug.debug(f"Move {self._move_count + 1}: {self._current_player.name} "
                    f"plays column {column}", "engine")

        try:
            if self.is_finished:
                raise GameFinishedError()
            row, col = self.board.drop(column, self._current_player)
        except MoveError as e:
            debug.debug(f"Rejected column {column!r}: {e}", "engine")
            raise

        self._move_count += 1
        self._moves_made.append(col)
        self._last_move = (row, col)

        winner = self._detect_winner(row, col)
        if winner is not None:
            self._outcome = Outcome.WON
            self._winner = winner
            debug.info(f"{winner.name} wins on move {self._move_count} at ({row}, {col})", "engine")
        elif self._move_count == self.board.size:
            self._outcome = Outcome.DRAW
            debug.info(f"Draw after {self._move_count} moves", "engine")
        else:
            self._current_player = self._current_player.other()

    def _detect_winner(self, row: int, col: int) -> Optional[Player]:
        debug.start_timer("win_check")
        if self.incremental:
            winner = check_win_at(self.board.grid, row, col, self.connect_n)
        else:
            winner = find_winner(self.board.grid, self._move_count, self.connect_n)
        debug.end_timer("win_check", "rules")
        return winner

    def valid_moves(self) -> List[int]:
        """Columns that can still take a token; empty once the game is over."""
        if self.is_finished:
            return []
        return self.board.open_columns()

    def winning_line(self) -> List[Coord]:
        """Coordinates of the winning run, or an empty list if nobody has won."""
        if self._outcome != Outcome.WON:
            return []
        row, col = self._last_move
        return winning_line_at(self.board.grid, row, col, self.connect_n)

    def cell(self, row: int, col: int) -> Optional[Player]:
        return self.board.cell(row, col)

    def board_rows(self) -> Tuple[Tuple[Optional[Player], ...], ...]:
        """Board contents, top row first."""
        return self.board.to_rows()

    def get_state(self) -> np.ndarray:
        return self.board.get_state()

    def render(self) -> str:
        return self.board.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameState(rows={self.rows}, cols={self.cols}, "
                f"move_count={self._move_count}, outcome={self._outcome.name})")


def new_game(rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N,
             incremental: bool = False) -> GameState:
    """Build a game in its initial state: empty board, FIRST to move."""
    return GameState(rows, cols, connect_n, incremental)


def apply_move(state: GameState, column) -> None:
    """Apply a move to ``state``; see GameState.apply_move."""
    state.apply_move(column)
