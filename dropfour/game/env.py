"""
env.py - Gymnasium environment over the DropFour engine

Each step plays one column for whichever side is to move, so an external
driver controls both players. Rewards are from the point of view of the side
that just moved.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from dropfour.debug import debug
from dropfour.game.engine import GameState
from dropfour.game.errors import MoveError
from dropfour.utils import ROWS, COLS, CONNECT_N, Outcome


class DropFourEnv(gym.Env):
    """
    DropFour environment following the Gymnasium interface.

    A rejected move (full column, bad index) leaves the game as it was and
    ends the episode as truncated with ``reward_invalid_move``.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None, rows: int = ROWS,
                 cols: int = COLS, connect_n: int = CONNECT_N):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing DropFourEnv", "env")
        self.rows = rows
        self.cols = cols
        self.connect_n = connect_n
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(low=0, high=2, shape=(rows, cols), dtype=np.int8)

        self.game = GameState(rows, cols, connect_n, incremental=True)

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.game = GameState(self.rows, self.cols, self.connect_n, incremental=True)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        try:
            self.game.apply_move(action)
        except MoveError as e:
            debug.warning(f"Invalid action {action!r}: {e}", "env")
            info = self._get_info()
            info['error'] = str(e)
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = self.game.is_finished
        if self.game.outcome == Outcome.WON:
            reward = self.reward_win
        elif self.game.outcome == Outcome.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {self.game.outcome.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.game.get_state()

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.game.valid_moves()
        winner = self.game.winner

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.current_player.value,
            'outcome': self.game.outcome.name,
            'winner': winner.value if winner is not None else None,
            'move_count': self.game.move_count,
            'winning_line': self.game.winning_line(),
            'last_move': self.game.last_move,
        }
