"""
rules.py - Gymnasium environment for Connect Four

This module wraps a GameEngine in the Gymnasium interface so that scripts
and tests can drive games programmatically with any board size. Both players
act through the same step() call; rewards are given from the point of view
of the player who just moved.
"""

from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connect4.debug import debug
from connect4.game.engine import GameEngine
from connect4.game.errors import InvalidSettingsError, MoveError
from connect4.utils import (DEFAULT_HEIGHT, DEFAULT_PLAYER_COLORS, DEFAULT_WIDTH,
                            MoveOutcome, Player, player_color)

CELL_PIXELS = 50
PIECE_RADIUS = 20
BOARD_RGB = (0, 0, 128)  # Dark blue
EMPTY_RGB = (0, 0, 0)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the (height, width) grid of cell values; actions are
    column indices.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 render_mode: Optional[str] = None,
                 player_colors: Sequence[str] = DEFAULT_PLAYER_COLORS):
        """
        Initialize the Connect Four environment.

        Args:
            width: Number of columns
            height: Number of rows
            render_mode: Mode for rendering the environment
            player_colors: Color names for Player ONE and Player TWO
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise InvalidSettingsError(f"Unknown render mode: {render_mode!r}")

        self.engine = GameEngine(width, height)
        self.render_mode = render_mode
        self._piece_rgb = self._resolve_colors(player_colors)

        self.action_space = spaces.Discrete(self.engine.width)
        self.observation_space = spaces.Box(
            low=Player.EMPTY.value, high=Player.TWO.value,
            shape=(self.engine.height, self.engine.width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage faster solutions

    @staticmethod
    def _resolve_colors(player_colors: Sequence[str]) -> Dict[int, Tuple[int, int, int]]:
        if len(player_colors) != 2:
            raise InvalidSettingsError("Exactly two player colors are required")

        rgb = {}
        for player, name in zip((Player.ONE, Player.TWO), player_colors):
            color = player_color(name)
            if color is None:
                raise InvalidSettingsError(f"Unknown color: {name!r}")
            rgb[player.value] = color[0]
        return rgb

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Args:
            seed: Random seed for reproducibility
            options: Additional options for reset

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step in the environment by making a move.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        try:
            result = self.engine.apply_move(int(action))
        except MoveError as e:
            debug.warning(f"Invalid action: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if result.outcome == MoveOutcome.WIN:
            debug.info(f"Game over: Player {result.player.name} wins", "env")
            reward = self.reward_win
            terminated = True
        elif result.outcome == MoveOutcome.TIE:
            debug.info("Game over: Tie", "env")
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            Rendered frame depending on render_mode
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self.engine.render()

        if self.render_mode == "human":
            print(self.engine.render())
            return None

        return self._render_rgb()

    def _render_rgb(self) -> np.ndarray:
        height, width = self.engine.height, self.engine.width
        frame = np.zeros((height * CELL_PIXELS, width * CELL_PIXELS, 3), dtype=np.uint8)
        frame[:, :] = BOARD_RGB

        # Disc mask for one cell, reused for every piece
        offsets = np.arange(CELL_PIXELS) - CELL_PIXELS // 2
        disc = (offsets[:, None] ** 2 + offsets[None, :] ** 2) <= PIECE_RADIUS ** 2

        grid = self.engine.get_state()
        for row in range(height):
            for col in range(width):
                rgb = self._piece_rgb.get(int(grid[row, col]), EMPTY_RGB)
                cell = frame[row * CELL_PIXELS:(row + 1) * CELL_PIXELS,
                             col * CELL_PIXELS:(col + 1) * CELL_PIXELS]
                cell[disc] = rgb

        return frame

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        """
        Get additional information about the current state.

        Returns:
            Dictionary with info about the current state
        """
        valid_moves = self.engine.get_valid_moves()
        winner = self.engine.winner

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player.value,
            'status': self.engine.status.name,
            'winner': winner.value if winner is not None else None,
            'moves_made': self.engine.move_count,
            'winning_line': self.engine.get_winning_line(),
            'last_move': self.engine.last_move
        }

    def close(self):
        """Nothing to release; present for the Gymnasium interface."""
