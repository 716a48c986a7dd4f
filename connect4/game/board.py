"""
board.py - Grid representation for Connect Four

This module implements the Board class, which holds the cells of a
width x height grid and answers the questions the engine asks about it:
where a piece dropped into a column lands, whether a player has four in a
row, and whether every cell is filled. The Board knows nothing about turns
or game status; that lives in GameEngine.
"""

import numbers
from typing import List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.game.errors import InvalidDimensionsError
from connect4.utils import (CONNECT_N, DIRECTION_VECTORS, Player,
                            is_valid_position, render_board_ascii)

Position = Tuple[int, int]


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_dimension(value) -> bool:
    return _is_integer(value) and value >= 1


class Board:
    """
    A fixed-size Connect Four grid.

    Cells are stored in a numpy array indexed [row, col], row 0 being the
    top of the board. Each cell holds Player.EMPTY.value or the value of the
    player occupying it.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty board.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            InvalidDimensionsError: If either dimension is not an integer >= 1
        """
        if not (_is_dimension(width) and _is_dimension(height)):
            raise InvalidDimensionsError(width, height)

        self._width = int(width)
        self._height = int(height)
        debug.debug(f"Initializing {self._width}x{self._height} board", "board")
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self):
        """Empty every cell."""
        self._grid = np.full((self._height, self._width), Player.EMPTY.value, dtype=int)

    def in_bounds(self, row: int, col: int) -> bool:
        return is_valid_position(row, col, self._height, self._width)

    def is_valid_column(self, col) -> bool:
        """True if col is an integer in [0, width)."""
        return _is_integer(col) and 0 <= col < self._width

    def _check_position(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside a {self._height}x{self._width} board")

    def get_cell(self, row: int, col: int) -> Player:
        """
        Read one cell.

        Raises:
            IndexError: If (row, col) is off the board; negative indices do not wrap
        """
        self._check_position(row, col)
        return Player(int(self._grid[row, col]))

    def set_cell(self, row: int, col: int, player: Player):
        """Write one cell. Bounds are checked the same way as get_cell."""
        self._check_position(row, col)
        self._grid[row, col] = player.value

    def find_drop_row(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would land in.

        Args:
            col: Column index

        Returns:
            The lowest empty row, or None if the column is full or out of range
        """
        if not self.is_valid_column(col):
            return None

        col = int(col)
        for row in range(self._height - 1, -1, -1):
            if self._grid[row, col] == Player.EMPTY.value:
                return row
        return None

    def _run_from(self, row: int, col: int, dr: int, dc: int) -> List[Position]:
        return [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]

    def find_winning_run(self, player: Player) -> List[Position]:
        """
        Scan the whole board for a run of four belonging to a player.

        Every cell is tried as the start of a run in each of the four
        directions; the first run that is fully on the board and owned by
        the player is returned.

        Args:
            player: The player to check for

        Returns:
            The (row, col) cells of the run, or an empty list
        """
        if player == Player.EMPTY:
            return []

        value = player.value
        for row in range(self._height):
            for col in range(self._width):
                if self._grid[row, col] != value:
                    continue
                for dr, dc in DIRECTION_VECTORS.values():
                    run = self._run_from(row, col, dr, dc)
                    if all(self.in_bounds(r, c) and self._grid[r, c] == value
                           for r, c in run):
                        return run
        return []

    def check_win(self, player: Player) -> bool:
        """True if the player has four in a row anywhere on the board."""
        return bool(self.find_winning_run(player))

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array of cell values, shape (height, width)
        """
        return self._grid.copy()

    def render(self, symbols=None) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self._grid, symbols)

    def __str__(self) -> str:
        return self.render()
