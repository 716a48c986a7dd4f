"""
engine.py - Game state management for Connect Four

This module implements GameEngine, which owns a Board plus the turn and
status of a single game. All mutation goes through apply_move and reset;
everything else is a read-only query.
"""

from typing import List, NamedTuple, Optional

import numpy as np

from connect4.debug import debug
from connect4.game.board import Board, Position
from connect4.game.errors import ColumnFullError, InvalidColumnError, InvalidStateError
from connect4.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameStatus, MoveOutcome, Player


class MoveResult(NamedTuple):
    """
    Result of an accepted move.

    player is the player to move next for CONTINUE, the winner for WIN and
    None for TIE.
    """
    row: int
    column: int
    outcome: MoveOutcome
    player: Optional[Player]


class GameEngine:
    """
    Rules and state of one Connect Four game.

    Player ONE always moves first. A move drops the current player's piece
    into a column; the game ends when that player has four in a row or the
    board is full.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        """
        Initialize a new game.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            InvalidDimensionsError: If either dimension is not an integer >= 1
        """
        self._board = Board(width, height)
        debug.debug(f"Initializing GameEngine ({self._board.width}x{self._board.height})", "engine")
        self.reset()

    def reset(self):
        """Empty the board and return to NOT_STARTED with Player ONE to move."""
        debug.debug("Resetting game", "engine")
        self._board.clear()
        self._status = GameStatus.NOT_STARTED
        self._current_player = Player.ONE
        self._winner: Optional[Player] = None
        self._winning_line: List[Position] = []
        self._last_move: Optional[Position] = None
        self._move_count = 0

    # --- Read-only accessors ---

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def last_move(self) -> Optional[Position]:
        return self._last_move

    @property
    def move_count(self) -> int:
        return self._move_count

    def get_state(self) -> np.ndarray:
        """Copy of the grid; changing it does not affect the game."""
        return self._board.get_state()

    def get_cell(self, row: int, col: int) -> Player:
        return self._board.get_cell(row, col)

    def is_game_over(self) -> bool:
        return self._status.is_game_over()

    def get_winning_line(self) -> List[Position]:
        """Cells of the winning run, or an empty list unless the game was won."""
        return list(self._winning_line)

    def render(self, symbols=None) -> str:
        return self._board.render(symbols)

    def __str__(self) -> str:
        return self.render()

    # --- Rules ---

    def find_drop_row(self, col: int) -> Optional[int]:
        """
        Row a piece dropped into col would land in.

        Returns:
            The lowest empty row, or None if the column is full or out of range
        """
        return self._board.find_drop_row(col)

    def is_valid_move(self, col: int) -> bool:
        """
        Check if a move is valid.

        Args:
            col: The column to place a piece (0-indexed)

        Returns:
            True if apply_move(col) would be accepted
        """
        if self.is_game_over():
            return False
        return self.find_drop_row(col) is not None

    def get_valid_moves(self) -> List[int]:
        """Columns that currently accept a piece."""
        if self.is_game_over():
            return []
        return [col for col in range(self.width) if self.find_drop_row(col) is not None]

    def check_win(self, player: Player) -> bool:
        """True if player has four in a row anywhere on the board."""
        return self._board.check_win(player)

    def apply_move(self, col: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            col: The column to place a piece (0-indexed)

        Returns:
            MoveResult describing where the piece landed and what happened

        Raises:
            InvalidStateError: If the game is already won or tied
            InvalidColumnError: If col is not an integer in [0, width)
            ColumnFullError: If the column has no empty row
        """
        player = self._current_player
        debug.debug(f"Attempting move in column {col} for player {player.name}", "engine")

        if self.is_game_over():
            debug.debug(f"Rejected move in column {col}: game is over ({self._status.name})", "engine")
            raise InvalidStateError(col, self._status)

        if not self._board.is_valid_column(col):
            debug.debug(f"Rejected move: column {col!r} out of bounds", "engine")
            raise InvalidColumnError(col, self.width)

        col = int(col)
        row = self.find_drop_row(col)
        if row is None:
            debug.debug(f"Rejected move: column {col} is full", "engine")
            raise ColumnFullError(col)

        if self._status == GameStatus.NOT_STARTED:
            self._status = GameStatus.IN_PROGRESS

        debug.trace(f"Placing piece at position ({row}, {col})", "engine")
        self._board.set_cell(row, col, player)
        self._last_move = (row, col)
        self._move_count += 1

        debug.start_timer("win_check")
        winning_line = self._board.find_winning_run(player)
        debug.end_timer("win_check", "engine")

        if winning_line:
            self._status = GameStatus.WON
            self._winner = player
            self._winning_line = winning_line
            debug.debug(f"Player {player.name} wins after move at {self._last_move}", "engine")
            return MoveResult(row, col, MoveOutcome.WIN, player)

        if self._board.is_full():
            self._status = GameStatus.TIED
            debug.debug("Game ends in a tie", "engine")
            return MoveResult(row, col, MoveOutcome.TIE, None)

        self._current_player = player.other()
        debug.debug(f"Switching to player {self._current_player.name}", "engine")
        return MoveResult(row, col, MoveOutcome.CONTINUE, self._current_player)

