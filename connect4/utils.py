"""
utils.py - Constants, enumerations and helpers for Connect Four

This module provides the game defaults, the player and status enumerations,
the win-scan direction vectors and the ASCII board renderer shared by the
engine and the interfaces.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Game defaults
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win
RESTART_DELAY = 5.0  # Seconds between a finished game and the next one

DEFAULT_PLAYER_COLORS = ('red', 'yellow')

# Color name -> (RGB, ANSI foreground code)
PLAYER_COLORS: Dict[str, Tuple[Tuple[int, int, int], str]] = {
    'red': ((220, 30, 30), "\033[31m"),
    'green': ((30, 180, 60), "\033[32m"),
    'yellow': ((240, 210, 30), "\033[33m"),
    'blue': ((40, 80, 220), "\033[34m"),
    'magenta': ((200, 40, 200), "\033[35m"),
    'cyan': ((40, 200, 210), "\033[36m"),
    'white': ((240, 240, 240), "\033[37m"),
}
ANSI_RESET = "\033[0m"


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Lifecycle of a single game. WON and TIED are terminal."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self in (GameStatus.WON, GameStatus.TIED)


class MoveOutcome(Enum):
    """What a successful move did to the game."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row 0 is the top of the board
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1)
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def player_color(name: str) -> Optional[Tuple[Tuple[int, int, int], str]]:
    """Look up a color by name, case-insensitively."""
    return PLAYER_COLORS.get(str(name).strip().lower())


def render_board_ascii(grid: np.ndarray, symbols: Optional[Dict[int, str]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The board grid, indexed [row, col] with row 0 on top
        symbols: Optional mapping of cell value to the text drawn for it

    Returns:
        ASCII representation of the board
    """
    if symbols is None:
        symbols = {player.value: str(player) for player in Player}

    height, width = grid.shape
    border = "|" + "-" * (width * 2 - 1) + "|"
    result = [border]

    for row in range(height):
        cells = [symbols.get(int(grid[row, col]), "?") for col in range(width)]
        result.append("|" + " ".join(cells) + "|")

    result.append(border)
    # Column numbers wrap after 9 so the labels stay one character wide
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
