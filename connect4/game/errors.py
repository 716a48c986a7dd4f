"""
errors.py - Exceptions raised by the Connect Four game engine

Move rejections derive from MoveError; callers that only want to ignore a bad
click can catch that one class. The engine state is left untouched whenever
any of them is raised.
"""

from typing import Optional


class Connect4Error(Exception):
    """Base class for all Connect Four errors."""


class InvalidDimensionsError(Connect4Error, ValueError):
    """Raised when a board is created with non-positive or non-integer dimensions."""

    def __init__(self, width, height):
        super().__init__(
            f"Board dimensions must be integers >= 1, got width={width!r}, height={height!r}")
        self.width = width
        self.height = height


class InvalidSettingsError(Connect4Error, ValueError):
    """Raised when game settings cannot be turned into a playable game."""


class MoveError(Connect4Error):
    """Base class for a rejected move."""

    def __init__(self, message: str, column: Optional[int] = None):
        super().__init__(message)
        self.column = column


class InvalidColumnError(MoveError, IndexError):
    """The column lies outside [0, width)."""

    def __init__(self, column: int, width: int):
        super().__init__(f"Column {column} is out of range 0..{width - 1}", column)
        self.width = width


class ColumnFullError(MoveError):
    """The column has no empty row left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full", column)


class InvalidStateError(MoveError):
    """A move was attempted after the game reached a terminal state."""

    def __init__(self, column: int, status):
        super().__init__(f"Cannot play column {column}: game is over ({status.name})", column)
        self.status = status
