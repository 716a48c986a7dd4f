"""
connect4.game - Core game mechanics for Connect Four

This package contains the grid representation, the game engine with its
move and win/tie rules, the engine's exceptions and a Gymnasium wrapper.
"""

from connect4.game.board import Board
from connect4.game.engine import GameEngine, MoveResult
from connect4.game.errors import (Connect4Error, InvalidDimensionsError, InvalidSettingsError,
                                  MoveError, InvalidColumnError, ColumnFullError,
                                  InvalidStateError)
from connect4.game.rules import ConnectFourEnv

__all__ = ['Board', 'GameEngine', 'MoveResult', 'ConnectFourEnv',
           'Connect4Error', 'InvalidDimensionsError', 'InvalidSettingsError',
           'MoveError', 'InvalidColumnError', 'ColumnFullError', 'InvalidStateError']
