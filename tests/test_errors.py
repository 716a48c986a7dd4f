"""
Tests for the exception hierarchy raised by the engine and the settings.
"""

import unittest

from connect4.game.errors import (ColumnFullError, Connect4Error, InvalidColumnError,
                                  InvalidDimensionsError, InvalidSettingsError,
                                  InvalidStateError, MoveError)
from connect4.utils import GameStatus


class TestErrorHierarchy(unittest.TestCase):

    def test_move_errors(self):
        errors = [InvalidColumnError(9, 7), ColumnFullError(3),
                  InvalidStateError(2, GameStatus.WON)]
        for error in errors:
            self.assertIsInstance(error, MoveError)
            self.assertIsInstance(error, Connect4Error)
        self.assertEqual([error.column for error in errors], [9, 3, 2])

    def test_invalid_column_is_an_index_error(self):
        error = InvalidColumnError(-1, 7)
        self.assertIsInstance(error, IndexError)
        self.assertEqual(error.width, 7)
        self.assertEqual(str(error), "Column -1 is out of range 0..6")

    def test_column_full_message(self):
        self.assertEqual(str(ColumnFullError(4)), "Column 4 is full")

    def test_invalid_state_keeps_status(self):
        error = InvalidStateError(1, GameStatus.TIED)
        self.assertIs(error.status, GameStatus.TIED)
        self.assertIn("TIED", str(error))

    def test_configuration_errors_are_value_errors(self):
        error = InvalidDimensionsError(0, 6)
        self.assertIsInstance(error, ValueError)
        self.assertEqual((error.width, error.height), (0, 6))
        self.assertIsInstance(InvalidSettingsError("bad"), ValueError)
        self.assertNotIsInstance(error, MoveError)


if __name__ == '__main__':
    unittest.main()
