"""
Tests for the Board grid: bounds checking, drop rows and the win scan.
"""

import unittest

from connect4.game.board import Board
from connect4.utils import Player


class TestBoardCells(unittest.TestCase):

    def setUp(self):
        self.board = Board(7, 6)

    def test_dimensions(self):
        self.assertEqual(self.board.width, 7)
        self.assertEqual(self.board.height, 6)

    def test_negative_indices_do_not_wrap(self):
        for row, col in [(-1, 0), (0, -1), (6, 0), (0, 7)]:
            with self.assertRaises(IndexError):
                self.board.get_cell(row, col)
            with self.assertRaises(IndexError):
                self.board.set_cell(row, col, Player.ONE)

    def test_set_and_get_cell(self):
        self.board.set_cell(5, 2, Player.TWO)
        self.assertEqual(self.board.get_cell(5, 2), Player.TWO)
        self.assertEqual(self.board.find_drop_row(2), 4)

    def test_is_full(self):
        board = Board(2, 1)
        self.assertFalse(board.is_full())
        board.set_cell(0, 0, Player.ONE)
        self.assertFalse(board.is_full())
        board.set_cell(0, 1, Player.TWO)
        self.assertTrue(board.is_full())

    def test_clear(self):
        self.board.set_cell(0, 0, Player.ONE)
        self.board.clear()
        self.assertEqual(self.board.get_cell(0, 0), Player.EMPTY)
        self.assertEqual(self.board.find_drop_row(0), 5)

    def test_valid_columns(self):
        board = Board(3, 1)
        self.assertTrue(board.is_valid_column(0))
        self.assertTrue(board.is_valid_column(2))
        for col in (-1, 3, 2.5, "1", True, None):
            self.assertFalse(board.is_valid_column(col))

    def test_drop_row_rejects_odd_columns(self):
        board = Board(3, 1)
        board.set_cell(0, 2, Player.ONE)
        self.assertIsNone(board.find_drop_row(-1))
        self.assertIsNone(board.find_drop_row(2))
        self.assertIsNone(board.find_drop_row(1.5))
        self.assertEqual(board.find_drop_row(0), 0)


class TestWinScan(unittest.TestCase):

    def setUp(self):
        self.board = Board(7, 6)

    def place(self, cells, player):
        for row, col in cells:
            self.board.set_cell(row, col, player)

    def test_horizontal(self):
        self.place([(3, 2), (3, 3), (3, 4), (3, 5)], Player.TWO)
        self.assertTrue(self.board.check_win(Player.TWO))
        self.assertFalse(self.board.check_win(Player.ONE))

    def test_vertical(self):
        self.place([(0, 6), (1, 6), (2, 6), (3, 6)], Player.ONE)
        self.assertEqual(self.board.find_winning_run(Player.ONE),
                         [(0, 6), (1, 6), (2, 6), (3, 6)])

    def test_diagonal_down_right(self):
        self.place([(0, 0), (1, 1), (2, 2), (3, 3)], Player.ONE)
        self.assertTrue(self.board.check_win(Player.ONE))

    def test_diagonal_down_left(self):
        self.place([(2, 6), (3, 5), (4, 4), (5, 3)], Player.TWO)
        self.assertEqual(self.board.find_winning_run(Player.TWO),
                         [(2, 6), (3, 5), (4, 4), (5, 3)])

    def test_three_in_a_row_is_not_a_win(self):
        self.place([(5, 0), (5, 1), (5, 2)], Player.ONE)
        self.assertFalse(self.board.check_win(Player.ONE))

    def test_broken_sequence_is_not_a_win(self):
        self.place([(5, 0), (5, 1), (5, 3), (5, 4)], Player.ONE)
        self.assertFalse(self.board.check_win(Player.ONE))

    def test_runs_do_not_wrap_around_edges(self):
        self.place([(4, 5), (4, 6), (5, 0), (5, 1)], Player.ONE)
        self.assertFalse(self.board.check_win(Player.ONE))

    def test_empty_never_wins(self):
        self.assertFalse(self.board.check_win(Player.EMPTY))
        self.assertEqual(self.board.find_winning_run(Player.EMPTY), [])

    def test_narrow_board_wins_vertically(self):
        board = Board(1, 4)
        for row in range(4):
            board.set_cell(row, 0, Player.ONE)
        self.assertTrue(board.check_win(Player.ONE))


class TestRender(unittest.TestCase):

    def test_render_layout(self):
        board = Board(2, 2)
        board.set_cell(1, 0, Player.ONE)
        board.set_cell(1, 1, Player.TWO)
        self.assertEqual(str(board).splitlines(),
                         ["|---|", "|   |", "|X O|", "|---|", "|0 1|"])

    def test_render_with_symbols(self):
        board = Board(3, 1)
        board.set_cell(0, 1, Player.ONE)
        rendered = board.render({0: ".", 1: "a", 2: "b"})
        self.assertIn("|. a .|", rendered)


if __name__ == '__main__':
    unittest.main()
