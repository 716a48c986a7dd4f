"""
Tests for the terminal interface, driven with scripted input.
"""

import unittest

from connect4.interfaces.cli import SimpleCLI, build_parser, main
from connect4.utils import GameStatus


def scripted(lines):
    """Return an input function that replays lines, then signals end of input."""
    remaining = list(lines)

    def fake_input(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


class TestArgumentParsing(unittest.TestCase):

    def test_play_defaults(self):
        args = build_parser().parse_args(['play'])
        self.assertEqual((args.width, args.height), (7, 6))
        self.assertEqual((args.player1_color, args.player2_color), ('red', 'yellow'))
        self.assertEqual(args.restart_delay, 5.0)
        self.assertFalse(args.no_restart)

    def test_settings_from_flags(self):
        cli = SimpleCLI()
        cli.parse_args(['play', '--width', '5', '--height', '4',
                        '--player1-color', 'green', '--restart-delay', '0', '--no-restart'])
        settings = cli.build_settings()
        self.assertEqual((settings.width, settings.height), (5, 4))
        self.assertEqual(settings.player1_color, 'green')
        self.assertEqual(settings.restart_delay, 0.0)
        self.assertFalse(settings.auto_restart)

    def test_unknown_color_is_rejected(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(['play', '--player2-color', 'mauve'])


class TestPlay(unittest.TestCase):

    def run_cli(self, argv, lines):
        self.output = []
        self.cli = SimpleCLI(input_func=scripted(lines), output=self.output.append)
        return self.cli.run(argv)

    def test_game_to_a_win(self):
        code = self.run_cli(['play', '--no-restart', '--no-color'],
                            ['0', '1', '0', '1', '0', '1', '0'])
        self.assertEqual(code, 0)
        self.assertIn("Player 1 won!", self.output)
        self.assertFalse(self.cli.controller.play_enabled)
        self.assertEqual(self.cli.controller.engine.status, GameStatus.WON)

    def test_quit(self):
        code = self.run_cli(['play', '--no-color'], ['3', 'q'])
        self.assertEqual(code, 0)
        self.assertEqual(self.output[-1], "Quitting game.")
        self.assertEqual(self.cli.controller.engine.move_count, 1)

    def test_end_of_input_quits(self):
        self.run_cli(['play', '--no-color'], [])
        self.assertEqual(self.output[-1], "Quitting game.")

    def test_restart(self):
        self.run_cli(['play', '--no-color'], ['0', '1', 'r', 'q'])
        self.assertIn("Game restarted.", self.output)
        self.assertEqual(self.cli.controller.engine.move_count, 0)

    def test_bad_input_is_reported(self):
        self.run_cli(['play', '--no-color', '--width', '4'], ['abc', '9', 'q'])
        self.assertIn("Invalid input. Please enter a column number or command.", self.output)
        self.assertIn("Column must be between 0 and 3.", self.output)

    def test_full_column_is_reported(self):
        self.run_cli(['play', '--no-color', '--height', '1', '--width', '5'], ['2', '2', 'q'])
        self.assertIn("Column 2 cannot take another piece.", self.output)

    def test_invalid_dimensions(self):
        code = self.run_cli(['play', '--width', '0'], [])
        self.assertEqual(code, 2)
        self.assertTrue(self.output[-1].startswith("Error:"))

    def test_missing_command(self):
        code = self.run_cli([], [])
        self.assertEqual(code, 1)

    def test_main_returns_exit_code(self):
        self.assertEqual(main([]), 1)


if __name__ == '__main__':
    unittest.main()
