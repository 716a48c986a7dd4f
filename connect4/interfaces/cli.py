"""
cli.py - Command-line interface for Connect Four

This module provides a terminal front end for two players sharing one
keyboard. It maps command-line flags onto GameSettings and feeds typed
columns into a GameController.
"""

import argparse
import sys
from typing import Callable, List, Optional

from connect4.debug import debug, DebugLevel, parse_level
from connect4.game.errors import InvalidSettingsError
from connect4.interfaces.controller import GameController, GameSettings
from connect4.utils import (DEFAULT_HEIGHT, DEFAULT_PLAYER_COLORS, DEFAULT_WIDTH,
                            PLAYER_COLORS, RESTART_DELAY)

QUIT = -1
RESTART = -2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
    play_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                             help=f'Number of columns (default: {DEFAULT_WIDTH})')
    play_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                             help=f'Number of rows (default: {DEFAULT_HEIGHT})')
    play_parser.add_argument('--player1-color', choices=sorted(PLAYER_COLORS),
                             default=DEFAULT_PLAYER_COLORS[0], help='Color of player 1')
    play_parser.add_argument('--player2-color', choices=sorted(PLAYER_COLORS),
                             default=DEFAULT_PLAYER_COLORS[1], help='Color of player 2')
    play_parser.add_argument('--restart-delay', type=float, default=RESTART_DELAY,
                             help='Seconds to wait before the next game starts')
    play_parser.add_argument('--no-restart', action='store_true',
                             help='Exit after one game instead of starting another')
    play_parser.add_argument('--no-color', action='store_true',
                             help='Do not color pieces with ANSI codes')

    debug_group = play_parser.add_mutually_exclusive_group()
    debug_group.add_argument('--debug', action='store_true', help='Enable debug mode')
    debug_group.add_argument('--debug-level', choices=[level.name.lower() for level in DebugLevel],
                             help='Set the debug level')
    play_parser.add_argument('--log-file', help='Also write log messages to this file')

    return parser


class SimpleCLI:
    """Simple command-line interface for playing Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """Initialize the CLI."""
        self.args = None
        self.controller: Optional[GameController] = None
        self._input = input_func
        self._output = output

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.configure(level=parse_level(self.args.debug_level))

        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def build_settings(self) -> GameSettings:
        return GameSettings(
            width=self.args.width,
            height=self.args.height,
            player1_color=self.args.player1_color,
            player2_color=self.args.player2_color,
            restart_delay=self.args.restart_delay,
            auto_restart=not self.args.no_restart,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            try:
                settings = self.build_settings()
            except InvalidSettingsError as e:
                self._output(f"Error: {e}")
                return 2
            self.play_game(settings)
            return 0

        self._output("Please specify a command. Use --help for options.")
        return 1

    def play_game(self, settings: GameSettings) -> None:
        """Play games until the user quits or, with --no-restart, one game ends."""
        self.controller = GameController(settings, output=self._output,
                                         use_color=not self.args.no_color)
        self._output("Starting a new Connect Four game!")
        self._output(f"Enter column number (0-{settings.width - 1}) to make a move.")
        self._output("Other commands: 'q' to quit, 'r' to restart.")
        self.controller.start_game()

        while self.controller.play_enabled:
            move = self.get_move()

            if move is None:
                continue
            elif move == QUIT:
                self._output("Quitting game.")
                return
            elif move == RESTART:
                self._output("Game restarted.")
                self.controller.start_game()
                continue

            if self.controller.handle_column(move) is None and self.controller.play_enabled:
                self._output(f"Column {move} cannot take another piece.")

    def get_move(self) -> Optional[int]:
        """
        Read one command from the player to move.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not understood
        """
        engine = self.controller.engine
        prompt = f"Player {engine.current_player.value} ({engine.current_player}), your move: "
        try:
            user_input = self._input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            self._output("Invalid input. Please enter a column number or command.")
            return None

        if not (0 <= move < engine.width):
            self._output(f"Column must be between 0 and {engine.width - 1}.")
            return None
        return move


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
