"""
controller.py - Presentation glue between a user interface and GameEngine

The controller turns game settings into an engine, forwards the columns a
user picks, renders the board after every accepted move and, once a game is
over, shows the result and starts the next game after a pause.
"""

import time
from typing import Callable, Optional

from connect4.debug import debug
from connect4.game.engine import GameEngine, MoveResult
from connect4.game.errors import InvalidDimensionsError, InvalidSettingsError, MoveError
from connect4.utils import (ANSI_RESET, DEFAULT_HEIGHT, DEFAULT_PLAYER_COLORS, DEFAULT_WIDTH,
                            PLAYER_COLORS, RESTART_DELAY, MoveOutcome, Player, player_color)

START_LABEL = "Start Game"
RESTART_LABEL = "Restart Game"


def _to_int(name: str, value) -> int:
    if isinstance(value, bool):
        raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidSettingsError(f"{name} must be an integer, got {value!r}") from None
    if isinstance(value, float) and number != value:
        raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")
    return number


class GameSettings:
    """
    Settings for one game: board size, player colors and the restart pause.

    Width and height may be given as numeric strings, the way a settings
    form delivers them.
    """

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT,
                 player1_color: str = DEFAULT_PLAYER_COLORS[0],
                 player2_color: str = DEFAULT_PLAYER_COLORS[1],
                 restart_delay: float = RESTART_DELAY,
                 auto_restart: bool = True):
        self.width = _to_int("width", width)
        self.height = _to_int("height", height)
        if self.width < 1 or self.height < 1:
            raise InvalidSettingsError(
                f"Board dimensions must be >= 1, got {self.width}x{self.height}")

        for color in (player1_color, player2_color):
            if player_color(color) is None:
                raise InvalidSettingsError(
                    f"Unknown color {color!r}; choose from {', '.join(sorted(PLAYER_COLORS))}")
        self.player1_color = player1_color.strip().lower()
        self.player2_color = player2_color.strip().lower()

        try:
            self.restart_delay = float(restart_delay)
        except (TypeError, ValueError):
            raise InvalidSettingsError(f"restart_delay must be a number, got {restart_delay!r}") from None
        if self.restart_delay < 0:
            raise InvalidSettingsError("restart_delay must not be negative")

        self.auto_restart = bool(auto_restart)

    def color_for(self, player: Player) -> str:
        return self.player1_color if player == Player.ONE else self.player2_color

    def __repr__(self) -> str:
        return (f"GameSettings(width={self.width}, height={self.height}, "
                f"player1_color={self.player1_color!r}, player2_color={self.player2_color!r}, "
                f"restart_delay={self.restart_delay}, auto_restart={self.auto_restart})")


class GameController:
    """
    Drives games on behalf of a user interface.

    Input is serialized: each column is handled to completion before the
    next one, and columns are ignored while no game is accepting moves.
    """

    def __init__(self, settings: Optional[GameSettings] = None,
                 output: Callable[[str], None] = print,
                 sleep: Callable[[float], None] = time.sleep,
                 use_color: bool = True):
        """
        Args:
            settings: Settings for the games to play (defaults if None)
            output: Receives every rendered board and message
            sleep: Used to wait before restarting a finished game
            use_color: Color pieces with ANSI escape codes
        """
        self.settings = settings or GameSettings()
        self.engine: Optional[GameEngine] = None
        self.play_enabled = False
        self.button_label = START_LABEL
        self.last_message: Optional[str] = None
        self.games_finished = 0
        self._output = output
        self._sleep = sleep
        self._use_color = use_color

    def start_game(self, settings: Optional[GameSettings] = None) -> GameEngine:
        """
        Start a new game, replacing any game in progress.

        Args:
            settings: New settings to use; the current ones are kept if None

        Returns:
            The engine of the new game
        """
        if settings is not None:
            self.settings = settings

        try:
            self.engine = GameEngine(self.settings.width, self.settings.height)
        except InvalidDimensionsError as e:
            raise InvalidSettingsError(str(e)) from e

        debug.debug(f"Starting new game with {self.settings!r}", "controller")
        self.play_enabled = True
        self.button_label = START_LABEL
        self.last_message = None
        self._output(self.render())
        return self.engine

    def handle_column(self, col: int) -> Optional[MoveResult]:
        """
        Play a column chosen by the user.

        Returns:
            The engine's MoveResult, or None if the input was ignored
        """
        if self.engine is None or not self.play_enabled:
            debug.debug(f"Ignoring column {col}: no game accepting moves", "controller")
            return None

        try:
            result = self.engine.apply_move(col)
        except MoveError as e:
            debug.debug(f"Ignoring column {col}: {e}", "controller")
            return None

        self.button_label = RESTART_LABEL
        self._output(self.render())

        if result.outcome == MoveOutcome.WIN:
            self.end_game(f"Player {result.player.value} won!")
        elif result.outcome == MoveOutcome.TIE:
            self.end_game("Tie!")

        return result

    def end_game(self, message: str):
        """Disable play, show the result and, if enabled, restart after the delay."""
        self.play_enabled = False
        self.last_message = message
        self.games_finished += 1
        self._output(message)

        if self.settings.auto_restart:
            debug.debug(f"Restarting in {self.settings.restart_delay} seconds", "controller")
            self._sleep(self.settings.restart_delay)
            self.start_game()

    def _symbols(self):
        symbols = {Player.EMPTY.value: "."}
        for player in (Player.ONE, Player.TWO):
            text = str(player)
            if self._use_color:
                ansi = player_color(self.settings.color_for(player))[1]
                text = f"{ansi}{text}{ANSI_RESET}"
            symbols[player.value] = text
        return symbols

    def render(self) -> str:
        """Render the current board, or an empty string before the first game."""
        if self.engine is None:
            return ""
        return self.engine.render(self._symbols())
