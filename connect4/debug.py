"""
debug.py - Debug and logging functionality for Connect Four

This module provides a process-wide debug manager on top of the standard
logging module. Messages carry an optional component name ("board",
"engine", "env", "controller", "cli") so output can be narrowed to the
parts of the game being investigated.
"""

import logging
import os
import sys
import time
from enum import Enum
from typing import List, Optional, Dict, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# Mapping to standard logging levels
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG - 5  # logging has no TRACE
}

# Environment variable read once when the singleton is created
LEVEL_ENV_VAR = "CONNECT4_DEBUG_LEVEL"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(level_str: str) -> Optional[DebugLevel]:
    """
    Convert a level name such as "debug" or "TRACE" to a DebugLevel.

    Returns:
        The matching level, or None if the name is unknown
    """
    try:
        return DebugLevel[level_str.strip().upper()]
    except (KeyError, AttributeError):
        return None


class DebugManager:
    """Manages debug and logging output for the Connect Four package."""

    def __init__(self, logger_name: str = "connect4",
                 level: DebugLevel = DebugLevel.INFO):
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._enabled_components: Set[str] = set()  # Empty set means all components
        self._logger = self._setup_logger(logger_name)
        self._performance_markers: Dict[str, float] = {}

    def _setup_logger(self, logger_name: str) -> logging.Logger:
        """Configure and return a logger instance."""
        logger = logging.getLogger(logger_name)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        # Re-creating a manager must not stack console handlers
        if not any(getattr(h, "_connect4_console", False) for h in logger.handlers):
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            console_handler._connect4_console = True
            logger.addHandler(console_handler)

        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: DebugLevel = None,
                  enabled: bool = None,
                  log_file: str = None,
                  components: List[str] = None):
        """
        Configure the debug manager settings.

        Args:
            level: Debug level to set
            enabled: Whether debugging is enabled
            log_file: Path to log file ("" to stop logging to a file)
            components: Components to log (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            self._log_file = log_file or None
            if self._log_file:
                file_handler = logging.FileHandler(self._log_file)
                file_handler.setFormatter(
                    logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def _should_log(self, level: DebugLevel, component: str = None) -> bool:
        """Determine if a message should be logged based on settings."""
        if not self._enabled or self._level == DebugLevel.NONE:
            return False

        if level.value > self._level.value:
            return False

        if component and self._enabled_components and component not in self._enabled_components:
            return False

        return True

    def log(self, level: DebugLevel, message: str, component: str = None):
        """
        Log a message at the specified level.

        Args:
            level: Debug level for the message
            message: The message to log
            component: Optional component name for filtering
        """
        if not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"

        if level == DebugLevel.TRACE:
            self._logger.log(LEVEL_MAP[DebugLevel.TRACE], f"TRACE: {message}")
        else:
            self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: str = None):
        """Log an error message."""
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        """Log a warning message."""
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        """Log an info message."""
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        """Log a debug message."""
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        """Log a trace message."""
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        """Start a timer for performance tracking."""
        self._performance_markers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: str = None) -> Optional[float]:
        """
        End a timer and log the elapsed time.

        Args:
            marker_name: Name of the marker to end
            component: Optional component name for the log entry

        Returns:
            Elapsed time in seconds, or None if marker not found
        """
        started = self._performance_markers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set debug level from a string (for command line arguments)."""
        level = parse_level(level_str)
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.debug(f"Debug level set to {level.name}")
        return True


def _initial_level() -> DebugLevel:
    return parse_level(os.environ.get(LEVEL_ENV_VAR, "")) or DebugLevel.INFO


# Create a singleton instance
debug = DebugManager(level=_initial_level())
