#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Usage:
    python run.py play [--width N] [--height N] [--player1-color C]
                       [--player2-color C] [--restart-delay S] [--no-restart]
"""

import sys

from connect4.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
