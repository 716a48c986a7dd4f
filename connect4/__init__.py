"""
connect4 - Connect Four game implementation

This package provides a Connect Four game engine for boards of any size,
a terminal controller that plays games with automatic restarts, and a
Gymnasium environment for driving games programmatically.
"""

# Version number
__version__ = '0.2.0'
