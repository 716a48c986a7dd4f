"""
connect4.interfaces - User interfaces for Connect Four

This package contains the controller that connects a user interface to the
game engine, and the terminal interface built on it.
"""

# Don't import anything here to avoid circular imports
__all__ = []
