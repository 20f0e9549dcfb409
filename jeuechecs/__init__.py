"""A two-player chess board: piece moves, game rules and a Tkinter window."""

__version__ = "0.1.0"