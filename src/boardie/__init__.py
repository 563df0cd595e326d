"""Boardie — an interactive click-to-move chessboard."""

__version__ = "0.1.0"
