"""WeChess — a two-player chess board with captured material and clocks."""

__version__ = "0.1.0"
