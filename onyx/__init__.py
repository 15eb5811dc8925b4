"""Minimax agent that picks moves in the Splendor board game."""

__version__ = "0.1.0"