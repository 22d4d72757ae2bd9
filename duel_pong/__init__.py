"""
Duel Pong - deterministic simulation core of a two-player paddle game
"""

__version__ = "0.1.0"
